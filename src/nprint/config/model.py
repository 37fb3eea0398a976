# topmark:header:start
#
#   project      : NPrint
#   file         : model.py
#   file_relpath : src/nprint/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint configuration model.

This module defines the two configuration shapes used by NPrint:

- `MutableConfig`: a mutable draft used while assembling configuration
  (defaults, TOML files, explicit registrations). It can be frozen into a
  `Config` and thawed back for edits.
- `Config`: the frozen snapshot passed to the render, highlight and print entry
  points.

The named style vocabulary and the language registry live on the configuration
object rather than in process-wide registries. Callers needing custom styles or
languages register them into their own draft:

    ```python
    draft = MutableConfig.from_defaults()
    draft.register_style("brand", css="color: #ff8800;", terminal=("bold", "hex#ff8800"))
    config = draft.freeze()
    ```

Immutability:
    - `Config` is ``frozen=True`` and holds a read-only style sheet and a
      read-only language mapping. Use `Config.thaw` → edit → `MutableConfig.freeze`
      for safe updates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Final

from nprint.config.logging import get_logger
from nprint.render.modes import RenderMode
from nprint.render.styles import StyleSheet
from nprint.runtime import ColorMode

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pygments.lexer import Lexer

logger = get_logger(__name__)

DEFAULT_CODE_THEME: Final[str] = "github_dark"
DEFAULT_SEPARATOR: Final[str] = " "


@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        mode (RenderMode): Backend selection used by the default dispatcher.
        join (bool): Join the normalized render output into a single string.
        sep (str): Separator used to join fragments (and joined output).
        code_theme (str): Default syntax-highlighting theme name.
        color (ColorMode): Color intent for terminal output.
        styles (StyleSheet): Named style vocabulary (read-only snapshot).
        languages (Mapping[str, type[Lexer]]): Registered syntax-highlighting lexers.
    """

    mode: RenderMode = RenderMode.AUTO
    join: bool = False
    sep: str = DEFAULT_SEPARATOR
    code_theme: str = DEFAULT_CODE_THEME
    color: ColorMode = ColorMode.AUTO
    styles: StyleSheet = field(default_factory=StyleSheet.default, compare=False)
    languages: Mapping[str, type[Lexer]] = field(
        default_factory=lambda: MappingProxyType({}), compare=False
    )

    def __post_init__(self) -> None:
        # Snapshot caller-supplied containers.
        object.__setattr__(self, "styles", self.styles.frozen())
        if not isinstance(self.languages, MappingProxyType):
            object.__setattr__(self, "languages", MappingProxyType(dict(self.languages)))

    @classmethod
    def default(cls) -> Config:
        """Return the default configuration.

        Default population: the 44 built-in named styles, no extra languages
        (Pygments' own lexers are still found by name), theme ``github_dark``,
        automatic backend selection, fragments joined with a single space.
        """
        return MutableConfig.from_defaults().freeze()

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            mode=self.mode,
            join=self.join,
            sep=self.sep,
            code_theme=self.code_theme,
            color=self.color,
            styles=self.styles.copy(),
            languages=dict(self.languages),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-data view (used by the CLI and tests)."""
        return {
            "mode": self.mode.value,
            "join": self.join,
            "sep": self.sep,
            "code_theme": self.code_theme,
            "color": self.color.value,
            "styles": list(self.styles.names()),
            "languages": sorted(self.languages),
        }


@dataclass
class MutableConfig:
    """Mutable configuration draft.

    Load and merge sources into a draft, then call `freeze` to obtain a `Config`.
    TOML parsing lives in `nprint.config.io` to keep this class import-light.
    """

    mode: RenderMode = RenderMode.AUTO
    join: bool = False
    sep: str = DEFAULT_SEPARATOR
    code_theme: str = DEFAULT_CODE_THEME
    color: ColorMode = ColorMode.AUTO
    styles: StyleSheet = field(default_factory=StyleSheet.default)
    languages: dict[str, type[Lexer]] = field(default_factory=dict)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the documented defaults."""
        return cls()

    def register_style(self, name: str, *, css: str = "", terminal: tuple[str, ...] = ()) -> None:
        """Register a named style into this draft's style sheet.

        Args:
            name (str): Style encoding used in markup.
            css (str): CSS declaration for the console backend.
            terminal (tuple[str, ...]): Encodings composed by the terminal backend.
        """
        self.styles.register(name, css=css, terminal=terminal)

    def register_lang(self, lang: str, lexer: type[Lexer]) -> None:
        """Register a Pygments lexer class under ``lang``."""
        key = lang.strip().lower()
        if key in self.languages:
            logger.debug("Replacing lexer for language %r", key)
        self.languages[key] = lexer

    def freeze(self) -> Config:
        """Return an immutable snapshot of this draft."""
        return Config(
            mode=self.mode,
            join=self.join,
            sep=self.sep,
            code_theme=self.code_theme,
            color=self.color,
            styles=self.styles.frozen(),
            languages=MappingProxyType(dict(self.languages)),
        )
