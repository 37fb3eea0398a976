# topmark:header:start
#
#   project      : NPrint
#   file         : styles.py
#   file_relpath : src/nprint/render/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named style vocabulary shared by the terminal and console backends.

A style encoding is either *named* (an entry of a `StyleSheet`, e.g. ``"bold"``,
``"bgBlue"``) or *parametric* (``"hex#rrggbb"`` / ``"bgHex#rgb"``). Both backends
resolve encodings in the same order:

1. named entry of the style sheet;
2. foreground hex pattern;
3. background hex pattern;
4. otherwise unresolved (identity on the terminal, empty declaration on the console).

Each named entry carries a CSS declaration for the console backend and a
terminal styling for the terminal backend. Built-in entries map onto a `yachalk`
builder attribute; user-registered entries compose other encodings.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from nprint.config.logging import get_logger

logger = get_logger(__name__)

HEX_STYLE_PREFIX: Final[str] = "hex"
BG_HEX_STYLE_PREFIX: Final[str] = "bgHex"

_HEX_LITERAL: Final[str] = r"#(?:[0-9a-fA-F]{3}){1,2}"
HEX_STYLE_RE: Final[re.Pattern[str]] = re.compile(rf"^{HEX_STYLE_PREFIX}({_HEX_LITERAL})$")
BG_HEX_STYLE_RE: Final[re.Pattern[str]] = re.compile(rf"^{BG_HEX_STYLE_PREFIX}({_HEX_LITERAL})$")
HEX_LITERAL_RE: Final[re.Pattern[str]] = re.compile(rf"^{_HEX_LITERAL}$")

_CAMEL_BOUNDARY_RE: Final[re.Pattern[str]] = re.compile(r"(?<!^)(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """Return the snake_case spelling of a camelCase style name (``bgRedBright`` → ``bg_red_bright``)."""
    return _CAMEL_BOUNDARY_RE.sub("_", name).lower()


def expand_hex(literal: str) -> str:
    """Expand a ``#rgb`` literal to ``#rrggbb``; six-digit literals are returned unchanged."""
    digits = literal.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def match_hex_style(style: str) -> str | None:
    """Return the hex literal of a foreground hex encoding, else None."""
    match = HEX_STYLE_RE.match(style)
    return match.group(1) if match else None


def match_bg_hex_style(style: str) -> str | None:
    """Return the hex literal of a background hex encoding, else None."""
    match = BG_HEX_STYLE_RE.match(style)
    return match.group(1) if match else None


@dataclass(frozen=True, slots=True)
class NamedStyle:
    """Entry of the named style vocabulary.

    Attributes:
        name (str): Style encoding (camelCase, as it appears in markup).
        css (str): CSS declaration used by the console backend.
        chalk_attr (str | None): `yachalk` builder attribute for built-in styles.
        compose (tuple[str, ...]): For user styles, encodings applied in order
            (first innermost) by the terminal backend.
    """

    name: str
    css: str
    chalk_attr: str | None = None
    compose: tuple[str, ...] = ()

    @property
    def python_name(self) -> str:
        """Attribute spelling used by the style-chain builder."""
        return to_snake_case(self.name)


# Built-in vocabulary: (encoding, CSS declaration, yachalk attribute)
BUILTIN_STYLES: Final[tuple[tuple[str, str, str], ...]] = (
    # --- Modifiers ---
    (
        "reset",
        "color: inherit; background-color: inherit; font-weight: normal; "
        "font-style: normal; text-decoration: none; opacity: 1; filter: none;",
        "reset",
    ),
    ("bold", "font-weight: bold;", "bold"),
    ("dim", "opacity: 0.6;", "dim"),
    ("italic", "font-style: italic;", "italic"),
    ("underline", "text-decoration: underline;", "underline"),
    # Inverts both background and foreground colors
    ("inverse", "filter: invert(100%);", "inverse"),
    # Invisible but keeps its space
    ("hidden", "opacity: 0;", "hidden"),
    ("strikethrough", "text-decoration: line-through;", "strikethrough"),
    # --- Foreground colors ---
    ("black", "color: black;", "black"),
    ("red", "color: red;", "red"),
    ("green", "color: green;", "green"),
    ("yellow", "color: yellow;", "yellow"),
    ("blue", "color: blue;", "blue"),
    ("magenta", "color: magenta;", "magenta"),
    ("cyan", "color: cyan;", "cyan"),
    ("white", "color: white;", "white"),
    ("gray", "color: gray;", "gray"),
    ("grey", "color: grey;", "gray"),
    # --- Bright foreground colors ---
    ("blackBright", "color: #3f3f3f;", "black_bright"),
    ("redBright", "color: #ff0000;", "red_bright"),
    ("greenBright", "color: #00ff00;", "green_bright"),
    ("yellowBright", "color: #ffff00;", "yellow_bright"),
    ("blueBright", "color: #0000ff;", "blue_bright"),
    ("magentaBright", "color: #ff00ff;", "magenta_bright"),
    ("cyanBright", "color: #00ffff;", "cyan_bright"),
    ("whiteBright", "color: #ffffff;", "white_bright"),
    # --- Background colors ---
    ("bgBlack", "background-color: black;", "bg_black"),
    ("bgRed", "background-color: red;", "bg_red"),
    ("bgGreen", "background-color: green;", "bg_green"),
    ("bgYellow", "background-color: yellow;", "bg_yellow"),
    ("bgBlue", "background-color: blue;", "bg_blue"),
    ("bgMagenta", "background-color: magenta;", "bg_magenta"),
    ("bgCyan", "background-color: cyan;", "bg_cyan"),
    ("bgWhite", "background-color: white;", "bg_white"),
    ("bgGray", "background-color: gray;", "bg_gray"),
    ("bgGrey", "background-color: grey;", "bg_gray"),
    # --- Bright background colors ---
    ("bgBlackBright", "background-color: #3f3f3f;", "bg_black_bright"),
    ("bgRedBright", "background-color: #ff0000;", "bg_red_bright"),
    ("bgGreenBright", "background-color: #00ff00;", "bg_green_bright"),
    ("bgYellowBright", "background-color: #ffff00;", "bg_yellow_bright"),
    ("bgBlueBright", "background-color: #0000ff;", "bg_blue_bright"),
    ("bgMagentaBright", "background-color: #ff00ff;", "bg_magenta_bright"),
    ("bgCyanBright", "background-color: #00ffff;", "bg_cyan_bright"),
    ("bgWhiteBright", "background-color: #ffffff;", "bg_white_bright"),
)


class StyleSheet:
    """Named style vocabulary.

    A style sheet is a plain registry: callers that need custom styles register
    them into their own instance (usually through a config draft) instead of
    mutating process-wide state. `StyleSheet.default` returns a fresh sheet
    populated with the built-in vocabulary.

    A read-only sheet (see `frozen`) rejects `register` and `unregister` with
    ``TypeError``; frozen configs and shared defaults only ever hold one.

    Args:
        styles (Mapping[str, NamedStyle] | None): Initial vocabulary.
        read_only (bool): Reject changes after construction.
    """

    def __init__(
        self, styles: Mapping[str, NamedStyle] | None = None, *, read_only: bool = False
    ) -> None:
        self._read_only = read_only
        self._styles: dict[str, NamedStyle] = dict(styles or {})
        self._by_python_name: dict[str, str] = {
            entry.python_name: name for name, entry in self._styles.items()
        }

    @property
    def read_only(self) -> bool:
        """True when the sheet rejects changes."""
        return self._read_only

    def _check_writable(self) -> None:
        if self._read_only:
            raise TypeError("Cannot change a read-only style sheet; register into a copy")

    @classmethod
    def default(cls) -> StyleSheet:
        """Return a new sheet holding the built-in vocabulary."""
        return cls(
            {
                name: NamedStyle(name=name, css=css, chalk_attr=attr)
                for name, css, attr in BUILTIN_STYLES
            }
        )

    def register(self, name: str, *, css: str = "", terminal: tuple[str, ...] = ()) -> None:
        """Register (or replace) a user style.

        Args:
            name (str): Style encoding used in markup.
            css (str): CSS declaration for the console backend.
            terminal (tuple[str, ...]): Encodings composed by the terminal backend,
                first innermost (e.g. ``("bold", "hex#ff8800")``).

        Raises:
            ValueError: If ``name`` is empty or contains a tag delimiter.
            TypeError: If the sheet is read-only.
        """
        self._check_writable()
        name = name.strip()
        if not name or "]]]" in name or "[[" in name:
            raise ValueError(f"Invalid style name: {name!r}")
        if name in self._styles:
            logger.debug("Replacing named style %r", name)
        entry = NamedStyle(name=name, css=css, compose=tuple(terminal))
        self._styles[name] = entry
        self._by_python_name[entry.python_name] = name

    def unregister(self, name: str) -> bool:
        """Remove a style; returns True if it was present."""
        self._check_writable()
        entry = self._styles.pop(name, None)
        if entry is None:
            return False
        self._by_python_name.pop(entry.python_name, None)
        return True

    def get(self, name: str) -> NamedStyle | None:
        """Return the entry registered under ``name``, if any."""
        return self._styles.get(name)

    def from_python_name(self, python_name: str) -> str | None:
        """Map a snake_case attribute name (or an exact encoding) to its encoding."""
        if python_name in self._styles:
            return python_name
        return self._by_python_name.get(python_name)

    def names(self) -> tuple[str, ...]:
        """Return the registered encodings in registration order."""
        return tuple(self._styles)

    def as_mapping(self) -> Mapping[str, NamedStyle]:
        """Return a read-only view of the vocabulary."""
        return MappingProxyType(self._styles)

    def copy(self) -> StyleSheet:
        """Return an independent, writable copy of this sheet."""
        return StyleSheet(self._styles)

    def frozen(self) -> StyleSheet:
        """Return a read-only snapshot of this sheet (``self`` if already read-only)."""
        if self._read_only:
            return self
        return StyleSheet(self._styles, read_only=True)

    def resolve_css(self, style: str) -> str:
        """Resolve ``style`` to a CSS declaration (``""`` when unresolved)."""
        entry = self._styles.get(style)
        if entry is not None:
            return entry.css
        literal = match_hex_style(style)
        if literal is not None:
            return f"color: {literal}"
        literal = match_bg_hex_style(style)
        if literal is not None:
            return f"background-color: {literal}"
        return ""

    def __contains__(self, name: object) -> bool:
        return name in self._styles

    def __iter__(self) -> Iterator[NamedStyle]:
        return iter(self._styles.values())

    def __len__(self) -> int:
        return len(self._styles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleSheet):
            return NotImplemented
        return self._styles == other._styles

    def __repr__(self) -> str:
        return f"StyleSheet({len(self._styles)} styles)"
