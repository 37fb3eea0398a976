# topmark:header:start
#
#   project      : NPrint
#   file         : io.py
#   file_relpath : src/nprint/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load NPrint configuration from TOML.

Sources, in order of discovery (walking up from a start directory):

- ``nprint.toml``: the whole document is the NPrint table;
- ``pyproject.toml``: the ``[tool.nprint]`` table, when present.

Recognized keys:

```toml
mode = "auto"            # "auto" | "nodelike" | "browser"
join = false
sep = " "
code_theme = "github_dark"
color = "auto"           # "auto" | "always" | "never"

[styles.brand]
css = "color: #ff8800; font-weight: bold;"
terminal = ["bold", "hex#ff8800"]

[languages]
py3 = "python"           # alias -> Pygments lexer name
```

Parsing is done with `tomlkit`. Malformed documents and invalid values raise
`nprint.errors.ConfigError`; unknown keys are logged and ignored.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final, TypeVar

import tomlkit
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound
from tomlkit.exceptions import ParseError as TomlkitParseError

from nprint.config.logging import get_logger
from nprint.config.model import Config, MutableConfig
from nprint.errors import ConfigError
from nprint.render.modes import RenderMode
from nprint.runtime import ColorMode

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)

NPRINT_TOML_NAME: Final[str] = "nprint.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"

KNOWN_KEYS: Final[frozenset[str]] = frozenset(
    {"mode", "join", "sep", "code_theme", "color", "styles", "languages"}
)

E = TypeVar("E", bound=Enum)

TomlTable = dict[str, Any]


def load_toml_file(path: Path) -> TomlTable:
    """Read and parse a TOML file into plain Python data.

    Args:
        path (Path): File to read.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def extract_nprint_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the NPrint table of a parsed document, or None if it has none."""
    if path.name == PYPROJECT_TOML_NAME:
        tool = data.get("tool")
        if not isinstance(tool, dict):
            return None
        table = tool.get("nprint")
        return table if isinstance(table, dict) else None
    return data


def find_config_file(start: Path) -> Path | None:
    """Walk up from ``start`` and return the first applicable config file.

    In each directory ``nprint.toml`` takes precedence over ``pyproject.toml``;
    a ``pyproject.toml`` without a ``[tool.nprint]`` table is skipped.
    """
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / NPRINT_TOML_NAME
        if candidate.is_file():
            return candidate
        candidate = directory / PYPROJECT_TOML_NAME
        if candidate.is_file():
            try:
                has_table = extract_nprint_table(candidate, load_toml_file(candidate)) is not None
            except ConfigError as exc:
                logger.warning("Skipping unreadable %s: %s", candidate, exc)
                continue
            if has_table:
                return candidate
    return None


def _get_enum(table: Mapping[str, Any], key: str, enum_cls: type[E]) -> E | None:
    value = table.get(key)
    if value is None:
        return None
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(str(member.value) for member in enum_cls)
        raise ConfigError(f"Invalid value for '{key}': {value!r} (expected one of: {choices})") from exc


def _get_str(table: Mapping[str, Any], key: str) -> str | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"Invalid value for '{key}': expected a string, got {value!r}")
    return value


def _get_bool(table: Mapping[str, Any], key: str) -> bool | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"Invalid value for '{key}': expected a boolean, got {value!r}")
    return value


def _apply_styles(draft: MutableConfig, styles: Any) -> None:
    if not isinstance(styles, dict):
        raise ConfigError("Invalid 'styles' section: expected a table")
    for name, entry in styles.items():
        if not isinstance(entry, dict):
            raise ConfigError(f"Invalid style '{name}': expected a table")
        css = entry.get("css", "")
        terminal = entry.get("terminal", [])
        if isinstance(terminal, str):
            terminal = [terminal]
        if not isinstance(css, str) or not isinstance(terminal, list):
            raise ConfigError(f"Invalid style '{name}': 'css' must be a string, 'terminal' a list")
        try:
            draft.register_style(name, css=css, terminal=tuple(str(t) for t in terminal))
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc


def _apply_languages(draft: MutableConfig, languages: Any) -> None:
    if not isinstance(languages, dict):
        raise ConfigError("Invalid 'languages' section: expected a table")
    for alias, lexer_name in languages.items():
        try:
            lexer = get_lexer_by_name(str(lexer_name))
        except ClassNotFound as exc:
            raise ConfigError(f"Unknown Pygments lexer {lexer_name!r} for language {alias!r}") from exc
        draft.register_lang(alias, type(lexer))


def apply_toml_dict(draft: MutableConfig, table: Mapping[str, Any]) -> MutableConfig:
    """Merge an NPrint TOML table into ``draft`` (in place) and return it.

    Raises:
        ConfigError: On invalid values.
    """
    for key in table:
        if key not in KNOWN_KEYS:
            logger.warning("Ignoring unknown config key: %r", key)

    mode = _get_enum(table, "mode", RenderMode)
    if mode is not None:
        draft.mode = mode
    color = _get_enum(table, "color", ColorMode)
    if color is not None:
        draft.color = color
    join = _get_bool(table, "join")
    if join is not None:
        draft.join = join
    sep = _get_str(table, "sep")
    if sep is not None:
        draft.sep = sep
    theme = _get_str(table, "code_theme")
    if theme is not None:
        draft.code_theme = theme

    if "styles" in table:
        _apply_styles(draft, table["styles"])
    if "languages" in table:
        _apply_languages(draft, table["languages"])
    return draft


def load_config(path: Path | None = None, *, search_from: Path | None = None) -> Config:
    """Build a frozen config from defaults plus an optional TOML source.

    Args:
        path (Path | None): Explicit config file (``nprint.toml`` or ``pyproject.toml``).
        search_from (Path | None): Directory to start discovery from when ``path``
            is not given. Discovery is skipped when both are None.

    Returns:
        Config: The effective configuration.

    Raises:
        ConfigError: If the explicit file is missing or any source is malformed.
    """
    draft = MutableConfig.from_defaults()

    if path is None and search_from is not None:
        path = find_config_file(search_from)
        if path is not None:
            logger.info("Using config file %s", path)

    if path is not None:
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        table = extract_nprint_table(path, load_toml_file(path))
        if table is not None:
            apply_toml_dict(draft, table)
        else:
            logger.debug("No [tool.nprint] table in %s", path)

    return draft.freeze()
