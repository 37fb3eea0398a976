# topmark:header:start
#
#   project      : NPrint
#   file         : highlight.py
#   file_relpath : src/nprint/code/highlight.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Syntax highlighting: source code in, NPrint markup out.

Source code is tokenized with Pygments. Each token is mapped to the styles of
the most specific theme selector matching its token type (walking up the token
type hierarchy), and adjacent tokens sharing the same styles are wrapped as one
run. The result is plain markup text, rendered later by the active backend.

Lexers are looked up in the configuration's language registry first, then by
name in Pygments itself.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from pygments.lexers import get_lexer_by_name
from pygments.token import string_to_tokentype
from pygments.util import ClassNotFound

from nprint.code.themes import CodeTheme, get_theme
from nprint.config.logging import get_logger
from nprint.config.model import Config, MutableConfig
from nprint.errors import UnknownLanguageError
from nprint.markup.grammar import wrap_with_styles

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from pygments.lexer import Lexer
    from pygments.token import _TokenType

logger = get_logger(__name__)

_SELECTOR_RE: Final[re.Pattern[str]] = re.compile(r"^(?:Token\.)?[A-Z][A-Za-z]*(?:\.[A-Z][A-Za-z]*)*$")


def compile_theme(theme: CodeTheme) -> dict[_TokenType, tuple[str, ...]]:
    """Resolve a theme's selectors to Pygments token types.

    Malformed selectors are reported with ``logger.error`` and skipped; the rest
    of the theme still applies.
    """
    compiled: dict[_TokenType, tuple[str, ...]] = {}
    for selector, styles in theme.styles.items():
        if not _SELECTOR_RE.match(selector):
            logger.error("Invalid selector %r in theme %r; skipping it", selector, theme.name)
            continue
        name = selector.removeprefix("Token.")
        compiled[string_to_tokentype(name)] = tuple(styles)
    return compiled


def styles_for(token_type: _TokenType, table: Mapping[_TokenType, tuple[str, ...]]) -> tuple[str, ...]:
    """Return the styles of the most specific selector matching ``token_type``."""
    current: _TokenType | None = token_type
    while current is not None:
        styles = table.get(current)
        if styles is not None:
            return styles
        current = current.parent
    return ()


def get_lexer(lang: str, config: Config | None = None) -> Lexer:
    """Instantiate the lexer for ``lang``.

    Raises:
        UnknownLanguageError: If neither the registry nor Pygments know ``lang``.
    """
    key = lang.strip().lower()
    options = {"ensurenl": False, "stripnl": False}
    if config is not None and key in config.languages:
        return config.languages[key](**options)
    try:
        return get_lexer_by_name(key, **options)
    except ClassNotFound as exc:
        raise UnknownLanguageError(lang) from exc


def _runs(
    tokens: Iterator[tuple[_TokenType, str]],
    table: Mapping[_TokenType, tuple[str, ...]],
) -> Iterator[tuple[tuple[str, ...], str]]:
    current_styles: tuple[str, ...] | None = None
    buffer: list[str] = []
    for token_type, value in tokens:
        if not value:
            continue
        styles = styles_for(token_type, table)
        if styles != current_styles and buffer:
            yield current_styles or (), "".join(buffer)
            buffer = []
        current_styles = styles
        buffer.append(value)
    if buffer:
        yield current_styles or (), "".join(buffer)


def highlight_code(
    lang: str,
    content: str,
    theme: str | CodeTheme | None = None,
    config: Config | None = None,
) -> str:
    """Highlight ``content`` and return it as markup text.

    Args:
        lang (str): Language identifier (registered alias or Pygments lexer name).
        content (str): Source code.
        theme (str | CodeTheme | None): Theme or theme name; defaults to
            ``config.code_theme``.
        config (Config | None): Configuration holding the language registry.

    Returns:
        str: Markup text whose plain text equals ``content`` (line endings
            normalized to LF by Pygments).

    Raises:
        UnknownLanguageError: If ``lang`` has no lexer.
        UnknownThemeError: If ``theme`` names no built-in theme.
    """
    config = config if config is not None else Config.default()
    selected = theme if isinstance(theme, CodeTheme) else get_theme(theme or config.code_theme)
    lexer = get_lexer(lang, config)
    table = compile_theme(selected)
    logger.debug("Highlighting %d chars of %s with theme %s", len(content), lang, selected.name)
    return "".join(
        wrap_with_styles(styles, text) for styles, text in _runs(lexer.get_tokens(content), table)
    )


code = highlight_code


def register_lang(lang: str, lexer: type[Lexer], config: MutableConfig) -> None:
    """Register a Pygments lexer class for ``lang`` into a config draft."""
    config.register_lang(lang, lexer)


__all__ = [
    "code",
    "compile_theme",
    "get_lexer",
    "highlight_code",
    "register_lang",
    "styles_for",
]
