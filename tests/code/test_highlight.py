# topmark:header:start
#
#   project      : NPrint
#   file         : test_highlight.py
#   file_relpath : tests/code/test_highlight.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Syntax highlighting with Pygments lexers and NPrint themes."""

from __future__ import annotations

import logging

import pytest
from pygments.lexers.python import PythonLexer
from pygments.token import Token

from nprint.code import code, highlight_code, register_lang
from nprint.code.highlight import compile_theme, get_lexer, styles_for
from nprint.code.themes import GITHUB_DARK, MONOKAI, THEMES, CodeTheme, get_theme
from nprint.config.model import MutableConfig
from nprint.errors import UnknownLanguageError, UnknownThemeError
from nprint.markup.grammar import wrap_with_styles
from nprint.markup.tree import parse_markup, plain_text
from tests.conftest import make_config, parametrize

SOURCE = "def greet(name):\n    return 'hi ' + name  # greet\n"


def test_plain_text_is_preserved() -> None:
    """Highlighting never changes the text content."""
    assert plain_text(parse_markup(highlight_code("python", SOURCE))) == SOURCE


def test_keywords_use_theme_styles() -> None:
    """Tokens are wrapped with the styles of their theme selector."""
    result = highlight_code("python", SOURCE)
    assert wrap_with_styles(["hex#ff7b72"], "def") in result
    assert wrap_with_styles(["hex#d2a8ff"], "greet") in result


def test_theme_by_name_and_alias() -> None:
    """Themes are selected by name; ``code`` is an alias."""
    result = code("python", SOURCE, "monokai")
    assert wrap_with_styles(["hex#f92672"], "def") in result
    assert highlight_code("python", SOURCE, MONOKAI) == result


def test_config_theme_is_default() -> None:
    """Without an explicit theme the config's theme applies."""
    config = make_config(code_theme="monokai")
    expected = highlight_code("python", SOURCE, "monokai")
    assert highlight_code("python", SOURCE, config=config) == expected


def test_unknown_language() -> None:
    """Unknown languages raise a LookupError subclass."""
    with pytest.raises(UnknownLanguageError) as excinfo:
        highlight_code("no-such-language-xyz", "x")
    assert isinstance(excinfo.value, LookupError)
    assert excinfo.value.lang == "no-such-language-xyz"


def test_unknown_theme() -> None:
    """Unknown themes raise `UnknownThemeError`."""
    with pytest.raises(UnknownThemeError):
        highlight_code("python", "x", "solarized")


@parametrize("name", ["github_dark", "githubDark", " monokai ", "vs", "far"])
def test_get_theme(name: str) -> None:
    """Theme lookup accepts camelCase and snake_case names."""
    assert get_theme(name) in THEMES.values()


def test_most_specific_selector_wins() -> None:
    """Token types inherit styles from their closest themed ancestor."""
    table = compile_theme(GITHUB_DARK)
    assert styles_for(Token.Literal.String.Double, table) == ("hex#a5d6ff",)
    assert styles_for(Token.Literal.String.Regex, table) == ("hex#7ee787",)
    assert styles_for(Token.Keyword.Constant, table) == ("hex#79c0ff",)
    assert styles_for(Token.Text, table) == ()


def test_malformed_selector_is_logged_and_skipped(caplog: pytest.LogCaptureFixture) -> None:
    """A bad selector is reported; the rest of the theme still applies."""
    theme = CodeTheme("broken", {"not a selector": ("red",), "Keyword": ("bold",)})
    with caplog.at_level(logging.ERROR):
        table = compile_theme(theme)
        result = highlight_code("python", "def f(): pass", theme)
    assert table == {Token.Keyword: ("bold",)}
    assert "not a selector" in caplog.text
    assert wrap_with_styles(["bold"], "def") in result


def test_register_lang_into_draft() -> None:
    """Registered aliases resolve through the config (case-insensitively)."""
    draft = MutableConfig.from_defaults()
    register_lang("SnakeLang", PythonLexer, draft)
    config = draft.freeze()
    assert isinstance(get_lexer("snakelang", config), PythonLexer)
    assert plain_text(parse_markup(highlight_code("SNAKELANG", "x = 1", config=config))) == "x = 1"
    with pytest.raises(UnknownLanguageError):
        get_lexer("snakelang")


def test_adjacent_tokens_with_same_styles_merge() -> None:
    """Consecutive tokens sharing styles form one wrapped run."""
    theme = CodeTheme("flat", {"Name": ("red",), "Operator": ("red",)})
    result = highlight_code("python", "a+b", theme)
    assert result.startswith(wrap_with_styles(["red"], "a+b"))
