# topmark:header:start
#
#   project      : NPrint
#   file         : test_console_renderer.py
#   file_relpath : tests/render/test_console_renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console backend: ``%c`` templating with ancestor-wins declarations."""

from __future__ import annotations

from nprint.markup.grammar import wrap_with_styles
from nprint.markup.tree import parse_markup
from nprint.render.console import (
    ConsoleRenderer,
    count_placeholders,
    fill_placeholders,
    render_console,
)
from nprint.render.styles import StyleSheet


def test_text_nodes_get_empty_declarations() -> None:
    """Unstyled runs still get a placeholder and an empty declaration."""
    result = render_console(parse_markup("hello"))
    assert result.text == "%chello"
    assert result.styles == [""]


def test_styled_run() -> None:
    """A styled run contributes its CSS declaration."""
    result = render_console(parse_markup("a " + wrap_with_styles(["red"], "b")))
    assert result.as_args() == ["%ca %cb", "", "color: red;"]


def test_ancestor_declaration_overwrites_descendants() -> None:
    """The outermost style wins for every placeholder beneath it."""
    markup = wrap_with_styles(["red"], "a") + "b"
    markup = wrap_with_styles(["bold"], markup)
    result = render_console(parse_markup(markup))
    assert result.text == "%ca%cb"
    assert result.styles == ["font-weight: bold;", "font-weight: bold;"]


def test_unresolved_ancestor_blanks_descendants() -> None:
    """An unresolved ancestor contributes an empty declaration that still overwrites."""
    markup = wrap_with_styles(["red", "unknown"], "x")
    assert render_console(parse_markup(markup)).styles == [""]


def test_hex_declarations() -> None:
    """Hex encodings become color / background-color declarations."""
    markup = wrap_with_styles(["hex#f80"], "a") + wrap_with_styles(["bgHex#00ff00"], "b")
    assert render_console(parse_markup(markup)).styles == [
        "color: #f80",
        "background-color: #00ff00",
    ]


def test_empty_forest() -> None:
    """No nodes, no placeholders."""
    result = ConsoleRenderer().render(())
    assert result.as_args() == [""]


def test_custom_sheet() -> None:
    """Registered styles resolve through the renderer's sheet."""
    sheet = StyleSheet.default()
    sheet.register("brand", css="color: #f80; font-weight: bold;")
    result = ConsoleRenderer(sheet).render(parse_markup(wrap_with_styles(["brand"], "x")))
    assert result.styles == ["color: #f80; font-weight: bold;"]


def test_fill_placeholders_returns_plain_text() -> None:
    """Removing placeholders yields the plain text."""
    result = render_console(parse_markup("a" + wrap_with_styles(["red", "bold"], "b") + "c"))
    assert fill_placeholders(result) == "abc"


def test_literal_placeholder_in_text_is_escaped() -> None:
    """A ``%c`` inside text is escaped and does not shift later declarations."""
    result = render_console(parse_markup("50%c off " + wrap_with_styles(["red"], "now")))
    assert result.as_args() == ["%c50%%c off %cnow", "", "color: red;"]
    assert count_placeholders(result.text) == len(result.styles)
    assert fill_placeholders(result) == "50%c off now"


def test_percent_signs_survive_fill() -> None:
    """Literal percent signs, including trailing ones, come back unchanged."""
    result = render_console(parse_markup("100%" + wrap_with_styles(["bold"], "%%")))
    assert result.text == "%c100%%%c%%%%"
    assert count_placeholders(result.text) == 2
    assert fill_placeholders(result) == "100%%%"
