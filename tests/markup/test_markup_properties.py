# topmark:header:start
#
#   project      : NPrint
#   file         : test_markup_properties.py
#   file_relpath : tests/markup/test_markup_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the markup pipeline."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from nprint.markup.grammar import CLOSE_TAG, opening_tag, wrap_with_styles
from nprint.markup.tokenizer import split_markup, tokenize
from nprint.markup.tree import StyledNode, TextNode, TreeBuilder, build_tree, parse_markup
from nprint.render.console import ConsoleRenderer, count_placeholders, fill_placeholders
from nprint.render.terminal import TerminalRenderer
from tests.strategies_nprint import s_literal, s_markup, s_styles


@given(text=s_literal.filter(bool))
def test_literal_text_round_trips_to_one_text_node(text: str) -> None:
    """Delimiter-free text becomes exactly one text node with the same content."""
    assert parse_markup(text) == (TextNode(text),)


@given(styles=s_styles, text=s_literal.filter(bool))
def test_wrap_parse_inverse(styles: list[str], text: str) -> None:
    """The outermost node carries the last style and the innermost the first."""
    node = parse_markup(wrap_with_styles(styles, text))
    seen: list[str] = []
    while node and isinstance(node[0], StyledNode):
        assert len(node) == 1
        seen.append(node[0].style)
        node = node[0].children
    assert seen == list(reversed(styles))
    assert node == (TextNode(text),)


@given(markup=s_markup())
def test_split_is_lossless(markup: str) -> None:
    """Concatenating the segments reproduces the input."""
    assert "".join(split_markup(markup)) == markup


@given(markup=s_markup())
def test_content_equivalence_between_backends(markup: str) -> None:
    """Both backends carry the same plain text."""
    forest = parse_markup(markup)
    terminal = TerminalRenderer(enable_color=False).render(forest)
    console = fill_placeholders(ConsoleRenderer().render(forest))
    assert terminal == console


@given(markup=s_markup())
def test_console_placeholders_match_declarations(markup: str) -> None:
    """There is one declaration per ``%c`` placeholder."""
    result = ConsoleRenderer().render(parse_markup(markup))
    assert count_placeholders(result.text) == len(result.styles)


@given(depth=st.integers(min_value=1, max_value=20), text=s_literal.filter(bool))
def test_nesting_depth_preserved(depth: int, text: str) -> None:
    """N opening tags before any closing tag give a stack and a tree of depth N."""
    markup = opening_tag("bold") * depth + text + CLOSE_TAG * depth
    builder = TreeBuilder()
    for segment in tokenize(markup):
        builder.feed(segment)
    forest = builder.finish()
    assert builder.max_depth == depth

    levels = 0
    while isinstance(forest[0], StyledNode):
        levels += 1
        forest = forest[0].children
    assert levels == depth
    assert forest == (TextNode(text),)


@given(count=st.integers(min_value=1, max_value=5))
def test_only_closing_tags_build_nothing(count: int) -> None:
    """Closing tags with nothing open are all dropped."""
    assert build_tree(tokenize(CLOSE_TAG * count)) == ()
