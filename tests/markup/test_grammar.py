# topmark:header:start
#
#   project      : NPrint
#   file         : test_grammar.py
#   file_relpath : tests/markup/test_grammar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag grammar: tag construction, exact-match recognition and style wrapping."""

from __future__ import annotations

from nprint.markup.grammar import (
    CLOSE_TAG,
    closing_tag,
    match_closing_tag,
    match_opening_tag,
    opening_tag,
    wrap,
    wrap_with_styles,
)
from tests.conftest import parametrize


def test_opening_tag_embeds_style_verbatim() -> None:
    """An opening tag carries its payload between the fixed delimiters."""
    assert opening_tag("red") == "[mtxt-style[[red]]]"
    assert opening_tag("hex#ff8800") == "[mtxt-style[[hex#ff8800]]]"


def test_closing_tag_is_constant() -> None:
    """The closing tag carries no payload."""
    assert closing_tag() == CLOSE_TAG == "[[/mtxt-style]]"


@parametrize(
    "segment, expected",
    [
        ("[mtxt-style[[bold]]]", "bold"),
        ("[mtxt-style[[bgHex#123]]]", "bgHex#123"),
        ("[mtxt-style[[]]]", ""),
        ("[mtxt-style[[bold]]] tail", None),
        ("lead [mtxt-style[[bold]]]", None),
        ("[[/mtxt-style]]", None),
        ("plain", None),
    ],
)
def test_match_opening_tag_requires_whole_segment(segment: str, expected: str | None) -> None:
    """Only a segment that is exactly one opening tag yields a payload."""
    assert match_opening_tag(segment) == expected


def test_match_closing_tag() -> None:
    """The closing tag is recognized only as a whole segment."""
    assert match_closing_tag("[[/mtxt-style]]")
    assert not match_closing_tag("[[/mtxt-style]] ")
    assert not match_closing_tag("[mtxt-style[[red]]]")


def test_wrap_single_style() -> None:
    """`wrap` surrounds text with one tag pair."""
    assert wrap("x", "red") == "[mtxt-style[[red]]]x[[/mtxt-style]]"


def test_wrap_with_styles_first_style_is_innermost() -> None:
    """Each successive style wraps the previous result."""
    assert wrap_with_styles(["red", "bold"], "Hello, World!") == (
        "[mtxt-style[[bold]]][mtxt-style[[red]]]Hello, World![[/mtxt-style]][[/mtxt-style]]"
    )


def test_wrap_with_styles_no_styles_is_identity() -> None:
    """With no styles the text is returned unchanged."""
    assert wrap_with_styles([], "text") == "text"


def test_wrap_with_styles_keeps_duplicates_and_strips_whitespace() -> None:
    """Styles are neither merged nor deduplicated; padding around names is dropped."""
    assert wrap_with_styles([" red ", "red"], "x") == (
        "[mtxt-style[[red]]][mtxt-style[[red]]]x[[/mtxt-style]][[/mtxt-style]]"
    )
