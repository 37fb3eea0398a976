# topmark:header:start
#
#   project      : NPrint
#   file         : test_rule.py
#   file_relpath : tests/layout/test_rule.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Horizontal rules."""

from __future__ import annotations

import pytest

from nprint.colors import cols
from nprint.layout import Align, hr
from nprint.markup.grammar import wrap_with_styles
from nprint.markup.tree import parse_markup, plain_text
from tests.conftest import parametrize


def _plain(markup: str) -> str:
    return plain_text(parse_markup(markup))


def test_rule_without_title() -> None:
    """A bare rule is ``width`` rule characters."""
    assert _plain(hr(width=10)) == "_" * 10


@parametrize(
    "align, expected",
    [
        (Align.CENTER, "____ T ____"),
        ("left", " T ________"),
        ("right", "________ T "),
    ],
)
def test_title_alignment(align: Align | str, expected: str) -> None:
    """The title is placed according to ``align`` with ``space`` padding."""
    assert _plain(hr(width=11, title="T", align=align)) == expected


def test_odd_remainder_goes_right() -> None:
    """Centered titles put the extra rule character on the right."""
    assert _plain(hr(width=10, title="T", char="-")) == "--- T ----"


def test_title_wider_than_rule() -> None:
    """A title longer than the width is kept whole."""
    assert _plain(hr(width=2, title="long")) == " long "


def test_numeric_title_and_space() -> None:
    """Titles are stringified; ``space`` controls padding."""
    assert _plain(hr(width=7, title=42, space=0, char="=")) == "==42==="


def test_default_colors_are_gray() -> None:
    """Rule and title default to gray."""
    result = hr(width=3, title="x", space=0, align="left")
    assert result == wrap_with_styles(["gray"], "x") + wrap_with_styles(["gray"], "_") * 2


def test_custom_colors() -> None:
    """Colors may be names or chains."""
    result = hr(width=2, title="x", space=0, align="right", hr_color=cols.red, title_color="bold")
    assert result == cols.red("_") + cols.bold("x")


def test_width_defaults_to_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without ``width`` the terminal width is used."""
    monkeypatch.setenv("COLUMNS", "24")
    assert len(_plain(hr())) == 24


def test_invalid_alignment() -> None:
    """Unknown alignments are rejected."""
    with pytest.raises(ValueError):
        hr(width=5, align="middle")
