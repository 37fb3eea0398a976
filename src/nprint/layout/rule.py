# topmark:header:start
#
#   project      : NPrint
#   file         : rule.py
#   file_relpath : src/nprint/layout/rule.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Horizontal rules with an optional title."""

from __future__ import annotations

from enum import Enum

from nprint.colors import StyleChain
from nprint.layout.effects import as_chain
from nprint.runtime import get_terminal_width


class Align(str, Enum):
    """Title placement within a horizontal rule."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def hr(
    *,
    char: str = "_",
    align: Align | str = Align.CENTER,
    space: int = 1,
    title: str | int | None = None,
    title_color: str | StyleChain | None = None,
    hr_color: str | StyleChain | None = None,
    width: int | None = None,
) -> str:
    """Build a horizontal rule as markup text.

    Args:
        char (str): Rule character.
        align (Align | str): Title placement (``left``, ``center`` or ``right``).
        space (int): Spaces on each side of the title.
        title (str | int | None): Optional title.
        title_color (str | StyleChain | None): Title style (name or chain); gray by default.
        hr_color (str | StyleChain | None): Rule style (name or chain); gray by default.
        width (int | None): Total visible width; defaults to the terminal width (or 80).

    Returns:
        str: Markup text whose visible length is ``width`` (or the title length when
        the title is wider).

    Raises:
        ValueError: If ``align`` is not a valid alignment.
    """
    align = Align(align)
    total = width or get_terminal_width(80)
    title_text = "" if title is None else str(title)

    colored_char = as_chain(hr_color or "gray")(char)

    title_with_space = f"{' ' * space}{title_text}{' ' * space}" if title_text else ""
    title_colored = as_chain(title_color or "gray")(title_with_space) if title_text else ""

    remaining = total - len(title_with_space)
    left = remaining // 2
    right = remaining - left

    if align is Align.CENTER:
        return colored_char * left + title_colored + colored_char * right
    if align is Align.LEFT:
        return title_colored + colored_char * remaining
    return colored_char * remaining + title_colored
