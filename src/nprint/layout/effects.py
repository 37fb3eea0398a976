# topmark:header:start
#
#   project      : NPrint
#   file         : effects.py
#   file_relpath : src/nprint/layout/effects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block effects producing NPrint markup: boxes, padding and side bars.

Widths are measured on the visible text of each line, so lines that already
contain markup are aligned correctly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from nprint.colors import StyleChain, cols
from nprint.markup.tree import parse_markup, plain_text

DEFAULT_BAR: Final[str] = "│"


@dataclass(frozen=True)
class BoxChars:
    """Border characters of a box."""

    tl: str
    tr: str
    bl: str
    br: str
    h: str
    v: str


SQUARE: Final[BoxChars] = BoxChars("┌", "┐", "└", "┘", "─", "│")
ROUNDED: Final[BoxChars] = BoxChars("╭", "╮", "╰", "╯", "─", "│")


def visible_width(line: str) -> int:
    """Return the number of visible characters of a markup line."""
    return len(plain_text(parse_markup(line)))


def as_chain(color: str | StyleChain, *, bold: bool = False) -> StyleChain:
    """Return a chain for a style name (or pass a chain through)."""
    base = cols.bold if bold else cols
    if isinstance(color, StyleChain):
        return StyleChain(color.styles + base.styles)
    return base.with_style(color)


def box(text: str, *, color: str | StyleChain = "gray", rounded: bool = False) -> str:
    """Frame ``text`` in a box whose border is styled with ``color``.

    Args:
        text (str): Text (or markup); surrounding blank lines are trimmed.
        color (str | StyleChain): Border style name or chain.
        rounded (bool): Use rounded corners.

    Returns:
        str: Markup text.
    """
    lines = text.strip().split("\n")
    width = max(visible_width(line) for line in lines)
    style = as_chain(color)
    chars = ROUNDED if rounded else SQUARE

    top = style(f"{chars.tl}{chars.h * (width + 2)}{chars.tr}")
    bottom = style(f"{chars.bl}{chars.h * (width + 2)}{chars.br}")
    body = "\n".join(
        f"{style(chars.v)} {line}{' ' * (width - visible_width(line))} {style(chars.v)}"
        for line in lines
    )
    return "\n".join([top, body, bottom])


def pad(text: str, *, x: int = 0, y: int = 0) -> str:
    """Pad every line with ``x`` spaces on both sides and ``y`` newlines above and below."""
    pad_x = " " * x
    pad_y = "\n" * y
    padded = "\n".join(f"{pad_x}{line}{pad_x}" for line in text.split("\n"))
    return f"{pad_y}{padded}{pad_y}"


def leftbar(text: str) -> str:
    """Prefix every line with a plain vertical bar."""
    return "\n".join(f"{DEFAULT_BAR} {line}" for line in text.strip().split("\n"))


def vbar(
    text: str,
    *,
    bar: str = DEFAULT_BAR,
    color: str | StyleChain = "gray",
    bold: bool = False,
    pad: int = 1,
) -> str:
    """Prefix every line with a styled vertical bar.

    Args:
        text (str): Text (or markup); surrounding blank lines are trimmed.
        bar (str): Bar character.
        color (str | StyleChain): Bar style name or chain.
        bold (bool): Also render the bar in bold.
        pad (int): Spaces between the bar and the text.

    Returns:
        str: Markup text.
    """
    styled_bar = as_chain(color, bold=bold)(bar)
    return "\n".join(f"{styled_bar}{' ' * pad}{line}" for line in text.strip().split("\n"))
