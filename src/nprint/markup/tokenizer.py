# topmark:header:start
#
#   project      : NPrint
#   file         : tokenizer.py
#   file_relpath : src/nprint/markup/tokenizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tokenizer for NPrint markup text.

The tokenizer performs a single left-to-right scan for non-overlapping opening
or closing tags. Literal text found before each tag (and after the last one) is
emitted as its own segment, so that concatenating the raw text of all segments
reproduces the input exactly.

The scan never fails: every string is valid input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from nprint.markup.grammar import (
    CLOSE_TAG,
    CLOSING_TAG_PATTERN,
    OPENING_TAG_PATTERN,
    opening_tag,
)

_TAG_RE: Final[re.Pattern[str]] = re.compile(
    rf"(?P<open>{OPENING_TAG_PATTERN})|(?P<close>{CLOSING_TAG_PATTERN})"
)


class SegmentKind(str, Enum):
    """Kind of a tokenizer segment."""

    LITERAL = "literal"
    OPEN = "open"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class Segment:
    """One tokenizer output unit.

    Attributes:
        kind (SegmentKind): Literal text run, opening tag, or closing tag.
        text (str): Raw text of the segment as it appears in the input.
        style (str | None): Style payload for opening tags; ``None`` otherwise.
    """

    kind: SegmentKind
    text: str
    style: str | None = None

    @classmethod
    def literal(cls, text: str) -> Segment:
        """Build a literal-text segment."""
        return cls(SegmentKind.LITERAL, text)

    @classmethod
    def opening(cls, style: str, text: str | None = None) -> Segment:
        """Build an opening-tag segment for ``style``."""
        return cls(SegmentKind.OPEN, text if text is not None else opening_tag(style), style)

    @classmethod
    def closing(cls) -> Segment:
        """Build a closing-tag segment."""
        return cls(SegmentKind.CLOSE, CLOSE_TAG)


def tokenize(text: str) -> list[Segment]:
    """Split markup text into an ordered list of typed segments.

    Args:
        text (str): Markup text.

    Returns:
        list[Segment]: Segments in document order. Empty input yields an empty list.
    """
    segments: list[Segment] = []
    last_index = 0

    for match in _TAG_RE.finditer(text):
        start = match.start()
        if start > last_index:
            segments.append(Segment.literal(text[last_index:start]))
        if match.group("open") is not None:
            # group 2 is the payload captured inside OPENING_TAG_PATTERN
            segments.append(Segment(SegmentKind.OPEN, match.group(0), match.group(2)))
        else:
            segments.append(Segment(SegmentKind.CLOSE, match.group(0)))
        last_index = match.end()

    if last_index < len(text):
        segments.append(Segment.literal(text[last_index:]))

    return segments


def split_markup(text: str) -> list[str]:
    """Split markup text into raw segment strings (tags kept as separate items).

    Example:
        ```python
        >>> split_markup("Hello [mtxt-style[[bold]]], world! [[/mtxt-style]]")
        ['Hello ', '[mtxt-style[[bold]]]', ', world! ', '[[/mtxt-style]]']
        ```
    """
    return [segment.text for segment in tokenize(text)]
