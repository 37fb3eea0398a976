# topmark:header:start
#
#   project      : NPrint
#   file         : grammar.py
#   file_relpath : src/nprint/markup/grammar.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag grammar of the NPrint markup language.

Markup text is plain text interleaved with explicit style tags:

- an opening tag ``[mtxt-style[[<style>]]]`` carrying exactly one style encoding;
- a closing tag ``[[/mtxt-style]]`` carrying no payload.

The grammar has no escaping mechanism. The delimiter sequences must never occur
in literal text that is not meant as a tag; markup is expected to be produced by
the style-wrapping helpers in this module (or by collaborators built on them).

Example:
    ```python
    >>> wrap_with_styles(["red", "bold"], "Hello, World!")
    '[mtxt-style[[bold]]][mtxt-style[[red]]]Hello, World![[/mtxt-style]][[/mtxt-style]]'
    ```
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable

OPEN_PREFIX: Final[str] = "[mtxt-style[["
OPEN_SUFFIX: Final[str] = "]]]"
CLOSE_TAG: Final[str] = "[[/mtxt-style]]"

# Non-greedy payload: the first ``]]]`` after the prefix terminates the tag.
OPENING_TAG_PATTERN: Final[str] = rf"{re.escape(OPEN_PREFIX)}(.*?){re.escape(OPEN_SUFFIX)}"
CLOSING_TAG_PATTERN: Final[str] = re.escape(CLOSE_TAG)

_OPENING_TAG_RE: Final[re.Pattern[str]] = re.compile(OPENING_TAG_PATTERN)
_CLOSING_TAG_RE: Final[re.Pattern[str]] = re.compile(CLOSING_TAG_PATTERN)


def opening_tag(style: str) -> str:
    """Return the opening tag embedding ``style`` verbatim.

    Args:
        style (str): Style encoding (e.g. ``"red"``, ``"bold"``, ``"hex#ff8800"``).

    Returns:
        str: The opening tag text.
    """
    return f"{OPEN_PREFIX}{style}{OPEN_SUFFIX}"


def closing_tag() -> str:
    """Return the closing tag (independent of any style)."""
    return CLOSE_TAG


def match_opening_tag(segment: str) -> str | None:
    """Return the style payload if ``segment`` is exactly one opening tag.

    Args:
        segment (str): A segment produced by the tokenizer.

    Returns:
        str | None: The style payload (possibly empty), or ``None`` when the
        segment is not an opening tag.
    """
    # An empty payload still opens a node (an unresolved style, rendered as
    # identity); the tag is consumed rather than kept as literal text.
    match = _OPENING_TAG_RE.fullmatch(segment)
    return match.group(1) if match else None


def match_closing_tag(segment: str) -> bool:
    """Return True if ``segment`` is exactly the closing tag."""
    return _CLOSING_TAG_RE.fullmatch(segment) is not None


def wrap(text: str, style: str) -> str:
    """Wrap ``text`` in a single opening/closing tag pair for ``style``."""
    return f"{opening_tag(style)}{text}{CLOSE_TAG}"


def wrap_with_styles(styles: Iterable[str], text: str) -> str:
    """Wrap ``text`` with every style of ``styles``, in order.

    Each successive style wraps the already-wrapped result, so the first style
    ends up innermost and the last style outermost. Styles are neither merged nor
    deduplicated; surrounding whitespace is stripped from each of them.

    Args:
        styles (Iterable[str]): Ordered style encodings.
        text (str): Literal text to wrap.

    Returns:
        str: Markup text (``text`` unchanged when ``styles`` is empty).
    """
    result = text
    for style in styles:
        result = wrap(result, style.strip())
    return result
