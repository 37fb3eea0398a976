# topmark:header:start
#
#   project      : NPrint
#   file         : colors.py
#   file_relpath : src/nprint/colors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Chainable style builder producing NPrint markup.

`StyleChain` is an immutable list of style encodings. Each attribute access
with a style name returns a new chain with that style *prepended*; calling the
chain wraps the given text, so the style written first ends up outermost:

    ```python
    >>> cols.red.bold("Hi")
    '[mtxt-style[[red]]][mtxt-style[[bold]]]Hi[[/mtxt-style]][[/mtxt-style]]'
    >>> hex("#f80").underline("warn")
    '[mtxt-style[[hex#f80]]][mtxt-style[[underline]]]warn[[/mtxt-style]][[/mtxt-style]]'
    ```

Attribute names are the snake_case spelling of the named styles (``bg_blue``,
``red_bright``); the exact encodings (``bgBlue``) are accepted as well, as is
`StyleChain.with_style` for arbitrary encodings.
"""

from __future__ import annotations

from typing import Final

from nprint.markup.grammar import wrap_with_styles
from nprint.render.styles import (
    BG_HEX_STYLE_PREFIX,
    HEX_LITERAL_RE,
    HEX_STYLE_PREFIX,
    StyleSheet,
)

_DEFAULT_SHEET: Final[StyleSheet] = StyleSheet.default().frozen()


class StyleChain:
    """Immutable, chainable style builder.

    Args:
        styles (tuple[str, ...]): Accumulated encodings, innermost first.
        sheet (StyleSheet | None): Vocabulary used to resolve attribute names.
    """

    __slots__ = ("_sheet", "_styles")

    def __init__(self, styles: tuple[str, ...] = (), sheet: StyleSheet | None = None) -> None:
        self._styles = tuple(styles)
        self._sheet = sheet if sheet is not None else _DEFAULT_SHEET

    @property
    def styles(self) -> tuple[str, ...]:
        """Accumulated encodings (first element is applied innermost)."""
        return self._styles

    def with_style(self, style: str) -> StyleChain:
        """Return a new chain with ``style`` prepended."""
        return StyleChain((style, *self._styles), self._sheet)

    def __getattr__(self, name: str) -> StyleChain:
        if name.startswith("_"):
            raise AttributeError(name)
        encoding = self._sheet.from_python_name(name)
        if encoding is None:
            raise AttributeError(f"{type(self).__name__!r} has no style {name!r}")
        return self.with_style(encoding)

    def __call__(self, *content: object, sep: str = " ") -> str:
        """Wrap the joined ``content`` with the accumulated styles."""
        return wrap_with_styles(self._styles, sep.join(str(part) for part in content))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyleChain):
            return NotImplemented
        return self._styles == other._styles

    def __hash__(self) -> int:
        return hash(self._styles)

    def __repr__(self) -> str:
        return f"StyleChain({list(self._styles)!r})"


def _checked_hex(literal: str) -> str:
    literal = literal.strip()
    if not HEX_LITERAL_RE.match(literal):
        raise ValueError(f"Invalid hexadecimal color {literal!r}; expected '#rgb' or '#rrggbb'")
    return literal


def hex(literal: str, sheet: StyleSheet | None = None) -> StyleChain:  # noqa: A001
    """Start a chain with a foreground hex color (``"#ff0000"`` or ``"#f00"``).

    Raises:
        ValueError: If ``literal`` is not a 3- or 6-digit ``#`` hex color.
    """
    return StyleChain((HEX_STYLE_PREFIX + _checked_hex(literal),), sheet)


def bg_hex(literal: str, sheet: StyleSheet | None = None) -> StyleChain:
    """Start a chain with a background hex color.

    Raises:
        ValueError: If ``literal`` is not a 3- or 6-digit ``#`` hex color.
    """
    return StyleChain((BG_HEX_STYLE_PREFIX + _checked_hex(literal),), sheet)


cols: Final[StyleChain] = StyleChain()
