# topmark:header:start
#
#   project      : NPrint
#   file         : themes.py
#   file_relpath : src/nprint/code/themes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Syntax-highlighting themes.

A theme maps *selectors* to ordered style encodings. A selector is a Pygments
token type name (``Keyword``, ``Name.Function``, ``Literal.String.Doc``), with or
without the leading ``Token.``. Encodings are the usual NPrint styles: named
(``bold``, ``italic``) or parametric (``hex#ff7b72``, ``bgHex#033a16``); the
first encoding is applied innermost.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from nprint.errors import UnknownThemeError
from nprint.render.styles import to_snake_case


@dataclass(frozen=True)
class CodeTheme:
    """Named selector → styles table.

    Attributes:
        name (str): Theme identifier.
        styles (Mapping[str, tuple[str, ...]]): Selector table.
    """

    name: str
    styles: Mapping[str, tuple[str, ...]] = field(default_factory=dict)


GITHUB_DARK: Final[CodeTheme] = CodeTheme(
    "github_dark",
    {
        "Comment": ("hex#8b949e",),
        "Comment.Preproc": ("hex#ff7b72",),
        "Keyword": ("hex#ff7b72",),
        "Keyword.Constant": ("hex#79c0ff",),
        "Keyword.Type": ("hex#ff7b72",),
        "Name.Builtin": ("hex#ffa657",),
        "Name.Class": ("hex#ffa657",),
        "Name.Function": ("hex#d2a8ff",),
        "Name.Decorator": ("hex#d2a8ff",),
        "Name.Tag": ("hex#7ee787",),
        "Name.Attribute": ("hex#79c0ff",),
        "Name.Variable": ("hex#ffa657",),
        "Literal.String": ("hex#a5d6ff",),
        "Literal.String.Regex": ("hex#7ee787",),
        "Literal.Number": ("hex#79c0ff",),
        "Operator": ("hex#ff7b72",),
        "Operator.Word": ("hex#ff7b72",),
        "Generic.Heading": ("bold", "hex#1f6feb"),
        "Generic.Subheading": ("bold", "hex#1f6feb"),
        "Generic.Emph": ("italic",),
        "Generic.Strong": ("bold",),
        "Generic.Inserted": ("hex#aff5b4", "bgHex#033a16"),
        "Generic.Deleted": ("hex#ffa198", "bgHex#490202"),
    },
)

MONOKAI: Final[CodeTheme] = CodeTheme(
    "monokai",
    {
        "Comment": ("hex#75715e",),
        "Keyword": ("hex#f92672",),
        "Keyword.Constant": ("hex#ae81ff",),
        "Keyword.Type": ("hex#66d9ef",),
        "Name.Builtin": ("hex#66d9ef",),
        "Name.Class": ("hex#a6e22e",),
        "Name.Function": ("hex#a6e22e",),
        "Name.Decorator": ("hex#a6e22e",),
        "Name.Tag": ("hex#f92672",),
        "Name.Attribute": ("hex#a6e22e",),
        "Literal.String": ("hex#e6db74",),
        "Literal.Number": ("hex#ae81ff",),
        "Operator": ("hex#f92672",),
        "Generic.Heading": ("bold",),
        "Generic.Emph": ("italic",),
        "Generic.Strong": ("bold",),
        "Generic.Inserted": ("hex#a6e22e",),
        "Generic.Deleted": ("hex#f92672",),
    },
)

VS: Final[CodeTheme] = CodeTheme(
    "vs",
    {
        "Comment": ("hex#008000",),
        "Comment.Preproc": ("hex#0000ff",),
        "Keyword": ("hex#0000ff",),
        "Keyword.Type": ("hex#2b91af",),
        "Name.Builtin": ("hex#0000ff",),
        "Name.Class": ("hex#2b91af",),
        "Name.Tag": ("hex#a31515",),
        "Name.Attribute": ("hex#ff0000",),
        "Literal.String": ("hex#a31515",),
        "Generic.Heading": ("bold",),
        "Generic.Emph": ("italic",),
        "Generic.Strong": ("bold",),
        "Generic.Inserted": ("hex#a31515",),
        "Generic.Deleted": ("hex#2b91af",),
    },
)

FAR: Final[CodeTheme] = CodeTheme(
    "far",
    {
        "Comment": ("hex#888",),
        "Keyword": ("bold", "whiteBright"),
        "Keyword.Type": ("bold", "whiteBright"),
        "Name.Builtin": ("whiteBright",),
        "Name.Class": ("yellowBright",),
        "Name.Function": ("yellowBright",),
        "Name.Tag": ("bold", "whiteBright"),
        "Name.Attribute": ("yellowBright",),
        "Literal.String": ("cyanBright",),
        "Literal.Number": ("greenBright",),
        "Generic.Heading": ("bold",),
        "Generic.Emph": ("italic",),
        "Generic.Strong": ("bold",),
        "Generic.Inserted": ("cyanBright",),
        "Generic.Deleted": ("hex#800",),
    },
)

THEMES: Final[Mapping[str, CodeTheme]] = MappingProxyType(
    {theme.name: theme for theme in (GITHUB_DARK, MONOKAI, VS, FAR)}
)


def get_theme(name: str) -> CodeTheme:
    """Return the built-in theme ``name`` (``githubDark`` and ``github_dark`` both work).

    Raises:
        UnknownThemeError: If no such theme exists.
    """
    theme = THEMES.get(to_snake_case(name.strip()))
    if theme is None:
        raise UnknownThemeError(name)
    return theme
