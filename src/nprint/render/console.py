# topmark:header:start
#
#   project      : NPrint
#   file         : console.py
#   file_relpath : src/nprint/render/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console backend: render a style forest for a templated console API.

Browser devtools consoles style output through a format string containing one
``%c`` placeholder per styled run, followed by one CSS declaration per
placeholder. This backend produces exactly that pair.

Style combination differs from the terminal backend on purpose: a styled node
*overwrites* every declaration contributed by its subtree with its own
declaration. The outermost style therefore wins for every placeholder beneath
it; ancestor and descendant declarations are never merged.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from nprint.markup.tree import TextNode
from nprint.render.styles import StyleSheet

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nprint.markup.tree import Node

PLACEHOLDER: Final[str] = "%c"

# "%%" is a literal percent sign and "%c" a placeholder; scan left to right.
_DIRECTIVE_RE: Final[re.Pattern[str]] = re.compile(r"%([%c])")


def escape_text(text: str) -> str:
    """Double every ``%`` of a text run so it cannot form a directive."""
    return text.replace("%", "%%")


@dataclass(slots=True)
class ConsoleRenderResult:
    """Format string plus per-placeholder CSS declarations.

    Attributes:
        text (str): Format string; every text run is prefixed with ``%c`` and
            has its own ``%`` characters escaped as ``%%``.
        styles (list[str]): One CSS declaration per placeholder, in document order.
    """

    text: str = ""
    styles: list[str] = field(default_factory=list)

    def as_args(self) -> list[str]:
        """Return ``[text, *styles]``, the argument list of a console call."""
        return [self.text, *self.styles]


class ConsoleRenderer:
    """Render forests for a host console using ``%c`` templating.

    Args:
        sheet (StyleSheet | None): Named style vocabulary (defaults to the built-ins).
    """

    def __init__(self, sheet: StyleSheet | None = None) -> None:
        self.sheet = sheet if sheet is not None else StyleSheet.default()

    def render(self, nodes: Iterable[Node]) -> ConsoleRenderResult:
        """Render ``nodes`` to a format string and its declarations."""
        result = ConsoleRenderResult()
        for node in nodes:
            rendered = self._render_node(node)
            result.text += rendered.text
            result.styles.extend(rendered.styles)
        return result

    def _render_node(self, node: Node) -> ConsoleRenderResult:
        if isinstance(node, TextNode):
            return ConsoleRenderResult(PLACEHOLDER + escape_text(node.content), [""])
        declaration = self.sheet.resolve_css(node.style)
        inner = self.render(node.children)
        # Ancestor wins: replace, do not merge, what the subtree contributed.
        return ConsoleRenderResult(inner.text, [declaration] * len(inner.styles))


def render_console(nodes: Iterable[Node], sheet: StyleSheet | None = None) -> ConsoleRenderResult:
    """Render ``nodes`` with a default `ConsoleRenderer`."""
    return ConsoleRenderer(sheet).render(nodes)


def count_placeholders(text: str) -> int:
    """Count the ``%c`` placeholders of a format string, skipping ``%%`` escapes."""
    return sum(1 for match in _DIRECTIVE_RE.finditer(text) if match.group(1) == "c")


def fill_placeholders(result: ConsoleRenderResult) -> str:
    """Return the plain text of a console render (placeholders removed, ``%%`` unescaped)."""
    return _DIRECTIVE_RE.sub(lambda match: "%" if match.group(1) == "%" else "", result.text)
