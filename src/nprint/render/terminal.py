# topmark:header:start
#
#   project      : NPrint
#   file         : terminal.py
#   file_relpath : src/nprint/render/terminal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal backend: render a style forest to one ANSI-styled string.

Each styled node renders its children to an inner string and wraps it with the
`yachalk` styling resolved from its encoding. Styles therefore nest naturally;
an unresolved style leaves its own content unstyled without affecting ancestors.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `TerminalRenderer`: renderer bound to a style sheet and a chalk factory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from yachalk import chalk

from nprint.config.logging import get_logger
from nprint.markup.tree import TextNode
from nprint.render.styles import StyleSheet, expand_hex, match_bg_hex_style, match_hex_style

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nprint.markup.tree import Node, StyledNode

logger = get_logger(__name__)


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Designed to be compatible with `yachalk.ChalkBuilder.__call__`, which
    accepts a variadic list of arguments and a `sep` keyword. NPrint always
    calls colorizers with a single string.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string."""
        ...


class _Composed:
    """Colorizer applying several colorizers in order (first innermost)."""

    def __init__(self, colorizers: list[Colorizer]) -> None:
        self._colorizers = colorizers

    def __call__(self, *args: object, sep: str = " ") -> str:
        text = sep.join(str(arg) for arg in args)
        for colorizer in self._colorizers:
            text = colorizer(text)
        return text


def resolve_colorizer(
    style: str,
    sheet: StyleSheet,
    factory: Any = chalk,
    _seen: frozenset[str] = frozenset(),
) -> Colorizer | None:
    """Resolve a style encoding to a terminal colorizer.

    Args:
        style (str): Style encoding.
        sheet (StyleSheet): Named style vocabulary.
        factory (Any): `yachalk` chalk factory providing the builders.

    Returns:
        Colorizer | None: The colorizer, or None when the style is unresolved.
    """
    entry = sheet.get(style)
    if entry is not None:
        if entry.chalk_attr:
            return getattr(factory, entry.chalk_attr)
        if style in _seen:
            logger.trace("Ignoring recursive style composition for %r", style)
            return None
        parts = [
            colorizer
            for colorizer in (
                resolve_colorizer(part, sheet, factory, _seen | {style}) for part in entry.compose
            )
            if colorizer is not None
        ]
        return _Composed(parts) if parts else None

    literal = match_hex_style(style)
    if literal is not None:
        return factory.hex(expand_hex(literal))

    literal = match_bg_hex_style(style)
    if literal is not None:
        return factory.bg_hex(expand_hex(literal))

    logger.trace("Unresolved terminal style %r", style)
    return None


class TerminalRenderer:
    """Render forests for ANSI-capable terminals.

    Args:
        sheet (StyleSheet | None): Named style vocabulary (defaults to the built-ins).
        factory (Any): `yachalk` chalk factory; defaults to the shared ``chalk``.
        enable_color (bool): When False, every style renders as identity.
    """

    def __init__(
        self,
        sheet: StyleSheet | None = None,
        *,
        factory: Any = chalk,
        enable_color: bool = True,
    ) -> None:
        self.sheet = sheet if sheet is not None else StyleSheet.default()
        self.factory = factory
        self.enable_color = enable_color

    def render(self, nodes: Iterable[Node]) -> str:
        """Render ``nodes`` to a single string."""
        return "".join(self._render_node(node) for node in nodes)

    def _render_node(self, node: Node) -> str:
        if isinstance(node, TextNode):
            return node.content
        return self._render_styled(node)

    def _render_styled(self, node: StyledNode) -> str:
        inner = self.render(node.children)
        if not self.enable_color:
            return inner
        colorizer = resolve_colorizer(node.style, self.sheet, self.factory)
        if colorizer is None:
            return inner
        return colorizer(inner)


def render_terminal(nodes: Iterable[Node], sheet: StyleSheet | None = None) -> str:
    """Render ``nodes`` with a default `TerminalRenderer`."""
    return TerminalRenderer(sheet).render(nodes)
