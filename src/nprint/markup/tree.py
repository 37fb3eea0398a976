# topmark:header:start
#
#   project      : NPrint
#   file         : tree.py
#   file_relpath : src/nprint/markup/tree.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style tree built from tokenizer segments.

The tree is a forest: an ordered tuple of top-level nodes, each either a
`TextNode` (a literal string) or a `StyledNode` (one style encoding plus the
ordered nodes found between its opening tag and the matching closing tag).

Building is lenient:

- a closing tag with no open node is dropped;
- nodes still open at end of input are kept with whatever children they gathered.

Nodes are frozen once built. A forest belongs to the render call that created it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeAlias, Union

from nprint.config.logging import get_logger
from nprint.markup.tokenizer import Segment, SegmentKind, tokenize

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nprint.config.logging import NprintLogger

logger: NprintLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class TextNode:
    """Literal text leaf."""

    content: str


@dataclass(frozen=True, slots=True)
class StyledNode:
    """Styled subtree.

    Attributes:
        style (str): Style encoding carried by the opening tag.
        children (tuple[Node, ...]): Child nodes in document order.
    """

    style: str
    children: tuple[Node, ...] = ()


Node: TypeAlias = Union[TextNode, StyledNode]
Forest: TypeAlias = tuple[Node, ...]


@dataclass(slots=True)
class _OpenNode:
    style: str
    children: list[Node] = field(default_factory=list)


class TreeBuilder:
    """Incremental tree builder driven by an explicit open-node stack.

    Segments are consumed with `feed`; `finish` closes whatever is still open
    and returns the forest. `max_depth` records the deepest stack reached.

    Example:
        ```python
        builder = TreeBuilder()
        for segment in tokenize(text):
            builder.feed(segment)
        forest = builder.finish()
        ```
    """

    def __init__(self) -> None:
        self._roots: list[Node] = []
        self._stack: list[_OpenNode] = []
        self.max_depth: int = 0

    @property
    def depth(self) -> int:
        """Current number of open styled nodes."""
        return len(self._stack)

    def _append(self, node: Node) -> None:
        if self._stack:
            self._stack[-1].children.append(node)
        else:
            self._roots.append(node)

    def _close(self) -> None:
        open_node = self._stack.pop()
        self._append(StyledNode(open_node.style, tuple(open_node.children)))

    def feed(self, segment: Segment) -> None:
        """Consume one segment."""
        if segment.kind is SegmentKind.OPEN:
            self._stack.append(_OpenNode(segment.style or ""))
            self.max_depth = max(self.max_depth, len(self._stack))
        elif segment.kind is SegmentKind.CLOSE:
            if self._stack:
                self._close()
            else:
                logger.trace("Dropping unmatched closing tag")
        else:
            self._append(TextNode(segment.text))

    def finish(self) -> Forest:
        """Close any node left open and return the forest."""
        if self._stack:
            logger.trace("Closing %d unmatched opening tag(s) at end of input", len(self._stack))
        while self._stack:
            self._close()
        return tuple(self._roots)


def build_tree(segments: Iterable[Segment]) -> Forest:
    """Build a forest from an ordered segment sequence."""
    builder = TreeBuilder()
    for segment in segments:
        builder.feed(segment)
    return builder.finish()


def parse_markup(text: str) -> Forest:
    """Tokenize ``text`` and build its forest in one call.

    Example:
        ```python
        >>> parse_markup("Hello [mtxt-style[[red]]]world[[/mtxt-style]]!")
        (TextNode(content='Hello '), StyledNode(style='red', children=(TextNode(content='world'),)), TextNode(content='!'))
        ```
    """
    return build_tree(tokenize(text))


def plain_text(nodes: Iterable[Node]) -> str:
    """Return the concatenated text content of ``nodes``, ignoring every style."""
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, TextNode):
            parts.append(node.content)
        else:
            parts.append(plain_text(node.children))
    return "".join(parts)


def node_to_dict(node: Node) -> dict[str, Any]:
    """Return a JSON-friendly representation of ``node``."""
    if isinstance(node, TextNode):
        return {"type": "text", "content": node.content}
    return {
        "type": "styled",
        "style": node.style,
        "children": [node_to_dict(child) for child in node.children],
    }


def forest_to_dicts(nodes: Iterable[Node]) -> list[dict[str, Any]]:
    """Return JSON-friendly representations for every node of a forest."""
    return [node_to_dict(node) for node in nodes]
