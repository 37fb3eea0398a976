# topmark:header:start
#
#   project      : NPrint
#   file         : __init__.py
#   file_relpath : src/nprint/markup/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NPrint markup language: tag grammar, tokenizer and style tree.

Public modules:
    - nprint.markup.grammar
    - nprint.markup.tokenizer
    - nprint.markup.tree
"""

from __future__ import annotations

from nprint.markup.grammar import (
    CLOSE_TAG,
    OPEN_PREFIX,
    OPEN_SUFFIX,
    closing_tag,
    match_closing_tag,
    match_opening_tag,
    opening_tag,
    wrap_with_styles,
)
from nprint.markup.tokenizer import Segment, SegmentKind, split_markup, tokenize
from nprint.markup.tree import (
    Forest,
    Node,
    StyledNode,
    TextNode,
    TreeBuilder,
    build_tree,
    forest_to_dicts,
    node_to_dict,
    parse_markup,
    plain_text,
)

__all__ = [
    "CLOSE_TAG",
    "OPEN_PREFIX",
    "OPEN_SUFFIX",
    "Forest",
    "Node",
    "Segment",
    "SegmentKind",
    "StyledNode",
    "TextNode",
    "TreeBuilder",
    "build_tree",
    "closing_tag",
    "forest_to_dicts",
    "match_closing_tag",
    "match_opening_tag",
    "node_to_dict",
    "opening_tag",
    "parse_markup",
    "plain_text",
    "split_markup",
    "tokenize",
    "wrap_with_styles",
]
