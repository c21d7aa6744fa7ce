"""Depth-bounded syntax tree walks that classify definition nodes.

Both walks share one classification rule (``classify``). The point walk
prunes subtrees that do not contain the target row; the outline walk visits
every node. Classification never stops descent: nested definitions (a struct
inside a typedef, a macro inside a function) are collected too.
"""

import logging
from typing import Callable, List, NamedTuple, Optional

from ..languages import LanguageProfile
from ..parsers.base import SyntaxNode
from .models import ClassifiedDefinition

logger = logging.getLogger(__name__)

# Maximum depth for definition search to prevent runaway recursion
MAX_DEFINITION_SEARCH_DEPTH = 128


class Classification(NamedTuple):
    """Result of classifying a single node."""
    is_definition: bool
    is_typedef_child: bool
    child_typedef_flag: bool  # flag handed to this node's children


def contains_row(node: SyntaxNode, target_row: int) -> bool:
    """Check if a node contains the (zero-indexed) target row.

    A node whose span ends at column 0 of a row does not occupy that row.
    """
    start_row = node.start_point[0]
    end_row, end_col = node.end_point[0], node.end_point[1]
    
    if target_row < start_row or target_row > end_row:
        return False
    
    if target_row == end_row and end_col == 0:
        return False
    
    return True


def last_line(node: SyntaxNode) -> int:
    """1-based last line occupied by a node (same column-0 rule as contains_row)."""
    start_row = node.start_point[0]
    end_row, end_col = node.end_point[0], node.end_point[1]
    if end_col == 0 and end_row > start_row:
        return end_row
    return end_row + 1


def has_body(node: SyntaxNode, profile: LanguageProfile) -> bool:
    """Check if a compound type has a body among its direct children."""
    return any(child.type in profile.body_kinds for child in node.children)


def classify(node: SyntaxNode, profile: LanguageProfile, is_parent_typedef: bool) -> Classification:
    """Decide whether a node is a definition.

    Definition kinds always count; the alias kind additionally marks every
    descendant as living inside a typedef. Compound kinds count only when
    they carry a body, and are flagged as typedef children when an ancestor
    was the alias kind.
    """
    node_type = node.type
    
    if node_type in profile.definition_kinds:
        wraps = profile.alias_kind is not None and node_type == profile.alias_kind
        return Classification(True, False, is_parent_typedef or wraps)
    
    if node_type in profile.compound_kinds and has_body(node, profile):
        return Classification(True, is_parent_typedef, is_parent_typedef)
    
    return Classification(False, False, is_parent_typedef)


def _walk(
    node: SyntaxNode,
    profile: LanguageProfile,
    depth: int,
    is_parent_typedef: bool,
    prune: Optional[Callable[[SyntaxNode], bool]],
    record: Callable[[SyntaxNode, Classification], ClassifiedDefinition],
    definitions: List[ClassifiedDefinition],
) -> None:
    if depth >= MAX_DEFINITION_SEARCH_DEPTH:
        logger.debug(f"Depth limit {MAX_DEFINITION_SEARCH_DEPTH} reached at {node.type} (row {node.start_point[0]})")
        return
    
    if prune is not None and prune(node):
        return
    
    result = classify(node, profile, is_parent_typedef)
    if result.is_definition:
        definitions.append(record(node, result))
    
    for child in node.children:
        _walk(child, profile, depth + 1, result.child_typedef_flag, prune, record, definitions)


def _make_record(node: SyntaxNode, result: Classification, text: str = "") -> ClassifiedDefinition:
    return ClassifiedDefinition(
        kind=node.type,
        start_line=node.start_point[0] + 1,
        end_line=last_line(node),
        byte_span_size=node.end_byte - node.start_byte,
        is_typedef_child=result.is_typedef_child,
        text=text,
        node=node,
    )


def walk_point(
    root: SyntaxNode,
    source: bytes,
    target_row: int,
    profile: LanguageProfile,
) -> List[ClassifiedDefinition]:
    """Collect definitions whose span contains target_row, in pre-order.

    Each record carries the node's source text.
    """
    definitions: List[ClassifiedDefinition] = []
    
    def record(node: SyntaxNode, result: Classification) -> ClassifiedDefinition:
        text = source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")
        return _make_record(node, result, text)
    
    _walk(
        root,
        profile,
        0,
        False,
        lambda node: not contains_row(node, target_row),
        record,
        definitions,
    )
    return definitions


def walk_outline(root: SyntaxNode, profile: LanguageProfile) -> List[ClassifiedDefinition]:
    """Collect every definition in the tree, in pre-order."""
    definitions: List[ClassifiedDefinition] = []
    _walk(root, profile, 0, False, None, _make_record, definitions)
    return definitions
