"""One-line signatures for outline entries.

Each language registers a strategy that renders a classified node; any kind
a strategy does not recognise falls back to the node's first source line.
"""

import re
from typing import Callable, Dict

from ..languages import Lang
from ..parsers.base import SyntaxNode

SignatureStrategy = Callable[[SyntaxNode, bytes], str]

_WHITESPACE = re.compile(r"\s+")


def node_text(node: SyntaxNode, source: bytes) -> str:
    """Source text covered by a node."""
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def collapse_whitespace(text: str) -> str:
    """Replace every whitespace run (newlines included) with one space."""
    return _WHITESPACE.sub(" ", text).strip()


def first_line(node: SyntaxNode, source: bytes) -> str:
    """First line of a node's source, trimmed."""
    return node_text(node, source).split("\n", 1)[0].strip()


# C

_C_COMPOUND_KEYWORDS = {
    "struct_specifier": "struct",
    "union_specifier": "union",
    "enum_specifier": "enum",
}


def _c_compound(node: SyntaxNode, source: bytes) -> str:
    keyword = _C_COMPOUND_KEYWORDS[node.type]
    name = node.child_by_field_name("name")
    if name is None:
        return f"{keyword} {{...}}"
    return f"{keyword} {node_text(name, source)}"


def _c_function(node: SyntaxNode, source: bytes) -> str:
    declarator = node.child_by_field_name("declarator")
    if declarator is None:
        return first_line(node, source)
    
    type_node = node.child_by_field_name("type")
    parts = []
    if type_node is not None:
        parts.append(collapse_whitespace(node_text(type_node, source)))
    parts.append(collapse_whitespace(node_text(declarator, source)))
    return " ".join(part for part in parts if part)


def _c_typedef(node: SyntaxNode, source: bytes) -> str:
    type_node = node.child_by_field_name("type")
    if type_node is None:
        type_text = ""
    elif type_node.type in _C_COMPOUND_KEYWORDS:
        type_text = _c_compound(type_node, source)
    else:
        type_text = collapse_whitespace(node_text(type_node, source))
    
    declarators = ", ".join(
        collapse_whitespace(node_text(d, source))
        for d in node.children_by_field_name("declarator")
    )
    
    if type_text and declarators:
        return f"typedef {type_text} {declarators}"
    if type_text:
        return f"typedef {type_text}"
    if declarators:
        return f"typedef {declarators}"
    return first_line(node, source)


def render_c_signature(node: SyntaxNode, source: bytes) -> str:
    """Render a C definition node as a one-line signature."""
    if node.type == "function_definition":
        return _c_function(node, source)
    if node.type == "type_definition":
        return _c_typedef(node, source)
    if node.type in _C_COMPOUND_KEYWORDS:
        return _c_compound(node, source)
    # preproc_def, preproc_function_def and anything else
    return first_line(node, source)


_STRATEGIES: Dict[Lang, SignatureStrategy] = {
    Lang.C: render_c_signature,
}


def render_signature(node: SyntaxNode, source: bytes, lang: Lang) -> str:
    """Render a node with its language's strategy."""
    strategy = _STRATEGIES.get(Lang(lang))
    if strategy is None:
        return first_line(node, source)
    return strategy(node, source)
