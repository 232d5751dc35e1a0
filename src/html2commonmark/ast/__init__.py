#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/ast/__init__.py
"""CommonMark AST produced by the HTML conversion.

Exports the node type and walker, the inline insertion helper and the
JSON serialization functions.

"""

from html2commonmark.ast.inline import BLOCK_CONTAINER_TYPES, insert_inline
from html2commonmark.ast.nodes import (
    BLOCK_TYPES,
    CONTAINER_TYPES,
    ListType,
    Node,
    NodeType,
    NodeWalker,
    NodeWalkStep,
)
from html2commonmark.ast.serialization import ast_to_dict, ast_to_json

__all__ = [
    "BLOCK_CONTAINER_TYPES",
    "BLOCK_TYPES",
    "CONTAINER_TYPES",
    "ListType",
    "Node",
    "NodeType",
    "NodeWalkStep",
    "NodeWalker",
    "ast_to_dict",
    "ast_to_json",
    "insert_inline",
]
