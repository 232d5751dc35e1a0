#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/ast/serialization.py
"""JSON serialization for AST nodes.

Converts a CommonMark AST into plain dictionaries or JSON, which is handy
for debugging conversions and for comparing trees in tests.

Examples
--------
    >>> from html2commonmark.ast import Node, NodeType
    >>> from html2commonmark.ast.serialization import ast_to_dict
    >>> heading = Node(NodeType.HEADER)
    >>> heading.level = 2
    >>> ast_to_dict(heading)
    {'type': 'Header', 'level': 2}

"""

from __future__ import annotations

import json
from typing import Any

from html2commonmark.ast.nodes import Node, NodeType

_OPTIONAL_FIELDS = ("literal", "destination", "title", "info", "level")


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its subtree to a dictionary.

    Only fields that carry a value are included; ``children`` is omitted for
    childless nodes. List nodes additionally report ``list_type`` and
    ``list_start``.

    Parameters
    ----------
    node : Node
        Root of the subtree to serialize

    Returns
    -------
    dict
        Nested dictionary representation

    """
    result: dict[str, Any] = {"type": node.type.value}
    for name in _OPTIONAL_FIELDS:
        value = getattr(node, name)
        if value is not None:
            result[name] = value

    if node.type == NodeType.LIST:
        result["list_type"] = node.list_type
        if node.list_start is not None:
            result["list_start"] = node.list_start

    children = [ast_to_dict(child) for child in node.children]
    if children:
        result["children"] = children
    return result


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node and its subtree to a JSON string.

    Parameters
    ----------
    node : Node
        Root of the subtree to serialize
    indent : int or None, default = None
        Indentation passed through to ``json.dumps``

    Returns
    -------
    str
        JSON document

    """
    return json.dumps(ast_to_dict(node), indent=indent, ensure_ascii=False)
