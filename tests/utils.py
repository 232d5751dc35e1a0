"""Test utilities for the html2commonmark test suite.

Helpers to run the conversion on HTML snippets and to compare AST trees the
way a CommonMark reference tree is compared: adjacent text runs are merged
and image descriptions are flattened to plain text before comparison.
"""

from __future__ import annotations

from typing import Any

from bs4 import BeautifulSoup

from html2commonmark.ast import Node, NodeType
from html2commonmark.conversions import convert_tree


def convert(html: str) -> Node:
    """Convert an HTML body fragment with the html.parser tree builder."""
    soup = BeautifulSoup(f"<body>{html}</body>", "html.parser")
    document = convert_tree(soup.body)
    assert document is not None
    return document


def children(node: Node) -> list[Node]:
    """Return the direct children of ``node`` as a list."""
    return list(node.children)


def tree_from_dict(data: dict[str, Any]) -> Node:
    """Build a tree from the dictionary format produced by ``ast_to_dict``."""
    node = Node(NodeType(data["type"]), literal=data.get("literal"))
    node.destination = data.get("destination")
    node.title = data.get("title")
    node.info = data.get("info")
    node.level = data.get("level")
    if "list_type" in data:
        node.list_type = data["list_type"]
        node.list_start = data.get("list_start")
    for child in data.get("children", []):
        node.append_child(tree_from_dict(child))
    return node


def normalize_tree(root: Node) -> Node:
    """Merge adjacent Text nodes and reduce image descriptions to one Text node."""
    for node in list(_descendants(root)):
        if node.type == NodeType.IMAGE and node.first_child is not None:
            text = "".join(n.literal or "" for n in _descendants(node) if n is not node)
            for child in list(node.children):
                child.unlink()
            node.append_child(Node(NodeType.TEXT, literal=text))

    for node in list(_descendants(root)):
        child = node.first_child
        while child is not None:
            following = child.next
            if child.type == NodeType.TEXT and following is not None and following.type == NodeType.TEXT:
                child.literal = (child.literal or "") + (following.literal or "")
                following.unlink()
                continue
            child = following
    return root


def _descendants(root: Node):
    for step in root.walker():
        if step.entering:
            yield step.node


def assert_equal_trees(expected: Node, actual: Node) -> None:
    """Assert that two trees match in structure and node attributes.

    ``info`` counts as equal when both sides are empty or None.
    """
    expected_steps = list(expected.walker())
    actual_steps = list(actual.walker())
    described = [(s.node.type.value, s.node.literal, s.entering) for s in actual_steps]
    assert len(expected_steps) == len(actual_steps), f"Tree shapes differ: {described}"

    for expected_step, actual_step in zip(expected_steps, actual_steps):
        want, got = expected_step.node, actual_step.node
        assert got.type == want.type, f"Expected {want.type.value}, got {got.type.value}"
        assert actual_step.entering == expected_step.entering
        for name in ("literal", "level", "title", "destination"):
            assert getattr(got, name) == getattr(want, name), f"{name} of {want.type.value}"
        if want.info:
            assert got.info == want.info, f"info of {want.type.value}"
        else:
            assert not got.info, f"Expected empty info on {want.type.value}, got {got.info!r}"
        if want.type == NodeType.LIST:
            assert got.list_type == want.list_type
            assert got.list_start == want.list_start
