#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/ast/inline.py
"""Insertion of inline nodes into a partially built AST.

Inline content found directly inside a block container (for example loose
text in ``<li>`` or ``<body>``) cannot be a direct child of that container in
CommonMark; it belongs to a paragraph. ``insert_inline`` owns that policy as
well as the merging of adjacent text runs.

"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from html2commonmark.ast.nodes import Node, NodeType

logger = logging.getLogger(__name__)

# Containers that only hold blocks; loose inline content is wrapped in a paragraph
BLOCK_CONTAINER_TYPES: frozenset[NodeType] = frozenset(
    {NodeType.DOCUMENT, NodeType.BLOCK_QUOTE, NodeType.ITEM, NodeType.LIST}
)


def _inline_target(container: Node) -> Node:
    """Return the node that should receive inline children of ``container``."""
    if container.type not in BLOCK_CONTAINER_TYPES:
        return container

    last = container.last_child
    if last is not None and last.type == NodeType.PARAGRAPH and last.is_open:
        return last

    paragraph = Node(NodeType.PARAGRAPH)
    paragraph.is_open = True
    container.append_child(paragraph)
    logger.debug("Opened implicit paragraph in %s for loose inline content", container.type.value)
    return paragraph


def insert_inline(nodes: Iterable[Node], container: Optional[Node]) -> Optional[Node]:
    """Append inline ``nodes`` to ``container``.

    Parameters
    ----------
    nodes : iterable of Node
        Inline nodes, in document order
    container : Node or None
        Node being built. When it only holds blocks, the nodes go into its
        trailing implicit paragraph, which is created on demand. When None,
        the nodes are left detached.

    Returns
    -------
    Node or None
        The last node inserted, or the text node it was merged into; None
        when ``nodes`` is empty

    Notes
    -----
    A Text node that would follow another Text node is merged into it, so a
    run of text is always represented by a single node.

    """
    nodes = list(nodes)
    if not nodes:
        return None
    if container is None:
        return nodes[-1]

    target = _inline_target(container)
    last: Optional[Node] = None
    for node in nodes:
        previous = target.last_child
        if node.type == NodeType.TEXT and previous is not None and previous.type == NodeType.TEXT:
            previous.literal = (previous.literal or "") + (node.literal or "")
            last = previous
        else:
            target.append_child(node)
            last = node
    return last
