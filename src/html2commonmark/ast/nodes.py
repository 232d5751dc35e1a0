#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/ast/nodes.py
"""CommonMark AST node and walker.

This module defines the mutable, doubly-linked node type used as the output
of the HTML conversion. It mirrors the node model of the CommonMark reference
implementations: each node knows its parent, its first and last child and its
siblings, so converters can inspect and extend the tree they are building.

Node Types
----------
Block-level nodes:
    - Document, Paragraph, Header, BlockQuote, List, Item
    - CodeBlock, HtmlBlock, HorizontalRule

Inline nodes:
    - Text, Softbreak, Hardbreak, Emph, Strong, Code
    - Link, Image, Html

Examples
--------
Build a small tree by hand:

    >>> doc = Node(NodeType.DOCUMENT)
    >>> para = Node(NodeType.PARAGRAPH)
    >>> doc.append_child(para)
    >>> para.append_child(Node(NodeType.TEXT, literal="hello"))
    >>> [child.type for child in doc.children]
    [<NodeType.PARAGRAPH: 'Paragraph'>]

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Literal, Optional

ListType = Literal["bullet", "ordered"]


class NodeType(str, Enum):
    """Type tags of CommonMark AST nodes."""

    DOCUMENT = "Document"
    PARAGRAPH = "Paragraph"
    HEADER = "Header"
    ITEM = "Item"
    LIST = "List"
    BLOCK_QUOTE = "BlockQuote"
    CODE_BLOCK = "CodeBlock"
    CODE = "Code"
    HTML = "Html"
    HTML_BLOCK = "HtmlBlock"
    TEXT = "Text"
    SOFTBREAK = "Softbreak"
    HARDBREAK = "Hardbreak"
    EMPH = "Emph"
    STRONG = "Strong"
    LINK = "Link"
    IMAGE = "Image"
    HORIZONTAL_RULE = "HorizontalRule"


# Node types whose walker steps include an exit, even without children
CONTAINER_TYPES: frozenset[NodeType] = frozenset(
    {
        NodeType.DOCUMENT,
        NodeType.PARAGRAPH,
        NodeType.HEADER,
        NodeType.ITEM,
        NodeType.LIST,
        NodeType.BLOCK_QUOTE,
        NodeType.EMPH,
        NodeType.STRONG,
        NodeType.LINK,
        NodeType.IMAGE,
    }
)

BLOCK_TYPES: frozenset[NodeType] = frozenset(
    {
        NodeType.DOCUMENT,
        NodeType.PARAGRAPH,
        NodeType.HEADER,
        NodeType.ITEM,
        NodeType.LIST,
        NodeType.BLOCK_QUOTE,
        NodeType.CODE_BLOCK,
        NodeType.HTML_BLOCK,
        NodeType.HORIZONTAL_RULE,
    }
)


class Node:
    """A node of the CommonMark AST.

    Parameters
    ----------
    node_type : NodeType or str
        The node's type tag
    literal : str or None, default = None
        Literal text content (Text, Code, CodeBlock, Html, HtmlBlock)

    Attributes
    ----------
    destination : str or None
        Link/Image target
    title : str or None
        Link/Image title
    info : str or None
        CodeBlock info string (language)
    level : int or None
        Header level
    list_data : dict
        List metadata, keys ``type`` and ``start``
    is_open : bool
        True for a paragraph opened implicitly to hold loose inline content;
        further loose inline content may be merged into it

    """

    def __init__(self, node_type: NodeType | str, literal: Optional[str] = None) -> None:
        self.type = NodeType(node_type)
        self.literal = literal
        self.destination: Optional[str] = None
        self.title: Optional[str] = None
        self.info: Optional[str] = None
        self.level: Optional[int] = None
        self.list_data: dict[str, Any] = {}
        self.is_open = False

        self.parent: Optional[Node] = None
        self.first_child: Optional[Node] = None
        self.last_child: Optional[Node] = None
        self.prev: Optional[Node] = None
        self.next: Optional[Node] = None

    def __repr__(self) -> str:
        if self.literal is not None:
            return f"Node({self.type.value}, literal={self.literal!r})"
        return f"Node({self.type.value})"

    @property
    def is_container(self) -> bool:
        """Whether the walker emits an exit step for this node."""
        return self.type in CONTAINER_TYPES or self.first_child is not None

    @property
    def is_block(self) -> bool:
        """Whether this node is block-level."""
        return self.type in BLOCK_TYPES

    @property
    def children(self) -> Iterator[Node]:
        """Iterate over the direct children in document order."""
        child = self.first_child
        while child is not None:
            # Capture the sibling first so callers may unlink while iterating
            following = child.next
            yield child
            child = following

    @property
    def list_type(self) -> Optional[ListType]:
        """List kind, ``"bullet"`` or ``"ordered"``."""
        return self.list_data.get("type")

    @list_type.setter
    def list_type(self, value: Optional[ListType]) -> None:
        self.list_data["type"] = value

    @property
    def list_start(self) -> Optional[int]:
        """Start index of an ordered list."""
        return self.list_data.get("start")

    @list_start.setter
    def list_start(self, value: Optional[int]) -> None:
        self.list_data["start"] = value

    def append_child(self, child: Node) -> None:
        """Append ``child`` as the last child, detaching it from any previous parent."""
        child.unlink()
        child.parent = self
        if self.last_child is not None:
            self.last_child.next = child
            child.prev = self.last_child
            self.last_child = child
        else:
            self.first_child = child
            self.last_child = child

    def unlink(self) -> None:
        """Detach this node (and its subtree) from its parent and siblings."""
        if self.prev is not None:
            self.prev.next = self.next
        elif self.parent is not None:
            self.parent.first_child = self.next
        if self.next is not None:
            self.next.prev = self.prev
        elif self.parent is not None:
            self.parent.last_child = self.prev
        self.parent = None
        self.next = None
        self.prev = None

    def walker(self) -> NodeWalker:
        """Return a pre-order walker rooted at this node."""
        return NodeWalker(self)


@dataclass(frozen=True)
class NodeWalkStep:
    """One event of an AST walk."""

    node: Node
    entering: bool


class NodeWalker:
    """Pre-order walker over an AST subtree.

    Container nodes produce an entering and an exiting step; leaf nodes only
    an entering step. ``next()`` returns ``None`` once the root has been left.

    Parameters
    ----------
    root : Node
        Root of the subtree to walk

    """

    def __init__(self, root: Node) -> None:
        self.root = root
        self._current: Optional[Node] = root
        self._entering = True

    def __iter__(self) -> Iterator[NodeWalkStep]:
        step = self.next()
        while step is not None:
            yield step
            step = self.next()

    def next(self) -> Optional[NodeWalkStep]:
        """Advance and return the next step, or ``None`` when exhausted."""
        current = self._current
        entering = self._entering
        if current is None:
            return None

        if entering and current.is_container:
            if current.first_child is not None:
                self._current = current.first_child
                self._entering = True
            else:
                self._entering = False
        elif current is self.root:
            self._current = None
        elif current.next is None:
            self._current = current.parent
            self._entering = False
        else:
            self._current = current.next
            self._entering = True

        return NodeWalkStep(current, entering)
