#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/conversions/strategies.py
"""Two-pass conversion of a DOM subtree into a CommonMark AST.

The discovery pass drains a ``DomWalker`` through one node's subtree and
captures a tree of ``Conversion`` records, one per relevant DOM node. The
build pass then materializes AST nodes from those records, top-down.
Keeping the passes apart lets a record look at the AST node its parent has
already produced: ``<code>`` inside ``<pre>`` enriches the enclosing code
block instead of nesting a second code node in it.

Raw markup (elements without a Markdown equivalent, and comments) is
captured verbatim during discovery; its subtree is skipped, never converted.

Examples
--------
    >>> from bs4 import BeautifulSoup
    >>> from html2commonmark.dom import DomWalker
    >>> soup = BeautifulSoup("<body><h2>Title</h2></body>", "html.parser")
    >>> document = convert_tree(soup.body)
    >>> document.first_child.type, document.first_child.level
    (<NodeType.HEADER: 'Header'>, 2)

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from html2commonmark.ast.inline import insert_inline
from html2commonmark.ast.nodes import Node, NodeType
from html2commonmark.constants import (
    DEFAULT_LANGUAGE_CLASS_PREFIX,
    SOFTBREAK_CHARACTER,
    VERBATIM_TEXT_ANCESTORS,
)
from html2commonmark.conversions.classifier import ConversionKind, classify
from html2commonmark.dom.predicates import (
    has_ancestor,
    is_comment,
    is_element,
    is_inline,
    is_line_breaking,
    tag_name,
)
from html2commonmark.dom.walker import DomWalker, WalkingStep
from html2commonmark.exceptions import ConversionError, CursorProtocolError

if TYPE_CHECKING:
    from bs4.element import PageElement

logger = logging.getLogger(__name__)

# Kinds materialized as a node of a fixed type
CONTAINER_NODE_TYPES: dict[ConversionKind, NodeType] = {
    ConversionKind.DOCUMENT: NodeType.DOCUMENT,
    ConversionKind.PARAGRAPH: NodeType.PARAGRAPH,
    ConversionKind.HEADER: NodeType.HEADER,
    ConversionKind.BLOCK_QUOTE: NodeType.BLOCK_QUOTE,
    ConversionKind.LIST: NodeType.LIST,
    ConversionKind.ITEM: NodeType.ITEM,
    ConversionKind.CODE_BLOCK: NodeType.CODE_BLOCK,
    ConversionKind.HORIZONTAL_RULE: NodeType.HORIZONTAL_RULE,
    ConversionKind.HARDBREAK: NodeType.HARDBREAK,
    ConversionKind.LINK: NodeType.LINK,
    ConversionKind.IMAGE: NodeType.IMAGE,
}

INLINE_NODE_TYPES: dict[ConversionKind, NodeType] = {
    ConversionKind.EMPHASIS: NodeType.EMPH,
    ConversionKind.STRONG: NodeType.STRONG,
}


@dataclass
class Conversion:
    """Captured conversion of one DOM node.

    Parameters
    ----------
    kind : ConversionKind
        Category assigned by the classifier
    dom_node : PageElement
        The DOM node this record mirrors
    children : list of Conversion
        Records for the node's children, in document order
    level : int or None
        Header level, for ``h1`` to ``h9``
    raw : Node or None
        Pre-built raw markup node, for the raw fallback
    language_class_prefix : str
        Class prefix naming a code block's language

    Notes
    -----
    A record is single-use: ``build()`` may be called exactly once.

    """

    kind: ConversionKind
    dom_node: PageElement
    children: list[Conversion] = field(default_factory=list)
    level: Optional[int] = None
    raw: Optional[Node] = None
    language_class_prefix: str = DEFAULT_LANGUAGE_CLASS_PREFIX
    _built: bool = field(default=False, init=False, repr=False)

    def build(self, container: Optional[Node] = None) -> Optional[Node]:
        """Materialize this record's AST nodes into ``container``.

        Parameters
        ----------
        container : Node or None, default = None
            AST node produced by the parent record. None only at the root.

        Returns
        -------
        Node or None
            The node produced or enriched, or None when the record produced
            nothing (blank text, unsupported raw nodes)

        Raises
        ------
        ConversionError
            If the record has already been built

        """
        if self._built:
            raise ConversionError(f"Conversion of <{tag_name(self.dom_node) or self.kind.value}> was already built")
        self._built = True
        return _BUILDERS[self.kind](self, container)


# =============================================================================
# Discovery pass
# =============================================================================


def convert_subtree(
    step: WalkingStep,
    walker: DomWalker,
    language_class_prefix: str = DEFAULT_LANGUAGE_CLASS_PREFIX,
) -> Conversion:
    """Capture the conversion of the node entered by ``step``.

    Drains ``walker`` through the node's whole subtree, recursing into its
    children, and returns once the node's own exiting step was consumed.

    Parameters
    ----------
    step : WalkingStep
        The entering step just returned by ``walker``
    walker : DomWalker
        Cursor positioned right after ``step``
    language_class_prefix : str, default = "language-"
        Class prefix naming a code block's language

    Returns
    -------
    Conversion
        The captured record, ready to be built

    Raises
    ------
    ConversionError
        If ``step`` is an exiting step
    CursorProtocolError
        If the walker runs out, or exits a different node, before leaving
        the entered node

    """
    if not step.entering:
        raise ConversionError(f"Conversion must start at an entering step, got the exit of {step.node!r:.80}")

    kind, level = classify(step.node)
    conversion = Conversion(kind, step.node, level=level, language_class_prefix=language_class_prefix)
    if kind is ConversionKind.RAW:
        _discover_raw(conversion, walker)
    else:
        conversion.children = _discover_children(step.node, walker, language_class_prefix)
    return conversion


def _discover_children(node: PageElement, walker: DomWalker, language_class_prefix: str) -> list[Conversion]:
    children: list[Conversion] = []
    while True:
        step = walker.next()
        if step is None:
            raise CursorProtocolError(f"Cursor exhausted before leaving {node!r:.80}", dom_node=node)
        if not step.entering:
            break
        children.append(convert_subtree(step, walker, language_class_prefix))

    if step.node is not node:
        raise CursorProtocolError(f"Expected the exit of {node!r:.80}, got the exit of {step.node!r:.80}", dom_node=node)
    return children


def _is_inline_context(element: PageElement, walker: DomWalker) -> bool:
    """Check the element and its descendants for inline-ness, advancing the walker.

    Stops at the first block-level node; otherwise stops at the element's exit.
    """
    inline = is_inline(element)
    step = walker.current
    while inline and step is not None and step.node is not element:
        inline = is_inline(step.node)
        walker.next()
        step = walker.current

    if step is None:
        raise CursorProtocolError(f"Cursor exhausted inside raw markup {element!r:.80}", dom_node=element)
    return inline


def _discover_raw(conversion: Conversion, walker: DomWalker) -> None:
    node = conversion.dom_node
    if is_element(node):
        node_type = NodeType.HTML if _is_inline_context(node, walker) else NodeType.HTML_BLOCK
        conversion.raw = Node(node_type, literal=str(node))
        walker.skip_subtree(node)
        logger.debug("Preserving <%s> as %s", tag_name(node), node_type.value)
    elif is_comment(node):
        conversion.raw = Node(NodeType.HTML, literal=f"<!--{node}-->")
        _discover_children(node, walker, conversion.language_class_prefix)
    else:
        # Doctype, CDATA, processing instruction
        _discover_children(node, walker, conversion.language_class_prefix)
        logger.debug("Dropping unsupported %s node", type(node).__name__)


# =============================================================================
# Build pass
# =============================================================================


def _attribute(conversion: Conversion, name: str) -> Optional[str]:
    value = conversion.dom_node.get(name)  # type: ignore[union-attr]
    if isinstance(value, list):
        return " ".join(value)
    return value


def _attach(node: Node, container: Optional[Node]) -> None:
    # Inline nodes never sit directly in a block container; insert_inline opens a paragraph for them
    if container is None:
        return
    if node.is_block:
        container.append_child(node)
    else:
        insert_inline([node], container)


def _build_children(conversion: Conversion, node: Node) -> None:
    for child in conversion.children:
        child.build(node)


def _build_container(conversion: Conversion, container: Optional[Node]) -> Node:
    node = Node(CONTAINER_NODE_TYPES[conversion.kind])
    _attach(node, container)
    _build_children(conversion, node)
    return node


def _build_link(conversion: Conversion, container: Optional[Node]) -> Node:
    node = _build_container(conversion, container)
    node.destination = _attribute(conversion, "href") or ""
    node.title = _attribute(conversion, "title") or ""
    return node


def _build_header(conversion: Conversion, container: Optional[Node]) -> Node:
    node = _build_container(conversion, container)
    node.level = conversion.level
    return node


def _build_image(conversion: Conversion, container: Optional[Node]) -> Node:
    node = _build_container(conversion, container)
    alt = _attribute(conversion, "alt")
    if alt is not None:
        node.append_child(Node(NodeType.TEXT, literal=alt))
    node.destination = _attribute(conversion, "src") or ""
    node.title = _attribute(conversion, "title") or ""
    return node


def _parse_list_start(value: Optional[str]) -> int:
    if value is None:
        return 1
    try:
        return int(value.strip())
    except ValueError:
        logger.debug("Ignoring non-numeric list start %r", value)
        return 1


def _build_list(conversion: Conversion, container: Optional[Node]) -> Node:
    node = _build_container(conversion, container)
    if tag_name(conversion.dom_node) == "ol":
        node.list_type = "ordered"
        node.list_start = _parse_list_start(_attribute(conversion, "start"))
    else:
        node.list_type = "bullet"
    return node


def _build_inline(conversion: Conversion, container: Optional[Node]) -> Node:
    node = Node(INLINE_NODE_TYPES[conversion.kind])
    _build_children(conversion, node)
    insert_inline([node], container)
    return node


def _should_trim(sibling: Optional[PageElement]) -> bool:
    return sibling is None or not is_inline(sibling) or is_line_breaking(sibling)


def _trimmed_text(text_node: PageElement) -> str:
    # Whitespace next to an inline sibling is significant: "<i>one</i> two" keeps its space
    text = str(text_node)
    if _should_trim(text_node.previous_sibling):
        text = text.lstrip()
    if _should_trim(text_node.next_sibling):
        text = text.rstrip()
    return text


def _build_text(conversion: Conversion, container: Optional[Node]) -> Optional[Node]:
    text_node = conversion.dom_node
    if has_ancestor(text_node, VERBATIM_TEXT_ANCESTORS):
        if container is not None:
            container.literal = str(text_node)
        return None

    text = _trimmed_text(text_node)
    if not text:
        return None

    nodes: list[Node] = []
    lines = text.split(SOFTBREAK_CHARACTER)
    for index, line in enumerate(lines):
        if line:
            nodes.append(Node(NodeType.TEXT, literal=line))
        if index < len(lines) - 1:
            nodes.append(Node(NodeType.SOFTBREAK))
    return insert_inline(nodes, container)


def _enrich_code_block(conversion: Conversion, node: Node) -> None:
    if node.type != NodeType.CODE_BLOCK or not is_element(conversion.dom_node):
        return

    prefix = conversion.language_class_prefix
    classes = conversion.dom_node.get("class") or []  # type: ignore[union-attr]
    if isinstance(classes, str):
        classes = classes.split()

    info = ""
    for class_name in classes:
        if class_name.startswith(prefix):
            info = class_name[len(prefix) :]
    node.info = info
    node.literal = ""


def _build_code(conversion: Conversion, container: Optional[Node]) -> Node:
    if container is not None and container.type == NodeType.CODE_BLOCK:
        # <pre><code>: the enclosing <pre> already produced the code block
        target = container
    else:
        target = Node(NodeType.CODE, literal="")
        _attach(target, container)
    _enrich_code_block(conversion, target)
    _build_children(conversion, target)
    return target


def _build_raw(conversion: Conversion, container: Optional[Node]) -> Optional[Node]:
    node = conversion.raw
    if node is not None:
        _attach(node, container)
    return node


_BUILDERS: dict[ConversionKind, Callable[[Conversion, Optional[Node]], Optional[Node]]] = {
    ConversionKind.DOCUMENT: _build_container,
    ConversionKind.PARAGRAPH: _build_container,
    ConversionKind.BLOCK_QUOTE: _build_container,
    ConversionKind.ITEM: _build_container,
    ConversionKind.CODE_BLOCK: _build_container,
    ConversionKind.HORIZONTAL_RULE: _build_container,
    ConversionKind.HARDBREAK: _build_container,
    ConversionKind.HEADER: _build_header,
    ConversionKind.LIST: _build_list,
    ConversionKind.LINK: _build_link,
    ConversionKind.IMAGE: _build_image,
    ConversionKind.EMPHASIS: _build_inline,
    ConversionKind.STRONG: _build_inline,
    ConversionKind.TEXT: _build_text,
    ConversionKind.CODE: _build_code,
    ConversionKind.RAW: _build_raw,
}


def convert_tree(root: PageElement, language_class_prefix: str = DEFAULT_LANGUAGE_CLASS_PREFIX) -> Optional[Node]:
    """Convert the DOM subtree rooted at ``root`` into an AST.

    Parameters
    ----------
    root : PageElement
        Root of the subtree, normally the ``<body>`` element
    language_class_prefix : str, default = "language-"
        Class prefix naming a code block's language

    Returns
    -------
    Node or None
        The AST produced for ``root``; a Document when ``root`` is ``<body>``

    """
    walker = DomWalker(root)
    step = walker.next()
    assert step is not None
    conversion = convert_subtree(step, walker, language_class_prefix)
    return conversion.build()
