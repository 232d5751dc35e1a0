#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/conversions/classifier.py
"""Map DOM nodes to conversion categories.

The mapping is total: any element without a dedicated category, and any
comment or other non-text node, is preserved as raw markup.

"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple, Optional

from html2commonmark.dom.predicates import is_text, tag_name

if TYPE_CHECKING:
    from bs4.element import PageElement

_HEADER_TAG = re.compile(r"^h([1-9])$")


class ConversionKind(Enum):
    """Semantic categories of DOM nodes."""

    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    HEADER = "header"
    BLOCK_QUOTE = "block_quote"
    LIST = "list"
    ITEM = "item"
    CODE_BLOCK = "code_block"
    CODE = "code"
    HORIZONTAL_RULE = "horizontal_rule"
    HARDBREAK = "hardbreak"
    LINK = "link"
    IMAGE = "image"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    TEXT = "text"
    RAW = "raw"


TAG_KINDS: dict[str, ConversionKind] = {
    "a": ConversionKind.LINK,
    "br": ConversionKind.HARDBREAK,
    "body": ConversionKind.DOCUMENT,
    "pre": ConversionKind.CODE_BLOCK,
    "code": ConversionKind.CODE,
    "img": ConversionKind.IMAGE,
    "ul": ConversionKind.LIST,
    "ol": ConversionKind.LIST,
    "li": ConversionKind.ITEM,
    "p": ConversionKind.PARAGRAPH,
    "hr": ConversionKind.HORIZONTAL_RULE,
    "blockquote": ConversionKind.BLOCK_QUOTE,
    "i": ConversionKind.EMPHASIS,
    "em": ConversionKind.EMPHASIS,
    "b": ConversionKind.STRONG,
    "strong": ConversionKind.STRONG,
}


class Classification(NamedTuple):
    """Category of a DOM node; ``level`` is set for headers only."""

    kind: ConversionKind
    level: Optional[int] = None


def classify(node: PageElement) -> Classification:
    """Return the conversion category of ``node``.

    Parameters
    ----------
    node : PageElement
        Element, text or comment node

    Returns
    -------
    Classification
        The category, with the numeric level for ``h1`` to ``h9``

    Examples
    --------
        >>> from bs4 import BeautifulSoup
        >>> classify(BeautifulSoup("<h3>x</h3>", "html.parser").h3)
        Classification(kind=<ConversionKind.HEADER: 'header'>, level=3)

    """
    if is_text(node):
        return Classification(ConversionKind.TEXT)

    name = tag_name(node)
    kind = TAG_KINDS.get(name)
    if kind is not None:
        return Classification(kind)

    match = _HEADER_TAG.match(name)
    if match:
        return Classification(ConversionKind.HEADER, int(match.group(1)))

    return Classification(ConversionKind.RAW)
