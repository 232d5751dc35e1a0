#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/dom/predicates.py
"""Classification predicates for BeautifulSoup DOM nodes.

BeautifulSoup is imported inside each predicate so that importing the package
does not require it; the parser front end reports a missing installation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from html2commonmark.constants import INLINE_ELEMENTS, LINE_BREAKING_INLINE_ELEMENTS

if TYPE_CHECKING:
    from bs4.element import PageElement


def is_element(node: Optional[PageElement]) -> bool:
    """Return True for element nodes."""
    from bs4.element import Tag

    return isinstance(node, Tag)


def is_comment(node: Optional[PageElement]) -> bool:
    """Return True for HTML comments."""
    from bs4.element import Comment

    return isinstance(node, Comment)


def is_text(node: Optional[PageElement]) -> bool:
    """Return True for character data.

    Comments, doctypes, CDATA sections and processing instructions are
    navigable strings in BeautifulSoup but are not text.
    """
    from bs4.element import NavigableString, PreformattedString

    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def tag_name(node: Optional[PageElement]) -> str:
    """Return the lowercase tag name of an element, or an empty string."""
    if is_element(node) and node.name:  # type: ignore[union-attr]
        return node.name.lower()  # type: ignore[union-attr]
    return ""


def is_inline(node: Optional[PageElement]) -> bool:
    """Return True when ``node`` renders within a line of text.

    Text and comments are inline; elements are inline when their tag is in
    the fixed whitelist.
    """
    if node is None:
        return False
    if is_text(node) or is_comment(node):
        return True
    return tag_name(node) in INLINE_ELEMENTS


def is_line_breaking(node: Optional[PageElement]) -> bool:
    """Return True for elements that end the current line (``br`` and headings)."""
    return tag_name(node) in LINE_BREAKING_INLINE_ELEMENTS


def has_ancestor(node: PageElement, names: frozenset[str]) -> bool:
    """Return True if any ancestor element of ``node`` has one of ``names``."""
    return any(tag_name(parent) in names for parent in node.parents)
