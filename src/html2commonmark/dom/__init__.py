#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/dom/__init__.py
"""DOM access for the conversion: node predicates and the tree cursor."""

from html2commonmark.dom.predicates import (
    has_ancestor,
    is_comment,
    is_element,
    is_inline,
    is_line_breaking,
    is_text,
    tag_name,
)
from html2commonmark.dom.walker import DomWalker, WalkingStep

__all__ = [
    "DomWalker",
    "WalkingStep",
    "has_ancestor",
    "is_comment",
    "is_element",
    "is_inline",
    "is_line_breaking",
    "is_text",
    "tag_name",
]
