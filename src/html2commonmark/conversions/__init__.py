#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/conversions/__init__.py
"""DOM to AST conversion: node classification, discovery and build passes."""

from html2commonmark.conversions.classifier import TAG_KINDS, Classification, ConversionKind, classify
from html2commonmark.conversions.strategies import Conversion, convert_subtree, convert_tree

__all__ = [
    "TAG_KINDS",
    "Classification",
    "Conversion",
    "ConversionKind",
    "classify",
    "convert_subtree",
    "convert_tree",
]
