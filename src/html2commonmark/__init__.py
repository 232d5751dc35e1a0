"""html2commonmark - convert HTML documents into a CommonMark AST.

html2commonmark is the forward half of an HTML to Markdown pipeline. It parses
HTML with BeautifulSoup and transduces the DOM into a CommonMark abstract
syntax tree, keeping document semantics (headings, emphasis, links, images,
lists, code blocks) and applying Markdown's whitespace rules. Markup without a
Markdown equivalent is preserved verbatim as raw HTML nodes.

Requirements
------------
- Python 3.10+
- beautifulsoup4 (lxml or html5lib optional, as alternative tree builders)

Examples
--------
Convert an HTML string:

    >>> from html2commonmark import html_to_ast
    >>> document = html_to_ast("<h1>Title</h1><p>Some <strong>bold</strong> text</p>")
    >>> [node.type.value for node in document.children]
    ['Header', 'Paragraph']

Inspect the tree as a dictionary:

    >>> from html2commonmark import ast_to_dict
    >>> ast_to_dict(html_to_ast("<p>hi</p>"))
    {'type': 'Document', 'children': [{'type': 'Paragraph', 'children': [{'type': 'Text', 'literal': 'hi'}]}]}

Drive the conversion over an already parsed DOM:

    >>> from bs4 import BeautifulSoup
    >>> from html2commonmark import DomWalker, convert_subtree
    >>> soup = BeautifulSoup("<body><ul><li>a</li></ul></body>", "html.parser")
    >>> walker = DomWalker(soup.body)
    >>> conversion = convert_subtree(walker.next(), walker)
    >>> conversion.build().first_child.list_type
    'bullet'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from html2commonmark.ast import Node, NodeType, NodeWalker, ast_to_dict, ast_to_json, insert_inline
from html2commonmark.conversions import Conversion, ConversionKind, classify, convert_subtree, convert_tree
from html2commonmark.dom import DomWalker, WalkingStep
from html2commonmark.exceptions import (
    ConversionError,
    CursorProtocolError,
    DependencyError,
    Html2CommonMarkError,
    InvalidOptionsError,
    ParsingError,
    ValidationError,
)
from html2commonmark.options import HtmlParserOptions
from html2commonmark.parser import HtmlToCommonMarkParser, html_to_ast

__version__ = "0.1.0"

__all__ = [
    "Conversion",
    "ConversionError",
    "ConversionKind",
    "CursorProtocolError",
    "DependencyError",
    "DomWalker",
    "Html2CommonMarkError",
    "HtmlParserOptions",
    "HtmlToCommonMarkParser",
    "InvalidOptionsError",
    "Node",
    "NodeType",
    "NodeWalker",
    "ParsingError",
    "ValidationError",
    "WalkingStep",
    "ast_to_dict",
    "ast_to_json",
    "classify",
    "convert_subtree",
    "convert_tree",
    "html_to_ast",
    "insert_inline",
]
