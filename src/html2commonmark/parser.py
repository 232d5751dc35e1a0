#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/parser.py
"""HTML to CommonMark AST parser.

This module is the front end of the conversion: it loads HTML from a string,
bytes, a file path or a file-like object, parses it into a BeautifulSoup DOM
and hands the ``<body>`` element to the two-pass DOM to AST conversion.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Union

from html2commonmark.ast.nodes import Node
from html2commonmark.constants import DEPS_HTML, DEPS_HTML_HTML5LIB, DEPS_HTML_LXML
from html2commonmark.conversions.strategies import convert_tree
from html2commonmark.exceptions import DependencyError, InvalidOptionsError, ParsingError, ValidationError
from html2commonmark.options import HtmlParserOptions
from html2commonmark.utils.decorators import check_dependencies, debug_timer, requires_dependencies

if TYPE_CHECKING:
    from bs4 import BeautifulSoup
    from bs4.element import Tag

logger = logging.getLogger(__name__)

HtmlInput = Union[str, Path, IO[bytes], IO[str], bytes]

_TREE_BUILDER_DEPS = {
    "lxml": DEPS_HTML_LXML,
    "html5lib": DEPS_HTML_HTML5LIB,
}


class HtmlToCommonMarkParser:
    """Convert HTML to a CommonMark AST.

    Parameters
    ----------
    options : HtmlParserOptions or None, default = None
        Conversion options

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an ``HtmlParserOptions`` instance

    Examples
    --------
        >>> parser = HtmlToCommonMarkParser()
        >>> document = parser.convert_to_ast("<p>Hello <em>world</em></p>")
        >>> [child.type.value for child in document.first_child.children]
        ['Text', 'Emph']

    """

    def __init__(self, options: HtmlParserOptions | None = None):
        """Initialize the parser with options."""
        if options is not None and not isinstance(options, HtmlParserOptions):
            raise InvalidOptionsError(
                converter_name="html",
                expected_type=HtmlParserOptions,
                received_type=type(options),
            )
        self.options: HtmlParserOptions = options or HtmlParserOptions()

    @requires_dependencies("html", DEPS_HTML)
    def parse(self, input_data: HtmlInput) -> Node:
        """Parse an HTML document into a CommonMark AST.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            The HTML to parse. Can be:
            - HTML string content
            - File path (str or Path)
            - File-like object in binary or text mode
            - Raw HTML bytes (encoding is detected)

        Returns
        -------
        Node
            The Document node

        Raises
        ------
        ParsingError
            If the input cannot be read or decoded
        ValidationError
            If the input type is not supported
        DependencyError
            If beautifulsoup4 or the selected tree builder is not installed

        """
        html_content = self._load_text_content(input_data)
        return self.convert_to_ast(html_content)

    @requires_dependencies("html", DEPS_HTML)
    def convert_to_ast(self, html_content: str) -> Node:
        """Convert an HTML string to a CommonMark AST.

        Line endings are normalized first: "\\r\\n" and lone "\\r" become
        "\\n", as in the HTML input stream preprocessing. The "html.parser"
        tree builder does not do this itself.

        Parameters
        ----------
        html_content : str
            HTML content to convert

        Returns
        -------
        Node
            The Document node

        """
        html_content = html_content.replace("\r\n", "\n").replace("\r", "\n")
        soup = self._parse_dom(html_content)
        body = self._find_body(soup)

        with debug_timer(logger, "Converting HTML to CommonMark AST"):
            document = convert_tree(body, self.options.language_class_prefix)

        assert document is not None
        return document

    def _parse_dom(self, html_content: str) -> BeautifulSoup:
        from bs4 import BeautifulSoup, FeatureNotFound

        tree_builder = self.options.html_parser
        if tree_builder in _TREE_BUILDER_DEPS:
            check_dependencies("html", _TREE_BUILDER_DEPS[tree_builder])

        try:
            return BeautifulSoup(html_content, tree_builder)
        except FeatureNotFound as e:
            raise DependencyError(
                converter_name="html",
                missing_packages=[(tree_builder, "")],
                message=f"Selected HtmlParserOptions.html_parser not found: {e}.",
            ) from e

    @staticmethod
    def _find_body(soup: BeautifulSoup) -> Tag:
        """Return the ``<body>`` element, creating one around loose content if needed.

        ``html.parser`` does not add the implied ``<html>``/``<body>`` wrapper
        for fragments, so the top-level content, minus ``<head>`` and the
        doctype, is moved into a new ``<body>``.
        """
        from bs4.element import Doctype, Tag

        body = soup.find("body")
        if isinstance(body, Tag):
            return body

        html_element = soup.find("html")
        container = html_element if isinstance(html_element, Tag) else soup
        body = soup.new_tag("body")
        for child in list(container.contents):
            if isinstance(child, Doctype) or (isinstance(child, Tag) and child.name == "head"):
                continue
            body.append(child.extract())
        container.append(body)
        logger.debug("No <body> element found; wrapped top-level content in one")
        return body

    @staticmethod
    def _decode(data: bytes) -> str:
        from bs4 import UnicodeDammit

        dammit = UnicodeDammit(data, is_html=True)
        if dammit.unicode_markup is None:
            raise ParsingError("Could not detect the encoding of the HTML input", parsing_stage="loading")
        logger.debug("Decoded HTML input as %s", dammit.original_encoding)
        return dammit.unicode_markup

    @classmethod
    def _load_text_content(cls, input_data: HtmlInput) -> str:
        """Load HTML text from the supported input types."""
        if isinstance(input_data, bytes):
            return cls._decode(input_data)

        if isinstance(input_data, Path):
            try:
                return cls._decode(input_data.read_bytes())
            except OSError as e:
                raise ParsingError(f"Could not read {input_data}", parsing_stage="loading", original_error=e) from e

        if isinstance(input_data, str):
            # Long strings and strings with newlines cannot be paths
            if len(input_data) <= 260 and "\n" not in input_data and "<" not in input_data:
                try:
                    path = Path(input_data)
                    if path.is_file():
                        return cls._decode(path.read_bytes())
                except OSError:
                    pass
            return input_data

        if hasattr(input_data, "read"):
            content = input_data.read()
            if isinstance(content, bytes):
                return cls._decode(content)
            return content

        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )


def html_to_ast(input_data: HtmlInput, options: HtmlParserOptions | None = None) -> Node:
    """Convert HTML to a CommonMark AST Document.

    Parameters
    ----------
    input_data : str, Path, IO[bytes], IO[str] or bytes
        HTML content, a path to an HTML file, or a file-like object
    options : HtmlParserOptions or None, default = None
        Conversion options

    Returns
    -------
    Node
        The Document node

    Examples
    --------
        >>> document = html_to_ast("<h1>Title</h1>")
        >>> document.first_child.level
        1

    """
    return HtmlToCommonMarkParser(options).parse(input_data)
