#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2commonmark/constants.py
"""Constants shared across the html2commonmark package.

This module centralizes tag whitelists, dependency declarations and
default option values so that classification rules live in one place.

"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
DEPS_HTML_LXML = [("lxml", "lxml", "")]
DEPS_HTML_HTML5LIB = [("html5lib", "html5lib", "")]

# =============================================================================
# Parser defaults
# =============================================================================

HtmlParserBackend = Literal["html.parser", "lxml", "html5lib"]

SUPPORTED_HTML_PARSERS: frozenset[str] = frozenset({"html.parser", "lxml", "html5lib"})
DEFAULT_HTML_PARSER: HtmlParserBackend = "html.parser"

# Class prefix used by CommonMark renderers to carry a fenced code block's info string
DEFAULT_LANGUAGE_CLASS_PREFIX = "language-"

# =============================================================================
# Tag classification
# =============================================================================

# Elements rendered within a line of text
INLINE_ELEMENTS: frozenset[str] = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "b",
        "bdi",
        "bdo",
        "big",
        "br",
        "button",
        "cite",
        "code",
        "data",
        "del",
        "dfn",
        "em",
        "font",
        "i",
        "img",
        "input",
        "ins",
        "kbd",
        "label",
        "mark",
        "q",
        "s",
        "samp",
        "select",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "textarea",
        "time",
        "tt",
        "u",
        "var",
        "wbr",
    }
)

# Siblings that end a line, so adjacent text loses its whitespace on that side
LINE_BREAKING_INLINE_ELEMENTS: frozenset[str] = frozenset(
    {"br", "h1", "h2", "h3", "h4", "h5", "h6", "h7", "h8", "h9"}
)

# Text inside any of these ancestors is copied verbatim into the parent's literal
VERBATIM_TEXT_ANCESTORS: frozenset[str] = frozenset({"code"})

# Marker splitting a text run into soft-broken lines
SOFTBREAK_CHARACTER = "\n"
