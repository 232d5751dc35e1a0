#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML to CommonMark conversion.

Options are frozen dataclasses; use ``create_updated`` to derive a
modified copy.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from html2commonmark.constants import (
    DEFAULT_HTML_PARSER,
    DEFAULT_LANGUAGE_CLASS_PREFIX,
    SUPPORTED_HTML_PARSERS,
    HtmlParserBackend,
)


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


# src/html2commonmark/options.py
@dataclass(frozen=True)
class HtmlParserOptions(CloneFrozenMixin):
    """Configuration options for converting HTML to a CommonMark AST.

    Parameters
    ----------
    html_parser : {"html.parser", "lxml", "html5lib"}, default "html.parser"
        BeautifulSoup tree builder used to parse the HTML string.
        "html.parser" ships with Python; "lxml" is faster; "html5lib"
        repairs markup the way browsers do. The latter two are optional
        installs.
    language_class_prefix : str, default "language-"
        Prefix of the ``<code>`` class that names a code block's language.
        The remainder of the class becomes the code block's info string.

    Examples
    --------
        >>> options = HtmlParserOptions()
        >>> options.create_updated(html_parser="lxml").html_parser
        'lxml'

    """

    html_parser: HtmlParserBackend = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "BeautifulSoup tree builder: 'html.parser', 'lxml' or 'html5lib'",
            "choices": sorted(SUPPORTED_HTML_PARSERS),
            "importance": "advanced",
        },
    )
    language_class_prefix: str = field(
        default=DEFAULT_LANGUAGE_CLASS_PREFIX,
        metadata={
            "help": "Class prefix on <code> naming the code block language",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.html_parser not in SUPPORTED_HTML_PARSERS:
            raise ValueError(
                f"html_parser must be one of {sorted(SUPPORTED_HTML_PARSERS)}, got {self.html_parser!r}"
            )
        if not self.language_class_prefix:
            raise ValueError("language_class_prefix must not be empty")
