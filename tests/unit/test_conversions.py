#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_conversions.py
"""Unit tests for the two-pass DOM to AST conversion.

Tests cover:
- Block containers, headers, lists and block quotes
- Inline emphasis/strong, links and images
- Code block nesting
- Single-use build and cursor protocol violations

"""

from __future__ import annotations

from typing import Optional

import pytest
from bs4 import BeautifulSoup
from utils import children, convert

from html2commonmark.ast import NodeType, ast_to_dict
from html2commonmark.conversions import ConversionKind, convert_subtree
from html2commonmark.dom import DomWalker, WalkingStep
from html2commonmark.exceptions import ConversionError, CursorProtocolError


@pytest.mark.unit
class TestBlockContainers:
    """Tests for block-level containers."""

    def test_body_becomes_document(self) -> None:
        document = convert("")
        assert document.type == NodeType.DOCUMENT
        assert document.parent is None
        assert document.first_child is None

    def test_paragraphs_in_order(self) -> None:
        document = convert("<p>First</p>\n<p>Second</p>")

        assert ast_to_dict(document) == {
            "type": "Document",
            "children": [
                {"type": "Paragraph", "children": [{"type": "Text", "literal": "First"}]},
                {"type": "Paragraph", "children": [{"type": "Text", "literal": "Second"}]},
            ],
        }

    @pytest.mark.parametrize("level", range(1, 10))
    def test_header_level(self, level: int) -> None:
        header = convert(f"<h{level}>Title</h{level}>").first_child

        assert header.type == NodeType.HEADER
        assert header.level == level
        assert header.first_child.literal == "Title"

    def test_block_quote(self) -> None:
        document = convert("<blockquote><p>Quoted</p></blockquote>")

        assert ast_to_dict(document)["children"] == [
            {
                "type": "BlockQuote",
                "children": [{"type": "Paragraph", "children": [{"type": "Text", "literal": "Quoted"}]}],
            }
        ]

    def test_horizontal_rule_between_paragraphs(self) -> None:
        document = convert("<p>Before</p><hr><p>After</p>")
        assert [child.type for child in document.children] == [
            NodeType.PARAGRAPH,
            NodeType.HORIZONTAL_RULE,
            NodeType.PARAGRAPH,
        ]

    def test_hardbreak(self) -> None:
        paragraph = convert("<p>Line 1<br>Line 2</p>").first_child

        assert [(child.type, child.literal) for child in paragraph.children] == [
            (NodeType.TEXT, "Line 1"),
            (NodeType.HARDBREAK, None),
            (NodeType.TEXT, "Line 2"),
        ]


@pytest.mark.unit
class TestLists:
    """Tests for list kind and start index."""

    def test_ordered_list_with_start(self) -> None:
        document = convert('<ol start="3"><li>a</li></ol>')

        assert ast_to_dict(document)["children"] == [
            {
                "type": "List",
                "list_type": "ordered",
                "list_start": 3,
                "children": [
                    {
                        "type": "Item",
                        "children": [{"type": "Paragraph", "children": [{"type": "Text", "literal": "a"}]}],
                    }
                ],
            }
        ]

    def test_bullet_list_has_no_start(self) -> None:
        bullet = convert("<ul><li>a</li></ul>").first_child

        assert bullet.list_type == "bullet"
        assert bullet.list_start is None
        item = bullet.first_child
        assert item.type == NodeType.ITEM
        assert item.first_child.first_child.literal == "a"

    def test_ordered_list_defaults_to_one(self) -> None:
        assert convert("<ol><li>a</li></ol>").first_child.list_start == 1

    def test_non_numeric_start_defaults_to_one(self) -> None:
        assert convert('<ol start="x"><li>a</li></ol>').first_child.list_start == 1

    def test_whitespace_between_items_is_dropped(self) -> None:
        bullet = convert("<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>").first_child
        assert [child.type for child in bullet.children] == [NodeType.ITEM, NodeType.ITEM]

    def test_nested_list_follows_item_text(self) -> None:
        item = convert("<ul><li>a<ul><li>b</li></ul></li></ul>").first_child.first_child

        assert [child.type for child in item.children] == [NodeType.PARAGRAPH, NodeType.LIST]


@pytest.mark.unit
class TestInlineFormatting:
    """Tests for emphasis and strong spans."""

    @pytest.mark.parametrize("tag,node_type", [("i", NodeType.EMPH), ("em", NodeType.EMPH), ("b", NodeType.STRONG)])
    def test_span_tags(self, tag: str, node_type: NodeType) -> None:
        paragraph = convert(f"<p><{tag}>x</{tag}></p>").first_child

        span = paragraph.first_child
        assert span.type == node_type
        assert span.first_child.literal == "x"

    def test_nested_spans(self) -> None:
        paragraph = convert("<p><strong><em>both</em></strong></p>").first_child

        assert ast_to_dict(paragraph) == {
            "type": "Paragraph",
            "children": [
                {"type": "Strong", "children": [{"type": "Emph", "children": [{"type": "Text", "literal": "both"}]}]}
            ],
        }

    def test_loose_span_opens_paragraph(self) -> None:
        document = convert("<em>x</em> tail")

        paragraph = document.first_child
        assert paragraph.type == NodeType.PARAGRAPH
        assert [child.type for child in paragraph.children] == [NodeType.EMPH, NodeType.TEXT]
        assert paragraph.last_child.literal == " tail"


@pytest.mark.unit
class TestLinksAndImages:
    """Tests for destination/title defaults and image descriptions."""

    def test_link_without_attributes_gets_empty_strings(self) -> None:
        link = convert("<p><a>text</a></p>").first_child.first_child

        assert link.type == NodeType.LINK
        assert link.destination == ""
        assert link.title == ""
        assert link.first_child.literal == "text"

    def test_link_attributes(self) -> None:
        link = convert('<p><a href="https://example.com" title="Example">x</a></p>').first_child.first_child

        assert link.destination == "https://example.com"
        assert link.title == "Example"

    def test_image_with_alt(self) -> None:
        image = convert('<p><img src="/i.png" alt="A cat" title="Cat"></p>').first_child.first_child

        assert ast_to_dict(image) == {
            "type": "Image",
            "destination": "/i.png",
            "title": "Cat",
            "children": [{"type": "Text", "literal": "A cat"}],
        }

    def test_image_without_alt_has_no_description(self) -> None:
        image = convert("<p><img></p>").first_child.first_child

        assert image.first_child is None
        assert image.destination == ""
        assert image.title == ""

    def test_empty_alt_still_yields_text(self) -> None:
        image = convert('<p><img src="x.png" alt=""></p>').first_child.first_child
        assert image.first_child.literal == ""


@pytest.mark.unit
class TestCode:
    """Tests for code block nesting and inline code."""

    def test_code_inside_pre_enriches_code_block(self) -> None:
        document = convert('<pre><code class="language-rust">fn f(){}</code></pre>')

        assert ast_to_dict(document)["children"] == [{"type": "CodeBlock", "literal": "fn f(){}", "info": "rust"}]

    def test_code_block_without_language(self) -> None:
        block = convert("<pre><code>x = 1\n</code></pre>").first_child

        assert block.type == NodeType.CODE_BLOCK
        assert block.info == ""
        assert block.literal == "x = 1\n"
        assert block.first_child is None

    def test_empty_code_block_literal_is_initialized(self) -> None:
        block = convert('<pre><code class="language-text"></code></pre>').first_child

        assert block.literal == ""
        assert block.info == "text"

    def test_last_language_class_wins(self) -> None:
        block = convert('<pre><code class="hljs language-js language-ts">x</code></pre>').first_child
        assert block.info == "ts"

    def test_code_text_is_not_trimmed_or_split(self) -> None:
        block = convert("<pre><code>  a\n  b  </code></pre>").first_child
        assert block.literal == "  a\n  b  "

    def test_inline_code(self) -> None:
        paragraph = convert("<p>Use <code>x</code> here</p>").first_child

        assert [(child.type, child.literal) for child in paragraph.children] == [
            (NodeType.TEXT, "Use "),
            (NodeType.CODE, "x"),
            (NodeType.TEXT, " here"),
        ]
        assert children(paragraph)[1].info is None

    def test_inline_code_ignores_language_class(self) -> None:
        code = convert('<p><code class="language-py">x</code></p>').first_child.first_child
        assert code.info is None

    def test_empty_inline_code_has_empty_literal(self) -> None:
        code = convert("<p><code></code></p>").first_child.first_child
        assert code.type == NodeType.CODE
        assert code.literal == ""


@pytest.mark.unit
class TestInlineAttachment:
    """Tests for inline nodes built directly inside block containers."""

    def _item_children(self, html: str) -> list:
        item = convert(f"<ul><li>{html}</li></ul>").first_child.first_child
        return children(item)

    def test_link_in_tight_item_shares_paragraph(self) -> None:
        (paragraph,) = self._item_children('see <a href="x">here</a> now')

        assert paragraph.type == NodeType.PARAGRAPH
        assert [child.type for child in paragraph.children] == [NodeType.TEXT, NodeType.LINK, NodeType.TEXT]
        assert paragraph.last_child.literal == " now"

    def test_inline_code_in_tight_item_shares_paragraph(self) -> None:
        (paragraph,) = self._item_children("use <code>x</code> now")

        assert [(child.type, child.literal) for child in paragraph.children] == [
            (NodeType.TEXT, "use "),
            (NodeType.CODE, "x"),
            (NodeType.TEXT, " now"),
        ]

    def test_hardbreak_in_tight_item_shares_paragraph(self) -> None:
        (paragraph,) = self._item_children("a<br>b")

        assert [child.type for child in paragraph.children] == [NodeType.TEXT, NodeType.HARDBREAK, NodeType.TEXT]

    def test_leading_image_opens_paragraph(self) -> None:
        (paragraph,) = self._item_children('<img src="i.png"> caption')

        assert [child.type for child in paragraph.children] == [NodeType.IMAGE, NodeType.TEXT]

    def test_loose_link_in_body_opens_paragraph(self) -> None:
        document = convert('<a href="x">here</a><p>next</p>')

        first, second = children(document)
        assert first.type == NodeType.PARAGRAPH and first.is_open
        assert first.first_child.type == NodeType.LINK
        assert not second.is_open

    def test_block_after_inline_content_starts_new_paragraph(self) -> None:
        item_children = self._item_children("a<ul><li>b</li></ul>c")

        assert [child.type for child in item_children] == [NodeType.PARAGRAPH, NodeType.LIST, NodeType.PARAGRAPH]
        assert item_children[2].first_child.literal == "c"


class ScriptedWalker:
    """Cursor test double replaying a fixed list of steps."""

    def __init__(self, steps: list[WalkingStep]) -> None:
        self._steps = list(steps)

    @property
    def current(self) -> Optional[WalkingStep]:
        return self._steps[0] if self._steps else None

    def next(self) -> Optional[WalkingStep]:
        return self._steps.pop(0) if self._steps else None


@pytest.mark.unit
class TestConversionProtocol:
    """Tests for the discovery/build contract."""

    def test_convert_subtree_consumes_through_exit(self) -> None:
        soup = BeautifulSoup("<body><p>a</p><p>b</p></body>", "html.parser")
        first, second = soup.find_all("p")
        walker = DomWalker(soup.body)
        walker.next()

        conversion = convert_subtree(walker.next(), walker)

        assert conversion.kind is ConversionKind.PARAGRAPH
        assert conversion.dom_node is first
        assert [child.kind for child in conversion.children] == [ConversionKind.TEXT]
        assert walker.current == WalkingStep(second, True)

    def test_build_without_parent_returns_detached_node(self) -> None:
        soup = BeautifulSoup("<p>a</p>", "html.parser")
        walker = DomWalker(soup.p)

        node = convert_subtree(walker.next(), walker).build()

        assert node.type == NodeType.PARAGRAPH
        assert node.parent is None

    def test_build_is_single_use(self) -> None:
        soup = BeautifulSoup("<p>a</p>", "html.parser")
        walker = DomWalker(soup.p)
        conversion = convert_subtree(walker.next(), walker)
        conversion.build()

        with pytest.raises(ConversionError):
            conversion.build()

    def test_exiting_step_is_rejected(self) -> None:
        soup = BeautifulSoup("<p>a</p>", "html.parser")

        with pytest.raises(ConversionError):
            convert_subtree(WalkingStep(soup.p, False), DomWalker(soup.p))

    def test_missing_exit_fails_fast(self) -> None:
        soup = BeautifulSoup("<p>a</p>", "html.parser")
        text = soup.p.contents[0]
        walker = ScriptedWalker([WalkingStep(text, True), WalkingStep(text, False)])

        with pytest.raises(CursorProtocolError) as exc_info:
            convert_subtree(WalkingStep(soup.p, True), walker)
        assert exc_info.value.dom_node is soup.p

    def test_mismatched_exit_fails_fast(self) -> None:
        soup = BeautifulSoup("<p>a</p><p>b</p>", "html.parser")
        first, second = soup.find_all("p")
        walker = ScriptedWalker([WalkingStep(second, False)])

        with pytest.raises(CursorProtocolError):
            convert_subtree(WalkingStep(first, True), walker)

    def test_scripted_walker_drives_conversion(self) -> None:
        soup = BeautifulSoup("<p>a</p>", "html.parser")
        text = soup.p.contents[0]
        walker = ScriptedWalker(
            [WalkingStep(text, True), WalkingStep(text, False), WalkingStep(soup.p, False)]
        )

        node = convert_subtree(WalkingStep(soup.p, True), walker).build()

        assert ast_to_dict(node) == {"type": "Paragraph", "children": [{"type": "Text", "literal": "a"}]}
        assert walker.next() is None
