#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the token-to-AST parser."""

import pytest

from markbook.ast import (
    Blockquote,
    Bold,
    BulletList,
    CodeBlock,
    Document,
    Heading,
    Image,
    InlineCode,
    Italic,
    LineBreak,
    Link,
    ListItem,
    OrderedList,
    Paragraph,
    Strikethrough,
    Text,
)
from markbook.exceptions import InvalidOptionsError
from markbook.options import MarkdownParserOptions, PlainTextOptions
from markbook.parsers import MarkdownParser, Token, TokenKind, parse, tokenize

K = TokenKind


def parse_text(text: str, **option_kwargs) -> Document:
    """Tokenize and parse ``text``."""
    options = MarkdownParserOptions(**option_kwargs)
    return parse(tokenize(text, options), options)


@pytest.mark.unit
class TestBlocks:
    """Test block-level parsing."""

    def test_empty_document(self) -> None:
        """No content tokens give an empty document."""
        assert parse_text("") == Document()

    def test_heading(self) -> None:
        """A header token becomes a Heading."""
        assert parse_text("# Title") == Document(children=(Heading(level=1, text="Title"),))

    def test_heading_text_is_verbatim(self) -> None:
        """Spaces and inline markup in a heading are kept as written."""
        assert parse_text("## Hello  World").children == (Heading(level=2, text="Hello  World"),)
        assert parse_text("# My **Bold** Title").children == (Heading(level=1, text="My **Bold** Title"),)
        assert parse_text("# a `b` c").children == (Heading(level=1, text="a `b` c"),)

    def test_heading_text_skips_non_text_tokens(self) -> None:
        """Hand-built heading lines concatenate TEXT tokens only."""
        doc = parse([Token(K.HEADER, "##"), Token(K.TEXT, "A"), Token(K.BOLD, "**"), Token(K.TEXT, "B")])
        assert doc.children == (Heading(level=2, text="AB"),)

    def test_empty_heading(self) -> None:
        """A header with no text has empty text."""
        assert parse_text("### ").children == (Heading(level=3, text=""),)

    def test_heading_level_is_clamped(self) -> None:
        """Hand-built header tokens longer than six hashes clamp to six."""
        doc = parse([Token(K.HEADER, "#########"), Token(K.TEXT, "x")])
        assert doc.children == (Heading(level=6, text="x"),)

    def test_seven_hashes_is_paragraph(self) -> None:
        """Seven hashes parse as a paragraph of plain text."""
        assert parse_text("#######  x").children == (Paragraph(children=(Text("#######  x"),)),)

    def test_paragraph_is_one_line(self) -> None:
        """Each source line is its own paragraph."""
        doc = parse_text("first\nsecond")
        assert doc.children == (
            Paragraph(children=(Text("first"),)),
            Paragraph(children=(Text("second"),)),
        )

    def test_code_block(self) -> None:
        """The code block payload splits into language and code."""
        assert parse_text("```py\nprint(1)\n```").children == (CodeBlock(code="print(1)", language="py"),)

    def test_code_block_without_newline_payload(self) -> None:
        """A hand-built payload without a newline is all code."""
        assert parse([Token(K.CODE_BLOCK, "x = 1")]).children == (CodeBlock(code="x = 1"),)

    def test_blockquote(self) -> None:
        """The marker and one space are stripped from the quote."""
        assert parse_text("> wise words").children == (Blockquote(text="wise words"),)

    def test_blockquote_without_space(self) -> None:
        """A hand-built quote with a bare marker loses only the marker."""
        assert parse([Token(K.BLOCKQUOTE, ">tight")]).children == (Blockquote(text="tight"),)

    def test_bullet_list(self) -> None:
        """Consecutive unordered items form one list."""
        assert parse_text("- one\n- two").children == (
            BulletList(items=(ListItem(children=(Text("one"),)), ListItem(children=(Text("two"),)))),
        )

    def test_ordered_list(self) -> None:
        """Consecutive ordered items form one list."""
        doc = parse_text("1. a\n2. b\n3. c")
        assert len(doc.children) == 1
        assert isinstance(doc.children[0], OrderedList)
        assert len(doc.children[0].items) == 3

    def test_lists_never_merge(self) -> None:
        """Unordered and ordered items form separate lists."""
        doc = parse_text("- a\n1. b")
        assert doc.children == (
            BulletList(items=(ListItem(children=(Text("a"),)),)),
            OrderedList(items=(ListItem(children=(Text("b"),)),)),
        )

    def test_indented_list_items_join(self) -> None:
        """Indentation between items is skipped."""
        doc = parse_text("- a\n  - b")
        assert doc.children == (
            BulletList(items=(ListItem(children=(Text("a"),)), ListItem(children=(Text("b"),)))),
        )

    def test_blank_line_ends_list(self) -> None:
        """A blank line between items starts a new list."""
        doc = parse_text("- a\n\n- b")
        assert [type(child) for child in doc.children] == [BulletList, BulletList]

    def test_list_followed_by_paragraph(self) -> None:
        """A non-item line after a list becomes a paragraph."""
        doc = parse_text("- a\ntext")
        assert doc.children == (
            BulletList(items=(ListItem(children=(Text("a"),)),)),
            Paragraph(children=(Text("text"),)),
        )

    def test_blank_lines_skipped_by_default(self) -> None:
        """Blank lines produce no nodes by default."""
        doc = parse_text("a\n\n\nb")
        assert [type(child) for child in doc.children] == [Paragraph, Paragraph]

    def test_blank_lines_emit_line_breaks(self) -> None:
        """With line breaks enabled each blank line becomes a LineBreak."""
        doc = parse_text("a\n\n\nb", emit_line_breaks=True)
        assert [type(child) for child in doc.children] == [Paragraph, LineBreak, LineBreak, Paragraph]

    def test_whitespace_only_input(self) -> None:
        """Whitespace and newlines alone give an empty document."""
        assert parse_text("   \n \t \n") == Document()


@pytest.mark.unit
class TestInline:
    """Test inline parsing."""

    def test_text_tokens_coalesce(self) -> None:
        """TEXT and WHITESPACE tokens merge into one Text node."""
        doc = parse_text("Hello   World")
        assert doc.children == (Paragraph(children=(Text("Hello   World"),)),)

    def test_bold_and_italic(self) -> None:
        """Spans become nested nodes with a single Text between them."""
        doc = parse_text("**bold** and *italic*")
        assert doc.children == (
            Paragraph(
                children=(
                    Bold(children=(Text("bold"),)),
                    Text(" and "),
                    Italic(children=(Text("italic"),)),
                )
            ),
        )

    def test_nested_spans(self) -> None:
        """Italic inside bold nests."""
        doc = parse_text("**a *b* c**")
        assert doc.children == (
            Paragraph(children=(Bold(children=(Text("a "), Italic(children=(Text("b"),)), Text(" c"))),)),
        )

    def test_strikethrough(self) -> None:
        """Tilde spans become Strikethrough."""
        doc = parse_text("~~old~~ new")
        assert doc.children == (Paragraph(children=(Strikethrough(children=(Text("old"),)), Text(" new"))),)

    def test_unclosed_span_closes_at_end(self) -> None:
        """A hand-built span without a closer closes at end of input."""
        tokens = [Token(K.BOLD, "**"), Token(K.TEXT, "open")]
        assert parse(tokens).children == (Paragraph(children=(Bold(children=(Text("open"),)),)),)

    def test_unclosed_span_closes_at_newline(self) -> None:
        """A hand-built span closes before a newline."""
        tokens = [Token(K.ITALIC, "*"), Token(K.TEXT, "a"), Token(K.NEWLINE, "\n"), Token(K.TEXT, "b")]
        assert parse(tokens).children == (
            Paragraph(children=(Italic(children=(Text("a"),)),)),
            Paragraph(children=(Text("b"),)),
        )

    def test_crossing_closer_closes_inner_spans(self) -> None:
        """A closer for an outer span also closes spans opened inside it."""
        tokens = [Token(K.BOLD, "**"), Token(K.ITALIC, "*"), Token(K.TEXT, "x"), Token(K.BOLD, "**")]
        assert parse(tokens).children == (
            Paragraph(children=(Bold(children=(Italic(children=(Text("x"),)),)),)),
        )

    def test_inline_code(self) -> None:
        """Inline code becomes InlineCode."""
        doc = parse_text("run `make`")
        assert doc.children == (Paragraph(children=(Text("run "), InlineCode(code="make"))),)

    def test_link(self) -> None:
        """A link token decodes into text and url."""
        assert parse_text("[Go](https://go.dev)").children == (
            Paragraph(children=(Link(text="Go", url="https://go.dev"),)),
        )

    def test_link_url_may_contain_separator(self) -> None:
        """Only the first separator splits the payload."""
        doc = parse([Token(K.LINK, "a|b|c")])
        assert doc.children == (Paragraph(children=(Link(text="a", url="b|c"),)),)

    def test_image(self) -> None:
        """An image token decodes into alt text and url."""
        assert parse_text("![alt](pic.png)").children == (
            Paragraph(children=(Image(alt_text="alt", url="pic.png"),)),
        )

    def test_link_inside_italic_keeps_url(self) -> None:
        """A delimiter in a link url stays part of the link."""
        assert parse_text("*see [x](a*b)*").children == (
            Paragraph(children=(Italic(children=(Text("see "), Link(text="x", url="a*b"))),)),
        )

    def test_code_span_inside_bold_keeps_delimiters(self) -> None:
        """A delimiter in a code span stays part of the code."""
        assert parse_text("**x `a**b` y**").children == (
            Paragraph(children=(Bold(children=(Text("x "), InlineCode(code="a**b"), Text(" y"))),)),
        )

    def test_unclosed_bold_is_text(self) -> None:
        """Degraded delimiters appear in the text."""
        assert parse_text("**unclosed").children == (Paragraph(children=(Text("**unclosed"),)),)

    def test_list_item_inline_content(self) -> None:
        """List items hold inline nodes."""
        doc = parse_text("- **a** b")
        assert doc.children == (BulletList(items=(ListItem(children=(Bold(children=(Text("a"),)), Text(" b"))),)),)


@pytest.mark.unit
class TestParserApi:
    """Test parser entry points."""

    def test_parse_accepts_raw_text(self) -> None:
        """MarkdownParser.parse tokenizes strings itself."""
        assert MarkdownParser().parse("# T") == Document(children=(Heading(level=1, text="T"),))

    def test_missing_eof_is_tolerated(self) -> None:
        """Token lists without EOF parse like those with it."""
        tokens = tokenize("a **b**")
        assert parse(tokens[:-1]) == parse(tokens)

    def test_empty_token_list(self) -> None:
        """An empty token list gives an empty document."""
        assert parse([]) == Document()

    def test_invalid_options_type(self) -> None:
        """Renderer options are rejected."""
        with pytest.raises(InvalidOptionsError):
            MarkdownParser(PlainTextOptions())  # type: ignore[arg-type]
