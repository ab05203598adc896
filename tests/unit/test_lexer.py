#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the markup lexer."""

import pytest

from markbook.exceptions import InvalidOptionsError
from markbook.options import HtmlRendererOptions, MarkdownParserOptions
from markbook.parsers import MarkdownLexer, Token, TokenKind, tokenize

K = TokenKind


def kinds(text: str, **option_kwargs) -> list[TokenKind]:
    """Return the token kinds for ``text``."""
    return [token.kind for token in tokenize(text, MarkdownParserOptions(**option_kwargs))]


def pairs(text: str, **option_kwargs) -> list[tuple[TokenKind, str]]:
    """Return ``(kind, text)`` pairs for ``text`` without the EOF token."""
    return [(token.kind, token.text) for token in tokenize(text, MarkdownParserOptions(**option_kwargs))[:-1]]


@pytest.mark.unit
class TestBasics:
    """Test the overall token stream."""

    def test_empty_input(self) -> None:
        """Empty input yields only EOF."""
        tokens = tokenize("")
        assert tokens == [Token(kind=K.EOF, text="", offset=0, line=1)]

    def test_plain_text_is_one_token(self) -> None:
        """A single space between words stays inside the TEXT token."""
        assert pairs("Hello World") == [(K.TEXT, "Hello World")]

    def test_whitespace_run_is_split(self) -> None:
        """Longer whitespace runs become their own token."""
        assert pairs("Hello   World") == [(K.TEXT, "Hello"), (K.WHITESPACE, "   "), (K.TEXT, "World")]

    def test_newline_token(self) -> None:
        """Newlines are separate tokens."""
        assert pairs("a\nb") == [(K.TEXT, "a"), (K.NEWLINE, "\n"), (K.TEXT, "b")]

    def test_crlf_is_normalized(self) -> None:
        """CRLF and CR line endings behave like LF."""
        assert kinds("a\r\nb\rc") == [K.TEXT, K.NEWLINE, K.TEXT, K.NEWLINE, K.TEXT, K.EOF]

    def test_offsets_and_lines(self) -> None:
        """Tokens record their offset and 1-based line."""
        tokens = tokenize("ab\n# x")
        assert [(t.offset, t.line) for t in tokens] == [(0, 1), (2, 1), (3, 2), (5, 2), (6, 2)]

    def test_text_is_preserved(self) -> None:
        """Joining token texts of a plain line reproduces it."""
        source = "just  some   words, nothing special!"
        assert "".join(token.text for token in tokenize(source)) == source

    def test_lexer_is_reusable(self) -> None:
        """One lexer instance tokenizes independent inputs."""
        lexer = MarkdownLexer()
        first = lexer.tokenize("**a**")
        second = lexer.tokenize("**a**")
        assert first == second

    def test_invalid_options_type(self) -> None:
        """Passing renderer options to the lexer raises."""
        with pytest.raises(InvalidOptionsError):
            MarkdownLexer(HtmlRendererOptions())  # type: ignore[arg-type]

    def test_token_repr(self) -> None:
        """Token repr names the kind."""
        assert repr(Token(K.TEXT, "x")) == "Token(TEXT, 'x', offset=0, line=1)"


@pytest.mark.unit
class TestHeaders:
    """Test header recognition."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_header_levels(self, level: int) -> None:
        """One to six hashes followed by a space form a header."""
        assert pairs("#" * level + " Title") == [(K.HEADER, "#" * level), (K.TEXT, "Title")]

    def test_seven_hashes_are_text(self) -> None:
        """Seven hashes are plain text."""
        assert pairs("#######  x") == [(K.TEXT, "#######"), (K.WHITESPACE, "  "), (K.TEXT, "x")]

    def test_hash_without_space_is_text(self) -> None:
        """A hash run must be followed by a space."""
        assert pairs("#tag") == [(K.TEXT, "#tag")]

    def test_hash_mid_line_is_text(self) -> None:
        """Headers are only recognized at the start of a line."""
        assert K.HEADER not in kinds("see # note")

    def test_indented_header(self) -> None:
        """Leading whitespace still counts as start of line."""
        assert kinds("  # Title")[:2] == [K.WHITESPACE, K.HEADER]

    def test_header_keeps_rest_of_line(self) -> None:
        """Everything after the marker is one verbatim TEXT token."""
        assert pairs("## Hello  World") == [(K.HEADER, "##"), (K.TEXT, "Hello  World")]
        assert pairs("# My **Bold** `a` [x](y)\nnext") == [
            (K.HEADER, "#"),
            (K.TEXT, "My **Bold** `a` [x](y)"),
            (K.NEWLINE, "\n"),
            (K.TEXT, "next"),
        ]

    def test_header_with_no_text(self) -> None:
        """A bare marker emits no TEXT token."""
        assert pairs("### ") == [(K.HEADER, "###")]


@pytest.mark.unit
class TestEmphasis:
    """Test bold, italic and strikethrough delimiters."""

    def test_bold(self) -> None:
        """Double asterisks produce BOLD opener and closer."""
        assert pairs("**bold**") == [(K.BOLD, "**"), (K.TEXT, "bold"), (K.BOLD, "**")]

    def test_italic(self) -> None:
        """Single asterisks produce ITALIC tokens."""
        assert pairs("*it*") == [(K.ITALIC, "*"), (K.TEXT, "it"), (K.ITALIC, "*")]

    def test_strikethrough(self) -> None:
        """Double tildes produce STRIKETHROUGH tokens."""
        assert pairs("~~gone~~") == [(K.STRIKETHROUGH, "~~"), (K.TEXT, "gone"), (K.STRIKETHROUGH, "~~")]

    def test_mixed_line(self) -> None:
        """Bold and italic on one line with text between."""
        assert kinds("**bold** and *italic*") == [
            K.BOLD,
            K.TEXT,
            K.BOLD,
            K.WHITESPACE,
            K.TEXT,
            K.WHITESPACE,
            K.ITALIC,
            K.TEXT,
            K.ITALIC,
            K.EOF,
        ]

    def test_unclosed_bold_degrades(self) -> None:
        """An unclosed bold keeps its characters as text."""
        assert pairs("**unclosed") == [(K.TEXT, "**unclosed")]

    def test_closer_must_be_on_same_line(self) -> None:
        """A closer on the next line does not close the span."""
        assert K.BOLD not in kinds("**a\nb**")

    def test_nested_italic_in_bold(self) -> None:
        """An italic span inside bold is emitted between the bold tokens."""
        assert kinds("**a *b* c**") == [
            K.BOLD,
            K.TEXT,
            K.WHITESPACE,
            K.ITALIC,
            K.TEXT,
            K.ITALIC,
            K.WHITESPACE,
            K.TEXT,
            K.BOLD,
            K.EOF,
        ]

    def test_crossing_spans_keep_nesting(self) -> None:
        """An inner opener whose closer lies outside the outer span degrades."""
        assert pairs("**a *b** c*") == [
            (K.BOLD, "**"),
            (K.TEXT, "a"),
            (K.WHITESPACE, " "),
            (K.TEXT, "*b"),
            (K.BOLD, "**"),
            (K.WHITESPACE, " "),
            (K.TEXT, "c"),
            (K.TEXT, "*"),
        ]

    def test_closer_inside_link_url_is_skipped(self) -> None:
        """A delimiter inside a complete link does not close the span."""
        assert pairs("*see [x](a*b)*") == [
            (K.ITALIC, "*"),
            (K.TEXT, "see"),
            (K.WHITESPACE, " "),
            (K.LINK, "x|a*b"),
            (K.ITALIC, "*"),
        ]

    def test_closer_inside_image_is_skipped(self) -> None:
        """A delimiter inside a complete image does not close the span."""
        assert pairs("**![m](a**b.png)**") == [(K.BOLD, "**"), (K.IMAGE, "m|a**b.png"), (K.BOLD, "**")]

    def test_closer_inside_code_span_is_skipped(self) -> None:
        """A delimiter inside a complete code span does not close the span."""
        assert pairs("**x `a**b` y**") == [
            (K.BOLD, "**"),
            (K.TEXT, "x"),
            (K.WHITESPACE, " "),
            (K.INLINE_CODE, "a**b"),
            (K.WHITESPACE, " "),
            (K.TEXT, "y"),
            (K.BOLD, "**"),
        ]

    def test_star_before_space_is_not_italic(self) -> None:
        """A single asterisk followed by whitespace is not an opener."""
        assert K.ITALIC not in kinds("a * b *")

    def test_underscore_disabled_by_default(self) -> None:
        """Underscores are plain text unless enabled."""
        assert pairs("snake_case_name") == [(K.TEXT, "snake_case_name")]

    def test_underscore_emphasis_enabled(self) -> None:
        """Underscore delimiters are recognized when enabled."""
        assert pairs("__b__ _i_", underscore_emphasis=True) == [
            (K.BOLD, "__"),
            (K.TEXT, "b"),
            (K.BOLD, "__"),
            (K.WHITESPACE, " "),
            (K.ITALIC, "_"),
            (K.TEXT, "i"),
            (K.ITALIC, "_"),
        ]


@pytest.mark.unit
class TestCode:
    """Test inline code and fenced code blocks."""

    def test_inline_code(self) -> None:
        """Backtick pairs produce INLINE_CODE with the inner text."""
        assert pairs("use `x = 1` here") == [
            (K.TEXT, "use"),
            (K.WHITESPACE, " "),
            (K.INLINE_CODE, "x = 1"),
            (K.WHITESPACE, " "),
            (K.TEXT, "here"),
        ]

    def test_inline_code_keeps_delimiters_literal(self) -> None:
        """Emphasis markers inside code are not lexed."""
        assert pairs("`**not bold**`") == [(K.INLINE_CODE, "**not bold**")]

    def test_unclosed_inline_code(self) -> None:
        """A lone backtick is text."""
        assert pairs("`open") == [(K.TEXT, "`open")]

    def test_code_fence_with_language(self) -> None:
        """The language tag and body are joined by a newline."""
        assert pairs("```py\nprint(1)\n```") == [(K.CODE_BLOCK, "py\nprint(1)")]

    def test_code_fence_without_language(self) -> None:
        """An empty first line gives an empty language."""
        assert pairs("```\nx\ny\n```") == [(K.CODE_BLOCK, "\nx\ny")]

    def test_single_line_fence(self) -> None:
        """A fence closed on its own line has no language."""
        assert pairs("```code```") == [(K.CODE_BLOCK, "\ncode")]

    def test_unclosed_fence_degrades(self) -> None:
        """An unclosed fence leaves its backticks as text."""
        tokens = tokenize("```py\nprint(1)")
        assert tokens[0] == Token(K.TEXT, "```py", offset=0, line=1)
        assert K.CODE_BLOCK not in [token.kind for token in tokens]


@pytest.mark.unit
class TestLinksAndImages:
    """Test link and image recognition."""

    def test_link(self) -> None:
        """A complete link carries text and url."""
        assert pairs("[Go](https://go.dev)") == [(K.LINK, "Go|https://go.dev")]

    def test_image(self) -> None:
        """An image carries alt text and url."""
        assert pairs("![map](map.png)") == [(K.IMAGE, "map|map.png")]

    @pytest.mark.parametrize("source", ["[broken](link", "[text] (url)", "[no close"])
    def test_incomplete_link_is_text(self, source: str) -> None:
        """Incomplete links are text from the bracket on."""
        assert K.LINK not in kinds(source)
        assert "".join(token.text for token in tokenize(source)) == source

    def test_bang_without_image(self) -> None:
        """An exclamation mark that starts no image is text."""
        assert K.IMAGE not in kinds("wow! [a](b)")
        assert K.LINK in kinds("wow! [a](b)")


@pytest.mark.unit
class TestBlockMarkers:
    """Test list and blockquote markers."""

    @pytest.mark.parametrize("marker", ["-", "+", "*"])
    def test_unordered_markers(self, marker: str) -> None:
        """Dash, plus and star followed by a space start an item."""
        assert pairs(f"{marker} item") == [(K.LIST_ITEM_UNORDERED, marker), (K.TEXT, "item")]

    def test_ordered_marker(self) -> None:
        """Digits, a dot and a space start an ordered item."""
        assert pairs("12. item") == [(K.LIST_ITEM_ORDERED, "12."), (K.TEXT, "item")]

    def test_ordered_without_space(self) -> None:
        """Digits and a dot without a space are text."""
        assert pairs("3.14") == [(K.TEXT, "3.14")]

    def test_dash_mid_line_is_text(self) -> None:
        """List markers are only recognized at line start."""
        assert K.LIST_ITEM_UNORDERED not in kinds("a - b")

    def test_blockquote(self) -> None:
        """A blockquote token runs to the end of the line."""
        assert pairs("> quoted *text*\nnext") == [
            (K.BLOCKQUOTE, "> quoted *text*"),
            (K.NEWLINE, "\n"),
            (K.TEXT, "next"),
        ]

    def test_blockquote_needs_space(self) -> None:
        """A greater-than sign without a space is text."""
        assert K.BLOCKQUOTE not in kinds(">quote")
