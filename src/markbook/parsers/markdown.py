#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/parsers/markdown.py
"""Markdown to AST parser.

This module builds the AST from the token list produced by
:mod:`markbook.parsers.lexer`. The grammar has two levels:

Block level
    Headings, fenced code blocks, single-line blockquotes, flat bullet and
    ordered lists, and paragraphs. A paragraph is one source line.

Inline level
    Text, bold, italic, strikethrough, inline code, links and images inside
    paragraphs and list items.

The parser accepts any token sequence, including hand-built ones without
the trailing EOF sentinel, and never raises.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence, Union

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
    Node,
    OrderedList,
    Paragraph,
    Strikethrough,
    Text,
)
from markbook.constants import BLOCKQUOTE_MARKER, LINK_PAYLOAD_SEPARATOR, MAX_HEADING_LEVEL
from markbook.exceptions import InvalidOptionsError
from markbook.options.markdown import MarkdownParserOptions
from markbook.parsers.lexer import MarkdownLexer
from markbook.parsers.tokens import BLOCK_STOP_KINDS, EMPHASIS_KINDS, Token, TokenKind

logger = logging.getLogger(__name__)

_EOF_TOKEN = Token(kind=TokenKind.EOF, text="")

_EMPHASIS_NODES: dict[TokenKind, type[Bold] | type[Italic] | type[Strikethrough]] = {
    TokenKind.BOLD: Bold,
    TokenKind.ITALIC: Italic,
    TokenKind.STRIKETHROUGH: Strikethrough,
}


class _TokenCursor:
    """Read position over a token sequence.

    Reading past the end yields an EOF token, so sequences without the
    sentinel parse the same as those with it.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = tokens
        self.index = 0

    def peek(self) -> Token:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return _EOF_TOKEN

    def advance(self) -> Token:
        token = self.peek()
        if self.index < len(self.tokens):
            self.index += 1
        return token


@dataclass
class _InlineFrame:
    """An emphasis span being collected, or the root of an inline run."""

    kind: TokenKind | None
    children: list[Node] = field(default_factory=list)
    pending_text: list[str] = field(default_factory=list)

    def flush_text(self) -> None:
        """Turn buffered TEXT/WHITESPACE values into one Text node."""
        content = "".join(self.pending_text)
        self.pending_text.clear()
        if content:
            self.children.append(Text(content=content))


class MarkdownParser:
    """Parse markup or a token list into an AST document.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parsing options. If None, default options are used.

    Examples
    --------
        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Title")
        >>> doc.children[0]
        Heading(level=1, text='Title')

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                component_name="MarkdownParser",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    def parse(self, input_data: Union[str, Sequence[Token]]) -> Document:
        """Parse raw markup or an existing token list into a Document.

        Parameters
        ----------
        input_data : str or sequence of Token
            Raw markup (tokenized with this parser's options first) or the
            output of :func:`markbook.parsers.lexer.tokenize`

        Returns
        -------
        Document
            Root of the parsed tree

        """
        if isinstance(input_data, str):
            tokens: Sequence[Token] = MarkdownLexer(self.options).tokenize(input_data)
        else:
            tokens = input_data

        document = self._parse_document(_TokenCursor(tokens))
        logger.debug(f"Parsed {len(tokens)} tokens into {len(document.children)} blocks")
        return document

    # ------------------------------------------------------------------
    # Block level
    # ------------------------------------------------------------------

    def _parse_document(self, cursor: _TokenCursor) -> Document:
        children: list[Node] = []
        previous_kind: TokenKind | None = None

        while True:
            token = cursor.peek()
            if token.kind is TokenKind.EOF:
                break

            if token.kind is TokenKind.NEWLINE:
                cursor.advance()
                if self.options.emit_line_breaks and previous_kind is TokenKind.NEWLINE:
                    children.append(LineBreak())
                previous_kind = TokenKind.NEWLINE
                continue

            # Indentation is not significant; blank lines made of spaces still count as blank
            if token.kind is TokenKind.WHITESPACE:
                cursor.advance()
                continue

            children.append(self._parse_block(cursor))
            previous_kind = token.kind

        return Document(children=tuple(children))

    def _parse_block(self, cursor: _TokenCursor) -> Node:
        kind = cursor.peek().kind

        if kind is TokenKind.HEADER:
            return self._parse_heading(cursor)
        elif kind is TokenKind.CODE_BLOCK:
            return self._parse_code_block(cursor)
        elif kind is TokenKind.BLOCKQUOTE:
            return self._parse_blockquote(cursor)
        elif kind is TokenKind.LIST_ITEM_UNORDERED:
            return BulletList(items=self._parse_list_items(cursor, kind))
        elif kind is TokenKind.LIST_ITEM_ORDERED:
            return OrderedList(items=self._parse_list_items(cursor, kind))
        else:
            return Paragraph(children=self._parse_inline(cursor))

    def _parse_heading(self, cursor: _TokenCursor) -> Heading:
        token = cursor.advance()
        level = min(max(len(token.text), 1), MAX_HEADING_LEVEL)

        parts: list[str] = []
        while cursor.peek().kind not in (TokenKind.NEWLINE, TokenKind.EOF):
            part = cursor.advance()
            if part.kind is TokenKind.TEXT:
                parts.append(part.text)

        return Heading(level=level, text="".join(parts))

    def _parse_code_block(self, cursor: _TokenCursor) -> CodeBlock:
        payload = cursor.advance().text
        if "\n" not in payload:
            return CodeBlock(code=payload)
        language, code = payload.split("\n", 1)
        return CodeBlock(code=code, language=language)

    def _parse_blockquote(self, cursor: _TokenCursor) -> Blockquote:
        text = cursor.advance().text
        if text.startswith(BLOCKQUOTE_MARKER + " "):
            text = text[2:]
        elif text.startswith(BLOCKQUOTE_MARKER):
            text = text[1:]
        return Blockquote(text=text)

    def _parse_list_items(self, cursor: _TokenCursor, kind: TokenKind) -> tuple[ListItem, ...]:
        """Collect consecutive list items of one kind.

        Between two items one newline and one run of indentation are
        skipped. When the next line is not an item of the same kind the
        cursor is rewound so the newline stays visible to the caller.
        """
        items: list[ListItem] = []

        while cursor.peek().kind is kind:
            cursor.advance()
            items.append(ListItem(children=self._parse_inline(cursor)))

            mark = cursor.index
            if cursor.peek().kind is TokenKind.NEWLINE:
                cursor.advance()
            if cursor.peek().kind is TokenKind.WHITESPACE:
                cursor.advance()
            if cursor.peek().kind is not kind:
                cursor.index = mark
                break

        return tuple(items)

    # ------------------------------------------------------------------
    # Inline level
    # ------------------------------------------------------------------

    def _parse_inline(self, cursor: _TokenCursor) -> tuple[Node, ...]:
        """Collect inline nodes up to the next block-stopping token.

        Emphasis spans are tracked on an explicit stack. A delimiter whose
        kind is already open closes that span (and any span opened inside
        it); any other delimiter opens a new span. Spans still open at the
        end of the line close implicitly.
        """
        frames = [_InlineFrame(kind=None)]

        while cursor.peek().kind not in BLOCK_STOP_KINDS:
            token = cursor.advance()
            frame = frames[-1]

            if token.kind in (TokenKind.TEXT, TokenKind.WHITESPACE):
                frame.pending_text.append(token.text)
            elif token.kind in EMPHASIS_KINDS:
                open_kinds = [open_frame.kind for open_frame in frames]
                if token.kind in open_kinds:
                    depth = open_kinds.index(token.kind)
                    while len(frames) > depth:
                        self._close_frame(frames)
                else:
                    frame.flush_text()
                    frames.append(_InlineFrame(kind=token.kind))
            else:
                frame.flush_text()
                frame.children.append(self._parse_inline_leaf(token))

        while len(frames) > 1:
            self._close_frame(frames)
        frames[0].flush_text()
        return tuple(frames[0].children)

    @staticmethod
    def _close_frame(frames: list[_InlineFrame]) -> None:
        frame = frames.pop()
        frame.flush_text()
        if frame.kind is None:
            return
        frames[-1].children.append(_EMPHASIS_NODES[frame.kind](children=tuple(frame.children)))

    @staticmethod
    def _parse_inline_leaf(token: Token) -> Node:
        if token.kind is TokenKind.INLINE_CODE:
            return InlineCode(code=token.text)
        elif token.kind is TokenKind.LINK:
            text, _, url = token.text.partition(LINK_PAYLOAD_SEPARATOR)
            return Link(text=text, url=url)
        elif token.kind is TokenKind.IMAGE:
            alt_text, _, url = token.text.partition(LINK_PAYLOAD_SEPARATOR)
            return Image(alt_text=alt_text, url=url)
        else:
            # Only reachable with hand-built token sequences
            return Text(content=token.text)


def parse(tokens: Sequence[Token], options: MarkdownParserOptions | None = None) -> Document:
    """Parse a token list into a Document.

    Parameters
    ----------
    tokens : sequence of Token
        Output of :func:`markbook.parsers.lexer.tokenize`
    options : MarkdownParserOptions or None, default = None
        Parsing options

    Returns
    -------
    Document
        Root of the parsed tree

    """
    return MarkdownParser(options).parse(tokens)
