#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/parsers/tokens.py
"""Token types produced by the lexer.

The lexer turns raw text into a flat list of :class:`Token` objects. Tokens
carry no references to one another; the parser walks the list with an
integer cursor.

Payload conventions for ``Token.text``
--------------------------------------
- HEADER: the run of hashes, so the heading level is ``len(text)``
- BOLD, ITALIC, STRIKETHROUGH: the delimiter itself. Opening and closing
  delimiters are separate tokens with the span body lexed between them
- INLINE_CODE: the code between the backticks
- CODE_BLOCK: ``"<language>\\n<body>"``, the language may be empty
- LINK, IMAGE: ``"<text>|<url>"``
- LIST_ITEM_UNORDERED: the marker character
- LIST_ITEM_ORDERED: the number with its dot, e.g. ``"12."``
- BLOCKQUOTE: the whole line including the ``>`` marker
- NEWLINE, WHITESPACE, TEXT: the source characters verbatim
- EOF: the empty string

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Closed set of token kinds."""

    HEADER = "header"
    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"
    INLINE_CODE = "inline_code"
    CODE_BLOCK = "code_block"
    LINK = "link"
    IMAGE = "image"
    LIST_ITEM_UNORDERED = "list_item_unordered"
    LIST_ITEM_ORDERED = "list_item_ordered"
    BLOCKQUOTE = "blockquote"
    NEWLINE = "newline"
    WHITESPACE = "whitespace"
    TEXT = "text"
    EOF = "eof"


EMPHASIS_KINDS: frozenset[TokenKind] = frozenset({TokenKind.BOLD, TokenKind.ITALIC, TokenKind.STRIKETHROUGH})

LIST_ITEM_KINDS: frozenset[TokenKind] = frozenset({TokenKind.LIST_ITEM_UNORDERED, TokenKind.LIST_ITEM_ORDERED})

# Kinds that end a paragraph or list item without being consumed by it
BLOCK_STOP_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.HEADER,
        TokenKind.CODE_BLOCK,
        TokenKind.BLOCKQUOTE,
        TokenKind.LIST_ITEM_UNORDERED,
        TokenKind.LIST_ITEM_ORDERED,
        TokenKind.NEWLINE,
        TokenKind.EOF,
    }
)


@dataclass(frozen=True)
class Token:
    """A classified lexical unit.

    Parameters
    ----------
    kind : TokenKind
        Token classification
    text : str
        Token payload (see module docstring)
    offset : int, default = 0
        0-based index of the token's first character in the source
    line : int, default = 1
        1-based line number of the token's first character

    """

    kind: TokenKind
    text: str
    offset: int = 0
    line: int = 1

    def __repr__(self) -> str:
        """Return a compact representation for debugging."""
        return f"Token({self.kind.name}, {self.text!r}, offset={self.offset}, line={self.line})"
