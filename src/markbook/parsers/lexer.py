#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/parsers/lexer.py
"""Lexer for the restricted markup dialect.

This module turns raw text into the flat token list consumed by
:class:`markbook.parsers.markdown.MarkdownParser`.

Scanning is total: every character ends up in some token, and any construct
that fails to close (``**unclosed``, ``[broken](link``, a fence without its
closing fence) comes out as TEXT carrying the original characters. There is
no error channel.

Emphasis spans are balanced by the lexer itself. An opening delimiter is only
emitted when its closing delimiter sits later on the same line and inside
every enclosing span, so the parser always sees properly nested
BOLD/ITALIC/STRIKETHROUGH pairs.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from markbook.constants import (
    BLOCKQUOTE_MARKER,
    BOLD_MARKER,
    CODE_FENCE,
    HEADER_MARKER,
    INLINE_CODE_MARKER,
    ITALIC_MARKER,
    LINK_PAYLOAD_SEPARATOR,
    MAX_HEADING_LEVEL,
    STRIKETHROUGH_MARKER,
    UNDERSCORE_BOLD_MARKER,
    UNDERSCORE_ITALIC_MARKER,
    UNORDERED_LIST_MARKERS,
)
from markbook.exceptions import InvalidOptionsError
from markbook.options.markdown import MarkdownParserOptions
from markbook.parsers.tokens import Token, TokenKind

logger = logging.getLogger(__name__)

# Checked in this order, so double delimiters win over single ones
_ASTERISK_DELIMITERS: tuple[tuple[str, TokenKind], ...] = (
    (BOLD_MARKER, TokenKind.BOLD),
    (ITALIC_MARKER, TokenKind.ITALIC),
    (STRIKETHROUGH_MARKER, TokenKind.STRIKETHROUGH),
)

_UNDERSCORE_DELIMITERS: tuple[tuple[str, TokenKind], ...] = (
    (BOLD_MARKER, TokenKind.BOLD),
    (UNDERSCORE_BOLD_MARKER, TokenKind.BOLD),
    (ITALIC_MARKER, TokenKind.ITALIC),
    (UNDERSCORE_ITALIC_MARKER, TokenKind.ITALIC),
    (STRIKETHROUGH_MARKER, TokenKind.STRIKETHROUGH),
)


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


@dataclass
class _OpenSpan:
    """An emphasis span whose opener has been emitted but not its closer."""

    kind: TokenKind
    delimiter: str
    close_at: int


class _Scanner:
    """Cursor state for a single tokenize call.

    A fresh scanner is created per call, which keeps :class:`MarkdownLexer`
    instances reentrant.
    """

    def __init__(self, text: str, underscore_emphasis: bool) -> None:
        self.text = text
        self.length = len(text)
        self.pos = 0
        self.line = 1
        self.line_has_content = False
        self.open_spans: list[_OpenSpan] = []
        self.tokens: list[Token] = []
        self.delimiters = _UNDERSCORE_DELIMITERS if underscore_emphasis else _ASTERISK_DELIMITERS
        self.special_chars = "*`[\n" + (UNDERSCORE_ITALIC_MARKER if underscore_emphasis else "")

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    @property
    def limit(self) -> int:
        """Exclusive end of the region the next token may cover."""
        return self.open_spans[-1].close_at if self.open_spans else self.length

    def _line_end(self) -> int:
        """Return the position of the next newline, clipped to ``limit``."""
        limit = self.limit
        newline = self.text.find("\n", self.pos, limit)
        return limit if newline == -1 else newline

    def _at_line_start(self) -> bool:
        return not self.line_has_content

    def _is_special(self, index: int) -> bool:
        """Return True if a token other than TEXT could start at ``index``."""
        char = self.text[index]
        if char in self.special_chars:
            return True
        if char == "!":
            return self.text.startswith("[", index + 1)
        if char == "~":
            return self.text.startswith(STRIKETHROUGH_MARKER, index)
        return False

    def _emit(self, kind: TokenKind, payload: str, consumed: int) -> None:
        start = self.pos
        self.tokens.append(Token(kind=kind, text=payload, offset=start, line=self.line))
        self.pos += consumed
        self.line += self.text.count("\n", start, self.pos)
        if kind is TokenKind.NEWLINE:
            self.line_has_content = False
        elif kind is not TokenKind.WHITESPACE:
            self.line_has_content = True

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> list[Token]:
        while self.pos < self.length:
            self._step()
        self.tokens.append(Token(kind=TokenKind.EOF, text="", offset=self.length, line=self.line))
        return self.tokens

    def _step(self) -> None:
        if self.open_spans and self.pos == self.open_spans[-1].close_at:
            span = self.open_spans.pop()
            self._emit(span.kind, span.delimiter, len(span.delimiter))
            return

        if (
            self._scan_header()
            or self._scan_code_fence()
            or self._scan_emphasis()
            or self._scan_inline_code()
            or self._scan_image()
            or self._scan_link()
            or self._scan_list_marker()
            or self._scan_blockquote()
            or self._scan_newline()
            or self._scan_whitespace()
        ):
            return

        self._scan_text()

    # ------------------------------------------------------------------
    # Block markers
    # ------------------------------------------------------------------

    def _scan_header(self) -> bool:
        if not self.text.startswith(HEADER_MARKER, self.pos) or not self._at_line_start():
            return False

        end = self.pos
        while end < self.length and self.text[end] == HEADER_MARKER:
            end += 1
        level = end - self.pos
        if level > MAX_HEADING_LEVEL or not self.text.startswith(" ", end):
            return False

        self._emit(TokenKind.HEADER, HEADER_MARKER * level, level + 1)
        # Heading text is verbatim: no inline markup is recognised in it
        line_end = self._line_end()
        if line_end > self.pos:
            self._emit(TokenKind.TEXT, self.text[self.pos : line_end], line_end - self.pos)
        return True

    def _scan_list_marker(self) -> bool:
        if not self._at_line_start():
            return False

        char = self.text[self.pos]
        if char in UNORDERED_LIST_MARKERS:
            if self.text.startswith(" ", self.pos + 1):
                self._emit(TokenKind.LIST_ITEM_UNORDERED, char, 2)
                return True
            return False

        end = self.pos
        while end < self.length and _is_ascii_digit(self.text[end]):
            end += 1
        if end > self.pos and self.text.startswith(". ", end):
            self._emit(TokenKind.LIST_ITEM_ORDERED, self.text[self.pos : end + 1], end + 2 - self.pos)
            return True
        return False

    def _scan_blockquote(self) -> bool:
        if not self.text.startswith(BLOCKQUOTE_MARKER + " ", self.pos) or not self._at_line_start():
            return False

        end = self._line_end()
        self._emit(TokenKind.BLOCKQUOTE, self.text[self.pos : end], end - self.pos)
        return True

    def _scan_code_fence(self) -> bool:
        fence_len = len(CODE_FENCE)
        if not self.text.startswith(CODE_FENCE, self.pos):
            return False
        if self.text.startswith(INLINE_CODE_MARKER, self.pos + fence_len):
            return False

        start = self.pos + fence_len
        close = self.text.find(CODE_FENCE, start, self.limit)
        if close == -1:
            self._scan_text(fence_len)
            return True

        inner = self.text[start:close]
        if "\n" in inner:
            language, body = inner.split("\n", 1)
            language = language.strip()
            if body.endswith("\n"):
                body = body[:-1]
        else:
            language, body = "", inner

        self._emit(TokenKind.CODE_BLOCK, f"{language}\n{body}", close + fence_len - self.pos)
        return True

    # ------------------------------------------------------------------
    # Inline constructs
    # ------------------------------------------------------------------

    def _find_closer(self, delimiter: str, start: int) -> int | None:
        """Find the closing ``delimiter`` on the current line inside ``limit``.

        Complete code spans, links and images are stepped over, so a
        delimiter inside them never closes the span. A single-character
        delimiter does not match half of a doubled one, so the ``*`` of an
        italic span skips over ``**`` runs.
        """
        end = self._line_end()
        index = start
        while index < end:
            skip_to = self._skip_construct(index, end)
            if skip_to is not None:
                index = skip_to
                continue
            if self.text.startswith(delimiter, index):
                if len(delimiter) == 1 and self.text.startswith(delimiter, index + 1):
                    index += 2
                    continue
                return index
            index += 1
        return None

    def _skip_construct(self, index: int, end: int) -> int | None:
        """Return the end of a complete code span, link or image at ``index``."""
        char = self.text[index]
        if char == INLINE_CODE_MARKER:
            run_end = index
            while run_end < end and self.text[run_end] == INLINE_CODE_MARKER:
                run_end += 1
            ticks = self.text[index:run_end]
            close = self.text.find(ticks, run_end, end)
            return run_end if close == -1 else close + len(ticks)
        if char == "!" and self.text.startswith("[", index + 1):
            index += 1
            char = "["
        if char == "[":
            match = self._match_bracketed(index)
            if match is not None and match[2] <= end:
                return match[2]
        return None

    def _scan_emphasis(self) -> bool:
        for delimiter, kind in self.delimiters:
            if not self.text.startswith(delimiter, self.pos):
                continue

            body_start = self.pos + len(delimiter)
            if len(delimiter) == 1:
                following = self.text[body_start : body_start + 1]
                if not following or following.isspace():
                    return False

            if any(span.kind is kind for span in self.open_spans):
                self._scan_text(len(delimiter))
                return True

            close = self._find_closer(delimiter, body_start)
            if close is None:
                self._scan_text(len(delimiter))
                return True

            self._emit(kind, delimiter, len(delimiter))
            self.open_spans.append(_OpenSpan(kind=kind, delimiter=delimiter, close_at=close))
            return True
        return False

    def _scan_inline_code(self) -> bool:
        if not self.text.startswith(INLINE_CODE_MARKER, self.pos):
            return False

        run_end = self.pos
        while run_end < self.length and self.text[run_end] == INLINE_CODE_MARKER:
            run_end += 1
        ticks = self.text[self.pos : run_end]

        close = self.text.find(ticks, run_end, self._line_end())
        if close == -1:
            self._scan_text(len(ticks))
            return True

        self._emit(TokenKind.INLINE_CODE, self.text[run_end:close], close + len(ticks) - self.pos)
        return True

    def _match_bracketed(self, start: int) -> tuple[str, str, int] | None:
        """Match ``[text](url)`` starting at ``start``.

        Returns
        -------
        tuple of (str, str, int) or None
            Text, url and the exclusive end position, or None when the
            construct is incomplete on this line.

        """
        end = self._line_end()
        if not self.text.startswith("[", start):
            return None
        close_bracket = self.text.find("]", start + 1, end)
        if close_bracket == -1 or not self.text.startswith("(", close_bracket + 1):
            return None
        close_paren = self.text.find(")", close_bracket + 2, end)
        if close_paren == -1:
            return None

        label = self.text[start + 1 : close_bracket]
        # The separator would make the payload ambiguous
        if LINK_PAYLOAD_SEPARATOR in label:
            return None
        return label, self.text[close_bracket + 2 : close_paren], close_paren + 1

    def _scan_image(self) -> bool:
        if not self.text.startswith("![", self.pos):
            return False
        match = self._match_bracketed(self.pos + 1)
        if match is None:
            return False
        alt_text, url, end = match
        self._emit(TokenKind.IMAGE, f"{alt_text}{LINK_PAYLOAD_SEPARATOR}{url}", end - self.pos)
        return True

    def _scan_link(self) -> bool:
        match = self._match_bracketed(self.pos)
        if match is None:
            return False
        text, url, end = match
        self._emit(TokenKind.LINK, f"{text}{LINK_PAYLOAD_SEPARATOR}{url}", end - self.pos)
        return True

    # ------------------------------------------------------------------
    # Whitespace and text
    # ------------------------------------------------------------------

    def _scan_newline(self) -> bool:
        if self.text[self.pos] != "\n":
            return False
        self._emit(TokenKind.NEWLINE, "\n", 1)
        return True

    def _scan_whitespace(self) -> bool:
        if not self.text[self.pos].isspace():
            return False
        end = self._line_end()
        index = self.pos
        while index < end and self.text[index].isspace():
            index += 1
        self._emit(TokenKind.WHITESPACE, self.text[self.pos : index], index - self.pos)
        return True

    def _scan_text(self, min_length: int = 1) -> None:
        """Emit a TEXT token of at least ``min_length`` characters.

        The run continues up to the next character that could start another
        token. A single space between two plain characters stays inside the
        run, longer whitespace runs become WHITESPACE tokens of their own.
        """
        end = self._line_end()
        index = max(min(self.pos + min_length, end), self.pos + 1)
        while index < end:
            char = self.text[index]
            if char.isspace():
                following = index + 1
                if following < end and not self.text[following].isspace() and not self._is_special(following):
                    index += 2
                    continue
                break
            if self._is_special(index):
                break
            index += 1

        self._emit(TokenKind.TEXT, self.text[self.pos : index], index - self.pos)


class MarkdownLexer:
    """Convert raw markup into a token list.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Lexing options. If None, default options are used.

    Examples
    --------
        >>> lexer = MarkdownLexer()
        >>> [token.kind.name for token in lexer.tokenize("# Title")]
        ['HEADER', 'TEXT', 'EOF']

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the lexer with optional configuration."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                component_name="MarkdownLexer",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    def tokenize(self, text: str) -> list[Token]:
        """Split ``text`` into tokens.

        Line endings are normalized to ``\\n`` first; token offsets refer to
        the normalized text.

        Parameters
        ----------
        text : str
            Raw markup

        Returns
        -------
        list of Token
            Tokens in source order, always ending with a single EOF token

        """
        source = text.replace("\r\n", "\n").replace("\r", "\n")
        tokens = _Scanner(source, self.options.underscore_emphasis).run()
        logger.debug(f"Tokenized {len(source)} characters into {len(tokens)} tokens")
        return tokens


def tokenize(text: str, options: MarkdownParserOptions | None = None) -> list[Token]:
    """Tokenize ``text`` with a throwaway :class:`MarkdownLexer`.

    Parameters
    ----------
    text : str
        Raw markup
    options : MarkdownParserOptions or None, default = None
        Lexing options

    Returns
    -------
    list of Token
        Tokens ending with EOF

    """
    return MarkdownLexer(options).tokenize(text)
