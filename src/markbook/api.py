"""The main exported API functions for parsing and rendering markup."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/markbook/api.py
import logging
from typing import Any, Optional, Sequence, Union

from markbook.ast.nodes import Document, Text
from markbook.options.base import BaseRendererOptions
from markbook.options.markdown import MarkdownParserOptions
from markbook.parsers.lexer import MarkdownLexer
from markbook.parsers.markdown import MarkdownParser
from markbook.parsers.tokens import Token
from markbook.renderers import get_renderer
from markbook.renderers.base import render_with

logger = logging.getLogger(__name__)

RendererChoice = Union[str, Any]


class MarkdownProcessor:
    """Run raw markup through the lexer, the parser and a renderer.

    Lexing and parsing never fail for any input string. Should an unexpected
    fault still occur, :meth:`parse` logs it and returns a document holding
    the raw input as a single Text node, so callers always get renderable
    output.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Options shared by the lexer and the parser

    Examples
    --------
        >>> processor = MarkdownProcessor()
        >>> processor.parse_to_html("**bold** and *italic*")
        '<p><strong>bold</strong> and <em>italic</em></p>'

    """

    def __init__(self, options: Optional[MarkdownParserOptions] = None):
        """Initialize the processor, validating the parser options."""
        self.options = options or MarkdownParserOptions()
        self._lexer = MarkdownLexer(self.options)
        self._parser = MarkdownParser(self.options)

    def tokenize(self, raw: str) -> list[Token]:
        """Split raw markup into tokens."""
        return self._lexer.tokenize(raw)

    def parse(self, raw: str) -> Document:
        """Parse raw markup into a Document.

        Parameters
        ----------
        raw : str
            Raw markup

        Returns
        -------
        Document
            The parsed tree, or ``Document((Text(raw),))`` if lexing or
            parsing raised unexpectedly

        """
        try:
            return self._parser.parse(self._lexer.tokenize(raw))
        except Exception:
            logger.warning("Failed to parse markup, falling back to plain text", exc_info=True)
            return Document(children=(Text(content=raw),))

    def render(
        self,
        source: Union[str, Document],
        renderer: RendererChoice = "html",
        options: Optional[BaseRendererOptions] = None,
    ) -> str:
        """Render raw markup or a parsed Document.

        Parameters
        ----------
        source : str or Document
            Raw markup (parsed first) or an existing Document
        renderer : str or visitor, default "html"
            Registered renderer name, or any object implementing the
            ``visit_*`` methods of :class:`markbook.ast.NodeVisitor`
        options : BaseRendererOptions or None, default = None
            Renderer options, only used when ``renderer`` is a name

        Returns
        -------
        str
            Rendered output

        Raises
        ------
        UnknownRendererError
            If ``renderer`` names no registered renderer
        InvalidOptionsError
            If ``options`` does not match the named renderer

        """
        document = source if isinstance(source, Document) else self.parse(source)
        visitor = get_renderer(renderer, options) if isinstance(renderer, str) else renderer
        return render_with(visitor, document)

    def parse_and_render(self, raw: str, visitor: Any) -> str:
        """Parse ``raw`` and render it with ``visitor``."""
        return render_with(visitor, self.parse(raw))

    def parse_to_html(self, raw: str) -> str:
        """Parse ``raw`` and render it as HTML."""
        return self.render(raw, "html")

    def parse_to_chat(self, raw: str) -> str:
        """Parse ``raw`` and render it with chat formatting codes."""
        return self.render(raw, "chat")

    def parse_to_plain(self, raw: str) -> str:
        """Parse ``raw`` and render it as plain text."""
        return self.render(raw, "plain")


def tokenize(text: str, options: Optional[MarkdownParserOptions] = None) -> list[Token]:
    """Split raw markup into tokens.

    Parameters
    ----------
    text : str
        Raw markup
    options : MarkdownParserOptions or None, default = None
        Lexing options

    Returns
    -------
    list of Token
        Tokens in source order, ending with EOF

    """
    return MarkdownLexer(options).tokenize(text)


def parse(tokens: Sequence[Token], options: Optional[MarkdownParserOptions] = None) -> Document:
    """Build a Document from a token list.

    Parameters
    ----------
    tokens : sequence of Token
        Output of :func:`tokenize`; a missing EOF sentinel is tolerated
    options : MarkdownParserOptions or None, default = None
        Parsing options

    Returns
    -------
    Document
        The parsed tree

    """
    return MarkdownParser(options).parse(tokens)


def parse_markdown(raw: str, options: Optional[MarkdownParserOptions] = None) -> Document:
    """Lex and parse raw markup, falling back to plain text on unexpected faults.

    Parameters
    ----------
    raw : str
        Raw markup
    options : MarkdownParserOptions or None, default = None
        Lexing and parsing options

    Returns
    -------
    Document
        The parsed tree

    Examples
    --------
        >>> parse_markdown("# Title")
        Document(children=(Heading(level=1, text='Title'),))

    """
    return MarkdownProcessor(options).parse(raw)


def render(
    source: Union[str, Document],
    renderer: RendererChoice = "html",
    options: Optional[BaseRendererOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
) -> str:
    """Render raw markup or a Document with a named renderer or a visitor.

    Parameters
    ----------
    source : str or Document
        Raw markup or an already parsed Document
    renderer : str or visitor, default "html"
        Registered renderer name (``"html"``, ``"chat"``, ``"plain"``,
        ``"rich"``) or a visitor instance
    options : BaseRendererOptions or None, default = None
        Options for a named renderer
    parser_options : MarkdownParserOptions or None, default = None
        Options used when ``source`` is raw markup

    Returns
    -------
    str
        Rendered output

    """
    return MarkdownProcessor(parser_options).render(source, renderer, options)


def to_html(source: Union[str, Document], options: Optional[BaseRendererOptions] = None) -> str:
    """Render raw markup or a Document as HTML."""
    return render(source, "html", options)


def to_chat(source: Union[str, Document], options: Optional[BaseRendererOptions] = None) -> str:
    """Render raw markup or a Document with chat formatting codes."""
    return render(source, "chat", options)


def to_plain(source: Union[str, Document], options: Optional[BaseRendererOptions] = None) -> str:
    """Render raw markup or a Document as plain text."""
    return render(source, "plain", options)


__all__ = [
    "MarkdownProcessor",
    "parse",
    "parse_markdown",
    "render",
    "to_chat",
    "to_html",
    "to_plain",
    "tokenize",
]
