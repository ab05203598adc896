"""markbook - restricted markdown for in-game books and chat.

markbook turns a small markdown dialect (headings, emphasis, code, links,
images, lists, blockquotes) into an immutable AST and renders that AST to
HTML, legacy section-sign chat formatting, plain text, or ``rich`` terminal
components. Lexing and parsing are total: any input string yields a
document, and malformed markup degrades to plain text.

Examples
--------
Render markup directly:

    >>> from markbook import to_html, to_chat
    >>> to_html("# Title")
    '<h1>Title</h1>'
    >>> to_chat("# Title")
    '§1§lTitle§r'

Work with the AST:

    >>> from markbook import parse_markdown
    >>> doc = parse_markdown("**bold** and *italic*")
    >>> doc.children[0].children[1]
    Text(content=' and ')

See Also
--------
markbook.ast : AST node definitions and utilities
markbook.renderers : renderer registry

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "markbook requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from markbook.api import (
    MarkdownProcessor,
    parse,
    parse_markdown,
    render,
    to_chat,
    to_html,
    to_plain,
    tokenize,
)
from markbook.ast import Document
from markbook.book import MarkdownBook
from markbook.exceptions import InvalidOptionsError, MarkbookError, UnknownRendererError
from markbook.options import (
    BaseParserOptions,
    BaseRendererOptions,
    ChatRendererOptions,
    HtmlRendererOptions,
    MarkdownParserOptions,
    PlainTextOptions,
    RichRendererOptions,
)
from markbook.renderers import available_renderers, get_renderer, register_renderer

__all__ = [
    "__version__",
    "MarkdownProcessor",
    "MarkdownBook",
    "Document",
    "tokenize",
    "parse",
    "parse_markdown",
    "render",
    "to_html",
    "to_chat",
    "to_plain",
    "get_renderer",
    "available_renderers",
    "register_renderer",
    "MarkbookError",
    "InvalidOptionsError",
    "UnknownRendererError",
    "BaseParserOptions",
    "BaseRendererOptions",
    "MarkdownParserOptions",
    "HtmlRendererOptions",
    "ChatRendererOptions",
    "PlainTextOptions",
    "RichRendererOptions",
]
