#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for the markbook parser and renderers."""

from markbook.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from markbook.options.chat import ChatRendererOptions
from markbook.options.html import HtmlRendererOptions
from markbook.options.markdown import MarkdownParserOptions
from markbook.options.plaintext import PlainTextOptions
from markbook.options.rich import RichRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "ChatRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    "PlainTextOptions",
    "RichRendererOptions",
]
