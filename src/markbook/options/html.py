#  Copyright (c) 2025 Tom Villani, Ph.D.
# markbook/options/html.py
"""Configuration options for HTML rendering.

This module defines options for rendering the AST to HTML.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markbook.constants import DEFAULT_HTML_LANGUAGE_CLASS_PREFIX, DEFAULT_HTML_TITLE
from markbook.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-HTML rendering.

    Parameters
    ----------
    escape_html : bool, default True
        Escape ``& < > " '`` in all text content and attribute values.
    standalone : bool, default False
        Wrap the rendered fragment in a complete HTML5 document.
    title : str, default "Document"
        Document title used when ``standalone`` is enabled.
    language : str, default "en"
        Value of the ``lang`` attribute when ``standalone`` is enabled.
    language_class_prefix : str, default "language-"
        Prefix for the class attribute of fenced code blocks.

    Examples
    --------
        >>> from markbook.options import HtmlRendererOptions
        >>> options = HtmlRendererOptions(standalone=True, title="My Book")

    """

    escape_html: bool = field(
        default=True,
        metadata={
            "help": "Escape HTML special characters in text content",
            "cli_name": "no-escape-html",
            "importance": "security",
        },
    )
    standalone: bool = field(
        default=False,
        metadata={"help": "Generate a complete HTML document", "importance": "core"},
    )
    title: str = field(
        default=DEFAULT_HTML_TITLE,
        metadata={"help": "Title of the standalone HTML document", "type": str, "importance": "core"},
    )
    language: str = field(
        default="en",
        metadata={"help": "Document language of the standalone HTML document", "type": str, "importance": "advanced"},
    )
    language_class_prefix: str = field(
        default=DEFAULT_HTML_LANGUAGE_CLASS_PREFIX,
        metadata={"help": "Class prefix for code block languages", "type": str, "importance": "advanced"},
    )
