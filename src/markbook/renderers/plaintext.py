#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/renderers/plaintext.py
"""Plain text rendering from AST.

This module provides the PlainTextRenderer class which strips all formatting
from the AST and keeps only the readable text: headings become bare lines,
emphasis disappears, links read ``text (url)`` and images show their alt text.
Optional word wrapping uses :mod:`textwrap`.

"""

from __future__ import annotations

import textwrap

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
from markbook.options.plaintext import PlainTextOptions
from markbook.renderers.base import BaseRenderer


class PlainTextRenderer(BaseRenderer):
    """Render AST to plain, unformatted text.

    Parameters
    ----------
    options : PlainTextOptions or None, default = None
        Plain text formatting options

    Examples
    --------
        >>> from markbook.ast import Document, Paragraph, Bold, Text
        >>> doc = Document(children=(Paragraph(children=(Bold(children=(Text("Hi"),)),)),))
        >>> PlainTextRenderer().render_to_string(doc)
        'Hi'

    """

    def __init__(self, options: PlainTextOptions | None = None):
        """Initialize the plain text renderer with options."""
        BaseRenderer._validate_options_type(options, PlainTextOptions, "plain")
        options = options or PlainTextOptions()
        BaseRenderer.__init__(self, options)
        self.options: PlainTextOptions = options

    def _wrap_text(self, text: str, prefix: str = "") -> str:
        """Wrap ``text`` to ``max_line_width`` when wrapping is enabled.

        Parameters
        ----------
        text : str
            Text to wrap
        prefix : str, default ""
            Prefix for the first line; continuation lines are indented by
            its width

        Returns
        -------
        str
            Wrapped text including the prefix

        """
        width = self.options.max_line_width
        if width is None or not text.strip():
            return prefix + text

        return textwrap.fill(
            text,
            width=width,
            initial_indent=prefix,
            subsequent_indent=" " * len(prefix),
            break_long_words=False,
            break_on_hyphens=False,
        )

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> str:
        """Render a Document node, one block per line."""
        return self._render_children(node.children, "\n")

    def visit_heading(self, node: Heading) -> str:
        """Render a Heading node as its bare text."""
        return node.text

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a Paragraph node, or the empty string if it is blank."""
        content = self._render_children(node.children)
        if not content.strip():
            return ""
        return self._wrap_text(content)

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a CodeBlock node verbatim, never wrapped."""
        return node.code

    def visit_blockquote(self, node: Blockquote) -> str:
        """Render a Blockquote node with a ``> `` prefix."""
        return self._wrap_text(node.text, prefix="> ")

    def visit_bullet_list(self, node: BulletList) -> str:
        """Render a BulletList node, one bulleted item per line."""
        return "\n".join(self._wrap_text(item.accept(self), prefix=self.options.bullet) for item in node.items)

    def visit_ordered_list(self, node: OrderedList) -> str:
        """Render an OrderedList node numbered from 1."""
        return "\n".join(
            self._wrap_text(item.accept(self), prefix=f"{index + 1}. ") for index, item in enumerate(node.items)
        )

    def visit_list_item(self, node: ListItem) -> str:
        """Render a ListItem node without its marker."""
        return self._render_children(node.children)

    def visit_line_break(self, node: LineBreak) -> str:
        """Render a LineBreak node as an empty line."""
        return ""

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> str:
        """Render a Text node verbatim."""
        return node.content

    def visit_bold(self, node: Bold) -> str:
        """Render a Bold node as its content."""
        return self._render_children(node.children)

    def visit_italic(self, node: Italic) -> str:
        """Render an Italic node as its content."""
        return self._render_children(node.children)

    def visit_strikethrough(self, node: Strikethrough) -> str:
        """Render a Strikethrough node as its content."""
        return self._render_children(node.children)

    def visit_inline_code(self, node: InlineCode) -> str:
        """Render an InlineCode node as its code."""
        return node.code

    def visit_link(self, node: Link) -> str:
        """Render a Link node as ``text (url)``, or just the text."""
        if self.options.include_link_urls and node.url and node.url != node.text:
            return f"{node.text} ({node.url})"
        return node.text

    def visit_image(self, node: Image) -> str:
        """Render an Image node as its alt text."""
        return node.alt_text
