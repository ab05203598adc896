#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/renderers/html.py
"""HTML rendering from AST.

This module provides the HtmlRenderer class which converts the AST to an
HTML fragment or, optionally, a minimal standalone HTML5 document.

"""

from __future__ import annotations

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
from markbook.constants import HTML_ESCAPES
from markbook.options.html import HtmlRendererOptions
from markbook.renderers.base import BaseRenderer


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape the five HTML special characters when enabled.

    ``&`` is replaced first so the entities produced for the other
    characters are not escaped a second time.

    Parameters
    ----------
    text : str
        Text to escape
    enabled : bool, default True
        Return ``text`` unchanged when False

    Returns
    -------
    str
        Escaped text

    Examples
    --------
    >>> escape_html("<script>&")
    '&lt;script&gt;&amp;'

    """
    if not enabled:
        return text
    for char, entity in HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


class HtmlRenderer(BaseRenderer):
    """Render AST nodes to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from markbook.ast import Document, Heading
        >>> doc = Document(children=(Heading(level=1, text="Title"),))
        >>> HtmlRenderer().render_to_string(doc)
        '<h1>Title</h1>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options

    def _escape(self, text: str) -> str:
        return escape_html(text, enabled=self.options.escape_html)

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to an HTML string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            HTML fragment, or a complete document when ``standalone`` is set

        """
        content = doc.accept(self)
        if self.options.standalone:
            return self._wrap_in_document(content)
        return content

    def _wrap_in_document(self, content: str) -> str:
        """Wrap content in a minimal HTML5 document."""
        parts = [
            "<!DOCTYPE html>",
            f'<html lang="{self._escape(self.options.language)}">',
            "<head>",
            '<meta charset="UTF-8">',
            f"<title>{self._escape(self.options.title)}</title>",
            "</head>",
            "<body>",
            content,
            "</body>",
            "</html>",
        ]
        return "\n".join(parts)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> str:
        """Render a Document node, one block per line."""
        return self._render_children(node.children, "\n")

    def visit_heading(self, node: Heading) -> str:
        """Render a Heading node as ``<h1>``..``<h6>``."""
        return f"<h{node.level}>{self._escape(node.text)}</h{node.level}>"

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a Paragraph node.

        Paragraphs whose content is blank render to the empty string rather
        than an empty ``<p></p>`` wrapper.
        """
        content = self._render_children(node.children)
        if not content.strip():
            return ""
        return f"<p>{content}</p>"

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a CodeBlock node.

        Parameters
        ----------
        node : CodeBlock
            Code block to render

        """
        class_attr = ""
        if node.language:
            class_attr = f' class="{self._escape(self.options.language_class_prefix + node.language)}"'
        return f"<pre><code{class_attr}>{self._escape(node.code)}</code></pre>"

    def visit_blockquote(self, node: Blockquote) -> str:
        """Render a Blockquote node."""
        return f"<blockquote>{self._escape(node.text)}</blockquote>"

    def visit_bullet_list(self, node: BulletList) -> str:
        """Render a BulletList node as ``<ul>``."""
        return self._render_list("ul", node.items)

    def visit_ordered_list(self, node: OrderedList) -> str:
        """Render an OrderedList node as ``<ol>``."""
        return self._render_list("ol", node.items)

    def _render_list(self, tag: str, items: tuple[ListItem, ...]) -> str:
        lines = [f"<{tag}>", *(item.accept(self) for item in items), f"</{tag}>"]
        return "\n".join(lines)

    def visit_list_item(self, node: ListItem) -> str:
        """Render a ListItem node."""
        return f"<li>{self._render_children(node.children)}</li>"

    def visit_line_break(self, node: LineBreak) -> str:
        """Render a LineBreak node."""
        return "<br>"

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> str:
        """Render a Text node with HTML escaping."""
        return self._escape(node.content)

    def visit_bold(self, node: Bold) -> str:
        """Render a Bold node."""
        return f"<strong>{self._render_children(node.children)}</strong>"

    def visit_italic(self, node: Italic) -> str:
        """Render an Italic node."""
        return f"<em>{self._render_children(node.children)}</em>"

    def visit_strikethrough(self, node: Strikethrough) -> str:
        """Render a Strikethrough node."""
        return f"<del>{self._render_children(node.children)}</del>"

    def visit_inline_code(self, node: InlineCode) -> str:
        """Render an InlineCode node."""
        return f"<code>{self._escape(node.code)}</code>"

    def visit_link(self, node: Link) -> str:
        """Render a Link node.

        Parameters
        ----------
        node : Link
            Link to render

        """
        return f'<a href="{self._escape(node.url)}">{self._escape(node.text)}</a>'

    def visit_image(self, node: Image) -> str:
        """Render an Image node.

        Parameters
        ----------
        node : Image
            Image to render

        """
        return f'<img src="{self._escape(node.url)}" alt="{self._escape(node.alt_text)}">'
