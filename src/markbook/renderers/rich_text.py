#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/renderers/rich_text.py
"""Component-tree rendering from AST.

This module provides the RichTextRenderer class. Instead of a flat string,
every visit method returns a :class:`rich.text.Text` component carrying its
own styled spans, and containers append the components of their children.
The resulting tree can be printed to a terminal, exported as ANSI, or reduced
to its plain string.

"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.style import Style
from rich.text import Text as RichText

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
from markbook.options.rich import RichRendererOptions
from markbook.renderers.base import BaseRenderer


class RichTextRenderer(BaseRenderer):
    """Render AST nodes to ``rich`` text components.

    Parameters
    ----------
    options : RichRendererOptions or None, default = None
        Style settings

    Examples
    --------
        >>> from markbook.ast import Document, Heading
        >>> doc = Document(children=(Heading(level=1, text="Title"),))
        >>> renderer = RichTextRenderer()
        >>> renderer.render_to_text(doc).plain
        'Title'

    """

    def __init__(self, options: RichRendererOptions | None = None):
        """Initialize the rich renderer with options."""
        BaseRenderer._validate_options_type(options, RichRendererOptions, "rich")
        options = options or RichRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: RichRendererOptions = options

    def render_to_text(self, doc: Document) -> RichText:
        """Render a document to a single styled component.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        rich.text.Text
            Styled text for the whole document

        """
        return doc.accept(self)

    def render_to_string(self, doc: Document) -> str:
        """Render a document to its plain string, without styles."""
        return self.render_to_text(doc).plain

    def render_to_ansi(self, doc: Document, color_system: str = "standard") -> str:
        """Render a document to a string with ANSI escape sequences.

        Parameters
        ----------
        doc : Document
            The document node to render
        color_system : str, default "standard"
            Colour system passed to :class:`rich.console.Console`

        Returns
        -------
        str
            Terminal-ready output

        """
        buffer = StringIO()
        console = Console(
            file=buffer,
            force_terminal=True,
            color_system=color_system,  # type: ignore[arg-type]
            width=self.options.width or 80,
            soft_wrap=self.options.width is None,
        )
        console.print(self.render_to_text(doc))
        return buffer.getvalue()

    def _styled_children(self, nodes: tuple[Node, ...], style: str = "") -> RichText:
        result = RichText(style=style)
        for child in nodes:
            result.append(child.accept(self))
        return result

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> RichText:
        """Render a Document node, one block per line."""
        return RichText("\n").join(child.accept(self) for child in node.children)

    def visit_heading(self, node: Heading) -> RichText:
        """Render a Heading node in its level style."""
        style = self.options.heading_styles.get(node.level, self.options.heading_fallback_style)
        return RichText(node.text, style=style)

    def visit_paragraph(self, node: Paragraph) -> RichText:
        """Render a Paragraph node, or an empty component if it is blank."""
        content = self._styled_children(node.children)
        if not content.plain.strip():
            return RichText()
        return content

    def visit_code_block(self, node: CodeBlock) -> RichText:
        """Render a CodeBlock node in the code style."""
        return RichText(node.code, style=self.options.code_style)

    def visit_blockquote(self, node: Blockquote) -> RichText:
        """Render a Blockquote node as a ``> `` line in the quote style."""
        return RichText(f"> {node.text}", style=self.options.quote_style)

    def visit_bullet_list(self, node: BulletList) -> RichText:
        """Render a BulletList node, one bulleted item per line."""
        lines = [RichText(self.options.bullet).append(item.accept(self)) for item in node.items]
        return RichText("\n").join(lines)

    def visit_ordered_list(self, node: OrderedList) -> RichText:
        """Render an OrderedList node numbered from 1."""
        lines = [RichText(f"{index + 1}. ").append(item.accept(self)) for index, item in enumerate(node.items)]
        return RichText("\n").join(lines)

    def visit_list_item(self, node: ListItem) -> RichText:
        """Render a ListItem node."""
        return self._styled_children(node.children)

    def visit_line_break(self, node: LineBreak) -> RichText:
        """Render a LineBreak node as an empty line."""
        return RichText()

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> RichText:
        """Render a Text node without style."""
        return RichText(node.content)

    def visit_bold(self, node: Bold) -> RichText:
        """Render a Bold node."""
        return self._styled_children(node.children, "bold")

    def visit_italic(self, node: Italic) -> RichText:
        """Render an Italic node."""
        return self._styled_children(node.children, "italic")

    def visit_strikethrough(self, node: Strikethrough) -> RichText:
        """Render a Strikethrough node."""
        return self._styled_children(node.children, "strike")

    def visit_inline_code(self, node: InlineCode) -> RichText:
        """Render an InlineCode node in the code style."""
        return RichText(node.code, style=self.options.code_style)

    def visit_link(self, node: Link) -> RichText:
        """Render a Link node as a terminal hyperlink in the link style."""
        style = Style.parse(self.options.link_style)
        if node.url:
            style += Style(link=node.url)
        return RichText(node.text, style=style)

    def visit_image(self, node: Image) -> RichText:
        """Render an Image node as an ``[Image: alt]`` placeholder."""
        return RichText(f"[Image: {node.alt_text}]", style="dim")
