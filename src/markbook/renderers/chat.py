#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/renderers/chat.py
"""Game-chat formatting rendering from AST.

This module provides the ChatRenderer class which converts the AST to a
string carrying legacy section-sign formatting codes (``§1`` dark blue,
``§l`` bold, ``§r`` reset and so on), the form accepted by in-game chat
lines, signs and book pages.

Formatting codes do not nest: ``§r`` clears colour and every format at once.
After closing a span the renderer therefore re-emits the codes of all spans
that are still open, so ``**bold *italic* more**`` keeps ``more`` bold.

"""

from __future__ import annotations

from typing import Callable

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
from markbook.constants import CHAT_COLOR_CODES, CHAT_FORMAT_CODES, CHAT_SECTION_SIGN
from markbook.options.chat import ChatRendererOptions
from markbook.renderers.base import BaseRenderer

RESET = CHAT_SECTION_SIGN + CHAT_FORMAT_CODES["reset"]


def color_code(color: str) -> str:
    """Return the formatting code for a named colour.

    Parameters
    ----------
    color : str
        Colour name such as ``"dark_blue"``

    Returns
    -------
    str
        Section sign followed by the colour character, e.g. ``"§1"``

    """
    return CHAT_SECTION_SIGN + CHAT_COLOR_CODES[color]


def format_code(name: str) -> str:
    """Return the formatting code for ``bold``, ``italic``, ``underline`` etc."""
    return CHAT_SECTION_SIGN + CHAT_FORMAT_CODES[name]


def strip_formatting(text: str) -> str:
    """Remove every section-sign code from ``text``.

    Examples
    --------
    >>> strip_formatting("§1§lTitle§r")
    'Title'

    """
    parts = text.split(CHAT_SECTION_SIGN)
    return parts[0] + "".join(part[1:] for part in parts[1:])


class ChatRenderer(BaseRenderer):
    """Render AST nodes to section-sign formatted chat text.

    A renderer instance keeps the stack of open formatting codes while it
    renders, so one instance should not render two documents concurrently.

    Parameters
    ----------
    options : ChatRendererOptions or None, default = None
        Colour and list settings

    Examples
    --------
        >>> from markbook.ast import Document, Heading
        >>> doc = Document(children=(Heading(level=1, text="Title"),))
        >>> ChatRenderer().render_to_string(doc)
        '§1§lTitle§r'

    """

    def __init__(self, options: ChatRendererOptions | None = None):
        """Initialize the chat renderer with options."""
        BaseRenderer._validate_options_type(options, ChatRendererOptions, "chat")
        options = options or ChatRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: ChatRendererOptions = options
        self._active_codes: list[str] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to formatted chat text.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Text with embedded formatting codes

        """
        self._active_codes = []
        return doc.accept(self)

    def _styled(self, codes: str, render_content: Callable[[], str]) -> str:
        """Wrap rendered content in ``codes`` and a reset.

        The codes of enclosing spans are re-applied after the reset.
        """
        self._active_codes.append(codes)
        try:
            content = render_content()
        finally:
            self._active_codes.pop()
        return f"{codes}{content}{RESET}{''.join(self._active_codes)}"

    def _heading_codes(self, level: int) -> str:
        color = self.options.heading_colors.get(level, self.options.heading_fallback_color)
        codes = color_code(color)
        if level in self.options.bold_heading_levels:
            codes += format_code("bold")
        return codes

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> str:
        """Render a Document node, one block per line."""
        return self._render_children(node.children, "\n")

    def visit_heading(self, node: Heading) -> str:
        """Render a Heading node in its level colour.

        Levels 1 and 2 (by default) are also bold; levels without a colour
        in the options use the neutral fallback colour.
        """
        return self._styled(self._heading_codes(node.level), lambda: node.text)

    def visit_paragraph(self, node: Paragraph) -> str:
        """Render a Paragraph node, or the empty string if it is blank."""
        content = self._render_children(node.children)
        if not content.strip():
            return ""
        return content

    def visit_code_block(self, node: CodeBlock) -> str:
        """Render a CodeBlock node in the code colour."""
        return self._styled(color_code(self.options.code_color), lambda: node.code)

    def visit_blockquote(self, node: Blockquote) -> str:
        """Render a Blockquote node as an italic ``> `` line."""
        codes = color_code(self.options.quote_color) + format_code("italic")
        return self._styled(codes, lambda: f"> {node.text}")

    def visit_bullet_list(self, node: BulletList) -> str:
        """Render a BulletList node, one bulleted item per line."""
        return "\n".join(f"{self.options.bullet}{item.accept(self)}" for item in node.items)

    def visit_ordered_list(self, node: OrderedList) -> str:
        """Render an OrderedList node numbered from 1."""
        return "\n".join(f"{index + 1}. {item.accept(self)}" for index, item in enumerate(node.items))

    def visit_list_item(self, node: ListItem) -> str:
        """Render a ListItem node."""
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
        """Render a Bold node."""
        return self._styled(format_code("bold"), lambda: self._render_children(node.children))

    def visit_italic(self, node: Italic) -> str:
        """Render an Italic node."""
        return self._styled(format_code("italic"), lambda: self._render_children(node.children))

    def visit_strikethrough(self, node: Strikethrough) -> str:
        """Render a Strikethrough node."""
        return self._styled(format_code("strikethrough"), lambda: self._render_children(node.children))

    def visit_inline_code(self, node: InlineCode) -> str:
        """Render an InlineCode node in the code colour."""
        return self._styled(color_code(self.options.code_color), lambda: node.code)

    def visit_link(self, node: Link) -> str:
        """Render a Link node as underlined text in the link colour.

        Chat text cannot carry a click target, so only the link text is
        shown.
        """
        codes = color_code(self.options.link_color) + format_code("underline")
        return self._styled(codes, lambda: node.text)

    def visit_image(self, node: Image) -> str:
        """Render an Image node as an ``[Image: alt]`` placeholder."""
        return self._styled(color_code(self.options.image_color), lambda: f"[Image: {node.alt_text}]")
