#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/ast/nodes.py
"""AST node classes for parsed markup.

This module defines the closed node set produced by the parser. Each node
represents a block-level or inline element of the document and supports the
visitor pattern through ``accept``.

Node Hierarchy
--------------
All nodes inherit from the base Node class.

Block-level nodes:
    - Document, Heading, Paragraph, CodeBlock, Blockquote
    - BulletList, OrderedList, ListItem, LineBreak

Inline nodes:
    - Text, Bold, Italic, Strikethrough, InlineCode, Link, Image

Nodes are frozen dataclasses and child collections are tuples: a tree is
built once by a single parse and never mutated afterwards, so one tree can
be rendered by several renderers, or from several threads, without copying.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator

from markbook.constants import MAX_HEADING_LEVEL


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering.

    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Block-level nodes in the document

    """

    children: tuple[Node, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document.

        Returns
        -------
        Any
            Result from visitor.visit_document(self)

        """
        return visitor.visit_document(self)


@dataclass(frozen=True)
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    text : str, default = ''
        Heading text

    """

    level: int
    text: str = ""

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"Heading level must be 1-{MAX_HEADING_LEVEL}, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading.

        Returns
        -------
        Any
            Result from visitor.visit_heading(self)

        """
        return visitor.visit_heading(self)


@dataclass(frozen=True)
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Inline nodes representing paragraph content

    """

    children: tuple[Node, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph.

        Returns
        -------
        Any
            Result from visitor.visit_paragraph(self)

        """
        return visitor.visit_paragraph(self)


@dataclass(frozen=True)
class CodeBlock(Node):
    """Fenced code block with optional language tag.

    Parameters
    ----------
    code : str
        Code content (not parsed as markup)
    language : str, default = ''
        Language tag from the opening fence, empty when absent

    """

    code: str
    language: str = ""

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block.

        Returns
        -------
        Any
            Result from visitor.visit_code_block(self)

        """
        return visitor.visit_code_block(self)


@dataclass(frozen=True)
class Blockquote(Node):
    """Single-line blockquote.

    Parameters
    ----------
    text : str
        Quoted text with the ``>`` marker removed

    """

    text: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this blockquote.

        Returns
        -------
        Any
            Result from visitor.visit_blockquote(self)

        """
        return visitor.visit_blockquote(self)


@dataclass(frozen=True)
class ListItem(Node):
    """List item node containing inline content.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Inline nodes of the item

    """

    children: tuple[Node, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item.

        Returns
        -------
        Any
            Result from visitor.visit_list_item(self)

        """
        return visitor.visit_list_item(self)


@dataclass(frozen=True)
class BulletList(Node):
    """Unordered list.

    Parameters
    ----------
    items : tuple of ListItem, default = ()
        List items; an empty list is legal but never produced by the parser

    """

    items: tuple[ListItem, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list.

        Returns
        -------
        Any
            Result from visitor.visit_bullet_list(self)

        """
        return visitor.visit_bullet_list(self)


@dataclass(frozen=True)
class OrderedList(Node):
    """Numbered list.

    Renderers number the items from 1 regardless of the numbers written in
    the source.

    Parameters
    ----------
    items : tuple of ListItem, default = ()
        List items

    """

    items: tuple[ListItem, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list.

        Returns
        -------
        Any
            Result from visitor.visit_ordered_list(self)

        """
        return visitor.visit_ordered_list(self)


@dataclass(frozen=True)
class LineBreak(Node):
    """Explicit blank-line break at document level.

    Only produced when the parser runs with ``emit_line_breaks`` enabled.
    """

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break.

        Returns
        -------
        Any
            Result from visitor.visit_line_break(self)

        """
        return visitor.visit_line_break(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content, whitespace preserved verbatim

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text.

        Returns
        -------
        Any
            Result from visitor.visit_text(self)

        """
        return visitor.visit_text(self)


@dataclass(frozen=True)
class Bold(Node):
    """Bold (strong) span.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Inline nodes inside the span

    """

    children: tuple[Node, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bold span.

        Returns
        -------
        Any
            Result from visitor.visit_bold(self)

        """
        return visitor.visit_bold(self)


@dataclass(frozen=True)
class Italic(Node):
    """Italic (emphasis) span.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Inline nodes inside the span

    """

    children: tuple[Node, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this italic span.

        Returns
        -------
        Any
            Result from visitor.visit_italic(self)

        """
        return visitor.visit_italic(self)


@dataclass(frozen=True)
class Strikethrough(Node):
    """Strikethrough span.

    Parameters
    ----------
    children : tuple of Node, default = ()
        Inline nodes inside the span

    """

    children: tuple[Node, ...] = ()

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough span.

        Returns
        -------
        Any
            Result from visitor.visit_strikethrough(self)

        """
        return visitor.visit_strikethrough(self)


@dataclass(frozen=True)
class InlineCode(Node):
    """Inline code span.

    Parameters
    ----------
    code : str
        Code content

    """

    code: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline code.

        Returns
        -------
        Any
            Result from visitor.visit_inline_code(self)

        """
        return visitor.visit_inline_code(self)


@dataclass(frozen=True)
class Link(Node):
    """Hyperlink.

    Parameters
    ----------
    text : str
        Link text
    url : str
        Link destination

    """

    text: str
    url: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link.

        Returns
        -------
        Any
            Result from visitor.visit_link(self)

        """
        return visitor.visit_link(self)


@dataclass(frozen=True)
class Image(Node):
    """Embedded image.

    Parameters
    ----------
    alt_text : str
        Alternative text description
    url : str
        Image source

    """

    alt_text: str
    url: str

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image.

        Returns
        -------
        Any
            Result from visitor.visit_image(self)

        """
        return visitor.visit_image(self)


NODE_TYPES: tuple[type[Node], ...] = (
    Document,
    Heading,
    Paragraph,
    CodeBlock,
    Blockquote,
    ListItem,
    BulletList,
    OrderedList,
    LineBreak,
    Text,
    Bold,
    Italic,
    Strikethrough,
    InlineCode,
    Link,
    Image,
)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list for leaf nodes)

    Examples
    --------
    >>> paragraph = Paragraph(children=(Text("Hello"), Bold(children=(Text("world"),))))
    >>> len(get_node_children(paragraph))
    2

    """
    if isinstance(node, (Document, Paragraph, ListItem, Bold, Italic, Strikethrough)):
        return list(node.children)

    if isinstance(node, (BulletList, OrderedList)):
        return list(node.items)

    return []


def walk(node: Node) -> Iterator[Node]:
    """Iterate over a tree in pre-order, starting with ``node`` itself.

    Parameters
    ----------
    node : Node
        Root of the subtree to walk

    Yields
    ------
    Node
        Every node of the subtree exactly once

    """
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(get_node_children(current)))


def collect_text(node: Node) -> str:
    """Concatenate the visible text of a subtree without any formatting."""
    parts: list[str] = []
    for current in walk(node):
        if isinstance(current, Text):
            parts.append(current.content)
        elif isinstance(current, InlineCode):
            parts.append(current.code)
        elif isinstance(current, (Heading, Blockquote, Link)):
            parts.append(current.text)
        elif isinstance(current, Image):
            parts.append(current.alt_text)
        elif isinstance(current, CodeBlock):
            parts.append(current.code)
    return "".join(parts)
