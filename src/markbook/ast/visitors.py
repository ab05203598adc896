#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class that every renderer implements.
Each node's ``accept`` calls exactly one ``visit_*`` method, so adding a new
output format never touches the node classes. A visitor that forgets to
handle a node kind cannot be instantiated.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from markbook.ast.nodes import (
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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses must implement one visit_* method per node kind.

    Examples
    --------
    Visitor that counts words in text leaves:

        >>> class WordCounter(NodeVisitor):
        ...     def visit_text(self, node):
        ...         return len(node.content.split())
        ...     # ... remaining visit_* methods ...

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The heading node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_bold(self, node: Bold) -> Any:
        """Visit a Bold node."""
        pass

    @abstractmethod
    def visit_italic(self, node: Italic) -> Any:
        """Visit an Italic node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_inline_code(self, node: InlineCode) -> Any:
        """Visit an InlineCode node."""
        pass

    @abstractmethod
    def visit_code_block(self, node: CodeBlock) -> Any:
        """Visit a CodeBlock node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image) -> Any:
        """Visit an Image node."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList) -> Any:
        """Visit a BulletList node."""
        pass

    @abstractmethod
    def visit_ordered_list(self, node: OrderedList) -> Any:
        """Visit an OrderedList node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_blockquote(self, node: Blockquote) -> Any:
        """Visit a Blockquote node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    def visit_children(self, nodes: tuple[Node, ...]) -> list[Any]:
        """Visit each node in order and collect the results.

        Parameters
        ----------
        nodes : tuple of Node
            Nodes to visit

        Returns
        -------
        list
            One result per node, in source order

        """
        return [child.accept(self) for child in nodes]
