#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/ast/__init__.py
"""Abstract syntax tree for parsed markup.

The node classes, the visitor contract every renderer implements, and JSON
serialization helpers.
"""

from markbook.ast.nodes import (
    NODE_TYPES,
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
    collect_text,
    get_node_children,
    walk,
)
from markbook.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from markbook.ast.visitors import NodeVisitor

__all__ = [
    "NODE_TYPES",
    "Node",
    "Document",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "Blockquote",
    "BulletList",
    "OrderedList",
    "ListItem",
    "LineBreak",
    "Text",
    "Bold",
    "Italic",
    "Strikethrough",
    "InlineCode",
    "Link",
    "Image",
    "NodeVisitor",
    "get_node_children",
    "walk",
    "collect_text",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
]
