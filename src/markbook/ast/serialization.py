#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markbook/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

Every node is written as a dictionary carrying a ``node_type`` discriminator
plus its fields. Child tuples become lists. The root of a JSON document also
carries a ``schema_version`` so that later releases can migrate old dumps.

Examples
--------
    >>> from markbook.ast import Document, Heading
    >>> from markbook.ast.serialization import ast_to_json, json_to_ast
    >>> doc = Document(children=(Heading(level=1, text="Title"),))
    >>> json_to_ast(ast_to_json(doc)) == doc
    True

"""

from __future__ import annotations

import json
import logging
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

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def _serialize_children_node(node: Any) -> dict[str, Any]:
    return {"node_type": type(node).__name__, "children": [ast_to_dict(child) for child in node.children]}


def _serialize_list(node: BulletList | OrderedList) -> dict[str, Any]:
    return {"node_type": type(node).__name__, "items": [ast_to_dict(item) for item in node.items]}


# Dispatch table mapping node types to their serialization functions
_SERIALIZATION_DISPATCH: dict[type, Any] = {
    Document: _serialize_children_node,
    Paragraph: _serialize_children_node,
    ListItem: _serialize_children_node,
    Bold: _serialize_children_node,
    Italic: _serialize_children_node,
    Strikethrough: _serialize_children_node,
    BulletList: _serialize_list,
    OrderedList: _serialize_list,
    Heading: lambda n: {"node_type": "Heading", "level": n.level, "text": n.text},
    Text: lambda n: {"node_type": "Text", "content": n.content},
    InlineCode: lambda n: {"node_type": "InlineCode", "code": n.code},
    CodeBlock: lambda n: {"node_type": "CodeBlock", "code": n.code, "language": n.language},
    Link: lambda n: {"node_type": "Link", "text": n.text, "url": n.url},
    Image: lambda n: {"node_type": "Image", "alt_text": n.alt_text, "url": n.url},
    Blockquote: lambda n: {"node_type": "Blockquote", "text": n.text},
    LineBreak: lambda n: {"node_type": "LineBreak"},
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node is not one of the known node classes

    Examples
    --------
    >>> ast_to_dict(Text(content="Hello"))
    {'node_type': 'Text', 'content': 'Hello'}

    """
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")


def _deserialize_children(children_data: list[dict[str, Any]]) -> tuple[Node, ...]:
    return tuple(dict_to_ast(child) for child in children_data)


def _deserialize_list_items(items_data: list[dict[str, Any]]) -> tuple[ListItem, ...]:
    items = _deserialize_children(items_data)
    for item in items:
        if not isinstance(item, ListItem):
            raise ValueError(f"List items must be ListItem nodes, got {type(item).__name__}")
    return items  # type: ignore[return-value]


def _deserialize_document(data: dict[str, Any]) -> Document:
    """Deserialize Document node."""
    return Document(children=_deserialize_children(data.get("children", [])))


def _deserialize_paragraph(data: dict[str, Any]) -> Paragraph:
    """Deserialize Paragraph node."""
    return Paragraph(children=_deserialize_children(data.get("children", [])))


def _deserialize_list_item(data: dict[str, Any]) -> ListItem:
    """Deserialize ListItem node."""
    return ListItem(children=_deserialize_children(data.get("children", [])))


def _deserialize_bold(data: dict[str, Any]) -> Bold:
    """Deserialize Bold node."""
    return Bold(children=_deserialize_children(data.get("children", [])))


def _deserialize_italic(data: dict[str, Any]) -> Italic:
    """Deserialize Italic node."""
    return Italic(children=_deserialize_children(data.get("children", [])))


def _deserialize_strikethrough(data: dict[str, Any]) -> Strikethrough:
    """Deserialize Strikethrough node."""
    return Strikethrough(children=_deserialize_children(data.get("children", [])))


# Dispatch table mapping node type strings to deserializer functions
_DESERIALIZATION_DISPATCH: dict[str, Any] = {
    "Document": _deserialize_document,
    "Paragraph": _deserialize_paragraph,
    "ListItem": _deserialize_list_item,
    "Bold": _deserialize_bold,
    "Italic": _deserialize_italic,
    "Strikethrough": _deserialize_strikethrough,
    "BulletList": lambda data: BulletList(items=_deserialize_list_items(data.get("items", []))),
    "OrderedList": lambda data: OrderedList(items=_deserialize_list_items(data.get("items", []))),
    "Heading": lambda data: Heading(level=data["level"], text=data.get("text", "")),
    "Text": lambda data: Text(content=data["content"]),
    "InlineCode": lambda data: InlineCode(code=data["code"]),
    "CodeBlock": lambda data: CodeBlock(code=data["code"], language=data.get("language", "")),
    "Link": lambda data: Link(text=data.get("text", ""), url=data["url"]),
    "Image": lambda data: Image(alt_text=data.get("alt_text", ""), url=data["url"]),
    "Blockquote": lambda data: Blockquote(text=data.get("text", "")),
    "LineBreak": lambda data: LineBreak(),
}


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a dictionary representation back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types.
        If False, replace them with a placeholder Text node.

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the dictionary has no ``node_type`` or an unknown one and
        strict_mode is True

    """
    node_type = data.get("node_type")
    if not node_type:
        if strict_mode:
            raise ValueError("Dictionary must contain 'node_type' field")
        logger.warning("Dictionary missing 'node_type' field, skipping")
        return Text(content="")

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if not deserializer:
        if strict_mode:
            raise ValueError(f"Unknown node type: {node_type}")
        logger.warning(f"Unknown node type '{node_type}', skipping")
        return Text(content=f"[Unknown node type: {node_type}]")

    return deserializer(data)


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with a schema version.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string of the form ``{"schema_version": 1, "node_type": ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, validate_schema: bool = True, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    Parameters
    ----------
    json_str : str
        JSON string representation
    validate_schema : bool, default True
        If True, reject schema versions other than the supported one.
        Missing versions are treated as the current version.
    strict_mode : bool, default True
        Passed through to :func:`dict_to_ast`

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the schema version is unsupported or a node type is unknown
    json.JSONDecodeError
        If the JSON string is malformed

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    schema_version = data.pop("schema_version", None)

    if validate_schema:
        if schema_version is None:
            schema_version = SCHEMA_VERSION
        if not isinstance(schema_version, int):
            raise ValueError(f"Schema version must be an integer, got {type(schema_version).__name__}")
        elif schema_version != SCHEMA_VERSION:
            raise ValueError(
                f"Unsupported schema version: {schema_version}. "
                f"This version of markbook supports schema version {SCHEMA_VERSION} only."
            )
    elif schema_version is not None and schema_version != SCHEMA_VERSION:
        logger.warning(
            f"Schema version {schema_version} differs from supported version {SCHEMA_VERSION}. "
            f"Attempting to parse anyway (schema validation disabled)."
        )

    return dict_to_ast(data, strict_mode=strict_mode)


__all__ = [
    "SCHEMA_VERSION",
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
