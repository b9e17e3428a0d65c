#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf_builder/ast/serialization.py
"""JSON serialization for ADF content trees.

This module converts the dataclasses of :mod:`adf_builder.ast.nodes` to the
plain dictionaries and JSON text consumed by ADF renderers.

The output:
- keeps field order (``version, type, content`` for documents and
  ``type, attrs, content, text, marks`` for nodes)
- omits absent (``None``) fields entirely, never emitting ``null``
- unwraps enum members to their raw values
- passes mappings, sequences and scalars through, so nodes appended to a
  document as raw dictionaries survive unchanged

Examples
--------
    >>> from adf_builder.ast import DocumentBuilder, TextNode
    >>> doc = DocumentBuilder().add(TextNode("Hello").paragraph()).to_document()
    >>> ast_to_json(doc)
    '{"version": 1, "type": "doc", "content": [{"type": "paragraph", "content": [{"type": "text", "text": "Hello"}]}]}'

"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

from adf_builder.ast.nodes import ContentNode, Document, Mark

_NODE_FIELDS = ("type", "attrs", "content", "text", "marks")
_MARK_FIELDS = ("type", "attrs")


def _serialize_fields(obj: Any, field_names: tuple[str, ...]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for name in field_names:
        value = getattr(obj, name)
        if value is not None:
            result[name] = ast_to_dict(value)
    return result


def _serialize_document(node: Document) -> dict[str, Any]:
    return {
        "version": ast_to_dict(node.version),
        "type": ast_to_dict(node.type),
        "content": [ast_to_dict(child) for child in node.content],
    }


def ast_to_dict(obj: Any) -> Any:
    """Convert a content tree to plain Python data.

    Parameters
    ----------
    obj : Document, ContentNode, Mark or any
        Tree (or fragment) to convert. Other values are converted
        recursively when they are mappings or lists and returned as-is
        otherwise.

    Returns
    -------
    any
        JSON-compatible data; a ``dict`` for documents, nodes and marks

    """
    if isinstance(obj, Document):
        return _serialize_document(obj)
    if isinstance(obj, ContentNode):
        return _serialize_fields(obj, _NODE_FIELDS)
    if isinstance(obj, Mark):
        result = _serialize_fields(obj, _MARK_FIELDS)
        for key, value in (obj.extra or {}).items():
            result.setdefault(key, ast_to_dict(value))
        return result
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, Mapping):
        return {key: ast_to_dict(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [ast_to_dict(item) for item in obj]
    return obj


def ast_to_json(
    obj: Any,
    indent: int | None = None,
    ensure_ascii: bool = False,
    sort_keys: bool = False,
) -> str:
    """Serialize a content tree to a JSON string.

    Parameters
    ----------
    obj : Document, ContentNode, Mark or any
        Tree (or fragment) to serialize
    indent : int or None, default = None
        Indentation for pretty printing; None for compact output
    ensure_ascii : bool, default = False
        Whether to escape non-ASCII characters
    sort_keys : bool, default = False
        Whether to sort object keys

    Returns
    -------
    str
        JSON text

    """
    return json.dumps(ast_to_dict(obj), indent=indent, ensure_ascii=ensure_ascii, sort_keys=sort_keys)
