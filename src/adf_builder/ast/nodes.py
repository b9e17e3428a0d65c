#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf_builder/ast/nodes.py
"""Node classes for the emitted ADF content tree.

This module defines the data model produced by the builders. The classes
mirror the JSON shape of an Atlassian Document Format document one-to-one:

    - Document: the ``{version, type, content}`` envelope
    - ContentNode: any block or inline node (heading, paragraph, table,
      tableRow, tableHeader, tableCell, text, ...)
    - Mark: a formatting annotation attached to a text node

Optional fields use ``None`` to mean *absent*. Absent fields are dropped by
:mod:`adf_builder.ast.serialization`, so the emitted JSON never contains
``null`` placeholders.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from adf_builder.constants import DEFAULT_DOCUMENT_TYPE, DEFAULT_DOCUMENT_VERSION, ContentType


@dataclass(frozen=True)
class Mark:
    """Formatting mark attached to a text node.

    Parameters
    ----------
    type : str
        Mark kind (e.g. ``"strong"``, ``"link"``). Any string is allowed
        for structured marks.
    attrs : dict or None, default = None
        Mark attributes (e.g. ``{"href": ...}`` for links)
    extra : dict or None, default = None
        Further top-level keys of a structured mark given as a mapping,
        emitted unchanged after ``type`` and ``attrs``

    """

    type: str
    attrs: Optional[dict[str, Any]] = None
    extra: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        """Convert the mark to its plain dictionary form."""
        from adf_builder.ast.serialization import ast_to_dict

        return ast_to_dict(self)


@dataclass(frozen=True)
class ContentNode:
    """A node of the content tree.

    A node is either a leaf (``text`` set, no ``content``) or a container
    (``content`` holds child nodes).

    Parameters
    ----------
    type : str
        Node kind (e.g. ``"paragraph"``, ``"text"``, ``"table"``)
    attrs : dict or None, default = None
        Node attributes
    content : list of ContentNode or None, default = None
        Child nodes
    text : str or None, default = None
        Text of a leaf node
    marks : list of Mark or None, default = None
        Marks of a leaf text node

    """

    type: str
    attrs: Optional[dict[str, Any]] = None
    content: Optional[list[Any]] = None
    text: Optional[str] = None
    marks: Optional[list[Mark]] = None

    @property
    def is_leaf(self) -> bool:
        """Whether this node carries text rather than children."""
        return self.content is None and self.text is not None

    def to_dict(self) -> dict[str, Any]:
        """Convert the node and its children to plain dictionaries."""
        from adf_builder.ast.serialization import ast_to_dict

        return ast_to_dict(self)


@dataclass(frozen=True)
class Document:
    """Root document envelope.

    Parameters
    ----------
    version : int, default = 1
        ADF version number
    type : str, default = "doc"
        Document node kind
    content : list, default = empty list
        Top-level content nodes

    """

    version: int = DEFAULT_DOCUMENT_VERSION
    type: str = DEFAULT_DOCUMENT_TYPE
    content: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert the document to plain dictionaries."""
        from adf_builder.ast.serialization import ast_to_dict

        return ast_to_dict(self)


def text_node(text: str, marks: Optional[list[Mark]] = None) -> ContentNode:
    """Create a leaf text node.

    Parameters
    ----------
    text : str
        Text content
    marks : list of Mark or None, default = None
        Marks to attach. An empty list is treated as no marks.

    Returns
    -------
    ContentNode
        Leaf node of kind ``"text"``

    """
    return ContentNode(type=ContentType.TEXT.value, text=text, marks=list(marks) if marks else None)
