#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf_builder/ast/builder.py
"""Builder classes for constructing ADF content trees.

This module provides the builders callers use to assemble a document:

- TextNode: text plus marks, finalized into heading or paragraph nodes
- merge_paragraphs: joins paragraph nodes into one inline paragraph
- TableBuilder: header/data cells, rows and the table node
- DocumentBuilder: ordered container of top-level nodes

Builders hold raw input; the emitted :class:`ContentNode` and
:class:`Document` values are produced on demand.

"""

from __future__ import annotations

import copy
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional, Sequence

from adf_builder.ast.marks import MarkInput, validate_marks
from adf_builder.ast.nodes import ContentNode, Document, text_node
from adf_builder.ast.serialization import ast_to_json
from adf_builder.constants import (
    DEFAULT_CELL_SPAN,
    DEFAULT_DOCUMENT_TYPE,
    DEFAULT_DOCUMENT_VERSION,
    DEFAULT_MERGE_SPACING,
    DEFAULT_TABLE_DISPLAY_MODE,
    DEFAULT_TABLE_LAYOUT,
    DEFAULT_TABLE_NUMBER_COLUMN_ENABLED,
    ContentType,
    HeadingLevel,
    TableDisplayMode,
    TableLayout,
    TableNodeType,
    TextType,
)
from adf_builder.exceptions import MissingRequiredFieldError

logger = logging.getLogger(__name__)


def _plain_value(value: Any) -> Any:
    """Unwrap enum members to their raw value."""
    return value.value if isinstance(value, Enum) else value


def _node_content(node: Any) -> Sequence[Any]:
    """Children of a node given as a ContentNode or a raw mapping."""
    if node is None:
        return []
    if isinstance(node, Mapping):
        return node.get("content") or []
    return node.content or []


def merge_paragraphs(paragraphs: Sequence[Any], spacing: int = DEFAULT_MERGE_SPACING) -> ContentNode:
    """Merge paragraph nodes into a single inline paragraph.

    The children of each paragraph are concatenated in order. When
    ``spacing`` is positive, a text node of ``spacing`` spaces is inserted
    after every paragraph except the last one. A paragraph without content
    contributes no children but is still followed by a spacer.

    Parameters
    ----------
    paragraphs : sequence of ContentNode or Mapping
        Previously built paragraph nodes, or raw mappings with a
        ``"content"`` key
    spacing : int, default = 1
        Number of spaces between merged paragraphs (0 for none)

    Returns
    -------
    ContentNode
        Paragraph node without attributes

    Examples
    --------
    >>> merged = merge_paragraphs([TextNode("First").paragraph(), TextNode("Second").paragraph()])
    >>> [child.text for child in merged.content]
    ['First', ' ', 'Second']

    """
    content: list[Any] = []
    last_index = len(paragraphs) - 1

    for index, paragraph in enumerate(paragraphs):
        content.extend(copy.deepcopy(list(_node_content(paragraph))))
        if index < last_index and spacing > 0:
            content.append(text_node(" " * spacing))

    logger.debug("Merged %d paragraphs into %d inline nodes", len(paragraphs), len(content))
    return ContentNode(type=TextType.PARAGRAPH.value, content=content)


class TextNode:
    """Text with optional marks, convertible to heading and paragraph nodes.

    Construction fails immediately on empty text. Marks are kept exactly as
    given and validated only when the node is finalized (``finalize``,
    ``heading`` or ``paragraph``).

    Parameters
    ----------
    text : str
        The text content. Must not be empty.
    *marks : MarkInput
        Marks to apply: known tag strings, ``Mark`` instances or mappings
        with a ``"type"`` key

    Raises
    ------
    MissingRequiredFieldError
        If ``text`` is empty

    Examples
    --------
    >>> TextNode("Title").heading(HeadingLevel.H2, local_id="intro")
    >>> TextNode("Click here", Link("https://example.com").to_mark(), "strong").paragraph()

    """

    def __init__(self, text: str, *marks: MarkInput):
        """Initialize the text node, rejecting empty text."""
        if not text:
            raise MissingRequiredFieldError("text")
        self._text = text
        self._marks: list[Any] = list(marks)

    @property
    def text(self) -> str:
        """The text content."""
        return self._text

    def get_marks(self) -> list[Any]:
        """Get a copy of the raw, unvalidated mark inputs.

        Returns
        -------
        list
            Mark inputs in the order they were supplied

        """
        return copy.deepcopy(self._marks)

    def finalize(self) -> ContentNode:
        """Validate the marks and emit the leaf text node.

        Returns
        -------
        ContentNode
            Node of kind ``"text"``; ``marks`` is absent when there are none

        Raises
        ------
        InvalidMarkError
            If any mark is rejected

        """
        marks = validate_marks(self._marks)
        logger.debug("Finalized text node with %d marks", len(marks))
        return text_node(self._text, marks)

    def heading(self, level: HeadingLevel | int = HeadingLevel.H1, local_id: Optional[str] = None) -> ContentNode:
        """Create a heading node containing this text.

        Parameters
        ----------
        level : HeadingLevel or int, default = HeadingLevel.H1
            Heading level (1-6). Emitted as a plain integer.
        local_id : str or None, default = None
            Optional local identifier

        Returns
        -------
        ContentNode
            Node of kind ``"heading"``

        Raises
        ------
        InvalidMarkError
            If any mark is rejected

        """
        attrs: dict[str, Any] = {"level": int(level)}
        if local_id is not None:
            attrs["localId"] = local_id

        return ContentNode(type=TextType.HEADING.value, attrs=attrs, content=[self.finalize()])

    def paragraph(self, local_id: Optional[str] = None) -> ContentNode:
        """Create a paragraph node containing this text.

        Parameters
        ----------
        local_id : str or None, default = None
            Optional local identifier

        Returns
        -------
        ContentNode
            Node of kind ``"paragraph"``; ``attrs`` is absent without ``local_id``

        Raises
        ------
        InvalidMarkError
            If any mark is rejected

        """
        attrs = {"localId": local_id} if local_id is not None else None
        return ContentNode(type=TextType.PARAGRAPH.value, attrs=attrs, content=[self.finalize()])

    merge_paragraphs = staticmethod(merge_paragraphs)

    def __repr__(self) -> str:
        return f"TextNode({self._text!r}, marks={self._marks!r})"


class TableBuilder:
    """Helper for building table nodes.

    Cells are created with ``header`` and ``cell`` and grouped into rows
    with ``add_row``. Rows accumulate in call order; column counts are not
    checked across rows.

    Parameters
    ----------
    width : int or float
        Table width
    is_number_column_enabled : bool, default = False
        Whether to show a numbered column
    layout : TableLayout or str, default = TableLayout.CENTER
        Table layout; any string is passed through
    display_mode : TableDisplayMode or str, default = TableDisplayMode.DEFAULT
        Table display mode; any string is passed through

    Examples
    --------
    >>> table = TableBuilder(100)
    >>> table.add_row([table.header([TextNode("Name").paragraph()])])
    >>> table.add_row([table.cell([TextNode("Alice").paragraph()])])
    >>> node = table.to_document_node()

    """

    def __init__(
        self,
        width: int | float,
        is_number_column_enabled: bool = DEFAULT_TABLE_NUMBER_COLUMN_ENABLED,
        layout: TableLayout | str = DEFAULT_TABLE_LAYOUT,
        display_mode: TableDisplayMode | str = DEFAULT_TABLE_DISPLAY_MODE,
    ):
        """Initialize the table builder with an empty row list."""
        self._width = width
        self._is_number_column_enabled = is_number_column_enabled
        self._layout = _plain_value(layout)
        self._display_mode = _plain_value(display_mode)
        self._rows: list[ContentNode] = []

    @property
    def width(self) -> int | float:
        """Table width."""
        return self._width

    @property
    def is_number_column_enabled(self) -> bool:
        """Whether the numbered column is shown."""
        return self._is_number_column_enabled

    @property
    def layout(self) -> str:
        """Table layout."""
        return self._layout

    @property
    def display_mode(self) -> str:
        """Table display mode."""
        return self._display_mode

    @staticmethod
    def _create_cell(
        cell_type: TableNodeType, content: Sequence[Any], col_span: int, row_span: int
    ) -> ContentNode:
        return ContentNode(
            type=cell_type.value,
            attrs={"colspan": col_span, "rowspan": row_span},
            content=copy.deepcopy(list(content)),
        )

    def header(
        self, content: Sequence[Any], col_span: int = DEFAULT_CELL_SPAN, row_span: int = DEFAULT_CELL_SPAN
    ) -> ContentNode:
        """Create a header cell.

        Parameters
        ----------
        content : sequence of ContentNode
            Block content of the cell
        col_span : int, default = 1
            Number of columns the cell spans
        row_span : int, default = 1
            Number of rows the cell spans

        Returns
        -------
        ContentNode
            Node of kind ``"tableHeader"``

        """
        return self._create_cell(TableNodeType.HEADER, content, col_span, row_span)

    def cell(
        self, content: Sequence[Any], col_span: int = DEFAULT_CELL_SPAN, row_span: int = DEFAULT_CELL_SPAN
    ) -> ContentNode:
        """Create a data cell.

        Parameters
        ----------
        content : sequence of ContentNode
            Block content of the cell
        col_span : int, default = 1
            Number of columns the cell spans
        row_span : int, default = 1
            Number of rows the cell spans

        Returns
        -------
        ContentNode
            Node of kind ``"tableCell"``

        """
        return self._create_cell(TableNodeType.CELL, content, col_span, row_span)

    def add_row(self, cells: Sequence[Any]) -> TableBuilder:
        """Append a row of cells to the table.

        Parameters
        ----------
        cells : sequence of ContentNode
            Cells created with ``header`` or ``cell``

        Returns
        -------
        TableBuilder
            Self for method chaining

        """
        self._rows.append(ContentNode(type=TableNodeType.ROW.value, content=copy.deepcopy(list(cells))))
        logger.debug("Added table row %d with %d cells", len(self._rows), len(self._rows[-1].content or []))
        return self

    def get_rows(self) -> list[ContentNode]:
        """Get a copy of the rows added so far."""
        return copy.deepcopy(self._rows)

    def to_document_node(self) -> ContentNode:
        """Get the constructed table node.

        Returns
        -------
        ContentNode
            Node of kind ``"table"``

        """
        attrs = {
            "isNumberColumnEnabled": self._is_number_column_enabled,
            "layout": self._layout,
            "width": self._width,
            "displayMode": self._display_mode,
        }
        return ContentNode(type=ContentType.TABLE.value, attrs=attrs, content=copy.deepcopy(self._rows))

    def to_dict(self) -> dict[str, Any]:
        """Get the table node as a plain dictionary."""
        return self.to_document_node().to_dict()


class DocumentBuilder:
    """Ordered container of top-level document nodes.

    Nodes are appended as given; their shape is not validated here.

    Parameters
    ----------
    version : int, default = 1
        ADF version number
    type : str, default = "doc"
        Document node kind

    Examples
    --------
    >>> doc = (DocumentBuilder()
    ...     .add(TextNode("My Document").heading(HeadingLevel.H1))
    ...     .add(TextNode("Hello").paragraph()))
    >>> doc.to_json(indent=2)

    """

    def __init__(self, version: int = DEFAULT_DOCUMENT_VERSION, type: str = DEFAULT_DOCUMENT_TYPE) -> None:
        """Initialize the document builder with an empty content list."""
        self._version = version
        self._type = type
        self._content: list[Any] = []

    @property
    def version(self) -> int:
        """ADF version number."""
        return self._version

    @property
    def type(self) -> str:
        """Document node kind."""
        return self._type

    def add(self, node: Any) -> DocumentBuilder:
        """Append a top-level node.

        Parameters
        ----------
        node : ContentNode
            Finished node, e.g. from ``TextNode.paragraph`` or
            ``TableBuilder.to_document_node``

        Returns
        -------
        DocumentBuilder
            Self for method chaining

        """
        self._content.append(copy.deepcopy(node))
        logger.debug("Added %s node at position %d", getattr(node, "type", type(node).__name__), len(self._content))
        return self

    def get_content(self) -> list[Any]:
        """Get a copy of the top-level nodes added so far."""
        return copy.deepcopy(self._content)

    def to_document(self) -> Document:
        """Get the constructed document.

        Returns
        -------
        Document
            Document holding a copy of the accumulated nodes

        """
        return Document(version=self._version, type=self._type, content=copy.deepcopy(self._content))

    def to_dict(self) -> dict[str, Any]:
        """Get the document as plain dictionaries."""
        return self.to_document().to_dict()

    def to_json(self, indent: Optional[int] = None) -> str:
        """Get the document as a JSON string.

        Parameters
        ----------
        indent : int or None, default = None
            Number of spaces for pretty printing; None for compact output

        Returns
        -------
        str
            JSON text

        """
        return ast_to_json(self.to_document(), indent=indent)
