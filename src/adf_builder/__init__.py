#  Copyright (c) 2025 Tom Villani, Ph.D.
"""adf_builder - build Atlassian Document Format (ADF) documents in Python.

adf_builder assembles ADF content trees from text, marks, headings,
paragraphs and tables, and emits them as plain dictionaries or JSON.

Key Features
------------
- Text nodes with known or custom marks, validated at finalization
- Headings and paragraphs with optional local identifiers
- Inline merging of paragraphs with configurable spacing
- Tables with header/data cells and column/row spans
- JSON output to strings, bytes, files or streams

Examples
--------
    >>> from adf_builder import DocumentBuilder, HeadingLevel, Link, TableBuilder, TextNode
    >>> doc = DocumentBuilder()
    >>> doc.add(TextNode("Report").heading(HeadingLevel.H1, local_id="title"))
    >>> doc.add(TextNode("Details", Link("https://example.com").to_mark()).paragraph())
    >>> table = TableBuilder(100)
    >>> table.add_row([table.header([TextNode("Name").paragraph()])])
    >>> doc.add(table.to_document_node())
    >>> print(doc.to_json(indent=2))

"""

from adf_builder.ast import (
    ContentNode,
    Document,
    DocumentBuilder,
    Link,
    Mark,
    MarkTag,
    TableBuilder,
    TextNode,
    ast_to_dict,
    ast_to_json,
    merge_paragraphs,
    validate_marks,
)
from adf_builder.constants import (
    ContentType,
    HeadingLevel,
    MarkType,
    TableDisplayMode,
    TableLayout,
    TableNodeType,
    TextType,
)
from adf_builder.exceptions import (
    AdfBuilderError,
    InvalidMarkError,
    InvalidOptionsError,
    MissingRequiredFieldError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from adf_builder.options import AdfJsonRendererOptions
from adf_builder.renderers import AdfJsonRenderer

__version__ = "0.1.0"

__all__ = [
    # Builders
    "DocumentBuilder",
    "TableBuilder",
    "TextNode",
    "merge_paragraphs",
    # Nodes and marks
    "ContentNode",
    "Document",
    "Link",
    "Mark",
    "MarkTag",
    "validate_marks",
    # Serialization and rendering
    "AdfJsonRenderer",
    "AdfJsonRendererOptions",
    "ast_to_dict",
    "ast_to_json",
    # Vocabulary
    "ContentType",
    "HeadingLevel",
    "MarkType",
    "TableDisplayMode",
    "TableLayout",
    "TableNodeType",
    "TextType",
    # Exceptions
    "AdfBuilderError",
    "InvalidMarkError",
    "InvalidOptionsError",
    "MissingRequiredFieldError",
    "OutputWriteError",
    "RenderingError",
    "ValidationError",
]
