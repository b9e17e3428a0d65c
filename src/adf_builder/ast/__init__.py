#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf_builder/ast/__init__.py
"""Content tree module for ADF document construction.

The module consists of several components:

- nodes: emitted node classes (Document, ContentNode, Mark)
- marks: mark inputs (Link, MarkTag) and deferred mark validation
- builder: TextNode, merge_paragraphs, TableBuilder and DocumentBuilder
- serialization: conversion of trees to plain dictionaries and JSON

Examples
--------
Basic usage:

    >>> from adf_builder.ast import DocumentBuilder, HeadingLevel, TextNode
    >>>
    >>> doc = DocumentBuilder()
    >>> doc.add(TextNode("Title").heading(HeadingLevel.H1))
    >>> doc.add(TextNode("Hello world", "strong").paragraph())
    >>> tree = doc.to_dict()

"""

from __future__ import annotations

from adf_builder.ast.builder import DocumentBuilder, TableBuilder, TextNode, merge_paragraphs
from adf_builder.ast.marks import Link, MarkInput, MarkTag, classify_mark, validate_mark, validate_marks
from adf_builder.ast.nodes import ContentNode, Document, Mark, text_node
from adf_builder.ast.serialization import ast_to_dict, ast_to_json
from adf_builder.constants import HeadingLevel

__all__ = [
    # Builders
    "DocumentBuilder",
    "TableBuilder",
    "TextNode",
    "merge_paragraphs",
    # Marks
    "Link",
    "MarkInput",
    "MarkTag",
    "classify_mark",
    "validate_mark",
    "validate_marks",
    # Nodes
    "ContentNode",
    "Document",
    "HeadingLevel",
    "Mark",
    "text_node",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
]
