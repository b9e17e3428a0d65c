#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the adf_builder library.

This module centralizes the fixed Atlassian Document Format vocabulary
(node kinds, mark kinds, heading levels, table options) together with the
default values used by builders and renderers.

Constants are organized by category:
1. Vocabulary - Enumerations of ADF tag values
2. Document Defaults - Document envelope settings
3. Table Defaults - Table construction settings
4. JSON Rendering Defaults - Serialization settings
"""

from __future__ import annotations

from enum import Enum, IntEnum

# =============================================================================
# Vocabulary
# =============================================================================


class ContentType(str, Enum):
    """Content node kinds emitted as leaves or standalone blocks."""

    TEXT = "text"
    TABLE = "table"


class TextType(str, Enum):
    """Block node kinds produced from text."""

    HEADING = "heading"
    PARAGRAPH = "paragraph"


class TableNodeType(str, Enum):
    """Structural node kinds produced by the table builder."""

    ROW = "tableRow"
    HEADER = "tableHeader"
    CELL = "tableCell"


class HeadingLevel(IntEnum):
    """Heading levels (H1-H6)."""

    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5
    H6 = 6


class MarkType(str, Enum):
    """Known text mark kinds."""

    CODE = "code"
    EM = "em"
    LINK = "link"
    STRIKE = "strike"
    STRONG = "strong"
    SUBSUP = "subsup"
    UNDERLINE = "underline"
    TEXT_COLOR = "textColor"


class TableLayout(str, Enum):
    """Table layout options."""

    CENTER = "center"
    ALIGN_START = "align-start"


class TableDisplayMode(str, Enum):
    """Table display modes."""

    DEFAULT = "default"
    FIXED = "fixed"


KNOWN_MARK_TYPES: frozenset[str] = frozenset(mark.value for mark in MarkType)

# =============================================================================
# Document Defaults
# =============================================================================

DEFAULT_DOCUMENT_VERSION = 1
DEFAULT_DOCUMENT_TYPE = "doc"

# =============================================================================
# Table Defaults
# =============================================================================

DEFAULT_TABLE_NUMBER_COLUMN_ENABLED = False
DEFAULT_TABLE_LAYOUT = TableLayout.CENTER
DEFAULT_TABLE_DISPLAY_MODE = TableDisplayMode.DEFAULT
DEFAULT_CELL_SPAN = 1

# Spaces inserted between merged paragraphs
DEFAULT_MERGE_SPACING = 1

# =============================================================================
# JSON Rendering Defaults
# =============================================================================

DEFAULT_JSON_INDENT = 2
DEFAULT_JSON_ENSURE_ASCII = False
DEFAULT_JSON_SORT_KEYS = False
DEFAULT_OUTPUT_ENCODING = "utf-8"
DEFAULT_FAIL_ON_EMPTY_DOCUMENT = False
