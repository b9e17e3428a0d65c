#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf_builder/options/json.py
"""Options for rendering documents to ADF JSON."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field

from adf_builder.constants import (
    DEFAULT_JSON_ENSURE_ASCII,
    DEFAULT_JSON_INDENT,
    DEFAULT_JSON_SORT_KEYS,
    DEFAULT_OUTPUT_ENCODING,
)
from adf_builder.options.base import BaseRendererOptions


@dataclass(frozen=True)
class AdfJsonRendererOptions(BaseRendererOptions):
    """Options for rendering documents to ADF JSON.

    Parameters
    ----------
    indent : int or None, default = 2
        Number of spaces for JSON indentation. None for compact output.
    ensure_ascii : bool, default = False
        Whether to escape non-ASCII characters in JSON output
    sort_keys : bool, default = False
        Whether to sort JSON object keys alphabetically
    encoding : str, default = "utf-8"
        Encoding used for byte and file output

    Examples
    --------
    Compact JSON output:
        >>> options = AdfJsonRendererOptions(indent=None)

    ASCII-only output:
        >>> options = AdfJsonRendererOptions(ensure_ascii=True)

    """

    indent: int | None = field(
        default=DEFAULT_JSON_INDENT,
        metadata={"help": "JSON indentation spaces (None for compact)", "type": int, "importance": "core"},
    )
    ensure_ascii: bool = field(
        default=DEFAULT_JSON_ENSURE_ASCII,
        metadata={"help": "Escape non-ASCII characters in JSON", "importance": "advanced"},
    )
    sort_keys: bool = field(
        default=DEFAULT_JSON_SORT_KEYS,
        metadata={"help": "Sort JSON object keys alphabetically", "importance": "advanced"},
    )
    encoding: str = field(
        default=DEFAULT_OUTPUT_ENCODING,
        metadata={"help": "Encoding for byte and file output", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate indentation and encoding.

        Raises
        ------
        ValueError
            If indent is negative or the encoding is unknown.

        """
        super().__post_init__()
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.encoding}") from e
