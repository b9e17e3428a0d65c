#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf_builder/renderers/base.py
"""Base renderer class for ADF document output.

This module defines the abstract base class that all document renderers
inherit from.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from io import BytesIO
from pathlib import Path
from typing import IO, Union

from adf_builder.ast import Document, DocumentBuilder
from adf_builder.exceptions import InvalidOptionsError, OutputWriteError, RenderingError
from adf_builder.options.base import BaseRendererOptions
from adf_builder.utils.io_utils import write_content

logger = logging.getLogger(__name__)

Renderable = Union[Document, DocumentBuilder]


class BaseRenderer(ABC):
    """Abstract base class for document renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Renderable) -> str:
        """Render the document to a string.

        Parameters
        ----------
        doc : Document or DocumentBuilder
            Document to render

        Returns
        -------
        str
            Rendered document

        """
        pass

    def render_to_bytes(self, doc: Renderable) -> bytes:
        """Render the document to bytes.

        Parameters
        ----------
        doc : Document or DocumentBuilder
            Document to render

        Returns
        -------
        bytes
            Rendered document

        """
        buffer = BytesIO()
        self.render(doc, buffer)
        return buffer.getvalue()

    def render(self, doc: Renderable, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the document and write it to ``output``.

        Parameters
        ----------
        doc : Document or DocumentBuilder
            Document to render
        output : str, Path, IO[bytes], or IO[str]
            Output destination (file path or file-like object)

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If the output cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output, encoding=self._output_encoding())

    def _output_encoding(self) -> str:
        return "utf-8"

    @staticmethod
    def _resolve_document(doc: Renderable) -> Document:
        """Accept either a finished document or a builder."""
        if isinstance(doc, DocumentBuilder):
            return doc.to_document()
        if isinstance(doc, Document):
            return doc
        raise RenderingError(
            f"Expected Document or DocumentBuilder, got {type(doc).__name__}", rendering_stage="input"
        )

    def _check_empty(self, document: Document) -> None:
        if document.content:
            return
        if self.options is not None and self.options.fail_on_empty_document:
            raise RenderingError("Document has no content", rendering_stage="input")
        logger.warning("Rendering document with no content")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(
        text: str, output: Union[str, Path, IO[bytes], IO[str]], encoding: str = "utf-8"
    ) -> None:
        """Write text output to a file or IO stream.

        Parameters
        ----------
        text : str
            Rendered text
        output : str, Path, IO[bytes], or IO[str]
            Output destination
        encoding : str, default = "utf-8"
            Encoding for paths and binary streams

        Raises
        ------
        OutputWriteError
            If writing fails

        """
        try:
            write_content(text, output, encoding=encoding)
        except OSError as e:
            output_path = str(output) if isinstance(output, (str, Path)) else None
            raise OutputWriteError(f"Failed to write output: {e}", output_path=output_path, original_error=e) from e
