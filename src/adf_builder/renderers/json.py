#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf_builder/renderers/json.py
"""ADF JSON rendering from Document.

This module provides the AdfJsonRenderer class which converts documents to
the JSON text consumed by ADF renderers and APIs.
"""

from __future__ import annotations

import logging

from adf_builder.ast.serialization import ast_to_json
from adf_builder.exceptions import RenderingError
from adf_builder.options.json import AdfJsonRendererOptions
from adf_builder.renderers.base import BaseRenderer, Renderable

logger = logging.getLogger(__name__)


class AdfJsonRenderer(BaseRenderer):
    """Render documents to ADF JSON.

    Parameters
    ----------
    options : AdfJsonRendererOptions or None, default = None
        JSON rendering options

    Examples
    --------
    Basic usage:
        >>> from adf_builder import DocumentBuilder, TextNode
        >>> doc = DocumentBuilder().add(TextNode("Hello, world!").paragraph())
        >>> json_str = AdfJsonRenderer().render_to_string(doc)

    Write to a file:
        >>> AdfJsonRenderer().render(doc, "output.json")

    Compact JSON output:
        >>> renderer = AdfJsonRenderer(AdfJsonRendererOptions(indent=None))

    """

    def __init__(self, options: AdfJsonRendererOptions | None = None):
        """Initialize the ADF JSON renderer with options."""
        BaseRenderer._validate_options_type(options, AdfJsonRendererOptions, "json")
        options = options or AdfJsonRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: AdfJsonRendererOptions = options

    def render_to_string(self, doc: Renderable) -> str:
        """Render a document to ADF JSON.

        Parameters
        ----------
        doc : Document or DocumentBuilder
            Document to render

        Returns
        -------
        str
            JSON text

        Raises
        ------
        RenderingError
            If ``doc`` is not a document, is not JSON serializable, or is empty and
            ``fail_on_empty_document`` is set

        """
        document = self._resolve_document(doc)
        self._check_empty(document)
        logger.debug("Rendering document with %d top-level nodes", len(document.content))
        try:
            return ast_to_json(
                document,
                indent=self.options.indent,
                ensure_ascii=self.options.ensure_ascii,
                sort_keys=self.options.sort_keys,
            )
        except (TypeError, ValueError) as e:
            raise RenderingError(
                f"Document is not JSON serializable: {e}", rendering_stage="serialization", original_error=e
            ) from e

    def _output_encoding(self) -> str:
        return self.options.encoding
