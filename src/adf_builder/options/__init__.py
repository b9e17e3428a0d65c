#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for adf_builder renderers."""

from adf_builder.options.base import BaseRendererOptions, CloneFrozenMixin
from adf_builder.options.json import AdfJsonRendererOptions

__all__ = [
    "AdfJsonRendererOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
]
