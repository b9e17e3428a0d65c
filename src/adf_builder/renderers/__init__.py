#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers converting ADF documents to output formats."""

from adf_builder.renderers.base import BaseRenderer
from adf_builder.renderers.json import AdfJsonRenderer

__all__ = ["AdfJsonRenderer", "BaseRenderer"]
