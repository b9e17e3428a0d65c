#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for renderer options.

This module defines the foundation classes for the immutable configuration
objects accepted by adf_builder renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from adf_builder.constants import DEFAULT_FAIL_ON_EMPTY_DOCUMENT


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    fail_on_empty_document : bool, default=False
        Whether to raise RenderingError when the document has no content.
        If False (default), a warning is logged and rendering continues.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    fail_on_empty_document: bool = field(
        default=DEFAULT_FAIL_ON_EMPTY_DOCUMENT,
        metadata={
            "help": "Raise RenderingError for documents without content instead of logging a warning",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate base renderer options.

        Raises
        ------
        ValueError
            If fail_on_empty_document is not a boolean.

        """
        if not isinstance(self.fail_on_empty_document, bool):
            raise ValueError(f"fail_on_empty_document must be a bool, got {self.fail_on_empty_document!r}")
