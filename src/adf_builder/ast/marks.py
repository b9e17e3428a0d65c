#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adf_builder/ast/marks.py
"""Mark inputs and mark validation.

Text marks can be supplied in two forms:

- a bare tag string such as ``"strong"`` (or a :class:`MarkType` member),
  which must name one of the known mark kinds, and
- a structured mark, either a :class:`Mark` instance or a mapping with a
  ``"type"`` key, which is passed through for any string ``type`` so that
  callers can use mark kinds this library does not know about. Keys of a
  mapping other than ``type`` and ``attrs`` are kept in ``Mark.extra``.

Inputs are stored verbatim by :class:`~adf_builder.ast.builder.TextNode` and
only checked by :func:`validate_marks` when the node is finalized.

Examples
--------
    >>> validate_marks(["strong", Mark(type="custom-thing")])
    [Mark(type='strong', attrs=None, extra=None), Mark(type='custom-thing', attrs=None, extra=None)]
    >>> Link("https://example.com").to_mark()
    Mark(type='link', attrs={'href': 'https://example.com'}, extra=None)

"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from adf_builder.ast.nodes import Mark
from adf_builder.constants import KNOWN_MARK_TYPES, MarkType
from adf_builder.exceptions import InvalidMarkError

logger = logging.getLogger(__name__)

MarkInput = Union[MarkType, str, Mark, Mapping[str, Any]]


@dataclass(frozen=True)
class MarkTag:
    """Bare tag shorthand for a mark, e.g. ``MarkTag("em")``.

    Parameters
    ----------
    value : str
        The tag as supplied by the caller

    """

    value: str


@dataclass(frozen=True)
class Link:
    """Hyperlink that can be attached to text as a ``link`` mark.

    Parameters
    ----------
    href : str
        Link destination URL
    title : str or None, default = None
        Optional link title
    collection : str or None, default = None
        Optional collection identifier
    id : str or None, default = None
        Optional unique identifier
    occurrence_key : str or None, default = None
        Optional occurrence key

    """

    href: str
    title: Optional[str] = None
    collection: Optional[str] = None
    id: Optional[str] = None
    occurrence_key: Optional[str] = None

    def to_mark(self) -> Mark:
        """Convert the link to a mark.

        Only the fields that were supplied appear in the mark attributes.

        Returns
        -------
        Mark
            Mark of kind ``"link"``

        """
        attrs: dict[str, Any] = {"href": self.href}
        if self.title is not None:
            attrs["title"] = self.title
        if self.collection is not None:
            attrs["collection"] = self.collection
        if self.id is not None:
            attrs["id"] = self.id
        if self.occurrence_key is not None:
            attrs["occurrenceKey"] = self.occurrence_key

        return Mark(type=MarkType.LINK.value, attrs=attrs)


def classify_mark(mark: Any) -> MarkTag | Mark:
    """Classify a raw mark input as tag shorthand or structured mark.

    Parameters
    ----------
    mark : any
        Raw mark input

    Returns
    -------
    MarkTag or Mark
        ``MarkTag`` for strings, ``Mark`` for mark instances and mappings
        carrying a ``"type"`` key. The ``type`` of the returned mark is not
        checked here.

    Raises
    ------
    InvalidMarkError
        If the input has neither shape

    """
    if isinstance(mark, (Mark, MarkTag)):
        return mark
    if isinstance(mark, str):
        # MarkType members are str subclasses
        return MarkTag(mark.value if isinstance(mark, MarkType) else mark)
    if isinstance(mark, Mapping) and "type" in mark:
        extra = {key: value for key, value in mark.items() if key not in ("type", "attrs")}
        return Mark(type=mark["type"], attrs=mark.get("attrs"), extra=extra or None)
    raise InvalidMarkError(mark)


def validate_mark(mark: Any) -> Mark:
    """Validate a single mark input.

    Structured marks are accepted for any string ``type``; tag shorthand is
    accepted only for known mark kinds.

    Parameters
    ----------
    mark : any
        Raw mark input

    Returns
    -------
    Mark
        The accepted mark

    Raises
    ------
    InvalidMarkError
        If the mark is rejected

    """
    variant = classify_mark(mark)
    if isinstance(variant, MarkTag):
        if variant.value not in KNOWN_MARK_TYPES:
            raise InvalidMarkError(mark)
        return Mark(type=variant.value)

    if not isinstance(variant.type, str):
        raise InvalidMarkError(mark)
    if variant.type not in KNOWN_MARK_TYPES:
        logger.debug("Passing through structured mark of unknown type %r", variant.type)
    return variant


def validate_marks(marks: Sequence[Any]) -> list[Mark]:
    """Validate mark inputs in order.

    Parameters
    ----------
    marks : sequence
        Raw mark inputs (tags, ``Mark`` instances or mappings)

    Returns
    -------
    list of Mark
        Accepted marks, in input order

    Raises
    ------
    InvalidMarkError
        On the first rejected input

    """
    return [validate_mark(mark) for mark in marks]
