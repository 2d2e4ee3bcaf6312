"""
Document filters decide which stored documents may appear in search results.

A filter is any object with an ``accepts(document_id, status, rating)``
method. ``as_document_filter`` adapts the shapes accepted by the public
search entry points (nothing, a status, a plain predicate) into a filter.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, Union, runtime_checkable

from search_server.document import DocumentStatus

Predicate = Callable[[int, DocumentStatus, int], bool]


@runtime_checkable
class DocumentFilter(Protocol):
    """Protocol for a single-method document filter."""

    def accepts(self, document_id: int, status: DocumentStatus, rating: int) -> bool: ...


class StatusFilter:
    """Accepts documents whose status equals the given one."""

    def __init__(self, status: DocumentStatus):
        self.status = status

    def accepts(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return status == self.status

    def __repr__(self) -> str:
        return f"StatusFilter({self.status.name})"


class PredicateFilter:
    """Wraps a callable ``(document_id, status, rating) -> bool``."""

    def __init__(self, predicate: Predicate):
        self.predicate = predicate

    def accepts(self, document_id: int, status: DocumentStatus, rating: int) -> bool:
        return bool(self.predicate(document_id, status, rating))


ACTUAL_ONLY = StatusFilter(DocumentStatus.ACTUAL)

FilterLike = Union[DocumentFilter, DocumentStatus, Predicate, None]


def as_document_filter(filter_like: FilterLike = None) -> DocumentFilter:
    if filter_like is None:
        return ACTUAL_ONLY
    if isinstance(filter_like, DocumentStatus):
        return StatusFilter(filter_like)
    if isinstance(filter_like, DocumentFilter):
        return filter_like
    if callable(filter_like):
        return PredicateFilter(filter_like)
    raise TypeError(f"Cannot use {filter_like!r} as a document filter.")
