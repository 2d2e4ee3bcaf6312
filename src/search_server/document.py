from __future__ import annotations

import enum
from dataclasses import dataclass


class DocumentStatus(enum.IntEnum):
    ACTUAL = 0
    IRRELEVANT = 1
    BANNED = 2
    REMOVED = 3


@dataclass(frozen=True)
class DocumentData:
    """Metadata stored for every indexed document."""

    rating: int
    status: DocumentStatus


@dataclass(frozen=True)
class Document:
    """
    A single ranked search result.

    Attributes:
        id (int): Document id as supplied to ``SearchServer.add_document``.
        relevance (float): Accumulated TF-IDF score for the query.
        rating (int): Average rating stored with the document.
    """

    id: int
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance:g}, rating = {self.rating} }}"


def compute_average_rating(ratings: list[int]) -> int:
    """Integer average of ratings, truncated toward zero; 0 for no ratings."""
    if not ratings:
        return 0
    total = sum(ratings)
    average = abs(total) // len(ratings)
    return average if total >= 0 else -average


def print_document(document: Document) -> None:
    print(document)
