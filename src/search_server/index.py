from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

import numpy as np

from search_server.document import DocumentData
from search_server.errors import OutOfRangeError

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)


class InvertedIndex:
    """
    Incrementally built inverted index together with the document store.

    Attributes:
        word_to_document_freqs (dict[str, dict[int, float]]): For each term, the
            documents containing it and the term's frequency in each document.
        documents (dict[int, DocumentData]): Rating and status of each document.
        document_ids (list[int]): Document ids in insertion order.
    """

    def __init__(self):
        self.word_to_document_freqs: dict[str, dict[int, float]] = {}
        self.documents: dict[int, DocumentData] = {}
        self.document_ids: list[int] = []

    def __len__(self) -> int:
        return len(self.documents)

    def __contains__(self, document_id: object) -> bool:
        return document_id in self.documents

    def __iter__(self) -> Iterator[int]:
        return iter(self.document_ids)

    @property
    def document_count(self) -> int:
        return len(self.documents)

    def add(self, document_id: int, words: list[str], data: DocumentData) -> None:
        """
        Store a document and index its (already filtered) words.

        Term frequency is occurrences / len(words). A document without words is
        stored but contributes nothing to the index.
        """
        if words:
            total = len(words)
            for word, count in Counter(words).items():
                self.word_to_document_freqs.setdefault(word, {})[document_id] = count / total
        self.documents[document_id] = data
        self.document_ids.append(document_id)
        logger.debug("Indexed document %d with %d terms", document_id, len(words))

    def has_term(self, term: str) -> bool:
        return term in self.word_to_document_freqs

    def postings(self, term: str) -> dict[int, float]:
        """Documents containing ``term`` mapped to its frequency; empty if unindexed."""
        return self.word_to_document_freqs.get(term, {})

    def document_frequency(self, term: str) -> int:
        return len(self.postings(term))

    def inverse_document_frequency(self, terms: Iterable[str]) -> NDArray[np.float64]:
        """
        IDF for indexed terms:
            idf(t) = ln(N / df(t))

        Every term must be present in the index.
        """
        df = np.array([self.document_frequency(term) for term in terms], dtype=np.float64)
        return np.log(self.document_count / df)

    def term_frequencies(self, document_id: int) -> dict[str, float]:
        """Every indexed term of a document with its frequency."""
        return {
            term: freqs[document_id]
            for term, freqs in self.word_to_document_freqs.items()
            if document_id in freqs
        }

    def get_document_id(self, index: int) -> int:
        if not 0 <= index < len(self.document_ids):
            raise OutOfRangeError(f"document index {index} is out of range [0, {len(self.document_ids)})")
        return self.document_ids[index]

    def get_document_data(self, document_id: int) -> DocumentData:
        try:
            return self.documents[document_id]
        except KeyError:
            raise OutOfRangeError(f"document_id {document_id} is not in the index") from None
