"""
TF-IDF search server.

Usage:
    from search_server.search_server import SearchServer
    from search_server.document import DocumentStatus

    server = SearchServer("and in on")
    server.add_document(0, "white cat and fashionable collar", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7])
    for document in server.find_top_documents("fluffy groomed cat"):
        print(document)

Scoring:
    relevance(d, q) = sum over plus words t of q present in d: tf(t, d) * ln(N / df(t))

Documents containing any minus word of the query are excluded. Results are
ordered by relevance (descending), relevances closer than
``Config.relevance_epsilon`` are ordered by rating (descending), and at most
``Config.max_result_document_count`` documents are returned.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Iterable, Sequence

import numpy as np

from search_server.config import Config
from search_server.document import (
    Document,
    DocumentData,
    DocumentStatus,
    compute_average_rating,
)
from search_server.errors import InvalidArgumentError
from search_server.filters import DocumentFilter, FilterLike, as_document_filter
from search_server.index import InvertedIndex
from search_server.query import Query, QueryParser
from search_server.tokenizer import (
    is_valid_word,
    make_unique_non_empty_strings,
    split_into_words,
)

logger = logging.getLogger(__name__)


class SearchServer:
    """
    In-memory full-text search over short documents.

    Args:
        stop_words (str | Iterable[str]): Words excluded from indexing and queries,
            either as space separated text or as a collection of words.
        max_result_document_count (int | None): Result limit, defaults to Config.
        relevance_epsilon (float | None): Relevance tie tolerance, defaults to Config.
    """

    def __init__(
        self,
        stop_words: str | Iterable[str] = (),
        *,
        max_result_document_count: int | None = None,
        relevance_epsilon: float | None = None,
    ):
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)
        words = make_unique_non_empty_strings(stop_words)
        for word in words:
            if not is_valid_word(word):
                raise InvalidArgumentError(
                    "incorrect stop-words: there are invalid characters "
                    "(characters with codes from 0 to 31) in the stop-words"
                )
        self.stop_words: frozenset[str] = frozenset(words)
        self.max_result_document_count = (
            Config.max_result_document_count
            if max_result_document_count is None
            else max_result_document_count
        )
        self.relevance_epsilon = (
            Config.relevance_epsilon if relevance_epsilon is None else relevance_epsilon
        )
        self.index = InvertedIndex()
        self._parser = QueryParser(self.stop_words)

    def is_stop_word(self, word: str) -> bool:
        return word in self.stop_words

    def split_into_words_no_stop(self, text: str) -> list[str]:
        words = []
        for word in split_into_words(text):
            if not is_valid_word(word):
                raise InvalidArgumentError(
                    "incorrect document: there are invalid characters "
                    "(characters with codes from 0 to 31) in the document"
                )
            if not self.is_stop_word(word):
                words.append(word)
        return words

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Sequence[int],
    ) -> None:
        if document_id < 0:
            raise InvalidArgumentError("incorrect document_id: document_id is negative")
        if document_id in self.index:
            raise InvalidArgumentError(
                f"incorrect document_id: document_id {document_id} already exists"
            )
        try:
            status = DocumentStatus(status)
        except ValueError:
            raise InvalidArgumentError(f"incorrect status: {status!r} is not a document status") from None
        words = self.split_into_words_no_stop(document)
        data = DocumentData(compute_average_rating(list(ratings)), status)
        self.index.add(document_id, words, data)

    def get_document_count(self) -> int:
        return self.index.document_count

    def get_document_id(self, index: int) -> int:
        return self.index.get_document_id(index)

    def get_word_frequencies(self, document_id: int) -> dict[str, float]:
        """Indexed terms of a document with their term frequencies."""
        self.index.get_document_data(document_id)
        return self.index.term_frequencies(document_id)

    def parse_query(self, raw_query: str) -> Query:
        query = self._parser.parse(raw_query)
        if not raw_query:
            raise InvalidArgumentError("incorrect search request: empty search request")
        return query

    def find_all_documents(self, query: Query, document_filter: DocumentFilter) -> list[Document]:
        """
        Score every document matching the query's plus words.

        Terms are visited in sorted order and each term's postings in ascending
        document id order, so the floating point accumulation is reproducible.
        """
        document_to_relevance: dict[int, float] = {}
        plus_words = sorted(word for word in query.plus_words if self.index.has_term(word))
        if plus_words:
            idf_values = self.index.inverse_document_frequency(plus_words)
            for word, idf in zip(plus_words, idf_values):
                postings = self.index.postings(word)
                document_ids = sorted(postings)
                term_freqs = np.array([postings[document_id] for document_id in document_ids], dtype=np.float64)
                for document_id, score in zip(document_ids, term_freqs * idf):
                    data = self.index.documents[document_id]
                    if document_filter.accepts(document_id, data.status, data.rating):
                        document_to_relevance[document_id] = (
                            document_to_relevance.get(document_id, 0.0) + float(score)
                        )

        for word in query.minus_words:
            for document_id in self.index.postings(word):
                document_to_relevance.pop(document_id, None)

        return [
            Document(document_id, relevance, self.index.documents[document_id].rating)
            for document_id, relevance in sorted(document_to_relevance.items())
        ]

    def _compare(self, lhs: Document, rhs: Document) -> int:
        if abs(lhs.relevance - rhs.relevance) < self.relevance_epsilon:
            return rhs.rating - lhs.rating
        return -1 if lhs.relevance > rhs.relevance else 1

    def find_top_documents(self, raw_query: str, document_filter: FilterLike = None) -> list[Document]:
        """
        Top documents for a query.

        Args:
            raw_query: Query text; words prefixed with '-' exclude documents.
            document_filter: A DocumentFilter, a DocumentStatus, a callable
                (document_id, status, rating) -> bool, or None for ACTUAL documents.

        Returns:
            At most ``max_result_document_count`` documents, best first.
        """
        query = self.parse_query(raw_query)
        matched = self.find_all_documents(query, as_document_filter(document_filter))
        matched.sort(key=functools.cmp_to_key(self._compare))
        logger.debug("Query %r matched %d documents", raw_query, len(matched))
        return matched[: self.max_result_document_count]

    def match_document(self, raw_query: str, document_id: int) -> tuple[list[str], DocumentStatus]:
        """
        Plus words of the query found in a document, with the document's status.

        The word list is empty when the document contains any minus word.
        """
        if document_id < 0:
            raise InvalidArgumentError("incorrect document_id: document_id is negative")
        query = self.parse_query(raw_query)
        status = self.index.get_document_data(document_id).status

        matched_words = []
        for word in sorted(query.plus_words):
            if document_id in self.index.postings(word):
                matched_words.append(word)
        for word in sorted(query.minus_words):
            if document_id in self.index.postings(word):
                matched_words.clear()
                break
        return matched_words, status
