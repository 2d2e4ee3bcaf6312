from __future__ import annotations

import logging
from collections.abc import Set
from dataclasses import dataclass, field
from typing import NamedTuple

from search_server.errors import InvalidArgumentError
from search_server.tokenizer import is_valid_word, split_into_words

logger = logging.getLogger(__name__)


class QueryWord(NamedTuple):
    data: str
    is_minus: bool
    is_stop: bool


@dataclass(frozen=True)
class Query:
    plus_words: frozenset[str] = field(default_factory=frozenset)
    minus_words: frozenset[str] = field(default_factory=frozenset)


class QueryParser:
    """
    Turns raw query text into a ``Query``.

    A word prefixed with ``-`` is a minus word. Stop-words are dropped from
    both sets. Malformed words raise ``InvalidArgumentError``.
    """

    def __init__(self, stop_words: Set[str]):
        self.stop_words = stop_words

    def parse_word(self, text: str) -> QueryWord:
        if not is_valid_word(text):
            raise InvalidArgumentError(
                "incorrect search request: there are invalid characters "
                "(characters with codes from 0 to 31) in the search request"
            )
        is_minus = False
        if text.startswith("-"):
            is_minus = True
            text = text[1:]
            if not text:
                raise InvalidArgumentError(
                    "incorrect search request: there is a minus-word attribute ('-') without text"
                )
            if text.startswith("-"):
                raise InvalidArgumentError("incorrect search request: there is a double minus ('--')")
        return QueryWord(text, is_minus, text in self.stop_words)

    def parse(self, text: str) -> Query:
        plus_words: set[str] = set()
        minus_words: set[str] = set()
        for word in split_into_words(text):
            query_word = self.parse_word(word)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                minus_words.add(query_word.data)
            else:
                plus_words.add(query_word.data)
        query = Query(frozenset(plus_words), frozenset(minus_words))
        logger.debug("Parsed query %r: plus=%s minus=%s", text, sorted(plus_words), sorted(minus_words))
        return query
