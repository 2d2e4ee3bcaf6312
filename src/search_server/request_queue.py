from __future__ import annotations

import logging
from collections import deque
from typing import NamedTuple

from search_server.config import Config
from search_server.document import Document
from search_server.errors import InvalidArgumentError
from search_server.filters import FilterLike
from search_server.search_server import SearchServer

logger = logging.getLogger(__name__)


class QueryResult(NamedTuple):
    request_time: int
    number_of_results: int
    number_of_no_results: int  # running count of empty results in the window


class RequestQueue:
    """
    Tracks the most recent search requests and how many of them found nothing.

    Args:
        search_server (SearchServer): Server that answers the requests.
        window (int | None): Number of requests kept, defaults to Config.request_window.
    """

    def __init__(self, search_server: SearchServer, window: int | None = None):
        self.search_server = search_server
        self.window = Config.request_window if window is None else window
        if self.window <= 0:
            raise InvalidArgumentError("window must be positive")
        self.requests: deque[QueryResult] = deque()
        self.current_request_id = 0

    def __len__(self) -> int:
        return len(self.requests)

    def add_find_request(self, raw_query: str, document_filter: FilterLike = None) -> list[Document]:
        results = self.search_server.find_top_documents(raw_query, document_filter)
        self.current_request_id += 1

        no_results = self.get_no_result_requests()
        if len(self.requests) == self.window:
            oldest = self.requests.popleft()
            no_results -= int(oldest.number_of_results == 0)
            logger.debug("Evicted request %d from the window", oldest.request_time)
        no_results += int(not results)
        self.requests.append(QueryResult(self.current_request_id, len(results), no_results))
        return results

    def get_no_result_requests(self) -> int:
        if not self.requests:
            return 0
        return self.requests[-1].number_of_no_results
