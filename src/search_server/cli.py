#!/usr/bin/env python3
"""
Line-oriented driver for the search server.

The first line of the script holds the stop-words. Every following line is
one command:

    add <id> <STATUS> <r1,r2,...|-> <text>
    find <query>
    find-status <STATUS> <query>
    match <id> <query>
    id <index>
    count
    no-results

Searches go through a RequestQueue, so ``no-results`` reports how many of
the recent searches found nothing. A failing command prints ``Error: ...``
and the script continues.

Usage:
    python -m search_server script.txt --page-size 2
    cat script.txt | search-server
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Iterator

from search_server.config import Config
from search_server.document import DocumentStatus
from search_server.errors import InvalidArgumentError, attempt
from search_server.paginator import paginate
from search_server.request_queue import RequestQueue
from search_server.search_server import SearchServer

logger = logging.getLogger(__name__)


def parse_status(text: str) -> DocumentStatus:
    try:
        return DocumentStatus[text.upper()]
    except KeyError:
        raise InvalidArgumentError(f"unknown document status {text!r}") from None


def parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise InvalidArgumentError(f"expected an integer, got {text!r}") from None


def parse_ratings(text: str) -> list[int]:
    if text in ("", "-"):
        return []
    return [parse_int(rating) for rating in text.split(",")]


class ScriptRunner:
    """Executes script commands against one server and its request queue."""

    def __init__(self, server: SearchServer, page_size: int = Config.default_page_size):
        self.server = server
        self.requests = RequestQueue(server)
        self.page_size = page_size

    def _find(self, query: str, status: DocumentStatus | None = None) -> list[str]:
        documents = self.requests.add_find_request(query, status)
        lines = []
        for page in paginate(documents, self.page_size):
            lines.append(str(page))
            lines.append("Page break")
        return lines

    def _add(self, rest: str) -> list[str]:
        fields = rest.split(" ", 3)
        if len(fields) < 3:
            raise InvalidArgumentError("add expects: <id> <STATUS> <ratings> <text>")
        document_id, status, ratings = fields[:3]
        text = fields[3] if len(fields) == 4 else ""
        self.server.add_document(parse_int(document_id), text, parse_status(status), parse_ratings(ratings))
        return []

    def _match(self, rest: str) -> list[str]:
        document_id, _, query = rest.partition(" ")
        words, status = self.server.match_document(query, parse_int(document_id))
        return [f"{{ document_id = {document_id}, status = {status.value}, words = {' '.join(words)} }}"]

    def execute(self, line: str) -> list[str]:
        command, _, rest = line.partition(" ")
        if command == "add":
            return self._add(rest)
        if command == "find":
            return self._find(rest)
        if command == "find-status":
            status, _, query = rest.partition(" ")
            return self._find(query, parse_status(status))
        if command == "match":
            return self._match(rest)
        if command == "id":
            return [f"document_id = {self.server.get_document_id(parse_int(rest))}"]
        if command == "count":
            return [f"document_count = {self.server.get_document_count()}"]
        if command == "no-results":
            return [f"no_result_requests = {self.requests.get_no_result_requests()}"]
        raise InvalidArgumentError(f"unknown command {command!r}")

    def run(self, lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            line = line.rstrip("\r\n")
            if not line.strip():
                continue
            result = attempt(self.execute, line)
            if result.ok:
                yield from result.value
            else:
                logger.debug("Command %r failed: %s", line, result.error)
                yield f"Error: {result.message}"


def run_script(lines: Iterable[str], page_size: int = Config.default_page_size) -> list[str]:
    """Run a whole script and return its output lines."""
    lines = iter(lines)
    stop_words = next(lines, "").rstrip("\r\n")
    result = attempt(SearchServer, stop_words)
    if not result.ok:
        return [f"Error: {result.message}"]
    return list(ScriptRunner(result.value, page_size).run(lines))


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a search server script.")
    parser.add_argument(
        "script",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Script file (default: stdin).",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=Config.default_page_size,
        help=f"Results per page (default: {Config.default_page_size}).",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")
    with args.script:
        for line in run_script(args.script, args.page_size):
            print(line)


if __name__ == "__main__":
    main()
