from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

from search_server.errors import InvalidArgumentError

T = TypeVar("T")


class IteratorRange(Generic[T]):
    """A contiguous page of an ordered sequence."""

    def __init__(self, items: Sequence[T]):
        self.items = items

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "".join(str(item) for item in self.items)


class Paginator(Generic[T]):
    """Splits a sequence into pages of ``page_size``; the last page holds the remainder."""

    def __init__(self, items: Sequence[T], page_size: int):
        if page_size <= 0:
            raise InvalidArgumentError("page_size must be positive")
        self.pages = [
            IteratorRange(items[start : start + page_size]) for start in range(0, len(items), page_size)
        ]

    def __iter__(self) -> Iterator[IteratorRange[T]]:
        return iter(self.pages)

    def __len__(self) -> int:
        return len(self.pages)

    def __getitem__(self, index: int) -> IteratorRange[T]:
        return self.pages[index]


def paginate(items: Sequence[T], page_size: int) -> Paginator[T]:
    return Paginator(list(items), page_size)
