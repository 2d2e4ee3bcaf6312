"""
Error taxonomy of the search server.

Every operation validates its input synchronously and raises one of the
exceptions below before mutating any state. ``attempt`` converts those
exceptions into ``Result`` values for callers that prefer to propagate
errors as data instead of unwinding.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorKind(enum.Enum):
    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"


class SearchServerError(Exception):
    """Base class for all errors reported by the search server."""

    kind: ErrorKind


class InvalidArgumentError(SearchServerError, ValueError):
    kind = ErrorKind.INVALID_ARGUMENT


class OutOfRangeError(SearchServerError, IndexError):
    kind = ErrorKind.OUT_OF_RANGE


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Tagged union of a success value and an error kind.

    Exactly one of ``value`` (when ``error`` is None) or ``error`` is meaningful.
    """

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, re-raising the recorded error if there is one."""
        if self.error is ErrorKind.INVALID_ARGUMENT:
            raise InvalidArgumentError(self.message)
        if self.error is ErrorKind.OUT_OF_RANGE:
            raise OutOfRangeError(self.message)
        return self.value  # type: ignore[return-value]


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    """Call ``func`` and capture a ``SearchServerError`` as an error ``Result``."""
    try:
        return Result(value=func(*args, **kwargs))
    except SearchServerError as error:
        return Result(error=error.kind, message=str(error))
