"""Common types, comparators and errors for the leftist priority queue.

Comparators follow the "less than" convention: ``lt(a, b)`` is true when
``a`` has strictly lower priority than ``b``. The default ``less`` therefore
puts the largest element on top, and ``greater`` the smallest.
"""

from __future__ import annotations

from abc import ABCMeta, abstractmethod
from typing import Any, Callable

__all__ = [
    "Clone",
    "Compare",
    "EmptyError",
    "Impossible",
    "PredicateError",
    "QueueError",
    "Sized",
    "greater",
    "identity",
    "less",
]


type Compare[T] = Callable[[T, T], bool]
type Clone[T] = Callable[[T], T]


class Impossible(Exception):
    """Exception raised when encountering theoretically impossible states.

    Used to indicate internal consistency violations, such as a broken
    heap-order or leftist invariant found by a tree check.
    """

    pass


class QueueError(Exception):
    """Base class for failures reported by queue operations."""

    pass


class EmptyError(QueueError, IndexError):
    """Raised when the extreme element of an empty queue is requested."""

    def __init__(self, op: str) -> None:
        super().__init__(f"{op} from an empty queue")
        self.op = op


class PredicateError(QueueError):
    """Raised when the ordering predicate fails during an operation.

    The queue (or queues) involved are left exactly as they were before the
    call. The original exception is kept in ``exc`` and chained as the cause.
    """

    def __init__(self, op: str, exc: Exception) -> None:
        super().__init__(f"ordering predicate failed during {op}: {exc!r}")
        self.op = op
        self.exc = exc


class Sized(metaclass=ABCMeta):
    @abstractmethod
    def size(self) -> int: ...

    def null(self) -> bool:
        return self.size() == 0

    def __bool__(self) -> bool:
        return not self.null()

    def __len__(self) -> int:
        return self.size()


def less(a: Any, b: Any) -> bool:
    """Order by ``<``, so the largest element has the highest priority."""
    return bool(a < b)


def greater(a: Any, b: Any) -> bool:
    """Order by ``>``, so the smallest element has the highest priority."""
    return bool(a > b)


def identity[T](value: T) -> T:
    return value
