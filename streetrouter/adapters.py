"""Stack and queue built on :class:`Deque`."""

from __future__ import annotations

from typing import Generic, TypeVar

from streetrouter.deque import Deque

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in, first-out container."""

    def __init__(self) -> None:
        self._deque: Deque[T] = Deque()

    def top(self) -> T:
        return self._deque.get_end()

    def pop(self) -> None:
        self._deque.remove_from_end()

    def push(self, item: T) -> None:
        self._deque.insert_at_end(item)

    def empty(self) -> bool:
        return self._deque.is_empty()

    def __str__(self) -> str:
        return f"[Stack] {self._deque}"


class Queue(Generic[T]):
    """First-in, first-out container."""

    def __init__(self) -> None:
        self._deque: Deque[T] = Deque()

    def front(self) -> T:
        return self._deque.get_begin()

    def pop(self) -> None:
        self._deque.remove_from_begin()

    def push(self, item: T) -> None:
        self._deque.insert_at_end(item)

    def empty(self) -> bool:
        return self._deque.is_empty()

    def __str__(self) -> str:
        return f"[Queue] {self._deque}"