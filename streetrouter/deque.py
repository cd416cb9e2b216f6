"""A double-ended queue with explicit begin/end operations."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Deque(Generic[T]):
    """Double-ended queue; removing from an empty deque is a no-op."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: deque[T] = deque(items)

    def is_empty(self) -> bool:
        return not self._items

    def insert_at_begin(self, item: T) -> None:
        self._items.appendleft(item)

    def insert_at_end(self, item: T) -> None:
        self._items.append(item)

    def remove_from_begin(self) -> None:
        if self._items:
            self._items.popleft()

    def remove_from_end(self) -> None:
        if self._items:
            self._items.pop()

    def get_begin(self) -> T:
        if not self._items:
            raise IndexError("Deque is empty: cannot get front element")
        return self._items[0]

    def get_end(self) -> T:
        if not self._items:
            raise IndexError("Deque is empty: cannot get back element")
        return self._items[-1]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return " ".join(str(item) for item in self._items)