"""A growable array with an explicit capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 2.0
SHRINK_THRESHOLD = 0.25


class Vector(Generic[T]):
    """Array that doubles its capacity when full and halves it when sparse."""

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        if initial_capacity <= 0:
            initial_capacity = DEFAULT_CAPACITY
        self._capacity = initial_capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            self._capacity = int(self._capacity * GROWTH_FACTOR)

    def _shrink_if_sparse(self) -> None:
        if len(self._items) < self._capacity * SHRINK_THRESHOLD and self._capacity > DEFAULT_CAPACITY:
            self._capacity //= 2

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of bounds")

    def add_item_end(self, item: T) -> None:
        self._grow_if_full()
        self._items.append(item)

    def add_item(self, item: T) -> None:
        """Insert after the last element from the end that is not greater than item."""
        self._grow_if_full()
        position = 0
        for i in range(len(self._items) - 1, -1, -1):
            if not item < self._items[i]:
                position = i + 1
                break
        self._items.insert(position, item)

    def remove_index_swap(self, index: int) -> None:
        """Remove by moving the last element into the gap; order is not kept."""
        self._check_index(index)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last
        self._shrink_if_sparse()

    def remove_index(self, index: int) -> None:
        self._check_index(index)
        del self._items[index]
        self._shrink_if_sparse()

    def search(self, item: T) -> int:
        """Return the index of the first equal element, or -1."""
        return next((i for i, value in enumerate(self._items) if value == item), -1)

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def set(self, index: int, item: T) -> None:
        """Replace the element at index; an out-of-range index is ignored."""
        if 0 <= index < len(self._items):
            self._items[index] = item

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __str__(self) -> str:
        contents = " ".join(str(item) for item in self._items) if self._items else "(empty)"
        return (
            f"Vector contents: {contents}\n"
            f"Size: {len(self._items)}, Capacity: {self._capacity}"
        )