"""A singly linked list of integers with ordered insertion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class ListNode:
    """One link of a :class:`SingleLinkedList`."""

    value: int
    next: ListNode | None = None


class SingleLinkedList:
    """Singly linked list that keeps track of its last node."""

    def __init__(self) -> None:
        self._head: ListNode | None = None
        self._tail: ListNode | None = None

    def insert_at_begin(self, value: int) -> bool:
        node = ListNode(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        return True

    def insert_at_end(self, value: int) -> bool:
        node = ListNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        return True

    def insert_in_order(self, value: int) -> bool:
        """Insert before the first larger value; return False if value is already there."""
        prev: ListNode | None = None
        current = self._head
        while current is not None and current.value < value:
            prev, current = current, current.next
        if current is not None and current.value == value:
            return False
        node = ListNode(value, current)
        if prev is None:
            self._head = node
        else:
            prev.next = node
        if current is None:
            self._tail = node
        return True

    def remove(self, value: int) -> bool:
        """Remove the first node holding value; return whether one was found."""
        prev: ListNode | None = None
        current = self._head
        while current is not None and current.value != value:
            prev, current = current, current.next
        if current is None:
            return False
        if prev is None:
            self._head = current.next
        else:
            prev.next = current.next
        if current is self._tail:
            self._tail = prev
        return True

    def find(self, value: int) -> bool:
        return self.find_node(value) is not None

    def find_node(self, value: int) -> ListNode | None:
        return next((node for node in self._nodes() if node.value == value), None)

    def is_empty(self) -> bool:
        return self._head is None

    def clear(self) -> None:
        self._head = None
        self._tail = None

    def _nodes(self) -> Iterator[ListNode]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in self._nodes())

    def __str__(self) -> str:
        if self._head is None:
            return "Empty"
        return " ".join(str(value) for value in self)