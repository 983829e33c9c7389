"""Doubly linked list of values with head and tail access."""

from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class DoublyLinkedList(Generic[T]):
    """List with constant-time insertion and removal at both ends."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._count = 0

    def is_empty(self) -> bool:
        """Return True when the list holds no values."""
        return self._head is None

    def add_to_head(self, value: T) -> None:
        """Insert ``value`` before the first element."""
        node = _Node(value)
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        else:
            self._tail = node
        self._head = node
        self._count += 1

    def add_to_tail(self, value: T) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        node.prev = self._tail
        if self._tail is not None:
            self._tail.next = node
        else:
            self._head = node
        self._tail = node
        self._count += 1

    def pop_from_head(self) -> T:
        """Remove and return the first value; raise IndexError if empty."""
        node = self._head
        if node is None:
            raise IndexError("The Doubly Linked List is empty.")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._count -= 1
        return node.value

    def pop_from_tail(self) -> T:
        """Remove and return the last value; raise IndexError if empty."""
        node = self._tail
        if node is None:
            raise IndexError("The Doubly Linked List is empty.")
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._count -= 1
        return node.value

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._count

    @staticmethod
    def _format(values: Iterator[Any]) -> str:
        body = "".join(f"{value} -> " for value in values)
        return f"NULL -> {body}NULL\n"

    def format_forward(self) -> str:
        """Render the values from head to tail."""
        if self.is_empty():
            return "(Empty)"
        return self._format(iter(self))

    def format_reverse(self) -> str:
        """Render the values from tail to head."""
        if self.is_empty():
            return "(Empty)"
        return self._format(reversed(self))