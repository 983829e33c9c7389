"""Singly linked list of values."""

from __future__ import annotations

from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: Optional[_Node] = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList(Generic[T]):
    """Singly linked list with insertion and removal at both ends."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._count = 0

    def is_empty(self) -> bool:
        """Return True when the list holds no values."""
        return self._head is None

    def add_to_head(self, value: T) -> None:
        """Insert ``value`` before the first element."""
        self._head = _Node(value, self._head)
        self._count += 1

    def add_to_tail(self, value: T) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            current = self._head
            while current.next is not None:
                current = current.next
            current.next = node
        self._count += 1

    def pop_from_head(self) -> T:
        """Remove and return the first value; raise IndexError if empty."""
        node = self._head
        if node is None:
            raise IndexError("The Linked List is empty.")
        self._head = node.next
        self._count -= 1
        return node.value

    def pop_from_tail(self) -> T:
        """Remove and return the last value; raise IndexError if empty."""
        head = self._head
        if head is None:
            raise IndexError("The Linked List is empty.")
        if head.next is None:
            self._head = None
            self._count -= 1
            return head.value
        current = head
        while current.next is not None and current.next.next is not None:
            current = current.next
        last = current.next
        assert last is not None
        current.next = None
        self._count -= 1
        return last.value

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._count

    def format_list(self) -> str:
        """Render the values from head to tail."""
        if self.is_empty():
            return "(Empty)"
        body = "".join(f"{value} -> " for value in self)
        return f"{body}NULL\n"