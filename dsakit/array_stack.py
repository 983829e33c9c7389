"""Fixed-capacity LIFO stack backed by a list."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 5


class StackFullError(RuntimeError):
    """Raised when pushing onto a full stack."""


class ArrayStack(Generic[T]):
    """Stack of at most ``capacity`` values with O(1) push and pop."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    def push(self, value: T) -> None:
        """Put ``value`` on top; raise StackFullError when full."""
        if self.is_full():
            raise StackFullError("Stack is full.")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top value; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("Stack is empty.")
        return self._items.pop()

    def is_empty(self) -> bool:
        """Return True when the stack holds no values."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when no more values fit."""
        return len(self._items) == self._capacity

    def capacity(self) -> int:
        """Return the largest number of values the stack can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from bottom to top without removing anything."""
        return iter(list(self._items))

    def format_stack(self) -> str:
        """Render the values from bottom to top on one line."""
        if self.is_empty():
            return "(Empty)\n"
        return "".join(f"{value} " for value in self._items) + "\n"