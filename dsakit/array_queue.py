"""Fixed-capacity FIFO queue backed by a circular buffer."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 5


class QueueFullError(RuntimeError):
    """Raised when enqueuing onto a full queue."""


class ArrayQueue(Generic[T]):
    """Queue of at most ``capacity`` values with O(1) enqueue and dequeue."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._buffer: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back; raise QueueFullError when full."""
        if self.is_full():
            raise QueueFullError("Queue is full.")
        back = (self._front + self._count) % len(self._buffer)
        self._buffer[back] = value
        self._count += 1

    def dequeue(self) -> T:
        """Remove and return the front value; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("Queue is empty.")
        value = self._buffer[self._front]
        self._buffer[self._front] = None
        self._front = (self._front + 1) % len(self._buffer)
        self._count -= 1
        return value

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return self._count == 0

    def is_full(self) -> bool:
        """Return True when no more values fit."""
        return self._count == len(self._buffer)

    def capacity(self) -> int:
        """Return the largest number of values the queue can hold."""
        return len(self._buffer)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        """Iterate from front to back without removing anything."""
        size = len(self._buffer)
        for offset in range(self._count):
            yield self._buffer[(self._front + offset) % size]

    def format_queue(self) -> str:
        """Render the values from front to back on one line."""
        if self.is_empty():
            return "(Empty)\n"
        return "".join(f"{value} " for value in self) + "\n"