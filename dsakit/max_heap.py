"""Max heap kept as a complete binary tree in level order."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class MaxHeap(Generic[T]):
    """Binary max heap: the largest value is always at the root.

    Values are stored in level order, so the tree stays complete: new
    values fill the bottom level from left to right, and removal takes
    the rightmost value of the bottom level.
    """

    def __init__(self) -> None:
        self._items: list[Any] = []

    def insert(self, value: T) -> None:
        """Add ``value`` and restore the heap property by sifting it up."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if not items[index] > items[parent]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        count = len(items)
        while True:
            largest = index
            left = 2 * index + 1
            right = left + 1
            if left < count and items[left] > items[largest]:
                largest = left
            if right < count and items[right] > items[largest]:
                largest = right
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def extract_max(self) -> T:
        """Remove and return the largest value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("heap is empty")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> T:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True when the heap holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def level_order(self) -> list[T]:
        """Return the values level by level, left to right."""
        return list(self._items)

    def format_heap(self) -> str:
        """Render the values in level order on one line."""
        if not self._items:
            return "(Empty)\n"
        return "".join(f"{value} " for value in self._items) + "\n"