"""Min heap stored as an array in level order."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class MinHeap(Generic[T]):
    """Binary min heap: the smallest value is always at index 0.

    The children of the value at index ``i`` sit at ``2i + 1`` and
    ``2i + 2``; its parent sits at ``(i - 1) // 2``.
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
            if not items[parent] > items[index]:
                break
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        count = len(items)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < count and items[left] < items[smallest]:
                smallest = left
            if right < count and items[right] < items[smallest]:
                smallest = right
            if smallest == index:
                return
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest

    def extract_min(self) -> T:
        """Remove and return the smallest value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("heap is empty")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> T:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True when the heap holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the values in array (level) order."""
        return iter(list(self._items))

    def format_heap(self) -> str:
        """Render the values in array order on one line."""
        if not self._items:
            return "(Empty)\n"
        return "".join(f"{value} " for value in self._items) + "\n"