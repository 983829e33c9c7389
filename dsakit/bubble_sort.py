"""In-place bubble sort with early exit."""

from __future__ import annotations

from typing import Any, MutableSequence


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` ascending in place.

    Each pass moves the largest unsorted value to the end; sorting stops
    as soon as a pass makes no swap. Equal values keep their order.
    """
    size = len(items)
    for step in range(size - 1):
        swapped = False
        for i in range(size - 1 - step):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break