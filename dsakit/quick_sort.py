"""In-place quicksort using the last element of a range as pivot."""

from __future__ import annotations

from typing import Any, MutableSequence, Optional


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``items[low:high + 1]`` around ``items[high]``.

    Values less than or equal to the pivot end up before it, larger
    values after it. Returns the pivot's final index.
    """
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(
    items: MutableSequence[Any], low: int = 0, high: Optional[int] = None
) -> None:
    """Sort ``items[low:high + 1]`` ascending in place.

    ``high`` defaults to the last index, so ``quick_sort(items)`` sorts
    the whole sequence.
    """
    if high is None:
        high = len(items) - 1
    # Recurse into the smaller side and loop over the larger one to keep
    # the call depth logarithmic.
    while low < high:
        pivot_index = partition(items, low, high)
        if pivot_index - low < high - pivot_index:
            quick_sort(items, low, pivot_index - 1)
            low = pivot_index + 1
        else:
            quick_sort(items, pivot_index + 1, high)
            high = pivot_index - 1