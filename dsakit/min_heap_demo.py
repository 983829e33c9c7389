"""Command that builds a min heap from numbers and extracts the smallest."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence, TextIO

from dsakit.min_heap import MinHeap

SENTINEL = -1


def run_demo(values: Iterable[int], extract_count: int = 2) -> str:
    """Insert ``values`` one by one, then extract the smallest ``extract_count`` times.

    Returns the full transcript: the heap after each insertion, the
    initial heap, each extraction and the final heap.
    """
    if extract_count < 0:
        raise ValueError("extract_count must not be negative")
    heap: MinHeap[int] = MinHeap()
    parts: list[str] = []

    for value in values:
        heap.insert(value)
        parts.append(f"Heap: {heap.format_heap()}")

    parts.append("\n\nInitial Heap:\n")
    parts.append(heap.format_heap())

    parts.append(f"\nLet's extract {extract_count} smallest data from the root.")
    for _ in range(extract_count):
        try:
            smallest = heap.extract_min()
        except IndexError:
            parts.append("Error! Heap is empty.\n")
            continue
        parts.append(f"\nThe smallest data in the heap: {smallest}\n")
        parts.append(f"Heap: {heap.format_heap()}")

    parts.append("\n\nFinal Heap: \n")
    parts.append(heap.format_heap())
    parts.append("\n")
    return "".join(parts)


def _read_values(stream: TextIO) -> list[int]:
    values = []
    for token in stream.read().split():
        number = int(token)
        if number == SENTINEL:
            break
        values.append(number)
    return values


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="min-heap-demo",
        description=(
            "Build a min heap and extract its smallest values. Without "
            "numbers on the command line, numbers are read from standard "
            f"input up to {SENTINEL}."
        ),
    )
    parser.add_argument("values", nargs="*", type=int, help="numbers to insert")
    parser.add_argument(
        "--extract",
        type=int,
        default=2,
        help="how many times to extract the minimum (default: 2)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo from the command line and print its transcript."""
    args = _parse_args(argv)
    if args.extract < 0:
        print("Invalid input: --extract must not be negative", file=sys.stderr)
        return 1
    if args.values:
        values = list(args.values)
    else:
        try:
            values = _read_values(sys.stdin)
        except ValueError as error:
            print(f"Invalid input: {error}", file=sys.stderr)
            return 1
    print(run_demo(values, args.extract), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())