"""Open-addressing hash table, heaps, linked lists, bounded stack and queue, bubble sort and quicksort."""

__version__ = "0.1.0"