# dsakit

Classic data structures and sorting algorithms in plain Python, with no
dependencies outside the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.open_addressing` | `OpenAddressingTable`, a fixed-size table of integer keys using linear probing and tombstone deletion; `SlotState` (`EMPTY`, `DIRTY`) and `TableFullError` |
| `dsakit.max_heap` | `MaxHeap`, a binary max heap kept in level order |
| `dsakit.min_heap` | `MinHeap`, a binary min heap stored as an array |
| `dsakit.linked_list` | `LinkedList`, a singly linked list |
| `dsakit.doubly_linked_list` | `DoublyLinkedList`, a doubly linked list |
| `dsakit.array_stack` | `ArrayStack`, a fixed-capacity stack, and `StackFullError` |
| `dsakit.array_queue` | `ArrayQueue`, a fixed-capacity circular queue, and `QueueFullError` |
| `dsakit.bubble_sort` | `bubble_sort`, in-place with early exit |
| `dsakit.quick_sort` | `quick_sort` and `partition`, last element as pivot |
| `dsakit.max_heap_demo` | `run_demo` and the `dsakit-max-heap` command |
| `dsakit.min_heap_demo` | `run_demo` and the `dsakit-min-heap` command |

Removing from an empty structure raises `IndexError`; adding to a full
stack, queue or table raises `StackFullError`, `QueueFullError` or
`TableFullError`. `ArrayStack` and `ArrayQueue` hold 5 values unless
given another capacity.

## Installation

```
pip install .
```

## Examples

```python
from dsakit.open_addressing import OpenAddressingTable, TableFullError

table = OpenAddressingTable(5)
for key in (1, 2, 3, 4, 5):
    table.add(key)

try:
    table.add(6)
except TableFullError:
    print("full")

table.remove(2)          # slot 2 becomes dirty
print(table.add(9))      # 2: probing from slot 4 reuses the dirty slot
print(table.search(9))   # 2
print(table.format_table(), end="")
# Index 0: 5
# Index 1: 1
# Index 2: 9
# Index 3: 3
# Index 4: 4
```

`search` and `remove` raise `KeyError` for a key that is not present;
`key in table` answers without raising.

```python
from dsakit.min_heap import MinHeap

heap = MinHeap()
for value in (6, 7, 3, 1, 5, 4, 2):
    heap.insert(value)
print(list(heap))          # [1, 3, 2, 7, 5, 6, 4]
print(heap.extract_min())  # 1
```

```python
from dsakit.doubly_linked_list import DoublyLinkedList

items = DoublyLinkedList()
for value in (10, 15, 5):
    items.add_to_tail(value)
items.add_to_head(7)
print(items.format_forward(), end="")  # NULL -> 7 -> 10 -> 15 -> 5 -> NULL
print(items.format_reverse(), end="")  # NULL -> 5 -> 15 -> 10 -> 7 -> NULL
```

```python
from dsakit.array_queue import ArrayQueue

queue = ArrayQueue(3)
for value in (1, 2, 3):
    queue.enqueue(value)
print(queue.dequeue())   # 1
print(queue.is_full())   # False
```

```python
from dsakit.bubble_sort import bubble_sort
from dsakit.quick_sort import quick_sort

numbers = [5, 4, 3, 2, 1]
bubble_sort(numbers)
print(numbers)   # [1, 2, 3, 4, 5]

numbers = [3, 1, 4, 2]
quick_sort(numbers)
print(numbers)   # [1, 2, 3, 4]
```

Both sorting functions sort the given sequence in place and return
`None`. `quick_sort(items, low, high)` sorts only `items[low:high + 1]`.

## Command-line demos

Two commands build a heap one number at a time, printing it after each
insertion, then extract from the root and print the final heap:

```
dsakit-max-heap 6 7 3 1 5 4 2
dsakit-min-heap 6 7 3 1 5 4 2 --extract 3
```

Without numbers on the command line, numbers are read from standard
input up to the first `-1`. `--extract` sets how many values are taken
from the root (default 2). The same transcript is available from
Python through `run_demo(values, extract_count)` in either module.

## What it does not do

- `OpenAddressingTable` stores integer keys only; it maps no keys to
  values, and it never grows: its size is fixed when it is created.
- There are no interactive menus; the only commands are the two heap
  demos.

## Running the tests

```
pip install .[test]
pytest
```