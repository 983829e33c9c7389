import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.min_heap import MinHeap


def _build(values):
    heap = MinHeap()
    for value in values:
        heap.insert(value)
    return heap


def _is_heap(items):
    return all(
        items[(i - 1) // 2] <= items[i] for i in range(1, len(items))
    )


def test_sample_insertion_order():
    heap = _build([6, 7, 3, 1, 5, 4, 2])
    assert list(heap) == [1, 3, 2, 7, 5, 6, 4]


def test_sample_extractions():
    heap = _build([6, 7, 3, 1, 5, 4, 2])
    assert heap.extract_min() == 1
    assert heap.extract_min() == 2
    assert heap.format_heap() == "3 5 4 7 6 \n"


def test_empty_heap():
    heap = MinHeap()
    assert heap.is_empty()
    assert len(heap) == 0
    assert heap.format_heap() == "(Empty)\n"


def test_extract_from_empty_raises():
    with pytest.raises(IndexError):
        MinHeap().extract_min()


def test_peek_from_empty_raises():
    with pytest.raises(IndexError):
        MinHeap().peek()


def test_peek_does_not_remove():
    heap = _build([9, 4, 8])
    assert heap.peek() == 4
    assert len(heap) == 3


def test_single_value_round_trip():
    heap = _build([42])
    assert heap.extract_min() == 42
    assert heap.is_empty()


@given(st.lists(st.integers()))
def test_heap_property_after_inserts(values):
    heap = _build(values)
    items = list(heap)
    assert _is_heap(items)
    assert sorted(items) == sorted(values)
    assert len(heap) == len(values)


@given(st.lists(st.integers()))
def test_extraction_yields_sorted(values):
    heap = _build(values)
    extracted = [heap.extract_min() for _ in range(len(values))]
    assert extracted == sorted(values)
    assert heap.is_empty()


@given(st.lists(st.integers(), min_size=1))
def test_heap_property_after_extract(values):
    heap = _build(values)
    heap.extract_min()
    assert _is_heap(list(heap))
    assert len(heap) == len(values) - 1


@given(st.lists(st.integers(), min_size=1))
def test_peek_is_minimum(values):
    assert _build(values).peek() == min(values)