import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.max_heap import MaxHeap

SAMPLE = [6, 7, 3, 1, 5, 4, 2]


def build(values):
    heap = MaxHeap()
    for value in values:
        heap.insert(value)
    return heap


def assert_heap_property(order):
    for index, value in enumerate(order):
        for child in (2 * index + 1, 2 * index + 2):
            if child < len(order):
                assert value >= order[child]


def test_sample_insertion_order():
    heap = build(SAMPLE)
    assert heap.level_order() == [7, 6, 4, 1, 5, 3, 2]


def test_sample_extractions():
    heap = build(SAMPLE)
    assert heap.extract_max() == 7
    assert heap.level_order() == [6, 5, 4, 1, 2, 3]
    assert heap.extract_max() == 6
    assert heap.level_order() == [5, 3, 4, 1, 2]


def test_single_element_extract_empties_heap():
    heap = build([42])
    assert heap.extract_max() == 42
    assert heap.is_empty()
    assert len(heap) == 0


def test_extract_from_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().extract_max()


def test_peek_from_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().peek()


def test_peek_does_not_remove():
    heap = build([3, 9, 1])
    assert heap.peek() == 9
    assert len(heap) == 3
    assert heap.extract_max() == 9


def test_format_single_and_empty():
    assert MaxHeap().format_heap() == "(Empty)\n"
    assert build([6]).format_heap() == "6 \n"


def test_format_lists_level_order():
    heap = build(SAMPLE)
    assert heap.format_heap().split() == [str(v) for v in heap.level_order()]


@given(st.lists(st.integers()))
def test_heap_property_holds_after_inserts(values):
    heap = build(values)
    assert_heap_property(heap.level_order())
    assert sorted(heap.level_order()) == sorted(values)
    assert len(heap) == len(values)


@given(st.lists(st.integers(), min_size=1))
def test_extraction_yields_descending_order(values):
    heap = build(values)
    drained = []
    while not heap.is_empty():
        drained.append(heap.extract_max())
        assert_heap_property(heap.level_order())
    assert drained == sorted(values, reverse=True)