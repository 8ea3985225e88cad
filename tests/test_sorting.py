import random

from hypothesis import given, strategies as st

from daalab.sorting import (
    SortResult,
    heap_sort,
    heapify,
    merge_sort,
    operation_counts,
    quick_sort,
)

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


@given(int_lists)
def test_merge_sort_sorts(values):
    assert merge_sort(values).values == sorted(values)


@given(int_lists)
def test_quick_sort_sorts(values):
    assert quick_sort(values).values == sorted(values)


@given(int_lists)
def test_heap_sort_sorts(values):
    assert heap_sort(values) == sorted(values)


@given(int_lists)
def test_heapify_gives_max_heap(values):
    heap = heapify(values)
    assert sorted(heap) == sorted(values)
    for parent in range(len(heap)):
        for child in (2 * parent + 1, 2 * parent + 2):
            if child < len(heap):
                assert heap[parent] >= heap[child]


def test_heapify_small_example():
    assert heapify([1, 2, 3]) == [3, 2, 1]


def test_input_not_modified():
    values = [5, 3, 1, 4]
    merge_sort(values)
    quick_sort(values)
    heap_sort(values)
    assert values == [5, 3, 1, 4]


def test_merge_count_for_powers_of_two():
    for size in (1, 2, 16, 64):
        levels = size.bit_length() - 1
        assert merge_sort(range(size)).count == size * levels


def test_quick_sort_sorted_input_is_quadratic():
    for size in (16, 32, 100):
        assert quick_sort(range(size)).count == size * (size - 1) // 2


def test_empty_and_single():
    assert merge_sort([]) == SortResult([], 0)
    assert quick_sort([]) == SortResult([], 0)
    assert quick_sort([7]) == SortResult([7], 0)
    assert heap_sort([]) == []


def test_operation_counts_rows():
    rows = operation_counts(merge_sort, [16, 32], random.Random(0))
    assert [row[0] for row in rows] == [16, 32]
    assert rows[0][1] == merge_sort(list(range(16))).count
    assert rows[1][2] == merge_sort([32 - j for j in range(32)]).count


def test_operation_counts_quick_sort_ascending():
    rows = operation_counts(quick_sort, [16, 64], random.Random(1))
    assert [row[1] for row in rows] == [16 * 15 // 2, 64 * 63 // 2]


def test_operation_counts_deterministic_with_seed():
    first = operation_counts(quick_sort, [16, 32], random.Random(5))
    second = operation_counts(quick_sort, [16, 32], random.Random(5))
    assert first == second