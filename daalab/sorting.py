"""Comparison sorts that report how many basic operations they performed."""

from __future__ import annotations

import heapq
import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class SortResult:
    """A sorted list together with the number of basic operations spent on it."""

    values: list[int]
    count: int


def merge_sort(values: Iterable[int]) -> SortResult:
    """Sort with top-down merge sort, counting every element moved by a merge."""
    count = 0

    def sort(seq: list[int]) -> list[int]:
        nonlocal count
        if len(seq) <= 1:
            return seq
        mid = (len(seq) + 1) // 2
        merged = list(heapq.merge(sort(seq[:mid]), sort(seq[mid:])))
        count += len(merged)
        return merged

    result = sort(list(values))
    return SortResult(result, count)


def _partition(items: list[int], left: int, right: int) -> tuple[int, int]:
    pivot = items[left]
    i, j = left + 1, right
    steps = 0
    while True:
        while i <= right and pivot >= items[i]:
            i += 1
            steps += 1
        while j > left and pivot < items[j]:
            j -= 1
            steps += 1
        if i < j:
            items[i], items[j] = items[j], items[i]
        else:
            items[left] = items[j]
            items[j] = pivot
            return j, steps


def quick_sort(values: Iterable[int]) -> SortResult:
    """Sort with quicksort using the first element as pivot, counting scan steps."""
    items = list(values)
    count = 0
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        split, steps = _partition(items, left, right)
        count += steps
        pending.append((split + 1, right))
        pending.append((left, split - 1))
    return SortResult(items, count)


def _build_heap(heap: list, size: int) -> None:
    """Bottom-up max-heap construction over heap[1..size] (index 0 unused)."""
    for i in range(size // 2, 0, -1):
        k = i
        value = heap[k]
        while 2 * k <= size:
            j = 2 * k
            if j < size and heap[j] < heap[j + 1]:
                j += 1
            if value >= heap[j]:
                break
            heap[k] = heap[j]
            k = j
        heap[k] = value


def heapify(values: Iterable[int]) -> list[int]:
    """Return the values arranged as a max-heap (children of i at 2i+1, 2i+2)."""
    heap = [None, *values]
    _build_heap(heap, len(heap) - 1)
    return heap[1:]


def heap_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order using heap sort."""
    heap = [None, *values]
    size = len(heap) - 1
    _build_heap(heap, size)
    for i in range(size, 0, -1):
        heap[1], heap[i] = heap[i], heap[1]
        _build_heap(heap, i - 1)
    return heap[1:]


def operation_counts(
    sort: Callable[[Sequence[int]], SortResult],
    sizes: Iterable[int],
    rng: random.Random | None = None,
) -> list[tuple[int, int, int, int]]:
    """Count operations on ascending, descending and random input of each size.

    Returns rows of (size, ascending, descending, random).
    """
    rng = rng if rng is not None else random.Random()
    rows = []
    for size in sizes:
        ascending = list(range(size))
        descending = [size - j for j in range(size)]
        scattered = [rng.randrange(size) for _ in range(size)]
        rows.append(
            (
                size,
                sort(ascending).count,
                sort(descending).count,
                sort(scattered).count,
            )
        )
    return rows