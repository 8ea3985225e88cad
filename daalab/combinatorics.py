"""Knapsack, sum of subsets and n-queens by dynamic programming and backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class KnapsackResult:
    """The filled table, the chosen item indices and the best total profit."""

    table: list[list[int]]
    items: list[int]
    max_profit: int


def knapsack_table(
    weights: Sequence[int], profits: Sequence[int], capacity: int
) -> list[list[int]]:
    """Return the (items + 1) x (capacity + 1) 0/1 knapsack profit table."""
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must not be negative")
    table = [[0] * (capacity + 1)]
    for weight, profit in zip(weights, profits):
        previous = table[-1]
        row = [0] * (capacity + 1)
        for j in range(1, capacity + 1):
            if j < weight:
                row[j] = previous[j]
            else:
                row[j] = max(previous[j], profit + previous[j - weight])
        table.append(row)
    return table


def knapsack(
    weights: Sequence[int], profits: Sequence[int], capacity: int
) -> KnapsackResult:
    """Solve the 0/1 knapsack problem; items are reported as 0-based indices."""
    table = knapsack_table(weights, profits, capacity)
    chosen = []
    i, j = len(weights), capacity
    while i != 0 and j != 0:
        if table[i][j] != table[i - 1][j]:
            chosen.append(i - 1)
            j -= weights[i - 1]
        i -= 1
    return KnapsackResult(table, sorted(chosen), table[-1][capacity])


def subset_sums(values: Sequence[int], target: int) -> Iterator[tuple[int, ...]]:
    """Yield every subset of the ascending positive values that sums to target."""
    if any(value <= 0 for value in values):
        raise ValueError("values must be positive")
    if any(a > b for a, b in zip(values, values[1:])):
        raise ValueError("values must be in ascending order")
    if not values or sum(values) < target or values[0] > target:
        return
    weights = [*values, 0]
    last = len(values) - 1
    chosen: list[int] = []

    def search(total: int, k: int, remaining: int) -> Iterator[tuple[int, ...]]:
        chosen.append(weights[k])
        if total + weights[k] == target:
            yield tuple(chosen)
        elif k < last and total + weights[k] + weights[k + 1] <= target:
            yield from search(total + weights[k], k + 1, remaining - weights[k])
        chosen.pop()
        if (
            k < last
            and total + remaining - weights[k] >= target
            and total + weights[k + 1] <= target
        ):
            yield from search(total, k + 1, remaining - weights[k])

    yield from search(0, 0, sum(values))


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of n queens; each gives the 0-based column per row."""
    if n < 0:
        raise ValueError("n must not be negative")
    columns: list[int] = []

    def safe(column: int) -> bool:
        row = len(columns)
        return all(
            placed != column and abs(placed - column) != row - other
            for other, placed in enumerate(columns)
        )

    def place() -> Iterator[tuple[int, ...]]:
        for column in range(n):
            if safe(column):
                columns.append(column)
                if len(columns) == n:
                    yield tuple(columns)
                else:
                    yield from place()
                columns.pop()

    if n > 0:
        yield from place()


def format_board(columns: Sequence[int]) -> str:
    """Render a queen placement as a tab-separated board with 1-based labels."""
    n = len(columns)
    if any(not 0 <= column < n for column in columns):
        raise ValueError("column out of range")
    header = "".join(f"\t{i}" for i in range(1, n + 1))
    rows = "".join(
        f"\n\n{row}" + "".join("\tQ" if col == column else "\t-" for col in range(n))
        for row, column in enumerate(columns, start=1)
    )
    return header + rows