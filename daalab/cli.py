"""Command line front end for the algorithms in this package."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Iterator, Sequence

from daalab.combinatorics import format_board, knapsack, n_queens, subset_sums
from daalab.graphs import (
    bfs_components,
    dfs_pop_order,
    dijkstra,
    floyd,
    prim,
    topological_sort,
)
from daalab.search import horspool
from daalab.sorting import (
    heap_sort,
    heapify,
    merge_sort,
    operation_counts,
    quick_sort,
)

TABLE_SIZES = (16, 32, 64, 128, 256, 512)


class _Input:
    """Whitespace-separated integers read in order."""

    def __init__(self, text: str) -> None:
        self._tokens: Iterator[str] = iter(text.split())

    def int(self) -> int:
        try:
            token = next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None
        return int(token)

    def count(self) -> int:
        value = self.int()
        if value < 0:
            raise ValueError("count must not be negative")
        return value

    def ints(self, count: int) -> list[int]:
        return [self.int() for _ in range(count)]

    def matrix(self) -> list[list[int]]:
        n = self.count()
        return [self.ints(n) for _ in range(n)]


def _join(values) -> str:
    return " ".join(str(value) for value in values)


def _print_table(sort, seed: int | None) -> None:
    print("SIZE\tASC\tDESC\tRAND")
    for row in operation_counts(sort, TABLE_SIZES, random.Random(seed)):
        print("\t".join(str(cell) for cell in row))


def _mergesort(args, text: str) -> None:
    data = _Input(text)
    values = data.ints(data.count())
    print("Sorted elements are:")
    print(_join(merge_sort(values).values))
    _print_table(merge_sort, args.seed)


def _quicksort(args, text: str) -> None:
    data = _Input(text)
    result = quick_sort(data.ints(data.count()))
    print("The sorted elements are - " + _join(result.values))
    print(f"The number of counts- {result.count}")
    _print_table(quick_sort, args.seed)


def _heapsort(args, text: str) -> None:
    data = _Input(text)
    values = data.ints(data.count())
    print("Before sorting contents are: " + _join(heapify(values)))
    print("After sorting contents are: " + _join(heap_sort(values)))


def _horspool(args, text: str) -> None:
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("expected the text and the pattern on two lines")
    position = horspool(lines[0], lines[1])
    if position == -1:
        print("The pattern not found.....!")
    else:
        print(f"The pattern found at position {position}")


def _knapsack(args, text: str) -> None:
    data = _Input(text)
    n = data.count()
    capacity = data.int()
    weights = data.ints(n)
    profits = data.ints(n)
    result = knapsack(weights, profits, capacity)
    for row in result.table:
        print("\t".join(str(cell) for cell in row))
    print("Object\tWeight\tProfit")
    for item in result.items:
        print(f"{item + 1}\t{weights[item]}\t{profits[item]}")
    print(f"The maximum profit is {result.max_profit}")


def _subsets(args, text: str) -> None:
    data = _Input(text)
    values = data.ints(data.count())
    target = data.int()
    found = False
    for number, subset in enumerate(subset_sums(values, target), start=1):
        found = True
        print(f"Subset {number}:" + "".join(f"{value}\t" for value in subset))
    if not found:
        print("No solution")


def _queens(args, text: str) -> None:
    n = _Input(text).count()
    found = False
    for number, columns in enumerate(n_queens(n), start=1):
        found = True
        print(f"Solution {number} is-")
        print(format_board(columns))
    if not found:
        print("No solutions possible!!")


def _bfs(args, text: str) -> None:
    components = bfs_components(_Input(text).matrix())
    print("BFS")
    print(_join(v for component in components for v in component))
    if len(components) == 1:
        print("Graph is Connected")
    else:
        print(f"Graph is NOT Connected with {len(components)} Components")


def _dfs(args, text: str) -> None:
    matrix = _Input(text).matrix()
    trees = dfs_pop_order(matrix)
    print("Pop order:")
    print(_join(v for tree in trees for v in tree))
    if len(trees) > 1:
        print("The graph is disconnected")
        print(f"The no. of components are:{len(trees)}")
    else:
        print("Graph is connected.")
    print("Topological sort : " + _join(topological_sort(matrix)))


def _floyd(args, text: str) -> None:
    print("All pair shortest path is")
    for row in floyd(_Input(text).matrix()):
        print(_join(row))


def _prim(args, text: str) -> None:
    edges = prim(_Input(text).matrix())
    print("The edges considered for MST:")
    for number, edge in enumerate(edges, start=1):
        print(f"{number} Edge({edge.u + 1},{edge.v + 1}) = {edge.weight}")
    print(f"Cost of constructing MST is {sum(edge.weight for edge in edges)}")


def _dijkstra(args, text: str) -> None:
    data = _Input(text)
    cost = data.matrix()
    source = data.int()
    result = dijkstra(cost, source)
    print(f"Shortest path from {source} is")
    for target, distance in enumerate(result.distances):
        if target == source:
            continue
        if math.isinf(distance):
            print(f"Vertex {target} is unreachable")
            continue
        print(f"Shortest Distance of vertex {target}={distance}")
        print("Path=" + "<-".join(str(v) for v in reversed(result.path(target))))


_COMMANDS = {
    "mergesort": (_mergesort, "merge sort with an operation count table"),
    "quicksort": (_quicksort, "quicksort with an operation count table"),
    "heapsort": (_heapsort, "heap sort"),
    "horspool": (_horspool, "find a pattern (second line) in a text (first line)"),
    "knapsack": (_knapsack, "0/1 knapsack by dynamic programming"),
    "subsets": (_subsets, "subsets of ascending values with a given sum"),
    "queens": (_queens, "all solutions of the n-queens problem"),
    "bfs": (_bfs, "connected components by breadth-first search"),
    "dfs": (_dfs, "depth-first pop order and topological sort"),
    "floyd": (_floyd, "all-pairs shortest paths"),
    "prim": (_prim, "minimum spanning tree"),
    "dijkstra": (_dijkstra, "single-source shortest paths"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daalab",
        description="Run a classic algorithm on whitespace-separated input from stdin.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        sub = commands.add_parser(name, help=help_text)
        if name in ("mergesort", "quicksort"):
            sub.add_argument("--seed", type=int, default=None,
                             help="seed for the random inputs of the table")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, read stdin and print the result; return the exit status."""
    args = _parser().parse_args(argv)
    handler, _ = _COMMANDS[args.command]
    try:
        handler(args, sys.stdin.read())
    except ValueError as exc:
        print(f"daalab: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())