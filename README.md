# daalab

Textbook algorithms from a design and analysis of algorithms course,
written as plain Python functions that return their results, plus a
`daalab` command that runs each of them on numbers read from standard
input.

## What is inside

| Module                 | Contents |
|------------------------|----------|
| `daalab.sorting`       | `merge_sort`, `quick_sort`, `SortResult`, `heapify`, `heap_sort`, `operation_counts` |
| `daalab.search`        | `shift_table`, `horspool` |
| `daalab.combinatorics` | `knapsack_table`, `knapsack`, `KnapsackResult`, `subset_sums`, `n_queens`, `format_board` |
| `daalab.graphs`        | `bfs_components`, `dfs_pop_order`, `topological_sort`, `floyd`, `prim`, `MstEdge`, `dijkstra`, `ShortestPaths` |
| `daalab.cli`           | `main`, behind the `daalab` command |

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Sorting

`merge_sort` and `quick_sort` return a `SortResult` with the sorted
`values` and a `count` of basic operations. For merge sort the count is
the number of elements moved by the merges; for quicksort (first element
as pivot) it is the number of scan steps taken during partitioning.

```python
from daalab.sorting import merge_sort, quick_sort, heapify, heap_sort

merge_sort([5, 3, 8, 1])   # SortResult(values=[1, 3, 5, 8], count=8)
quick_sort([5, 3, 8, 1]).values   # [1, 3, 5, 8]

heapify([1, 2, 3])    # the values arranged as a max-heap: [3, 2, 1]
heap_sort([4, 1, 3])  # [1, 3, 4]
```

`heapify` and `heap_sort` return plain lists and do not count operations.

`operation_counts(sort, sizes, rng)` runs a counting sort on ascending,
descending and random input of each size and returns rows of
`(size, ascending, descending, random)`. Pass a `random.Random` to make
the random column reproducible.

## String search

`horspool(text, pattern)` returns the index of the first match, or `-1`.
`shift_table(pattern)` gives the bad-character shifts; characters missing
from it shift by the whole pattern length.

```python
from daalab.search import horspool

horspool("hello world", "world")   # 6
horspool("hello world", "planet")  # -1
```

## Dynamic programming and backtracking

```python
from daalab.combinatorics import knapsack, subset_sums, n_queens, format_board

best = knapsack([2, 1, 3, 2], [12, 10, 20, 15], 5)
best.max_profit   # 37
best.items        # [0, 1, 3]  (0-based item indices)
best.table        # the full (items + 1) x (capacity + 1) table

list(subset_sums([1, 2, 5, 6, 8], 9))   # [(1, 2, 6), (1, 8)]

solutions = list(n_queens(4))   # [(1, 3, 0, 2), (2, 0, 3, 1)]
print(format_board(solutions[0]))
```

`subset_sums` needs positive values in ascending order and raises
`ValueError` otherwise. `n_queens` yields each solution as the 0-based
column of the queen in each row.

## Graphs

Graphs are square matrices given as lists of lists.

- `bfs_components` and `dfs_pop_order` take adjacency matrices where `1`
  marks an edge. `bfs_components` returns the components in visiting
  order; `dfs_pop_order` returns, per depth-first tree, the vertices in
  the order they finish. `topological_sort` orders vertices by decreasing
  finishing time.
- `floyd` takes the weights as they are; mark a missing edge with a large
  number or `math.inf`.
- `prim` and `dijkstra` read a weight of `0` as "no edge". `prim` grows
  the tree from vertex 0, returns a list of `MstEdge(u, v, weight)` and
  raises `ValueError` if the graph is not connected. `dijkstra` returns
  `ShortestPaths` with `distances` (infinity when unreachable),
  `predecessors`, and `path(target)`.

```python
from daalab.graphs import bfs_components, dijkstra

bfs_components([[0, 1, 0], [1, 0, 0], [0, 0, 0]])   # [[0, 1], [2]]

cost = [
    [0, 4, 1],
    [4, 0, 2],
    [1, 2, 0],
]
paths = dijkstra(cost, 0)
paths.distances   # [0, 3, 1]
paths.path(1)     # [0, 2, 1]
```

## Command line

```
daalab --help
```

Each subcommand reads whitespace-separated integers from standard input
and prints its result:

| Command     | Input |
|-------------|-------|
| `mergesort` | count, then the values; also prints an operation count table |
| `quicksort` | count, then the values; also prints the count and the table |
| `heapsort`  | count, then the values |
| `horspool`  | the text on the first line, the pattern on the second |
| `knapsack`  | item count, capacity, the weights, then the profits |
| `subsets`   | count, the ascending values, then the target sum |
| `queens`    | the number of queens |
| `bfs`, `dfs`, `floyd`, `prim` | order n, then the n x n matrix |
| `dijkstra`  | order n, the n x n cost matrix, then the 0-based source |

`mergesort` and `quicksort` accept `--seed N` to make the random column
of the table repeatable. The knapsack items and the Prim edges are
printed with 1-based numbers. On bad input the command prints an error
to standard error and exits with status 1.

```
echo "4 5 3 8 1" | daalab mergesort --seed 1
printf "3\n0 4 1\n4 0 2\n1 2 0\n0\n" | daalab dijkstra
```