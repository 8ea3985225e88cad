import io
import random
import sys

import pytest

from daalab.cli import TABLE_SIZES, main
from daalab.combinatorics import knapsack, n_queens, subset_sums
from daalab.graphs import bfs_components, dijkstra, floyd, prim
from daalab.search import horspool
from daalab.sorting import heap_sort, heapify, merge_sort, operation_counts, quick_sort


def run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out.splitlines(), captured.err


def matrix_text(matrix):
    return f"{len(matrix)}\n" + "\n".join(" ".join(map(str, row)) for row in matrix)


def test_mergesort_output(monkeypatch, capsys):
    values = [3, 1, 2, 5, 4]
    code, out, _ = run(monkeypatch, capsys, ["mergesort", "--seed", "7"],
                       "5\n3 1 2 5 4\n")
    assert code == 0
    assert out[0] == "Sorted elements are:"
    assert out[1] == " ".join(map(str, sorted(values)))
    assert out[2] == "SIZE\tASC\tDESC\tRAND"
    expected = operation_counts(merge_sort, TABLE_SIZES, random.Random(7))
    assert out[3:] == ["\t".join(map(str, row)) for row in expected]


def test_quicksort_reports_count(monkeypatch, capsys):
    values = [9, 4, 7, 1]
    code, out, _ = run(monkeypatch, capsys, ["quicksort", "--seed", "1"],
                       "4 9 4 7 1")
    result = quick_sort(values)
    assert code == 0
    assert out[0].endswith(" ".join(map(str, result.values)))
    assert out[1] == f"The number of counts- {result.count}"
    assert len(out) == 3 + len(TABLE_SIZES)


def test_heapsort_output(monkeypatch, capsys):
    values = [2, 8, 5, 3]
    code, out, _ = run(monkeypatch, capsys, ["heapsort"], "4\n2 8 5 3")
    assert code == 0
    assert out[0].endswith(" ".join(map(str, heapify(values))))
    assert out[1].endswith(" ".join(map(str, heap_sort(values))))


def test_horspool_found(monkeypatch, capsys):
    text, pattern = "barber shop", "shop"
    code, out, _ = run(monkeypatch, capsys, ["horspool"], f"{text}\n{pattern}\n")
    assert code == 0
    assert out == [f"The pattern found at position {horspool(text, pattern)}"]


def test_horspool_not_found(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["horspool"], "abcdef\nxyz\n")
    assert out == ["The pattern not found.....!"]


def test_knapsack_output(monkeypatch, capsys):
    weights, profits, capacity = [2, 1, 3, 2], [12, 10, 20, 15], 5
    code, out, _ = run(monkeypatch, capsys, ["knapsack"],
                       "4 5\n2 1 3 2\n12 10 20 15\n")
    result = knapsack(weights, profits, capacity)
    assert code == 0
    assert out[-1] == f"The maximum profit is {result.max_profit}"
    objects = out[len(result.table) + 1:-1]
    assert objects == [f"{i + 1}\t{weights[i]}\t{profits[i]}" for i in result.items]


def test_subsets_output(monkeypatch, capsys):
    values, target = [1, 2, 5, 6, 8], 9
    code, out, _ = run(monkeypatch, capsys, ["subsets"], "5\n1 2 5 6 8\n9")
    subsets = list(subset_sums(values, target))
    assert code == 0
    assert len(out) == len(subsets)
    assert out[0] == "Subset 1:" + "".join(f"{v}\t" for v in subsets[0])


def test_subsets_no_solution(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["subsets"], "2\n5 6\n100")
    assert out == ["No solution"]


def test_queens_without_solution(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["queens"], "2")
    assert code == 0
    assert out == ["No solutions possible!!"]


def test_queens_counts_solutions(monkeypatch, capsys):
    code, out, _ = run(monkeypatch, capsys, ["queens"], "4")
    headers = [line for line in out if line.startswith("Solution")]
    assert len(headers) == len(list(n_queens(4)))


def test_bfs_connected(monkeypatch, capsys):
    matrix = [[0, 1, 0], [1, 0, 1], [0, 1, 0]]
    code, out, _ = run(monkeypatch, capsys, ["bfs"], matrix_text(matrix))
    assert out[-1] == "Graph is Connected"


def test_bfs_disconnected(monkeypatch, capsys):
    matrix = [[0, 1, 0, 0], [1, 0, 0, 0], [0, 0, 0, 1], [0, 0, 1, 0]]
    code, out, _ = run(monkeypatch, capsys, ["bfs"], matrix_text(matrix))
    count = len(bfs_components(matrix))
    assert out[-1] == f"Graph is NOT Connected with {count} Components"


def test_dfs_disconnected_report(monkeypatch, capsys):
    matrix = [[0, 1, 0], [0, 0, 0], [0, 0, 0]]
    code, out, _ = run(monkeypatch, capsys, ["dfs"], matrix_text(matrix))
    assert out[0] == "Pop order:"
    assert "The graph is disconnected" in out
    assert out[-1].startswith("Topological sort : ")
    order = [int(v) for v in out[-1].split(":")[1].split()]
    assert order.index(0) < order.index(1)


def test_floyd_output(monkeypatch, capsys):
    matrix = [[0, 3, 999], [999, 0, 1], [2, 999, 0]]
    code, out, _ = run(monkeypatch, capsys, ["floyd"], matrix_text(matrix))
    assert out[0] == "All pair shortest path is"
    assert out[1:] == [" ".join(map(str, row)) for row in floyd(matrix)]


def test_prim_output(monkeypatch, capsys):
    cost = [[0, 2, 6], [2, 0, 3], [6, 3, 0]]
    code, out, _ = run(monkeypatch, capsys, ["prim"], matrix_text(cost))
    edges = prim(cost)
    assert code == 0
    assert out[1] == f"1 Edge({edges[0].u + 1},{edges[0].v + 1}) = {edges[0].weight}"
    assert out[-1] == f"Cost of constructing MST is {sum(e.weight for e in edges)}"


def test_dijkstra_output(monkeypatch, capsys):
    cost = [[0, 4, 1], [0, 0, 0], [0, 2, 0]]
    code, out, _ = run(monkeypatch, capsys, ["dijkstra"], matrix_text(cost) + "\n0")
    result = dijkstra(cost, 0)
    assert out[0] == "Shortest path from 0 is"
    assert out[1] == f"Shortest Distance of vertex 1={result.distances[1]}"
    assert out[2] == "Path=" + "<-".join(map(str, reversed(result.path(1))))


def test_truncated_input_is_an_error(monkeypatch, capsys):
    code, out, err = run(monkeypatch, capsys, ["heapsort"], "3\n1 2")
    assert code == 1
    assert "unexpected end of input" in err


def test_missing_command_exits():
    with pytest.raises(SystemExit):
        main([])