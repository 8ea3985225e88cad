"""Graph algorithms over adjacency and cost matrices."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

Matrix = Sequence[Sequence[float]]


def _order(matrix: Matrix) -> int:
    """Return the number of vertices, insisting on a square matrix."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    return n


def bfs_components(matrix: Matrix) -> list[list[int]]:
    """Return the connected components in breadth-first visiting order.

    An entry of 1 marks an edge. Each component starts with the lowest
    vertex not reached by an earlier one.
    """
    n = _order(matrix)
    visited = [False] * n
    components = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        order = [start]
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour, edge in enumerate(matrix[node]):
                if edge == 1 and not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    queue.append(neighbour)
        components.append(order)
    return components


def dfs_pop_order(matrix: Matrix) -> list[list[int]]:
    """Return, for each depth-first tree, the vertices in the order they finish."""
    n = _order(matrix)
    visited = [False] * n
    trees = []
    for start in range(n):
        if visited[start]:
            continue
        visited[start] = True
        finished = []
        stack = [(start, iter(range(n)))]
        while stack:
            node, candidates = stack[-1]
            for neighbour in candidates:
                if matrix[node][neighbour] == 1 and not visited[neighbour]:
                    visited[neighbour] = True
                    stack.append((neighbour, iter(range(n))))
                    break
            else:
                stack.pop()
                finished.append(node)
        trees.append(finished)
    return trees


def topological_sort(matrix: Matrix) -> list[int]:
    """Order the vertices by decreasing depth-first finishing time.

    For a directed acyclic graph every edge points forward in the result.
    """
    trees = dfs_pop_order(matrix)
    return [vertex for tree in reversed(trees) for vertex in reversed(tree)]


def floyd(matrix: Matrix) -> list[list[float]]:
    """Return the all-pairs shortest path lengths of a weighted matrix."""
    n = _order(matrix)
    dist = [list(row) for row in matrix]
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            for j, cost in enumerate(through):
                if via + cost < row[j]:
                    row[j] = via + cost
    return dist


@dataclass(frozen=True)
class MstEdge:
    """An edge chosen for the minimum spanning tree."""

    u: int
    v: int
    weight: float


def prim(cost: Matrix) -> list[MstEdge]:
    """Return the minimum spanning tree edges grown from vertex 0.

    A weight of 0 means there is no edge. Raises ValueError if the graph
    is not connected.
    """
    n = _order(cost)
    if n == 0:
        return []
    in_tree = [False] * n
    in_tree[0] = True
    edges = []
    while len(edges) < n - 1:
        candidates = (
            (weight, u, v)
            for u, row in enumerate(cost)
            if in_tree[u]
            for v, weight in enumerate(row)
            if not in_tree[v] and weight
        )
        best = min(candidates, key=lambda candidate: candidate[0], default=None)
        if best is None:
            raise ValueError("graph is not connected")
        weight, u, v = best
        in_tree[v] = True
        edges.append(MstEdge(u, v, weight))
    return edges


@dataclass(frozen=True)
class ShortestPaths:
    """Single-source distances with the predecessor of each vertex on its path.

    Unreachable vertices have distance infinity and no predecessor.
    """

    source: int
    distances: list[float]
    predecessors: list[int | None]

    def path(self, target: int) -> list[int]:
        """Return the vertices from the source to target."""
        if not 0 <= target < len(self.distances):
            raise ValueError(f"vertex {target} out of range")
        if math.isinf(self.distances[target]):
            raise ValueError(f"vertex {target} is unreachable")
        nodes = [target]
        while nodes[-1] != self.source:
            nodes.append(self.predecessors[nodes[-1]])
        return nodes[::-1]


def dijkstra(cost: Matrix, source: int) -> ShortestPaths:
    """Return shortest paths from source; a weight of 0 means there is no edge."""
    n = _order(cost)
    if not 0 <= source < n:
        raise ValueError(f"source {source} out of range")

    def weight(u: int, v: int) -> float:
        return cost[u][v] or math.inf

    dist = [weight(source, v) for v in range(n)]
    pred: list[int | None] = [None if math.isinf(d) else source for d in dist]
    dist[source] = 0
    pred[source] = None
    done = {source}
    while len(done) < n:
        nearest = min(
            (v for v in range(n) if v not in done and not math.isinf(dist[v])),
            key=dist.__getitem__,
            default=None,
        )
        if nearest is None:
            break
        done.add(nearest)
        for v in range(n):
            if v not in done and dist[nearest] + weight(nearest, v) < dist[v]:
                dist[v] = dist[nearest] + weight(nearest, v)
                pred[v] = nearest
    return ShortestPaths(source, dist, pred)