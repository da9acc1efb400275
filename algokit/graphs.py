"""Graph algorithms over adjacency lists, adjacency matrices and grids."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Iterable, Sequence

from .structures import DisjointSet


class CycleError(ValueError):
    """Raised when a topological order is asked of a graph that has a cycle."""


class NegativeCycleError(ValueError):
    """Raised when shortest paths are asked of a graph with a negative cycle."""


def _check_vertex(count: int, vertex: int) -> None:
    if not 0 <= vertex < count:
        raise IndexError(f"vertex {vertex} out of range 0..{count - 1}")


def bfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in breadth-first order."""
    _check_vertex(len(adjacency), start)
    visited = [False] * len(adjacency)
    visited[start] = True
    order: list[int] = []
    queue = deque([start])
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in adjacency[node]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append(neighbor)
    return order


def dfs(adjacency: Sequence[Sequence[int]], start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in depth-first (preorder) order."""
    _check_vertex(len(adjacency), start)
    visited = [False] * len(adjacency)
    visited[start] = True
    order = [start]
    stack = [iter(adjacency[start])]
    while stack:
        for neighbor in stack[-1]:
            if not visited[neighbor]:
                visited[neighbor] = True
                order.append(neighbor)
                stack.append(iter(adjacency[neighbor]))
                break
        else:
            stack.pop()
    return order


def dijkstra(
    adjacency: Sequence[Iterable[tuple[int, float]]], start: int
) -> list[float]:
    """Return shortest distances from ``start``; unreachable vertices get ``math.inf``.

    ``adjacency[u]`` holds ``(neighbor, weight)`` pairs with non-negative weights.
    """
    _check_vertex(len(adjacency), start)
    dist: list[float] = [math.inf] * len(adjacency)
    dist[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for neighbor, weight in adjacency[node]:
            candidate = d + weight
            if candidate < dist[neighbor]:
                dist[neighbor] = candidate
                heapq.heappush(heap, (candidate, neighbor))
    return dist


def topological_order(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Return a topological order of a directed graph by Kahn's algorithm.

    Raises CycleError if the graph is not acyclic.
    """
    n = len(adjacency)
    indegree = [0] * n
    for targets in adjacency:
        for v in targets:
            indegree[v] += 1
    queue = deque(v for v in range(n) if indegree[v] == 0)
    order: list[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adjacency[u]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    if len(order) != n:
        raise CycleError("graph contains a cycle")
    return order


def kruskal_mst(
    vertex_count: int, edges: Iterable[tuple[int, int, float]]
) -> tuple[float, list[tuple[int, int, float]]]:
    """Return ``(total_weight, edges)`` of a minimum spanning tree (or forest)."""
    components = DisjointSet(vertex_count)
    total: float = 0
    chosen: list[tuple[int, int, float]] = []
    for u, v, w in sorted(edges, key=lambda edge: edge[2]):
        if components.union(u, v):
            total += w
            chosen.append((u, v, w))
    return total, chosen


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return all-pairs shortest distances from an adjacency matrix.

    Off-diagonal zeros and ``math.inf`` mean "no edge"; missing paths stay ``math.inf``.
    Raises NegativeCycleError if some vertex reaches itself at negative cost.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    dist = [
        [math.inf if i != j and value == 0 else value for j, value in enumerate(row)]
        for i, row in enumerate(matrix)
    ]
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == math.inf:
                continue
            for j, cost in enumerate(through):
                if via + cost < row[j]:
                    row[j] = via + cost
    if any(dist[i][i] < 0 for i in range(n)):
        raise NegativeCycleError("graph contains a negative weight cycle")
    return dist


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Count connected components of a graph given as a 0/1 adjacency matrix."""
    n = len(is_connected)
    visited = [False] * n
    provinces = 0
    for root in range(n):
        if visited[root]:
            continue
        provinces += 1
        visited[root] = True
        stack = [root]
        while stack:
            node = stack.pop()
            for other, linked in enumerate(is_connected[node]):
                if linked == 1 and not visited[other]:
                    visited[other] = True
                    stack.append(other)
    return provinces


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, color: int
) -> list[list[int]]:
    """Return a copy of ``image`` with the 4-connected region at ``(row, col)`` recoloured."""
    result = [list(line) for line in image]
    height = len(result)
    if not 0 <= row < height or not 0 <= col < len(result[row]):
        raise IndexError(f"pixel ({row}, {col}) out of range")
    old = result[row][col]
    if old == color:
        return result
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        if not 0 <= r < height or not 0 <= c < len(result[r]):
            continue
        if result[r][c] != old:
            continue
        result[r][c] = color
        stack.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
    return result