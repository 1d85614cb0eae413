"""Graph traversals and Dijkstra's shortest paths."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections import deque
from collections.abc import Iterable, Sequence

__all__ = ["Graph", "dijkstra_matrix", "dijkstra", "main"]


class Graph:
    """An undirected graph on vertices 0..n-1 kept as adjacency lists.

    Neighbours are visited newest edge first.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must be non-negative")
        self.num_vertices = num_vertices
        self._adjacency: list[list[int]] = [[] for _ in range(num_vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise IndexError(f"no vertex {vertex}")

    def add_edge(self, src: int, dest: int) -> None:
        """Connect src and dest in both directions."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].insert(0, dest)
        self._adjacency[dest].insert(0, src)

    def neighbours(self, vertex: int) -> list[int]:
        """Neighbours of vertex in visiting order."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Vertices in breadth-first order from start."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for adjacent in self._adjacency[vertex]:
                if adjacent not in visited:
                    visited.add(adjacent)
                    pending.append(adjacent)
        return order

    def dfs(self, start: int) -> list[int]:
        """Vertices in depth-first order from start."""
        self._check(start)
        visited = {start}
        order = [start]
        stack = [iter(self._adjacency[start])]
        while stack:
            for adjacent in stack[-1]:
                if adjacent not in visited:
                    visited.add(adjacent)
                    order.append(adjacent)
                    stack.append(iter(self._adjacency[adjacent]))
                    break
            else:
                stack.pop()
        return order


def dijkstra_matrix(graph: Sequence[Sequence[int]], source: int) -> list[float]:
    """Shortest distances from source in a graph given as an adjacency matrix.

    A zero entry means no edge. Unreachable vertices get ``math.inf``.
    """
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= source < n:
        raise IndexError(f"no vertex {source}")

    dist: list[float] = [math.inf] * n
    dist[source] = 0
    done = [False] * n
    for _ in range(n - 1):
        # Ties go to the highest-numbered vertex.
        u = min((v for v in range(n) if not done[v]), key=lambda v: (dist[v], -v))
        done[u] = True
        if dist[u] == math.inf:
            continue
        for v, weight in enumerate(graph[u]):
            if not done[v] and weight and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def dijkstra(
    num_nodes: int, edges: Iterable[tuple[int, int, int]], start: int
) -> dict[int, float]:
    """Shortest distances from start over undirected weighted edges.

    Nodes are numbered 1..num_nodes (0 is also accepted as a node). The
    result maps each node 1..num_nodes to its distance, ``math.inf`` when
    unreachable.
    """
    if num_nodes < 0:
        raise ValueError("number of nodes must be non-negative")

    def check(node: int) -> None:
        if not 0 <= node <= num_nodes:
            raise ValueError(f"node {node} out of range")

    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(num_nodes + 1)]
    for u, v, weight in edges:
        check(u)
        check(v)
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))
    check(start)

    dist: list[float] = [math.inf] * (num_nodes + 1)
    dist[start] = 0
    heap: list[tuple[float, int]] = [(0, start)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, weight in adjacency[u]:
            candidate = dist[u] + weight
            if candidate < dist[v]:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return {node: dist[node] for node in range(1, num_nodes + 1)}


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph and a start node, then print each node's distance.

    Input is whitespace separated: node count, edge count, one
    ``u v weight`` triple per edge, then the start node.
    """
    parser = argparse.ArgumentParser(prog="algodeck-dijkstra")
    parser.add_argument("input", nargs="?", help="file to read (default: stdin)")
    args = parser.parse_args(argv)

    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()

    try:
        numbers = iter([int(token) for token in text.split()])
        num_nodes, num_edges = next(numbers), next(numbers)
        edges = [(next(numbers), next(numbers), next(numbers)) for _ in range(num_edges)]
        start = next(numbers)
        distances = dijkstra(num_nodes, edges, start)
    except (ValueError, StopIteration) as error:
        parser.error(f"malformed input: {error or 'not enough numbers'}")

    for node, distance in distances.items():
        shown = "Infinity" if distance == math.inf else str(distance)
        print(f"Distance from {start} to {node}: {shown}")
    return 0