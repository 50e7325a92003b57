"""Traversals, shortest paths and spanning trees over :class:`Graph`."""

from __future__ import annotations

import heapq
import itertools
import math
from collections import deque

from graphalgos.graph import Graph


class UnionFind:
    """Disjoint sets with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("Size cannot be negative")
        self._parent = list(range(n))
        self._rank = [0] * n

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Return the representative of the set containing ``x``."""
        if not 0 <= x < len(self._parent):
            raise IndexError("Element out of range")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> None:
        """Merge the sets containing ``x`` and ``y``."""
        px, py = self.find(x), self.find(y)
        if px == py:
            return
        if self._rank[px] < self._rank[py]:
            self._parent[px] = py
        elif self._rank[px] > self._rank[py]:
            self._parent[py] = px
        else:
            self._parent[py] = px
            self._rank[px] += 1


def _require_vertex(graph: Graph, vertex: int) -> None:
    if not 0 <= vertex < graph.num_vertices:
        raise ValueError("Vertex index out of bounds")


def bfs(graph: Graph, source: int) -> Graph:
    """Breadth-first tree from ``source`` as a directed graph."""
    _require_vertex(graph, source)
    result = Graph(graph.num_vertices)
    visited = {source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for neighbor in graph.neighbors(u):
            if neighbor.vertex not in visited:
                visited.add(neighbor.vertex)
                result.add_directed_edge(u, neighbor.vertex, neighbor.weight)
                queue.append(neighbor.vertex)
    return result


def dfs(graph: Graph, source: int) -> Graph:
    """Depth-first tree from ``source`` as a directed graph."""
    _require_vertex(graph, source)
    result = Graph(graph.num_vertices)
    visited = {source}
    stack = [(source, iter(graph.neighbors(source)))]
    while stack:
        u, pending = stack[-1]
        for neighbor in pending:
            if neighbor.vertex not in visited:
                visited.add(neighbor.vertex)
                result.add_directed_edge(u, neighbor.vertex, neighbor.weight)
                stack.append((neighbor.vertex, iter(graph.neighbors(neighbor.vertex))))
                break
        else:
            stack.pop()
    return result


def dijkstra(graph: Graph, source: int) -> Graph:
    """Directed graph of every edge that improved a distance from ``source``."""
    _require_vertex(graph, source)
    n = graph.num_vertices
    result = Graph(n)
    dist = [math.inf] * n
    dist[source] = 0
    visited = [False] * n
    order = itertools.count()
    heap = [(0, next(order), source)]
    while heap:
        _, _, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        for neighbor in graph.neighbors(u):
            v = neighbor.vertex
            candidate = dist[u] + neighbor.weight
            if candidate < dist[v]:
                dist[v] = candidate
                result.add_directed_edge(u, v, neighbor.weight)
                heapq.heappush(heap, (candidate, next(order), v))
    return result


def prim(graph: Graph) -> Graph:
    """Minimum spanning tree of the component of vertex 0."""
    n = graph.num_vertices
    result = Graph(n)
    if n == 0:
        return result
    key = [math.inf] * n
    parent: list[int | None] = [None] * n
    visited = [False] * n
    key[0] = 0
    order = itertools.count()
    heap = [(0, next(order), 0)]
    while heap:
        _, _, u = heapq.heappop(heap)
        if visited[u]:
            continue
        visited[u] = True
        if parent[u] is not None:
            result.add_edge(parent[u], u, key[u])
        for neighbor in graph.neighbors(u):
            v = neighbor.vertex
            if not visited[v] and neighbor.weight < key[v]:
                parent[v] = u
                key[v] = neighbor.weight
                heapq.heappush(heap, (key[v], next(order), v))
    return result


def kruskal(graph: Graph) -> Graph:
    """Minimum spanning forest built by merging the lightest edges first."""
    n = graph.num_vertices
    result = Graph(n)
    sets = UnionFind(n)
    edges = [
        (u, neighbor.vertex, neighbor.weight)
        for u in range(n)
        for neighbor in graph.neighbors(u)
        if u < neighbor.vertex
    ]
    edges.sort(key=lambda edge: edge[2])
    for u, v, weight in edges:
        if sets.find(u) != sets.find(v):
            result.add_edge(u, v, weight)
            sets.unite(u, v)
    return result