"""Weighted graph stored as adjacency lists."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class Neighbor:
    """An entry in an adjacency list: the vertex reached and the edge weight."""

    vertex: int
    weight: int = 1


class Graph:
    """A graph over vertices ``0 .. vertices - 1`` with weighted edges."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("Number of vertices cannot be negative")
        self._adjacency: list[list[Neighbor]] = [[] for _ in range(vertices)]

    def __repr__(self) -> str:
        return f"Graph(vertices={self.num_vertices})"

    @property
    def num_vertices(self) -> int:
        """The number of vertices in the graph."""
        return len(self._adjacency)

    def _check_vertex(self, *vertices: int) -> None:
        if any(not 0 <= v < self.num_vertices for v in vertices):
            raise ValueError("Vertex index out of bounds")

    def _check_new_edge(self, source: int, dest: int) -> None:
        self._check_vertex(source, dest)
        if source == dest:
            raise ValueError("Cannot add edge from vertex to itself")
        if self.has_edge(source, dest):
            raise ValueError("Edge already exists")

    def has_edge(self, source: int, dest: int) -> bool:
        """Return True if ``dest`` is in the adjacency list of ``source``."""
        self._check_vertex(source, dest)
        return any(n.vertex == dest for n in self._adjacency[source])

    def add_edge(self, source: int, dest: int, weight: int = 1) -> None:
        """Add an undirected edge, recorded in both adjacency lists."""
        self._check_new_edge(source, dest)
        self._adjacency[source].append(Neighbor(dest, weight))
        self._adjacency[dest].append(Neighbor(source, weight))

    def add_directed_edge(self, source: int, dest: int, weight: int = 1) -> None:
        """Add an edge recorded only in the adjacency list of ``source``."""
        self._check_new_edge(source, dest)
        self._adjacency[source].append(Neighbor(dest, weight))

    def _remove_from_list(self, vertex: int, neighbor: int) -> None:
        entries = self._adjacency[vertex]
        for position, entry in enumerate(entries):
            if entry.vertex == neighbor:
                del entries[position]
                return

    def remove_edge(self, source: int, dest: int) -> None:
        """Remove the edge between ``source`` and ``dest`` in both directions."""
        self._check_vertex(source, dest)
        if not self.has_edge(source, dest):
            raise ValueError("Edge does not exist")
        self._remove_from_list(source, dest)
        self._remove_from_list(dest, source)

    def neighbors(self, vertex: int) -> tuple[Neighbor, ...]:
        """The adjacency list of ``vertex`` in insertion order."""
        self._check_vertex(vertex)
        return tuple(self._adjacency[vertex])

    def neighbor_count(self, vertex: int) -> int:
        """The number of entries in the adjacency list of ``vertex``."""
        self._check_vertex(vertex)
        return len(self._adjacency[vertex])

    def format(self) -> str:
        """Render the adjacency lists, one line per vertex."""
        lines = []
        for index, entries in enumerate(self._adjacency):
            items = "".join(f"({n.vertex}, w={n.weight}) " for n in entries)
            lines.append(f"Vertex {index}: {items}\n")
        return "".join(lines)

    def print_graph(self, file: TextIO | None = None) -> None:
        """Write the adjacency lists to ``file`` (standard output by default)."""
        print(self.format(), end="", file=file if file is not None else sys.stdout)