"""Command that runs every algorithm on a small sample graph."""

from __future__ import annotations

from collections.abc import Sequence

from graphalgos import algorithms
from graphalgos.graph import Graph

_SEPARATOR = "\n" + "-" * 50 + "\n\n"


def build_sample_graph() -> Graph:
    """The six-vertex weighted graph used by the demonstration."""
    g = Graph(6)
    for source, dest, weight in [
        (0, 1, 4),
        (0, 2, 3),
        (1, 2, 1),
        (1, 3, 2),
        (2, 3, 4),
        (3, 4, 2),
        (4, 5, 6),
    ]:
        g.add_edge(source, dest, weight)
    return g


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample graph and the result of each algorithm."""
    g = build_sample_graph()
    sections = [
        ("Original Graph:", g),
        ("BFS Tree starting from vertex 0:", algorithms.bfs(g, 0)),
        ("DFS Tree starting from vertex 0:", algorithms.dfs(g, 0)),
        ("Shortest Paths Tree from vertex 0:", algorithms.dijkstra(g, 0)),
        ("Minimum Spanning Tree (Prim's):", algorithms.prim(g)),
        ("Minimum Spanning Tree (Kruskal's):", algorithms.kruskal(g)),
    ]
    for position, (title, result) in enumerate(sections):
        if position:
            print(_SEPARATOR, end="")
        print(title)
        result.print_graph()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())