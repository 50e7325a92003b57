# graphalgos

`graphalgos` provides a small weighted graph type and the classic traversal,
shortest-path and spanning-tree algorithms that work on it. Vertices are
numbered from `0` to `n - 1`. Edge weights are integers. Each algorithm returns
a new `Graph` that holds the resulting tree. The package has no dependencies
outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Building a graph

```python
from graphalgos.graph import Graph

g = Graph(4)
g.add_edge(0, 1, 4)           # undirected: stored in both adjacency lists
g.add_edge(1, 2, 1)
g.add_directed_edge(2, 3, 5)  # stored only in the list of vertex 2

g.num_vertices                # 4 (a property)
g.has_edge(1, 0)              # True
g.neighbor_count(1)           # 2
[(n.vertex, n.weight) for n in g.neighbors(1)]   # [(0, 4), (2, 1)]

g.remove_edge(0, 1)
print(g.format())
g.print_graph()               # writes the same text to stdout
```

The default weight of an edge is `1`. `neighbors` returns a tuple of
`Neighbor` entries (each with `vertex` and `weight`) in the order the edges
were added. `print_graph` takes an optional `file` to write to instead of
standard output. `format` gives one line per vertex, for example
`Vertex 1: (0, w=4) (2, w=1) `.

A `ValueError` is raised if a vertex is out of range, if an edge would join a
vertex to itself, if an edge is added that already exists, or if an edge is
removed that does not exist. `Graph` itself rejects a negative vertex count.

## Algorithms

```python
from graphalgos.algorithms import bfs, dfs, dijkstra, prim, kruskal

bfs(g, 0)        # breadth-first tree from vertex 0 (directed edges)
dfs(g, 0)        # depth-first tree from vertex 0 (directed edges)
dijkstra(g, 0)   # every edge that improved a distance from vertex 0 (directed)
prim(g)          # minimum spanning tree of the component of vertex 0 (undirected)
kruskal(g)       # minimum spanning forest (undirected)
```

`bfs`, `dfs` and `dijkstra` raise `ValueError` if the source vertex is out of
range. Vertices that cannot be reached from the source have no edges in the
result. `prim` on a graph with no vertices returns an empty graph.

`UnionFind` is the disjoint-set structure that `kruskal` uses. It supports
union by rank and path compression, and you can use it directly:

```python
from graphalgos.algorithms import UnionFind

uf = UnionFind(5)
uf.unite(0, 1)
uf.find(0) == uf.find(1)      # True
len(uf)                       # 5
```

`find` raises `IndexError` for an element outside the range `0 .. n - 1`.

## Demo

The demo builds a sample six-vertex graph. It prints the graph and then the
tree that each algorithm produces, with a line of dashes between sections:

```
graphalgos-demo
```

The same graph is available from Python through
`graphalgos.demo.build_sample_graph()`.