[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphalgos"
version = "0.1.0"
description = "Weighted graphs held as adjacency lists, with BFS, DFS, Dijkstra, Prim and Kruskal"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "bfs", "dfs", "dijkstra", "prim", "kruskal", "spanning-tree", "shortest-path"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphalgos-demo = "graphalgos.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["graphalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
