"""Weighted adjacency-list graphs with traversal, shortest-path and spanning-tree algorithms."""

__version__ = "0.1.0"
__all__ = ["graph", "algorithms", "demo"]