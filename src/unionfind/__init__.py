"""Disjoint-set (union-find) forest and the algorithms built on it.

This package provides:
- UnionFind (unionfind.analysis.union_find) - the disjoint-set forest
- Island counting, Kruskal's MST and component detection (unionfind.analysis)
- CLI (unionfind.cli) - the ``unionfind`` command
"""

__version__ = "0.1.0"

from unionfind.analysis.union_find import Node, UnionFind

__all__ = ["__version__", "Node", "UnionFind"]
