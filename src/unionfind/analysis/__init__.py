"""Analysis modules built on the disjoint-set forest.

This package provides:
- Union-Find data structure with union by rank and path compression
- Island counting on text charts
- Kruskal's minimum spanning tree
- Connected component detection over pair tables
"""

from unionfind.analysis.component_detector import Component, ComponentDetector
from unionfind.analysis.islands import count_islands, find_islands
from unionfind.analysis.kruskal import Edge, minimum_spanning_tree, total_weight
from unionfind.analysis.union_find import Node, UnionFind

__all__ = [
    "UnionFind",
    "Node",
    "count_islands",
    "find_islands",
    "Edge",
    "minimum_spanning_tree",
    "total_weight",
    "ComponentDetector",
    "Component",
]
