"""Kruskal's minimum spanning tree built on UnionFind."""

from collections.abc import Hashable, Iterable
from dataclasses import dataclass
import heapq

import pandas as pd

from unionfind.analysis.union_find import UnionFind


@dataclass(frozen=True)
class Edge:
    """Weighted undirected edge between two vertices."""

    u: Hashable
    v: Hashable
    weight: float

    def __str__(self) -> str:
        return f"({self.u}, {self.v})"


def minimum_spanning_tree(edges: Iterable[Edge]) -> list[Edge]:
    """Compute a minimum spanning tree (forest) with Kruskal's algorithm.

    Edges are popped from a binary heap in ascending weight order; ties keep
    input order. Edges with a None endpoint are ignored. An edge is accepted
    only if its endpoints are not connected yet.

    Args:
        edges: Weighted edges of an undirected graph.

    Returns:
        Accepted edges in acceptance order. For a disconnected graph this is
        a minimum spanning forest.
    """
    uf: UnionFind[Hashable] = UnionFind()
    heap: list[tuple[float, int, Edge]] = []

    for index, edge in enumerate(edges):
        # None is never registered, so such an edge could never merge anything
        if edge.u is None or edge.v is None:
            continue
        heapq.heappush(heap, (edge.weight, index, edge))
        uf.make_set(edge.u, edge.v)

    tree: list[Edge] = []
    while heap:
        _, _, edge = heapq.heappop(heap)
        if not uf.connected(edge.u, edge.v):
            uf.union(edge.u, edge.v)
            tree.append(edge)

    return tree


def total_weight(edges: Iterable[Edge]) -> float:
    """Sum of edge weights."""
    return sum(edge.weight for edge in edges)


def edges_from_frame(
    df: pd.DataFrame,
    source_col: str = "source",
    target_col: str = "target",
    weight_col: str = "weight",
) -> list[Edge]:
    """Build edges from a DataFrame, one edge per row.

    Args:
        df: Edge list with source, target and weight columns
        source_col: Column holding the first endpoint
        target_col: Column holding the second endpoint
        weight_col: Column holding the numeric weight

    Returns:
        List of edges in row order
    """
    # Column-wise tolist() keeps each column's own dtype (iterrows would upcast ids to float)
    return [
        Edge(u=u, v=v, weight=weight)
        for u, v, weight in zip(
            df[source_col].tolist(), df[target_col].tolist(), df[weight_col].tolist()
        )
    ]
