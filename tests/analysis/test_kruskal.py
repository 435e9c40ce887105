"""Tests for Kruskal's minimum spanning tree."""

import pandas as pd

from unionfind.analysis.kruskal import (
    Edge,
    edges_from_frame,
    minimum_spanning_tree,
    total_weight,
)

#  (1)----4----(2)
#   | \         |
#   1     7     8
#   |         \ |
#  (3)----5----(4)
#   | \         |
#   4     3     6
#   |         \ |
#  (5)----2----(6)
GRAPH = [
    Edge(1, 2, 4),
    Edge(1, 3, 1),
    Edge(2, 4, 8),
    Edge(1, 4, 7),
    Edge(3, 5, 4),
    Edge(3, 4, 5),
    Edge(4, 6, 6),
    Edge(3, 6, 3),
    Edge(5, 6, 2),
]


class TestEdge:
    """Test Edge dataclass."""

    def test_str(self):
        assert str(Edge(1, 3, 1)) == "(1, 3)"

    def test_hashable(self):
        assert len({Edge("a", "b", 1), Edge("a", "b", 1)}) == 1


class TestMinimumSpanningTree:
    """Test minimum_spanning_tree()."""

    def test_six_vertex_graph(self):
        tree = minimum_spanning_tree(GRAPH)
        assert [str(e) for e in tree] == ["(1, 3)", "(5, 6)", "(3, 6)", "(1, 2)", "(3, 4)"]
        assert total_weight(tree) == 15

    def test_total_weight_independent_of_order(self):
        for shift in range(len(GRAPH)):
            edges = GRAPH[shift:] + GRAPH[:shift]
            tree = minimum_spanning_tree(reversed(edges))
            assert len(tree) == 5
            assert total_weight(tree) == 15

    def test_spans_all_vertices(self):
        tree = minimum_spanning_tree(GRAPH)
        vertices = {v for e in tree for v in (e.u, e.v)}
        assert vertices == {1, 2, 3, 4, 5, 6}

    def test_empty(self):
        assert minimum_spanning_tree([]) == []
        assert total_weight([]) == 0

    def test_disconnected_graph_gives_forest(self):
        edges = [Edge("a", "b", 1), Edge("c", "d", 2), Edge("a", "b", 5)]
        tree = minimum_spanning_tree(edges)
        assert tree == [Edge("a", "b", 1), Edge("c", "d", 2)]

    def test_self_loop_rejected(self):
        assert minimum_spanning_tree([Edge("x", "x", 0)]) == []

    def test_none_endpoint_ignored(self):
        """Test edges touching None never enter the tree."""
        edges = [Edge(None, "a", 1), Edge(None, "a", 2), Edge("a", "b", 3), Edge("b", None, 0)]
        tree = minimum_spanning_tree(edges)
        assert tree == [Edge("a", "b", 3)]
        assert total_weight(tree) == 3


class TestEdgesFromFrame:
    """Test edges_from_frame()."""

    def test_keeps_integer_vertices(self):
        df = pd.DataFrame({"source": [1, 2], "target": [2, 3], "weight": [0.5, 1.5]})
        edges = edges_from_frame(df)
        assert edges == [Edge(1, 2, 0.5), Edge(2, 3, 1.5)]
        assert isinstance(edges[0].u, int)

    def test_custom_columns(self):
        df = pd.DataFrame({"from": ["a"], "to": ["b"], "cost": [3]})
        edges = edges_from_frame(df, source_col="from", target_col="to", weight_col="cost")
        assert edges == [Edge("a", "b", 3)]
