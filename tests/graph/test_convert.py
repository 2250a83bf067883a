"""Tests for mazegraph.graph.convert NetworkX conversion utilities."""

import networkx as nx
import pytest

from mazegraph.graph.base import DirectedGraph, UndirectedGraph, WeightedEdge
from mazegraph.graph.convert import from_networkx, to_networkx


class TestFromNetworkx:
    def test_undirected_graph(self):
        g = nx.Graph()
        g.add_edge("A", "B", weight=2)
        g.add_node("C")
        graph = from_networkx(g)
        assert isinstance(graph, UndirectedGraph)
        assert graph.all_vertices() == {"A", "B", "C"}
        assert graph.all_edges() == {WeightedEdge("A", "B", 2.0)}

    def test_directed_graph(self):
        g = nx.DiGraph()
        g.add_edge("A", "B", weight=2)
        graph = from_networkx(g)
        assert isinstance(graph, DirectedGraph)
        assert not isinstance(graph, UndirectedGraph)
        assert graph.outgoing_edges_from("B") == []

    def test_default_and_custom_weight_attribute(self):
        g = nx.DiGraph()
        g.add_edge("A", "B")
        g.add_edge("B", "C", cost=4)
        graph = from_networkx(g, weight="cost", default_weight=7.0)
        weights = {(e.src, e.dst): e.weight for e in graph.all_edges()}
        assert weights == {("A", "B"): 7.0, ("B", "C"): 4.0}

    def test_multigraph_keeps_parallel_edges(self):
        g = nx.MultiGraph()
        g.add_edge("A", "B", weight=1)
        g.add_edge("A", "B", weight=3)
        graph = from_networkx(g)
        assert sorted(e.weight for e in graph.all_edges()) == [1.0, 3.0]
        assert {e.data for e in graph.all_edges()} == {0, 1}

    def test_negative_weight_rejected(self):
        g = nx.Graph()
        g.add_edge("A", "B", weight=-1)
        with pytest.raises(ValueError, match="negative weight"):
            from_networkx(g)


class TestToNetworkx:
    def test_round_trip_undirected(self):
        graph = UndirectedGraph(
            [WeightedEdge("A", "B", 1, "x"), WeightedEdge("B", "C", 2)],
            vertices=["D"],
        )
        g = to_networkx(graph)
        assert not g.is_directed()
        assert set(g.nodes) == {"A", "B", "C", "D"}
        assert g.edges["A", "B"]["weight"] == 1
        assert g.edges["A", "B"]["data"] == "x"

    def test_directed(self):
        g = to_networkx(DirectedGraph([WeightedEdge("A", "B", 1)]))
        assert g.is_directed()
        assert g.has_edge("A", "B")
        assert not g.has_edge("B", "A")

    def test_parallel_edges_collapse_to_lightest(self):
        graph = DirectedGraph(
            [WeightedEdge("A", "B", 5, "heavy"), WeightedEdge("A", "B", 2, "light")]
        )
        g = to_networkx(graph)
        assert g.edges["A", "B"]["weight"] == 2
        assert g.edges["A", "B"]["data"] == "light"
