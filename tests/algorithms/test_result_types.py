import math

import pytest

from mazegraph.algorithms.types import MinimumSpanningTree, ShortestPath
from mazegraph.graph.base import WeightedEdge


def test_mst_success_and_failure_are_distinct():
    empty = MinimumSpanningTree.success()
    failed = MinimumSpanningTree.failure()
    assert empty.exists and empty.edges == ()
    assert not failed.exists
    assert empty != failed
    assert empty.total_weight == 0
    assert failed.total_weight == math.inf


def test_mst_edges_are_frozen_tuple():
    edges = [WeightedEdge("A", "B", 1.5), WeightedEdge("B", "C", 2.0)]
    tree = MinimumSpanningTree.success(edges)
    edges.append(WeightedEdge("C", "D", 9.0))
    assert len(tree.edges) == 2
    assert tree.total_weight == 3.5


def test_shortest_path_vertices():
    path = ShortestPath.success(
        [WeightedEdge("A", "B", 1), WeightedEdge("B", "C", 2)]
    )
    assert path.vertices == ["A", "B", "C"]
    assert path.total_weight == 3


def test_single_vertex_path():
    path = ShortestPath.single_vertex("A")
    assert path.exists
    assert path.vertices == ["A"]
    assert path.total_weight == 0


def test_success_requires_edges():
    with pytest.raises(ValueError):
        ShortestPath.success([])


def test_failure_has_no_vertices():
    path = ShortestPath.failure()
    assert not path.exists
    assert path.total_weight == math.inf
    with pytest.raises(ValueError, match="No path"):
        path.vertices
