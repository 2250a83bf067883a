"""Shared graph fixtures for algorithm and maze tests."""

from __future__ import annotations

import pytest

from mazegraph.graph.base import DirectedGraph, UndirectedGraph, WeightedEdge


@pytest.fixture
def triangle():
    # Weight:
    #       [1]      [2]
    #    A──────B──────C
    #    │             │
    #    └─────[5]─────┘
    return UndirectedGraph(
        [
            WeightedEdge("A", "B", 1),
            WeightedEdge("B", "C", 2),
            WeightedEdge("A", "C", 5),
        ]
    )


@pytest.fixture
def isolated_c():
    #    [1]
    # A──────B     C
    return UndirectedGraph([WeightedEdge("A", "B", 1)], vertices=["A", "B", "C"])


@pytest.fixture
def diamond():
    # Weight:
    #        [1]       [5]
    #   S───────►A──────────►T
    #   │        │           ▲
    #   │[4]     │[1]        │[1]
    #   │        ▼           │
    #   └───────►B───────────┘
    return DirectedGraph(
        [
            WeightedEdge("S", "A", 1),
            WeightedEdge("S", "B", 4),
            WeightedEdge("A", "B", 1),
            WeightedEdge("A", "T", 5),
            WeightedEdge("B", "T", 1),
        ]
    )


@pytest.fixture
def diamond_undirected(diamond):
    return UndirectedGraph(diamond.all_edges())


@pytest.fixture
def unreachable_t():
    # T only has outgoing edges, so nothing reaches it from S.
    #        [1]
    #   S───────►A◄───────T
    #                [1]
    return DirectedGraph(
        [
            WeightedEdge("S", "A", 1),
            WeightedEdge("T", "A", 1),
        ]
    )
