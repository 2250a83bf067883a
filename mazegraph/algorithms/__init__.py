"""Core graph algorithms and the data structures that drive them."""

from mazegraph.algorithms.base import Cost
from mazegraph.algorithms.disjoint_sets import UnionBySizeCompressingDisjointSets
from mazegraph.algorithms.mst import kruskal_mst
from mazegraph.algorithms.priority_queue import ArrayHeapMinPQ, PriorityNode
from mazegraph.algorithms.spf import (
    extract_shortest_path,
    find_shortest_path,
    shortest_path_tree,
)
from mazegraph.algorithms.types import MinimumSpanningTree, ShortestPath

__all__ = [
    "ArrayHeapMinPQ",
    "Cost",
    "MinimumSpanningTree",
    "PriorityNode",
    "ShortestPath",
    "UnionBySizeCompressingDisjointSets",
    "extract_shortest_path",
    "find_shortest_path",
    "kruskal_mst",
    "shortest_path_tree",
]
