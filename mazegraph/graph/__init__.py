from mazegraph.graph.base import (
    BaseEdge,
    DirectedGraph,
    Graph,
    KruskalGraph,
    UndirectedGraph,
    VertexID,
    WeightedEdge,
)
from mazegraph.graph.convert import from_networkx, to_networkx

__all__ = [
    "BaseEdge",
    "DirectedGraph",
    "Graph",
    "KruskalGraph",
    "UndirectedGraph",
    "VertexID",
    "WeightedEdge",
    "from_networkx",
    "to_networkx",
]
