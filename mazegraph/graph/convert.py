"""Conversion utilities between mazegraph graphs and NetworkX graphs.

`from_networkx` builds a `DirectedGraph` or `UndirectedGraph` view that the
algorithms can consume. For multigraphs the parallel-edge key is stored in
each edge's ``data`` so parallel edges stay distinct. `to_networkx` converts
back, keeping weights and payloads as edge attributes.
"""

from typing import Union

import networkx as nx

from mazegraph.graph.base import DirectedGraph, UndirectedGraph, WeightedEdge


def from_networkx(
    nx_graph: nx.Graph,
    weight: str = "weight",
    default_weight: float = 1.0,
) -> Union[DirectedGraph, UndirectedGraph]:
    """Convert a NetworkX graph to a mazegraph graph.

    Args:
        nx_graph: Any NetworkX graph (directed or not, multi or not).
        weight: Edge attribute holding the weight.
        default_weight: Weight used for edges lacking the ``weight`` attribute.

    Returns:
        `DirectedGraph` if ``nx_graph`` is directed, `UndirectedGraph` otherwise.
        Isolated nodes are preserved.

    Raises:
        ValueError: If an edge has a negative weight.
    """
    edges = []
    if nx_graph.is_multigraph():
        iterator = (
            (u, v, data, key) for u, v, key, data in nx_graph.edges(keys=True, data=True)
        )
    else:
        iterator = ((u, v, data, None) for u, v, data in nx_graph.edges(data=True))

    for u, v, data, key in iterator:
        edge_weight = float(data.get(weight, default_weight))
        if edge_weight < 0:
            raise ValueError(
                f"Edge ({u!r}, {v!r}) has negative weight {edge_weight}; "
                "weights must be non-negative."
            )
        edges.append(WeightedEdge(u, v, edge_weight, key))

    graph_cls = DirectedGraph if nx_graph.is_directed() else UndirectedGraph
    return graph_cls(edges, vertices=nx_graph.nodes)


def to_networkx(
    graph: Union[DirectedGraph, UndirectedGraph],
    weight: str = "weight",
) -> nx.Graph:
    """Convert a mazegraph graph to a NetworkX graph.

    `UndirectedGraph` maps to ``nx.Graph`` and `DirectedGraph` to
    ``nx.DiGraph``. Parallel edges collapse to the lightest one.

    Args:
        graph: Graph to convert.
        weight: Edge attribute name to store weights under.

    Returns:
        The NetworkX graph. Each edge carries ``weight`` and ``data`` attributes.
    """
    nx_graph = nx.Graph() if isinstance(graph, UndirectedGraph) else nx.DiGraph()
    nx_graph.add_nodes_from(graph.all_vertices())
    for edge in graph.all_edges():
        if nx_graph.has_edge(edge.src, edge.dst):
            if nx_graph.edges[edge.src, edge.dst][weight] <= edge.weight:
                continue
        nx_graph.add_edge(edge.src, edge.dst, **{weight: edge.weight, "data": edge.data})
    return nx_graph
