"""Minimum spanning tree via Kruskal's algorithm.

Edges are treated as undirected: only their endpoints matter for
connectivity. The graph must expose ``all_vertices()`` and ``all_edges()``
(see `mazegraph.graph.base.KruskalGraph`).
"""

from __future__ import annotations

from operator import attrgetter
from typing import Any, Callable, List

from mazegraph.algorithms.disjoint_sets import UnionBySizeCompressingDisjointSets
from mazegraph.algorithms.types import MinimumSpanningTree
from mazegraph.graph.base import KruskalGraph
from mazegraph.logging import get_logger

logger = get_logger(__name__)


def kruskal_mst(
    graph: KruskalGraph,
    disjoint_sets_factory: Callable[[], Any] = UnionBySizeCompressingDisjointSets,
) -> MinimumSpanningTree:
    """Find a minimum spanning tree of an undirected graph.

    Edges are visited in ascending weight order; an edge joins the tree when
    its endpoints are still in different components. The search stops as soon
    as ``|V| - 1`` edges are accepted. Ties between equal weights are broken
    by the sort, which is stable over the iteration order of ``all_edges()``.

    Args:
        graph: Graph exposing ``all_vertices()`` and ``all_edges()``.
        disjoint_sets_factory: Zero-argument callable returning an object with
            ``make_set`` and ``union`` (defaults to
            `UnionBySizeCompressingDisjointSets`).

    Returns:
        `MinimumSpanningTree.success` with the tree edges (empty for a graph
        with no vertices, or a single vertex), or `MinimumSpanningTree.failure`
        if the graph is disconnected.

    Raises:
        KeyError: If an edge endpoint is not among ``all_vertices()``.
    """
    vertices = graph.all_vertices()
    edges = graph.all_edges()

    if not vertices or (len(vertices) == 1 and not edges):
        return MinimumSpanningTree.success()

    components = disjoint_sets_factory()
    for vertex in vertices:
        components.make_set(vertex)

    target = len(vertices) - 1
    tree: List[Any] = []
    for edge in sorted(edges, key=attrgetter("weight")):
        if len(tree) == target:
            break
        if components.union(edge.src, edge.dst):
            tree.append(edge)

    if len(tree) < target:
        logger.debug(
            "No spanning tree: %d of %d required edges found over %d vertices",
            len(tree),
            target,
            len(vertices),
        )
        return MinimumSpanningTree.failure()

    logger.debug(
        "Spanning tree with %d edges over %d vertices (%d candidate edges)",
        len(tree),
        len(vertices),
        len(edges),
    )
    return MinimumSpanningTree.success(tree)
