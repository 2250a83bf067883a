"""Shortest-path-first (SPF) via Dijkstra's algorithm.

`shortest_path_tree` runs Dijkstra from a start vertex on top of the
extrinsic `ArrayHeapMinPQ` and returns the distance table together with the
shortest-path tree (vertex -> incoming edge). `extract_shortest_path`
turns that tree into a point-to-point `ShortestPath`.

Notes:
    When an end vertex is given, the search stops as soon as the end vertex
    is removed from the queue; its distance and incoming edge are final at
    that point. Edge weights must be non-negative, otherwise results are
    undefined.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

from mazegraph.algorithms.base import Cost
from mazegraph.algorithms.priority_queue import ArrayHeapMinPQ
from mazegraph.algorithms.types import ShortestPath
from mazegraph.graph.base import Graph, VertexID
from mazegraph.logging import get_logger

logger = get_logger(__name__)


def shortest_path_tree(
    graph: Graph,
    start: VertexID,
    end: Optional[VertexID] = None,
    pq_factory: Callable[[], Any] = ArrayHeapMinPQ,
) -> Tuple[Dict[VertexID, Cost], Dict[VertexID, Any]]:
    """Compute shortest distances and incoming edges from ``start``.

    Args:
        graph: Graph exposing ``outgoing_edges_from(vertex)``.
        start: Source vertex.
        end: Optional target. If provided, the search terminates once ``end``
            is settled; vertices farther away may be missing or tentative.
        pq_factory: Zero-argument callable returning an extrinsic min-PQ with
            ``add``, ``contains``, ``change_priority``, ``remove_min`` and
            ``is_empty`` (defaults to `ArrayHeapMinPQ`).

    Returns:
        A tuple of (costs, spt):
          - costs: Maps each reached vertex to its best known distance.
          - spt: Maps each reached vertex other than ``start`` to the edge
            through which that distance was achieved.
    """
    costs: Dict[VertexID, Cost] = {start: 0.0}
    spt: Dict[VertexID, Any] = {}
    to_process = pq_factory()
    to_process.add(start, 0.0)
    settled = 0

    while not to_process.is_empty():
        current = to_process.remove_min()
        settled += 1
        if end is not None and current == end:
            break

        current_cost = costs[current]
        for edge in graph.outgoing_edges_from(current):
            neighbor = edge.dst
            new_cost = current_cost + edge.weight
            if neighbor not in costs or new_cost < costs[neighbor]:
                costs[neighbor] = new_cost
                spt[neighbor] = edge
                if to_process.contains(neighbor):
                    to_process.change_priority(neighbor, new_cost)
                else:
                    to_process.add(neighbor, new_cost)

    logger.debug(
        "SPF from %r settled %d vertices, reached %d", start, settled, len(costs)
    )
    return costs, spt


def extract_shortest_path(
    spt: Dict[VertexID, Any],
    start: VertexID,
    end: VertexID,
) -> ShortestPath:
    """Reconstruct the path from ``start`` to ``end`` using a shortest-path tree.

    Args:
        spt: Vertex -> incoming edge mapping from `shortest_path_tree`.
        start: Path start (the tree's root).
        end: Path end.

    Returns:
        `ShortestPath.single_vertex` if ``start == end``; a successful path
        with edges in forward order if ``end`` is reachable; otherwise
        `ShortestPath.failure`.
    """
    if start == end:
        return ShortestPath.single_vertex(start)

    edges: List[Any] = []
    current = end
    while current != start:
        edge = spt.get(current)
        if edge is None:
            return ShortestPath.failure()
        edges.append(edge)
        current = edge.src
        if len(edges) > len(spt):
            # A chain longer than the tree itself cycles without reaching start
            return ShortestPath.failure()

    edges.reverse()
    return ShortestPath.success(edges)


def find_shortest_path(
    graph: Graph,
    start: VertexID,
    end: VertexID,
    pq_factory: Callable[[], Any] = ArrayHeapMinPQ,
) -> ShortestPath:
    """Find a shortest path from ``start`` to ``end``.

    Args:
        graph: Graph exposing ``outgoing_edges_from(vertex)``.
        start: Source vertex.
        end: Target vertex.
        pq_factory: Priority-queue factory forwarded to `shortest_path_tree`.

    Returns:
        The `ShortestPath` result; its ``exists`` is False if ``end`` is
        unreachable.
    """
    _, spt = shortest_path_tree(graph, start, end, pq_factory)
    return extract_shortest_path(spt, start, end)
