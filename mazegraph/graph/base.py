"""Graph and edge capabilities consumed by the algorithms, plus simple implementations.

The algorithms in `mazegraph.algorithms` never depend on a concrete graph
class. They accept anything satisfying the small protocols below:

- `BaseEdge`: ``src``, ``dst`` and a non-negative ``weight``.
- `KruskalGraph`: ``all_vertices()`` and ``all_edges()``.
- `Graph`: ``outgoing_edges_from(vertex)``.

`DirectedGraph` and `UndirectedGraph` are adjacency-list implementations
built from a collection of `WeightedEdge` objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Any,
    Dict,
    Generic,
    Hashable,
    Iterable,
    List,
    Protocol,
    Set,
    TypeVar,
    runtime_checkable,
)

VertexID = Hashable

V = TypeVar("V", bound=Hashable)
E = TypeVar("E")
V_co = TypeVar("V_co", covariant=True)
E_co = TypeVar("E_co", covariant=True)


@runtime_checkable
class BaseEdge(Protocol[V_co]):
    """Edge capability: two endpoints and a weight."""

    @property
    def src(self) -> V_co: ...

    @property
    def dst(self) -> V_co: ...

    @property
    def weight(self) -> float: ...


@runtime_checkable
class KruskalGraph(Protocol[V_co, E_co]):
    """Graph capability required by the spanning-tree finder."""

    def all_vertices(self) -> Set[V_co]: ...

    def all_edges(self) -> Set[E_co]: ...


@runtime_checkable
class Graph(Protocol[V_co, E_co]):
    """Graph capability required by the shortest-path finder."""

    def outgoing_edges_from(self, vertex: Any) -> List[E_co]: ...


@dataclass(frozen=True)
class WeightedEdge(Generic[V]):
    """Immutable weighted edge with an optional payload.

    Attributes:
        src: Source endpoint.
        dst: Destination endpoint.
        weight: Non-negative edge weight.
        data: Arbitrary hashable payload (e.g. the maze wall this edge
            stands for). Part of equality and hashing.
    """

    src: V
    dst: V
    weight: float = 1.0
    data: Any = field(default=None)

    def reversed(self) -> WeightedEdge[V]:
        """Return the same edge with its endpoints swapped."""
        return WeightedEdge(self.dst, self.src, self.weight, self.data)

    def __str__(self) -> str:
        return f"{self.src}->{self.dst}({self.weight:g})"


class DirectedGraph(Generic[V]):
    """Adjacency-list directed graph over `WeightedEdge` objects.

    Vertices are the union of ``vertices`` and every edge endpoint, so
    isolated vertices must be passed explicitly.
    """

    def __init__(
        self,
        edges: Iterable[WeightedEdge[V]] = (),
        vertices: Iterable[V] = (),
    ) -> None:
        self._edges: Set[WeightedEdge[V]] = set()
        self._adj: Dict[V, List[WeightedEdge[V]]] = {}
        for vertex in vertices:
            self._adj.setdefault(vertex, [])
        for edge in edges:
            self._add(edge)

    def _add(self, edge: WeightedEdge[V]) -> None:
        if edge in self._edges:
            return
        self._edges.add(edge)
        self._adj.setdefault(edge.src, []).append(edge)
        self._adj.setdefault(edge.dst, [])

    def all_vertices(self) -> Set[V]:
        return set(self._adj)

    def all_edges(self) -> Set[WeightedEdge[V]]:
        return set(self._edges)

    def outgoing_edges_from(self, vertex: V) -> List[WeightedEdge[V]]:
        """Return edges leaving ``vertex``.

        Raises:
            KeyError: If ``vertex`` is not in the graph.
        """
        try:
            return list(self._adj[vertex])
        except KeyError:
            raise KeyError(f"Vertex '{vertex}' is not in the graph.") from None

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={len(self._adj)}, "
            f"edges={len(self._edges)})"
        )


class UndirectedGraph(DirectedGraph[V]):
    """Adjacency-list undirected graph.

    ``all_edges()`` reports each edge once, in the orientation it was given.
    ``outgoing_edges_from(v)`` reports every incident edge oriented away from
    ``v`` (reversed copies where needed), which is what Dijkstra expects.
    """

    def _add(self, edge: WeightedEdge[V]) -> None:
        if edge in self._edges or edge.reversed() in self._edges:
            return
        self._edges.add(edge)
        self._adj.setdefault(edge.src, []).append(edge)
        if edge.src != edge.dst:
            self._adj.setdefault(edge.dst, []).append(edge.reversed())
