"""Result types returned by the spanning-tree and shortest-path finders.

Both are two-variant results: a success carrying edges, or a failure with
``exists`` set to False. A failure is an ordinary outcome (disconnected
graph, unreachable vertex), never an exception.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Generic, Hashable, List, Optional, Sequence, Tuple, TypeVar

from mazegraph.algorithms.base import Cost

V = TypeVar("V", bound=Hashable)
E = TypeVar("E")


@dataclass(frozen=True)
class MinimumSpanningTree(Generic[E]):
    """Outcome of a minimum-spanning-tree search.

    Attributes:
        edges: Edges of the tree; empty for trivial graphs and for failures.
        exists: False when the graph is disconnected.
    """

    edges: Tuple[E, ...] = ()
    exists: bool = True

    @classmethod
    def success(cls, edges: Sequence[E] = ()) -> MinimumSpanningTree[E]:
        return cls(tuple(edges), True)

    @classmethod
    def failure(cls) -> MinimumSpanningTree[E]:
        return cls((), False)

    @property
    def total_weight(self) -> Cost:
        """Sum of edge weights, or ``math.inf`` for a failure."""
        if not self.exists:
            return math.inf
        return sum(edge.weight for edge in self.edges)  # type: ignore[attr-defined]


@dataclass(frozen=True)
class ShortestPath(Generic[V, E]):
    """Outcome of a point-to-point shortest-path search.

    Attributes:
        edges: Edges in order from start to end. Empty for a single-vertex
            path and for failures.
        exists: False when the end is unreachable.
        start: The single vertex of a zero-edge path; ``None`` otherwise.
    """

    edges: Tuple[E, ...] = ()
    exists: bool = True
    start: Optional[V] = None

    @classmethod
    def success(cls, edges: Sequence[E]) -> ShortestPath[V, E]:
        if not edges:
            raise ValueError(
                "A successful multi-vertex path needs edges; use single_vertex()."
            )
        return cls(tuple(edges), True)

    @classmethod
    def single_vertex(cls, vertex: V) -> ShortestPath[V, E]:
        return cls((), True, vertex)

    @classmethod
    def failure(cls) -> ShortestPath[V, E]:
        return cls((), False)

    @property
    def total_weight(self) -> Cost:
        """Sum of edge weights, or ``math.inf`` when no path exists."""
        if not self.exists:
            return math.inf
        return sum(edge.weight for edge in self.edges)  # type: ignore[attr-defined]

    @property
    def vertices(self) -> List[Any]:
        """Vertices along the path, start and end included.

        Raises:
            ValueError: If no path exists.
        """
        if not self.exists:
            raise ValueError("No path exists, so it has no vertices.")
        if not self.edges:
            return [self.start]
        path = [self.edges[0].src]  # type: ignore[attr-defined]
        path.extend(edge.dst for edge in self.edges)  # type: ignore[attr-defined]
        return path
