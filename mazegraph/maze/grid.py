"""Rectangular grid maze model.

A `GridMaze` has ``width * height`` rooms. Every pair of orthogonally
adjacent rooms is separated by an interior wall; the outer boundary is not
modelled as walls and is never removable. Carving returns a new maze with
some interior walls removed; the remaining walls are "untouched".
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Iterator, List, Optional, Set

from mazegraph.config import MAZE_CONFIG, MazeConfig
from mazegraph.graph.base import UndirectedGraph, WeightedEdge
from mazegraph.maze.entities import Room, Wall


class GridMaze:
    """Immutable rectangular maze.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        walls: Every interior wall of the grid.
        open_walls: Walls removed by carving (passages).
    """

    def __init__(
        self,
        width: int,
        height: int,
        removed_walls: Iterable[Wall] = (),
        config: Optional[MazeConfig] = None,
    ) -> None:
        self.config = config or MAZE_CONFIG
        self.config.validate_dimensions(width, height)
        self.width = width
        self.height = height
        self.walls: FrozenSet[Wall] = frozenset(self._interior_walls())

        removed = frozenset(removed_walls)
        unknown = removed - self.walls
        if unknown:
            sample = ", ".join(str(w) for w in sorted(unknown)[:3])
            raise ValueError(f"Walls are not interior walls of this maze: {sample}")
        self.open_walls: FrozenSet[Wall] = removed

    def _interior_walls(self) -> Iterator[Wall]:
        for row in range(self.height):
            for col in range(self.width):
                if col + 1 < self.width:
                    yield Wall(Room(row, col), Room(row, col + 1))
                if row + 1 < self.height:
                    yield Wall(Room(row, col), Room(row + 1, col))

    @property
    def rooms(self) -> List[Room]:
        """All rooms in row-major order."""
        return [Room(r, c) for r in range(self.height) for c in range(self.width)]

    @property
    def untouched_walls(self) -> FrozenSet[Wall]:
        """Interior walls that are still standing."""
        return self.walls - self.open_walls

    def removable_walls(self) -> Set[Wall]:
        """Walls a carver may remove: every standing interior wall."""
        return set(self.untouched_walls)

    def room(self, row: int, col: int) -> Room:
        """Return the room at ``(row, col)``.

        Raises:
            ValueError: If the coordinates fall outside the grid.
        """
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise ValueError(
                f"Room ({row}, {col}) is outside a {self.width}x{self.height} maze."
            )
        return Room(row, col)

    def __contains__(self, room: object) -> bool:
        return (
            isinstance(room, Room)
            and 0 <= room.row < self.height
            and 0 <= room.col < self.width
        )

    def neighbors(self, room: Room) -> List[Room]:
        """Rooms reachable from ``room`` through an open wall."""
        found = []
        for wall in self.open_walls:
            if wall.room1 == room:
                found.append(wall.room2)
            elif wall.room2 == room:
                found.append(wall.room1)
        return sorted(found)

    def is_open(self, room1: Room, room2: Room) -> bool:
        return Wall(room1, room2) in self.open_walls

    def with_removed_walls(self, walls: Iterable[Wall]) -> GridMaze:
        """Return a copy of this maze with ``walls`` removed as well."""
        return GridMaze(
            self.width,
            self.height,
            self.open_walls | frozenset(walls),
            config=self.config,
        )

    def passage_graph(self) -> UndirectedGraph[Room]:
        """Undirected room graph with one edge per open wall.

        Edge weights are the distances between room centers; each edge's
        ``data`` is its `Wall`.
        """
        edges = [
            WeightedEdge(wall.room1, wall.room2, wall.distance, wall)
            for wall in self.open_walls
        ]
        return UndirectedGraph(edges, vertices=self.rooms)

    def wall_graph(
        self, weights: Optional[Dict[Wall, float]] = None
    ) -> UndirectedGraph[Room]:
        """Undirected room graph with one edge per removable wall.

        Args:
            weights: Optional ``Wall -> weight`` mapping; defaults to the
                distance between room centers.
        """
        edges = [
            WeightedEdge(
                wall.room1,
                wall.room2,
                wall.distance if weights is None else weights[wall],
                wall,
            )
            for wall in self.removable_walls()
        ]
        return UndirectedGraph(edges, vertices=self.rooms)

    def __repr__(self) -> str:
        return (
            f"GridMaze(width={self.width}, height={self.height}, "
            f"open_walls={len(self.open_walls)}/{len(self.walls)})"
        )
