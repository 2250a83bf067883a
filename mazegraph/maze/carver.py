"""Maze carvers: decide which interior walls of a `GridMaze` to remove."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Callable, Optional, Set

from mazegraph.algorithms.mst import kruskal_mst
from mazegraph.algorithms.types import MinimumSpanningTree
from mazegraph.graph.base import KruskalGraph
from mazegraph.logging import get_logger
from mazegraph.maze.grid import GridMaze
from mazegraph.maze.entities import Wall

logger = get_logger(__name__)


class MazeCarver(ABC):
    """Base class for carvers.

    Subclasses implement `choose_walls_to_remove`; `carve` applies the choice
    to a maze and returns the carved copy.
    """

    def carve(self, maze: GridMaze) -> GridMaze:
        """Return a copy of ``maze`` with the chosen walls removed."""
        to_remove = self.choose_walls_to_remove(maze)
        logger.info(
            "Carved %dx%d maze: removed %d of %d walls",
            maze.width,
            maze.height,
            len(to_remove),
            len(maze.removable_walls()),
        )
        return maze.with_removed_walls(to_remove)

    @abstractmethod
    def choose_walls_to_remove(self, maze: GridMaze) -> Set[Wall]:
        """Return the subset of ``maze.removable_walls()`` to remove."""


class KruskalMazeCarver(MazeCarver):
    """Carve a perfect maze from a randomized minimum spanning tree.

    Each removable wall becomes an edge between its two rooms with a random
    weight in ``[0, 1)``. The walls behind the minimum spanning tree's edges
    are removed, so every room is reachable and there are no loops.

    Args:
        mst_finder: Spanning-tree function taking a graph and returning a
            `MinimumSpanningTree` (defaults to `kruskal_mst`).
        rng: Random source for wall weights. Takes precedence over ``seed``.
        seed: Seed for a private ``random.Random`` when ``rng`` is not given.
            With neither, the RNG is seeded from system entropy.
    """

    def __init__(
        self,
        mst_finder: Callable[[KruskalGraph], MinimumSpanningTree] = kruskal_mst,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.mst_finder = mst_finder
        self.rng = rng if rng is not None else random.Random(seed)

    def choose_walls_to_remove(self, maze: GridMaze) -> Set[Wall]:
        # Sort so the same seed yields the same weights regardless of set order
        walls = sorted(maze.removable_walls())
        weights = {wall: self.rng.random() for wall in walls}

        result = self.mst_finder(maze.wall_graph(weights))
        if not result.exists:
            # Only possible when some walls were already removed
            logger.warning(
                "Standing walls of %r do not connect all rooms; nothing carved", maze
            )
            return set()
        return {edge.data for edge in result.edges}
