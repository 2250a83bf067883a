"""Solve a carved maze with Dijkstra over its passage graph."""

from __future__ import annotations

from mazegraph.algorithms.spf import find_shortest_path
from mazegraph.algorithms.types import ShortestPath
from mazegraph.logging import get_logger
from mazegraph.maze.entities import Room
from mazegraph.maze.grid import GridMaze

logger = get_logger(__name__)


def solve_maze(maze: GridMaze, start: Room, end: Room) -> ShortestPath:
    """Find the shortest route between two rooms through open walls.

    Args:
        maze: A carved maze.
        start: Starting room.
        end: Target room.

    Returns:
        A `ShortestPath` whose edges carry the traversed `Wall` in ``data``;
        ``exists`` is False if ``end`` cannot be reached.

    Raises:
        ValueError: If either room lies outside the maze.
    """
    for room in (start, end):
        if room not in maze:
            raise ValueError(f"Room {room} is outside the maze {maze!r}.")

    path = find_shortest_path(maze.passage_graph(), start, end)
    if path.exists:
        logger.debug("Solved %s -> %s in %d steps", start, end, len(path.edges))
    else:
        logger.info("No route from %s to %s", start, end)
    return path
