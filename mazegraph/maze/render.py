"""Plain-text rendering of grid mazes.

A 2x2 maze with every interior wall open renders as::

    +---+---+
    |       |
    +   +   +
    |       |
    +---+---+
"""

from __future__ import annotations

from typing import List, Optional, Set

from mazegraph.algorithms.types import ShortestPath
from mazegraph.config import MAZE_CONFIG, MazeConfig
from mazegraph.maze.entities import Room
from mazegraph.maze.grid import GridMaze


def render_maze(
    maze: GridMaze,
    path: Optional[ShortestPath] = None,
    config: MazeConfig = MAZE_CONFIG,
) -> str:
    """Draw ``maze`` as ASCII art, optionally marking a solution path.

    Args:
        maze: Maze to draw.
        path: Optional solved path. If it exists, its rooms are marked and
            its first and last rooms are labelled as start and end.
        config: Glyph configuration.

    Returns:
        The drawing, one text line per wall row and room row, without a
        trailing newline.
    """
    on_path: Set[Room] = set()
    start: Optional[Room] = None
    end: Optional[Room] = None
    if path is not None and path.exists:
        vertices = path.vertices
        on_path = set(vertices)
        start, end = vertices[0], vertices[-1]

    def room_glyph(room: Room) -> str:
        if room == start:
            return config.start_room
        if room == end:
            return config.end_room
        if room in on_path:
            return config.path_room
        return config.empty_room

    border = config.corner + config.corner.join(
        [config.horizontal_wall] * maze.width
    ) + config.corner
    lines: List[str] = [border]

    for row in range(maze.height):
        cells = [config.vertical_wall]
        for col in range(maze.width):
            room = Room(row, col)
            cells.append(room_glyph(room))
            if col + 1 == maze.width:
                cells.append(config.vertical_wall)
            elif maze.is_open(room, Room(row, col + 1)):
                cells.append(config.open_vertical)
            else:
                cells.append(config.vertical_wall)
        lines.append("".join(cells))

        if row + 1 == maze.height:
            lines.append(border)
            continue
        separators = [config.corner]
        for col in range(maze.width):
            if maze.is_open(Room(row, col), Room(row + 1, col)):
                separators.append(config.open_horizontal)
            else:
                separators.append(config.horizontal_wall)
            separators.append(config.corner)
        lines.append("".join(separators))

    return "\n".join(lines)
