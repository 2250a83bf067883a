"""Grid maze model, carving, solving and rendering."""

from mazegraph.maze.carver import KruskalMazeCarver, MazeCarver
from mazegraph.maze.entities import Room, Wall
from mazegraph.maze.grid import GridMaze
from mazegraph.maze.render import render_maze
from mazegraph.maze.solver import solve_maze

__all__ = [
    "GridMaze",
    "KruskalMazeCarver",
    "MazeCarver",
    "Room",
    "Wall",
    "render_maze",
    "solve_maze",
]
