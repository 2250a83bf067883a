"""mazegraph: extrinsic priority queue, union-find, Kruskal and Dijkstra.

The algorithmic core works on any graph exposing ``all_vertices()``,
``all_edges()`` and ``outgoing_edges_from(vertex)`` with edges carrying
``src``, ``dst`` and ``weight``. The `mazegraph.maze` package uses it to carve
grid mazes (randomized minimum spanning tree) and to solve them (shortest
path between two rooms).

Example:
    from mazegraph import GridMaze, KruskalMazeCarver, solve_maze, render_maze

    maze = KruskalMazeCarver(seed=7).carve(GridMaze(8, 5))
    path = solve_maze(maze, maze.room(0, 0), maze.room(4, 7))
    print(render_maze(maze, path))
"""

from __future__ import annotations

from mazegraph import cli, logging
from mazegraph._version import __version__
from mazegraph.algorithms import (
    ArrayHeapMinPQ,
    MinimumSpanningTree,
    ShortestPath,
    UnionBySizeCompressingDisjointSets,
    extract_shortest_path,
    find_shortest_path,
    kruskal_mst,
    shortest_path_tree,
)
from mazegraph.graph import (
    DirectedGraph,
    UndirectedGraph,
    WeightedEdge,
    from_networkx,
    to_networkx,
)
from mazegraph.maze import (
    GridMaze,
    KruskalMazeCarver,
    MazeCarver,
    Room,
    Wall,
    render_maze,
    solve_maze,
)

__all__ = [
    # Version
    "__version__",
    # Data structures
    "ArrayHeapMinPQ",
    "UnionBySizeCompressingDisjointSets",
    # Algorithms
    "kruskal_mst",
    "shortest_path_tree",
    "extract_shortest_path",
    "find_shortest_path",
    # Results
    "MinimumSpanningTree",
    "ShortestPath",
    # Graphs
    "DirectedGraph",
    "UndirectedGraph",
    "WeightedEdge",
    "from_networkx",
    "to_networkx",
    # Maze
    "GridMaze",
    "KruskalMazeCarver",
    "MazeCarver",
    "Room",
    "Wall",
    "render_maze",
    "solve_maze",
    # Utilities
    "cli",
    "logging",
]
