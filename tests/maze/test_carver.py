import random

import networkx as nx
import pytest

from mazegraph.algorithms.types import MinimumSpanningTree
from mazegraph.maze.carver import KruskalMazeCarver, MazeCarver
from mazegraph.maze.entities import Wall
from mazegraph.maze.grid import GridMaze


def passage_nx(maze: GridMaze) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(maze.rooms)
    g.add_edges_from((w.room1, w.room2) for w in maze.open_walls)
    return g


@pytest.mark.parametrize("width,height", [(1, 1), (1, 5), (5, 1), (6, 4), (10, 10)])
def test_kruskal_carves_perfect_maze(width, height):
    maze = KruskalMazeCarver(seed=3).carve(GridMaze(width, height))
    g = passage_nx(maze)
    assert len(maze.open_walls) == width * height - 1
    assert nx.is_tree(g) if width * height > 1 else g.number_of_edges() == 0


def test_same_seed_same_maze():
    first = KruskalMazeCarver(seed=11).carve(GridMaze(8, 6))
    second = KruskalMazeCarver(seed=11).carve(GridMaze(8, 6))
    assert first.open_walls == second.open_walls


def test_different_seeds_differ():
    first = KruskalMazeCarver(seed=1).carve(GridMaze(8, 6))
    second = KruskalMazeCarver(seed=2).carve(GridMaze(8, 6))
    assert first.open_walls != second.open_walls


def test_injected_rng_takes_precedence():
    first = KruskalMazeCarver(rng=random.Random(5), seed=99).carve(GridMaze(5, 5))
    second = KruskalMazeCarver(rng=random.Random(5)).carve(GridMaze(5, 5))
    assert first.open_walls == second.open_walls


def test_custom_mst_finder_receives_room_graph():
    seen = []

    def finder(graph):
        seen.append(graph)
        return MinimumSpanningTree.failure()

    maze = GridMaze(3, 3)
    carved = KruskalMazeCarver(mst_finder=finder, seed=0).carve(maze)
    assert len(seen) == 1
    assert seen[0].all_vertices() == set(maze.rooms)
    assert {e.data for e in seen[0].all_edges()} == set(maze.walls)
    assert carved.open_walls == frozenset()


def test_carver_base_is_abstract():
    with pytest.raises(TypeError):
        MazeCarver()


def test_subclass_carve_applies_choice():
    class OpenEverything(MazeCarver):
        def choose_walls_to_remove(self, maze):
            return maze.removable_walls()

    maze = OpenEverything().carve(GridMaze(3, 2))
    assert maze.untouched_walls == frozenset()
    assert all(isinstance(w, Wall) for w in maze.open_walls)
