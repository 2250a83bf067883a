import networkx as nx
import pytest

from mazegraph.maze.carver import KruskalMazeCarver
from mazegraph.maze.entities import Room, Wall
from mazegraph.maze.grid import GridMaze
from mazegraph.maze.solver import solve_maze


@pytest.fixture
def corridor():
    # Rooms in a 3x1 row with both walls open:
    # +---+---+---+
    # |           |
    # +---+---+---+
    walls = {Wall(Room(0, 0), Room(0, 1)), Wall(Room(0, 1), Room(0, 2))}
    return GridMaze(3, 1, removed_walls=walls)


def test_corridor(corridor):
    path = solve_maze(corridor, Room(0, 0), Room(0, 2))
    assert path.exists
    assert path.vertices == [Room(0, 0), Room(0, 1), Room(0, 2)]
    assert path.total_weight == pytest.approx(2.0)
    assert [e.data for e in path.edges] == [
        Wall(Room(0, 0), Room(0, 1)),
        Wall(Room(0, 1), Room(0, 2)),
    ]


def test_walled_off_room_is_unreachable():
    maze = GridMaze(2, 1)
    path = solve_maze(maze, Room(0, 0), Room(0, 1))
    assert not path.exists


def test_same_room(corridor):
    path = solve_maze(corridor, Room(0, 1), Room(0, 1))
    assert path.vertices == [Room(0, 1)]


def test_room_outside_maze_raises(corridor):
    with pytest.raises(ValueError, match="outside"):
        solve_maze(corridor, Room(0, 0), Room(5, 5))


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_carved_maze_always_solvable(seed):
    maze = KruskalMazeCarver(seed=seed).carve(GridMaze(9, 7))
    start, end = Room(0, 0), Room(6, 8)
    path = solve_maze(maze, start, end)

    g = nx.Graph()
    g.add_edges_from((w.room1, w.room2) for w in maze.open_walls)
    # A perfect maze has exactly one simple route
    assert path.vertices == nx.shortest_path(g, start, end)
    assert path.total_weight == pytest.approx(len(path.vertices) - 1)
