"""Command-line interface for mazegraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from time import perf_counter
from typing import Any, Dict, List, Optional

from mazegraph.config import MAZE_CONFIG
from mazegraph.logging import get_logger, set_global_log_level
from mazegraph.maze.carver import KruskalMazeCarver
from mazegraph.maze.entities import Room
from mazegraph.maze.grid import GridMaze
from mazegraph.maze.render import render_maze
from mazegraph.maze.solver import solve_maze
from mazegraph.utils.seed_manager import SeedManager

logger = get_logger(__name__)


def _parse_room(text: str) -> Room:
    """Parse ``"row,col"`` into a `Room` (argparse type callback)."""
    try:
        row_text, col_text = text.split(",")
        return Room(int(row_text), int(col_text))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected ROW,COL with integer coordinates, got {text!r}"
        ) from None


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _maze_summary(maze: GridMaze, path: Any) -> Dict[str, Any]:
    """Build the JSON-serializable description of a carved (and solved) maze."""
    summary: Dict[str, Any] = {
        "width": maze.width,
        "height": maze.height,
        "open_walls": [
            [[w.room1.row, w.room1.col], [w.room2.row, w.room2.col]]
            for w in sorted(maze.open_walls)
        ],
    }
    if path is not None:
        summary["solution"] = {
            "exists": path.exists,
            "rooms": [[r.row, r.col] for r in path.vertices] if path.exists else [],
            "length": path.total_weight if path.exists else None,
        }
    return summary


def _generate(
    width: int,
    height: int,
    seed: Optional[int],
    solve: bool,
    start: Optional[Room],
    end: Optional[Room],
    as_json: bool,
) -> None:
    """Carve a maze, optionally solve it, and print it.

    Args:
        width: Number of columns.
        height: Number of rows.
        seed: Master seed; None for a non-deterministic maze.
        solve: Whether to solve from ``start`` to ``end``.
        start: Start room (defaults to the top-left room).
        end: End room (defaults to the bottom-right room).
        as_json: Print a JSON summary instead of the drawing.
    """
    started = perf_counter()
    try:
        maze = GridMaze(width, height)
        if start is not None or end is not None:
            solve = True
        start = maze.room(start.row, start.col) if start else maze.room(0, 0)
        end = maze.room(end.row, end.col) if end else maze.room(height - 1, width - 1)
    except ValueError as e:
        logger.error(f"Invalid maze parameters: {e}")
        sys.exit(1)

    rng = SeedManager(seed).create_random_state(*MAZE_CONFIG.carver_seed_components)
    carved = KruskalMazeCarver(rng=rng).carve(maze)

    path = solve_maze(carved, start, end) if solve else None
    logger.info(f"Maze generated in {_format_duration(perf_counter() - started)}")

    if as_json:
        print(json.dumps(_maze_summary(carved, path), indent=2))
    else:
        print(render_maze(carved, path))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``mazegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="mazegraph",
        description="Generate and solve grid mazes with Kruskal and Dijkstra.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{generate}",
        help="Available commands",
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Carve a random maze and print it"
    )
    generate_parser.add_argument(
        "--width",
        "-W",
        type=int,
        default=MAZE_CONFIG.default_width,
        help=f"Number of columns (default: {MAZE_CONFIG.default_width})",
    )
    generate_parser.add_argument(
        "--height",
        "-H",
        type=int,
        default=MAZE_CONFIG.default_height,
        help=f"Number of rows (default: {MAZE_CONFIG.default_height})",
    )
    generate_parser.add_argument(
        "--seed",
        "-s",
        type=int,
        default=None,
        help="Master seed for reproducible mazes",
    )
    generate_parser.add_argument(
        "--solve",
        action="store_true",
        help="Mark the shortest route from start to end",
    )
    generate_parser.add_argument(
        "--start",
        type=_parse_room,
        default=None,
        metavar="ROW,COL",
        help="Start room for --solve (default: 0,0)",
    )
    generate_parser.add_argument(
        "--end",
        type=_parse_room,
        default=None,
        metavar="ROW,COL",
        help="End room for --solve (default: bottom-right room)",
    )
    generate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON summary instead of the drawing",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "generate":
        _generate(
            width=args.width,
            height=args.height,
            seed=args.seed,
            solve=args.solve,
            start=args.start,
            end=args.end,
            as_json=args.json,
        )


if __name__ == "__main__":
    main()
