"""Configuration classes for mazegraph components."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class MazeConfig:
    """Defaults for maze construction, carving and rendering."""

    # Grid size used when the caller does not specify one
    default_width: int = 10
    default_height: int = 8

    # Upper bound on either grid dimension
    max_dimension: int = 500

    # Component identifiers for SeedManager-derived carver seeds
    carver_seed_components: Tuple[str, ...] = ("carver", "kruskal")

    # Text rendering glyphs
    corner: str = "+"
    horizontal_wall: str = "---"
    vertical_wall: str = "|"
    open_horizontal: str = "   "
    open_vertical: str = " "
    empty_room: str = "   "
    path_room: str = " * "
    start_room: str = " S "
    end_room: str = " E "

    def validate_dimensions(self, width: int, height: int) -> None:
        """Raise ValueError unless both dimensions are within [1, max_dimension]."""
        for label, value in (("width", width), ("height", height)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"Maze {label} must be an integer, got {value!r}.")
            if value < 1 or value > self.max_dimension:
                raise ValueError(
                    f"Maze {label} must be between 1 and {self.max_dimension}, "
                    f"got {value}."
                )


# Global configuration instance
MAZE_CONFIG = MazeConfig()
