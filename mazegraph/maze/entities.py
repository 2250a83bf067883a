"""Rooms and walls of a grid maze."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, order=True)
class Room:
    """A grid cell, addressed by zero-based ``row`` and ``col``."""

    row: int
    col: int

    @property
    def center(self) -> Tuple[float, float]:
        """Center point as ``(x, y)`` in cell units."""
        return (self.col + 0.5, self.row + 0.5)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


@dataclass(frozen=True, order=True)
class Wall:
    """The wall between two rooms.

    Endpoints are stored in sorted order, so ``Wall(a, b) == Wall(b, a)``.
    """

    room1: Room
    room2: Room

    def __post_init__(self) -> None:
        if self.room2 < self.room1:
            first, second = self.room2, self.room1
            object.__setattr__(self, "room1", first)
            object.__setattr__(self, "room2", second)

    @property
    def distance(self) -> float:
        """Euclidean distance between the centers of the two rooms."""
        (x1, y1), (x2, y2) = self.room1.center, self.room2.center
        return ((x1 - x2) ** 2 + (y1 - y2) ** 2) ** 0.5

    @property
    def is_vertical(self) -> bool:
        """True for a wall separating horizontally adjacent rooms."""
        return self.room1.row == self.room2.row

    def __str__(self) -> str:
        return f"{self.room1}|{self.room2}"
