"""Utility helpers used across mazegraph.

This package contains small, self-contained utilities that do not depend on
project internals.
"""

from mazegraph.utils.seed_manager import SeedManager

__all__ = [
    "SeedManager",
]
