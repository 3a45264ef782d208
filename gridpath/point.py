"""
Grid coordinate helpers shared by the pathfinding modules.
"""

from __future__ import annotations
from typing import Callable, Tuple

# (row, col) integer grid cell
Coord = Tuple[int, int]

# Walkability predicate: is_walkable(row, col) -> bool
WalkableFn = Callable[[int, int], bool]


class GridExtentError(ValueError):
    """Raised when a grid width or height is not a positive integer."""


def always_walkable(row: int, col: int) -> bool:
    return True


def validate_extent(width: int, height: int) -> None:
    """Fail fast on a malformed grid extent."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise GridExtentError(f"Grid {name} must be an int, got {value!r}")
        if value <= 0:
            raise GridExtentError(f"Grid {name} must be positive, got {value}")


def in_bounds(pos: Coord, width: int, height: int) -> bool:
    """Return True if pos lies in [0, height) x [0, width)."""
    row, col = pos
    return 0 <= row < height and 0 <= col < width


def is_diagonal_step(a: Coord, b: Coord) -> bool:
    """Return True if moving from a to b changes both row and column."""
    return a[0] != b[0] and a[1] != b[1]
