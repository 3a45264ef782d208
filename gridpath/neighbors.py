"""
Neighbor generation for grid search.
"""

from __future__ import annotations
from typing import List

from .point import Coord, WalkableFn, in_bounds

# Up, right, down, left
CARDINAL_OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))
# Up-right, down-right, down-left, up-left
DIAGONAL_OFFSETS = ((-1, 1), (1, 1), (1, -1), (-1, -1))


def get_neighbors(
    pos: Coord,
    width: int,
    height: int,
    allow_diagonal: bool,
    is_walkable: WalkableFn,
) -> List[Coord]:
    """
    Return the walkable in-bounds cells adjacent to pos.

    Cardinal neighbors come first (up, right, down, left), then diagonals
    (up-right, down-right, down-left, up-left) when allow_diagonal is set.
    A diagonal move is refused only when both orthogonal cells it squeezes
    between are blocked; one open side is enough to cut the corner.
    """
    row, col = pos
    neighbors: List[Coord] = []
    for dr, dc in CARDINAL_OFFSETS:
        cell = (row + dr, col + dc)
        if in_bounds(cell, width, height) and is_walkable(cell[0], cell[1]):
            neighbors.append(cell)

    if not allow_diagonal:
        return neighbors

    for dr, dc in DIAGONAL_OFFSETS:
        cell = (row + dr, col + dc)
        if not in_bounds(cell, width, height) or not is_walkable(cell[0], cell[1]):
            continue
        # Flanking cells: same column as pos in the target row, and vice versa
        vertical_clear = is_walkable(cell[0], col)
        horizontal_clear = is_walkable(row, cell[1])
        if vertical_clear or horizontal_clear:
            neighbors.append(cell)
    return neighbors
