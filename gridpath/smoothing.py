"""
Path smoothing (string pulling) over an existing grid path.
"""

from __future__ import annotations
import math
from typing import List, Sequence

from .point import Coord, WalkableFn


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def has_line_of_sight(start: Coord, end: Coord, is_walkable: WalkableFn) -> bool:
    """
    Approximate visibility test between two cells.

    Samples max(|drow|, |dcol|) + 1 points at unit steps along the dominant
    axis, rounding each to the nearest cell (halves round up). Thin diagonal
    obstacles can be skipped at shallow angles; use has_exact_line_of_sight
    when that matters.
    """
    drow = end[0] - start[0]
    dcol = end[1] - start[1]
    steps = max(abs(drow), abs(dcol))
    if steps == 0:
        return True
    step_row = drow / steps
    step_col = dcol / steps
    for i in range(steps + 1):
        row = _round_half_up(start[0] + step_row * i)
        col = _round_half_up(start[1] + step_col * i)
        if not is_walkable(row, col):
            return False
    return True


def has_exact_line_of_sight(
    start: Coord, end: Coord, is_walkable: WalkableFn
) -> bool:
    """
    Exact visibility test: every cell the segment between the two cell
    centers passes through must be walkable. A segment running exactly
    through a grid corner needs both cells touching that corner.
    """
    row, col = start
    drow = abs(end[0] - row)
    dcol = abs(end[1] - col)
    srow = 1 if end[0] > row else -1
    scol = 1 if end[1] > col else -1
    if not is_walkable(row, col):
        return False
    crossed_rows = crossed_cols = 0
    while crossed_rows < drow or crossed_cols < dcol:
        # Compare the next column-boundary and row-boundary crossings, scaled by 2*drow*dcol
        decision = (1 + 2 * crossed_cols) * drow - (1 + 2 * crossed_rows) * dcol
        if decision == 0:
            if not is_walkable(row + srow, col) or not is_walkable(row, col + scol):
                return False
            row += srow
            col += scol
            crossed_rows += 1
            crossed_cols += 1
        elif decision < 0:
            col += scol
            crossed_cols += 1
        else:
            row += srow
            crossed_rows += 1
        if not is_walkable(row, col):
            return False
    return True


def smooth_path(
    path: Sequence[Coord], is_walkable: WalkableFn, exact: bool = False
) -> List[Coord]:
    """
    Remove waypoints that can be skipped by walking in a straight line.
    From each kept waypoint, jump to the farthest later waypoint that is
    still visible, stopping the scan at the first one that is not.
    Paths of two cells or fewer are returned unchanged.
    exact: use has_exact_line_of_sight instead of the rounded sampler.
    """
    if len(path) <= 2:
        return list(path)
    visible = has_exact_line_of_sight if exact else has_line_of_sight
    smoothed: List[Coord] = [path[0]]
    current = 0
    last = len(path) - 1
    while current < last:
        farthest = current + 1
        for i in range(current + 2, len(path)):
            if not visible(path[current], path[i], is_walkable):
                break
            farthest = i
        smoothed.append(path[farthest])
        current = farthest
    return smoothed
