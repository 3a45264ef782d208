"""
Heuristic distance estimates for grid-based A*.
"""

from __future__ import annotations
import enum
import math
from typing import Union

from .config import OCTILE_DIAGONAL_UNIT
from .point import Coord


class Heuristic(str, enum.Enum):
    """Distance estimate used to guide the search."""

    # 4-directional movement
    MANHATTAN = "manhattan"
    # straight-line distance, diagonal movement allowed
    EUCLIDEAN = "euclidean"
    # 8-directional movement with uniform step cost
    CHEBYSHEV = "chebyshev"
    # 8-directional movement with sqrt(2) diagonal steps
    OCTILE = "octile"


def _resolve(kind: Union[Heuristic, str, None]) -> Heuristic:
    """Map a selector (enum member or its string value) to a Heuristic, defaulting to Manhattan."""
    if isinstance(kind, Heuristic):
        return kind
    try:
        return Heuristic(str(kind).lower())
    except ValueError:
        return Heuristic.MANHATTAN


def heuristic(
    a: Coord, b: Coord, kind: Union[Heuristic, str] = Heuristic.MANHATTAN
) -> float:
    """
    Estimate the remaining cost from a to b.

    Manhattan is admissible only when diagonal movement is disabled.
    Octile always assumes a diagonal unit of sqrt(2), whatever diagonal_cost
    the search is configured with: a diagonal_cost below sqrt(2) makes it
    overestimate, so paths found with it may not be optimal.
    Unknown selectors fall back to Manhattan.
    """
    dy = abs(b[0] - a[0])
    dx = abs(b[1] - a[1])
    kind = _resolve(kind)
    if kind is Heuristic.EUCLIDEAN:
        return math.sqrt(dy * dy + dx * dx)
    if kind is Heuristic.CHEBYSHEV:
        return max(dy, dx)
    if kind is Heuristic.OCTILE:
        return dy + dx + (OCTILE_DIAGONAL_UNIT - 2) * min(dy, dx)
    return dy + dx
