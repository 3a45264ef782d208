"""
gridpath: grid-based A* pathfinding with path smoothing and step selection.
"""

from .heuristics import Heuristic, heuristic
from .neighbors import get_neighbors
from .options import PathfindingOptions
from .pathfinding import (
    find_path,
    find_path_in_scene,
    find_path_avoiding_entities,
    get_next_step,
)
from .point import Coord, GridExtentError
from .smoothing import smooth_path, has_line_of_sight, has_exact_line_of_sight

__all__ = [
    "Coord",
    "GridExtentError",
    "Heuristic",
    "PathfindingOptions",
    "find_path",
    "find_path_avoiding_entities",
    "find_path_in_scene",
    "get_neighbors",
    "get_next_step",
    "has_exact_line_of_sight",
    "has_line_of_sight",
    "heuristic",
    "smooth_path",
]
