"""
Pathfinding utilities: implements grid-based A* search.
"""

from __future__ import annotations
import heapq
import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .heuristics import heuristic
from .neighbors import get_neighbors
from .options import PathfindingOptions
from .point import (
    Coord,
    WalkableFn,
    in_bounds,
    is_diagonal_step,
    validate_extent,
)

logger = logging.getLogger(__name__)


class _Node:
    """Search node stored in the per-call arena; parent is an arena index (-1 for start)."""

    __slots__ = ("pos", "g", "h", "f", "parent", "seq")

    def __init__(
        self, pos: Coord, g: float, h: float, parent: int, seq: int
    ) -> None:
        self.pos = pos
        self.g = g
        self.h = h
        self.f = g + h
        self.parent = parent
        # Sequence number of the newest heap entry for this node
        self.seq = seq


def _cell(pos: Sequence[int]) -> Coord:
    return (int(pos[0]), int(pos[1]))


def reconstruct_path(nodes: List[_Node], index: int) -> List[Coord]:
    """Follow parent indices from nodes[index] back to the start and return start..goal."""
    path: List[Coord] = []
    while index != -1:
        node = nodes[index]
        path.append(node.pos)
        index = node.parent
    path.reverse()
    return path


def find_path(
    start: Coord,
    goal: Coord,
    width: int,
    height: int,
    options: Optional[PathfindingOptions] = None,
) -> Optional[List[Coord]]:
    """
    Find a path on a width x height grid from start to goal using A*.
    start, goal: (row, col) integer grid coordinates.
    Returns a list of (row, col) coordinates from start to goal inclusive,
    or None if either endpoint is out of bounds or blocked, the goal is
    unreachable, or options.max_iterations expansions were spent first.
    Raises GridExtentError if width or height is not a positive integer.

    Open-set ties on f are broken by lower h, then by insertion order.
    """
    validate_extent(width, height)
    options = options or PathfindingOptions()
    is_walkable = options.walkable()
    start = _cell(start)
    goal = _cell(goal)

    if not in_bounds(start, width, height) or not in_bounds(goal, width, height):
        logger.debug("Endpoint out of bounds: %s -> %s", start, goal)
        return None
    if not is_walkable(*start) or not is_walkable(*goal):
        logger.debug("Endpoint not walkable: %s -> %s", start, goal)
        return None
    if start == goal:
        return [start]

    kind = options.heuristic
    # Arena of nodes; heap entries are (f, h, seq, node_index)
    nodes: List[_Node] = [_Node(start, 0.0, heuristic(start, goal, kind), -1, 0)]
    open_index: Dict[Coord, int] = {start: 0}
    open_heap: List[Tuple[float, float, int, int]] = [
        (nodes[0].f, nodes[0].h, 0, 0)
    ]
    closed: Set[Coord] = set()
    seq = 0
    iterations = 0

    while open_heap and iterations < options.max_iterations:
        _, _, entry_seq, current_idx = heapq.heappop(open_heap)
        current = nodes[current_idx]
        # Superseded by a cheaper entry pushed for the same node
        if entry_seq != current.seq:
            continue
        iterations += 1

        if current.pos == goal:
            path = reconstruct_path(nodes, current_idx)
            logger.debug(
                "Path found: %d cells after %d iterations", len(path), iterations
            )
            return path

        del open_index[current.pos]
        closed.add(current.pos)

        for neighbor in get_neighbors(
            current.pos, width, height, options.allow_diagonal, is_walkable
        ):
            if neighbor in closed:
                continue
            cost = (
                options.diagonal_cost
                if is_diagonal_step(current.pos, neighbor)
                else 1.0
            )
            tentative_g = current.g + cost
            existing_idx = open_index.get(neighbor)
            if existing_idx is None:
                seq += 1
                node = _Node(
                    neighbor,
                    tentative_g,
                    heuristic(neighbor, goal, kind),
                    current_idx,
                    seq,
                )
                nodes.append(node)
                open_index[neighbor] = len(nodes) - 1
                heapq.heappush(open_heap, (node.f, node.h, seq, len(nodes) - 1))
            else:
                node = nodes[existing_idx]
                if tentative_g < node.g:
                    # Improve in place; the old heap entry goes stale
                    seq += 1
                    node.g = tentative_g
                    node.f = tentative_g + node.h
                    node.parent = current_idx
                    node.seq = seq
                    heapq.heappush(open_heap, (node.f, node.h, seq, existing_idx))

    if iterations >= options.max_iterations:
        logger.debug(
            "Search budget of %d iterations spent: %s -> %s",
            options.max_iterations,
            start,
            goal,
        )
    else:
        logger.debug("No path: %s -> %s after %d iterations", start, goal, iterations)
    return None


def _combine(
    caller: Optional[WalkableFn], blocked: WalkableFn
) -> WalkableFn:
    """AND a caller predicate with a 'blocked' query into one walkability predicate."""

    def is_walkable(row: int, col: int) -> bool:
        if caller is not None and not caller(row, col):
            return False
        return not blocked(row, col)

    return is_walkable


def find_path_in_scene(
    start: Coord,
    goal: Coord,
    grid_provider: Any,
    options: Optional[PathfindingOptions] = None,
) -> Optional[List[Coord]]:
    """
    Find a path through a scene, treating cells occupied by any entity as blocked.
    grid_provider: object with get_resolution() -> (width, height) and
    is_occupied(row, col) -> bool.
    """
    options = options or PathfindingOptions()
    width, height = grid_provider.get_resolution()
    is_walkable = _combine(options.is_walkable, grid_provider.is_occupied)
    return find_path(start, goal, width, height, options.with_walkable(is_walkable))


def _obstacle_cell(obstacle: Any) -> Coord:
    if hasattr(obstacle, "position"):
        return _cell(obstacle.position())
    return _cell(obstacle)


def find_path_avoiding_entities(
    start: Coord,
    goal: Coord,
    grid_provider: Any,
    obstacles: Iterable[Any],
    options: Optional[PathfindingOptions] = None,
) -> Optional[List[Coord]]:
    """
    Find a path that avoids the cells of the given obstacles.
    obstacles: entities with position() -> (row, col), or (row, col) tuples.
    Only grid_provider.get_resolution() is used; scene occupancy is ignored.
    """
    options = options or PathfindingOptions()
    width, height = grid_provider.get_resolution()
    occupied = {_obstacle_cell(o) for o in obstacles}
    is_walkable = _combine(
        options.is_walkable, lambda row, col: (row, col) in occupied
    )
    return find_path(start, goal, width, height, options.with_walkable(is_walkable))


def get_next_step(
    path: Sequence[Coord], current: Coord
) -> Optional[Coord]:
    """
    Return the cell to move to after current along path.
    None for an empty path or when current is the goal; path[0] when
    current is not on the path at all.
    """
    if not path:
        return None
    current = _cell(current)
    try:
        index = list(path).index(current)
    except ValueError:
        return path[0]
    if index >= len(path) - 1:
        return None
    return path[index + 1]
