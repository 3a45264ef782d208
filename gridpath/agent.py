"""
Agent module: an entity that plans a path and follows it one cell at a time.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, List, Optional

from .entity import Entity
from .point import Coord

if TYPE_CHECKING:
    from .options import PathfindingOptions
    from .world import World

logger = logging.getLogger(__name__)


class Agent(Entity):
    """Mobile entity; does not block its own cell."""

    def __init__(self, row: int, col: int, kind: str = "player") -> None:
        super().__init__(row, col, kind=kind, blocking=False)
        # Current route, start to goal inclusive; empty when idle
        self.path: List[Coord] = []

    def find_path(
        self,
        world: World,
        goal: Coord,
        options: Optional[PathfindingOptions] = None,
    ) -> Optional[List[Coord]]:
        """
        Compute a path from this agent's cell to the goal cell through the world,
        avoiding walls and blocking entities. Any is_walkable in options
        is applied on top of the world's walls.
        Returns a list of (row, col) cells, or None if unreachable.
        """
        from . import pathfinding
        from .options import PathfindingOptions as _Options

        options = options or _Options()
        caller = options.is_walkable

        def is_walkable(row: int, col: int) -> bool:
            if caller is not None and not caller(row, col):
                return False
            return world.is_walkable(row, col)

        options = options.with_walkable(is_walkable)
        goal_cell = (int(goal[0]), int(goal[1]))
        return pathfinding.find_path_in_scene(
            self.position(), goal_cell, world, options
        )

    def set_path(self, path: Optional[List[Coord]]) -> None:
        self.path = list(path or [])

    def next_step(self) -> Optional[Coord]:
        from .pathfinding import get_next_step

        return get_next_step(self.path, self.position())

    def step(self, world: World) -> bool:
        """
        Advance one cell along the current path.
        Returns True if the agent moved. Clears the path on arrival or when
        the next cell has become blocked.
        """
        nxt = self.next_step()
        if nxt is None:
            self.path = []
            return False
        if world.is_wall(*nxt) or world.is_occupied(*nxt):
            logger.info("Path blocked at %s, stopping", nxt)
            self.path = []
            return False
        self.set_position(*nxt)
        return True
