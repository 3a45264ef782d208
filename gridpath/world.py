from __future__ import annotations
import os
import json
import logging
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .config import WORLD_FILE, TILE_WALL
from .entity import Entity
from .point import Coord, in_bounds, validate_extent

logger = logging.getLogger(__name__)


def _parse_cell(raw) -> Optional[Coord]:
    """Parse a [row, col] pair, returning None if malformed."""
    if not (isinstance(raw, (list, tuple)) and len(raw) == 2):
        return None
    try:
        return (int(raw[0]), int(raw[1]))
    except (TypeError, ValueError):
        return None


def _segment_cells(start: Coord, end: Coord) -> List[Coord]:
    """Cells of a horizontal or vertical wall segment, both ends inclusive."""
    (r0, c0), (r1, c1) = start, end
    if r0 != r1 and c0 != c1:
        raise ValueError(f"Wall segment {start} -> {end} is not axis-aligned")
    rows = range(min(r0, r1), max(r0, r1) + 1)
    cols = range(min(c0, c1), max(c0, c1) + 1)
    return [(r, c) for r in rows for c in cols]


class World:
    """
    Grid world: extent, static walls and entities.
    Loaded from an external JSON file (default) or built from a tile grid
    (rows of TILE_EMPTY / TILE_WALL) or an empty width x height extent.
    """

    def __init__(
        self,
        map_grid: Optional[List[List[int]]] = None,
        width: Optional[int] = None,
        height: Optional[int] = None,
        world_file: Optional[str] = None,
    ) -> None:
        self.entities: List[Entity] = []
        if map_grid is not None:
            grid = np.asarray(map_grid, dtype=int)
            if grid.ndim != 2:
                raise ValueError("map_grid must be a list of equal-length rows")
            self.height, self.width = grid.shape
            validate_extent(int(self.width), int(self.height))
            self.walls = grid == TILE_WALL
        elif width is not None and height is not None:
            validate_extent(width, height)
            self.width = width
            self.height = height
            self.walls = np.zeros((height, width), dtype=bool)
        else:
            self._load(world_file or os.path.join(os.path.dirname(__file__), WORLD_FILE))
        self.width = int(self.width)
        self.height = int(self.height)
        self._initial_walls = self.walls.copy()

    def _load(self, world_path: str) -> None:
        """Load extent, walls and obstacles from a JSON world file."""
        try:
            with open(world_path, "r") as f:
                data = json.load(f)
            self.width = int(data["width"])
            self.height = int(data["height"])
            validate_extent(self.width, self.height)
            self.walls = np.zeros((self.height, self.width), dtype=bool)
            for seg in data.get("walls", []):
                start = _parse_cell(seg.get("from"))
                end = _parse_cell(seg.get("to", seg.get("from")))
                if start is None or end is None:
                    continue
                for cell in _segment_cells(start, end):
                    if in_bounds(cell, self.width, self.height):
                        self.walls[cell] = True
            # Obstacles: blocking entities with optional kind
            for ob in data.get("obstacles", []):
                cell = _parse_cell(ob.get("pos"))
                if cell is None or not in_bounds(cell, self.width, self.height):
                    continue
                kind = ob.get("kind", "obstacle")
                self.entities.append(Entity(cell[0], cell[1], kind=str(kind)))
        except Exception as e:
            raise RuntimeError(f"Failed to load world from {world_path}: {e}")
        logger.info(
            "Loaded %dx%d world with %d walls and %d obstacles from %s",
            self.width,
            self.height,
            int(self.walls.sum()),
            len(self.entities),
            world_path,
        )

    def get_resolution(self) -> Tuple[int, int]:
        """Return the grid extent as (width, height)."""
        return (self.width, self.height)

    def is_wall(self, row: int, col: int) -> bool:
        """Return True if (row, col) is a wall or out of bounds."""
        if not in_bounds((row, col), self.width, self.height):
            return True
        return bool(self.walls[row, col])

    def is_walkable(self, row: int, col: int) -> bool:
        return not self.is_wall(row, col)

    def entities_at(self, row: int, col: int) -> List[Entity]:
        return [e for e in self.entities if e.row == row and e.col == col]

    def is_occupied(self, row: int, col: int) -> bool:
        """Return True if a blocking entity stands on (row, col)."""
        return any(
            e.blocking and e.row == row and e.col == col for e in self.entities
        )

    def add_entity(self, entity: Entity) -> None:
        self.entities.append(entity)

    def remove_entity(self, entity: Entity) -> None:
        if entity in self.entities:
            self.entities.remove(entity)

    def add_wall(self, row: int, col: int) -> bool:
        """Mark (row, col) as a wall; return False if it is out of bounds."""
        if not in_bounds((row, col), self.width, self.height):
            return False
        self.walls[row, col] = True
        return True

    def remove_wall(self, row: int, col: int) -> None:
        if in_bounds((row, col), self.width, self.height):
            self.walls[row, col] = False

    def add_walls(self, cells: Iterable[Coord]) -> None:
        for row, col in cells:
            self.add_wall(row, col)

    def reset_walls(self) -> None:
        """Restore the walls the world was created with."""
        self.walls = self._initial_walls.copy()

    def wall_cells(self) -> List[Coord]:
        """Return every wall cell as (row, col), in row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self.walls)]
