"""Entities placed on the grid (obstacles, markers, agents)."""

from __future__ import annotations

from .point import Coord


class Entity:
    """
    Something occupying one grid cell.
    Attributes:
        row (int), col (int): Grid cell of the entity.
        kind (str): Identifier for the entity type (used for selecting a color).
        blocking (bool): Whether the entity makes its cell non-walkable.
    """

    def __init__(
        self, row: int, col: int, kind: str = "obstacle", blocking: bool = True
    ) -> None:
        self.row = int(row)
        self.col = int(col)
        self.kind = kind
        self.blocking = blocking

    def position(self) -> Coord:
        """Return current (row, col) cell of the entity."""
        return (self.row, self.col)

    def set_position(self, row: int, col: int) -> None:
        self.row = int(row)
        self.col = int(col)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} kind={self.kind} row={self.row} col={self.col}>"
