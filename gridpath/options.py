"""
Options controlling a single pathfinding call.
"""

from __future__ import annotations
from typing import Optional, Union

from .config import DEFAULT_DIAGONAL_COST, DEFAULT_MAX_ITERATIONS
from .heuristics import Heuristic
from .point import WalkableFn, always_walkable


class PathfindingOptions:
    """
    Search configuration.
    Attributes:
        allow_diagonal (bool): Permit 8-directional movement.
        heuristic (Heuristic): Distance estimate guiding the search.
        max_iterations (int): Hard cap on node expansions before giving up.
        diagonal_cost (float): Cost of one diagonal step.
        is_walkable (callable): Predicate (row, col) -> bool; None means every cell is walkable.
    """

    def __init__(
        self,
        allow_diagonal: bool = False,
        heuristic: Union[Heuristic, str] = Heuristic.MANHATTAN,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        diagonal_cost: float = DEFAULT_DIAGONAL_COST,
        is_walkable: Optional[WalkableFn] = None,
    ) -> None:
        if max_iterations < 0:
            raise ValueError(
                f"max_iterations must be non-negative, got {max_iterations}"
            )
        if diagonal_cost <= 0:
            raise ValueError(
                f"diagonal_cost must be positive, got {diagonal_cost}"
            )
        self.allow_diagonal = bool(allow_diagonal)
        self.heuristic = heuristic
        self.max_iterations = int(max_iterations)
        self.diagonal_cost = float(diagonal_cost)
        self.is_walkable = is_walkable

    def walkable(self) -> WalkableFn:
        """Return the configured predicate, or one that accepts every cell."""
        return self.is_walkable or always_walkable

    def with_walkable(self, is_walkable: WalkableFn) -> PathfindingOptions:
        """Return a copy of these options using a different walkability predicate."""
        return PathfindingOptions(
            allow_diagonal=self.allow_diagonal,
            heuristic=self.heuristic,
            max_iterations=self.max_iterations,
            diagonal_cost=self.diagonal_cost,
            is_walkable=is_walkable,
        )

    def __repr__(self) -> str:
        return (
            f"<PathfindingOptions diagonal={self.allow_diagonal} "
            f"heuristic={self.heuristic} max_iterations={self.max_iterations} "
            f"diagonal_cost={self.diagonal_cost:.3f}>"
        )
