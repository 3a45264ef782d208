import math

import pytest

from gridpath.heuristics import Heuristic
from gridpath.options import PathfindingOptions


def test_defaults():
    options = PathfindingOptions()
    assert options.allow_diagonal is False
    assert options.heuristic is Heuristic.MANHATTAN
    assert options.max_iterations == 1000
    assert math.isclose(options.diagonal_cost, math.sqrt(2), rel_tol=1e-9)
    assert options.is_walkable is None
    # Default predicate accepts every cell
    assert options.walkable()(-5, 99)


@pytest.mark.parametrize(
    "kwargs", [{"max_iterations": -1}, {"diagonal_cost": 0}, {"diagonal_cost": -1.5}]
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        PathfindingOptions(**kwargs)


def test_with_walkable_copies_other_fields():
    options = PathfindingOptions(
        allow_diagonal=True,
        heuristic=Heuristic.OCTILE,
        max_iterations=50,
        diagonal_cost=2.0,
    )

    def no_cells(row, col):
        return False

    copy = options.with_walkable(no_cells)
    assert copy is not options
    assert copy.is_walkable is no_cells
    assert copy.walkable() is no_cells
    assert options.is_walkable is None
    assert copy.allow_diagonal and copy.heuristic is Heuristic.OCTILE
    assert copy.max_iterations == 50 and copy.diagonal_cost == 2.0


def test_repr_mentions_settings():
    r = repr(PathfindingOptions(max_iterations=12))
    assert "max_iterations=12" in r
    assert "diagonal=False" in r
