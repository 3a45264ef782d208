import pytest

from gridpath.options import PathfindingOptions
from gridpath.pathfinding import find_path
from gridpath.smoothing import (
    has_exact_line_of_sight,
    has_line_of_sight,
    smooth_path,
)


def open_grid(row, col):
    return True


def walls(*cells):
    blocked = set(cells)
    return lambda row, col: (row, col) not in blocked


@pytest.mark.parametrize("exact", [False, True])
@pytest.mark.parametrize(
    "path",
    [
        [(0, c) for c in range(6)],
        [(r, 3) for r in range(7, 0, -1)],
        [(i, i) for i in range(5)],
    ],
)
def test_straight_corridor_collapses_to_endpoints(path, exact):
    assert smooth_path(path, open_grid, exact=exact) == [path[0], path[-1]]


@pytest.mark.parametrize("path", [[], [(0, 0)], [(0, 0), (0, 1)]])
def test_short_paths_returned_unchanged(path):
    result = smooth_path(path, open_grid)
    assert result == path
    assert result is not path


def test_corner_kept_when_shortcut_is_blocked():
    path = [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]
    assert smooth_path(path, open_grid) == [(0, 0), (2, 2)]
    assert smooth_path(path, walls((1, 1))) == [(0, 0), (0, 2), (2, 2)]


def test_smoothed_search_result_keeps_endpoints_and_shrinks():
    column = [(row, 4) for row in range(6)]
    is_walkable = walls(*column)
    options = PathfindingOptions(is_walkable=is_walkable)
    path = find_path((0, 0), (0, 8), 9, 8, options)
    smoothed = smooth_path(path, is_walkable)
    assert smoothed[0] == path[0] and smoothed[-1] == path[-1]
    assert len(smoothed) <= len(path)
    assert all(cell in path for cell in smoothed)
    for a, b in zip(smoothed, smoothed[1:]):
        assert has_line_of_sight(a, b, is_walkable)


def test_line_of_sight_same_cell():
    assert has_line_of_sight((3, 3), (3, 3), walls((3, 3)))
    assert not has_exact_line_of_sight((3, 3), (3, 3), walls((3, 3)))


def test_line_of_sight_checks_endpoints():
    assert not has_line_of_sight((0, 0), (0, 3), walls((0, 3)))
    assert not has_exact_line_of_sight((0, 0), (0, 3), walls((0, 3)))


def test_line_of_sight_rounds_halves_up():
    # Midpoint sample (0.5, 1) rounds to (1, 1)
    assert not has_line_of_sight((0, 0), (1, 2), walls((1, 1)))
    assert has_line_of_sight((0, 0), (1, 2), walls((0, 1)))


def test_rounded_sampling_misses_thin_obstacle():
    # Segment (0,0)-(2,1) crosses cell (1,0) but samples only (1,1)
    is_walkable = walls((1, 0))
    assert has_line_of_sight((0, 0), (2, 1), is_walkable)
    assert not has_exact_line_of_sight((0, 0), (2, 1), is_walkable)


def test_exact_line_of_sight_blocks_corner_squeeze():
    # Pure diagonal through the corner shared with (1,0)
    is_walkable = walls((1, 0))
    assert has_line_of_sight((0, 0), (1, 1), is_walkable)
    assert not has_exact_line_of_sight((0, 0), (1, 1), is_walkable)


def test_exact_line_of_sight_clear_and_blocked():
    assert has_exact_line_of_sight((0, 0), (3, 7), open_grid)
    assert has_exact_line_of_sight((5, 6), (0, 0), open_grid)
    assert not has_exact_line_of_sight((0, 0), (0, 5), walls((0, 2)))
    assert not has_exact_line_of_sight((4, 0), (0, 4), walls((2, 2)))


def test_exact_smoothing_is_stricter():
    is_walkable = walls((1, 0))
    path = [(0, 0), (0, 1), (1, 1), (2, 1)]
    assert smooth_path(path, is_walkable) == [(0, 0), (2, 1)]
    assert smooth_path(path, is_walkable, exact=True) == [(0, 0), (0, 1), (2, 1)]
