import math

from gridpath import config


def test_search_defaults():
    assert config.DEFAULT_MAX_ITERATIONS == 1000
    assert math.isclose(config.DEFAULT_DIAGONAL_COST, math.sqrt(2), rel_tol=1e-9)
    # Octile keeps its own diagonal unit
    assert math.isclose(config.OCTILE_DIAGONAL_UNIT, math.sqrt(2), rel_tol=1e-9)


def test_screen_fits_grid_and_status_bar():
    assert config.SCREEN_WIDTH == config.GRID_WIDTH * config.CELL_SIZE
    assert config.SCREEN_HEIGHT > config.GRID_HEIGHT * config.CELL_SIZE


def test_world_file_extension():
    # World file should be a JSON definition
    assert config.WORLD_FILE.endswith(".json")


def test_start_cells_inside_grid():
    for row, col in (config.PLAYER_START, config.CURSOR_START):
        assert 0 <= row < config.GRID_HEIGHT
        assert 0 <= col < config.GRID_WIDTH
