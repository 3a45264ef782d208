import logging
import math

# Search defaults
# Upper bound on A* loop iterations (one node expansion per iteration)
DEFAULT_MAX_ITERATIONS = 1000
# Cost of a diagonal step when diagonal movement is enabled
DEFAULT_DIAGONAL_COST = math.sqrt(2)
# Diagonal unit assumed by the Octile heuristic, independent of DEFAULT_DIAGONAL_COST
OCTILE_DIAGONAL_UNIT = math.sqrt(2)

# Demo grid settings
GRID_WIDTH = 30
GRID_HEIGHT = 20
# Size of one grid cell on screen, in pixels
CELL_SIZE = 28
# Height of the status bar under the grid, in pixels
STATUS_BAR_HEIGHT = 56
SCREEN_WIDTH = GRID_WIDTH * CELL_SIZE
SCREEN_HEIGHT = GRID_HEIGHT * CELL_SIZE + STATUS_BAR_HEIGHT
FPS = 30
# Seconds between agent steps while following a path
FOLLOW_STEP_INTERVAL = 0.15
# Starting cells for the player and the cursor (row, col)
PLAYER_START = (5, 5)
CURSOR_START = (10, 15)

# World file: JSON definition of walls and obstacles
WORLD_FILE = 'worlds/default.json'
# Tile codes used in world map rows
TILE_EMPTY = 0
TILE_WALL = 1

# Colors (RGB, 0-255)
BACKGROUND_COLOR = (20, 20, 24)
GRID_LINE_COLOR = (40, 40, 48)
WALL_COLOR = (90, 90, 90)
OBSTACLE_COLOR = (150, 90, 40)
PATH_COLOR = (0, 190, 200)
GOAL_COLOR = (210, 50, 50)
PLAYER_COLOR = (40, 200, 60)
CURSOR_COLOR = (230, 210, 40)
STATUS_TEXT_COLOR = (220, 220, 220)
# Font size for the status bar text
STATUS_FONT_SIZE = 20

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'
