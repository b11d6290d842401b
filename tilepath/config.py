# Movement costs
# Cost of a horizontal or vertical step between adjacent tiles
STRAIGHT_COST = 10
# Cost of a diagonal step (10 * sqrt(2), rounded)
DIAGONAL_COST = 14
# Scale applied to heuristic distances so they match the step costs
HEURISTIC_SCALE = STRAIGHT_COST

# Engine defaults
# Heuristic used when none is given: 'manhattan', 'euclidean' or 'chebyshev'
DEFAULT_HEURISTIC = "manhattan"
# Allow 8-directional movement
DEFAULT_ALLOW_DIAGONAL = True
# Accept a diagonal tile regardless of its two flanking tiles
DEFAULT_IGNORE_DIAGONAL_BARRIERS = False
# Accept a diagonal tile when at least one flanking tile is walkable
DEFAULT_ALLOW_CROSSING_BORDERS = True
# Corner of the screen that coordinates are measured from: 'bottom_left' or 'top_left'
DEFAULT_ORIGIN = "bottom_left"

# Tile codes used in map files
TILE_EMPTY = 0
TILE_WALL = 1

# Demo settings
# Tile size in pixels
TILE_WIDTH = 32
TILE_HEIGHT = 32
FPS = 30
# Map file: JSON definition of the demo grid (located in tilepath/ directory)
MAP_FILE = "maps/default.json"
WINDOW_TITLE = "tilepath A* demo"

# Colors
BACKGROUND_COLOR = (20, 20, 20)
FLOOR_COLOR = (60, 60, 60)
WALL_COLOR = (140, 110, 80)
GRID_LINE_COLOR = (35, 35, 35)
START_COLOR = (60, 180, 75)
TARGET_COLOR = (200, 60, 60)
PATH_COLOR = (240, 220, 80)
# Width of the path polyline in pixels
PATH_WIDTH = 3
# Radius of the path waypoint dots in pixels
WAYPOINT_RADIUS = 4
