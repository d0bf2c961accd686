Vec2 = tuple[float, float]
Cell = tuple[int, int]

TICKS_PER_SECOND = 60
MAX_FRAME_SECONDS = 0.25

WINDOW_RESOLUTION = (1280, 960)

PROJECT_FILE = "ldtk/dungeon_of_madness.ldtk"
WORLD_NAME = "Dungeon"
START_LEVEL_NAME = "Start_Hall"
LEVEL_NAME_PREFIX = "Level_"

CHUNK_SIZE = 144
GRID_CELL_SIZE = 16
CELLS_PER_CHUNK = CHUNK_SIZE // GRID_CELL_SIZE
DOOR_WIDTH_CELLS = 3

MAX_WALL_CODE = 14
START_WALL_CODE = 0

PLAYER_MOVE_SPEED = 40.0
PLAYER_HALF_WIDTH = 8.0
PLAYER_HALF_HEIGHT = 4.0

CAMERA_ZOOM = 2.5
CAMERA_MIN_ZOOM = 1.0
CAMERA_MAX_ZOOM = 6.0
CAMERA_ZOOM_STEP = 0.25

WALL_TILE = 1
PILLAR_TILE = 2

TILE_COLORS = {
    WALL_TILE: (0.36, 0.30, 0.40),
    PILLAR_TILE: (0.50, 0.44, 0.38),
}
FLOOR_COLOR = (0.14, 0.12, 0.16)
ACTOR_COLOR = (0.86, 0.84, 0.74)
