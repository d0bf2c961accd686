from dungeon_engine.world.bounds import Chunk, ChunkBoundsIndex, ChunkState, Rect, cell_anchor, cell_at, cell_center
from dungeon_engine.world.errors import DungeonDataError, LevelNameError, WallCodeError
from dungeon_engine.world.streaming import SpawnRequest, StreamingController, StreamState
from dungeon_engine.world.wall_codes import Direction, generate_wall_code, is_open, level_name_for_code, wall_code_from_level_name

__all__ = [
    "Chunk",
    "ChunkBoundsIndex",
    "ChunkState",
    "Direction",
    "DungeonDataError",
    "LevelNameError",
    "Rect",
    "SpawnRequest",
    "StreamState",
    "StreamingController",
    "WallCodeError",
    "cell_anchor",
    "cell_at",
    "cell_center",
    "generate_wall_code",
    "is_open",
    "level_name_for_code",
    "wall_code_from_level_name",
]
