"""Wall codes: which edges of a chunk are open and which are walled.

Bit 0 is north, bit 1 east, bit 2 south and bit 3 west. A set bit is a wall,
a clear bit is an opening. Two chunks sharing an edge must agree on it.
"""

from __future__ import annotations

import random
from enum import Enum

from dungeon_engine.constants import (
    LEVEL_NAME_PREFIX,
    MAX_WALL_CODE,
    PROJECT_FILE,
    START_LEVEL_NAME,
    START_WALL_CODE,
    WORLD_NAME,
)
from dungeon_engine.world.errors import LevelNameError, WallCodeError

NeighborCodes = tuple[int | None, int | None, int | None, int | None]


class Direction(Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def bit(self) -> int:
        return 1 << self.value

    @property
    def opposite(self) -> Direction:
        return Direction((self.value + 2) % 4)

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


def is_open(code: int, direction: Direction) -> bool:
    return not code & direction.bit


def validate_wall_code(code: int) -> int:
    if not 0 <= code <= MAX_WALL_CODE:
        raise WallCodeError(f"wall code {code} outside 0..{MAX_WALL_CODE}")
    return code


def generate_wall_code(neighbor_codes: NeighborCodes, rng: random.Random) -> int:
    """Pick a code for a new chunk from its (north, east, south, west) neighbors.

    Known neighbors force the shared edge to match whatever the neighbor has on
    its facing side; unknown neighbors leave the random draw alone.
    """
    code = rng.randint(0, MAX_WALL_CODE)
    for direction, neighbor in zip(Direction, neighbor_codes):
        if neighbor is None:
            continue
        if neighbor & direction.opposite.bit:
            code |= direction.bit
        else:
            code &= ~direction.bit
    return validate_wall_code(code)


def level_name_for_code(code: int) -> str:
    return f"{LEVEL_NAME_PREFIX}{validate_wall_code(code)}"


def wall_code_from_level_name(name: str) -> int:
    if name == START_LEVEL_NAME:
        return START_WALL_CODE
    if not name.startswith(LEVEL_NAME_PREFIX):
        raise LevelNameError(f"unrecognised level name {name!r}")
    digits = name[len(LEVEL_NAME_PREFIX):]
    if not digits.isdigit():
        raise LevelNameError(f"level name {name!r} has no numeric wall code")
    code = int(digits)
    if code > MAX_WALL_CODE:
        raise LevelNameError(f"level name {name!r} encodes wall code {code} outside 0..{MAX_WALL_CODE}")
    return code


def level_identifier(level_name: str) -> str:
    return f"{PROJECT_FILE}#worlds:{WORLD_NAME}/{level_name}"


def level_name_from_identifier(identifier: str) -> str:
    _, sep, level_name = identifier.rpartition("/")
    if not sep or not level_name:
        raise LevelNameError(f"identifier {identifier!r} does not name a level")
    return level_name
