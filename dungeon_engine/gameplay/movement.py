"""Eight-way actor movement checked against the obstacle grid.

Only two sensor points are tested, the top-left and top-right corners of the
actor's box at the candidate position. A hit on either one rejects the whole
step; there is no sliding along walls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from dungeon_engine.constants import Vec2
from dungeon_engine.entities.actor import Actor

_DIAGONAL = 1.0 / math.sqrt(2.0)

# (up, right, down, left) -> heading
_HEADINGS: dict[tuple[bool, bool, bool, bool], Vec2] = {
    (True, False, False, False): (0.0, 1.0),
    (False, True, False, False): (1.0, 0.0),
    (False, False, True, False): (0.0, -1.0),
    (False, False, False, True): (-1.0, 0.0),
    (True, True, False, False): (_DIAGONAL, _DIAGONAL),
    (False, True, True, False): (_DIAGONAL, -_DIAGONAL),
    (False, False, True, True): (-_DIAGONAL, -_DIAGONAL),
    (True, False, False, True): (-_DIAGONAL, _DIAGONAL),
}


class ChunkLookup(Protocol):
    def any_contains(self, point: Vec2) -> bool: ...


class ObstacleLookup(Protocol):
    def grid_value_at(self, point: Vec2) -> int | None: ...


@dataclass(frozen=True)
class DirectionalInput:
    up: bool = False
    right: bool = False
    down: bool = False
    left: bool = False

    def as_tuple(self) -> tuple[bool, bool, bool, bool]:
        return self.up, self.right, self.down, self.left


@dataclass(frozen=True)
class MoveResult:
    position: Vec2
    moved: bool
    mirrored: bool


def heading_for(controls: DirectionalInput) -> Vec2 | None:
    return _HEADINGS.get(controls.as_tuple())


def facing_for(heading: Vec2, mirrored: bool) -> bool:
    if heading[0] > 0:
        return False
    if heading[0] < 0:
        return True
    return mirrored


def sensor_points(candidate: Vec2, half_width: float, half_height: float) -> tuple[Vec2, Vec2]:
    cx, cy = candidate
    return (cx - half_width, cy + half_height), (cx + half_width, cy + half_height)


def resolve_move(
    actor: Actor,
    controls: DirectionalInput,
    dt: float,
    chunks: ChunkLookup,
    obstacles: ObstacleLookup,
) -> MoveResult:
    position = actor.position
    heading = heading_for(controls)
    if heading is None:
        return MoveResult(position, False, actor.mirrored)

    mirrored = facing_for(heading, actor.mirrored)
    if not chunks.any_contains(position):
        return MoveResult(position, False, mirrored)

    distance = actor.speed * dt
    candidate = (position[0] + heading[0] * distance, position[1] + heading[1] * distance)
    left_point, right_point = sensor_points(candidate, actor.half_width, actor.half_height)
    if obstacles.grid_value_at(left_point) is not None or obstacles.grid_value_at(right_point) is not None:
        return MoveResult(position, False, mirrored)
    return MoveResult(candidate, True, mirrored)
