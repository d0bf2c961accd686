from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from dungeon_engine.constants import CHUNK_SIZE, Cell, Vec2
from dungeon_engine.world.wall_codes import wall_code_from_level_name


class ChunkState(Enum):
    REQUESTED = "requested"
    BOUNDS_KNOWN = "bounds_known"


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Vec2) -> bool:
        px, py = point
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height


@dataclass
class Chunk:
    id: int
    level_name: str
    origin: Vec2
    size: float = CHUNK_SIZE
    state: ChunkState = ChunkState.REQUESTED
    obstacles: dict[Cell, int] = field(default_factory=dict, repr=False)

    @property
    def bounds(self) -> Rect:
        return Rect(self.origin[0], self.origin[1], self.size, self.size)

    @property
    def wall_code(self) -> int:
        return wall_code_from_level_name(self.level_name)

    @property
    def cell(self) -> Cell:
        return cell_at(self.origin)


def cell_at(point: Vec2) -> Cell:
    return math.floor(point[0] / CHUNK_SIZE), math.floor(point[1] / CHUNK_SIZE)


def cell_anchor(cell: Cell) -> Vec2:
    return float(cell[0] * CHUNK_SIZE), float(cell[1] * CHUNK_SIZE)


def cell_center(cell: Cell) -> Vec2:
    x, y = cell_anchor(cell)
    return x + CHUNK_SIZE / 2.0, y + CHUNK_SIZE / 2.0


class ChunkBoundsIndex:
    """World rectangles of every chunk whose bounds are known.

    Containment is inclusive on all four edges, so a point on a shared edge
    lies in both neighbors; the chunk inserted first wins.
    """

    def __init__(self) -> None:
        self._chunks: dict[int, Chunk] = {}

    def insert(self, chunk: Chunk) -> None:
        if chunk.state is not ChunkState.BOUNDS_KNOWN:
            raise ValueError(f"chunk {chunk.id} ({chunk.level_name}) has no known bounds yet")
        self._chunks.setdefault(chunk.id, chunk)

    def chunk_at(self, point: Vec2) -> Chunk | None:
        for chunk in self._chunks.values():
            if chunk.bounds.contains(point):
                return chunk
        return None

    def any_contains(self, point: Vec2) -> bool:
        return self.chunk_at(point) is not None

    def __contains__(self, chunk_id: object) -> bool:
        return chunk_id in self._chunks

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self._chunks.values())

    def __len__(self) -> int:
        return len(self._chunks)
