from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum

from dungeon_engine.constants import Cell, Vec2
from dungeon_engine.world.bounds import Chunk, ChunkBoundsIndex, cell_anchor, cell_center
from dungeon_engine.world.wall_codes import (
    Direction,
    generate_wall_code,
    is_open,
    level_identifier,
    level_name_for_code,
)

logger = logging.getLogger(__name__)


class StreamState(Enum):
    LOADING = "loading"
    PLAYING = "playing"


@dataclass(frozen=True)
class SpawnRequest:
    cell: Cell
    anchor: Vec2
    wall_code: int
    level_name: str

    @property
    def identifier(self) -> str:
        return level_identifier(self.level_name)


class StreamingController:
    """Decides which chunks to load next as the actor moves.

    ``evaluate`` returns spawn requests instead of loading anything itself.
    Cells already requested but not yet loaded are remembered with their wall
    codes, so they are neither requested twice nor treated as unknown
    neighbors.
    """

    def __init__(self, index: ChunkBoundsIndex, rng: random.Random, start_cell: Cell = (0, 0)) -> None:
        self.index = index
        self.rng = rng
        self.start_cell = start_cell
        self.state = StreamState.LOADING
        self.current_chunk: Chunk | None = None
        self._pending: dict[Cell, int] = {}
        self._requests_issued = 0

    def _loaded_chunk_in(self, cell: Cell) -> Chunk | None:
        chunk = self.index.chunk_at(cell_center(cell))
        if chunk is not None:
            self._pending.pop(cell, None)
        return chunk

    def known_code(self, cell: Cell) -> int | None:
        chunk = self._loaded_chunk_in(cell)
        if chunk is not None:
            return chunk.wall_code
        return self._pending.get(cell)

    def is_occupied(self, cell: Cell) -> bool:
        return self._loaded_chunk_in(cell) is not None or cell in self._pending

    def neighbor_codes(self, cell: Cell) -> tuple[int | None, int | None, int | None, int | None]:
        cx, cy = cell
        codes = []
        for direction in Direction:
            dx, dy = direction.offset
            codes.append(self.known_code((cx + dx, cy + dy)))
        return codes[0], codes[1], codes[2], codes[3]

    def request_spawn(self, cell: Cell) -> SpawnRequest | None:
        if self.is_occupied(cell):
            return None
        code = generate_wall_code(self.neighbor_codes(cell), self.rng)
        request = SpawnRequest(
            cell=cell,
            anchor=cell_anchor(cell),
            wall_code=code,
            level_name=level_name_for_code(code),
        )
        self._pending[cell] = code
        self._requests_issued += 1
        logger.debug("spawn %s at cell %s", request.level_name, cell)
        return request

    def _spawn_neighbors(self, cell: Cell, code: int) -> list[SpawnRequest]:
        cx, cy = cell
        requests: list[SpawnRequest] = []
        for direction in Direction:
            if not is_open(code, direction):
                continue
            dx, dy = direction.offset
            request = self.request_spawn((cx + dx, cy + dy))
            if request is not None:
                requests.append(request)
        return requests

    def evaluate(self, actor_position: Vec2) -> list[SpawnRequest]:
        if self.state is StreamState.LOADING:
            return self._evaluate_loading()
        return self._evaluate_playing(actor_position)

    def _evaluate_loading(self) -> list[SpawnRequest]:
        start = self._loaded_chunk_in(self.start_cell)
        if start is None:
            return []
        self.current_chunk = start
        self.state = StreamState.PLAYING
        logger.info("start chunk %s loaded, streaming neighbors", start.level_name)
        # The start chunk is open on every side whatever its name says.
        return self._spawn_neighbors(self.start_cell, 0)

    def _evaluate_playing(self, actor_position: Vec2) -> list[SpawnRequest]:
        chunk = self.index.chunk_at(actor_position)
        if chunk is None:
            logger.info("actor out of bounds at (%.1f, %.1f)", actor_position[0], actor_position[1])
            return []
        if chunk is self.current_chunk:
            return []
        self.current_chunk = chunk
        logger.debug("entered chunk %d (%s)", chunk.id, chunk.level_name)
        return self._spawn_neighbors(chunk.cell, chunk.wall_code)

    def diagnostics_snapshot(self) -> dict[str, object]:
        return {
            "state": self.state.value,
            "current_chunk": None if self.current_chunk is None else self.current_chunk.id,
            "pending_requests": len(self._pending),
            "requests_issued": self._requests_issued,
        }
