import itertools
import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait

from dungeon_engine.constants import Cell, Vec2
from dungeon_engine.world.bounds import Chunk, ChunkBoundsIndex, ChunkState
from dungeon_engine.world.layout import ChunkLayoutGenerator
from dungeon_engine.world.obstacles import ObstacleGrid
from dungeon_engine.world.wall_codes import level_name_from_identifier, wall_code_from_level_name

logger = logging.getLogger(__name__)


class ChunkLoader:
    """Builds requested chunks off the main thread and publishes them per tick.

    Requested chunks stay invisible until ``drain_completed`` moves them into
    the bounds index and stamps their obstacles into the grid. Finished builds
    are applied strictly in request order: a build that finishes early waits
    for every earlier request to finish too.
    """

    CHUNK_WORKERS = 2
    CHUNKS_APPLIED_PER_UPDATE = 4

    def __init__(
        self,
        index: ChunkBoundsIndex,
        obstacles: ObstacleGrid,
        layout: ChunkLayoutGenerator,
        workers: int | None = None,
    ) -> None:
        self.index = index
        self.obstacles = obstacles
        self.layout = layout
        self._ids = itertools.count(1)
        self._requested: dict[int, Chunk] = {}
        self._futures: dict[int, Future[dict[Cell, int]]] = {}
        self._requests_total = 0
        self._executor = ThreadPoolExecutor(
            max_workers=workers or self.CHUNK_WORKERS,
            thread_name_prefix="chunkload",
        )

    def request_load(self, identifier: str, anchor: Vec2) -> Chunk:
        level_name = level_name_from_identifier(identifier)
        # Fails fast on names that do not encode a wall code.
        wall_code_from_level_name(level_name)

        chunk = Chunk(id=next(self._ids), level_name=level_name, origin=anchor)
        future = self._executor.submit(self.layout.layout, level_name, chunk.cell)
        self._requested[chunk.id] = chunk
        self._futures[chunk.id] = future
        self._requests_total += 1
        logger.debug("requested %s at %s (chunk %d)", identifier, anchor, chunk.id)
        return chunk

    def _apply_chunk(self, chunk: Chunk, obstacles: dict[Cell, int]) -> None:
        chunk.obstacles = obstacles
        chunk.state = ChunkState.BOUNDS_KNOWN
        self.obstacles.stamp_chunk(chunk)
        self.index.insert(chunk)
        logger.debug("chunk %d (%s) loaded at %s", chunk.id, chunk.level_name, chunk.origin)

    def drain_completed(self, limit: int | None = None) -> list[Chunk]:
        limit = self.CHUNKS_APPLIED_PER_UPDATE if limit is None else limit
        ready: list[int] = []
        for chunk_id, future in self._futures.items():
            if len(ready) >= limit or not future.done():
                break
            ready.append(chunk_id)

        applied: list[Chunk] = []
        for chunk_id in ready:
            chunk = self._requested.pop(chunk_id)
            future = self._futures.pop(chunk_id)
            if future.cancelled():
                continue
            self._apply_chunk(chunk, future.result())
            applied.append(chunk)
        return applied

    def wait_idle(self, timeout: float | None = None) -> None:
        wait(list(self._futures.values()), timeout=timeout)

    def pending(self) -> list[Chunk]:
        return list(self._requested.values())

    def diagnostics_snapshot(self) -> dict[str, int]:
        return {
            "requests_total": self._requests_total,
            "chunks_in_flight": len(self._futures),
            "chunks_ready": sum(1 for future in self._futures.values() if future.done()),
            "loaded_chunks": len(self.index),
        }

    def shutdown(self) -> None:
        for future in self._futures.values():
            future.cancel()
        self._executor.shutdown(wait=False, cancel_futures=True)
