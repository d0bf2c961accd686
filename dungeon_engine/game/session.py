import logging
import random

from dungeon_engine.constants import MAX_FRAME_SECONDS, PLAYER_MOVE_SPEED, START_LEVEL_NAME, Cell
from dungeon_engine.entities.actor import Actor
from dungeon_engine.gameplay.movement import DirectionalInput, MoveResult, resolve_move
from dungeon_engine.world.bounds import Chunk, ChunkBoundsIndex, cell_anchor, cell_center
from dungeon_engine.world.layout import ChunkLayoutGenerator
from dungeon_engine.world.loader import ChunkLoader
from dungeon_engine.world.obstacles import ObstacleGrid
from dungeon_engine.world.streaming import SpawnRequest, StreamingController, StreamState
from dungeon_engine.world.wall_codes import level_identifier

logger = logging.getLogger(__name__)


class DungeonSession:
    """One dungeon run: owns the world state and runs the per-tick pass.

    Each ``update`` applies finished chunk loads, then resolves movement, then
    lets the streaming controller react to where the actor ended up. Frame
    times longer than MAX_FRAME_SECONDS are shortened to it, so a stalled frame
    moves the actor at most that far.
    """

    def __init__(
        self,
        seed: int = 90125,
        speed: float = PLAYER_MOVE_SPEED,
        start_cell: Cell = (0, 0),
        loader_workers: int | None = None,
    ) -> None:
        self.seed = seed
        self.rng = random.Random(seed)
        self.index = ChunkBoundsIndex()
        self.obstacles = ObstacleGrid()
        self.loader = ChunkLoader(
            self.index,
            self.obstacles,
            ChunkLayoutGenerator(seed),
            workers=loader_workers,
        )
        self.streaming = StreamingController(self.index, self.rng, start_cell=start_cell)

        x, y = cell_center(start_cell)
        self.actor = Actor(x, y, speed=speed)
        self.start_chunk = self.loader.request_load(level_identifier(START_LEVEL_NAME), cell_anchor(start_cell))
        logger.info("dungeon session started with seed %d", seed)

    @property
    def is_loading(self) -> bool:
        return self.streaming.state is StreamState.LOADING

    @property
    def current_chunk(self) -> Chunk | None:
        return self.streaming.current_chunk

    def update(self, dt: float, controls: DirectionalInput) -> list[SpawnRequest]:
        dt = min(dt, MAX_FRAME_SECONDS)
        self.loader.drain_completed()

        self.apply_move(resolve_move(self.actor, controls, dt, self.index, self.obstacles))

        requests = self.streaming.evaluate(self.actor.position)
        for request in requests:
            self.loader.request_load(request.identifier, request.anchor)
        return requests

    def apply_move(self, result: MoveResult) -> None:
        self.actor.mirrored = result.mirrored
        if result.moved:
            self.actor.position = result.position

    def diagnostics_snapshot(self) -> dict[str, object]:
        snapshot: dict[str, object] = {}
        snapshot.update(self.loader.diagnostics_snapshot())
        snapshot.update(self.streaming.diagnostics_snapshot())
        return snapshot

    def shutdown(self) -> None:
        self.loader.shutdown()
