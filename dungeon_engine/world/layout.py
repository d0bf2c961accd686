import random

from dungeon_engine.constants import (
    CELLS_PER_CHUNK,
    DOOR_WIDTH_CELLS,
    PILLAR_TILE,
    START_LEVEL_NAME,
    WALL_TILE,
    Cell,
)
from dungeon_engine.world.wall_codes import Direction, is_open, wall_code_from_level_name


class ChunkLayoutGenerator:
    def __init__(
        self,
        seed: int,
        cells_per_chunk: int = CELLS_PER_CHUNK,
        door_width: int = DOOR_WIDTH_CELLS,
        max_pillars: int = 3,
    ) -> None:
        if door_width > cells_per_chunk - 2:
            raise ValueError("door must leave at least one wall cell on each side")
        self.seed = seed
        self.cells_per_chunk = cells_per_chunk
        self.door_width = door_width
        self.max_pillars = max_pillars

        door_start = (cells_per_chunk - door_width) // 2
        self._door_span = range(door_start, door_start + door_width)

    def _is_door(self, lx: int, ly: int, code: int) -> bool:
        last = self.cells_per_chunk - 1
        if ly == last and lx in self._door_span:
            return is_open(code, Direction.NORTH)
        if lx == last and ly in self._door_span:
            return is_open(code, Direction.EAST)
        if ly == 0 and lx in self._door_span:
            return is_open(code, Direction.SOUTH)
        if lx == 0 and ly in self._door_span:
            return is_open(code, Direction.WEST)
        return False

    def _pillar_candidates(self) -> list[Cell]:
        last = self.cells_per_chunk - 1
        candidates: list[Cell] = []
        for lx in range(1, last):
            for ly in range(1, last):
                # Keep the corridors between the doors and the center clear.
                if lx in self._door_span or ly in self._door_span:
                    continue
                candidates.append((lx, ly))
        return candidates

    def layout(self, level_name: str, cell: Cell) -> dict[Cell, int]:
        code = wall_code_from_level_name(level_name)
        last = self.cells_per_chunk - 1

        obstacles: dict[Cell, int] = {}
        for lx in range(self.cells_per_chunk):
            for ly in range(self.cells_per_chunk):
                on_border = lx in (0, last) or ly in (0, last)
                if on_border and not self._is_door(lx, ly, code):
                    obstacles[(lx, ly)] = WALL_TILE

        if level_name == START_LEVEL_NAME:
            return obstacles

        rng = random.Random(f"{self.seed}:{cell[0]}:{cell[1]}")
        candidates = self._pillar_candidates()
        count = min(len(candidates), rng.randint(0, self.max_pillars))
        for pillar in rng.sample(candidates, count):
            obstacles[pillar] = PILLAR_TILE
        return obstacles
