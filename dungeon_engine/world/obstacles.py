import math

from dungeon_engine.constants import GRID_CELL_SIZE, Cell, Vec2
from dungeon_engine.world.bounds import Chunk


class ObstacleGrid:
    def __init__(self, cell_size: int = GRID_CELL_SIZE) -> None:
        self.cell_size = cell_size
        self._cells: dict[Cell, int] = {}

    def cell_coords(self, point: Vec2) -> Cell:
        x, y = point
        return math.floor(x / self.cell_size), math.floor(y / self.cell_size)

    def grid_value_at(self, point: Vec2) -> int | None:
        return self._cells.get(self.cell_coords(point))

    def set_cell(self, cell: Cell, value: int | None) -> None:
        if value is None:
            self._cells.pop(cell, None)
        else:
            self._cells[cell] = value

    def stamp_chunk(self, chunk: Chunk) -> None:
        ox, oy = self.cell_coords(chunk.origin)
        for (lx, ly), value in chunk.obstacles.items():
            self._cells[(ox + lx, oy + ly)] = value

    def __len__(self) -> int:
        return len(self._cells)
