from dataclasses import dataclass

from dungeon_engine.constants import PLAYER_HALF_HEIGHT, PLAYER_HALF_WIDTH, PLAYER_MOVE_SPEED
from dungeon_engine.world.bounds import Rect


@dataclass
class Actor:
    x: float
    y: float
    mirrored: bool = False
    half_width: float = PLAYER_HALF_WIDTH
    half_height: float = PLAYER_HALF_HEIGHT
    speed: float = PLAYER_MOVE_SPEED

    @property
    def position(self) -> tuple[float, float]:
        return self.x, self.y

    @position.setter
    def position(self, value: tuple[float, float]) -> None:
        self.x, self.y = value

    @property
    def bounds(self) -> Rect:
        return Rect(
            self.x - self.half_width,
            self.y - self.half_height,
            self.half_width * 2.0,
            self.half_height * 2.0,
        )
