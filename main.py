import argparse
import logging

import pyglet

from dungeon_engine.constants import PLAYER_MOVE_SPEED
from dungeon_engine.game.session import DungeonSession
from dungeon_engine.game.window import GameWindow
from dungeon_engine.graphics.rendering import setup_gl


def run(seed: int = 90125, speed: float = PLAYER_MOVE_SPEED) -> None:
    session = DungeonSession(seed=seed, speed=speed)
    GameWindow(session)
    setup_gl()
    pyglet.app.run()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Dungeon of Madness")
    parser.add_argument("--seed", type=int, default=90125, help="Dungeon seed (same seed => same dungeon)")
    parser.add_argument("--speed", type=float, default=PLAYER_MOVE_SPEED, help="Player move speed in world units per second")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the dungeon_engine loggers",
    )
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logging.getLogger("dungeon_engine").setLevel(args.log_level)
    run(seed=args.seed, speed=args.speed)
