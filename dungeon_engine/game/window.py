import logging

import pyglet
from pyglet.window import key

from dungeon_engine.constants import (
    ACTOR_COLOR,
    CAMERA_MAX_ZOOM,
    CAMERA_MIN_ZOOM,
    CAMERA_ZOOM,
    CAMERA_ZOOM_STEP,
    FLOOR_COLOR,
    GRID_CELL_SIZE,
    TICKS_PER_SECOND,
    TILE_COLORS,
    WINDOW_RESOLUTION,
)
from dungeon_engine.game.session import DungeonSession
from dungeon_engine.gameplay.movement import DirectionalInput
from dungeon_engine.graphics.rendering import set_2d, set_world_view
from dungeon_engine.world import Chunk

logger = logging.getLogger(__name__)


class GameWindow(pyglet.window.Window):
    UP_KEYS = (key.UP, key.W)
    RIGHT_KEYS = (key.RIGHT, key.D)
    DOWN_KEYS = (key.DOWN, key.S)
    LEFT_KEYS = (key.LEFT, key.A)

    def __init__(self, session: DungeonSession):
        width, height = WINDOW_RESOLUTION
        super().__init__(width=width, height=height, caption="Dungeon of Madness", resizable=False)
        self.session = session
        self.zoom = CAMERA_ZOOM

        self.keys = key.KeyStateHandler()
        self.push_handlers(self.keys)
        pyglet.clock.schedule_interval(self.update, 1.0 / TICKS_PER_SECOND)

        self.world_batch = pyglet.graphics.Batch()
        self._floor_group = pyglet.graphics.Group(order=0)
        self._tile_group = pyglet.graphics.Group(order=1)
        self._actor_group = pyglet.graphics.Group(order=2)
        self._chunk_shapes: dict[int, list[pyglet.shapes.Rectangle]] = {}

        actor = self.session.actor
        box = actor.bounds
        self.actor_shape = pyglet.shapes.Rectangle(
            box.x,
            box.y,
            box.width,
            box.height,
            color=self._shade_color(ACTOR_COLOR, 1.0),
            batch=self.world_batch,
            group=self._actor_group,
        )
        self.facing_marker = pyglet.shapes.Rectangle(
            0,
            0,
            2,
            actor.half_height * 2.0,
            color=self._shade_color(ACTOR_COLOR, 0.5),
            batch=self.world_batch,
            group=self._actor_group,
        )

        self.ui_batch = pyglet.graphics.Batch()
        self.label = pyglet.text.Label(
            "",
            x=10,
            y=self.height - 10,
            anchor_x="left",
            anchor_y="top",
            color=(255, 255, 255, 255),
            batch=self.ui_batch,
        )
        self._loading_label = pyglet.text.Label(
            "Generating Dungeon",
            x=self.width // 2,
            y=self.height // 2,
            anchor_x="center",
            anchor_y="center",
            font_size=28,
            color=(255, 255, 255, 255),
        )

    def controls(self) -> DirectionalInput:
        return DirectionalInput(
            up=any(self.keys[k] for k in self.UP_KEYS),
            right=any(self.keys[k] for k in self.RIGHT_KEYS),
            down=any(self.keys[k] for k in self.DOWN_KEYS),
            left=any(self.keys[k] for k in self.LEFT_KEYS),
        )

    def update(self, dt: float) -> None:
        self.session.update(dt, self.controls())
        self._sync_chunk_shapes()
        self._sync_actor_shape()

        x, y = self.session.actor.position
        chunk = self.session.current_chunk
        chunk_name = chunk.level_name if chunk is not None else "-"
        self.label.text = f"XY: ({x:.1f}, {y:.1f})  Chunk: {chunk_name}  Loaded: {len(self.session.index)}"

    def _sync_chunk_shapes(self) -> None:
        for chunk in self.session.index:
            if chunk.id not in self._chunk_shapes:
                self._chunk_shapes[chunk.id] = self._build_chunk_shapes(chunk)

    def _build_chunk_shapes(self, chunk: Chunk) -> list[pyglet.shapes.Rectangle]:
        ox, oy = chunk.origin
        shapes = [
            pyglet.shapes.Rectangle(
                ox,
                oy,
                chunk.size,
                chunk.size,
                color=self._shade_color(FLOOR_COLOR, 1.0),
                batch=self.world_batch,
                group=self._floor_group,
            )
        ]
        for (lx, ly), value in chunk.obstacles.items():
            color = TILE_COLORS.get(value, (1.0, 0.0, 1.0))
            shapes.append(
                pyglet.shapes.Rectangle(
                    ox + lx * GRID_CELL_SIZE,
                    oy + ly * GRID_CELL_SIZE,
                    GRID_CELL_SIZE,
                    GRID_CELL_SIZE,
                    color=self._shade_color(color, 1.0),
                    batch=self.world_batch,
                    group=self._tile_group,
                )
            )
        return shapes

    def _sync_actor_shape(self) -> None:
        actor = self.session.actor
        box = actor.bounds
        self.actor_shape.x = box.x
        self.actor_shape.y = box.y
        marker_x = actor.x - actor.half_width if actor.mirrored else actor.x + actor.half_width - 2
        self.facing_marker.x = marker_x
        self.facing_marker.y = actor.y - actor.half_height

    @staticmethod
    def _shade_color(color: tuple[float, float, float], shade: float) -> tuple[int, int, int]:
        r = max(0, min(255, int(color[0] * shade * 255)))
        g = max(0, min(255, int(color[1] * shade * 255)))
        b = max(0, min(255, int(color[2] * shade * 255)))
        return r, g, b

    def on_mouse_scroll(self, x, y, scroll_x, scroll_y):
        if scroll_y:
            self.zoom = max(CAMERA_MIN_ZOOM, min(CAMERA_MAX_ZOOM, self.zoom + scroll_y * CAMERA_ZOOM_STEP))

    def on_draw(self):
        self.clear()
        if self.session.is_loading:
            set_2d(self)
            self._loading_label.draw()
            return

        set_world_view(self, self.session.actor.position, self.zoom)
        self.world_batch.draw()

        set_2d(self)
        self.ui_batch.draw()

    def on_close(self):
        logger.info("closing, %s", self.session.diagnostics_snapshot())
        self.session.shutdown()
        super().on_close()
