import pyglet
from pyglet import gl
from pyglet.math import Mat4


def setup_gl() -> None:
    gl.glClearColor(0.04, 0.03, 0.05, 1.0)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)


def set_world_view(window: pyglet.window.Window, center: tuple[float, float], zoom: float) -> None:
    width, height = window.get_framebuffer_size()
    gl.glViewport(0, 0, width, height)

    cx, cy = center
    half_w = window.width / (2.0 * zoom)
    half_h = window.height / (2.0 * zoom)
    window.projection = Mat4.orthogonal_projection(cx - half_w, cx + half_w, cy - half_h, cy + half_h, -1.0, 1.0)
    window.view = Mat4()


def set_2d(window: pyglet.window.Window) -> None:
    width, height = window.get_framebuffer_size()
    gl.glViewport(0, 0, width, height)
    window.projection = Mat4.orthogonal_projection(0.0, float(window.width), 0.0, float(window.height), -1.0, 1.0)
    window.view = Mat4()
