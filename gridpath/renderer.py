"""
OpenGL-based renderer for the pathfinding demo: grid cells as colored quads
plus a status bar drawn from a text texture.
"""

from __future__ import annotations
import logging
import pygame
from typing import TYPE_CHECKING, List, Optional, Sequence

try:
    import OpenGL.GL as gl  # noqa: N811
except ImportError:
    raise ImportError(
        "PyOpenGL is required to run this renderer. "
        "Please install via: pip install PyOpenGL"
    )

from .config import (
    BACKGROUND_COLOR,
    CELL_SIZE,
    CURSOR_COLOR,
    GOAL_COLOR,
    GRID_LINE_COLOR,
    OBSTACLE_COLOR,
    PATH_COLOR,
    PLAYER_COLOR,
    STATUS_FONT_SIZE,
    STATUS_TEXT_COLOR,
    WALL_COLOR,
)
from .gl_resources import GLResourceManager
from .gl_utils import (
    cell_centers,
    cell_quads,
    create_texture_from_surface,
    draw_vertices,
    setup_opengl,
)
from .point import Coord

if TYPE_CHECKING:
    from .agent import Agent
    from .world import World

logger = logging.getLogger(__name__)


def _delete_texture(obj_id: int) -> None:
    """Deletes a single GL texture."""
    gl.glDeleteTextures(1, [obj_id])


class Renderer:
    """Draws the world, the current path, the player and the cursor."""

    def __init__(
        self, screen_width: int, screen_height: int, cell_size: int = CELL_SIZE
    ) -> None:
        self.w = screen_width
        self.h = screen_height
        self.cell_size = cell_size
        self._res = GLResourceManager()
        setup_opengl(self.w, self.h)
        pygame.font.init()
        self.font = pygame.font.Font(None, STATUS_FONT_SIZE)
        # Cached status texture; re-uploaded only when the text changes
        self._status_text: Optional[str] = None
        self._status_tex = 0
        self._status_size = (0, 0)
        logger.info("Renderer ready: %dx%d px, %d px cells", self.w, self.h, cell_size)

    def render(
        self,
        world: World,
        player: Agent,
        cursor: Coord,
        path: Sequence[Coord],
        status: str,
    ) -> None:
        """Draw one frame and swap buffers."""
        r, g, b = (c / 255.0 for c in BACKGROUND_COLOR)
        gl.glClearColor(r, g, b, 1.0)
        gl.glClear(gl.GL_COLOR_BUFFER_BIT)
        cs = self.cell_size

        all_cells = [
            (row, col) for row in range(world.height) for col in range(world.width)
        ]
        # Grid lines show through the 1px gap around each background cell
        draw_vertices(cell_quads(all_cells, cs), GRID_LINE_COLOR)
        draw_vertices(cell_quads(all_cells, cs, inset=1.0), BACKGROUND_COLOR)
        draw_vertices(cell_quads(world.wall_cells(), cs), WALL_COLOR)
        obstacles = [e.position() for e in world.entities if e.blocking]
        draw_vertices(cell_quads(obstacles, cs, inset=3.0), OBSTACLE_COLOR)

        if path:
            self._draw_path(list(path))
        draw_vertices(cell_quads([player.position()], cs, inset=4.0), PLAYER_COLOR)
        draw_vertices(cell_quads([cursor], cs, inset=2.0), CURSOR_COLOR, gl.GL_LINE_LOOP)
        self._draw_status(status)
        pygame.display.flip()

    def _draw_path(self, path: List[Coord]) -> None:
        cs = self.cell_size
        gl.glLineWidth(2.0)
        draw_vertices(cell_centers(path, cs), PATH_COLOR, gl.GL_LINE_STRIP)
        draw_vertices(cell_quads(path[1:-1], cs, inset=cs * 0.35), PATH_COLOR)
        if len(path) > 1:
            draw_vertices(cell_quads([path[-1]], cs, inset=5.0), GOAL_COLOR)

    def _draw_status(self, status: str) -> None:
        if status != self._status_text:
            if self._status_tex:
                self._res.release(self._status_tex)
            surf = self.font.render(status, True, STATUS_TEXT_COLOR)
            self._status_tex = self._res.gen(
                lambda: create_texture_from_surface(surf),
                _delete_texture,
                "status texture",
            )
            self._status_size = surf.get_size()
            self._status_text = status
        tw, th = self._status_size
        x0, y0 = 8.0, self.h - th - 8.0
        gl.glEnable(gl.GL_TEXTURE_2D)
        gl.glColor3ub(255, 255, 255)
        with self._res.bind(
            lambda t: gl.glBindTexture(gl.GL_TEXTURE_2D, t), self._status_tex
        ):
            gl.glBegin(gl.GL_QUADS)
            gl.glTexCoord2f(0.0, 0.0)
            gl.glVertex2f(x0, y0)
            gl.glTexCoord2f(1.0, 0.0)
            gl.glVertex2f(x0 + tw, y0)
            gl.glTexCoord2f(1.0, 1.0)
            gl.glVertex2f(x0 + tw, y0 + th)
            gl.glTexCoord2f(0.0, 1.0)
            gl.glVertex2f(x0, y0 + th)
            gl.glEnd()
        gl.glDisable(gl.GL_TEXTURE_2D)

    def shutdown(self) -> None:
        """Release GL resources; call while the GL context is still alive."""
        self._res.shutdown()
        self._status_tex = 0
        self._status_text = None
