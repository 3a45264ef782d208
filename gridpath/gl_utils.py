"""
Helper functions for OpenGL setup, texture upload and batched cell drawing.
"""

from __future__ import annotations
import logging
import pygame
import numpy as np
import OpenGL.GL as gl  # noqa: N811
from typing import Sequence, Tuple

from .point import Coord

logger = logging.getLogger(__name__)


def setup_opengl(width: int, height: int) -> None:
    """
    Configure 2D OpenGL state: viewport, pixel-space orthographic projection
    with the origin at the top-left corner, and alpha blending.
    """
    gl.glViewport(0, 0, width, height)
    gl.glMatrixMode(gl.GL_PROJECTION)
    gl.glLoadIdentity()
    gl.glOrtho(0, width, height, 0, -1, 1)
    gl.glMatrixMode(gl.GL_MODELVIEW)
    gl.glLoadIdentity()
    gl.glDisable(gl.GL_DEPTH_TEST)
    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_SRC_ALPHA, gl.GL_ONE_MINUS_SRC_ALPHA)


def cell_quads(
    cells: Sequence[Coord], cell_size: float, inset: float = 0.0
) -> np.ndarray:
    """
    Build GL_QUADS vertices for the given cells.
    Returns a float32 array of shape (4 * len(cells), 2) in pixel space,
    each quad shrunk by inset pixels on every side.
    """
    if not cells:
        return np.zeros((0, 2), dtype=np.float32)
    rc = np.asarray(cells, dtype=np.float32)
    x0 = rc[:, 1] * cell_size + inset
    y0 = rc[:, 0] * cell_size + inset
    x1 = x0 + cell_size - 2 * inset
    y1 = y0 + cell_size - 2 * inset
    corners = np.stack(
        [
            np.stack([x0, y0], axis=1),
            np.stack([x1, y0], axis=1),
            np.stack([x1, y1], axis=1),
            np.stack([x0, y1], axis=1),
        ],
        axis=1,
    )
    return corners.reshape(-1, 2)


def cell_centers(cells: Sequence[Coord], cell_size: float) -> np.ndarray:
    """Return the pixel-space centers of cells as a float32 (N, 2) array of (x, y)."""
    if not cells:
        return np.zeros((0, 2), dtype=np.float32)
    rc = np.asarray(cells, dtype=np.float32)
    return np.stack(
        [(rc[:, 1] + 0.5) * cell_size, (rc[:, 0] + 0.5) * cell_size], axis=1
    )


def draw_vertices(
    vertices: np.ndarray, color: Tuple[int, int, int], mode: int = gl.GL_QUADS
) -> None:
    """Draw a (N, 2) vertex array with a flat color using client-side arrays."""
    if len(vertices) == 0:
        return
    data = np.ascontiguousarray(vertices, dtype=np.float32)
    gl.glColor3ub(*color)
    gl.glEnableClientState(gl.GL_VERTEX_ARRAY)
    try:
        gl.glVertexPointer(2, gl.GL_FLOAT, 0, data)
        gl.glDrawArrays(mode, 0, len(data))
    finally:
        gl.glDisableClientState(gl.GL_VERTEX_ARRAY)


def create_texture_from_surface(
    surf: pygame.Surface,
    min_filter: int = gl.GL_LINEAR,
    mag_filter: int = gl.GL_LINEAR,
) -> int:
    """
    Create an OpenGL texture from a Pygame Surface (e.g., for UI text).
    """
    data = pygame.image.tostring(surf, "RGBA", False)
    w, h = surf.get_size()
    tex = gl.glGenTextures(1)
    if not tex:
        logger.error("glGenTextures returned no texture id")
        raise RuntimeError("Failed to allocate a GL texture")
    gl.glBindTexture(gl.GL_TEXTURE_2D, tex)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, min_filter)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, mag_filter)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_CLAMP_TO_EDGE)
    gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_CLAMP_TO_EDGE)
    gl.glTexImage2D(
        gl.GL_TEXTURE_2D,
        0,
        gl.GL_RGBA,
        w,
        h,
        0,
        gl.GL_RGBA,
        gl.GL_UNSIGNED_BYTE,
        data,
    )
    gl.glBindTexture(gl.GL_TEXTURE_2D, 0)
    return tex
