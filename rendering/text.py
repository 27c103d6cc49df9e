"""HUD text drawn over the star field."""

from typing import Sequence

import pygame
from OpenGL.GL import *

from config import galaxy as config


class TextRenderer:
    """Renders pygame font text into the OpenGL frame."""

    def __init__(self, font_name: str = "monospace", font_size: int = 16, line_spacing: int = 4):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.line_height = self.font.get_linesize() + line_spacing
        self._cache = {}

    def _rasterize(self, text: str):
        cached = self._cache.get(text)
        if cached is None:
            surface = self.font.render(text, True, config.COLORS["text"])
            cached = (pygame.image.tostring(surface, "RGBA", True), surface.get_size())
            if len(self._cache) > 64:
                self._cache.clear()
            self._cache[text] = cached
        return cached

    def draw_text(self, text: str, x: int, y: int, screen_size: tuple):
        """
        Draw text with its top-left corner at (x, y) in window pixels.

        Args:
            text: The string to render
            x: X position from left edge
            y: Y position from top edge
            screen_size: (width, height) of the window
        """
        data, (w, h) = self._rasterize(text)

        # Raster positions use a bottom-left origin
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, screen_size[0], 0, screen_size[1], -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glRasterPos2f(x, screen_size[1] - y - h)
        glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)
        glDisable(GL_BLEND)

        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)

    def draw_lines(self, lines: Sequence[str], x: int, y: int, screen_size: tuple):
        """Draw consecutive lines downwards from (x, y)."""
        for i, line in enumerate(lines):
            self.draw_text(line, x, y + i * self.line_height, screen_size)
