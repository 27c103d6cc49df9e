"""2D body rendering: textured sprites with a plain circle fallback."""

from typing import List, Optional

import numpy as np
import pygame
from OpenGL.GL import *

from config import galaxy as config
from galaxy.bodies import BodyStore
from .sprites import SpriteLoader, circle_radii, sprite_batches, sprite_sizes


class SpriteTextures:
    """OpenGL textures for the loaded sprites, created on the render thread."""

    def __init__(self, loader: SpriteLoader):
        self.loader = loader
        self.textures: List[Optional[int]] = []
        self._uploaded = False

    def _upload(self):
        for surface in self.loader.surfaces:
            if surface is None:
                self.textures.append(None)
                continue

            data = pygame.image.tostring(surface, "RGBA", True)
            w, h = surface.get_size()
            tex = glGenTextures(1)
            glBindTexture(GL_TEXTURE_2D, tex)
            glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_LINEAR)
            glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_LINEAR)
            glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, w, h, 0, GL_RGBA, GL_UNSIGNED_BYTE, data)
            self.textures.append(tex)

        glBindTexture(GL_TEXTURE_2D, 0)
        self._uploaded = True

    def get(self, index: int) -> Optional[int]:
        """Texture id for ``index``, or None when it is not (yet) usable."""
        if not self._uploaded:
            if not self.loader.ready.is_set():
                return None
            self._upload()
        if not 0 <= index < len(self.textures):
            return None
        return self.textures[index]


class BodyRenderer:
    """Draws a body store snapshot into an orthographic, y-down viewport."""

    def __init__(self, textures: SpriteTextures):
        self.textures = textures
        self.width = 0
        self.height = 0

    def setup(self, width: int, height: int):
        """(Re)configure the viewport and projection for the window size."""
        self.width = width
        self.height = height
        glViewport(0, 0, width, height)
        glClearColor(*config.COLORS["background"])
        glDisable(GL_DEPTH_TEST)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, width, height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def draw(self, store: BodyStore):
        """Clear the frame and draw every body."""
        glClear(GL_COLOR_BUFFER_BIT)
        if len(store) == 0:
            return

        batches, circles = sprite_batches(store, self.textures)
        for tex, rows in batches.items():
            self._draw_sprites(tex, store.positions[rows], sprite_sizes(store.masses[rows]))

        if np.any(circles):
            self._draw_circles(store.positions[circles], circle_radii(store.masses[circles]))

    def capture(self) -> np.ndarray:
        """Read the frame buffer as a (height, width, 3) top-down RGB image."""
        glPixelStorei(GL_PACK_ALIGNMENT, 1)
        pixels = glReadPixels(0, 0, self.width, self.height, GL_RGB, GL_UNSIGNED_BYTE)
        frame = np.frombuffer(pixels, dtype=np.uint8).reshape(self.height, self.width, 3)
        return np.flipud(frame)  # OpenGL has origin at bottom-left

    def _draw_sprites(self, tex: int, positions: np.ndarray, sizes: np.ndarray):
        glEnable(GL_TEXTURE_2D)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glBindTexture(GL_TEXTURE_2D, tex)
        glColor4f(1.0, 1.0, 1.0, 1.0)

        glBegin(GL_QUADS)
        for (x, y), size in zip(positions, sizes):
            half = size / 2
            glTexCoord2f(0.0, 1.0); glVertex2f(x - half, y - half)
            glTexCoord2f(1.0, 1.0); glVertex2f(x + half, y - half)
            glTexCoord2f(1.0, 0.0); glVertex2f(x + half, y + half)
            glTexCoord2f(0.0, 0.0); glVertex2f(x - half, y + half)
        glEnd()

        glBindTexture(GL_TEXTURE_2D, 0)
        glDisable(GL_BLEND)
        glDisable(GL_TEXTURE_2D)

    def _draw_circles(self, positions: np.ndarray, radii: np.ndarray):
        # Round points, one batch per distinct radius
        glEnable(GL_POINT_SMOOTH)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glColor3f(*config.COLORS["star"])

        glEnableClientState(GL_VERTEX_ARRAY)
        for radius in np.unique(radii):
            batch = np.ascontiguousarray(positions[radii == radius], dtype=np.float32)
            glPointSize(float(radius * 2))
            glVertexPointer(2, GL_FLOAT, 0, batch)
            glDrawArrays(GL_POINTS, 0, len(batch))
        glDisableClientState(GL_VERTEX_ARRAY)

        glDisable(GL_BLEND)
        glDisable(GL_POINT_SMOOTH)
