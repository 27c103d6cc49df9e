"""Star sprite loading with a single readiness barrier."""

import threading
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pygame

from config import galaxy as config
from galaxy.bodies import NO_SPRITE, BodyStore


def sprite_sizes(masses: np.ndarray) -> np.ndarray:
    """Sprite edge length in pixels, growing with mass up to the cap."""
    cfg = config.RENDER
    return np.minimum(cfg["sprite_max_size"],
                      cfg["sprite_base_size"] + np.sqrt(masses) * cfg["sprite_mass_scale"])


def circle_radii(masses: np.ndarray) -> np.ndarray:
    """Fallback circle radius in pixels."""
    return np.maximum(config.RENDER["min_circle_radius"], np.sqrt(masses))


def sprite_batches(store: BodyStore, textures) -> Tuple[Dict[int, np.ndarray], np.ndarray]:
    """
    Group bodies by the texture they are drawn with.

    ``textures.get(index)`` returns a texture id, or None while the sprite
    set is not ready or when that slot failed to load.

    Returns:
        (texture id -> row mask, row mask of bodies drawn as circles)
    """
    batches = {}
    circles = np.ones(len(store), dtype=np.bool_)

    for sprite_index in np.unique(store.sprites):
        if sprite_index == NO_SPRITE:
            continue
        tex = textures.get(int(sprite_index))
        if tex is None:
            continue
        rows = store.sprites == sprite_index
        batches[tex] = rows
        circles &= ~rows

    return batches, circles


class SpriteLoader:
    """
    Loads a fixed set of sprite images on a background thread.

    Every slot ends up either holding a surface or ``None`` when that image
    failed to load. ``ready`` is set once every slot has been attempted, so
    rendering can fall back to plain circles until then (and for failed
    slots afterwards). Physics never waits on it.
    """

    def __init__(self, paths: Sequence[Path]):
        self.paths = [Path(p) for p in paths]
        self.surfaces: List[Optional[pygame.Surface]] = [None] * len(self.paths)
        self.attempted = [threading.Event() for _ in self.paths]
        self.ready = threading.Event()
        self._thread = None

    @property
    def count(self) -> int:
        """Size of the sprite set once ready, 0 before."""
        return len(self.paths) if self.ready.is_set() else 0

    @property
    def loaded_count(self) -> int:
        return sum(1 for s in self.surfaces if s is not None)

    def start(self):
        self._thread = threading.Thread(target=self._load_worker, daemon=True)
        self._thread.start()

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self.ready.wait(timeout)

    def _load_worker(self):
        for idx, path in enumerate(self.paths):
            try:
                self.surfaces[idx] = pygame.image.load(str(path))
            except (pygame.error, OSError) as e:
                print(f"[Sprites] Failed to load image: {path} ({e})")
            finally:
                self.attempted[idx].set()

        self.ready.set()
        print(f"[Sprites] {self.loaded_count}/{len(self.paths)} sprites loaded")

    def get(self, index: int) -> Optional[pygame.Surface]:
        if not self.ready.is_set() or not 0 <= index < len(self.surfaces):
            return None
        return self.surfaces[index]
