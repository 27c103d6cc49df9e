"""
Star Sprite Generator
=====================

Renders the glowing star sprites the application looks for
(``star1.png`` ... ``star5.png``, by default under ``~/.galaxy_maker/stars``).
The application fills in missing ones itself on start-up; this tool
re-renders the whole set, e.g. at a different size.

Usage:
    python -m tools.make_sprites                 # Default size and location
    python -m tools.make_sprites --size 64       # Larger sprites
    python -m tools.make_sprites --out my_dir    # Custom output directory
"""

import argparse
from pathlib import Path
from typing import List, Tuple

import numpy as np
import pygame

from config import galaxy as config

# Core tint of each sprite (RGB 0-255), hot blue to cool red
STAR_TINTS = [
    (170, 200, 255),
    (220, 230, 255),
    (255, 250, 235),
    (255, 220, 160),
    (255, 170, 120),
]


def render_star(size: int, tint: Tuple[int, int, int]) -> np.ndarray:
    """
    Render a soft radial star glow.

    Returns:
        (size, size, 4) uint8 RGBA image
    """
    coords = (np.arange(size) + 0.5) / size * 2.0 - 1.0
    xx, yy = np.meshgrid(coords, coords)
    r = np.sqrt(xx ** 2 + yy ** 2)

    core = np.exp(-(r / 0.18) ** 2)
    halo = np.clip(1.0 - r, 0.0, 1.0) ** 3
    alpha = np.clip(core + 0.6 * halo, 0.0, 1.0)

    # White-hot centre blending into the tint
    tint_arr = np.array(tint, dtype=np.float64)
    rgb = tint_arr + (255.0 - tint_arr) * core[..., None]

    image = np.zeros((size, size, 4), dtype=np.uint8)
    image[..., :3] = np.clip(rgb, 0, 255).astype(np.uint8)
    image[..., 3] = (alpha * 255).astype(np.uint8)
    return image


def save_rgba(image: np.ndarray, path: Path):
    """Write an (h, w, 4) RGBA array as PNG."""
    h, w, _ = image.shape
    surface = pygame.image.frombuffer(np.ascontiguousarray(image).tobytes(), (w, h), "RGBA")
    pygame.image.save(surface, str(path))


def write_sprites(out_dir: Path, size: int = 32, overwrite: bool = True) -> List[Path]:
    """
    Render the configured sprite set into ``out_dir``.

    With ``overwrite=False`` existing files are kept and only missing ones
    are written.

    Returns:
        Paths actually written
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for filename, tint in zip(config.ASSETS["files"], STAR_TINTS):
        path = out_dir / filename
        if path.exists() and not overwrite:
            continue
        save_rgba(render_star(size, tint), path)
        written.append(path)
    return written


def main():
    parser = argparse.ArgumentParser(description="Generate star sprites")
    parser.add_argument("--size", type=int, default=32, help="Sprite edge length in pixels (default: 32)")
    parser.add_argument("--out", default=None, help="Output directory (default: ~/.galaxy_maker/stars)")
    args = parser.parse_args()

    out_dir = Path(args.out) if args.out else config.ASSETS["directory"]
    for path in write_sprites(out_dir, size=args.size):
        print(f"[Sprites] Wrote {path}")


if __name__ == "__main__":
    main()
