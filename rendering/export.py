"""Save the current frame as a PNG."""

from pathlib import Path
from typing import Optional

import numpy as np
import pygame

from config import galaxy as config


def get_unique_output_path(directory: Path, name: str) -> Path:
    """Get unique output path, adding (1), (2), etc. if file exists."""
    base_path = directory / f"{name}.png"

    if not base_path.exists():
        return base_path

    counter = 1
    while True:
        new_path = directory / f"{name} ({counter}).png"
        if not new_path.exists():
            return new_path
        counter += 1


def save_png(frame: np.ndarray, directory: Optional[Path] = None,
             name: Optional[str] = None) -> Path:
    """
    Write ``frame`` to ``<directory>/<name>.png`` without overwriting.

    Returns:
        The path written
    """
    directory = Path(directory or config.EXPORT["directory"])
    directory.mkdir(parents=True, exist_ok=True)
    path = get_unique_output_path(directory, name or config.EXPORT["filename"])

    # pygame surfaces are indexed (x, y)
    surface = pygame.surfarray.make_surface(np.ascontiguousarray(frame.swapaxes(0, 1)))
    pygame.image.save(surface, str(path))
    return path
