"""Configuration for the interactive galaxy maker."""

import math
from pathlib import Path

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "Galaxy Maker",
    "fps": 60,
}

# Physics parameters (live-adjustable copies live in galaxy.settings)
SIMULATION = {
    "G": 1.0,                      # Gravitational constant (tuned for visualization)
    "time_step": 0.1,
    "mass": 10.0,                  # Mass of stars placed by the pointer
    "softening": 5.0,              # Softening length to prevent singularities

    # Ranges and increments of the live controls: (min, max, step)
    "G_range": (0.0, 5.0, 0.1),
    "time_step_range": (0.01, 1.0, 0.01),
    "mass_range": (1.0, 50.0, 1.0),
}

# Pointer injection
INJECTION = {
    "spawn_distance": 15.0,        # Drag distance between spawned stars
    "click_threshold_sq": 25.0,    # Squared distance separating click from drag (5px)
    "drag_speed": 0.1,             # Tangential speed per unit of drag segment
}

# Galaxy generator defaults (see tools/presets.py for named variants)
GALAXY = {
    "total_count": 300,
    "arm_count": 2,
    "arm_tightness": 12.0,         # Lower = tighter spiral
    "arm_spread": 0.15,
    "bulge_fraction": 0.12,
    "max_radius": 250.0,
    "bulge_radius_fraction": 0.2,  # Bulge occupies the inner 20% of max_radius
    "bulge_jitter": 0.5,           # Random velocity dispersion of bulge stars
    "arm_sweep": 11.0 * math.pi,   # Spiral angle swept by every arm
    "spiral_growth": 0.1,          # b in r = a * e^(b * theta)
}

# Missing sprites in the default directory are rendered on first start
ASSETS = {
    "directory": Path.home() / ".galaxy_maker" / "stars",
    "files": ["star1.png", "star2.png", "star3.png", "star4.png", "star5.png"],
}

RENDER = {
    "sprite_base_size": 15.0,      # Base sprite size in pixels
    "sprite_max_size": 30.0,
    "sprite_mass_scale": 0.5,
    "min_circle_radius": 1.0,
}

EXPORT = {
    "directory": Path("captures"),  # Relative to the working directory at save time
    "filename": "galaxy",
}

COLORS = {
    "background": (10 / 255, 10 / 255, 10 / 255, 1.0),
    "star": (1.0, 1.0, 1.0),
    "text": (230, 230, 230),
}
