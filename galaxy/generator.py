"""
Procedural spiral galaxy initial conditions.

Builds a bulge + logarithmic spiral arm disk:
- Bulge: dense core in the inner 20% of the radius, random motion
- Arms: r = a * e^(b * theta), evenly populated, each arm offset by 2π/arms
- Arm velocities: circular orbits around an approximate enclosed mass
"""

import math
from typing import Iterator, List, Optional, Tuple

import numpy as np

from config import galaxy as config
from .bodies import Body, next_id
from .physics import SOFTENING


def split_evenly(total: int, parts: int) -> List[int]:
    """Split ``total`` into ``parts`` counts, remainder going to the first parts."""
    base, remainder = divmod(total, parts)
    return [base + (1 if k < remainder else 0) for k in range(parts)]


def generate_galaxy(
    center: Tuple[float, float],
    total_count: int,
    arm_count: int,
    arm_tightness: float,
    arm_spread: float,
    bulge_fraction: float,
    max_radius: float,
    mass: float,
    G: float,
    sprite_count: int = 0,
    rng: Optional[np.random.Generator] = None,
    ids: Optional[Iterator[int]] = None,
    softening: float = SOFTENING,
) -> List[Body]:
    """
    Generate the bodies of a spiral galaxy centred on ``center``.

    Args:
        center: (x, y) of the galactic centre
        total_count: Nominal number of bodies (bulge + arms)
        arm_count: Number of spiral arms
        arm_tightness: Spiral scale ``a``; lower = tighter spiral
        arm_spread: Random scatter around the arm, as a fraction of radius
        bulge_fraction: Share of ``total_count`` placed in the bulge
        max_radius: Arm stars whose spiral radius exceeds this are skipped
        mass: Base stellar mass
        G: Gravitational constant used for orbital speeds
        sprite_count: Size of the sprite set (0 = no sprites)

    Returns:
        Bulge bodies followed by arm bodies. Arm stars beyond ``max_radius``
        are dropped rather than replaced, so the list can be shorter than
        ``total_count``.
    """
    if total_count < 0:
        raise ValueError(f"total_count must be non-negative, got {total_count}")
    if arm_count < 1:
        raise ValueError(f"arm_count must be at least 1, got {arm_count}")
    if not 0.0 <= bulge_fraction <= 1.0:
        raise ValueError(f"bulge_fraction must be within [0, 1], got {bulge_fraction}")
    if max_radius <= 0:
        raise ValueError(f"max_radius must be positive, got {max_radius}")

    rng = rng if rng is not None else np.random.default_rng()
    center = np.asarray(center, dtype=np.float64)

    bulge_count = int(math.floor(total_count * bulge_fraction))
    arm_total = total_count - bulge_count

    # Bulge - random positions inside the core, small velocity jitter
    bulge_radius = config.GALAXY["bulge_radius_fraction"] * max_radius
    jitter = config.GALAXY["bulge_jitter"]

    angles = rng.uniform(0.0, 2.0 * np.pi, bulge_count)
    radii = rng.uniform(0.0, bulge_radius, bulge_count)
    bulge_positions = center + np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])
    bulge_velocities = rng.uniform(-jitter, jitter, (bulge_count, 2))
    bulge_masses = mass * (1.0 + rng.random(bulge_count))

    # Spiral arms: every arm sweeps the same angle, so denser arms are sampled finer
    sweep = config.GALAXY["arm_sweep"]
    growth = config.GALAXY["spiral_growth"]

    spiral_angle = []
    arm_offset = []
    for k, arm_population in enumerate(split_evenly(arm_total, arm_count)):
        spiral_angle.append(np.arange(arm_population) * (sweep / max(arm_population, 1)))
        arm_offset.append(np.full(arm_population, k * (2.0 * np.pi / arm_count)))
    spiral_angle = np.concatenate(spiral_angle)
    theta = np.concatenate(arm_offset) + spiral_angle

    ideal_r = arm_tightness * np.exp(growth * spiral_angle)
    keep = ideal_r <= max_radius
    ideal_r = ideal_r[keep]
    theta = theta[keep]
    n_arm = len(ideal_r)

    # Circular speed around the enclosed mass, taken at the ideal radius
    enclosed = bulge_masses.sum() + arm_total * mass * ideal_r / max_radius
    speed = np.sqrt(G * enclosed / (np.maximum(ideal_r, 1.0) + softening))
    direction = np.column_stack([np.cos(theta), np.sin(theta)])

    scatter = rng.normal(0.0, 1.0, (n_arm, 2)) * (arm_spread * ideal_r)[:, None]
    arm_positions = center + ideal_r[:, None] * direction + scatter
    arm_velocities = speed[:, None] * np.column_stack([-direction[:, 1], direction[:, 0]])
    arm_masses = mass * (0.8 + 0.4 * rng.random(n_arm))

    positions = np.concatenate([bulge_positions, arm_positions])
    velocities = np.concatenate([bulge_velocities, arm_velocities])
    masses = np.concatenate([bulge_masses, arm_masses])
    if sprite_count > 0:
        sprites = rng.integers(sprite_count, size=len(masses)).tolist()
    else:
        sprites = [None] * len(masses)

    return [
        Body(
            id=next_id(ids),
            position=(float(x), float(y)),
            velocity=(float(vx), float(vy)),
            mass=float(m),
            sprite_index=s,
        )
        for (x, y), (vx, vy), m, s in zip(positions, velocities, masses, sprites)
    ]
