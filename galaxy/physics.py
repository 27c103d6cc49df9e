"""
Exact pairwise gravity for the 2D galaxy maker.

Key points:
- Direct O(n²) summation over every pair, no approximation structure
- Softened force law, bounded at any separation
- Semi-implicit (symplectic) Euler: velocity first, then position
- Numba JIT kernels writing into freshly allocated output arrays
"""

import numpy as np
from numba import njit, prange

from config import galaxy as config
from .bodies import BodyStore

SOFTENING = config.SIMULATION["softening"]


@njit(parallel=True, fastmath=True, cache=True)
def compute_forces_direct(
    positions: np.ndarray,
    masses: np.ndarray,
    forces: np.ndarray,
    G: float,
    softening: float,
    num_bodies: int
):
    """Accumulate the net softened gravitational force on every body."""
    eps_sq = softening * softening

    for i in prange(num_bodies):
        px = positions[i, 0]
        py = positions[i, 1]
        mi = masses[i]
        fx = 0.0
        fy = 0.0

        for j in range(num_bodies):
            if j == i:
                continue
            dx = positions[j, 0] - px
            dy = positions[j, 1] - py
            dist_sq = dx * dx + dy * dy + eps_sq
            dist = np.sqrt(dist_sq)

            force = G * mi * masses[j] / dist_sq
            fx += force * dx / dist
            fy += force * dy / dist

        forces[i, 0] = fx
        forces[i, 1] = fy


@njit(parallel=True, fastmath=True, cache=True)
def integrate_semi_implicit(
    positions: np.ndarray,
    velocities: np.ndarray,
    forces: np.ndarray,
    masses: np.ndarray,
    new_positions: np.ndarray,
    new_velocities: np.ndarray,
    dt: float,
    num_bodies: int
):
    """Advance one step: v' = v + F/m dt, then x' = x + v' dt. No boundaries."""
    for i in prange(num_bodies):
        inv_m = 1.0 / masses[i]
        vx = velocities[i, 0] + forces[i, 0] * inv_m * dt
        vy = velocities[i, 1] + forces[i, 1] * inv_m * dt

        new_velocities[i, 0] = vx
        new_velocities[i, 1] = vy
        new_positions[i, 0] = positions[i, 0] + vx * dt
        new_positions[i, 1] = positions[i, 1] + vy * dt


def compute_forces(store: BodyStore, G: float, softening: float = SOFTENING) -> np.ndarray:
    """
    Net force on every body in ``store``.

    Returns:
        (n, 2) array, row i is the force on body i
    """
    n = len(store)
    forces = np.zeros((n, 2), dtype=np.float64)
    if n > 1:
        compute_forces_direct(store.positions, store.masses, forces, float(G), float(softening), n)
    return forces


def integrate(store: BodyStore, forces: np.ndarray, dt: float) -> BodyStore:
    """Return the next snapshot; ``store`` itself is left untouched."""
    n = len(store)
    new_positions = np.empty((n, 2), dtype=np.float64)
    new_velocities = np.empty((n, 2), dtype=np.float64)
    if n > 0:
        integrate_semi_implicit(
            store.positions,
            store.velocities,
            forces,
            store.masses,
            new_positions,
            new_velocities,
            float(dt),
            n
        )
    return store.with_state(new_positions, new_velocities)


def step(store: BodyStore, G: float, dt: float, softening: float = SOFTENING) -> BodyStore:
    """Force sweep followed by one integration step."""
    return integrate(store, compute_forces(store, G, softening), dt)
