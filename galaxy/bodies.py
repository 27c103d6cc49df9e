"""Point-mass bodies and the immutable body store snapshot."""

import itertools
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

NO_SPRITE = -1

# Process-wide id source. Components accept their own iterator so tests can
# hand out reproducible ids.
_id_counter = itertools.count()


def next_id(ids: Optional[Iterator[int]] = None) -> int:
    """Draw a fresh body id from ``ids`` or the shared counter."""
    return next(ids if ids is not None else _id_counter)


@dataclass
class Body:
    """
    A single point mass.

    Attributes:
        id: Unique, stable identifier
        position: (x, y) in scene coordinates, unbounded
        velocity: (vx, vy)
        mass: Positive mass (callers guarantee > 0)
        sprite_index: Index into the sprite set, or None for circle rendering
    """
    id: int
    position: Tuple[float, float]
    velocity: Tuple[float, float] = (0.0, 0.0)
    mass: float = 1.0
    sprite_index: Optional[int] = None


class BodyStore:
    """
    Snapshot of every live body as parallel numpy arrays.

    A store is never modified in place; append and with_state return a new
    store so a snapshot read during a tick stays consistent.
    """

    def __init__(self, ids: np.ndarray, positions: np.ndarray, velocities: np.ndarray,
                 masses: np.ndarray, sprites: np.ndarray):
        self.ids = ids
        self.positions = positions
        self.velocities = velocities
        self.masses = masses
        self.sprites = sprites

    @classmethod
    def empty(cls) -> "BodyStore":
        return cls(
            np.zeros(0, dtype=np.int64),
            np.zeros((0, 2), dtype=np.float64),
            np.zeros((0, 2), dtype=np.float64),
            np.zeros(0, dtype=np.float64),
            np.zeros(0, dtype=np.int32),
        )

    @classmethod
    def from_bodies(cls, bodies: Iterable[Body]) -> "BodyStore":
        bodies = list(bodies)
        if not bodies:
            return cls.empty()

        return cls(
            np.array([b.id for b in bodies], dtype=np.int64),
            np.array([b.position for b in bodies], dtype=np.float64).reshape(-1, 2),
            np.array([b.velocity for b in bodies], dtype=np.float64).reshape(-1, 2),
            np.array([b.mass for b in bodies], dtype=np.float64),
            np.array([NO_SPRITE if b.sprite_index is None else b.sprite_index for b in bodies],
                     dtype=np.int32),
        )

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self) -> Iterator[Body]:
        for i in range(len(self)):
            yield self.body(i)

    def body(self, i: int) -> Body:
        """Materialize the body at row ``i``."""
        sprite = int(self.sprites[i])
        return Body(
            id=int(self.ids[i]),
            position=(float(self.positions[i, 0]), float(self.positions[i, 1])),
            velocity=(float(self.velocities[i, 0]), float(self.velocities[i, 1])),
            mass=float(self.masses[i]),
            sprite_index=None if sprite == NO_SPRITE else sprite,
        )

    def to_bodies(self) -> List[Body]:
        return list(self)

    def append(self, bodies: Iterable[Body]) -> "BodyStore":
        """Return a new store with ``bodies`` added after the existing ones."""
        extra = BodyStore.from_bodies(bodies)
        if len(extra) == 0:
            return self

        return BodyStore(
            np.concatenate([self.ids, extra.ids]),
            np.concatenate([self.positions, extra.positions]),
            np.concatenate([self.velocities, extra.velocities]),
            np.concatenate([self.masses, extra.masses]),
            np.concatenate([self.sprites, extra.sprites]),
        )

    def with_state(self, positions: np.ndarray, velocities: np.ndarray) -> "BodyStore":
        """Return a store sharing identity/mass/sprite data with new kinematics."""
        return BodyStore(self.ids, positions, velocities, self.masses, self.sprites)
