"""Pointer gesture state machine that places stars."""

import math
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, Union

import numpy as np

from config import galaxy as config
from .bodies import Body, next_id
from .settings import LiveSettings

Point = Tuple[float, float]


@dataclass(frozen=True)
class Idle:
    """No button held."""


@dataclass(frozen=True)
class Dragging:
    """Button held since ``start``; ``last`` is where the previous star spawned."""
    start: Point
    last: Point


GestureState = Union[Idle, Dragging]


class InjectionController:
    """
    Turns press / move / release / leave gestures into new bodies.

    - A press followed by a release within 5 units is a click: one star at
      the release point, at rest.
    - Dragging emits a star every time the pointer has travelled more than
      the spawn distance since the last one, moving perpendicular to the
      drag segment.
    - Leaving the surface cancels the gesture.

    Events that make no sense in the current state are ignored.
    """

    def __init__(self, settings: LiveSettings, rng: Optional[np.random.Generator] = None,
                 ids: Optional[Iterator[int]] = None,
                 sprite_count: Callable[[], int] = lambda: 0):
        self.settings = settings
        self.rng = rng if rng is not None else np.random.default_rng()
        self.ids = ids
        self.sprite_count = sprite_count
        self.state: GestureState = Idle()

        self.spawn_distance = config.INJECTION["spawn_distance"]
        self.click_threshold_sq = config.INJECTION["click_threshold_sq"]
        self.drag_speed = config.INJECTION["drag_speed"]

    @property
    def dragging(self) -> bool:
        return isinstance(self.state, Dragging)

    def press(self, x: float, y: float) -> List[Body]:
        self.state = Dragging(start=(x, y), last=(x, y))
        return []

    def move(self, x: float, y: float) -> List[Body]:
        if not isinstance(self.state, Dragging):
            return []

        last_x, last_y = self.state.last
        dx = x - last_x
        dy = y - last_y
        dist = math.hypot(dx, dy)
        if dist <= self.spawn_distance:
            return []

        # Perpendicular to the segment, speed proportional to its length
        vx = -dy / dist * self.drag_speed * dist
        vy = dx / dist * self.drag_speed * dist
        self.state = Dragging(start=self.state.start, last=(x, y))
        return [self._make_body(x, y, vx, vy)]

    def release(self, x: float, y: float) -> List[Body]:
        if not isinstance(self.state, Dragging):
            return []

        start_x, start_y = self.state.start
        dist_sq = (x - start_x) ** 2 + (y - start_y) ** 2
        self.state = Idle()

        if dist_sq < self.click_threshold_sq:
            return [self._make_body(x, y, 0.0, 0.0)]
        # A real drag already emitted its stars while moving
        return []

    def leave(self) -> List[Body]:
        self.state = Idle()
        return []

    def _make_body(self, x: float, y: float, vx: float, vy: float) -> Body:
        count = self.sprite_count()
        sprite = int(self.rng.integers(count)) if count > 0 else None
        return Body(
            id=next_id(self.ids),
            position=(x, y),
            velocity=(vx, vy),
            mass=self.settings.mass,
            sprite_index=sprite,
        )
