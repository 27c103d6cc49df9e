"""Frame-driven simulation loop owning the body store."""

from enum import Enum
from typing import Callable, Iterable, List, Optional

from .bodies import Body, BodyStore
from .physics import SOFTENING, step
from .settings import LiveSettings


class RunState(Enum):
    RUNNING = "running"
    PAUSED = "paused"


class SimulationLoop:
    """
    Single writer of the body store.

    Each tick renders the current snapshot and, while running, installs the
    next one computed by the force solver and integrator. Everything else
    goes through the control operations below.
    """

    def __init__(self, settings: LiveSettings, softening: float = SOFTENING):
        self.settings = settings
        self.softening = softening
        self._store = BodyStore.empty()
        self._state = RunState.RUNNING
        self._stopped = False
        self._count_listeners: List[Callable[[int], None]] = []
        self._pause_listeners: List[Callable[[bool], None]] = []

    @property
    def store(self) -> BodyStore:
        """Current snapshot (read-only by convention)."""
        return self._store

    @property
    def stopped(self) -> bool:
        return self._stopped

    def __len__(self) -> int:
        return len(self._store)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def on_count_change(self, callback: Callable[[int], None]):
        """Subscribe to body count changes; reports the current count at once."""
        self._count_listeners.append(callback)
        callback(len(self._store))

    def on_pause_change(self, callback: Callable[[bool], None]):
        self._pause_listeners.append(callback)

    def _install(self, store: BodyStore):
        previous = len(self._store)
        self._store = store
        if len(store) != previous:
            for callback in self._count_listeners:
                callback(len(store))

    def _set_state(self, state: RunState):
        if state is self._state:
            return
        self._state = state
        for callback in self._pause_listeners:
            callback(state is RunState.PAUSED)

    # ------------------------------------------------------------------
    # Control operations
    # ------------------------------------------------------------------

    def is_paused(self) -> bool:
        return self._state is RunState.PAUSED

    def toggle_pause(self):
        self._set_state(RunState.RUNNING if self.is_paused() else RunState.PAUSED)

    def clear(self):
        """Remove every body and resume if paused."""
        self._install(BodyStore.empty())
        self._set_state(RunState.RUNNING)

    def add_bodies(self, bodies: Iterable[Body]):
        """Append a batch without touching the run state."""
        self._install(self._store.append(bodies))

    def stop(self):
        """Cancel further ticks."""
        self._stopped = True

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self, render: Optional[Callable[[BodyStore], None]] = None):
        """Render the current snapshot, then advance physics if running."""
        if self._stopped:
            return

        snapshot = self._store
        if render is not None:
            render(snapshot)

        if self._state is RunState.RUNNING and len(snapshot) > 0:
            self._install(step(snapshot, self.settings.G, self.settings.time_step, self.softening))
