"""Live, hot-swappable simulation parameters."""

from dataclasses import dataclass

from config import galaxy as config


def _clamp(value: float, bounds: tuple) -> float:
    low, high, _ = bounds
    return max(low, min(high, value))


@dataclass
class LiveSettings:
    """
    Scalars read by the engine between ticks.

    The control panel adjusts them in fixed increments within the
    configured ranges; the window updates width/height on resize.
    """
    G: float = config.SIMULATION["G"]
    time_step: float = config.SIMULATION["time_step"]
    mass: float = config.SIMULATION["mass"]
    width: int = config.WINDOW["width"]
    height: int = config.WINDOW["height"]

    def adjust_gravity(self, steps: int):
        bounds = config.SIMULATION["G_range"]
        self.G = round(_clamp(self.G + steps * bounds[2], bounds), 6)

    def adjust_time_step(self, steps: int):
        bounds = config.SIMULATION["time_step_range"]
        self.time_step = round(_clamp(self.time_step + steps * bounds[2], bounds), 6)

    def adjust_mass(self, steps: int):
        bounds = config.SIMULATION["mass_range"]
        self.mass = round(_clamp(self.mass + steps * bounds[2], bounds), 6)

    def resize(self, width: int, height: int):
        self.width = width
        self.height = height

    def reset(self):
        """Restore the physics parameters; the surface size is kept."""
        self.G = config.SIMULATION["G"]
        self.time_step = config.SIMULATION["time_step"]
        self.mass = config.SIMULATION["mass"]

    @property
    def center(self) -> tuple:
        return self.width / 2, self.height / 2
