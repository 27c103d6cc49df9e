"""2D gravitational galaxy maker engine."""

from .bodies import Body, BodyStore
from .generator import generate_galaxy
from .injection import InjectionController
from .settings import LiveSettings
from .simulation import SimulationLoop

__all__ = [
    "Body",
    "BodyStore",
    "generate_galaxy",
    "InjectionController",
    "LiveSettings",
    "SimulationLoop",
]
