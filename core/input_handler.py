"""Pointer input handling: pygame mouse events to star injection."""

import pygame
from pygame.locals import *

from galaxy.injection import InjectionController
from galaxy.simulation import SimulationLoop


class InputHandler:
    """Feeds left-button gestures to the injection controller."""

    def __init__(self, controller: InjectionController, simulation: SimulationLoop):
        self.controller = controller
        self.simulation = simulation

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == MOUSEBUTTONDOWN:
            if event.button == 1:
                self._emit(self.controller.press(*event.pos))
        elif event.type == MOUSEMOTION:
            self._emit(self.controller.move(*event.pos))
        elif event.type == MOUSEBUTTONUP:
            if event.button == 1:
                self._emit(self.controller.release(*event.pos))
        elif event.type == WINDOWLEAVE:
            self._emit(self.controller.leave())

        return True

    def _emit(self, bodies):
        if bodies:
            self.simulation.add_bodies(bodies)
