# time sources for the car_controller
from abc import ABC, abstractmethod

import pygame

from airace.globals import FPS


class clock(ABC):
    """ Provides the elapsed time of the current tick. """

    @abstractmethod
    def delta_time(self) -> float:
        """ :returns: seconds elapsed since the previous tick """
        pass

    def tick(self) -> None:
        """ Called once at the start of each tick. """
        pass


class fixed_clock(clock):
    """ Constant tick duration, for tests and headless runs. """

    def __init__(self, dt: float = 1. / FPS):
        self.dt = dt

    def delta_time(self) -> float:
        return self.dt


class pygame_clock(clock):
    """ Real time from pygame.time.Clock, optionally limited to fps ticks per second. """

    def __init__(self, fps: int = 0):
        self.fps = fps
        self._clock = pygame.time.Clock()
        self._dt = 0.

    def tick(self) -> None:
        self._clock.tick(self.fps)
        self._dt = self._clock.get_time() / 1000

    def delta_time(self) -> float:
        return self._dt
