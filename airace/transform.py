"""
Transform/physics collaborator of the car_controller.

The controller only reads and writes the pose through this interface; collision detection happens
behind it and is reported to listeners as a category tag string, e.g. 'wall' or 'car'.
Orientation is the yaw angle in degrees about the up (y) axis, 0 is the identity orientation.
"""
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Tuple

from pygame.math import Vector3

from airace.airace_utils import my_logger
from airace.globals import SPAWN_POSITION, SPAWN_ORIENTATION_DEG, ARENA_HALF_WIDTH_M, ARENA_HALF_LENGTH_M

logger = my_logger(__name__)

FORWARD = Vector3(0., 0., 1.)  # forward direction at identity orientation


class transform(ABC):
    """ Pose provider and collision source for one car. """

    def __init__(self):
        self._collision_listeners: List[Callable[[str], None]] = []

    @abstractmethod
    def get_position(self) -> Vector3:
        pass

    @abstractmethod
    def get_orientation(self) -> float:
        pass

    @abstractmethod
    def set_position(self, p: Vector3) -> None:
        pass

    @abstractmethod
    def set_orientation(self, yaw_deg: float) -> None:
        pass

    @abstractmethod
    def set_velocity(self, v: Vector3) -> None:
        pass

    def rotate_by(self, yaw_deg: float) -> None:
        self.set_orientation(self.get_orientation() + yaw_deg)

    def forward(self) -> Vector3:
        """ Unit vector the car is facing. """
        return FORWARD.rotate_y(self.get_orientation())

    def add_collision_listener(self, listener: Callable[[str], None]) -> None:
        """
        :param listener: called with the category tag of the other object on every contact
        """
        self._collision_listeners.append(listener)

    def fire_collision(self, tag: str) -> None:
        logger.debug('collision with "{}"'.format(tag))
        for l in self._collision_listeners:
            l(tag)


class kinematic_transform(transform):
    """
    Headless transform without physics. set_position moves the car and reports a 'wall'
    collision when the new position leaves the rectangular arena; the car stays at the wall.
    Other contacts can be injected with touch().
    """

    def __init__(self,
                 position: Tuple[float, float, float] = SPAWN_POSITION,
                 yaw_deg: float = SPAWN_ORIENTATION_DEG,
                 arena_half_size_m: Optional[Tuple[float, float]] = (ARENA_HALF_WIDTH_M, ARENA_HALF_LENGTH_M)):
        """
        :param position: starting position (x, y, z) in m
        :param yaw_deg: starting yaw in degrees
        :param arena_half_size_m: (x, z) half sizes of the walled arena around the origin, None for no walls
        """
        super(kinematic_transform, self).__init__()
        self.position = Vector3(position)
        self.yaw_deg = float(yaw_deg)
        self.velocity = Vector3(0., 0., 0.)
        self.arena_half_size_m = arena_half_size_m

    def get_position(self) -> Vector3:
        return Vector3(self.position)

    def get_orientation(self) -> float:
        return self.yaw_deg

    def set_position(self, p: Vector3) -> None:
        p = Vector3(p)
        if self.arena_half_size_m is not None:
            hx, hz = self.arena_half_size_m
            if abs(p.x) > hx or abs(p.z) > hz:
                p.x = max(-hx, min(hx, p.x))
                p.z = max(-hz, min(hz, p.z))
                self.position = p
                self.fire_collision('wall')
                return
        self.position = p

    def set_orientation(self, yaw_deg: float) -> None:
        # keep the angle bounded, the car may spin many times
        self.yaw_deg = float(yaw_deg) % 360.

    def set_velocity(self, v: Vector3) -> None:
        self.velocity = Vector3(v)

    def touch(self, tag: str) -> None:
        """ Reports a contact with another object, e.g. touch('car'). """
        self.fire_collision(tag)

    def __str__(self):
        return 'pos=({:.2f},{:.2f},{:.2f})m yaw={:.1f}deg'.format(self.position.x, self.position.y, self.position.z, self.yaw_deg)
