"""
Collision triggered reset of a car: brake to a stop, then go back to the spawn pose.

Collisions arrive from the transform at any time; they are only stored here and
take effect when the controller consumes them at the start of its next tick.
"""
from enum import Enum
from typing import Callable, Dict, Optional

from airace.airace_utils import my_logger
from airace.motion_state import motion_state

logger = my_logger(__name__)


class collision_category(Enum):
    WALL = 'wall'
    CAR = 'car'
    OTHER = 'other'

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> 'collision_category':
        try:
            return cls(str(tag).lower())
        except ValueError:
            return cls.OTHER


class reset_phase(Enum):
    ACTIVE = 'active'
    RESET_PENDING = 'reset_pending'


class reset_sequencer:
    """
    Two-phase state machine ACTIVE -> RESET_PENDING -> ACTIVE, cycling for the lifetime of the car.

    Each collision_category has its own handler deciding whether the contact requests a reset.
    Every category requests one for now.
    """

    def __init__(self, state: motion_state):
        self.state = state
        self._pending_event: Optional[collision_category] = None
        self.handlers: Dict[collision_category, Callable[[collision_category], bool]] = {
            collision_category.WALL: self.reset_on_contact,
            collision_category.CAR: self.reset_on_contact,
            collision_category.OTHER: self.reset_on_contact,
        }

    @property
    def phase(self) -> reset_phase:
        return reset_phase.RESET_PENDING if self.state.reset_pending else reset_phase.ACTIVE

    def notify_collision(self, tag: str) -> None:
        """
        Stores a collision until the next tick if its category handler asks for a reset,
        only the first such collision is kept.

        :param tag: category tag of the other object, e.g. 'wall'
        """
        category = collision_category.from_tag(tag)
        if not self.handlers[category](category):
            logger.debug('{} contact ignored'.format(category.value))
            return
        if self._pending_event is None:
            self._pending_event = category

    def has_pending_event(self) -> bool:
        return self._pending_event is not None

    def consume(self) -> bool:
        """
        Handles the stored collision, if any. Called at the start of each tick.

        :returns: True if this call started a new reset
        """
        category, self._pending_event = self._pending_event, None
        if category is None:
            return False
        if self.state.reset_pending:
            logger.debug('{} collision while reset is already pending, ignored'.format(category.value))
            return False
        self.state.reset_pending = True
        logger.info('{} collision at speed {:.2f}m/s, braking to reset'.format(category.value, self.state.speed))
        return True

    def reset_on_contact(self, category: collision_category) -> bool:
        return True

    def complete(self) -> None:
        self.state.reset_pending = False
        self.state.reset_count += 1
        logger.info('reset #{} complete, car back at spawn point'.format(self.state.reset_count))
