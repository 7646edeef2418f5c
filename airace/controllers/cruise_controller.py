# driver controller
from math import copysign

from airace.airace_utils import my_logger, clamp
from airace.car_command import car_command
from airace.controllers.intent_controller import intent_controller
from airace.globals import CRUISE_TARGET_SPEED, CRUISE_TURN

logger = my_logger(__name__)


class cruise_controller(intent_controller):
    """
    Reference automated driver: holds a normalized speed while turning at a constant rate,
    i.e. it drives in circles until it hits a wall.

    The drive intent is a feedforward that cancels friction plus a P term on the normalized speed error.
    """
    def __init__(self, car=None, target_speed:float=CRUISE_TARGET_SPEED, turn:float=CRUISE_TURN, kp:float=4.):
        """
        :param car: the car_controller to drive
        :param target_speed: normalized speed to hold, -1:1
        :param turn: constant turn intent, -1:1
        :param kp: proportional gain from normalized speed error to drive intent
        """
        super(cruise_controller, self).__init__(car)
        self.target_speed = target_speed
        self.turn = turn
        self.kp = kp

    def read(self, cmd:car_command)->None:
        super(cruise_controller, self).read(cmd)
        if self.car is None:
            return
        config = self.car.config
        feedforward = 0. if self.target_speed == 0 else copysign(config.friction_brake / config.acceleration, self.target_speed)
        error = self.target_speed - self.car.normalized_speed()
        cmd.drive = clamp(feedforward + self.kp * error, -1., 1.)
        cmd.turn = self.turn
        cmd.brake = None
        cmd.autodrive_enabled = True
        logger.debug('speed error {:.3f}, drive {:.3f} (applied {:.3f})'.format(error, cmd.drive, self.car.current_drive_force()))
