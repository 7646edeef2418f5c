# abstract base class for all automated drivers

from abc import ABC

from airace.car_command import car_command
from airace.airace_utils import my_logger

logger=my_logger(__name__)

class intent_controller(ABC):

    def __init__(self, car=None)->None:
        """
        Constructs a new instance

        :param car: the car_controller to drive, can be set later with set_car
        """
        self.car = car

    def read(self, cmd:car_command)->None:
        """
        Control the car via car_command. read sets the values of cmd.drive, cmd.turn and cmd.brake
        :param cmd: the .drive, .turn, .brake intents
        """
        if self.car is None:
            logger.error(f'car is None, {self} cannot control')

    def set_car(self,car)->None:
        """Sets the car
        :param car: car_controller object
        """
        self.car=car
