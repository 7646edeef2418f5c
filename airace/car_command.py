# structure to hold driver control input
from typing import Optional


class car_command:
    """
    Car control intents from software agent or human driver, i.e., the drive, turn, and brake input.

    Also includes the autodrive_enabled boolean flag.
    """

    def __init__(self, drive:float=0., turn:float=0., brake:Optional[float]=None):
        self.drive=drive  # target drive force bounded by -1:1, negative drives backwards or brakes when moving forwards
        self.turn=turn  # target turn force bounded by -1:1, positive turns clockwise seen from above
        self.brake=brake  # brake intensity 0-1, None when the brake is not pressed
        self.autodrive_enabled = False # boolean activate or deactivate the autonomous driving, mapped to y key

    def __str__(self):
        brake='off' if self.brake is None else '{:.2f}'.format(self.brake)
        return 'drive={:.2f}, turn={:.2f}, brake={} auto={}'.format(self.drive, self.turn, brake, self.autodrive_enabled)
