# the mutable motion state of one car
from airace.car_command import car_command

VERSION='1.0'


class motion_state:
    """
    Mutable state of a car, owned by its car_controller.

    speed is signed in m/s, drive_force and turn_force are the applied (smoothed) forces in -1:1,
    reset_pending is set from a collision until the car is stopped and back at its spawn pose.
    """

    def __init__(self):
        self.time=0.  # seconds of simulated time
        self.tick=0  # number of completed ticks
        self.speed=0.
        self.drive_force=0.
        self.turn_force=0.
        self.reset_pending=False
        self.reset_count=0  # completed resets since spawn

        # last command applied by the controller, for recording
        self.command = car_command()

        # define all fields to be written to CSV file.
        # If field is bool it will be written as 0,1 for False,True
        self.csv_fields=[
            'time',
            'tick',
            'command.drive',
            'command.turn',
            'command.brake',
            'command.autodrive_enabled',
            'speed',
            'drive_force',
            'turn_force',
            'reset_pending',
            'reset_count',
        ]

    def __str__(self):
        return 't={:.3f}s tick={} speed={:6.2f}m/s drive_force={:5.2f} turn_force={:5.2f} reset_pending={}\n{}'.format(
            self.time, self.tick, self.speed, self.drive_force, self.turn_force, self.reset_pending, str(self.command))

    def get_field(self, name:str):
        if '.' in name: # e.g. command.drive
            parts=name.partition('.')
            return getattr(getattr(self,parts[0]),parts[2])
        return getattr(self,name)

    def get_record_csvrow(self) -> str:
        """
        :return: row of CSV file
        """
        l=[]
        for m in self.csv_fields:
            v=self.get_field(m)
            if isinstance(v,bool):
                v=1 if v else 0
            elif v is None:
                v=''
            l.append(v)
        return ','.join('{}'.format(v) for v in l)
