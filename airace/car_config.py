# tuning constants of one car
from math import isfinite
from typing import Optional

from airace.globals import STEERING_RATE, BRAKING_RATE, ACCELERATION, MAX_FORWARD_SPEED, MAX_REVERSE_SPEED, \
    FRICTION_BRAKE, ABOUT_ZERO, FORCE_CHANGE_RATE, DEFAULT_BRAKE_INTENSITY, RESET_BRAKE_INTENSITY, \
    FORCE_RATE_REFERENCE_DT


class car_config:
    """
    Immutable tuning constants of a car: steering, braking, acceleration, speed limits,
    friction, the zero-speed epsilon and the force change rate.

    Values are checked at construction and a ValueError is raised for any value that would
    break the speed and force bounds; nothing is silently clamped.
    """

    FIELDS = ('steering_rate', 'braking_rate', 'acceleration', 'max_forward_speed', 'max_reverse_speed',
              'friction_brake', 'about_zero', 'force_change_rate', 'default_brake_intensity',
              'reset_brake_intensity', 'force_rate_reference_dt')

    def __init__(self,
                 steering_rate: float = STEERING_RATE,
                 braking_rate: float = BRAKING_RATE,
                 acceleration: float = ACCELERATION,
                 max_forward_speed: float = MAX_FORWARD_SPEED,
                 max_reverse_speed: float = MAX_REVERSE_SPEED,
                 friction_brake: float = FRICTION_BRAKE,
                 about_zero: float = ABOUT_ZERO,
                 force_change_rate: float = FORCE_CHANGE_RATE,
                 default_brake_intensity: float = DEFAULT_BRAKE_INTENSITY,
                 reset_brake_intensity: float = RESET_BRAKE_INTENSITY,
                 force_rate_reference_dt: Optional[float] = FORCE_RATE_REFERENCE_DT):
        """
        :param steering_rate: yaw rate in deg/s at full turn force and full forward speed
        :param braking_rate: deceleration in m/s^2 at full brake intensity
        :param acceleration: acceleration in m/s^2 at full drive force
        :param max_forward_speed: upper speed bound in m/s, > 0
        :param max_reverse_speed: lower speed bound in m/s, < 0
        :param friction_brake: deceleration in m/s^2 applied every tick while moving
        :param about_zero: speeds with smaller magnitude are snapped to exactly 0, > 0
        :param force_change_rate: max change of applied force per tick
        :param default_brake_intensity: intensity used by brake() without argument, 0-1
        :param reset_brake_intensity: intensity of the forced brake while a reset is pending, 0-1
        :param force_rate_reference_dt: tick duration the force change rate was tuned for, None for a flat per-tick rate

        :raises ValueError if any value is out of range
        """
        object.__setattr__(self, '_frozen', False)
        self.steering_rate = float(steering_rate)
        self.braking_rate = float(braking_rate)
        self.acceleration = float(acceleration)
        self.max_forward_speed = float(max_forward_speed)
        self.max_reverse_speed = float(max_reverse_speed)
        self.friction_brake = float(friction_brake)
        self.about_zero = float(about_zero)
        self.force_change_rate = float(force_change_rate)
        self.default_brake_intensity = float(default_brake_intensity)
        self.reset_brake_intensity = float(reset_brake_intensity)
        self.force_rate_reference_dt = None if force_rate_reference_dt is None else float(force_rate_reference_dt)
        self._validate()
        self._frozen = True

    def __setattr__(self, key, value):
        if getattr(self, '_frozen', False):
            raise AttributeError('car_config is immutable, cannot set {}'.format(key))
        object.__setattr__(self, key, value)

    def _validate(self):
        for f in self.FIELDS:
            v = getattr(self, f)
            if v is not None and not isfinite(v):
                raise ValueError('{}={} must be finite'.format(f, v))
        for f in ('steering_rate', 'braking_rate', 'acceleration', 'friction_brake', 'force_change_rate'):
            if getattr(self, f) < 0:
                raise ValueError('{}={} must not be negative'.format(f, getattr(self, f)))
        if self.max_forward_speed <= 0:
            raise ValueError('max_forward_speed={} must be positive'.format(self.max_forward_speed))
        if self.max_reverse_speed >= 0:
            raise ValueError('max_reverse_speed={} must be negative'.format(self.max_reverse_speed))
        if self.about_zero <= 0:
            raise ValueError('about_zero={} must be positive'.format(self.about_zero))
        if self.about_zero >= min(self.max_forward_speed, -self.max_reverse_speed):
            raise ValueError('about_zero={} must be below both speed limits, or speed would always snap to 0'.format(self.about_zero))
        for f in ('default_brake_intensity', 'reset_brake_intensity'):
            if not 0 <= getattr(self, f) <= 1:
                raise ValueError('{}={} must be in 0-1'.format(f, getattr(self, f)))
        if self.reset_brake_intensity == 0:
            raise ValueError('reset_brake_intensity=0 would never stop the car during a reset')
        if self.force_rate_reference_dt is not None and self.force_rate_reference_dt <= 0:
            raise ValueError('force_rate_reference_dt={} must be positive'.format(self.force_rate_reference_dt))

    def force_rate(self, dt: float) -> float:
        """
        Force change rate for a tick of duration dt.

        :param dt: the tick duration in seconds
        :returns: force_change_rate, scaled by dt/force_rate_reference_dt if a reference tick is configured
        """
        if self.force_rate_reference_dt is None:
            return self.force_change_rate
        return self.force_change_rate * dt / self.force_rate_reference_dt

    @classmethod
    def from_args(cls, args) -> 'car_config':
        """ Builds config from parsed command line arguments, see my_args.car_args """
        return cls(**{f: getattr(args, f) for f in cls.FIELDS if hasattr(args, f)})

    def as_dict(self) -> dict:
        return {f: getattr(self, f) for f in self.FIELDS}

    def __str__(self):
        return ', '.join('{}={}'.format(k, v) for k, v in self.as_dict().items())
