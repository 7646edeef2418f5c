# applies drive, brake and friction to the speed of a motion_state
from airace.airace_utils import clamp, clamp01
from airace.car_config import car_config
from airace.motion_state import motion_state


class speed_integrator:
    """
    Integrates drive, brake and friction into the scalar speed of a motion_state.

    All speed writes go through set_speed, which keeps speed within the configured bounds
    and snaps it to exactly 0 inside the about_zero band.
    """

    def __init__(self, config: car_config):
        self.config = config

    def is_about_zero(self, speed: float) -> bool:
        """ The single 'effectively stopped' predicate, used by set_speed and the brake path. """
        return abs(speed) < self.config.about_zero

    def set_speed(self, state: motion_state, value: float) -> None:
        speed = clamp(value, self.config.max_reverse_speed, self.config.max_forward_speed)
        if self.is_about_zero(speed):
            speed = 0.
        state.speed = speed

    def apply_friction(self, state: motion_state, dt: float) -> None:
        """ Default slow down effect, always pulls speed toward 0 and never past it. """
        if state.speed > 0:
            self.set_speed(state, max(0., state.speed - self.config.friction_brake * dt))
        elif state.speed < 0:
            self.set_speed(state, min(0., state.speed + self.config.friction_brake * dt))

    def apply_drive(self, state: motion_state, force: float, dt: float) -> None:
        """
        Accelerates by force, or brakes when force opposes the direction of motion,
        i.e. pushing reverse while moving forward is a brake pedal.

        :param state: the motion_state to update
        :param force: the applied drive force
        :param dt: tick duration in seconds
        """
        if (state.speed < 0 and force >= 0) or (state.speed > 0 and force < 0):
            self.apply_brake(state, force, dt)
        else:
            self.set_speed(state, state.speed + clamp(force, -1., 1.) * self.config.acceleration * dt)

    def apply_brake(self, state: motion_state, force_magnitude: float, dt: float) -> None:
        """
        Gets the speed closer to 0 by the force and brake rate, without passing 0.

        :param state: the motion_state to update
        :param force_magnitude: brake intensity, its absolute value is clamped to 0-1
        :param dt: tick duration in seconds
        """
        brake_value = self.config.braking_rate * clamp01(abs(force_magnitude)) * dt

        if self.is_about_zero(state.speed):
            self.set_speed(state, 0.)
        elif state.speed > 0:
            self.set_speed(state, max(0., state.speed - brake_value))
        else:
            self.set_speed(state, min(0., state.speed + brake_value))
