# converts turn force into yaw change
from airace.airace_utils import clamp
from airace.car_config import car_config
from airace.motion_state import motion_state


class turn_integrator:
    """
    Yaw change scales with speed relative to its bound, so a stationary car cannot turn.
    """

    def __init__(self, config: car_config):
        self.config = config

    def relative_speed(self, state: motion_state) -> float:
        if state.speed >= 0:
            return state.speed / self.config.max_forward_speed
        return state.speed / self.config.max_reverse_speed

    def turn(self, state: motion_state, force: float, dt: float) -> float:
        """
        :param state: the motion_state, not modified
        :param force: the applied turn force
        :param dt: tick duration in seconds

        :returns: yaw change in degrees, 0 while a reset is pending
        """
        if state.reset_pending:
            return 0.
        return clamp(force, -1., 1.) * self.config.steering_rate * self.relative_speed(state) * dt
