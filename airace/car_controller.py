"""
Motion controller of one car, the public control surface used by human input mappings and automated drivers.

Drivers call drive(), turn() and brake() with intents in -1:1, or hand a car_command to step() once per tick.
An intensity of 0.75 is the default brake for a simple integration; drivers wanting more
control can pass anything between 0 and 1.
"""
import copy
from math import isfinite
from typing import Optional, Tuple

from pygame.math import Vector3

from airace.airace_utils import my_logger
from airace.car_command import car_command
from airace.car_config import car_config
from airace.clock import clock
from airace.force_smoother import smooth
from airace.globals import SPAWN_POSITION, SPAWN_ORIENTATION_DEG, CAR_NAME
from airace.motion_state import motion_state
from airace.reset_sequencer import reset_sequencer, collision_category
from airace.speed_integrator import speed_integrator
from airace.transform import transform
from airace.turn_integrator import turn_integrator

logger = my_logger(__name__)


class car_controller:
    """
    Controls the car: acceleration, braking, turning, and the reset after a collision.

    Owns the motion_state of the car. Pose reads and writes go through the injected transform,
    elapsed time comes from the injected clock.
    """

    def __init__(self,
                 car_transform: transform,
                 time_source: clock,
                 config: Optional[car_config] = None,
                 spawn_position: Tuple[float, float, float] = SPAWN_POSITION,
                 spawn_orientation_deg: float = SPAWN_ORIENTATION_DEG,
                 name: str = CAR_NAME):
        """
        :param car_transform: pose provider and collision source of this car
        :param time_source: supplies the tick duration
        :param config: tuning constants, default car_config() if None
        :param spawn_position: canonical position restored after a reset
        :param spawn_orientation_deg: canonical yaw restored after a reset
        :param name: car name for logging and recordings
        """
        self.transform = car_transform
        self.clock = time_source
        self.config = config if config is not None else car_config()
        self.spawn_position = Vector3(spawn_position)
        self.spawn_orientation_deg = float(spawn_orientation_deg)
        self.name = name

        self.state = motion_state()
        self.speed_integrator = speed_integrator(self.config)
        self.turn_integrator = turn_integrator(self.config)
        self.resetter = reset_sequencer(self.state)
        self._warned_bad_dt = False

        self.transform.add_collision_listener(self.notify_collision)
        logger.debug('created car_controller "{}" with {}'.format(self.name, self.config))

    # read-only telemetry

    @property
    def speed(self) -> float:
        return self.state.speed

    @property
    def reset_pending(self) -> bool:
        return self.state.reset_pending

    def normalized_speed(self) -> float:
        """
        Will return speed value from -1 to 1, negative when reversing.
        """
        if self.state.speed >= 0:
            return self.state.speed / self.config.max_forward_speed
        return -self.state.speed / self.config.max_reverse_speed

    def current_drive_force(self) -> float:
        return self.state.drive_force

    def current_turn_force(self) -> float:
        return self.state.turn_force

    # collisions

    def notify_collision(self, tag: str) -> None:
        """ Collision callback of the transform, takes effect at the next tick. """
        self.resetter.notify_collision(tag)

    def restart(self) -> None:
        """ Sends the car back to its spawn point through the regular reset sequence. """
        logger.info('restart of car "{}" requested'.format(self.name))
        self.resetter.notify_collision(collision_category.OTHER.value)

    # control intents

    def drive(self, target_force: float) -> None:
        """
        Moves the applied drive force toward target_force, then accelerates by it,
        or brakes when it opposes the direction of motion.

        :param target_force: requested force in -1:1, larger values are clamped
        """
        dt = self._delta_time()
        if dt == 0:
            return
        force = self._smooth_force('drive_force', target_force, dt)
        if not self.state.reset_pending:
            self.speed_integrator.apply_drive(self.state, force, dt)

    def turn(self, target_force: float) -> float:
        """
        Moves the applied turn force toward target_force, then yaws the car by it.

        :param target_force: requested force in -1:1, larger values are clamped
        :returns: the yaw change in degrees
        """
        dt = self._delta_time()
        if dt == 0:
            return 0.
        force = self._smooth_force('turn_force', target_force, dt)
        turn_value = self.turn_integrator.turn(self.state, force, dt)
        if turn_value != 0:
            self.transform.rotate_by(turn_value)
        return turn_value

    def brake(self, intensity: Optional[float] = None) -> None:
        """
        Gets the speed closer to 0 by the intensity and brake rate. Does not change the applied drive force.

        :param intensity: 0-1, config.default_brake_intensity if None
        """
        dt = self._delta_time()
        if dt == 0:
            return
        if intensity is None:
            intensity = self.config.default_brake_intensity
        intensity = self._finite_or_zero('brake intensity', intensity)
        self.speed_integrator.apply_brake(self.state, intensity, dt)

    # tick

    def step(self, command: Optional[car_command] = None) -> None:
        """
        Runs one tick: handles a pending collision, then either brakes toward the reset
        or applies friction, drive, brake and turn, and finally moves the car.

        :param command: intents for this tick, no input if None
        """
        if command is None:
            command = car_command()
        self.resetter.consume()
        dt = self._delta_time()
        if dt == 0:
            return

        if self.state.reset_pending:
            # intents only move the applied forces, the car ignores them until the reset is done
            self.drive(command.drive)
            self.turn(command.turn)
            self.speed_integrator.apply_brake(self.state, self.config.reset_brake_intensity, dt)
            if self.state.speed == 0:
                self._restore_spawn_pose()
        else:
            if self.state.speed != 0:
                self.speed_integrator.apply_friction(self.state, dt)
            self.drive(command.drive)
            if command.brake is not None:
                self.brake(command.brake)
            self.turn(command.turn)

        if self.state.speed != 0:
            self._move(dt)

        self.state.time += dt
        self.state.tick += 1
        self.state.command = copy.copy(command)
        logger.debug(str(self.state))

    def _move(self, dt: float) -> None:
        p = self.transform.get_position()
        self.transform.set_position(p + self.transform.forward() * (self.state.speed * dt))

    def _restore_spawn_pose(self) -> None:
        self.transform.set_position(Vector3(self.spawn_position))
        self.transform.set_orientation(self.spawn_orientation_deg)
        self.transform.set_velocity(Vector3(0., 0., 0.))
        self.resetter.complete()

    def _smooth_force(self, field: str, target_force: float, dt: float) -> float:
        target_force = self._finite_or_zero(field, target_force)
        force = smooth(getattr(self.state, field), target_force, self.config.force_rate(dt))
        setattr(self.state, field, force)
        return force

    def _finite_or_zero(self, name: str, value) -> float:
        try:
            value = float(value)
        except (TypeError, ValueError):
            logger.warning('{}={} is not a number, using 0'.format(name, value))
            return 0.
        if not isfinite(value):
            logger.warning('{}={} is not finite, using 0'.format(name, value))
            return 0.
        return value

    def _delta_time(self) -> float:
        """ Tick duration from the clock, 0 if it is negative or not finite. """
        dt = self.clock.delta_time()
        try:
            ok = isfinite(dt) and dt >= 0
        except TypeError:
            ok = False
        if not ok:
            if not self._warned_bad_dt:
                logger.warning('clock returned dt={}, treating it as no elapsed time'.format(dt))
                self._warned_bad_dt = True
            return 0.
        return float(dt)

    def __str__(self):
        return '{}: {} {}'.format(self.name, str(self.state), str(self.transform))
