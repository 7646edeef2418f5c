import math
import random

import pytest
from pygame.math import Vector3

from airace.car_command import car_command
from airace.car_config import car_config
from airace.car_controller import car_controller
from airace.clock import clock, fixed_clock
from airace.reset_sequencer import collision_category
from airace.transform import kinematic_transform


class settable_clock(clock):
    def __init__(self, dt):
        self.dt = dt

    def delta_time(self):
        return self.dt


def make_car(dt=0.1, arena=None, **config):
    return car_controller(kinematic_transform(arena_half_size_m=arena), fixed_clock(dt), config=car_config(**config))


def test_new_car_is_at_rest(car):
    assert car.speed == 0.
    assert car.current_drive_force() == 0.
    assert car.current_turn_force() == 0.
    assert not car.reset_pending


def test_single_drive_call_from_rest():
    car = make_car(dt=1.)
    car.drive(1.)
    assert car.current_drive_force() == pytest.approx(0.05)
    assert car.speed == pytest.approx(1.5)


def test_friction_without_input():
    car = make_car(dt=0.5)
    car.state.speed = 10.
    car.step(car_command())
    assert car.speed == pytest.approx(5.)


def test_friction_runs_before_drive():
    car = make_car(dt=1.)
    car.state.speed = 5.
    car.step(car_command(drive=1.))
    # friction stops the car first, then the applied force 0.05 accelerates it
    assert car.speed == pytest.approx(1.5)


def test_brake_clamps_at_zero():
    car = make_car(dt=1.)
    car.state.speed = 5.
    car.brake(1.)
    assert car.speed == 0.


def test_repeated_brake_keeps_zero(car):
    car.state.speed = 0.005
    for _ in range(5):
        car.brake()
        assert car.speed == 0.


def test_default_brake_intensity(car):
    car.state.speed = 10.
    car.brake()
    assert car.speed == pytest.approx(10. - 20. * 0.75 * 0.1)


def test_brake_leaves_drive_force_alone(car):
    for _ in range(4):
        car.drive(1.)
    force = car.current_drive_force()
    car.brake(1.)
    assert car.current_drive_force() == force


def test_turn_rotates_transform(car, car_transform):
    car.state.speed = 15.
    car.state.turn_force = 1.
    delta = car.turn(1.)
    assert delta == pytest.approx(5.)
    assert car_transform.get_orientation() == pytest.approx(5.)


def test_stationary_car_does_not_turn(car, car_transform):
    for _ in range(30):
        assert car.turn(1.) == 0.
    assert car.current_turn_force() == 1.
    assert car_transform.get_orientation() == 0.


def test_step_moves_car_forward(car, car_transform):
    car.state.speed = 10.
    car.step(car_command())
    # friction takes 1m/s off before the move
    assert car_transform.get_position().z == pytest.approx(0.9)
    assert car_transform.get_position().x == pytest.approx(0.)


def test_normalized_speed(car):
    car.state.speed = 15.
    assert car.normalized_speed() == pytest.approx(0.5)
    car.state.speed = -5.
    assert car.normalized_speed() == pytest.approx(-0.5)
    car.state.speed = 0.
    assert car.normalized_speed() == 0.


def test_out_of_range_intents_keep_forces_in_bounds(car):
    for _ in range(100):
        car.step(car_command(drive=4., turn=-9.))
        assert -1. <= car.current_drive_force() <= 1.
        assert -1. <= car.current_turn_force() <= 1.
    assert car.current_drive_force() == 1.
    assert car.current_turn_force() == -1.


def test_speed_stays_in_bounds_for_random_inputs():
    car = make_car(dt=0.05)
    rng = random.Random(0)
    for i in range(3000):
        cmd = car_command(drive=rng.uniform(-3., 3.), turn=rng.uniform(-3., 3.))
        if rng.random() < 0.1:
            cmd.brake = rng.uniform(-2., 2.)
        if rng.random() < 0.01:
            car.notify_collision(rng.choice(['wall', 'car', 'tree']))
        car.step(cmd)
        assert car.config.max_reverse_speed <= car.speed <= car.config.max_forward_speed
        if rng.random() < 0.2:
            car.drive(rng.uniform(-3., 3.))
            assert car.config.max_reverse_speed <= car.speed <= car.config.max_forward_speed
            car.brake(rng.random())
            assert car.config.max_reverse_speed <= car.speed <= car.config.max_forward_speed


def test_collision_brakes_to_stop_then_restores_spawn_pose(car, car_transform):
    car_transform.set_orientation(45.)
    car.state.speed = 8.
    car.notify_collision('wall')
    assert not car.reset_pending  # not before the next tick

    speeds = []
    while True:
        car.step(car_command(drive=1., turn=1.))
        speeds.append(car.speed)
        if not car.reset_pending:
            break
        assert car_transform.get_orientation() == 45.
        assert len(speeds) < 100

    assert speeds == pytest.approx([6., 4., 2., 0.])
    assert car_transform.get_position() == Vector3(0., 0.5, 0.)
    assert car_transform.get_orientation() == 0.
    assert car_transform.velocity == Vector3(0., 0., 0.)
    assert car.state.reset_count == 1


def test_drive_is_ignored_while_reset_pending(car):
    car.state.speed = 8.
    car.notify_collision('car')
    car.step(car_command(drive=1.))
    speed = car.speed
    car.drive(1.)
    assert car.speed == speed
    assert car.current_drive_force() > 0.


def test_collision_at_rest_resets_in_same_tick(car, car_transform):
    car_transform.set_position(Vector3(3., 0.5, 4.))
    car.notify_collision('wall')
    car.step()
    assert not car.reset_pending
    assert car_transform.get_position() == Vector3(0., 0.5, 0.)


def test_repeated_collisions_reset_once(car):
    car.state.speed = 8.
    car.notify_collision('wall')
    car.step()
    car.notify_collision('wall')
    car.notify_collision('car')
    while car.reset_pending:
        car.step()
    assert car.state.reset_count == 1


def test_restart_runs_reset_sequence(car, car_transform):
    car_transform.set_position(Vector3(1., 0.5, 1.))
    car.restart()
    car.step()
    assert car_transform.get_position() == Vector3(0., 0.5, 0.)
    assert car.state.reset_count == 1


def test_wall_in_arena_triggers_reset():
    car = make_car(dt=0.1, arena=(1., 1.))
    car.state.speed = 20.
    car.step()
    assert car.transform.get_position().z == 1.
    assert not car.reset_pending
    previous = car.speed
    for _ in range(100):
        car.step(car_command(drive=1.))
        if not car.reset_pending:
            break
        assert car.speed < previous
        previous = car.speed
    assert not car.reset_pending
    assert car.speed == 0.
    assert car.transform.get_position() == Vector3(0., 0.5, 0.)


@pytest.mark.parametrize('dt', [math.nan, -0.1, math.inf, None])
def test_bad_dt_changes_nothing(dt):
    c = settable_clock(dt)
    car = car_controller(kinematic_transform(arena_half_size_m=None), c)
    car.state.speed = 10.
    car.step(car_command(drive=1., turn=1.))
    car.drive(1.)
    car.brake(1.)
    assert car.turn(1.) == 0.
    assert car.speed == 10.
    assert car.current_drive_force() == 0.
    c.dt = 0.1
    car.step(car_command(drive=1.))
    assert math.isfinite(car.speed)
    assert car.state.tick == 1


def test_non_finite_intent_is_treated_as_zero(car):
    car.drive(math.nan)
    car.turn(math.inf)
    assert car.current_drive_force() == 0.
    assert car.current_turn_force() == 0.
    assert car.speed == 0.


def test_force_rate_scaled_by_dt():
    car = make_car(dt=1. / 30, force_rate_reference_dt=1. / 60)
    car.drive(1.)
    assert car.current_drive_force() == pytest.approx(0.1)


def test_step_records_command_and_time(car):
    car.step(car_command(drive=0.5))
    car.step(car_command(drive=0.5))
    assert car.state.tick == 2
    assert car.state.time == pytest.approx(0.2)
    assert car.state.command.drive == 0.5


def test_ignored_car_contact_does_not_drop_wall_hit_in_same_tick(car):
    car.resetter.handlers[collision_category.CAR] = lambda c: False
    car.state.speed = 8.
    car.notify_collision('car')
    car.notify_collision('wall')
    car.step(car_command(drive=1.))
    assert car.reset_pending
    assert car.speed == pytest.approx(6.)
