import pytest

from airace.motion_state import motion_state
from airace.turn_integrator import turn_integrator


@pytest.fixture
def integrator(config):
    return turn_integrator(config)


def state_at(speed, reset_pending=False):
    s = motion_state()
    s.speed = speed
    s.reset_pending = reset_pending
    return s


def test_turn_scales_with_relative_speed(integrator):
    assert integrator.turn(state_at(15.), 1., 0.1) == pytest.approx(5.)
    assert integrator.turn(state_at(30.), -0.5, 0.1) == pytest.approx(-5.)


def test_no_turn_when_stationary(integrator):
    assert integrator.turn(state_at(0.), 1., 0.1) == 0.


def test_reverse_uses_reverse_bound(integrator):
    assert integrator.relative_speed(state_at(-5.)) == pytest.approx(0.5)
    assert integrator.turn(state_at(-5.), 1., 0.1) == pytest.approx(5.)


def test_turn_force_is_clamped(integrator):
    assert integrator.turn(state_at(15.), 3., 0.1) == integrator.turn(state_at(15.), 1., 0.1)


def test_no_turn_while_reset_pending(integrator):
    assert integrator.turn(state_at(15., reset_pending=True), 1., 0.1) == 0.
