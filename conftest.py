# shared pytest fixtures, this file also puts the repo root on sys.path for the tests
import pytest

from airace.car_config import car_config
from airace.car_controller import car_controller
from airace.clock import fixed_clock
from airace.transform import kinematic_transform


@pytest.fixture
def config():
    return car_config()


@pytest.fixture
def clock():
    return fixed_clock(0.1)


@pytest.fixture
def car_transform():
    return kinematic_transform(arena_half_size_m=None)


@pytest.fixture
def car(car_transform, clock, config):
    return car_controller(car_transform, clock, config=config)
