import glob
import logging
import os

import pygame
import pytest

from airace.car_controller import car_controller
from airace.clock import fixed_clock
from airace.controllers.cruise_controller import cruise_controller
from airace.data_recorder import load_recording
from airace.simulate import main, simulation, load_autodrive
from airace.transform import kinematic_transform


def test_load_autodrive_default_class():
    assert isinstance(load_autodrive('airace.controllers.cruise_controller', 'cruise_controller'), cruise_controller)


def test_load_autodrive_missing_class():
    assert load_autodrive('airace.controllers.cruise_controller', 'no_such_controller') is None
    assert load_autodrive('no.such.module', 'x') is None


def test_headless_run_under_autodrive():
    car = car_controller(kinematic_transform(arena_half_size_m=None), fixed_clock(1. / 60))
    sim = simulation(car, autodrive_controller=cruise_controller())
    sim.run(ticks=120)
    assert car.state.tick == 120
    assert car.speed > 0.


def test_autodrive_without_controller_fails():
    car = car_controller(kinematic_transform(arena_half_size_m=None), fixed_clock(1. / 60))
    with pytest.raises(RuntimeError):
        simulation(car).run(ticks=1)


def test_circling_car_hits_wall_and_resets():
    car = car_controller(kinematic_transform(arena_half_size_m=(20., 20.)), fixed_clock(1. / 60))
    sim = simulation(car, autodrive_controller=cruise_controller(target_speed=0.5, turn=0.05))
    sim.run(ticks=60 * 30)
    assert car.state.reset_count >= 1


def test_main_records(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main(['--ticks', '30', '--record', 'unit', '--no_walls'])
    files = glob.glob(os.path.join('data', 'airace-*-unit-*.csv'))
    assert len(files) == 1
    data = load_recording(files[0])
    assert len(data) == 30
    assert glob.glob(os.path.join('data', 'airace-log-*.txt'))
    assert not [h for h in logging.getLogger('airace').handlers if isinstance(h, logging.FileHandler)]


def test_main_rejects_bad_config():
    with pytest.raises(ValueError):
        main(['--ticks', '1', '--max_reverse_speed', '2'])


def test_repeated_recorded_runs_do_not_stack_log_handlers(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    before = len(logging.getLogger('airace').handlers)
    main(['--ticks', '2', '--record', 'a', '--no_walls'])
    main(['--ticks', '2', '--record', 'b', '--no_walls'])
    assert len(logging.getLogger('airace').handlers) == before


def test_realtime_run_shuts_pygame_down(monkeypatch):
    calls = []
    monkeypatch.setattr(pygame, 'init', lambda: calls.append('init'))
    monkeypatch.setattr(pygame, 'quit', lambda: calls.append('quit'))
    main(['--ticks', '2', '--realtime', '--no_walls'])
    assert calls == ['init', 'quit']


def test_pygame_shut_down_when_run_fails(monkeypatch):
    calls = []
    monkeypatch.setattr(pygame, 'init', lambda: calls.append('init'))
    monkeypatch.setattr(pygame, 'quit', lambda: calls.append('quit'))
    with pytest.raises(RuntimeError):
        main(['--ticks', '2', '--realtime', '--no_walls', '--autodrive', 'airace.controllers.cruise_controller', 'no_such_controller'])
    assert calls == ['init', 'quit']
