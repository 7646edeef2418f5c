"""
Simulation runner: drives one car_controller in a walled arena with the keyboard or an autodrive controller.

"""
import argparse
import importlib
import logging
import os
import time
from typing import Optional

import argcomplete
import pygame

from airace.airace_utils import my_logger, loop_timer, set_logging_level
from airace.car_command import car_command
from airace.car_config import car_config
from airace.car_controller import car_controller
from airace.clock import clock, fixed_clock, pygame_clock
from airace.data_recorder import data_recorder
from airace.globals import DATA_FOLDER_NAME, ARENA_HALF_WIDTH_M, ARENA_HALF_LENGTH_M
from airace.my_args import car_args, sim_args, write_args_info
from airace.transform import kinematic_transform
from airace.user_input import user_input

logger = my_logger(__name__)


def get_args(argv=None):
    parser = argparse.ArgumentParser(
        description='airace: runs a car controller in a walled arena.',
        allow_abbrev=True,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser = car_args(parser)
    parser = sim_args(parser)
    argcomplete.autocomplete(parser)
    return parser.parse_args(argv)


def load_autodrive(module_name:str, class_name:str):
    """
    :returns: an instance of the class, or None if it cannot be imported
    """
    try:
        mod = importlib.import_module(module_name)
        cl=getattr(mod, class_name)
        controller = cl()
        logger.info('using autodrive controller {}'.format(controller))
        return controller
    except (ImportError, AttributeError) as e:
        logger.error('cannot import autodrive class named "{}" from module named "{}", got exception {}'.format(class_name, module_name, e))
        return None


class simulation:
    """ Tick loop around one car_controller. """

    def __init__(self,
                 car: car_controller,
                 autodrive_controller=None,
                 keyboard=None,
                 fps:int=60,
                 realtime:bool=False,
                 record:Optional[str]=None):
        """
        :param car: the car to drive
        :param autodrive_controller: intent_controller used when autodrive is enabled
        :param keyboard: my_keyboard instance, None for headless runs under autodrive
        :param fps: target ticks per second when realtime
        :param realtime: sleep leftover time each tick
        :param record: None for no recording, else the note for the recording file name
        """
        self.car=car
        self.autodrive_controller=autodrive_controller
        if self.autodrive_controller is not None:
            self.autodrive_controller.set_car(car)
        self.keyboard=keyboard
        self.fps=fps
        self.realtime=realtime
        self.car_command=car_command()
        self.car_command.autodrive_enabled=keyboard is None
        self.user_input=user_input()
        self.recording_enabled=record is not None
        self.record_note=record
        self.data_recorder:Optional[data_recorder]=None
        self.exit=False

    def process_user_or_autodrive_input(self) -> None:
        if self.keyboard is not None:
            self.keyboard.read(self.car_command, self.user_input)
        if self.car_command.autodrive_enabled:
            if self.autodrive_controller is None:
                raise RuntimeError(
                    'Tried to use autodrive control but there is no controller defined. See AUTODRIVE_CLASS in airace/globals.py or on command line with --autodrive.')
            self.autodrive_controller.read(self.car_command)

        if self.user_input.quit:
            logger.info('quit received, ending main loop')
            self.exit = True
        if self.user_input.toggle_recording:
            self.recording_enabled = not self.recording_enabled
            logger.info(f'toggled recording_enabled={self.recording_enabled}')
        if self.user_input.restart_car:
            self.car.restart()

    def run(self, ticks:int=0) -> None:
        """
        Runs the tick loop.

        :param ticks: number of ticks to run, 0 runs until quit
        """
        looper = loop_timer(self.fps) if self.realtime else None
        logger.info('starting main loop')
        n=0
        try:
            while not self.exit and (ticks <= 0 or n < ticks):
                if looper is not None:
                    looper.sleep_leftover_time()
                self.car.clock.tick()
                if self.keyboard is not None:
                    pygame.display.flip()

                self.process_user_or_autodrive_input()
                if self.exit:
                    break
                self.car.step(self.car_command)
                self.maybe_record_data()
                n+=1
        except KeyboardInterrupt:
            logger.info('KeyboardInterrupt, stopping simulation')
        finally:
            self.stop_recording()
        logger.info('ending main loop after {} ticks: {}'.format(n, self.car))

    def maybe_record_data(self) -> None:
        if not self.recording_enabled:
            self.stop_recording()
            return
        if self.data_recorder is None:
            self.data_recorder = data_recorder(car=self.car, note=self.record_note)
            try:
                self.data_recorder.open_new_recording()
            except RuntimeError as e:
                logger.warning('Could not open data recording; caught {}'.format(e))
                self.data_recorder = None
                self.recording_enabled = False
                return
        self.data_recorder.write_sample()

    def stop_recording(self) -> None:
        if self.data_recorder is not None:
            self.data_recorder.close_recording()
            self.data_recorder = None


def main(argv=None):
    args = get_args(argv)
    set_logging_level(args)
    config = car_config.from_args(args)  # raises ValueError on bad tuning values

    fh = None
    if args.record is not None:  # if recording data, also record command line arguments and log output to a text file
        if not os.path.exists(DATA_FOLDER_NAME):
            os.makedirs(DATA_FOLDER_NAME)
        timestr = time.strftime("%Y%m%d-%H%M")
        filepath = os.path.join(DATA_FOLDER_NAME, 'airace-log-' + str(timestr) + '.txt')
        logger.info('Since recording is enabled, writing arguments and logger output to {}'.format(filepath))
        infofile = write_args_info(args, filepath)
        fh = logging.FileHandler(infofile)
        fh.setLevel(logging.INFO)
        fh.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logging.getLogger('airace').addHandler(fh)

    arena = None if args.no_walls else (ARENA_HALF_WIDTH_M, ARENA_HALF_LENGTH_M)
    realtime = args.realtime or args.keyboard  # a human needs real time
    if realtime:
        pygame.init()
    try:
        # loop_timer paces realtime runs, the pygame clock only measures dt
        time_source: clock = pygame_clock() if realtime else fixed_clock(1. / args.fps)

        keyboard = None
        if args.keyboard:
            from airace.my_keyboard import my_keyboard
            pygame.display.set_mode((320, 240))
            pygame.display.set_caption('airace')
            keyboard = my_keyboard()

        car = car_controller(kinematic_transform(arena_half_size_m=arena), time_source, config=config, name=args.car_name)
        sim = simulation(car,
                         autodrive_controller=load_autodrive(args.autodrive[0], args.autodrive[1]),
                         keyboard=keyboard,
                         fps=args.fps,
                         realtime=realtime,
                         record=args.record)
        sim.run(args.ticks)
    finally:
        if realtime:
            pygame.quit()
        if fh is not None:
            logging.getLogger('airace').removeHandler(fh)
            fh.close()


if __name__ == '__main__':
    main()
