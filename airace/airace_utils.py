# utility methods
import logging
import os
from collections import deque
from time import sleep
from timeit import default_timer as timer

import numpy as np

from airace.globals import LOGGING_LEVEL


class CustomFormatter(logging.Formatter):
    """Logging Formatter to add colors and count warning / errors"""

    grey = "\x1b[38;21m"
    yellow = "\x1b[33;21m"
    red = "\x1b[31;21m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"
    format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"

    FORMATS = {
        logging.DEBUG: grey + format + reset,
        logging.INFO: grey + format + reset,
        logging.WARNING: yellow + format + reset,
        logging.ERROR: red + format + reset,
        logging.CRITICAL: bold_red + format + reset
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


def my_logger(name):
    logger = logging.getLogger(name)
    logger.setLevel(LOGGING_LEVEL)

    # only one console handler per logger, modules may be imported more than once
    if not any(isinstance(h.formatter, CustomFormatter) for h in logger.handlers):
        ch = logging.StreamHandler()
        ch.setLevel(logging.DEBUG)
        ch.setFormatter(CustomFormatter())
        logger.addHandler(ch)
    return logger

logger = my_logger(__name__)

LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL,
}

def set_logging_level(args) -> int:
    """
    Sets the level of all airace loggers from args.log.

    :param args: parsed arguments with a log field, e.g. 'DEBUG'
    :returns: the level that was set
    """
    level = LEVELS.get(str(args.log).upper())
    if level is None:
        level = LOGGING_LEVEL
        logger.warning('unknown logging level {} specified, using default level {}'.format(args.log, logging.getLevelName(level)))
    for name in list(logging.root.manager.loggerDict):
        if name == 'airace' or name.startswith('airace.'):
            logging.getLogger(name).setLevel(level)
    return level


def clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def clamp01(value: float) -> float:
    return clamp(value, 0., 1.)


class circular_buffer(deque):
    def __init__(self, size=0):
        super(circular_buffer, self).__init__(maxlen=size)

    def hist(self):
        return np.histogram(np.array(self))


class loop_timer():
    """ simple game loop timer that sleeps for leftover time (if any) at end of each iteration"""
    LOG_INTERVAL_SEC=10
    NUM_SAMPLES=1000
    def __init__(self, rate_hz:float):
        ''' :param rate_hz: the target loop rate'''
        self.rate_hz=rate_hz
        self.start_loop()
        self.loop_counter=0
        self.last_log_time=0
        self.circ_buffer=circular_buffer(self.NUM_SAMPLES)
        self.first_call_done=False

    def start_loop(self):
        """ can be called to initialize the timer"""
        self.last_iteration_start_time=timer()

    def sleep_leftover_time(self):
        """ call at start or end of each iteration """
        now=timer()
        if not self.first_call_done:
            self.first_call_done=True
            return # don't sleep on first call at start of loop

        max_sleep=1./self.rate_hz
        dt=(now-self.last_iteration_start_time)
        leftover_time=max_sleep-dt
        self.circ_buffer.append(dt)
        if leftover_time>0:
            sleep(leftover_time)
        self.start_loop()
        self.loop_counter+=1
        if now-self.last_log_time>self.LOG_INTERVAL_SEC:
            self.last_log_time=now
            if leftover_time>0:
                logger.debug('loop_timer slept for {:.1f}ms leftover time for desired loop interval {:.1f}ms'.format(leftover_time*1000,max_sleep*1000))
            else:
                logger.warning('loop_timer cannot achieve desired rate {}Hz, time ran over by {:.1f}ms compared with allowed time {:.1f}ms'.format(self.rate_hz, -leftover_time*1000, max_sleep*1000))
            logger.debug('histogram of intervals (counts and bin edges in s)\n{}'.format(self.circ_buffer.hist()))


def checkAddSuffix(path: str, suffix: str):
    if path.endswith(suffix):
        return path
    else:
        return os.path.splitext(path)[0]+suffix
