# Driver control input from keyboard
import pygame
from pygame import KEYDOWN, KEYUP, K_QUESTION, K_h, K_r, K_ESCAPE, K_y, K_l

from airace.airace_utils import my_logger
from airace.car_command import car_command
from airace.globals import HELP, DEFAULT_BRAKE_INTENSITY
from airace.user_input import user_input

logger = my_logger(__name__)


def show_help():
    print(HELP)


def command_from_pressed(pressed, cmd:car_command, brake_intensity:float=DEFAULT_BRAKE_INTENSITY) -> None:
    """
    Sets drive, turn and brake intents from keys held pressed down.

    :param pressed: key state indexed by pygame key constants, e.g. pygame.key.get_pressed()
    :param cmd: the car_command to fill
    :param brake_intensity: brake intensity while SPACE is held
    """
    if pressed[pygame.K_UP] or pressed[pygame.K_w]:
        cmd.drive=1.
    elif pressed[pygame.K_DOWN] or pressed[pygame.K_s]:
        cmd.drive=-1.
    else:
        cmd.drive=0.

    if pressed[pygame.K_RIGHT] or pressed[pygame.K_d]:
        cmd.turn = +1. # turn CW seen from above
    elif pressed[pygame.K_LEFT] or pressed[pygame.K_a]:
        cmd.turn = -1. # turn CCW seen from above
    else:
        cmd.turn = 0.

    cmd.brake = brake_intensity if pressed[pygame.K_SPACE] else None


class my_keyboard:

    def __init__(self):
        """
        Makes a new my_keyboard, needs a pygame display to receive events.
        """
        pygame.init()
        pygame.key.set_repeat(0) # disable repeat

    def read(self, car_command:car_command, user_input:user_input) -> None:
        """
        Read keyboard events and determines both car command and other types of UI commands.

        :param car_command: car command populated with user keyboard pressed down changes
        :param user_input: special commands that might be input
        """
        user_input.restart_car=False
        user_input.toggle_recording=False

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                user_input.quit = True
            elif event.type==KEYUP:
                key=event.key
                if key==K_QUESTION or key==K_h or key==pygame.K_F1:
                    show_help()
                elif key==K_r:
                    user_input.restart_car=True
                    logger.info('resetting car to spawn point')
                elif key==K_ESCAPE:
                    user_input.quit = True
                    logger.info('ESC key typed, quitting')
                elif key==K_l:
                    user_input.toggle_recording= True
            elif event.type==KEYDOWN and event.key==K_y:
                car_command.autodrive_enabled=not car_command.autodrive_enabled
                logger.info('autodrive_enabled={}'.format(car_command.autodrive_enabled))

        # if no event, we still need to process control input by keys held pressed
        pressed = pygame.key.get_pressed()
        command_from_pressed(pressed, car_command)
