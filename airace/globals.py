""" global parameters"""
import logging

LOGGING_LEVEL=logging.INFO # set the overall default leval, change with --log option

#######################################################
# car behavior, tuned against a keyboard driven car at ~60fps

STEERING_RATE = 100.  # degrees/s of yaw at full turn force and full forward speed
BRAKING_RATE = 20.  # m/s^2 of deceleration at full brake intensity
ACCELERATION = 30.  # m/s^2 at full drive force
MAX_FORWARD_SPEED = 30.  # m/s
MAX_REVERSE_SPEED = -10.  # m/s, must be negative
FRICTION_BRAKE = 10.  # m/s^2 of deceleration applied every tick while moving
ABOUT_ZERO = 0.01  # |speed| below this is snapped to exactly zero
FORCE_CHANGE_RATE = 0.05  # max change of applied drive/turn force per tick, measured rate of a keyboard axis was ~0.0495

DEFAULT_BRAKE_INTENSITY = 0.75  # intensity used by brake() when none is given
RESET_BRAKE_INTENSITY = 1.0  # intensity of the forced brake while a reset is pending

# set to a tick duration in seconds to scale FORCE_CHANGE_RATE by dt/FORCE_RATE_REFERENCE_DT,
# None applies FORCE_CHANGE_RATE as a flat per-tick constant
FORCE_RATE_REFERENCE_DT = None

#######################################################
# spawn pose and arena

SPAWN_POSITION = (0., 0.5, 0.)  # x, y (up), z in meters
SPAWN_ORIENTATION_DEG = 0.  # identity yaw
ARENA_HALF_WIDTH_M = 100.  # walls at +-this in x
ARENA_HALF_LENGTH_M = 100.  # walls at +-this in z

#######################################################
# runner

FPS=60 # ticks per second for the simulation loop
CAR_NAME='airacer' # name written to recordings
SIM_TICKS=0  # number of ticks to run, 0 runs until quit

# your autodrive controller module and class name, must be a class that has read method that fills a car_command() object
# overridden by command line --autodrive
AUTODRIVE_MODULE='airace.controllers.cruise_controller'
AUTODRIVE_CLASS='cruise_controller'
CRUISE_TARGET_SPEED = 0.5  # normalized speed held by the cruise_controller
CRUISE_TURN = 0.2  # constant turn request of the cruise_controller

# recording data
DATA_FILENAME_BASE= 'airace'
DATA_FOLDER_NAME= 'data'

# help message printed by hitting h or ? key
HELP="""Keyboard commands:
    drive with UP/DOWN or W/S keys, turn with LEFT/RIGHT or A/D keys
    hold SPACE pressed to brake
    y toggles automatic control
    r resets car to spawn point
    l toggles recording to uniquely-named CSV file
    ESC quits
    h|? shows this help
    """
