# arguments for airace simulation runner
import logging

from airace.airace_utils import my_logger
from airace.globals import *

logger = my_logger(__name__)


def car_args(parser):
    carGroup = parser.add_argument_group('Car tuning options:')
    carGroup.add_argument("--steering_rate", type=float, default=STEERING_RATE, help="Yaw rate in deg/s at full turn force and full forward speed.")
    carGroup.add_argument("--braking_rate", type=float, default=BRAKING_RATE, help="Deceleration in m/s^2 at full brake intensity.")
    carGroup.add_argument("--acceleration", type=float, default=ACCELERATION, help="Acceleration in m/s^2 at full drive force.")
    carGroup.add_argument("--max_forward_speed", type=float, default=MAX_FORWARD_SPEED, help="Max forward speed in m/s, must be positive.")
    carGroup.add_argument("--max_reverse_speed", type=float, default=MAX_REVERSE_SPEED, help="Max reverse speed in m/s, must be negative.")
    carGroup.add_argument("--friction_brake", type=float, default=FRICTION_BRAKE, help="Deceleration in m/s^2 applied every tick while moving.")
    carGroup.add_argument("--about_zero", type=float, default=ABOUT_ZERO, help="Speeds with smaller magnitude are snapped to 0.")
    carGroup.add_argument("--force_change_rate", type=float, default=FORCE_CHANGE_RATE, help="Max change of applied drive/turn force per tick.")
    carGroup.add_argument("--force_rate_reference_dt", type=float, default=FORCE_RATE_REFERENCE_DT, help="If set, scale force_change_rate by dt/force_rate_reference_dt.")
    carGroup.add_argument("--default_brake_intensity", type=float, default=DEFAULT_BRAKE_INTENSITY, help="Brake intensity when none is given, 0-1.")
    carGroup.add_argument("--reset_brake_intensity", type=float, default=RESET_BRAKE_INTENSITY, help="Brake intensity while a collision reset is pending, 0-1.")
    return parser


def sim_args(parser):
    simGroup = parser.add_argument_group('Simulation options:')
    simGroup.add_argument("--fps", type=int, default=FPS, help="Ticks per second.")
    simGroup.add_argument("--ticks", type=int, default=SIM_TICKS, help="Number of ticks to run, 0 runs until quit.")
    simGroup.add_argument("--realtime", action='store_true', help="Pace the loop to --fps and take dt from the wall clock instead of a fixed 1/fps.")
    simGroup.add_argument("--keyboard", action='store_true', help="Drive with the keyboard, opens a pygame window to receive key events.")
    simGroup.add_argument("--no_walls", action='store_true', help="Run without arena walls, i.e. without wall collisions.")
    simGroup.add_argument("--car_name", type=str, default=CAR_NAME, help="Name of this car.")

    controllerGroup = parser.add_argument_group('Control arguments:')
    controllerGroup.add_argument("--autodrive",type=str,nargs=2, default=[AUTODRIVE_MODULE,AUTODRIVE_CLASS],help="The autodrive module and class to be run when autodrive is enabled. Pass it the module (i.e. package.file without .py) and the class within the file.")

    outputGroup = parser.add_argument_group('Output options:')
    outputGroup.add_argument("--record", nargs='?',const='',  type=str, help="Record data to date-stamped filename with optional <note>, e.g. --record will write datestamped files named '{}-<car_name>-<note>-TTT.csv' in folder '{}', where note is optional note and TTT is a date/timestamp.".format(DATA_FILENAME_BASE, DATA_FOLDER_NAME))

    # other options
    parser.add_argument('--log',type=str,default=str(logging.getLevelName(LOGGING_LEVEL)),help='Set logging level. From most to least verbose, choices are "DEBUG", "INFO", "WARNING".')
    return parser


def write_args_info(args, filepath)-> str:
    """
    Writes arguments to logger and file

    :param args: parser.parse_args()
    :param filepath: full path to logger output file

    :returns: full path to file
    """
    arguments_list = 'arguments:\n'
    for arg, value in args._get_kwargs():
        arguments_list += "{}:\t{}\n".format(arg, value)
    logger.info(arguments_list)
    with open(filepath, "w") as f:
        f.write(arguments_list)
    return filepath
