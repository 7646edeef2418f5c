# records data from an airace car
import atexit
import datetime
import getpass
import os
import time

import pandas as pd

from airace.airace_utils import my_logger, checkAddSuffix
from airace.globals import DATA_FILENAME_BASE, DATA_FOLDER_NAME
from airace.motion_state import VERSION

logger = my_logger(__name__)


class data_recorder:

    def __init__(self, car, note:str=None, filebase:str=DATA_FILENAME_BASE, folder:str=DATA_FOLDER_NAME):
        """
        :param car: the car_controller whose motion_state is recorded
        :param note: optional note added to the file name
        :param filebase: start of the file name
        :param folder: output folder, created if needed
        """
        self.car=car
        self.filebase:str=filebase
        self.folder:str=folder
        self.filename=None
        self.file=None
        self.num_records=0
        self.note=note

    def get_csv_file_header(self) -> str:
        """
        :returns: the CSV header lines (# comments plus the CSV header row)
        """
        header ='# recorded output from airace\n# format version: {}\n'.format(VERSION)
        header+=datetime.datetime.now().strftime('# creation_time="%I:%M%p %B %d %Y"\n')
        header+='# creation_time_epoch_ms="{}"\n'.format(int(time.time() * 1000.))
        header+='# username="{}"\n'.format(getpass.getuser())
        header+='# car_name="{}"\n'.format(self.car.name)
        for k, v in self.car.config.as_dict().items():
            header+='# {}="{}"\n'.format(k, v)
        header+=','.join(self.car.state.csv_fields)
        return header

    def open_new_recording(self)->None:
        """
        Creates a new recording if it is not already open.

        :return: None
        :raises RuntimeError if it cannot open the recording
        """
        if self.file:
            logger.warning('recording {} is already open, close it and open a new one'.format(self.filename))
            return

        timestr = time.strftime("%Y%m%d-%H%M%S") # e.g. '20200819-160101'
        if not os.path.exists(self.folder):
            logger.info('creating output folder {}'.format(self.folder))
            os.makedirs(self.folder)

        if self.note!='' and not self.note is None:
            self.filename='{}-{}-{}-{}.csv'.format(self.filebase, self.car.name, self.note, timestr)
        else:
            self.filename='{}-{}-{}.csv'.format(self.filebase, self.car.name, timestr)
        self.filename=os.path.join(self.folder, self.filename)

        try:
            self.file=open(self.filename,'w')
            print(self.get_csv_file_header(), file=self.file)
            atexit.register(self.close_recording)
            self.num_records=0
            logger.info('created new recording {}'.format(self.filename))
        except OSError as ex:
            self.file=None
            logger.warning('{}: could not open {} for recording data'.format(ex, self.filename))
            raise RuntimeError(ex)

    def close_recording(self):
        if self.file:
            logger.info('closing recording {} with {} records'.format(self.filename, self.num_records))
            self.file.close()
            self.file=None

    def write_sample(self):
        if self.file is None:
            logger.warning('there is no output file open to record to')
            return
        print(self.car.state.get_record_csvrow(), file=self.file)
        self.num_records+=1


def load_recording(filename:str) -> pd.DataFrame:
    """
    Reads a recording made by data_recorder.

    :param filename: path of the recording, .csv suffix is added if missing
    :returns: DataFrame with one row per tick, columns named as motion_state.csv_fields
    """
    filename=checkAddSuffix(filename, '.csv')
    data:pd.DataFrame = pd.read_csv(filename, comment='#')  # skip comment lines starting with #
    logger.info('loaded {} records from {}'.format(len(data), filename))
    return data
