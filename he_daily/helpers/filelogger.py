'''
A very simple logging function based on Python native logging. Messages go to
the console and, if a log file is supplied, to a rotating file handle to
maintain file sizes
'''
import logging
import sys
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "HE_Daily"


def FileLogger(log_file='', debug=False):
    '''
    A function to perform very simple logging to the console and (optionally)
    a named file. Any non-recoverable errors opening the file are written to
    stderr and logging carries on to the console only.
    '''

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level=logging.DEBUG if debug else logging.INFO)

    # drop handlers from any previous call (e.g. repeated runs in one process)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level=logging.DEBUG)
    logger.addHandler(console_handler)

    if log_file:
        # add a rotating handler
        try:
            rot_handler = RotatingFileHandler(log_file, maxBytes=521000, backupCount=10)
        except OSError as ex:
            sys.stderr.write("Unable to open log file {}: {}\n".format(log_file, ex))
        else:
            rot_handler.setFormatter(formatter)
            rot_handler.setLevel(level=logging.DEBUG)
            logger.addHandler(rot_handler)

    return logger
