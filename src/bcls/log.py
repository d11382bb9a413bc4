import logging
import sys
from enum import Enum

FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class LogLevel(str, Enum):
    DEBUG = 'DEBUG'
    INFO = 'INFO'
    WARNING = 'WARNING'
    ERROR = 'ERROR'


def setup(level=LogLevel.WARNING):
    """
    Configure logging to stderr so log records never mix with the listed instances on stdout.
    Can be called repeatedly, the last call wins.
    """
    logging.basicConfig(level=LogLevel(level).value, format=FORMAT, datefmt=DATE_FORMAT, stream=sys.stderr,
                        force=True)
