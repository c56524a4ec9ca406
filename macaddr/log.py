import logging
import sys
from io import TextIOWrapper


def make_logger(name: str = 'macaddr') -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    if not logger.handlers:
        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.setLevel(logging.DEBUG)
        if isinstance(stdout_handler.stream, TextIOWrapper):
            stdout_handler.stream.reconfigure(line_buffering=True)
        logger.addHandler(stdout_handler)

    return logger
