"""
Logging setup for Lispy.

All records go through the 'lispy' logger hierarchy to stderr, so they
never mix with values the REPL prints on stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)-8s - %(message)s'

RESET_SEQ = "\033[0m"
COLOR_SEQ = "\033[1;%dm"

BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)


def has_a_tty(stream) -> bool:
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return False


def color_me(color: int):
    color_seq = COLOR_SEQ % (30 + color)

    def closure(msg: str) -> str:
        return color_seq + msg + RESET_SEQ
    return closure


class ColoredFormatter(logging.Formatter):
    """Colours the level name by severity when writing to a terminal."""

    colors = {
        'WARNING': color_me(YELLOW),
        'DEBUG': color_me(BLUE),
        'CRITICAL': color_me(RED),
        'ERROR': color_me(RED),
        'INFO': color_me(GREEN),
    }

    def __init__(self, msg: str, use_color: bool = True, datefmt: Optional[str] = None):
        super().__init__(msg, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        orig = record.__dict__
        record.__dict__ = record.__dict__.copy()
        levelname = record.levelname
        prn_name = levelname + ' ' * (8 - len(levelname))
        if self.use_color and levelname in self.colors:
            record.levelname = self.colors[levelname](prn_name)
        else:
            record.levelname = prn_name
        res = super().format(record)
        # restore record, other handlers format it too
        record.__dict__ = orig
        return res


def setup_loggers(def_level: int = logging.WARNING, log_fname: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger('lispy')
    logger.setLevel(logging.DEBUG)
    # Called again from the same process: start over
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(def_level)
    use_color = has_a_tty(sys.stderr)
    sh.setFormatter(ColoredFormatter(LOG_FORMAT, use_color=use_color, datefmt="%H:%M:%S"))
    logger.addHandler(sh)

    if log_fname is not None:
        fh = logging.FileHandler(log_fname)
        fh.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        fh.setLevel(logging.DEBUG)
        logger.addHandler(fh)
    return logger
