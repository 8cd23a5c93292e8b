"""
Logging setup for the command line.

Routes standard library logging through loguru so library modules can keep
using ``logging.getLogger(__name__)``.
"""

import logging
import sys

from loguru import logger


class InterceptHandler(logging.Handler):
    """Forward stdlib log records to loguru."""

    def emit(self, record: logging.LogRecord):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "WARNING"):
    """Send all log output to stderr at the given level."""
    logger.remove()
    logger.add(sys.stderr, level=level, format="<level>{level: <8}</level> {name}: {message}")
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
