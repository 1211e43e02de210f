"""Log sink setup for the command line driver."""
import sys

from loguru import logger

from .config import LOG_LEVEL

LOG_FORMAT = "{time:HH:mm:ss.SSS} [{level}] {name}: {message}"


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Call once at program start: one stderr sink at `level`."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)
    logger.enable("bridge_opener")
