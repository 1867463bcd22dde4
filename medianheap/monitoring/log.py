import sys

from loguru import logger

FORMAT = "{time} {level} {message}"


def configure(level: str = "INFO"):
    logger.remove()
    logger.add(sys.stderr, colorize=True, backtrace=True, format=FORMAT, level=level)
