from .log import configure, logger
