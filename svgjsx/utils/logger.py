"""Logging setup shared by every module."""
import logging
import sys

LOG_FORMAT = "[%(levelname)s] %(message)s"
PACKAGE_LOGGER = "svgjsx"


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Return a logger writing to stdout, configured once per name."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)
    return logger


def set_verbosity(verbose: bool) -> None:
    """Switch every package logger between INFO and DEBUG."""
    level = logging.DEBUG if verbose else logging.INFO
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.startswith(PACKAGE_LOGGER):
            logger.setLevel(level)
