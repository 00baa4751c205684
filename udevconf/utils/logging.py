"""
Logging setup shared by the loader, the CLI action and main.py.

Every module logs through logging.getLogger(__name__), so all records land
under the "udevconf" logger. get_logger() attaches the handlers once
(console, plus a rotating file when a log directory is given) and caches
the result so repeated calls never duplicate output.
"""

import logging
import logging.handlers
import os
import pathlib
from typing import Optional

ROOT_LOGGER_NAME = "udevconf"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOGGING_OFF = logging.CRITICAL + 1

# Cache created loggers so repeated calls don't duplicate handlers
_LOGGER_CACHE = {}

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    log_dir: Optional[str] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """
    Return a configured logger.

    Parameters
    ----------
    name:
        Logger name (also used in the log filename: ``{name}.log``).
    log_dir:
        Directory for a rotating log file (1MB x 5 backups). Created if
        missing. None logs to the console only.
    level:
        Level for the logger and its handlers.
    """
    if name in _LOGGER_CACHE:
        logger = _LOGGER_CACHE[name]
        logger.setLevel(level)
        return logger

    logger = logging.getLogger(name)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler()
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_dir is not None:
        pathlib.Path(log_dir).mkdir(parents=True, exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, f"{name}.log"),
            maxBytes=1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    _LOGGER_CACHE[name] = logger
    return logger


def log_event(logger: logging.Logger, level: str, message: str, **kwargs) -> None:
    """Log message at level ("DEBUG", "INFO", ...) with k=v context appended."""
    if kwargs:
        context = " ".join(f"{k}={v}" for k, v in kwargs.items())
        message = f"{message} | {context}"
    logger.log(_LEVELS.get(level.upper(), logging.INFO), message)


def configure_from_settings(settings, name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Switch daemon logging on or off according to settings.log_enabled.

    Disabling raises the level above CRITICAL, which silences every child
    logger that inherits its level. Handlers stay attached, so re-enabling
    only restores the level (INFO).
    """
    logger = logging.getLogger(name)
    if not settings.log_enabled:
        logger.setLevel(LOGGING_OFF)
    elif logger.level >= LOGGING_OFF:
        logger.setLevel(logging.INFO)
    return logger
