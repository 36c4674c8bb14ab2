"""Package logging for varprio.

Every module logs through a child of the ``varprio`` logger, obtained with
``get_logger(__name__)``. The package logger is set up on first use with a
single stderr handler. Its level is read from VARPRIO_LOG_LEVEL
(DEBUG, INFO, WARN/WARNING or ERROR; anything else means INFO).

The scoring core only logs at DEBUG:
    VARPRIO_LOG_LEVEL=DEBUG pytest tests/unit/test_whitelist.py
"""

import logging
import os
import sys

LOG_LEVEL_ENV_VAR = "VARPRIO_LOG_LEVEL"
PACKAGE_LOGGER_NAME = "varprio"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_ENV_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def level_from_env() -> int:
    """Logging level named by VARPRIO_LOG_LEVEL, INFO when unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    return _ENV_LEVELS.get(name, logging.INFO)


def _configure(package_logger: logging.Logger) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))
    package_logger.handlers = [handler]
    package_logger.setLevel(level_from_env())
    package_logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger for a module, configuring the package logger on first use.

    Names outside the package are placed under it, so ``get_logger("whitelist")``
    and ``get_logger("varprio.whitelist")`` return the same logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package_logger.handlers:
        _configure(package_logger)

    if not name or name == PACKAGE_LOGGER_NAME:
        return package_logger
    if not name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
