"""Logging for every bloom module.

Module loggers are children of the ``bloom`` package logger. That logger
writes to the console and, only when ``BLOOM_LOG_DIR`` is set, to one
rotating ``bloom.log`` file in that directory.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "BLOOM_LOG_DIR"
PACKAGE_LOGGER_NAME = "bloom"
LOG_FILENAME = "bloom.log"
MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MiB
BACKUP_COUNT = 5
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _log_level() -> int:
    level = logging.getLevelName(os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def _log_file() -> Path | None:
    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if not log_dir:
        return None
    path = Path(log_dir).expanduser()
    path.mkdir(parents=True, exist_ok=True)
    return path / LOG_FILENAME


def configure_logging() -> logging.Logger:
    """(Re)build the package logger's handlers from the current environment."""

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = _log_file()
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                log_file, maxBytes=MAX_LOG_BYTES, backupCount=BACKUP_COUNT
            )
        )

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(_log_level())
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return ``name``'s logger, nested under the ``bloom`` package logger."""

    package = logging.getLogger(PACKAGE_LOGGER_NAME)
    if not package.handlers:
        configure_logging()
    if name == PACKAGE_LOGGER_NAME or name.startswith(f"{PACKAGE_LOGGER_NAME}."):
        return logging.getLogger(name)
    return package.getChild(name)
