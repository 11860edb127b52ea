"""Logging setup for Data-Frobotz."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from core.config import AppSettings

ROOT_LOGGER = "frobotz"

_CONSOLE_HANDLER = "frobotz-console"
_FILE_HANDLER = "frobotz-file"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the `frobotz` namespace."""

    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(f"{ROOT_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(
    settings: AppSettings | None = None,
    *,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Attach console and optional rotating file handlers to the root app logger.

    Calling it again replaces the handlers installed by a previous call, so each
    CLI invocation writes to its own streams.
    """

    settings = settings or AppSettings()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.log_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        if handler.get_name() in (_CONSOLE_HANDLER, _FILE_HANDLER):
            logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.set_name(_CONSOLE_HANDLER)
    console_handler.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    logger.addHandler(console_handler)

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger
