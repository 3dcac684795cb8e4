"""File logger shared by the session, router and app."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from lunch_tray import config

PACKAGE_LOGGER = "lunch_tray"


def _configure_package_logger() -> logging.Logger:
    # One handler for the whole package; module loggers reach it by propagation.
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(config.LOG_LEVEL)

    if not any(isinstance(h, RotatingFileHandler) for h in package_logger.handlers):
        log_file = Path(config.LOG_PATH)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        fmt = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        handler.setFormatter(fmt)
        package_logger.addHandler(handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    _configure_package_logger()
    return logging.getLogger(name)
