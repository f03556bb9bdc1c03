"""Session log file under the platform log directory."""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomo_cli"
_LOG_FILE = "pomo.log"
_MAX_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Where records are written."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _build_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=_MAX_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or its ``name`` child.

    The terminal belongs to the clock face while a session runs, so records
    only ever go to the rotating log file.
    """
    global _logger
    if _logger is None:
        logger = logging.getLogger(_APP_NAME)
        logger.setLevel(logging.DEBUG)
        if not any(
            isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
        ):
            logger.addHandler(_build_handler(log_file_path()))
        logger.propagate = False
        _logger = logger

    return _logger.getChild(name) if name else _logger
