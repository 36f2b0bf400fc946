"""Application logger writing to a rotating file.

The terminal is owned by the full-screen display while a session runs, so
log records never go to stderr.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "pomotui"
_LOG_FILE = "pomotui.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3


def default_log_path() -> Path:
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def configure_logging(log_file: Path | None = None, verbose: bool = False) -> logging.Logger:
    """Attach a rotating file handler to the ``pomotui`` logger and return it.

    Calling it again replaces the handler installed by the previous call.
    """
    path = log_file if log_file is not None else default_log_path()
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

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.propagate = False
    return logger
