"""Logging helpers."""

import logging
from logging import handlers
from pathlib import Path


def configure_logging(log_path: Path, level: int = logging.INFO) -> bool:
    """
    Send application logs to a rotating file next to the saved board.

    Returns False (and leaves logging unconfigured) when the log
    directory cannot be created.
    """
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError:
        return False
    handler = handlers.RotatingFileHandler(
        log_path, maxBytes=512000, backupCount=3, encoding="utf-8", delay=True
    )
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=[handler],
    )
    return True
