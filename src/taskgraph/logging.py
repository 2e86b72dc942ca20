from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import os


LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
ROOT_LOGGER = "taskgraph"

_configured = False


def _level() -> int:
    name = os.getenv("TASKGRAPH_LOG_LEVEL", "INFO").upper()
    return getattr(logging, name, logging.INFO)


def _ensure_base_logger() -> None:
    global _configured
    if _configured:
        return
    logging.basicConfig(level=_level(), format=LOG_FORMAT)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    _ensure_base_logger()
    return logging.getLogger(name)


def log_to_file(log_file: Path) -> RotatingFileHandler:
    """Mirror every taskgraph log record into a rotating file.

    Replaces a file handler installed by an earlier call.
    """
    logger = get_logger(ROOT_LOGGER)
    logger.setLevel(_level())
    for h in [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]:
        logger.removeHandler(h)
        h.close()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return handler
