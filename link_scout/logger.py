# === FILE: link_scout/logger.py ===
"""Logging setup for LinkScout.

All modules log through the ``LinkScout`` logger (or its children from
:func:`get_logger`). Output goes to stderr, since stdout carries crawl
observations; the CLI may add a rotating log file.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Union

DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOGGER_NAME: Final[str] = "LinkScout"


def init_logging(
    level: Union[int, str] = "INFO",
    log_file: str | Path | None = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Reset the project logger: stderr handler, plus a rotating file when *log_file* is set."""
    lg = logging.getLogger(LOGGER_NAME)
    lg.setLevel(level)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(log_format)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(str(log_file), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        )
    for handler in handlers:
        handler.setFormatter(formatter)
        lg.addHandler(handler)

    lg.propagate = False
    return lg


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the project logger or its child ``LinkScout.<name>``."""
    return logging.getLogger(LOGGER_NAME if not name else f"{LOGGER_NAME}.{name}")


logger: logging.Logger = get_logger()

__all__ = ["logger", "init_logging", "get_logger", "DEFAULT_FORMAT", "LOGGER_NAME"]
