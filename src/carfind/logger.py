"""
Logging for the carfind package.

Every module asks for a child of the ``carfind`` logger::

    from ..logger import get_logger
    logger = get_logger("data.loader")

The root ``carfind`` logger is configured once, on first use, with a single
stream handler and the level from ``CARFIND_LOG_LEVEL``.
"""

import logging
from typing import Optional

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ROOT_LOGGER_NAME = "carfind"
_initialized = False


def _resolve_level(level: Optional[str]) -> int:
    """Convert a level name to a ``logging`` constant, defaulting to INFO."""
    name = (level or "INFO").upper().strip()
    resolved = getattr(logging, name, logging.INFO)
    return resolved if isinstance(resolved, int) else logging.INFO


def _setup_root_logger() -> logging.Logger:
    global _initialized

    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if _initialized:
        return root

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(_resolve_level(LOG_LEVEL))

    _initialized = True
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the ``carfind`` logger or one of its children."""
    _setup_root_logger()
    if name and name.startswith(_ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    if name:
        return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
    return logging.getLogger(_ROOT_LOGGER_NAME)


def set_log_level(level: str) -> None:
    """Change the level of the whole ``carfind`` logger tree at runtime."""
    root = _setup_root_logger()
    root.setLevel(_resolve_level(level))
    root.info(f"Log level changed to {level.upper()}")
