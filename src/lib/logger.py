"""Logging for jsonc.

TIER 1: May import from core only.

Loggers live under the ``jsonc`` namespace and share one stderr handler
installed on the ``jsonc`` parent logger. The level comes from the
``log.level`` setting (``JSONC_LOG_LEVEL`` or the config file), so
modules only ask for a named child logger.
"""

import logging
from typing import Literal

from core.errors import ConfigError
from lib import config

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

ROOT_NAME = "jsonc"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _to_level(name: str) -> int:
    """Map a level name (any case) to a logging constant, WARNING if unknown."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def _root() -> logging.Logger:
    """Return the ``jsonc`` logger, installing its handler once."""
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        try:
            root.setLevel(_to_level(config.get("log.level")))
        except ConfigError:
            # A broken config file is reported by whoever loads it next
            root.setLevel(logging.WARNING)
    return root


def get_logger(name: str) -> logging.Logger:
    """Get the ``jsonc.<name>`` logger.

    Children have no handler or level of their own; records go to the
    shared handler at the level of the ``jsonc`` logger.

    Example:
        >>> logger = get_logger("cache")
        >>> logger.debug("Cache hit: settings.cached.json")
    """
    return _root().getChild(name)


def set_log_level(level: LogLevel | str) -> None:
    """Override the level of every jsonc logger."""
    _root().setLevel(_to_level(level))


def reload_log_level() -> None:
    """Re-read ``log.level`` from the settings and apply it.

    Raises:
        ConfigError: If the config file is invalid.
    """
    set_log_level(config.get("log.level"))
