"""Package logger for flowgraph.

Algorithm modules log through ``get_logger(__name__)``, so every record lands
under the ``flowgraph`` logger. Debug records trace the search and flow loops
(split vertices, augmenting paths); warnings flag results that may not be
what the caller expects (unbounded flow, augmentation limit reached).
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "flowgraph"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO, handler: Optional[logging.Handler] = None
) -> None:
    """Attach one handler to the ``flowgraph`` logger.

    Later calls do nothing until `reset_logging()`.

    Args:
        level: Level of the package logger.
        handler: Destination for records. Defaults to a stderr stream handler.
    """
    global _configured
    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger whose level defers to the ``flowgraph`` logger."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``flowgraph`` logger and its handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show per-path debug records from the flow and shortest-path code."""
    set_global_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Drop the package handler so the next call reconfigures (for tests)."""
    global _configured
    _configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
