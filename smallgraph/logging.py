"""Package-wide logging setup for SmallGraph.

Every module asks for its logger through `get_logger(__name__)`; all of them
hang off the single `smallgraph` root logger configured here.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "smallgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_root_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the `smallgraph` root logger.

    Subsequent calls are no-ops until `reset_logging()` is called.

    Args:
        level: Logging level for the package (default: INFO).
        format_string: Record format; `DEFAULT_FORMAT` when omitted.
        handler: Destination handler; a stdout StreamHandler when omitted.
    """
    global _root_configured

    if _root_configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root_logger.addHandler(handler)

    # Keep propagation on so pytest's caplog sees package records.
    root_logger.propagate = True

    _root_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of the `smallgraph` root.

    Args:
        name: Logger name, normally the caller's `__name__`.

    Returns:
        Logger whose level is inherited from the package root.
    """
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Change the level of the package root logger and its handlers."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop handlers and forget the root configuration (used by tests)."""
    global _root_configured
    _root_configured = False

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
