"""Logger configuration for fnkit.

Library modules only create child loggers via ``logging.getLogger(__name__)``;
nothing is attached at import. Applications that want to see fnkit's debug
records call :func:`setup_logger`.
"""

import logging
import sys

from fnkit.config import get_log_level

__all__ = ["setup_logger"]


def setup_logger(
    name: str = "fnkit",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (``fnkit`` or one of its modules)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); falls back
            to ``FNKIT_LOG_LEVEL``
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or get_log_level()
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger
