"""
Logging helpers for pagequill.

The library only creates module loggers; handlers are installed by the
application (the CLI) through ``configure_logging``.
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance for module.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    if not name or not isinstance(name, str):
        raise ValueError("Logger name must be a non-empty string")
    return logging.getLogger(name)


def configure_logging(level: str = "INFO", use_rich: bool = True,
                      console: Optional[Console] = None) -> logging.Handler:
    """
    Configure logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_rich: Render records with rich instead of a plain stream handler
        console: Optional rich console (defaults to stderr)

    Returns:
        The installed handler
    """
    if level.upper() not in _LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    if use_rich:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

    handler.setLevel(getattr(logging, level.upper()))
    root_logger.addHandler(handler)
    return handler
