"""Process-wide logger used by the mapping core and the inspector.

The default is a ``ConsoleLogger`` at normal verbosity. The CLI replaces it
with one configured from the command line; tests usually install a
``NullLogger`` or a ``ConsoleLogger`` writing to a buffer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .infrastructure.logging.console_logger import ConsoleLogger

if TYPE_CHECKING:
    from rich.console import Console

    from .application.ports.services import LoggerPort

__all__ = ["create_logger", "get_logger", "set_logger"]


_logger: LoggerPort | None = None


def get_logger() -> LoggerPort:
    global _logger
    if _logger is None:
        _logger = ConsoleLogger()
    return _logger


def set_logger(logger: LoggerPort | None) -> None:
    """Set the global logger instance.

    Args:
        logger: Logger instance to use globally, or None to restore the default
    """
    global _logger
    _logger = logger


def create_logger(console: Console | None = None, verbosity: int = 0) -> ConsoleLogger:
    logger = ConsoleLogger(console, verbosity)
    set_logger(logger)
    return logger
