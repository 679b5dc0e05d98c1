"""Logging utilities with a custom TRACE level."""

import logging
from typing import Any

# Lower than DEBUG; used for per-rule tracing inside the date resolver
TRACE_LEVEL = 5

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
VERBOSE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def add_trace_level() -> None:
    """Register the TRACE level name and a ``Logger.trace`` method."""
    logging.addLevelName(TRACE_LEVEL, "TRACE")

    def trace(self: logging.Logger, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a message with severity 'TRACE'."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, message, args, **kwargs)

    logging.Logger.trace = trace  # type: ignore[attr-defined]


def get_logger(name: str) -> logging.Logger:
    """Get a logger with trace support."""
    if not hasattr(logging.Logger, "trace"):
        add_trace_level()

    return logging.getLogger(name)


def configure_logging(verbose: bool = False, trace: bool = False) -> int:
    """
    Configure root logging for command-line entry points.

    Args:
        verbose: Log at DEBUG with logger names
        trace: Log at TRACE with logger names (takes precedence over verbose)

    Returns:
        The level that was configured
    """
    add_trace_level()

    if trace:
        level = TRACE_LEVEL
        fmt = VERBOSE_FORMAT
    elif verbose:
        level = logging.DEBUG
        fmt = VERBOSE_FORMAT
    else:
        level = logging.INFO
        fmt = DEFAULT_FORMAT

    logging.basicConfig(level=level, format=fmt, force=True)
    return level
