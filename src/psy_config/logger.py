"""Logger capability checks and the default stdout logging sink.

Any object may be installed as a configuration logger as long as it exposes
the six methods listed in :data:`LOGGER_METHODS`. When no logger is declared
anywhere in a configuration chain, resolution falls back to a fresh
:class:`StdoutLogger`.

Example:
    ```python
    import logging

    validate_logger(logging.getLogger("app"))   # passes
    validate_logger(object())                   # InvalidLoggerError: #log

    sink = StdoutLogger()
    sink.log(Severity.DEBUG, "foo")             # printed on stdout
    ```
"""

from __future__ import annotations

import logging
import sys
from enum import IntEnum
from typing import Any, Protocol, runtime_checkable

from .exceptions import InvalidLoggerError

LOGGER_METHODS = ("log", "debug", "info", "warn", "error", "fatal")

DEFAULT_LOGGER_NAME = "psy_config"
DEFAULT_FORMAT = "%(levelname).1s, [%(asctime)s] %(levelname)s -- %(name)s: %(message)s"


@runtime_checkable
class LoggerHandle(Protocol):
    """Capability set every configuration logger must provide."""

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> Any: ...

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> Any: ...

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> Any: ...

    def warn(self, msg: Any, *args: Any, **kwargs: Any) -> Any: ...

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> Any: ...

    def fatal(self, msg: Any, *args: Any, **kwargs: Any) -> Any: ...


def validate_logger(handle: Any) -> LoggerHandle:
    """Check that ``handle`` provides every method of the logger capability set.

    Methods are checked in the order of :data:`LOGGER_METHODS` and only the
    first missing one is reported.

    Args:
        handle: Candidate logger object

    Returns:
        The same object, once validated

    Raises:
        InvalidLoggerError: If a required method is missing or not callable
    """
    for method in LOGGER_METHODS:
        if not callable(getattr(handle, method, None)):
            raise InvalidLoggerError(method)
    return handle


class Severity(IntEnum):
    """Numeric severities accepted by :meth:`StdoutLogger.log`."""

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    UNKNOWN = 5


_SEVERITY_LEVELS = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARN: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.FATAL: logging.CRITICAL,
    Severity.UNKNOWN: logging.CRITICAL,
}


class StdoutLogger(logging.Logger):
    """Standalone logger writing every record to standard output.

    The logger is not registered with the logging manager and does not
    propagate, so it never interferes with the application's own logging
    configuration.
    """

    def __init__(
        self,
        name: str = DEFAULT_LOGGER_NAME,
        level: int = logging.DEBUG,
        fmt: str = DEFAULT_FORMAT,
    ) -> None:
        """Initialize the logger.

        Args:
            name: Logger name shown in each record
            level: Minimum stdlib level to emit
            fmt: Format string for the stdout handler
        """
        super().__init__(name, level)
        self.propagate = False
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt))
        self.addHandler(handler)

    @staticmethod
    def to_logging_level(level: int) -> int:
        """Translate a :class:`Severity` value to a stdlib level.

        Levels outside the severity range are returned unchanged.
        """
        return _SEVERITY_LEVELS.get(level, level)

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Log ``msg`` with a severity (0-5) or a stdlib logging level."""
        if not isinstance(level, int):
            raise TypeError("level must be an integer")
        level = self.to_logging_level(level)
        if self.isEnabledFor(level):
            kwargs.setdefault("stacklevel", 2)
            self._log(level, msg, args, **kwargs)

    def warn(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        """Alias of :meth:`warning`."""
        if self.isEnabledFor(logging.WARNING):
            kwargs.setdefault("stacklevel", 2)
            self._log(logging.WARNING, msg, args, **kwargs)


def create_default_logger() -> StdoutLogger:
    """Build a fresh default sink writing to standard output."""
    return StdoutLogger()


__all__ = [
    "LOGGER_METHODS",
    "LoggerHandle",
    "Severity",
    "StdoutLogger",
    "create_default_logger",
    "validate_logger",
]
