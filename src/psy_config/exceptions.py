"""Exception hierarchy for the psy_config package.

Every error raised by the package derives from :class:`PsyConfigError`, which
accepts an optional context dictionary carrying structured details about the
failure.

Example:
    ```python
    from psy_config import Builder, InvalidLoggerError

    try:
        builder.logger(object())
    except InvalidLoggerError as e:
        print(e)             # logger must respond to #log
        print(e.context)     # {'method': 'log'}
    ```
"""

from typing import Any, Dict


class PsyConfigError(Exception):
    """Base exception for all psy_config errors.

    Attributes:
        context: Dictionary containing contextual information about the error

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (keys, names, etc.)
    """

    def __init__(self, message: str, context: Dict[str, Any] | None = None):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
        """
        super().__init__(message)
        self.context = context or {}


class ConfigError(PsyConfigError):
    """Raised when a configuration declaration is invalid."""

    pass


class ValidationError(PsyConfigError):
    """Raised when an object fails a validation check."""

    pass


class InvalidLoggerError(ValidationError):
    """Raised when a logger lacks one of the required methods."""

    def __init__(self, method: str):
        super().__init__(f"logger must respond to #{method}", context={"method": method})
        self.method = method


class UnknownKeyError(PsyConfigError, AttributeError, KeyError):
    """Raised when reading a key that was never set anywhere in the chain.

    Derives from both AttributeError and KeyError so that attribute access,
    ``getattr(config, key, default)`` and the Mapping protocol all behave
    as expected.
    """

    def __init__(self, key: str, environment: str | None = None):
        super().__init__(
            f"unknown configuration key: {key!r}",
            context={"key": key, "environment": environment},
        )
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class ImmutableConfigurationError(PsyConfigError, AttributeError):
    """Raised on any attempt to modify a resolved Configuration."""

    pass


class SerializationError(PsyConfigError):
    """Raised when resolved values cannot be serialized."""

    pass


__all__ = [
    "PsyConfigError",
    "ConfigError",
    "ValidationError",
    "InvalidLoggerError",
    "UnknownKeyError",
    "ImmutableConfigurationError",
    "SerializationError",
]
