"""Flat key/value storage for one configuration level."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from .exceptions import ConfigError
from .logger import LoggerHandle, validate_logger


@dataclass
class Scope:
    """Values and an optional logger declared at one level.

    A scope belongs either to the default level (``name`` is None) or to a
    single named environment. Setting a key twice overwrites the previous
    value in place.

    Attributes:
        name: Environment name, or None for the default scope
        values: Declared key/value pairs
        logger: Declared logger, if any
    """

    name: str | None = None
    values: Dict[str, Any] = field(default_factory=dict)
    logger: LoggerHandle | None = None

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``.

        Raises:
            ConfigError: If ``key`` is not a string
        """
        self._check_key(key)
        self.values[key] = value

    def update(self, values: Dict[str, Any]) -> None:
        """Store every pair of ``values``, or none if any key is invalid.

        Raises:
            ConfigError: If a key is not a string
        """
        for key in values:
            self._check_key(key)
        self.values.update(values)

    def _check_key(self, key: Any) -> None:
        if not isinstance(key, str):
            raise ConfigError(
                f"Configuration keys must be strings, got {type(key).__name__}",
                context={"key": key, "scope": self.name},
            )

    def set_logger(self, handle: Any) -> None:
        """Validate ``handle`` and install it as this scope's logger.

        The scope is left untouched when validation fails.

        Raises:
            InvalidLoggerError: If ``handle`` lacks a required method
        """
        self.logger = validate_logger(handle)

    @property
    def is_default(self) -> bool:
        """Whether this is the default (environment-less) scope."""
        return self.name is None
