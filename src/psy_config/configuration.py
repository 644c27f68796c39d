"""Immutable resolved configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any, Dict

import yaml

from .exceptions import ImmutableConfigurationError, SerializationError, UnknownKeyError
from .logger import LoggerHandle

logger = logging.getLogger(__name__)


class Configuration(Mapping):
    """Read-only snapshot produced by :meth:`Builder.build`.

    Resolved values are available as attributes and through the Mapping
    protocol. A value whose key collides with one of the accessors below
    (``logger``, ``environment``, ``get``, ...) is only reachable with
    ``config[key]``.

    Example:
        ```python
        config = builder.build("production")
        config.app_name            # 'MyApp'
        config["app_name"]         # 'MyApp'
        config.get("missing")      # None
        config.missing             # raises UnknownKeyError
        config.logger.info("ready")
        ```
    """

    __slots__ = ("_values", "_logger", "_environment")

    def __init__(
        self,
        values: Mapping[str, Any],
        logger: LoggerHandle,
        environment: str | None = None,
    ) -> None:
        """Initialize the configuration.

        Args:
            values: Resolved key/value pairs (copied)
            logger: Resolved logger
            environment: Name of the environment the values were resolved for
        """
        object.__setattr__(self, "_values", MappingProxyType(dict(values)))
        object.__setattr__(self, "_logger", logger)
        object.__setattr__(self, "_environment", environment)

    @property
    def logger(self) -> LoggerHandle:
        """The resolved logger."""
        return self._logger

    @property
    def environment(self) -> str | None:
        """Environment name this configuration was resolved for."""
        return self._environment

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__") or name in Configuration.__slots__:
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise UnknownKeyError(name, self._environment) from None

    def __getitem__(self, key: str) -> Any:
        try:
            return self._values[key]
        except KeyError:
            raise UnknownKeyError(key, self._environment) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutableConfigurationError(
            f"Configuration is read-only, cannot set {name!r}", context={"key": name}
        )

    def __delattr__(self, name: str) -> None:
        raise ImmutableConfigurationError(
            f"Configuration is read-only, cannot delete {name!r}", context={"key": name}
        )

    def __reduce__(self) -> tuple:
        return (Configuration, (dict(self._values), self._logger, self._environment))

    def __repr__(self) -> str:
        return f"Configuration(environment={self._environment!r}, keys={list(self._values)!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Return a shallow copy of the resolved values."""
        return dict(self._values)

    def to_yaml(self) -> str:
        """Dump the resolved values as a YAML document.

        Returns:
            YAML text

        Raises:
            SerializationError: If a value cannot be represented in YAML
        """
        try:
            return yaml.safe_dump(self.to_dict(), sort_keys=False, default_flow_style=False)
        except yaml.YAMLError as e:
            logger.debug(f"YAML serialization failed for {self!r}: {e}")
            raise SerializationError(
                f"Failed to serialize configuration to YAML: {e}",
                context={"environment": self._environment},
            ) from e
