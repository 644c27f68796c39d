"""Declaration surface for hierarchical configurations.

A :class:`Builder` collects values for a default scope and for any number of
named environments, optionally on top of an already resolved parent
:class:`~psy_config.configuration.Configuration`. Calling :meth:`Builder.build`
resolves everything into a new immutable configuration.

Example:
    ```python
    def base_settings(config):
        config.set("app_name", "BaseApp")
        config.set("app_path", "/app")

    base = Builder(configure=base_settings).build("production")

    builder = Builder(base)
    builder.set("app_name", "MyApp")

    with builder.environment("development") as dev:
        dev.set("app_name", "YourApp")
        dev.logger(logging.getLogger("dev"))

    builder.build("development").app_name   # 'YourApp'
    builder.build("production").app_name    # 'MyApp'
    builder.build("production").app_path    # '/app'
    ```
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Tuple

from .configuration import Configuration
from .environment import detect_environment
from .exceptions import ConfigError
from .resolver import resolve
from .scope import Scope

logger = logging.getLogger(__name__)


class _ScopeWriter:
    """Write operations shared by the builder and its environment views."""

    _scope: Scope

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` in the targeted scope.

        Args:
            key: Configuration key
            value: Any value; setting a key again overwrites it
        """
        self._scope.set(key, value)

    def update(self, values: Mapping[str, Any] | None = None, /, **kwargs: Any) -> None:
        """Set every key/value pair of ``values`` and ``kwargs``.

        Nothing is stored when any key is invalid.
        """
        self._scope.update(dict(values or {}, **kwargs))

    def logger(self, handle: Any) -> None:
        """Install ``handle`` as the targeted scope's logger.

        Args:
            handle: Object providing log, debug, info, warn, error and fatal

        Raises:
            InvalidLoggerError: If ``handle`` lacks a required method
        """
        self._scope.set_logger(handle)
        logger.debug(f"Installed logger {type(handle).__name__} in {self._describe()}")

    def _describe(self) -> str:
        if self._scope.is_default:
            return "default scope"
        return f"environment '{self._scope.name}'"


class EnvironmentBuilder(_ScopeWriter):
    """View of a builder that writes into one environment's scope.

    Returned by :meth:`Builder.environment`; also usable as a context manager.
    """

    def __init__(self, scope: Scope) -> None:
        self._scope = scope

    @property
    def name(self) -> str:
        """Environment name."""
        return self._scope.name  # type: ignore[return-value]

    def __enter__(self) -> EnvironmentBuilder:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        return None


class Builder(_ScopeWriter):
    """Mutable declaration of a configuration tree.

    Args:
        parent: Resolved configuration to inherit values and logger from.
            Fixed for the lifetime of the builder.
        configure: Callable invoked immediately with the new builder
    """

    def __init__(
        self,
        parent: Configuration | None = None,
        configure: Callable[[Builder], Any] | None = None,
    ) -> None:
        if parent is not None and not isinstance(parent, Configuration):
            raise ConfigError(
                f"parent must be a Configuration, got {type(parent).__name__}",
                context={"parent": repr(parent)},
            )
        self._parent = parent
        self._scope = Scope()
        self._environments: Dict[str, Scope] = {}

        if parent is not None:
            logger.debug(f"Builder attached to parent {parent!r}")

        if configure is not None:
            configure(self)

    @property
    def parent(self) -> Configuration | None:
        """The parent configuration, if any."""
        return self._parent

    @property
    def default_scope(self) -> Scope:
        """Scope holding values declared outside any environment."""
        return self._scope

    @property
    def environments(self) -> Tuple[str, ...]:
        """Names of the declared environments, sorted."""
        return tuple(sorted(self._environments))

    def has_environment(self, name: str) -> bool:
        """Check whether ``name`` has been declared."""
        return name in self._environments

    def get_scope(self, name: str) -> Scope | None:
        """Get the scope of environment ``name`` without creating it."""
        return self._environments.get(name)

    def environment(
        self,
        name: str,
        configure: Callable[[EnvironmentBuilder], Any] | None = None,
    ) -> EnvironmentBuilder:
        """Open the scope of environment ``name``, creating it if needed.

        Opening the same environment again writes into the same scope.

        Args:
            name: Environment name (e.g. "development", "production")
            configure: Callable invoked with the environment view

        Returns:
            View writing into the environment's scope

        Raises:
            ConfigError: If ``name`` is not a non-empty string
        """
        if not isinstance(name, str) or not name:
            raise ConfigError(
                "Environment name must be a non-empty string",
                context={"name": name},
            )

        scope = self._environments.get(name)
        if scope is None:
            scope = self._environments[name] = Scope(name)
            logger.debug(f"Declared environment '{name}'")

        view = EnvironmentBuilder(scope)
        if configure is not None:
            configure(view)
        return view

    def build(self, env: str | None = None) -> Configuration:
        """Resolve the declared scopes for ``env``.

        The builder is left unchanged and may be built again for other
        environments.

        Args:
            env: Environment name; detected from PSY_ENV when None

        Returns:
            New immutable configuration
        """
        if env is None:
            env = detect_environment()

        resolution = resolve(self, env)
        return Configuration(resolution.values, resolution.logger, environment=env)
