"""Resolution of a builder's scopes into a single set of values.

Precedence, from lowest to highest:

1. The parent configuration's resolved values and logger
2. The builder's default scope
3. The scope of the selected environment, if declared
4. A fresh :class:`~psy_config.logger.StdoutLogger` when no level set a logger

Values are merged key by key. A key that a more specific level does not set
keeps the value of the less specific level, so a chain
grandparent -> parent -> default -> environment behaves as one overlay stack.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, NamedTuple

from .logger import LoggerHandle, create_default_logger

if TYPE_CHECKING:
    from .builder import Builder

logger = logging.getLogger(__name__)


class Resolution(NamedTuple):
    """Outcome of :func:`resolve`.

    Attributes:
        values: Merged key/value pairs
        logger: Effective logger
        logger_source: Level that supplied the logger
            ("environment", "default", "parent" or "fallback")
    """

    values: Dict[str, Any]
    logger: LoggerHandle
    logger_source: str


def resolve(builder: Builder, env: str) -> Resolution:
    """Merge the parent, default and environment levels of ``builder``.

    The builder is not modified.

    Args:
        builder: Builder holding the declared scopes
        env: Environment name to resolve for. An environment that was never
            declared contributes nothing.

    Returns:
        The merged values and effective logger
    """
    values: Dict[str, Any] = {}
    effective_logger: LoggerHandle | None = None
    source = "fallback"

    parent = builder.parent
    if parent is not None:
        values.update(parent.to_dict())
        effective_logger = parent.logger
        source = "parent"

    layers = [builder.default_scope]
    env_scope = builder.get_scope(env)
    if env_scope is not None:
        layers.append(env_scope)

    for scope in layers:
        values.update(scope.values)
        if scope.logger is not None:
            effective_logger = scope.logger
            source = "default" if scope.is_default else "environment"

    if effective_logger is None:
        effective_logger = create_default_logger()

    logger.debug(
        f"Resolved {len(values)} keys for environment '{env}' "
        f"(declared: {env_scope is not None}, logger from {source})"
    )
    return Resolution(values, effective_logger, source)
