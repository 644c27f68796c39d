"""Psy Config Package

Hierarchical configuration builder: declare default values, environment
overlays and an optional parent, then resolve them into an immutable
configuration for one environment.
"""

from .builder import Builder, EnvironmentBuilder
from .configuration import Configuration
from .environment import DEFAULT_ENVIRONMENT, ENV_VAR, detect_environment
from .exceptions import (
    ConfigError,
    ImmutableConfigurationError,
    InvalidLoggerError,
    PsyConfigError,
    SerializationError,
    UnknownKeyError,
    ValidationError,
)
from .logger import (
    LOGGER_METHODS,
    LoggerHandle,
    Severity,
    StdoutLogger,
    create_default_logger,
    validate_logger,
)
from .resolver import Resolution, resolve
from .scope import Scope

__version__ = "0.1.0"
__all__ = [
    "Builder",
    "Configuration",
    "EnvironmentBuilder",
    "Scope",
    # Resolution
    "Resolution",
    "resolve",
    # Environment detection
    "DEFAULT_ENVIRONMENT",
    "ENV_VAR",
    "detect_environment",
    # Loggers
    "LOGGER_METHODS",
    "LoggerHandle",
    "Severity",
    "StdoutLogger",
    "create_default_logger",
    "validate_logger",
    # Exceptions
    "ConfigError",
    "ImmutableConfigurationError",
    "InvalidLoggerError",
    "PsyConfigError",
    "SerializationError",
    "UnknownKeyError",
    "ValidationError",
]
