"""Pytest configuration and fixtures for psy_config tests."""

from unittest.mock import Mock

import pytest

from psy_config import LOGGER_METHODS, Builder


@pytest.fixture
def make_logger():
    """Factory for logger doubles, optionally missing some methods."""

    def _make(*missing):
        return Mock(spec=[m for m in LOGGER_METHODS if m not in missing])

    return _make


@pytest.fixture
def app_builder_factory():
    """Factory for the sample application builder.

    Default scope sets app_name and vars; the development environment
    overrides app_name and adds handler.
    """

    def _factory(parent=None):
        def configure(config):
            config.set("app_name", "MyApp")
            config.set("vars", {"hello": "world", "foo": "bar"})

            with config.environment("development") as dev:
                dev.set("app_name", "YourApp")
                dev.set("handler", "dev")

        return Builder(parent, configure)

    return _factory


@pytest.fixture
def app_builder(app_builder_factory):
    """Sample application builder without parent."""
    return app_builder_factory()


@pytest.fixture
def clear_env(monkeypatch):
    """Remove PSY_ENV from the environment."""
    monkeypatch.delenv("PSY_ENV", raising=False)
