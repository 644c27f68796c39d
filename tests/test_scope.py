"""Tests for Scope storage."""

import pytest

from psy_config import ConfigError, InvalidLoggerError, Scope


class TestScope:
    """Test scope values and logger slot."""

    def test_defaults(self):
        """Test a new scope is empty."""
        scope = Scope()

        assert scope.values == {}
        assert scope.logger is None
        assert scope.is_default

    def test_environment_scope(self):
        """Test a named scope is not the default scope."""
        assert not Scope("production").is_default

    def test_overwrite_in_place(self):
        """Test setting a key again replaces its value."""
        scope = Scope()
        scope.set("key", 1)
        scope.set("other", 2)
        scope.set("key", 3)

        assert scope.values == {"key": 3, "other": 2}

    def test_any_value(self):
        """Test values are stored without validation."""
        marker = object()
        scope = Scope()
        scope.set("none", None)
        scope.set("object", marker)

        assert scope.values["none"] is None
        assert scope.values["object"] is marker

    def test_rejects_non_string_key(self):
        """Test keys must be strings."""
        with pytest.raises(ConfigError) as exc_info:
            Scope("production").set(("a", "b"), 1)
        assert exc_info.value.context["scope"] == "production"

    def test_set_logger(self, make_logger):
        """Test a valid logger is stored."""
        scope = Scope()
        handle = make_logger()
        scope.set_logger(handle)

        assert scope.logger is handle

    def test_set_invalid_logger(self, make_logger):
        """Test an invalid logger leaves the slot untouched."""
        scope = Scope()

        with pytest.raises(InvalidLoggerError):
            scope.set_logger(make_logger("info"))
        assert scope.logger is None

    def test_update(self):
        """Test several keys are stored at once."""
        scope = Scope()
        scope.update({"a": 1, "b": 2})

        assert scope.values == {"a": 1, "b": 2}

    def test_update_is_atomic(self):
        """Test no key is stored when one key is invalid."""
        scope = Scope()
        scope.set("a", 0)

        with pytest.raises(ConfigError):
            scope.update({"a": 1, None: 2})
        assert scope.values == {"a": 0}
