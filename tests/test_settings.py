"""Tests for service_registry.settings.Settings behavior."""

import pytest
from pydantic import ValidationError

from service_registry.settings import Settings, get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    """Defaults should be stable even if external env or .env sets values."""
    for var in ["SERVICE_REGISTRY_LOG_LEVEL", "SERVICE_REGISTRY_LOG_COLORIZE", "service_registry_log_level"]:
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)  # ignore project .env file if present
    assert s.log_level == "INFO"
    assert s.log_colorize is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SERVICE_REGISTRY_LOG_LEVEL", "debug")
    monkeypatch.setenv("SERVICE_REGISTRY_LOG_COLORIZE", "false")
    s = Settings(_env_file=None)
    assert s.log_level == "DEBUG"
    assert s.log_colorize is False


def test_case_insensitive_env_name(monkeypatch: pytest.MonkeyPatch):
    # lower-case variable name should still be picked up due to case_sensitive=False
    monkeypatch.setenv("service_registry_log_level", "trace")
    s = Settings(_env_file=None)
    assert s.log_level == "TRACE"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError, match="Invalid log level"):
        Settings(log_level="verbose", _env_file=None)


def test_get_settings_singleton():
    a = get_settings()
    b = get_settings()
    assert a is b
