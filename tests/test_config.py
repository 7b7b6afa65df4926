"""Tests for pydantic-settings configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from chainreg.config import Settings, get_settings


def test_defaults(monkeypatch):
    for name in ("CHAINREG_CHAINS_CONFIG_PATH", "CHAINREG_USE_CATALOG_FALLBACK", "CHAINREG_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings()
    assert settings.chains_config_path is None
    assert settings.use_catalog_fallback is True
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CHAINREG_CHAINS_CONFIG_PATH", "/etc/chainreg/chains.toml")
    monkeypatch.setenv("CHAINREG_USE_CATALOG_FALLBACK", "0")
    monkeypatch.setenv("CHAINREG_LOG_LEVEL", "DEBUG")
    settings = Settings()
    assert settings.chains_config_path == Path("/etc/chainreg/chains.toml")
    assert settings.use_catalog_fallback is False
    assert settings.log_level == "DEBUG"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("CHAINREG_LOG_LEVEL", "info")
    assert Settings().log_level == "INFO"


def test_invalid_log_level(monkeypatch):
    monkeypatch.setenv("CHAINREG_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings()
