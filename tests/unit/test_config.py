"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from numeralsys.core.config import LoggingConfig, ParserSettings, SentinelConfig
from numeralsys.dispatch import create_dispatcher


def test_default_settings():
    settings = ParserSettings()
    assert settings.sentinel.enabled is True
    assert settings.sentinel.octal_value == 8393601
    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "text"


def test_sentinel_env_override(monkeypatch):
    monkeypatch.setenv("NUMERALSYS_SENTINEL_ENABLED", "false")
    monkeypatch.setenv("NUMERALSYS_SENTINEL_OCTAL_VALUE", "15")
    config = SentinelConfig()
    assert config.enabled is False
    assert config.octal_value == 15
    assert ParserSettings().sentinel.enabled is False


def test_logging_env_override(monkeypatch):
    monkeypatch.setenv("NUMERALSYS_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("NUMERALSYS_LOG_FORMAT", "json")
    config = LoggingConfig()
    assert config.level == "DEBUG"
    assert config.format == "json"


def test_create_dispatcher_reads_env(monkeypatch):
    monkeypatch.setenv("NUMERALSYS_SENTINEL_ENABLED", "false")
    dispatcher = create_dispatcher()
    assert dispatcher.settings.sentinel.enabled is False
    assert dispatcher.parse("40011601", 8) == 8393601
