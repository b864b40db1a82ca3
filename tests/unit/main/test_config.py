from __future__ import annotations

from fabric_health.main.config import AppSettings, get_settings
from fabric_health.shared.consts import EnumEnvironment, EnumLogLevel


def test_get_settings_loads_defaults(monkeypatch) -> None:
    monkeypatch.delenv("SERIALIZATION_LOG_UNKNOWN_TOKENS", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    settings = get_settings()

    assert settings.environment == EnumEnvironment.DEVELOPMENT
    assert settings.serialization.log_unknown_tokens is True
    assert settings.logging.file_path is None


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SERIALIZATION_LOG_UNKNOWN_TOKENS", "false")

    settings = AppSettings()

    assert settings.environment == EnumEnvironment.PRODUCTION
    assert settings.logging.level == EnumLogLevel.DEBUG
    assert settings.serialization.log_unknown_tokens is False
