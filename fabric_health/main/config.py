"""
Client Settings - Main Layer

Pydantic Settings for the health model layer, read from environment
variables, an optional .env file and defaults.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fabric_health.shared import EnumEnvironment, EnumLogLevel


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class SerializationSettings(BaseSettings):
    """Wire codec options."""

    log_unknown_tokens: bool = Field(
        default=True,
        description="Emit a warning when an enum token falls back to the default",
    )

    model_config = SettingsConfigDict(
        env_prefix="SERIALIZATION_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Top-level settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Client environment"
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    serialization: SerializationSettings = Field(default_factory=SerializationSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Build a settings instance.

    Kept as a factory so tests can monkeypatch the environment first.
    """
    return AppSettings()
