"""Startup wiring for clients embedding the health model layer."""

from __future__ import annotations

from typing import Optional

from fabric_health.application.serialization.enum_codec import UnknownTokenHook
from fabric_health.application.serialization.wire_enums import configure_codecs
from fabric_health.main.config import AppSettings, get_settings
from fabric_health.shared.logging import get_logger, update_logging_from_settings

logger = get_logger(__name__)


def bootstrap(
    settings: Optional[AppSettings] = None,
    on_unknown_token: Optional[UnknownTokenHook] = None,
) -> AppSettings:
    """
    Configure logging and the enum codecs from settings.

    Args:
        settings: Settings to apply; loaded from the environment if omitted.
        on_unknown_token: Optional hook called whenever an enum token is not
            recognized, e.g. to increment a metric.

    Returns:
        The settings that were applied.
    """
    settings = settings or get_settings()

    update_logging_from_settings(settings)
    configure_codecs(
        log_unknown_tokens=settings.serialization.log_unknown_tokens,
        on_unknown_token=on_unknown_token,
    )

    logger.info(
        "bootstrap.completed",
        environment=settings.environment.value,
        log_unknown_tokens=settings.serialization.log_unknown_tokens,
    )
    return settings
