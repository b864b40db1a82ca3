"""
Shared module - Cross-cutting concerns

Constants and logging helpers used by every layer. It must not depend on
the domain, application or main layers.
"""

from .consts import UNKNOWN_TOKEN_EVENT, EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "UNKNOWN_TOKEN_EVENT",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
