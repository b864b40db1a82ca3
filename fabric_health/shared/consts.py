"""Cross-layer constants for the health model package."""

from enum import Enum


class EnumEnvironment(str, Enum):
    """Deployment environment of the client embedding this package."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


# Logger event emitted when a wire token does not match any enumeration member.
UNKNOWN_TOKEN_EVENT = "enum_codec.unknown_token"
