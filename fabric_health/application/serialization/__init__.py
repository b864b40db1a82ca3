"""
Serialization Package - Application Layer

``enum_codec`` and ``wire_enums`` hold the token tables; ``json_codec``
converts whole objects and is imported explicitly.
"""

from .enum_codec import EnumCodec
from .wire_enums import (
    ENUM_CODECS,
    HEALTH_STATE_CODEC,
    REPLICA_ROLE_CODEC,
    REPLICA_STATUS_CODEC,
    SERVICE_KIND_CODEC,
    SERVICE_OPERATION_NAME_CODEC,
    configure_codecs,
)

__all__ = [
    "EnumCodec",
    "ENUM_CODECS",
    "SERVICE_OPERATION_NAME_CODEC",
    "HEALTH_STATE_CODEC",
    "SERVICE_KIND_CODEC",
    "REPLICA_ROLE_CODEC",
    "REPLICA_STATUS_CODEC",
    "configure_codecs",
]
