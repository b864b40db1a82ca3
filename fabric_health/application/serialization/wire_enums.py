"""Token tables for every enumeration exchanged on the wire."""

from __future__ import annotations

from typing import Optional, Tuple

from fabric_health.application.serialization.enum_codec import EnumCodec, UnknownTokenHook
from fabric_health.domain.entities.health_state import HealthState
from fabric_health.domain.entities.replica import (
    ReplicaRole,
    ReplicaStatus,
    ServiceKind,
    ServiceOperationName,
)

SERVICE_OPERATION_NAME_CODEC: EnumCodec[ServiceOperationName] = EnumCodec(
    "ServiceOperationName",
    {
        ServiceOperationName.UNKNOWN: "Unknown",
        ServiceOperationName.NONE: "None",
        ServiceOperationName.OPEN: "Open",
        ServiceOperationName.CHANGE_ROLE: "ChangeRole",
        ServiceOperationName.CLOSE: "Close",
        ServiceOperationName.ABORT: "Abort",
    },
)

HEALTH_STATE_CODEC: EnumCodec[HealthState] = EnumCodec(
    "HealthState",
    {
        HealthState.INVALID: "Invalid",
        HealthState.OK: "Ok",
        HealthState.WARNING: "Warning",
        HealthState.ERROR: "Error",
        HealthState.UNKNOWN: "Unknown",
    },
)

SERVICE_KIND_CODEC: EnumCodec[ServiceKind] = EnumCodec(
    "ServiceKind",
    {
        ServiceKind.INVALID: "Invalid",
        ServiceKind.STATELESS: "Stateless",
        ServiceKind.STATEFUL: "Stateful",
    },
)

REPLICA_ROLE_CODEC: EnumCodec[ReplicaRole] = EnumCodec(
    "ReplicaRole",
    {
        ReplicaRole.UNKNOWN: "Unknown",
        ReplicaRole.NONE: "None",
        ReplicaRole.PRIMARY: "Primary",
        ReplicaRole.IDLE_SECONDARY: "IdleSecondary",
        ReplicaRole.ACTIVE_SECONDARY: "ActiveSecondary",
    },
)

REPLICA_STATUS_CODEC: EnumCodec[ReplicaStatus] = EnumCodec(
    "ReplicaStatus",
    {
        ReplicaStatus.INVALID: "Invalid",
        ReplicaStatus.IN_BUILD: "InBuild",
        ReplicaStatus.STANDBY: "Standby",
        ReplicaStatus.READY: "Ready",
        ReplicaStatus.DOWN: "Down",
        ReplicaStatus.DROPPED: "Dropped",
    },
)

ENUM_CODECS: Tuple[EnumCodec, ...] = (
    SERVICE_OPERATION_NAME_CODEC,
    HEALTH_STATE_CODEC,
    SERVICE_KIND_CODEC,
    REPLICA_ROLE_CODEC,
    REPLICA_STATUS_CODEC,
)

# Pydantic field types; validation is lenient, dumping is strict.
ServiceOperationNameField = SERVICE_OPERATION_NAME_CODEC.annotated()
HealthStateField = HEALTH_STATE_CODEC.annotated()
ServiceKindField = SERVICE_KIND_CODEC.annotated()
ReplicaRoleField = REPLICA_ROLE_CODEC.annotated()
ReplicaStatusField = REPLICA_STATUS_CODEC.annotated()


def configure_codecs(
    log_unknown_tokens: bool = True,
    on_unknown_token: Optional[UnknownTokenHook] = None,
) -> None:
    """Apply observability options to every registered codec."""
    for codec in ENUM_CODECS:
        codec.log_unknown_tokens = log_unknown_tokens
        codec.on_unknown_token = on_unknown_token
