"""Domain entities describing a replica deployed on a node."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID


class ServiceOperationName(str, Enum):
    """Life-cycle operation a replica or instance is currently performing."""

    UNKNOWN = "unknown"
    NONE = "none"
    OPEN = "open"
    CHANGE_ROLE = "change_role"
    CLOSE = "close"
    ABORT = "abort"


class ServiceKind(str, Enum):
    INVALID = "invalid"
    STATELESS = "stateless"
    STATEFUL = "stateful"


class ReplicaRole(str, Enum):
    """Role of a stateful replica in its replica set."""

    UNKNOWN = "unknown"
    NONE = "none"
    PRIMARY = "primary"
    IDLE_SECONDARY = "idle_secondary"
    ACTIVE_SECONDARY = "active_secondary"


class ReplicaStatus(str, Enum):
    INVALID = "invalid"
    IN_BUILD = "in_build"
    STANDBY = "standby"
    READY = "ready"
    DOWN = "down"
    DROPPED = "dropped"


@dataclass(frozen=True, slots=True)
class DeployedServiceReplicaDetail:
    """Runtime detail of a replica, as reported by the node hosting it."""

    service_kind: Optional[ServiceKind] = None
    service_name: Optional[str] = None
    partition_id: Optional[UUID] = None
    current_service_operation: Optional[ServiceOperationName] = None
    current_service_operation_start_time_utc: Optional[datetime] = None
    replica_role: Optional[ReplicaRole] = None
    replica_status: Optional[ReplicaStatus] = None
