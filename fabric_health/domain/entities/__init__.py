"""
Domain Entities Package

Immutable value objects for health state filters and health chunk results.
"""

from .errors import DomainError, InvalidEnumValueError, InvalidFilterError, WireFormatError
from .filters import (
    ApplicationHealthStateFilter,
    ClusterHealthChunkQueryDescription,
    DeployedApplicationHealthStateFilter,
    DeployedServicePackageHealthStateFilter,
    NodeHealthStateFilter,
    PartitionHealthStateFilter,
    ReplicaHealthStateFilter,
    ServiceHealthStateFilter,
)
from .health import ApplicationHealthStateChunk, ClusterHealthChunk, NodeHealthStateChunk
from .health_state import HealthState, HealthStateFilterFlags, to_filter_flag
from .replica import (
    DeployedServiceReplicaDetail,
    ReplicaRole,
    ReplicaStatus,
    ServiceKind,
    ServiceOperationName,
)

__all__ = [
    "ApplicationHealthStateFilter",
    "ServiceHealthStateFilter",
    "PartitionHealthStateFilter",
    "ReplicaHealthStateFilter",
    "DeployedApplicationHealthStateFilter",
    "DeployedServicePackageHealthStateFilter",
    "NodeHealthStateFilter",
    "ClusterHealthChunkQueryDescription",
    "HealthState",
    "HealthStateFilterFlags",
    "to_filter_flag",
    "ClusterHealthChunk",
    "NodeHealthStateChunk",
    "ApplicationHealthStateChunk",
    "DeployedServiceReplicaDetail",
    "ServiceOperationName",
    "ServiceKind",
    "ReplicaRole",
    "ReplicaStatus",
    "DomainError",
    "InvalidEnumValueError",
    "InvalidFilterError",
    "WireFormatError",
]
