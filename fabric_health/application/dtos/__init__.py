"""
DTOs Package - Application Layer

Pydantic models mirroring the wire JSON, with PascalCase aliases and
``from_domain`` / ``to_domain`` converters.
"""

from .filter_dto import (
    ApplicationHealthStateFilterDTO,
    ClusterHealthChunkQueryDescriptionDTO,
    DeployedApplicationHealthStateFilterDTO,
    DeployedServicePackageHealthStateFilterDTO,
    NodeHealthStateFilterDTO,
    PartitionHealthStateFilterDTO,
    ReplicaHealthStateFilterDTO,
    ServiceHealthStateFilterDTO,
)
from .health_chunk_dto import (
    ApplicationHealthStateChunkDTO,
    ClusterHealthChunkDTO,
    NodeHealthStateChunkDTO,
)
from .replica_dto import DeployedServiceReplicaDetailInfoDTO

__all__ = [
    "ApplicationHealthStateFilterDTO",
    "ServiceHealthStateFilterDTO",
    "PartitionHealthStateFilterDTO",
    "ReplicaHealthStateFilterDTO",
    "DeployedApplicationHealthStateFilterDTO",
    "DeployedServicePackageHealthStateFilterDTO",
    "NodeHealthStateFilterDTO",
    "ClusterHealthChunkQueryDescriptionDTO",
    "ClusterHealthChunkDTO",
    "NodeHealthStateChunkDTO",
    "ApplicationHealthStateChunkDTO",
    "DeployedServiceReplicaDetailInfoDTO",
]
