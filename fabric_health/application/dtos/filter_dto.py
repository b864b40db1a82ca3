"""Wire DTOs for health state filters and the cluster health chunk query."""

from __future__ import annotations

from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from fabric_health.domain.entities.errors import InvalidFilterError
from fabric_health.domain.entities.filters import (
    ApplicationHealthStateFilter,
    ClusterHealthChunkQueryDescription,
    DeployedApplicationHealthStateFilter,
    DeployedServicePackageHealthStateFilter,
    NodeHealthStateFilter,
    PartitionHealthStateFilter,
    ReplicaHealthStateFilter,
    ServiceHealthStateFilter,
)
from fabric_health.domain.entities.health_state import HealthStateFilterFlags

_HEALTH_STATE_FILTER_DESCRIPTION = (
    "Bitwise OR of HealthStateFilterFlags: Default=0, None=1, Ok=2, "
    "Warning=4, Error=8, All=65535"
)


class _WireModel(BaseModel):
    """Base for PascalCase wire objects; unknown keys are ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_list_is_empty(cls, value: Any, info) -> Any:
        field_info = cls.model_fields.get(info.field_name)
        if value is None and field_info is not None and field_info.default_factory is list:
            return []
        return value


def _require(item: Any, expected: type) -> None:
    if not isinstance(item, expected):
        raise InvalidFilterError(expected.__name__, item)


def _health_state_filter_field() -> Any:
    return Field(
        default=HealthStateFilterFlags.DEFAULT,
        alias="HealthStateFilter",
        description=_HEALTH_STATE_FILTER_DESCRIPTION,
    )


class ReplicaHealthStateFilterDTO(_WireModel):
    replica_or_instance_id_filter: Optional[str] = Field(
        default=None, alias="ReplicaOrInstanceIdFilter"
    )
    health_state_filter: Optional[StrictInt] = _health_state_filter_field()

    @classmethod
    def from_domain(cls, item: ReplicaHealthStateFilter) -> "ReplicaHealthStateFilterDTO":
        _require(item, ReplicaHealthStateFilter)
        return cls(
            replica_or_instance_id_filter=item.replica_or_instance_id_filter,
            health_state_filter=item.health_state_filter,
        )

    def to_domain(self) -> ReplicaHealthStateFilter:
        return ReplicaHealthStateFilter(
            replica_or_instance_id_filter=self.replica_or_instance_id_filter,
            health_state_filter=self.health_state_filter,
        )


class PartitionHealthStateFilterDTO(_WireModel):
    partition_id_filter: Optional[UUID] = Field(default=None, alias="PartitionIdFilter")
    health_state_filter: Optional[StrictInt] = _health_state_filter_field()
    replica_filters: List[ReplicaHealthStateFilterDTO] = Field(
        default_factory=list, alias="ReplicaFilters"
    )

    @classmethod
    def from_domain(
        cls, item: PartitionHealthStateFilter
    ) -> "PartitionHealthStateFilterDTO":
        _require(item, PartitionHealthStateFilter)
        return cls(
            partition_id_filter=item.partition_id_filter,
            health_state_filter=item.health_state_filter,
            replica_filters=[
                ReplicaHealthStateFilterDTO.from_domain(child)
                for child in item.replica_filters
            ],
        )

    def to_domain(self) -> PartitionHealthStateFilter:
        return PartitionHealthStateFilter(
            partition_id_filter=self.partition_id_filter,
            health_state_filter=self.health_state_filter,
            replica_filters=[child.to_domain() for child in self.replica_filters],
        )


class ServiceHealthStateFilterDTO(_WireModel):
    service_name_filter: Optional[str] = Field(default=None, alias="ServiceNameFilter")
    health_state_filter: Optional[StrictInt] = _health_state_filter_field()
    partition_filters: List[PartitionHealthStateFilterDTO] = Field(
        default_factory=list, alias="PartitionFilters"
    )

    @classmethod
    def from_domain(cls, item: ServiceHealthStateFilter) -> "ServiceHealthStateFilterDTO":
        _require(item, ServiceHealthStateFilter)
        return cls(
            service_name_filter=item.service_name_filter,
            health_state_filter=item.health_state_filter,
            partition_filters=[
                PartitionHealthStateFilterDTO.from_domain(child)
                for child in item.partition_filters
            ],
        )

    def to_domain(self) -> ServiceHealthStateFilter:
        return ServiceHealthStateFilter(
            service_name_filter=self.service_name_filter,
            health_state_filter=self.health_state_filter,
            partition_filters=[child.to_domain() for child in self.partition_filters],
        )


class DeployedServicePackageHealthStateFilterDTO(_WireModel):
    service_manifest_name_filter: Optional[str] = Field(
        default=None, alias="ServiceManifestNameFilter"
    )
    service_package_activation_id_filter: Optional[str] = Field(
        default=None, alias="ServicePackageActivationIdFilter"
    )
    health_state_filter: Optional[StrictInt] = _health_state_filter_field()

    @classmethod
    def from_domain(
        cls, item: DeployedServicePackageHealthStateFilter
    ) -> "DeployedServicePackageHealthStateFilterDTO":
        _require(item, DeployedServicePackageHealthStateFilter)
        return cls(
            service_manifest_name_filter=item.service_manifest_name_filter,
            service_package_activation_id_filter=item.service_package_activation_id_filter,
            health_state_filter=item.health_state_filter,
        )

    def to_domain(self) -> DeployedServicePackageHealthStateFilter:
        return DeployedServicePackageHealthStateFilter(
            service_manifest_name_filter=self.service_manifest_name_filter,
            service_package_activation_id_filter=self.service_package_activation_id_filter,
            health_state_filter=self.health_state_filter,
        )


class DeployedApplicationHealthStateFilterDTO(_WireModel):
    node_name_filter: Optional[str] = Field(default=None, alias="NodeNameFilter")
    health_state_filter: Optional[StrictInt] = _health_state_filter_field()
    deployed_service_package_filters: List[
        DeployedServicePackageHealthStateFilterDTO
    ] = Field(default_factory=list, alias="DeployedServicePackageFilters")

    @classmethod
    def from_domain(
        cls, item: DeployedApplicationHealthStateFilter
    ) -> "DeployedApplicationHealthStateFilterDTO":
        _require(item, DeployedApplicationHealthStateFilter)
        return cls(
            node_name_filter=item.node_name_filter,
            health_state_filter=item.health_state_filter,
            deployed_service_package_filters=[
                DeployedServicePackageHealthStateFilterDTO.from_domain(child)
                for child in item.deployed_service_package_filters
            ],
        )

    def to_domain(self) -> DeployedApplicationHealthStateFilter:
        return DeployedApplicationHealthStateFilter(
            node_name_filter=self.node_name_filter,
            health_state_filter=self.health_state_filter,
            deployed_service_package_filters=[
                child.to_domain() for child in self.deployed_service_package_filters
            ],
        )


class ApplicationHealthStateFilterDTO(_WireModel):
    """Serializable representation of an application health state filter."""

    application_name_filter: Optional[str] = Field(
        default=None,
        alias="ApplicationNameFilter",
        description="Exact application name, as a fabric URI",
    )
    application_type_name_filter: Optional[str] = Field(
        default=None,
        alias="ApplicationTypeNameFilter",
        description="Exact application type name",
    )
    health_state_filter: Optional[StrictInt] = _health_state_filter_field()
    service_filters: List[ServiceHealthStateFilterDTO] = Field(
        default_factory=list,
        alias="ServiceFilters",
        description="Services returned under a selected application",
    )
    deployed_application_filters: List[DeployedApplicationHealthStateFilterDTO] = Field(
        default_factory=list,
        alias="DeployedApplicationFilters",
        description="Deployed applications returned under a selected application",
    )

    @classmethod
    def from_domain(
        cls, item: ApplicationHealthStateFilter
    ) -> "ApplicationHealthStateFilterDTO":
        _require(item, ApplicationHealthStateFilter)
        return cls(
            application_name_filter=item.application_name_filter,
            application_type_name_filter=item.application_type_name_filter,
            health_state_filter=item.health_state_filter,
            service_filters=[
                ServiceHealthStateFilterDTO.from_domain(child)
                for child in item.service_filters
            ],
            deployed_application_filters=[
                DeployedApplicationHealthStateFilterDTO.from_domain(child)
                for child in item.deployed_application_filters
            ],
        )

    def to_domain(self) -> ApplicationHealthStateFilter:
        return ApplicationHealthStateFilter(
            application_name_filter=self.application_name_filter,
            application_type_name_filter=self.application_type_name_filter,
            health_state_filter=self.health_state_filter,
            service_filters=[child.to_domain() for child in self.service_filters],
            deployed_application_filters=[
                child.to_domain() for child in self.deployed_application_filters
            ],
        )

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "ApplicationNameFilter": "fabric:/App1",
                "HealthStateFilter": 0,
                "ServiceFilters": [{"HealthStateFilter": 8}],
                "DeployedApplicationFilters": [],
            }
        },
    )


class NodeHealthStateFilterDTO(_WireModel):
    node_name_filter: Optional[str] = Field(default=None, alias="NodeNameFilter")
    health_state_filter: Optional[StrictInt] = _health_state_filter_field()

    @classmethod
    def from_domain(cls, item: NodeHealthStateFilter) -> "NodeHealthStateFilterDTO":
        _require(item, NodeHealthStateFilter)
        return cls(
            node_name_filter=item.node_name_filter,
            health_state_filter=item.health_state_filter,
        )

    def to_domain(self) -> NodeHealthStateFilter:
        return NodeHealthStateFilter(
            node_name_filter=self.node_name_filter,
            health_state_filter=self.health_state_filter,
        )


class ClusterHealthChunkQueryDescriptionDTO(_WireModel):
    """Body of a cluster health chunk query."""

    node_filters: List[NodeHealthStateFilterDTO] = Field(
        default_factory=list, alias="NodeFilters"
    )
    application_filters: List[ApplicationHealthStateFilterDTO] = Field(
        default_factory=list, alias="ApplicationFilters"
    )

    @classmethod
    def from_domain(
        cls, item: ClusterHealthChunkQueryDescription
    ) -> "ClusterHealthChunkQueryDescriptionDTO":
        _require(item, ClusterHealthChunkQueryDescription)
        return cls(
            node_filters=[
                NodeHealthStateFilterDTO.from_domain(child) for child in item.node_filters
            ],
            application_filters=[
                ApplicationHealthStateFilterDTO.from_domain(child)
                for child in item.application_filters
            ],
        )

    def to_domain(self) -> ClusterHealthChunkQueryDescription:
        return ClusterHealthChunkQueryDescription(
            node_filters=[child.to_domain() for child in self.node_filters],
            application_filters=[
                child.to_domain() for child in self.application_filters
            ],
        )
