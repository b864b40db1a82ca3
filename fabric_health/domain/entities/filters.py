"""
Health state filter entities.

Filters describe which entities a cluster health chunk query returns. They
form a tree that mirrors the cluster hierarchy::

    ClusterHealthChunkQueryDescription
    ├── NodeHealthStateFilter
    └── ApplicationHealthStateFilter
        ├── ServiceHealthStateFilter
        │   └── PartitionHealthStateFilter
        │       └── ReplicaHealthStateFilter
        └── DeployedApplicationHealthStateFilter
            └── DeployedServicePackageHealthStateFilter

Every filter is immutable and built with keyword arguments only. Construction
never fails: contradictory combinations (for example a ``NONE`` health mask
together with an exact name) are legal and simply select nothing.

``health_state_filter`` is an int built from ``HealthStateFilterFlags``. It
defaults to ``DEFAULT`` (0), which selects an entity only when the filter also
names it through one of its identity fields. ``None`` is accepted and leaves
the field off the wire. Child filter lists only decide which children are
returned with a selected parent; an empty list returns no children. They never
change how the parent's aggregated health is computed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple
from uuid import UUID

from fabric_health.domain.entities.health_state import HealthStateFilterFlags


def _as_tuple(items: Optional[Iterable]) -> tuple:
    return tuple(items) if items is not None else ()


@dataclass(frozen=True, slots=True, kw_only=True)
class ReplicaHealthStateFilter:
    """Selects replicas (or stateless instances) of a selected partition."""

    replica_or_instance_id_filter: Optional[str] = None
    health_state_filter: Optional[int] = HealthStateFilterFlags.DEFAULT

    @property
    def is_targeted(self) -> bool:
        return self.replica_or_instance_id_filter is not None


@dataclass(frozen=True, slots=True, kw_only=True)
class PartitionHealthStateFilter:
    """Selects partitions of a selected service."""

    partition_id_filter: Optional[UUID] = None
    health_state_filter: Optional[int] = HealthStateFilterFlags.DEFAULT
    replica_filters: Tuple[ReplicaHealthStateFilter, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "replica_filters", _as_tuple(self.replica_filters))

    @property
    def is_targeted(self) -> bool:
        return self.partition_id_filter is not None


@dataclass(frozen=True, slots=True, kw_only=True)
class ServiceHealthStateFilter:
    """Selects services of a selected application.

    ``service_name_filter`` is a fabric URI such as ``fabric:/App1/Svc1``.
    """

    service_name_filter: Optional[str] = None
    health_state_filter: Optional[int] = HealthStateFilterFlags.DEFAULT
    partition_filters: Tuple[PartitionHealthStateFilter, ...] = field(
        default_factory=tuple
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "partition_filters", _as_tuple(self.partition_filters))

    @property
    def is_targeted(self) -> bool:
        return self.service_name_filter is not None


@dataclass(frozen=True, slots=True, kw_only=True)
class DeployedServicePackageHealthStateFilter:
    """Selects service packages of a selected deployed application."""

    service_manifest_name_filter: Optional[str] = None
    service_package_activation_id_filter: Optional[str] = None
    health_state_filter: Optional[int] = HealthStateFilterFlags.DEFAULT

    @property
    def is_targeted(self) -> bool:
        return (
            self.service_manifest_name_filter is not None
            or self.service_package_activation_id_filter is not None
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class DeployedApplicationHealthStateFilter:
    """Selects the nodes a selected application is deployed on."""

    node_name_filter: Optional[str] = None
    health_state_filter: Optional[int] = HealthStateFilterFlags.DEFAULT
    deployed_service_package_filters: Tuple[
        DeployedServicePackageHealthStateFilter, ...
    ] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "deployed_service_package_filters",
            _as_tuple(self.deployed_service_package_filters),
        )

    @property
    def is_targeted(self) -> bool:
        return self.node_name_filter is not None


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationHealthStateFilter:
    """Defines matching criteria for applications in the cluster health chunk.

    One filter can match zero, one or many applications.

    Attributes:
        application_name_filter: Exact application name (fabric URI). If the
            application does not exist, the filter contributes nothing.
        application_type_name_filter: Exact application type name; restricts
            the filter to applications of that type.
        health_state_filter: Mask of ``HealthStateFilterFlags``. With the
            default (0) and a name or type filter set, matching applications
            are returned regardless of their health state.
        service_filters: Which services to return under a selected
            application. Empty returns none.
        deployed_application_filters: Which deployed applications to return
            under a selected application. Empty returns none.
    """

    application_name_filter: Optional[str] = None
    application_type_name_filter: Optional[str] = None
    health_state_filter: Optional[int] = HealthStateFilterFlags.DEFAULT
    service_filters: Tuple[ServiceHealthStateFilter, ...] = field(default_factory=tuple)
    deployed_application_filters: Tuple[DeployedApplicationHealthStateFilter, ...] = (
        field(default_factory=tuple)
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "service_filters", _as_tuple(self.service_filters))
        object.__setattr__(
            self,
            "deployed_application_filters",
            _as_tuple(self.deployed_application_filters),
        )

    @property
    def is_targeted(self) -> bool:
        return (
            self.application_name_filter is not None
            or self.application_type_name_filter is not None
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class NodeHealthStateFilter:
    """Selects nodes returned in the cluster health chunk."""

    node_name_filter: Optional[str] = None
    health_state_filter: Optional[int] = HealthStateFilterFlags.DEFAULT

    @property
    def is_targeted(self) -> bool:
        return self.node_name_filter is not None


@dataclass(frozen=True, slots=True, kw_only=True)
class ClusterHealthChunkQueryDescription:
    """Root of a cluster health chunk query.

    Filters of the same kind are OR-ed: an entity is returned when any of them
    selects it.
    """

    node_filters: Tuple[NodeHealthStateFilter, ...] = field(default_factory=tuple)
    application_filters: Tuple[ApplicationHealthStateFilter, ...] = field(
        default_factory=tuple
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "node_filters", _as_tuple(self.node_filters))
        object.__setattr__(
            self, "application_filters", _as_tuple(self.application_filters)
        )
