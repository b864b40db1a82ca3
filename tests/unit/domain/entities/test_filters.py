from __future__ import annotations

import dataclasses
from uuid import UUID

import pytest

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


def test_application_filter_defaults() -> None:
    app_filter = ApplicationHealthStateFilter()

    assert app_filter.health_state_filter == 0
    assert app_filter.application_name_filter is None
    assert app_filter.application_type_name_filter is None
    assert app_filter.service_filters == ()
    assert app_filter.deployed_application_filters == ()
    assert not app_filter.is_targeted


def test_absent_and_empty_children_are_equivalent() -> None:
    assert ApplicationHealthStateFilter(service_filters=None) == ApplicationHealthStateFilter(
        service_filters=[]
    )


def test_children_are_frozen_into_tuples() -> None:
    services = [ServiceHealthStateFilter(service_name_filter="fabric:/App1/Svc1")]
    app_filter = ApplicationHealthStateFilter(service_filters=services)

    services.append(ServiceHealthStateFilter())

    assert isinstance(app_filter.service_filters, tuple)
    assert len(app_filter.service_filters) == 1


def test_filters_cannot_be_mutated() -> None:
    app_filter = ApplicationHealthStateFilter(application_name_filter="fabric:/App1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        app_filter.health_state_filter = HealthStateFilterFlags.ALL  # type: ignore[misc]


def test_positional_arguments_are_rejected() -> None:
    with pytest.raises(TypeError):
        ApplicationHealthStateFilter("fabric:/App1")  # type: ignore[misc]


def test_structural_equality_and_hash(application_filter) -> None:
    rebuilt = dataclasses.replace(application_filter)

    assert rebuilt == application_filter
    assert rebuilt is not application_filter
    assert hash(rebuilt) == hash(application_filter)
    assert rebuilt != dataclasses.replace(
        application_filter, health_state_filter=HealthStateFilterFlags.OK
    )


def test_unsatisfiable_filter_is_constructible() -> None:
    app_filter = ApplicationHealthStateFilter(
        application_name_filter="fabric:/App1",
        health_state_filter=HealthStateFilterFlags.NONE,
    )
    assert app_filter.health_state_filter == HealthStateFilterFlags.NONE


def test_health_state_filter_may_be_unset() -> None:
    assert NodeHealthStateFilter(health_state_filter=None).health_state_filter is None


def test_is_targeted_per_level() -> None:
    assert ApplicationHealthStateFilter(application_type_name_filter="App1Type").is_targeted
    assert ServiceHealthStateFilter(service_name_filter="fabric:/App1/Svc1").is_targeted
    assert PartitionHealthStateFilter(
        partition_id_filter=UUID("0f5d1c3a-8a5e-4b0c-9b7e-3c2a1d4e5f60")
    ).is_targeted
    assert ReplicaHealthStateFilter(replica_or_instance_id_filter="1").is_targeted
    assert DeployedApplicationHealthStateFilter(node_name_filter="_Node_0").is_targeted
    assert DeployedServicePackageHealthStateFilter(
        service_package_activation_id_filter="abc"
    ).is_targeted
    assert NodeHealthStateFilter(node_name_filter="_Node_0").is_targeted
    assert not ServiceHealthStateFilter().is_targeted


def test_cluster_query_normalizes_children() -> None:
    query = ClusterHealthChunkQueryDescription(
        node_filters=(f for f in [NodeHealthStateFilter(node_name_filter="_Node_0")]),
        application_filters=None,
    )

    assert query.node_filters == (NodeHealthStateFilter(node_name_filter="_Node_0"),)
    assert query.application_filters == ()
