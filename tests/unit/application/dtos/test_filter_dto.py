from __future__ import annotations

from uuid import UUID

import pytest
from pydantic import ValidationError

from fabric_health.application.dtos.filter_dto import (
    ApplicationHealthStateFilterDTO,
    ClusterHealthChunkQueryDescriptionDTO,
    PartitionHealthStateFilterDTO,
)
from fabric_health.domain.entities.errors import InvalidFilterError
from fabric_health.domain.entities.filters import (
    ApplicationHealthStateFilter,
    ClusterHealthChunkQueryDescription,
    NodeHealthStateFilter,
    ServiceHealthStateFilter,
)


def test_application_filter_dto_from_domain(application_filter) -> None:
    dto = ApplicationHealthStateFilterDTO.from_domain(application_filter)

    assert dto.application_name_filter == "fabric:/App1"
    assert dto.health_state_filter == 0
    assert len(dto.service_filters) == 2
    assert dto.deployed_application_filters[0].node_name_filter == "_Node_0"
    assert dto.to_domain() == application_filter


def test_application_filter_dto_wire_aliases() -> None:
    dto = ApplicationHealthStateFilterDTO.from_domain(
        ApplicationHealthStateFilter(
            application_type_name_filter="App1Type",
            health_state_filter=6,
            service_filters=[ServiceHealthStateFilter(service_name_filter="fabric:/App1/Svc1")],
        )
    )

    payload = dto.model_dump(mode="json", by_alias=True, exclude_none=True)

    assert payload == {
        "ApplicationTypeNameFilter": "App1Type",
        "HealthStateFilter": 6,
        "ServiceFilters": [
            {
                "ServiceNameFilter": "fabric:/App1/Svc1",
                "HealthStateFilter": 0,
                "PartitionFilters": [],
            }
        ],
        "DeployedApplicationFilters": [],
    }


def test_null_lists_validate_as_empty() -> None:
    dto = ApplicationHealthStateFilterDTO.model_validate(
        {"ApplicationNameFilter": "fabric:/App1", "ServiceFilters": None}
    )

    assert dto.service_filters == []
    assert dto.deployed_application_filters == []
    assert dto.to_domain() == ApplicationHealthStateFilter(
        application_name_filter="fabric:/App1"
    )


def test_missing_health_state_filter_defaults_to_zero() -> None:
    dto = ApplicationHealthStateFilterDTO.model_validate({})
    assert dto.health_state_filter == 0


def test_unknown_keys_are_ignored() -> None:
    dto = ApplicationHealthStateFilterDTO.model_validate(
        {"ApplicationNameFilter": "fabric:/App1", "Unexpected": True}
    )
    assert dto.application_name_filter == "fabric:/App1"


def test_partition_id_is_parsed() -> None:
    dto = PartitionHealthStateFilterDTO.model_validate(
        {"PartitionIdFilter": "0f5d1c3a-8a5e-4b0c-9b7e-3c2a1d4e5f60"}
    )
    assert dto.partition_id_filter == UUID("0f5d1c3a-8a5e-4b0c-9b7e-3c2a1d4e5f60")


def test_cluster_query_dto_round_trip(application_filter) -> None:
    query = ClusterHealthChunkQueryDescription(
        node_filters=[NodeHealthStateFilter(node_name_filter="_Node_0")],
        application_filters=[application_filter],
    )

    dto = ClusterHealthChunkQueryDescriptionDTO.from_domain(query)

    assert dto.node_filters[0].node_name_filter == "_Node_0"
    assert dto.to_domain() == query


@pytest.mark.parametrize("mask", [True, False, "6", 6.0])
def test_health_state_filter_must_be_an_integer(mask) -> None:
    with pytest.raises(ValidationError):
        ApplicationHealthStateFilterDTO.model_validate({"HealthStateFilter": mask})


def test_json_boolean_health_state_filter_is_rejected() -> None:
    with pytest.raises(ValidationError):
        PartitionHealthStateFilterDTO.model_validate_json('{"HealthStateFilter": true}')


def test_from_domain_rejects_wrong_filter_type() -> None:
    with pytest.raises(InvalidFilterError):
        ApplicationHealthStateFilterDTO.from_domain(NodeHealthStateFilter())


def test_from_domain_rejects_wrong_nested_filter_type() -> None:
    query = ClusterHealthChunkQueryDescription(
        application_filters=[NodeHealthStateFilter(node_name_filter="_Node_0")]
    )

    with pytest.raises(InvalidFilterError) as exc_info:
        ClusterHealthChunkQueryDescriptionDTO.from_domain(query)

    assert exc_info.value.expected == "ApplicationHealthStateFilter"
