"""
JSON codec for health models.

Converts domain objects to the wire JSON (as dicts or text) and back, going
through the pydantic DTOs. Optional scalars that are unset are left off the
wire; child filter lists are always written.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from fabric_health.application.dtos.filter_dto import (
    ApplicationHealthStateFilterDTO,
    ClusterHealthChunkQueryDescriptionDTO,
)
from fabric_health.application.dtos.health_chunk_dto import ClusterHealthChunkDTO
from fabric_health.application.dtos.replica_dto import (
    DeployedServiceReplicaDetailInfoDTO,
)
from fabric_health.domain.entities.errors import WireFormatError
from fabric_health.domain.entities.filters import (
    ApplicationHealthStateFilter,
    ClusterHealthChunkQueryDescription,
)
from fabric_health.domain.entities.health import ClusterHealthChunk
from fabric_health.domain.entities.replica import DeployedServiceReplicaDetail
from fabric_health.shared.logging import get_logger

logger = get_logger(__name__)

WirePayload = Union[str, bytes, Dict[str, Any]]

_DTO = TypeVar("_DTO", bound=BaseModel)


def _dump(dto: BaseModel) -> Dict[str, Any]:
    return dto.model_dump(mode="json", by_alias=True, exclude_none=True)


def _load(dto_type: Type[_DTO], payload: WirePayload) -> _DTO:
    try:
        if isinstance(payload, (str, bytes)):
            return dto_type.model_validate_json(payload)
        return dto_type.model_validate(payload)
    except ValidationError as exc:
        logger.error(
            "json_codec.decode_failed",
            model=dto_type.__name__,
            error_count=exc.error_count(),
        )
        raise WireFormatError(
            f"Invalid {dto_type.__name__} payload",
            errors=exc.errors(include_url=False),
        ) from exc


def serialize_application_filter(
    item: ApplicationHealthStateFilter,
) -> Dict[str, Any]:
    """Return the wire object for an application health state filter.

    Raises:
        InvalidFilterError: If the tree holds something other than the
            expected filter type at any level.
    """
    return _dump(ApplicationHealthStateFilterDTO.from_domain(item))


def deserialize_application_filter(
    payload: WirePayload,
) -> ApplicationHealthStateFilter:
    """Build an application health state filter from its wire object.

    Raises:
        WireFormatError: If the payload is not valid JSON or has the wrong shape.
    """
    return _load(ApplicationHealthStateFilterDTO, payload).to_domain()


def serialize_cluster_query(
    description: ClusterHealthChunkQueryDescription,
) -> Dict[str, Any]:
    return _dump(ClusterHealthChunkQueryDescriptionDTO.from_domain(description))


def deserialize_cluster_query(
    payload: WirePayload,
) -> ClusterHealthChunkQueryDescription:
    return _load(ClusterHealthChunkQueryDescriptionDTO, payload).to_domain()


def serialize_cluster_health_chunk(chunk: ClusterHealthChunk) -> Dict[str, Any]:
    return _dump(ClusterHealthChunkDTO.from_domain(chunk))


def deserialize_cluster_health_chunk(payload: WirePayload) -> ClusterHealthChunk:
    """Build a cluster health chunk from a query response body.

    Unknown health state tokens degrade to ``None`` rather than failing.
    """
    return _load(ClusterHealthChunkDTO, payload).to_domain()


def serialize_replica_detail(detail: DeployedServiceReplicaDetail) -> Dict[str, Any]:
    return _dump(DeployedServiceReplicaDetailInfoDTO.from_domain(detail))


def deserialize_replica_detail(payload: WirePayload) -> DeployedServiceReplicaDetail:
    return _load(DeployedServiceReplicaDetailInfoDTO, payload).to_domain()


def to_json(payload: Dict[str, Any]) -> str:
    """Render a wire object as compact JSON text."""
    return json.dumps(payload, separators=(",", ":"))
