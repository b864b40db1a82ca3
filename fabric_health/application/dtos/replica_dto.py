"""DTO for deployed replica details."""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fabric_health.application.serialization.wire_enums import (
    ReplicaRoleField,
    ReplicaStatusField,
    ServiceKindField,
    ServiceOperationNameField,
)
from fabric_health.domain.entities.replica import DeployedServiceReplicaDetail


class DeployedServiceReplicaDetailInfoDTO(BaseModel):
    """Serializable representation of a replica's runtime detail."""

    service_kind: ServiceKindField = Field(default=None, alias="ServiceKind")
    service_name: Optional[str] = Field(default=None, alias="ServiceName")
    partition_id: Optional[UUID] = Field(default=None, alias="PartitionId")
    current_service_operation: ServiceOperationNameField = Field(
        default=None,
        alias="CurrentServiceOperation",
        description="Operation the replica is currently performing",
    )
    current_service_operation_start_time_utc: Optional[datetime] = Field(
        default=None, alias="CurrentServiceOperationStartTimeUtc"
    )
    replica_role: ReplicaRoleField = Field(default=None, alias="ReplicaRole")
    replica_status: ReplicaStatusField = Field(default=None, alias="ReplicaStatus")

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "ServiceKind": "Stateful",
                "ServiceName": "fabric:/App1/Svc1",
                "PartitionId": "0f5d1c3a-8a5e-4b0c-9b7e-3c2a1d4e5f60",
                "CurrentServiceOperation": "ChangeRole",
                "CurrentServiceOperationStartTimeUtc": "2024-09-09T12:00:00Z",
                "ReplicaRole": "Primary",
                "ReplicaStatus": "Ready",
            }
        },
    )

    @classmethod
    def from_domain(
        cls, detail: DeployedServiceReplicaDetail
    ) -> "DeployedServiceReplicaDetailInfoDTO":
        return cls(
            service_kind=detail.service_kind,
            service_name=detail.service_name,
            partition_id=detail.partition_id,
            current_service_operation=detail.current_service_operation,
            current_service_operation_start_time_utc=(
                detail.current_service_operation_start_time_utc
            ),
            replica_role=detail.replica_role,
            replica_status=detail.replica_status,
        )

    def to_domain(self) -> DeployedServiceReplicaDetail:
        return DeployedServiceReplicaDetail(
            service_kind=self.service_kind,
            service_name=self.service_name,
            partition_id=self.partition_id,
            current_service_operation=self.current_service_operation,
            current_service_operation_start_time_utc=(
                self.current_service_operation_start_time_utc
            ),
            replica_role=self.replica_role,
            replica_status=self.replica_status,
        )
