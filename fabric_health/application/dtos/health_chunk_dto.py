"""DTOs for the cluster health chunk response."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fabric_health.application.serialization.wire_enums import HealthStateField
from fabric_health.domain.entities.health import (
    ApplicationHealthStateChunk,
    ClusterHealthChunk,
    NodeHealthStateChunk,
)


class NodeHealthStateChunkDTO(BaseModel):
    node_name: str = Field(alias="NodeName")
    health_state: HealthStateField = Field(default=None, alias="HealthState")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_domain(cls, chunk: NodeHealthStateChunk) -> "NodeHealthStateChunkDTO":
        return cls(node_name=chunk.node_name, health_state=chunk.health_state)

    def to_domain(self) -> NodeHealthStateChunk:
        return NodeHealthStateChunk(
            node_name=self.node_name, health_state=self.health_state
        )


class ApplicationHealthStateChunkDTO(BaseModel):
    application_name: str = Field(alias="ApplicationName")
    application_type_name: Optional[str] = Field(
        default=None, alias="ApplicationTypeName"
    )
    health_state: HealthStateField = Field(default=None, alias="HealthState")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_domain(
        cls, chunk: ApplicationHealthStateChunk
    ) -> "ApplicationHealthStateChunkDTO":
        return cls(
            application_name=chunk.application_name,
            application_type_name=chunk.application_type_name,
            health_state=chunk.health_state,
        )

    def to_domain(self) -> ApplicationHealthStateChunk:
        return ApplicationHealthStateChunk(
            application_name=self.application_name,
            application_type_name=self.application_type_name,
            health_state=self.health_state,
        )


class NodeHealthStateChunkListDTO(BaseModel):
    total_count: int = Field(default=0, alias="TotalCount")
    items: List[NodeHealthStateChunkDTO] = Field(default_factory=list, alias="Items")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, value):
        return [] if value is None else value


class ApplicationHealthStateChunkListDTO(BaseModel):
    total_count: int = Field(default=0, alias="TotalCount")
    items: List[ApplicationHealthStateChunkDTO] = Field(
        default_factory=list, alias="Items"
    )

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("items", mode="before")
    @classmethod
    def _null_items(cls, value):
        return [] if value is None else value


class ClusterHealthChunkDTO(BaseModel):
    """Response of a cluster health chunk query."""

    health_state: HealthStateField = Field(
        default=None,
        alias="HealthState",
        description="Aggregated cluster health, computed over every entity",
    )
    node_health_state_chunks: NodeHealthStateChunkListDTO = Field(
        default_factory=NodeHealthStateChunkListDTO, alias="NodeHealthStateChunks"
    )
    application_health_state_chunks: ApplicationHealthStateChunkListDTO = Field(
        default_factory=ApplicationHealthStateChunkListDTO,
        alias="ApplicationHealthStateChunks",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "HealthState": "Warning",
                "NodeHealthStateChunks": {
                    "TotalCount": 1,
                    "Items": [{"NodeName": "_Node_0", "HealthState": "Ok"}],
                },
                "ApplicationHealthStateChunks": {
                    "TotalCount": 1,
                    "Items": [
                        {
                            "ApplicationName": "fabric:/App1",
                            "ApplicationTypeName": "App1Type",
                            "HealthState": "Warning",
                        }
                    ],
                },
            }
        },
    )

    @classmethod
    def from_domain(cls, chunk: ClusterHealthChunk) -> "ClusterHealthChunkDTO":
        nodes = [
            NodeHealthStateChunkDTO.from_domain(c)
            for c in chunk.node_health_state_chunks
        ]
        apps = [
            ApplicationHealthStateChunkDTO.from_domain(c)
            for c in chunk.application_health_state_chunks
        ]
        return cls(
            health_state=chunk.health_state,
            node_health_state_chunks=NodeHealthStateChunkListDTO(
                total_count=len(nodes), items=nodes
            ),
            application_health_state_chunks=ApplicationHealthStateChunkListDTO(
                total_count=len(apps), items=apps
            ),
        )

    def to_domain(self) -> ClusterHealthChunk:
        return ClusterHealthChunk(
            health_state=self.health_state,
            node_health_state_chunks=[
                item.to_domain() for item in self.node_health_state_chunks.items
            ],
            application_health_state_chunks=[
                item.to_domain() for item in self.application_health_state_chunks.items
            ],
        )
