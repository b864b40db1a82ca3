"""
Health chunk domain entities.

Value objects returned by a cluster health chunk query. They carry the
aggregated health state of each entity the request filters selected; the
aggregation itself always happens server side.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from fabric_health.domain.entities.health_state import HealthState


@dataclass(frozen=True, slots=True)
class NodeHealthStateChunk:
    """Health state of a node selected by a node filter."""

    node_name: str
    health_state: Optional[HealthState] = None


@dataclass(frozen=True, slots=True)
class ApplicationHealthStateChunk:
    """Health state of an application selected by an application filter."""

    application_name: str
    application_type_name: Optional[str] = None
    health_state: Optional[HealthState] = None


@dataclass(frozen=True, slots=True)
class ClusterHealthChunk:
    """Aggregated cluster health plus the chunks that matched the query."""

    health_state: Optional[HealthState] = None
    node_health_state_chunks: Tuple[NodeHealthStateChunk, ...] = field(
        default_factory=tuple
    )
    application_health_state_chunks: Tuple[ApplicationHealthStateChunk, ...] = field(
        default_factory=tuple
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "node_health_state_chunks", _as_tuple(self.node_health_state_chunks)
        )
        object.__setattr__(
            self,
            "application_health_state_chunks",
            _as_tuple(self.application_health_state_chunks),
        )


def _as_tuple(items: Optional[Iterable]) -> tuple:
    return tuple(items) if items is not None else ()
