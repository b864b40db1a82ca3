from __future__ import annotations

from typing import Any, Dict, Iterator, List, Tuple
from uuid import UUID

import pytest

from fabric_health.application.serialization import enum_codec, wire_enums
from fabric_health.domain.entities.filters import (
    ApplicationHealthStateFilter,
    DeployedApplicationHealthStateFilter,
    DeployedServicePackageHealthStateFilter,
    PartitionHealthStateFilter,
    ReplicaHealthStateFilter,
    ServiceHealthStateFilter,
)
from fabric_health.domain.entities.health_state import HealthStateFilterFlags

PARTITION_ID = UUID("0f5d1c3a-8a5e-4b0c-9b7e-3c2a1d4e5f60")


@pytest.fixture()
def application_filter() -> ApplicationHealthStateFilter:
    return ApplicationHealthStateFilter(
        application_name_filter="fabric:/App1",
        health_state_filter=HealthStateFilterFlags.DEFAULT,
        service_filters=[
            ServiceHealthStateFilter(
                health_state_filter=HealthStateFilterFlags.ERROR,
                partition_filters=[
                    PartitionHealthStateFilter(
                        partition_id_filter=PARTITION_ID,
                        replica_filters=[
                            ReplicaHealthStateFilter(
                                replica_or_instance_id_filter="131887",
                                health_state_filter=HealthStateFilterFlags.ALL,
                            )
                        ],
                    )
                ],
            ),
            ServiceHealthStateFilter(service_name_filter="fabric:/App1/Svc1"),
        ],
        deployed_application_filters=[
            DeployedApplicationHealthStateFilter(
                node_name_filter="_Node_0",
                deployed_service_package_filters=[
                    DeployedServicePackageHealthStateFilter(
                        service_manifest_name_filter="Svc1Pkg",
                        health_state_filter=HealthStateFilterFlags.combine(
                            HealthStateFilterFlags.WARNING,
                            HealthStateFilterFlags.ERROR,
                        ),
                    )
                ],
            )
        ],
    )


class RecordingLogger:
    """Stand-in for a structlog logger that keeps every call."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str, Dict[str, Any]]] = []

    def _record(self, level: str, event: str, **kwargs: Any) -> None:
        self.calls.append((level, event, kwargs))

    def warning(self, event: str, **kwargs: Any) -> None:
        self._record("warning", event, **kwargs)

    def error(self, event: str, **kwargs: Any) -> None:
        self._record("error", event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._record("info", event, **kwargs)


@pytest.fixture()
def codec_logger(monkeypatch) -> RecordingLogger:
    recorder = RecordingLogger()
    monkeypatch.setattr(enum_codec, "logger", recorder)
    return recorder


@pytest.fixture(autouse=True)
def _reset_codec_options() -> Iterator[None]:
    yield
    wire_enums.configure_codecs()
