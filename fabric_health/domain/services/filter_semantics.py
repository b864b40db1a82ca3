"""Matching contract of health state filters.

The server evaluates filters; the client never applies them to a request.
These helpers state the contract the server honors so that callers (and
tests) can check that a filter expresses what they mean before sending it.
"""

from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence, TypeVar

from fabric_health.domain.entities.filters import (
    ApplicationHealthStateFilter,
    DeployedApplicationHealthStateFilter,
    NodeHealthStateFilter,
    ServiceHealthStateFilter,
)
from fabric_health.domain.entities.health_state import (
    HealthState,
    HealthStateFilterFlags,
    to_filter_flag,
)


class HealthStateSelector(Protocol):
    health_state_filter: Optional[int]

    @property
    def is_targeted(self) -> bool: ...


_F = TypeVar("_F")


def matches_health_state(mask: Optional[int], state: HealthState) -> bool:
    """Return whether a health mask alone selects ``state``."""
    if mask == HealthStateFilterFlags.ALL:
        return True
    return HealthStateFilterFlags.contains(mask, to_filter_flag(state))


def includes_health_state(selector: HealthStateSelector, state: HealthState) -> bool:
    """Apply the health part of the contract to an eligible entity.

    An unset mask (0 or ``None``) selects the entity only when the filter
    also names it; otherwise the entity's state must be in the mask.
    """
    mask = selector.health_state_filter
    if not mask:
        return selector.is_targeted
    return matches_health_state(mask, state)


def _name_matches(expected: Optional[str], actual: Optional[str]) -> bool:
    return expected is None or expected == actual


def application_filter_includes(
    app_filter: ApplicationHealthStateFilter,
    application_name: str,
    application_type_name: Optional[str],
    aggregated_state: HealthState,
) -> bool:
    if not _name_matches(app_filter.application_name_filter, application_name):
        return False
    if not _name_matches(
        app_filter.application_type_name_filter, application_type_name
    ):
        return False
    return includes_health_state(app_filter, aggregated_state)


def service_filter_includes(
    service_filter: ServiceHealthStateFilter,
    service_name: str,
    aggregated_state: HealthState,
) -> bool:
    if not _name_matches(service_filter.service_name_filter, service_name):
        return False
    return includes_health_state(service_filter, aggregated_state)


def deployed_application_filter_includes(
    deployed_filter: DeployedApplicationHealthStateFilter,
    node_name: str,
    aggregated_state: HealthState,
) -> bool:
    if not _name_matches(deployed_filter.node_name_filter, node_name):
        return False
    return includes_health_state(deployed_filter, aggregated_state)


def node_filter_includes(
    node_filter: NodeHealthStateFilter,
    node_name: str,
    aggregated_state: HealthState,
) -> bool:
    if not _name_matches(node_filter.node_name_filter, node_name):
        return False
    return includes_health_state(node_filter, aggregated_state)


def any_filter_includes(filters: Iterable[_F], predicate) -> bool:
    """Union of independently evaluated filters of the same kind.

    ``predicate`` receives one filter and answers for the candidate entity,
    e.g. ``lambda f: node_filter_includes(f, "Node1", HealthState.OK)``.
    An empty collection selects nothing.
    """
    return any(predicate(item) for item in filters)


def returned_service_names(
    app_filter: ApplicationHealthStateFilter,
    application_name: str,
    application_type_name: Optional[str],
    aggregated_state: HealthState,
    services: Sequence[tuple[str, HealthState]],
) -> list[str]:
    """Names of the services echoed back under one application.

    Nothing is returned when ``app_filter`` does not select the application
    itself. ``services`` lists every service of the application with its
    aggregated state. The application's own aggregated state is computed from
    all of them; this only decides which ones are echoed back.
    """
    if not application_filter_includes(
        app_filter, application_name, application_type_name, aggregated_state
    ):
        return []
    return [
        name
        for name, state in services
        if any_filter_includes(
            app_filter.service_filters,
            lambda f: service_filter_includes(f, name, state),
        )
    ]


def returned_deployed_application_nodes(
    app_filter: ApplicationHealthStateFilter,
    application_name: str,
    application_type_name: Optional[str],
    aggregated_state: HealthState,
    deployed_applications: Sequence[tuple[str, HealthState]],
) -> list[str]:
    """Nodes whose deployed application is echoed back under one application.

    ``deployed_applications`` pairs each node hosting the application with the
    deployed application's aggregated state.
    """
    if not application_filter_includes(
        app_filter, application_name, application_type_name, aggregated_state
    ):
        return []
    return [
        node_name
        for node_name, state in deployed_applications
        if any_filter_includes(
            app_filter.deployed_application_filters,
            lambda f: deployed_application_filter_includes(f, node_name, state),
        )
    ]
