from __future__ import annotations

import pytest

from fabric_health.domain.entities.health_state import (
    HealthState,
    HealthStateFilterFlags,
    to_filter_flag,
)


def test_flag_values_are_fixed() -> None:
    assert HealthStateFilterFlags.DEFAULT == 0
    assert HealthStateFilterFlags.NONE == 1
    assert HealthStateFilterFlags.OK == 2
    assert HealthStateFilterFlags.WARNING == 4
    assert HealthStateFilterFlags.ERROR == 8
    assert HealthStateFilterFlags.ALL == 65535


def test_all_is_not_the_union_of_named_bits() -> None:
    union = HealthStateFilterFlags.combine(
        HealthStateFilterFlags.NONE,
        HealthStateFilterFlags.OK,
        HealthStateFilterFlags.WARNING,
        HealthStateFilterFlags.ERROR,
    )
    assert union == 15
    assert union != HealthStateFilterFlags.ALL


def test_mask_six_selects_ok_and_warning_only() -> None:
    mask = HealthStateFilterFlags.combine(
        HealthStateFilterFlags.OK, HealthStateFilterFlags.WARNING
    )

    assert mask == 6
    assert HealthStateFilterFlags.contains(mask, HealthStateFilterFlags.OK)
    assert HealthStateFilterFlags.contains(mask, HealthStateFilterFlags.WARNING)
    assert not HealthStateFilterFlags.contains(mask, HealthStateFilterFlags.ERROR)
    assert not HealthStateFilterFlags.contains(mask, HealthStateFilterFlags.NONE)


@pytest.mark.parametrize("mask", [HealthStateFilterFlags.DEFAULT, None])
def test_unset_mask_contains_nothing(mask) -> None:
    assert not HealthStateFilterFlags.contains(mask, HealthStateFilterFlags.OK)


def test_combine_without_flags_is_default() -> None:
    assert HealthStateFilterFlags.combine() == HealthStateFilterFlags.DEFAULT


@pytest.mark.parametrize(
    ("state", "flag"),
    [
        (HealthState.OK, HealthStateFilterFlags.OK),
        (HealthState.WARNING, HealthStateFilterFlags.WARNING),
        (HealthState.ERROR, HealthStateFilterFlags.ERROR),
        (HealthState.INVALID, HealthStateFilterFlags.DEFAULT),
        (HealthState.UNKNOWN, HealthStateFilterFlags.DEFAULT),
    ],
)
def test_to_filter_flag(state: HealthState, flag: int) -> None:
    assert to_filter_flag(state) == flag
