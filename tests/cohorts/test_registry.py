from __future__ import annotations

import pytest

from src.cohort_attendance.cohort_attendance.cohorts.model import CohortProfile
from src.cohort_attendance.cohort_attendance.cohorts.registry import CohortRegistry
from src.cohort_attendance.cohort_attendance.core.exceptions import ConfigurationError, NotFoundError


def _p(cohort_id, lo, hi, **kw):
    return CohortProfile(cohort_id, cohort_id.title(), lo, hi, "member", "leader", **kw)


def test_cohort_for_returns_the_unique_matching_cohort(registry):
    assert registry.cohort_for(1).cohort_id == "r21-kids"
    assert registry.cohort_for(13).cohort_id == "estacion-r21"
    assert registry.cohort_for(14).cohort_id == "zona-r21"
    assert registry.cohort_for(99).cohort_id == "renovacion-21"


def test_admin_profile_never_assigned(registry):
    # admin spans [0, 99] but only for access control
    assert registry.cohort_for(0) is None
    assert registry.cohort_for(100) is None
    assert [p.cohort_id for p in registry.cohorts()] == ["r21-kids", "estacion-r21", "zona-r21", "renovacion-21"]


def test_interval_of(registry):
    assert registry.interval_of("zona-r21") == (14, 17)
    assert registry.interval_of("admin") == (0, 99)

    with pytest.raises(NotFoundError):
        registry.interval_of("missing")


def test_overlapping_intervals_rejected_at_load():
    with pytest.raises(ConfigurationError):
        CohortRegistry([_p("a", 1, 10), _p("b", 10, 13)])


def test_gap_between_intervals_rejected_unless_allowed():
    with pytest.raises(ConfigurationError):
        CohortRegistry([_p("a", 1, 9), _p("b", 11, 13)])

    registry = CohortRegistry([_p("a", 1, 9), _p("b", 11, 13)], allow_gaps=True)
    assert registry.cohort_for(10) is None


@pytest.mark.parametrize(
    "profiles",
    [
        [_p("a", 1, 9), _p("a", 10, 13)],
        [_p("a", 9, 1)],
        [_p("a", -1, 9)],
        [_p("admin", 0, 99, is_admin=True)],
        [],
    ],
)
def test_invalid_configuration_fails_fast(profiles):
    with pytest.raises(ConfigurationError):
        CohortRegistry(profiles)


def test_admin_overlap_is_ignored():
    registry = CohortRegistry([_p("a", 1, 9), _p("admin", 0, 99, is_admin=True)])
    assert registry.cohort_for(5).cohort_id == "a"
    assert "admin" in registry
