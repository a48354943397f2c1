from __future__ import annotations

from datetime import date

import pytest

from src.cohort_attendance.cohort_attendance.cohorts.model import CohortProfile
from src.cohort_attendance.cohort_attendance.cohorts.registry import CohortRegistry
from src.cohort_attendance.cohort_attendance.core.exceptions import InvalidInputError, NotFoundError
from src.cohort_attendance.cohort_attendance.members.model import Member
from src.cohort_attendance.cohort_attendance.transitions.detector import TransitionDetector

BORN = date(2012, 5, 20)


def test_member_still_in_range_is_not_a_candidate(registry):
    detector = TransitionDetector(registry)
    member = Member("m1", BORN, cohort_id="estacion-r21")

    assert detector.detect("estacion-r21", [member], today=date(2026, 5, 19)) == []


def test_birthday_moves_member_to_next_cohort(registry):
    detector = TransitionDetector(registry)
    member = Member("m1", BORN, cohort_id="estacion-r21")

    (candidate,) = detector.detect("estacion-r21", [member], today=date(2026, 5, 20))

    assert candidate.member == member
    assert candidate.age == 14
    assert candidate.current_cohort_id == "estacion-r21"
    assert candidate.suggested_cohort_id == "zona-r21"


def test_too_young_member_suggests_younger_cohort(registry):
    detector = TransitionDetector(registry)
    candidate = detector.evaluate(Member("m1", date(2017, 1, 1)), "estacion-r21", today=date(2026, 5, 20))
    assert candidate.suggested_cohort_id == "r21-kids"


def test_members_matching_no_cohort_are_skipped(registry):
    detector = TransitionDetector(registry)
    members = [
        Member("newborn", date(2026, 1, 1)),
        Member("ten", date(2016, 1, 1)),
    ]

    assert [c.member.member_id for c in detector.detect("r21-kids", members, today=date(2026, 5, 20))] == ["ten"]
    assert detector.detect("renovacion-21", [Member("old", date(1920, 1, 1))], today=date(2026, 5, 20)) == []


def test_gap_ages_are_skipped():
    registry = CohortRegistry(
        [
            CohortProfile("a", "A", 1, 9, "m", "l"),
            CohortProfile("b", "B", 11, 13, "m", "l"),
        ],
        allow_gaps=True,
    )
    detector = TransitionDetector(registry)

    assert detector.detect("b", [Member("ten", date(2016, 1, 1))], today=date(2026, 5, 20)) == []


def test_admin_and_unknown_sources_rejected(registry):
    detector = TransitionDetector(registry)

    with pytest.raises(InvalidInputError):
        detector.detect("admin", [], today=date(2026, 5, 20))
    with pytest.raises(NotFoundError):
        detector.detect("missing", [], today=date(2026, 5, 20))
