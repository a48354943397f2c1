from __future__ import annotations

from datetime import date

import pytest

from src.cohort_attendance.cohort_attendance.common.age import birth_window
from src.cohort_attendance.cohort_attendance.core.exceptions import InvalidInputError, NotFoundError
from src.cohort_attendance.cohort_attendance.members.model import Member
from src.cohort_attendance.cohort_attendance.members.service import MemberService, upcoming_birthdays


class InMemoryMemberRepo:
    def __init__(self, members):
        self._members = list(members)
        self.window_calls = []

    def list_members(self, *, born_from, born_to):
        self.window_calls.append((born_from, born_to))
        return [m for m in self._members if born_from <= m.birth_date <= born_to]

    def list_by_cohort(self, cohort_id):
        return [m for m in self._members if m.cohort_id == cohort_id]

    def get_by_id(self, member_id):
        return next((m for m in self._members if m.member_id == member_id), None)


def test_roster_derives_membership_from_age(registry, today):
    members = [
        Member("thirteen", date(2012, 3, 16)),
        Member("fourteen", date(2012, 3, 15)),
        Member("ten", date(2016, 3, 15)),
        Member("nine", date(2016, 3, 16), cohort_id="estacion-r21"),
    ]
    repo = InMemoryMemberRepo(members)
    service = MemberService(repo, registry)

    roster = service.roster("estacion-r21", as_of=today)

    assert {m.member_id for m in roster} == {"thirteen", "ten"}
    assert repo.window_calls == [birth_window(10, 13, today)]


def test_effective_roster_reads_stored_cohort(registry):
    members = [Member("nine", date(2016, 3, 16), cohort_id="estacion-r21"), Member("x", date(2000, 1, 1))]
    service = MemberService(InMemoryMemberRepo(members), registry)

    assert [m.member_id for m in service.effective_roster("estacion-r21")] == ["nine"]
    with pytest.raises(NotFoundError):
        service.effective_roster("missing")


def test_roster_rejects_admin_profile(registry, today):
    service = MemberService(InMemoryMemberRepo([]), registry)
    with pytest.raises(InvalidInputError):
        service.roster("admin", as_of=today)


def test_get_member(registry):
    service = MemberService(InMemoryMemberRepo([Member("a", date(2000, 1, 1))]), registry)

    assert service.get_member("a").member_id == "a"
    with pytest.raises(NotFoundError):
        service.get_member("b")


def test_upcoming_birthdays_inclusive_horizon(today):
    members = [
        Member("late", date(2010, 3, 22)),
        Member("today", date(2010, 3, 15)),
        Member("too_late", date(2010, 3, 23)),
        Member("passed", date(2010, 3, 14)),
    ]

    upcoming = upcoming_birthdays(members, today=today, days=7)

    assert [(b.member.member_id, b.birthday, b.turning) for b in upcoming] == [
        ("today", date(2026, 3, 15), 16),
        ("late", date(2026, 3, 22), 16),
    ]


def test_upcoming_birthday_for_feb29_in_common_year():
    upcoming = upcoming_birthdays([Member("leap", date(2008, 2, 29))], today=date(2027, 2, 25))

    assert [(b.birthday, b.turning) for b in upcoming] == [(date(2027, 3, 1), 19)]


def test_upcoming_birthdays_rejects_negative_horizon(today):
    with pytest.raises(InvalidInputError):
        upcoming_birthdays([], today=today, days=-1)


def test_transition_roster_adds_unassigned_members_near_the_interval(registry):
    as_of = date(2026, 5, 20)
    members = [
        Member("stored", date(2000, 1, 1), cohort_id="estacion-r21"),
        Member("in_range", date(2014, 1, 1)),
        Member("just_outgrown", date(2012, 5, 20)),
        Member("two_years_out", date(2011, 5, 20)),
        Member("younger", date(2017, 1, 1)),
        Member("assigned_elsewhere", date(2012, 5, 20), cohort_id="zona-r21"),
    ]
    repo = InMemoryMemberRepo(members)
    service = MemberService(repo, registry)

    roster = service.transition_roster("estacion-r21", as_of=as_of)

    assert [m.member_id for m in roster] == ["stored", "in_range", "just_outgrown"]
    assert repo.window_calls == [birth_window(10, 14, as_of)]


def test_transition_roster_rejects_admin_profile(registry, today):
    service = MemberService(InMemoryMemberRepo([]), registry)
    with pytest.raises(InvalidInputError):
        service.transition_roster("admin", as_of=today)
