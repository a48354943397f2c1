from __future__ import annotations

import logging
from datetime import timedelta
from typing import Iterable, Sequence

from ..cohorts.registry import CohortRegistry
from ..common.age import age_in_years, birth_window, next_birthday
from ..common.validators import require_date
from ..core.constants import DEFAULT_UPCOMING_BIRTHDAY_DAYS
from ..core.exceptions import InvalidInputError, NotFoundError
from .model import Member, UpcomingBirthday
from .repository import MemberRepository

logger = logging.getLogger(__name__)


class MemberService:
    """Use case: resolve cohort rosters from the member store."""

    def __init__(self, members: MemberRepository, registry: CohortRegistry):
        self._members = members
        self._registry = registry

    def roster(self, cohort_id: str, *, as_of) -> list[Member]:
        """Members whose age as of ``as_of`` falls in the cohort interval (one store query)."""

        as_of = require_date(as_of, "as_of")
        profile = self._registry.get(cohort_id)
        if profile.is_admin:
            raise InvalidInputError("The administrative profile has no member roster")

        born_from, born_to = birth_window(profile.min_age, profile.max_age, as_of)
        fetched = self._members.list_members(born_from=born_from, born_to=born_to)
        # The store window is authoritative, re-check in case the adapter rounds it.
        return [m for m in fetched if profile.contains(age_in_years(m.birth_date, as_of))]

    def effective_roster(self, cohort_id: str) -> Sequence[Member]:
        """Members the store records as belonging to the cohort."""

        self._registry.get(cohort_id)
        return self._members.list_by_cohort(cohort_id)

    def transition_roster(self, cohort_id: str, *, as_of) -> list[Member]:
        """Members the cohort answers for when looking for transitions.

        Members stored in the cohort, plus members with no stored cohort whose
        age is in the interval or one year past its upper bound (ages only
        grow, so those have just outgrown it).
        """

        as_of = require_date(as_of, "as_of")
        profile = self._registry.get(cohort_id)
        if profile.is_admin:
            raise InvalidInputError("The administrative profile has no member roster")

        stored = list(self._members.list_by_cohort(cohort_id))
        seen = {m.member_id for m in stored}

        born_from, born_to = birth_window(profile.min_age, profile.max_age + 1, as_of)
        unassigned = [
            m
            for m in self._members.list_members(born_from=born_from, born_to=born_to)
            if m.cohort_id is None and m.member_id not in seen
        ]
        return stored + unassigned

    def get_member(self, member_id: str) -> Member:
        member = self._members.get_by_id(member_id)
        if not member:
            raise NotFoundError(f"Member not found: {member_id}")
        return member


def upcoming_birthdays(
    members: Iterable[Member],
    *,
    today,
    days: int = DEFAULT_UPCOMING_BIRTHDAY_DAYS,
) -> list[UpcomingBirthday]:
    """Birthdays within ``days`` days from ``today`` (both ends inclusive), soonest first."""

    today = require_date(today, "today")
    if days < 0:
        raise InvalidInputError("days must be >= 0")
    horizon = today + timedelta(days=days)

    out: list[UpcomingBirthday] = []
    for m in members:
        birthday = next_birthday(m.birth_date, today)
        if birthday <= horizon:
            out.append(UpcomingBirthday(member=m, birthday=birthday, turning=birthday.year - m.birth_date.year))
    out.sort(key=lambda b: (b.birthday, b.member.member_id))
    return out
