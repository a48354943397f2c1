from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..cohorts.model import CohortProfile
from ..cohorts.registry import CohortRegistry
from ..common.age import age_in_years
from ..common.validators import require_date
from ..core.exceptions import InvalidInputError
from ..members.model import Member
from .model import TransitionCandidate

logger = logging.getLogger(__name__)


class TransitionDetector:
    """Flags members whose computed age is outside their current cohort.

    Pure: no store access, no mutation. Candidates are computed fresh on every
    call since ages and intervals can change between calls.
    """

    def __init__(self, registry: CohortRegistry):
        self._registry = registry

    def _current(self, cohort_id: str) -> CohortProfile:
        profile = self._registry.get(cohort_id)
        if profile.is_admin:
            raise InvalidInputError("The administrative profile takes no part in cohort transitions")
        return profile

    def evaluate(self, member: Member, current_cohort_id: str, *, today) -> Optional[TransitionCandidate]:
        current = self._current(current_cohort_id)
        return self._evaluate(member, current, require_date(today, "today"))

    def detect(self, current_cohort_id: str, members: Iterable[Member], *, today) -> list[TransitionCandidate]:
        current = self._current(current_cohort_id)
        today = require_date(today, "today")

        out: list[TransitionCandidate] = []
        for m in members:
            candidate = self._evaluate(m, current, today)
            if candidate:
                out.append(candidate)
        return out

    def _evaluate(self, member: Member, current: CohortProfile, today: date) -> Optional[TransitionCandidate]:
        age = age_in_years(member.birth_date, today)
        if current.contains(age):
            return None

        suggested = self._registry.cohort_for(age)
        if suggested is None:
            logger.debug("Member %s aged %d matches no cohort, skipped", member.member_id, age)
            return None
        if suggested.cohort_id == current.cohort_id:
            return None

        return TransitionCandidate(
            member=member,
            age=age,
            current_cohort_id=current.cohort_id,
            suggested_cohort_id=suggested.cohort_id,
        )
