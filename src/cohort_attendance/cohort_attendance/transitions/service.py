from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..cohorts.registry import CohortRegistry
from ..common.validators import require_date
from ..core.exceptions import AuthorizationError, InvalidInputError
from ..members.service import MemberService
from .detector import TransitionDetector
from .model import TransitionCandidate, TransitionRecord
from .repository import TransitionRepository

logger = logging.getLogger(__name__)

VerifySecret = Callable[[str, str], bool]


class TransitionService:
    """Use case: list transition candidates and hand confirmed ones to the member store."""

    def __init__(
        self,
        members: MemberService,
        transitions: TransitionRepository,
        registry: CohortRegistry,
        *,
        detector: TransitionDetector | None = None,
    ):
        self._members = members
        self._transitions = transitions
        self._registry = registry
        self._detector = detector or TransitionDetector(registry)

    def candidates_for(self, cohort_id: str, *, today) -> list[TransitionCandidate]:
        roster = self._members.transition_roster(cohort_id, as_of=today)
        candidates = self._detector.detect(cohort_id, roster, today=today)
        logger.info("Cohort %s: %d of %d members need a transition", cohort_id, len(candidates), len(roster))
        return candidates

    def confirm(
        self,
        candidate: TransitionCandidate,
        *,
        secret: str,
        verify: VerifySecret,
        now: Optional[datetime] = None,
    ) -> int:
        """Authorize with the source cohort's secret, re-check the candidate, record the transfer."""

        now = now or datetime.now()
        source = candidate.current_cohort_id

        if not verify(source, secret or ""):
            logger.info("Transition of %s out of %s rejected: bad secret", candidate.member.member_id, source)
            raise AuthorizationError(f"Invalid secret for cohort {source}")

        member = self._members.get_member(candidate.member.member_id)
        if member.cohort_id is not None and member.cohort_id != source:
            raise InvalidInputError(f"Member {member.member_id} is no longer in cohort {source}")

        fresh = self._detector.evaluate(member, source, today=require_date(now, "now"))
        if not fresh or fresh.suggested_cohort_id != candidate.suggested_cohort_id:
            raise InvalidInputError(f"Transition candidate for {member.member_id} is no longer valid")

        min_age, max_age = self._registry.interval_of(source)
        transition_id = self._transitions.create_transition(
            member_id=member.member_id,
            from_cohort_id=source,
            to_cohort_id=fresh.suggested_cohort_id,
            reason=f"Age {fresh.age} outside [{min_age}, {max_age}]",
            created_at=now,
        )
        logger.info(
            "Transition #%s recorded: %s %s -> %s", transition_id, member.member_id, source, fresh.suggested_cohort_id
        )
        return transition_id

    def pending(self, cohort_id: str) -> Sequence[TransitionRecord]:
        self._registry.get(cohort_id)
        return self._transitions.list_pending(from_cohort_id=cohort_id)
