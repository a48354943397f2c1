from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..core.exceptions import ConfigurationError, NotFoundError
from .model import CohortProfile

logger = logging.getLogger(__name__)


class CohortRegistry:
    """Fixed set of cohort profiles, validated once at load time.

    Non-administrative intervals must be pairwise disjoint. Unless ``allow_gaps``
    is set, consecutive intervals must also be contiguous, so ages between the
    youngest and the oldest cohort always resolve to exactly one cohort.
    """

    def __init__(self, profiles: Iterable[CohortProfile], *, allow_gaps: bool = False):
        self._by_id: dict[str, CohortProfile] = {}
        for p in profiles:
            if p.cohort_id in self._by_id:
                raise ConfigurationError(f"Duplicate cohort id: {p.cohort_id}")
            if p.min_age < 0 or p.max_age < p.min_age:
                raise ConfigurationError(f"Cohort {p.cohort_id} has invalid interval [{p.min_age}, {p.max_age}]")
            self._by_id[p.cohort_id] = p

        self._cohorts: list[CohortProfile] = sorted(
            (p for p in self._by_id.values() if not p.is_admin),
            key=lambda p: p.min_age,
        )
        if not self._cohorts:
            raise ConfigurationError("At least one non-administrative cohort is required")

        for prev, cur in zip(self._cohorts, self._cohorts[1:]):
            if cur.min_age <= prev.max_age:
                raise ConfigurationError(
                    f"Cohorts {prev.cohort_id} [{prev.min_age}, {prev.max_age}] and "
                    f"{cur.cohort_id} [{cur.min_age}, {cur.max_age}] overlap"
                )
            if not allow_gaps and cur.min_age != prev.max_age + 1:
                raise ConfigurationError(
                    f"Ages {prev.max_age + 1}..{cur.min_age - 1} are not covered between "
                    f"{prev.cohort_id} and {cur.cohort_id}"
                )

        logger.info(
            "Cohort registry loaded: %s",
            ", ".join(f"{p.cohort_id}[{p.min_age},{p.max_age}]" for p in self._cohorts),
        )

    def cohort_for(self, age: int) -> Optional[CohortProfile]:
        """The unique non-administrative cohort containing ``age``, or None for uncovered ages."""
        for p in self._cohorts:
            if p.contains(age):
                return p
        return None

    def get(self, cohort_id: str) -> CohortProfile:
        profile = self._by_id.get(cohort_id)
        if not profile:
            raise NotFoundError(f"Unknown cohort: {cohort_id}")
        return profile

    def interval_of(self, cohort_id: str) -> tuple[int, int]:
        return self.get(cohort_id).interval

    def cohorts(self) -> Sequence[CohortProfile]:
        """Non-administrative cohorts ordered by age."""
        return tuple(self._cohorts)

    def profiles(self) -> Sequence[CohortProfile]:
        return tuple(self._by_id.values())

    def __contains__(self, cohort_id: object) -> bool:
        return cohort_id in self._by_id
