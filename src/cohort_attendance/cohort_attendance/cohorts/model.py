from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CohortProfile:
    """Configuration entity: one age-banded program group.

    The administrative profile spans the whole range for access control only and
    never takes part in cohort assignment.
    """

    cohort_id: str
    name: str
    min_age: int
    max_age: int
    member_label: str
    leader_label: str
    is_admin: bool = False
    show_pfi: bool = False

    @property
    def interval(self) -> tuple[int, int]:
        return self.min_age, self.max_age

    def contains(self, age: int) -> bool:
        return self.min_age <= age <= self.max_age
