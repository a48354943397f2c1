from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Member:
    """Domain entity: a person tracked for attendance.

    ``cohort_id`` is the effective cohort recorded by the member store; it only
    changes through an externally confirmed transfer. Age and age-derived
    cohort are computed, never stored.
    """

    member_id: str
    birth_date: date
    full_name: str = ""
    preferred_name: Optional[str] = None
    cohort_id: Optional[str] = None
    pfi_level: Optional[str] = None


@dataclass(frozen=True)
class UpcomingBirthday:
    member: Member
    birthday: date
    turning: int
