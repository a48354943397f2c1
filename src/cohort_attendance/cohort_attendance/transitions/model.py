from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..members.model import Member


@dataclass(frozen=True)
class TransitionCandidate:
    """Derived, never persisted: a member whose age left the current cohort's interval."""

    member: Member
    age: int
    current_cohort_id: str
    suggested_cohort_id: str


@dataclass(frozen=True)
class TransitionRecord:
    """A confirmed transfer handed to the member store for execution."""

    transition_id: int
    member_id: str
    from_cohort_id: str
    to_cohort_id: str
    reason: str
    created_at: datetime
    processed: bool = False
    processed_at: Optional[datetime] = None
