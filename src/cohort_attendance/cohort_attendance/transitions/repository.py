from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import TransitionRecord


class TransitionRepository(Protocol):
    """Store for confirmed transfers; applying them to members happens outside the core."""

    def create_transition(
        self,
        *,
        member_id: str,
        from_cohort_id: str,
        to_cohort_id: str,
        reason: str,
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def list_pending(self, *, from_cohort_id: Optional[str] = None) -> Sequence[TransitionRecord]:
        raise NotImplementedError
