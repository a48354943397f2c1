from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Member


class MemberRepository(Protocol):
    """Member store port. The core only reads members."""

    def list_members(self, *, born_from: date, born_to: date) -> Sequence[Member]:
        """Members born within the inclusive window."""

        raise NotImplementedError

    def list_by_cohort(self, cohort_id: str) -> Sequence[Member]:
        """Members whose effective cohort is ``cohort_id``."""

        raise NotImplementedError

    def get_by_id(self, member_id: str) -> Optional[Member]:
        raise NotImplementedError
