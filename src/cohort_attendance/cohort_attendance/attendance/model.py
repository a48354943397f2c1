from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..members.model import Member


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: explicit presence mark for one (member, date) key.

    A missing record means "not marked", which is distinct from ``present=False``.
    """

    member_id: str
    attendance_date: date
    present: bool
    record_id: Optional[int] = None

    @property
    def key(self) -> tuple[str, date]:
        return self.member_id, self.attendance_date


@dataclass(frozen=True)
class DaySheetEntry:
    """Read-model for one member on one date."""

    member: Member
    present: bool
    recorded: bool
