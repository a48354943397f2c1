from __future__ import annotations

from datetime import date
from typing import Collection, Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Attendance store port.

    Implementations keep at most one record per (member_id, attendance_date).
    """

    def get_for_member_and_date(self, member_id: str, attendance_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def upsert_presence(self, *, member_id: str, attendance_date: date, present: bool) -> AttendanceRecord:
        """Create the record or overwrite its flag; never produces a second row for the key."""

        raise NotImplementedError

    def get_range(
        self,
        *,
        member_ids: Collection[str],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        """Bulk read ordered by date then member id. ``None`` bounds are open."""

        raise NotImplementedError
