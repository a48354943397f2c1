from __future__ import annotations

import logging
from typing import Collection, Iterable, Sequence

from ..common.locks import KeyedLock
from ..common.validators import require_date, require_date_range, require_non_empty
from ..core.enums import PresenceFilter
from ..members.model import Member
from .model import AttendanceRecord, DaySheetEntry
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceLedger:
    """Per-member, per-day presence ledger.

    Writes for one (member, date) key are serialized through a per-key lock,
    writes for different keys proceed in parallel. Storage errors propagate.
    """

    def __init__(self, attendance: AttendanceRepository, *, locks: KeyedLock | None = None):
        self._attendance = attendance
        self._locks = locks if locks is not None else KeyedLock()

    def set_presence(self, member_id: str, attendance_date, present: bool) -> AttendanceRecord:
        member_id = require_non_empty(member_id, "member_id")
        day = require_date(attendance_date, "attendance_date")
        present = bool(present)

        with self._locks.hold((member_id, day)):
            existing = self._attendance.get_for_member_and_date(member_id, day)
            if existing and existing.present == present:
                logger.debug("Presence unchanged for %s on %s (present=%s)", member_id, day, present)
                return existing

            record = self._attendance.upsert_presence(member_id=member_id, attendance_date=day, present=present)
            logger.info("Presence %s for %s on %s", "set" if present else "cleared", member_id, day)
            return record

    def toggle_presence(self, member_id: str, attendance_date) -> AttendanceRecord:
        """Invert the stored flag; an unmarked key becomes present."""

        member_id = require_non_empty(member_id, "member_id")
        day = require_date(attendance_date, "attendance_date")

        with self._locks.hold((member_id, day)):
            existing = self._attendance.get_for_member_and_date(member_id, day)
            present = not existing.present if existing else True
            record = self._attendance.upsert_presence(member_id=member_id, attendance_date=day, present=present)
            logger.info("Presence toggled to %s for %s on %s", present, member_id, day)
            return record

    def presence_on(self, member_id: str, attendance_date) -> bool:
        record = self._attendance.get_for_member_and_date(
            require_non_empty(member_id, "member_id"), require_date(attendance_date, "attendance_date")
        )
        return bool(record and record.present)

    def has_record(self, member_id: str, attendance_date) -> bool:
        record = self._attendance.get_for_member_and_date(
            require_non_empty(member_id, "member_id"), require_date(attendance_date, "attendance_date")
        )
        return record is not None

    def records_in_range(self, member_ids: Collection[str], start, end) -> Sequence[AttendanceRecord]:
        start_d, end_d = require_date_range(start, end)
        if not member_ids:
            return []
        return self._attendance.get_range(member_ids=set(member_ids), start_date=start_d, end_date=end_d)

    def all_records(self, member_ids: Collection[str]) -> Sequence[AttendanceRecord]:
        """Every record ever stored for the members, same ordering as ``records_in_range``."""

        if not member_ids:
            return []
        return self._attendance.get_range(member_ids=set(member_ids))

    def day_sheet(self, members: Iterable[Member], attendance_date) -> list[DaySheetEntry]:
        day = require_date(attendance_date, "attendance_date")
        members = list(members)
        records = self.records_in_range({m.member_id for m in members}, day, day)
        by_member = {r.member_id: r for r in records}

        out: list[DaySheetEntry] = []
        for m in members:
            r = by_member.get(m.member_id)
            out.append(DaySheetEntry(member=m, present=bool(r and r.present), recorded=r is not None))
        return out


def filter_day_sheet(entries: Iterable[DaySheetEntry], presence: PresenceFilter = PresenceFilter.ALL) -> list[DaySheetEntry]:
    presence = PresenceFilter(presence)
    if presence == PresenceFilter.PRESENT:
        return [e for e in entries if e.present]
    if presence == PresenceFilter.ABSENT:
        return [e for e in entries if not e.present]
    return list(entries)
