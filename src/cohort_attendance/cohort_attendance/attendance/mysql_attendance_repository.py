from __future__ import annotations

from datetime import date
from typing import Collection, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, placeholders
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(r["record_id"]),
        member_id=str(r["member_id"]),
        attendance_date=normalize_mysql_date(r["attendance_date"]),
        present=bool(r["present"]),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_member_and_date(self, member_id: str, attendance_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, member_id, attendance_date, present
                FROM attendance_records
                WHERE member_id=%s AND attendance_date=%s
                """,
                (member_id, attendance_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _to_record(r)

    def upsert_presence(self, *, member_id: str, attendance_date: date, present: bool) -> AttendanceRecord:
        # The unique key makes concurrent writers for one key resolve to last-write-wins.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(member_id, attendance_date, present)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE present=VALUES(present)
                """,
                (member_id, attendance_date, 1 if present else 0),
            )
            cur.execute(
                """
                SELECT record_id, member_id, attendance_date, present
                FROM attendance_records
                WHERE member_id=%s AND attendance_date=%s
                """,
                (member_id, attendance_date),
            )
            return _to_record(fetchone(cur))

    def get_range(
        self,
        *,
        member_ids: Collection[str],
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Sequence[AttendanceRecord]:
        ids = sorted({str(m) for m in member_ids})
        if not ids:
            return []

        clauses = [f"member_id IN ({placeholders(len(ids))})"]
        params: list[object] = list(ids)

        if start_date is not None:
            clauses.append("attendance_date >= %s")
            params.append(start_date)
        if end_date is not None:
            clauses.append("attendance_date <= %s")
            params.append(end_date)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT record_id, member_id, attendance_date, present
                FROM attendance_records
                WHERE {where}
                ORDER BY attendance_date ASC, member_id ASC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]
