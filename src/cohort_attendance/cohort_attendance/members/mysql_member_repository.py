from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Member
from .repository import MemberRepository

_COLUMNS = "member_id, full_name, preferred_name, birth_date, cohort_id, pfi_level"


def _to_member(r: dict) -> Member:
    return Member(
        member_id=str(r["member_id"]),
        birth_date=normalize_mysql_date(r["birth_date"]),
        full_name=r.get("full_name") or "",
        preferred_name=r.get("preferred_name"),
        cohort_id=r.get("cohort_id"),
        pfi_level=r.get("pfi_level"),
    )


class MySQLMemberRepository(MemberRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_members(self, *, born_from: date, born_to: date) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM members
                WHERE birth_date BETWEEN %s AND %s
                ORDER BY full_name ASC, member_id ASC
                """,
                (born_from, born_to),
            )
            return [_to_member(r) for r in fetchall(cur)]

    def list_by_cohort(self, cohort_id: str) -> Sequence[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM members
                WHERE cohort_id=%s
                ORDER BY full_name ASC, member_id ASC
                """,
                (cohort_id,),
            )
            return [_to_member(r) for r in fetchall(cur)]

    def get_by_id(self, member_id: str) -> Optional[Member]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM members WHERE member_id=%s", (member_id,))
            r = fetchone(cur)
            if not r:
                return None
            return _to_member(r)
