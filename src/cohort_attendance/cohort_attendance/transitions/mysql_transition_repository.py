from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import TransitionRecord
from .repository import TransitionRepository


class MySQLTransitionRepository(TransitionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_transition(
        self,
        *,
        member_id: str,
        from_cohort_id: str,
        to_cohort_id: str,
        reason: str,
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO cohort_transitions(member_id, from_cohort_id, to_cohort_id, reason, processed, created_at)
                VALUES(%s,%s,%s,%s,0,%s)
                """,
                (member_id, from_cohort_id, to_cohort_id, reason, created_at),
            )
            return int(cur.lastrowid)

    def list_pending(self, *, from_cohort_id: Optional[str] = None) -> Sequence[TransitionRecord]:
        clauses = ["processed=0"]
        params: list[object] = []
        if from_cohort_id is not None:
            clauses.append("from_cohort_id=%s")
            params.append(from_cohort_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT transition_id, member_id, from_cohort_id, to_cohort_id, reason, processed, created_at, processed_at
                FROM cohort_transitions
                WHERE {where}
                ORDER BY created_at ASC, transition_id ASC
                """,
                tuple(params),
            )
            return [
                TransitionRecord(
                    transition_id=int(r["transition_id"]),
                    member_id=str(r["member_id"]),
                    from_cohort_id=r["from_cohort_id"],
                    to_cohort_id=r["to_cohort_id"],
                    reason=r["reason"],
                    created_at=r["created_at"],
                    processed=bool(r["processed"]),
                    processed_at=r.get("processed_at"),
                )
                for r in fetchall(cur)
            ]
