from __future__ import annotations

from datetime import date, datetime

import pytest

from src.cohort_attendance.cohort_attendance.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.cohort_attendance.cohort_attendance.database.bootstrap import iter_sql_statements
from src.cohort_attendance.cohort_attendance.database.mysql_base import db_cursor, normalize_mysql_date, placeholders
from src.cohort_attendance.cohort_attendance.members.mysql_member_repository import MySQLMemberRepository
from src.cohort_attendance.cohort_attendance.transitions.mysql_transition_repository import MySQLTransitionRepository


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []
        self.lastrowid = 7
        self.closed = False

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), params))

    def fetchall(self):
        return self._rows

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, rows=()):
        self.cursor_obj = FakeCursor(list(rows))
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, rows=()):
        self.rows = rows
        self.connections = []

    def connect(self):
        conn = FakeConnection(self.rows)
        self.connections.append(conn)
        return conn


def test_iter_sql_statements_respects_quotes():
    sql = "CREATE TABLE a (x INT);\nINSERT INTO a VALUES ('x;y');\n  \nSELECT 1"
    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "INSERT INTO a VALUES ('x;y')", "SELECT 1"]


def test_placeholders():
    assert placeholders(3) == "%s,%s,%s"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        (date(2026, 3, 1), date(2026, 3, 1)),
        (datetime(2026, 3, 1, 8, 0), date(2026, 3, 1)),
        ("2026-03-01", date(2026, 3, 1)),
        (b"2026-03-01", date(2026, 3, 1)),
    ],
)
def test_normalize_mysql_date(value, expected):
    assert normalize_mysql_date(value) == expected


def test_db_cursor_rolls_back_on_error():
    factory = FakeConnFactory()

    with pytest.raises(RuntimeError):
        with db_cursor(factory):
            raise RuntimeError("boom")

    conn = factory.connections[0]
    assert conn.rolled_back and conn.closed and not conn.committed


def test_get_range_is_one_bulk_query():
    rows = [{"record_id": 3, "member_id": "a", "attendance_date": "2026-03-09", "present": 1}]
    factory = FakeConnFactory(rows)
    repo = MySQLAttendanceRepository(factory)

    records = repo.get_range(member_ids={"b", "a"}, start_date=date(2026, 3, 1))

    (conn,) = factory.connections
    ((sql, params),) = conn.cursor_obj.executed
    assert "member_id IN (%s,%s)" in sql
    assert "attendance_date <= %s" not in sql
    assert sql.endswith("ORDER BY attendance_date ASC, member_id ASC")
    assert params == ("a", "b", date(2026, 3, 1))
    assert records[0].attendance_date == date(2026, 3, 9)
    assert records[0].present is True


def test_get_range_without_members_skips_the_database():
    factory = FakeConnFactory()
    assert MySQLAttendanceRepository(factory).get_range(member_ids=[]) == []
    assert factory.connections == []


def test_list_members_queries_the_birth_window():
    rows = [
        {
            "member_id": "z1",
            "full_name": "Ana",
            "preferred_name": None,
            "birth_date": "2011-03-18",
            "cohort_id": None,
            "pfi_level": None,
        }
    ]
    factory = FakeConnFactory(rows)

    members = MySQLMemberRepository(factory).list_members(born_from=date(2008, 3, 16), born_to=date(2012, 3, 15))

    ((sql, params),) = factory.connections[0].cursor_obj.executed
    assert "WHERE birth_date BETWEEN %s AND %s" in sql
    assert params == (date(2008, 3, 16), date(2012, 3, 15))
    assert members[0].birth_date == date(2011, 3, 18)
    assert members[0].cohort_id is None


def test_transition_repository_writes_and_lists_pending_rows():
    created = datetime(2026, 5, 20, 18, 30)
    rows = [
        {
            "transition_id": 7,
            "member_id": "m1",
            "from_cohort_id": "estacion-r21",
            "to_cohort_id": "zona-r21",
            "reason": "Age 14 outside [10, 13]",
            "processed": 0,
            "created_at": created,
            "processed_at": None,
        }
    ]
    factory = FakeConnFactory(rows)
    repo = MySQLTransitionRepository(factory)

    transition_id = repo.create_transition(
        member_id="m1",
        from_cohort_id="estacion-r21",
        to_cohort_id="zona-r21",
        reason="Age 14 outside [10, 13]",
        created_at=created,
    )
    pending = repo.list_pending(from_cohort_id="estacion-r21")

    ((insert_sql, insert_params),) = factory.connections[0].cursor_obj.executed
    assert insert_sql.startswith("INSERT INTO cohort_transitions")
    assert insert_params == ("m1", "estacion-r21", "zona-r21", "Age 14 outside [10, 13]", created)
    assert transition_id == 7

    ((select_sql, select_params),) = factory.connections[1].cursor_obj.executed
    assert "WHERE processed=0 AND from_cohort_id=%s" in select_sql
    assert select_params == ("estacion-r21",)
    assert [(t.transition_id, t.processed, t.processed_at) for t in pending] == [(7, False, None)]
