from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceLedger
from .auth.secrets import CohortSecretVerifier
from .cohorts.loader import load_registry
from .cohorts.registry import CohortRegistry
from .core.constants import DEFAULT_UPCOMING_BIRTHDAY_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .members.mysql_member_repository import MySQLMemberRepository
from .members.service import MemberService
from .statistics.service import StatisticsService
from .transitions.detector import TransitionDetector
from .transitions.mysql_transition_repository import MySQLTransitionRepository
from .transitions.service import TransitionService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection
    registry: CohortRegistry

    members_repo: MySQLMemberRepository
    attendance_repo: MySQLAttendanceRepository
    transitions_repo: MySQLTransitionRepository

    member_service: MemberService
    ledger: AttendanceLedger
    statistics_service: StatisticsService
    transition_service: TransitionService
    secret_verifier: CohortSecretVerifier


def build_container(
    *,
    db_config: dict,
    cohort_profiles: Iterable[Mapping[str, Any]],
    secret_hashes: Mapping[str, str] | None = None,
    birthday_days: int = DEFAULT_UPCOMING_BIRTHDAY_DAYS,
) -> Container:
    # Registry first: a bad cohort configuration must stop startup before any DB work.
    registry = load_registry(cohort_profiles)

    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    members_repo = MySQLMemberRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    transitions_repo = MySQLTransitionRepository(conn)

    member_service = MemberService(members_repo, registry)
    ledger = AttendanceLedger(attendance_repo)
    statistics_service = StatisticsService(ledger, member_service, registry, birthday_days=birthday_days)
    transition_service = TransitionService(
        member_service,
        transitions_repo,
        registry,
        detector=TransitionDetector(registry),
    )

    return Container(
        conn=conn,
        registry=registry,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        transitions_repo=transitions_repo,
        member_service=member_service,
        ledger=ledger,
        statistics_service=statistics_service,
        transition_service=transition_service,
        secret_verifier=CohortSecretVerifier(secret_hashes or {}),
    )
