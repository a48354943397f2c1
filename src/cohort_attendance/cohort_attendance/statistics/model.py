from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import PfiStage
from ..members.model import UpcomingBirthday


@dataclass(frozen=True)
class DailyCount:
    day: date
    present: int
    recorded: int


@dataclass(frozen=True)
class PeakDay:
    """Highest daily present count and the earliest date reaching it (None when nothing recorded)."""

    count: int = 0
    day: Optional[date] = None


@dataclass(frozen=True)
class TodaySnapshot:
    day: date
    total: int
    present: int
    absent: int
    percentage: int


@dataclass(frozen=True)
class MonthlySummary:
    month: date
    average: int
    peak: PeakDay
    days_with_records: int


@dataclass(frozen=True)
class StageShare:
    count: int
    percentage: int


@dataclass(frozen=True)
class CohortReport:
    cohort_id: str
    today: TodaySnapshot
    month: MonthlySummary
    historical_peak: PeakDay
    upcoming_birthdays: list[UpcomingBirthday] = field(default_factory=list)
    pfi_distribution: Optional[dict[PfiStage, StageShare]] = None
