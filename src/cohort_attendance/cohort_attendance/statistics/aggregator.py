"""Pure attendance aggregations.

Every function here works on records already fetched in bulk, so the cost is
linear in the number of records regardless of how many members or days they
cover. Rounding is half-up on exact integer arithmetic.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import month_bounds
from ..common.validators import require_date
from ..core.constants import PERCENT_SCALE, PFI_STAGE_LEVELS
from ..core.enums import PfiStage
from ..core.exceptions import InvalidInputError
from ..members.model import Member
from .model import DailyCount, MonthlySummary, PeakDay, StageShare, TodaySnapshot


def rounded_ratio(numerator: int, denominator: int) -> int:
    """round(numerator / denominator) with halves rounded up; 0 when denominator is 0."""
    if denominator <= 0:
        return 0
    if numerator < 0:
        raise InvalidInputError("numerator must be >= 0")
    return (2 * numerator + denominator) // (2 * denominator)


def daily_counts(records: Iterable[AttendanceRecord]) -> list[DailyCount]:
    """Present and recorded counts per date that has at least one explicit record, oldest first."""
    present: dict[date, int] = {}
    recorded: dict[date, int] = {}
    for r in records:
        recorded[r.attendance_date] = recorded.get(r.attendance_date, 0) + 1
        present.setdefault(r.attendance_date, 0)
        if r.present:
            present[r.attendance_date] += 1

    return [DailyCount(day=d, present=present[d], recorded=recorded[d]) for d in sorted(recorded)]


def present_on(records: Iterable[AttendanceRecord], day: date) -> int:
    return sum(1 for r in records if r.attendance_date == day and r.present)


def average_present(counts: Sequence[DailyCount]) -> int:
    """Mean present count over recorded dates; dates without records are not in the denominator."""
    return rounded_ratio(sum(c.present for c in counts), len(counts))


def peak(counts: Iterable[DailyCount]) -> PeakDay:
    best: Optional[DailyCount] = None
    for c in counts:
        if best is None or c.present > best.present or (c.present == best.present and c.day < best.day):
            best = c
    if best is None:
        return PeakDay()
    return PeakDay(count=best.present, day=best.day)


def summarize_month(records: Iterable[AttendanceRecord], month) -> MonthlySummary:
    """Monthly average, maximum and recorded-day count for the month containing ``month``."""
    first, last = month_bounds(require_date(month, "month"))
    counts = [c for c in daily_counts(records) if first <= c.day <= last]
    return MonthlySummary(
        month=first,
        average=average_present(counts),
        peak=peak(counts),
        days_with_records=len(counts),
    )


def snapshot(day, *, total: int, present: int) -> TodaySnapshot:
    if total < 0 or present < 0:
        raise InvalidInputError("counts must be >= 0")
    if present > total:
        raise InvalidInputError(f"present ({present}) exceeds cohort total ({total})")
    return TodaySnapshot(
        day=require_date(day, "day"),
        total=total,
        present=present,
        absent=total - present,
        percentage=rounded_ratio(present * PERCENT_SCALE, total),
    )


def pfi_distribution(members: Sequence[Member]) -> dict[PfiStage, StageShare]:
    """Members per formation stage; percentages are of the whole roster."""
    stage_of_level = {
        level.lower(): PfiStage(stage) for stage, levels in PFI_STAGE_LEVELS.items() for level in levels
    }
    counts: dict[PfiStage, int] = {s: 0 for s in PfiStage}
    for m in members:
        stage = stage_of_level.get((m.pfi_level or "").strip().lower())
        if stage:
            counts[stage] += 1

    total = len(members)
    return {s: StageShare(count=c, percentage=rounded_ratio(c * PERCENT_SCALE, total)) for s, c in counts.items()}
