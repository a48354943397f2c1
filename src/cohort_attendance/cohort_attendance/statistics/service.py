from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..attendance.service import AttendanceLedger
from ..cohorts.registry import CohortRegistry
from ..common.datetime_utils import month_bounds, parse_iso_month
from ..common.validators import require_date
from ..core.constants import DEFAULT_UPCOMING_BIRTHDAY_DAYS
from ..members.service import MemberService, upcoming_birthdays
from . import aggregator
from .model import CohortReport, MonthlySummary, PeakDay, TodaySnapshot

logger = logging.getLogger(__name__)


def _require_month(value) -> date:
    if isinstance(value, str) and len(value.strip()) == 7:
        return parse_iso_month(value.strip())
    return require_date(value, "month")


class StatisticsService:
    """Use case: attendance statistics for one cohort.

    The acting cohort is always an explicit argument. Each call reads the roster
    once and the ledger through range queries only.
    """

    def __init__(
        self,
        ledger: AttendanceLedger,
        members: MemberService,
        registry: CohortRegistry,
        *,
        birthday_days: int = DEFAULT_UPCOMING_BIRTHDAY_DAYS,
    ):
        self._ledger = ledger
        self._members = members
        self._registry = registry
        self._birthday_days = int(birthday_days)

    def today_snapshot(self, cohort_id: str, *, today) -> TodaySnapshot:
        today = require_date(today, "today")
        ids = self._roster_ids(cohort_id, today)
        records = self._ledger.records_in_range(ids, today, today)
        return aggregator.snapshot(today, total=len(ids), present=aggregator.present_on(records, today))

    def monthly_summary(self, cohort_id: str, *, month, as_of) -> MonthlySummary:
        month = _require_month(month)
        ids = self._roster_ids(cohort_id, require_date(as_of, "as_of"))
        first, last = month_bounds(month)
        return aggregator.summarize_month(self._ledger.records_in_range(ids, first, last), first)

    def historical_peak(self, cohort_id: str, *, as_of) -> PeakDay:
        ids = self._roster_ids(cohort_id, require_date(as_of, "as_of"))
        return aggregator.peak(aggregator.daily_counts(self._ledger.all_records(ids)))

    def cohort_report(self, cohort_id: str, *, today, month: Optional[object] = None) -> CohortReport:
        today = require_date(today, "today")
        month_day = _require_month(month) if month is not None else today
        profile = self._registry.get(cohort_id)

        roster = self._members.roster(cohort_id, as_of=today)
        ids = {m.member_id for m in roster}

        today_records = self._ledger.records_in_range(ids, today, today)
        first, last = month_bounds(month_day)
        month_records = self._ledger.records_in_range(ids, first, last)
        history = self._ledger.all_records(ids)

        report = CohortReport(
            cohort_id=cohort_id,
            today=aggregator.snapshot(today, total=len(ids), present=aggregator.present_on(today_records, today)),
            month=aggregator.summarize_month(month_records, first),
            historical_peak=aggregator.peak(aggregator.daily_counts(history)),
            upcoming_birthdays=upcoming_birthdays(roster, today=today, days=self._birthday_days),
            pfi_distribution=aggregator.pfi_distribution(roster) if profile.show_pfi else None,
        )
        logger.info(
            "Report %s on %s: %d/%d present, month avg %d, record %d",
            cohort_id,
            today,
            report.today.present,
            report.today.total,
            report.month.average,
            report.historical_peak.count,
        )
        return report

    def _roster_ids(self, cohort_id: str, as_of: date) -> set[str]:
        return {m.member_id for m in self._members.roster(cohort_id, as_of=as_of)}
