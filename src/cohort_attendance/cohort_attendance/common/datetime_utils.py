from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.exceptions import InvalidInputError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid date (YYYY-MM-DD): {value!r}")


def parse_iso_month(value: str) -> date:
    """Parse YYYY-MM string into the first day of that month."""
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except (TypeError, ValueError):
        raise InvalidInputError(f"Invalid month (YYYY-MM): {value!r}")


def month_bounds(day: date) -> tuple[date, date]:
    """First and last calendar day of the month containing ``day``."""
    last = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def years_before(day: date, years: int) -> date:
    """Same calendar day ``years`` earlier; Feb-29 maps to Feb-28 in non-leap years."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()
