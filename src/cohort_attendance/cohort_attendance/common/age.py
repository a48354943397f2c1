"""Age calculation in completed years.

All functions work on calendar dates only. A birth date of Feb-29 completes
its year on Mar-1 in non-leap years, which falls out of the tuple comparison
below because (2, 28) < (2, 29) < (3, 1).
"""

from __future__ import annotations

from datetime import date, timedelta

from ..core.exceptions import InvalidInputError
from .datetime_utils import years_before
from .validators import require_date


def age_in_years(birth_date, as_of) -> int:
    birth = require_date(birth_date, "birth_date")
    ref = require_date(as_of, "as_of")
    if ref < birth:
        raise InvalidInputError("birth_date is after the reference date")

    age = ref.year - birth.year
    if (ref.month, ref.day) < (birth.month, birth.day):
        age -= 1
    return age


def birth_window(min_age: int, max_age: int, as_of) -> tuple[date, date]:
    """Inclusive (earliest, latest) birth dates whose age as of ``as_of`` is in [min_age, max_age]."""

    ref = require_date(as_of, "as_of")
    if min_age < 0 or max_age < min_age:
        raise InvalidInputError(f"Invalid age interval [{min_age}, {max_age}]")

    latest = years_before(ref, min_age)
    earliest = years_before(ref, max_age + 1) + timedelta(days=1)
    return earliest, latest


def birthday_in_year(birth_date: date, year: int) -> date:
    try:
        return birth_date.replace(year=year)
    except ValueError:
        # Feb-29 outside a leap year
        return date(year, 3, 1)


def next_birthday(birth_date, as_of) -> date:
    """First birthday on or after ``as_of``."""

    birth = require_date(birth_date, "birth_date")
    ref = require_date(as_of, "as_of")
    candidate = birthday_in_year(birth, ref.year)
    if candidate < ref:
        candidate = birthday_in_year(birth, ref.year + 1)
    return candidate
