from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import InvalidInputError
from .datetime_utils import parse_iso_date


def require_date(value, field_name: str) -> date:
    """Normalize a calendar date argument.

    Accepts ``date``, ``datetime`` (time part dropped) or an ISO ``YYYY-MM-DD`` string.
    """

    if value is None:
        raise InvalidInputError(f"{field_name} is required")
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_iso_date(value.strip())
    raise InvalidInputError(f"{field_name} must be a date, got {type(value).__name__}")


def require_date_range(start, end, *, start_name: str = "start", end_name: str = "end") -> tuple[date, date]:
    start_d = require_date(start, start_name)
    end_d = require_date(end, end_name)
    if end_d < start_d:
        raise InvalidInputError(f"{end_name} must be >= {start_name}")
    return start_d, end_d


def require_non_empty(value: str, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidInputError(f"{field_name} is required")
    return str(value).strip()
