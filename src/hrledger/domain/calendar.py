"""Date helpers: weekday counting and month/year period arithmetic."""
from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta


def as_date(value: date | datetime | str) -> date:
    """Coerce a date, datetime or ISO ``YYYY-MM-DD`` string to a ``date``.

    Anything else is a programming error and raises.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise TypeError(f"Expected a date or ISO date string, got {type(value).__name__}")


def is_weekday(day: date) -> bool:
    return day.isoweekday() <= 5


def count_weekdays(start: date | datetime | str, end: date | datetime | str) -> int:
    """Count Monday-Friday dates in the inclusive range ``[start, end]``."""
    current, last = as_date(start), as_date(end)
    count = 0
    while current <= last:
        if is_weekday(current):
            count += 1
        current += timedelta(days=1)
    return count


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")


def month_bounds(year: int, month: int) -> tuple[date, date]:
    _check_month(month)
    return date(year, month, 1), date(year, month, calendar.monthrange(year, month)[1])


def period_bounds(year: int, month: int | None = None) -> tuple[date, date]:
    """Calendar month when ``month`` is given, otherwise the whole calendar year."""
    if month is None:
        return date(year, 1, 1), date(year, 12, 31)
    return month_bounds(year, month)


def month_index(year: int, month: int) -> int:
    """Monotonic month number, used to compare (year, month) pairs."""
    return year * 12 + month


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move ``delta`` months forward (or backward when negative)."""
    _check_month(month)
    zero_based = year * 12 + (month - 1) + delta
    return zero_based // 12, zero_based % 12 + 1


def day_in_month(year: int, month: int, day: int) -> date:
    """``date(year, month, day)`` with ``day`` clamped to the month's length."""
    _check_month(month)
    return date(year, month, min(day, calendar.monthrange(year, month)[1]))
