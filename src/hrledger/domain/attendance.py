"""Attendance reports built from sparse exception records.

Only deviations from the default are stored: an unmarked weekday counts as
worked, an unmarked weekend counts as nothing. The smart report rebuilds the
full picture from the weekday count and the stored sick/vacation rows.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from hrledger.domain.calendar import as_date, count_weekdays, period_bounds
from hrledger.domain.enums import AttendanceStatus
from hrledger.domain.records import AttendanceLike


@dataclass(frozen=True, slots=True)
class SmartAttendanceReport:
    workdays: int
    worked: int
    sick: int
    vacation: int

    @classmethod
    def empty(cls) -> "SmartAttendanceReport":
        return cls(workdays=0, worked=0, sick=0, vacation=0)


@dataclass(frozen=True, slots=True)
class AttendanceReport:
    """Counts of explicitly stored rows only (no smart defaults)."""

    worked: int
    sick: int
    vacation: int
    total: int


@dataclass(frozen=True, slots=True)
class VacationBalance:
    allowance: int
    used: int
    remaining: int
    year: int


def compute_smart_report(
    employee_id: int,
    period_start: date,
    period_end: date,
    exceptions: Iterable[AttendanceLike],
    *,
    today: date | None = None,
) -> SmartAttendanceReport:
    """Derive ``{workdays, worked, sick, vacation}`` for one employee and period.

    ``workdays`` stops at ``today``; a period starting after today is all zeros.
    Exceptions are matched on their stored date against the unclipped period,
    and rows for other employees or with a ``worked`` status are ignored.
    """
    start, end = as_date(period_start), as_date(period_end)
    today = today or date.today()
    if start > today:
        return SmartAttendanceReport.empty()

    workdays = count_weekdays(start, min(end, today))

    sick = vacation = 0
    for record in exceptions:
        if record.employee_id != employee_id:
            continue
        if not start <= as_date(record.date) <= end:
            continue
        if record.status == AttendanceStatus.SICK:
            sick += 1
        elif record.status == AttendanceStatus.VACATION:
            vacation += 1

    # Sick/vacation rows on weekends can exceed the weekday count.
    worked = max(0, workdays - sick - vacation)
    return SmartAttendanceReport(workdays=workdays, worked=worked, sick=sick, vacation=vacation)


def smart_report_for(
    employee_id: int,
    year: int,
    month: int | None,
    exceptions: Iterable[AttendanceLike],
    *,
    today: date | None = None,
) -> SmartAttendanceReport:
    """Month variant when ``month`` is given, year variant otherwise."""
    start, end = period_bounds(year, month)
    return compute_smart_report(employee_id, start, end, exceptions, today=today)


def summarize_records(records: Iterable[AttendanceLike]) -> AttendanceReport:
    worked = sick = vacation = total = 0
    for record in records:
        total += 1
        if record.status == AttendanceStatus.WORKED:
            worked += 1
        elif record.status == AttendanceStatus.SICK:
            sick += 1
        elif record.status == AttendanceStatus.VACATION:
            vacation += 1
    return AttendanceReport(worked=worked, sick=sick, vacation=vacation, total=total)


def vacation_balance(yearly: SmartAttendanceReport, year: int, allowance: int) -> VacationBalance:
    """Remaining paid-leave days; goes negative when the allowance is overdrawn."""
    return VacationBalance(
        allowance=allowance,
        used=yearly.vacation,
        remaining=allowance - yearly.vacation,
        year=year,
    )
