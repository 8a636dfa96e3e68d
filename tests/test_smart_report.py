"""Smart attendance report: weekday defaults plus stored sick/vacation rows."""
from dataclasses import dataclass
from datetime import date
from hrledger.domain.attendance import (
    SmartAttendanceReport, compute_smart_report, smart_report_for, summarize_records,
    vacation_balance,
)
from hrledger.domain.enums import AttendanceStatus


@dataclass
class Row:
    employee_id: int
    date: date
    status: AttendanceStatus


MARCH_START, MARCH_END = date(2024, 3, 1), date(2024, 3, 31)


def _march_rows():
    return [
        Row(1, date(2024, 3, 5), AttendanceStatus.SICK),
        Row(1, date(2024, 3, 6), AttendanceStatus.SICK),
        Row(1, date(2024, 3, 20), AttendanceStatus.VACATION),
    ]


def test_full_past_month():
    report = compute_smart_report(1, MARCH_START, MARCH_END, _march_rows(), today=date(2024, 6, 1))
    assert report == SmartAttendanceReport(workdays=21, worked=18, sick=2, vacation=1)


def test_period_in_the_future_is_all_zero():
    report = compute_smart_report(1, MARCH_START, MARCH_END, _march_rows(), today=date(2024, 2, 29))
    assert report == SmartAttendanceReport.empty()


def test_current_month_workdays_stop_at_today():
    # Fri 1st through Fri 15th: 11 weekdays.
    report = compute_smart_report(1, MARCH_START, MARCH_END, [], today=date(2024, 3, 15))
    assert report.workdays == 11
    assert report.worked == 11


def test_future_dated_exceptions_still_count():
    report = compute_smart_report(1, MARCH_START, MARCH_END, _march_rows(), today=date(2024, 3, 10))
    # 1st..10th holds 6 weekdays; the vacation on the 20th is still counted.
    assert report.workdays == 6
    assert report.vacation == 1
    assert report.worked == 6 - 2 - 1


def test_other_employees_and_worked_rows_are_ignored():
    rows = _march_rows() + [
        Row(2, date(2024, 3, 7), AttendanceStatus.SICK),
        Row(1, date(2024, 3, 8), AttendanceStatus.WORKED),
        Row(1, date(2024, 4, 2), AttendanceStatus.SICK),
    ]
    report = compute_smart_report(1, MARCH_START, MARCH_END, rows, today=date(2024, 6, 1))
    assert (report.sick, report.vacation) == (2, 1)


def test_worked_never_goes_negative():
    # Two weekdays, three sick rows (one on the weekend).
    rows = [
        Row(1, date(2024, 3, 1), AttendanceStatus.SICK),
        Row(1, date(2024, 3, 2), AttendanceStatus.SICK),
        Row(1, date(2024, 3, 4), AttendanceStatus.SICK),
    ]
    report = compute_smart_report(1, date(2024, 3, 1), date(2024, 3, 4), rows, today=date(2024, 6, 1))
    assert report.workdays == 2
    assert report.worked == 0


def test_smart_report_for_year_variant():
    report = smart_report_for(1, 2023, None, [], today=date(2024, 1, 1))
    assert report.workdays == 260


def test_summarize_records_counts_stored_rows_only():
    rows = _march_rows() + [Row(1, date(2024, 3, 8), AttendanceStatus.WORKED)]
    summary = summarize_records(rows)
    assert (summary.worked, summary.sick, summary.vacation, summary.total) == (1, 2, 1, 4)


def test_vacation_balance_can_be_overdrawn():
    yearly = SmartAttendanceReport(workdays=200, worked=184, sick=0, vacation=16)
    balance = vacation_balance(yearly, 2024, 14)
    assert balance.used == 16
    assert balance.remaining == -2
