from dataclasses import dataclass
import pytest
from hrledger.domain.attendance import SmartAttendanceReport
from hrledger.domain.currency import DEFAULT_USD_BASE, build_rate_table
from hrledger.domain.salary import compute_deduction, salary_overview


@dataclass
class Emp:
    id: int
    name: str
    salary: float
    currency: str


def test_deduction_for_march_scenario():
    report = SmartAttendanceReport(workdays=21, worked=18, sick=2, vacation=1)
    result = compute_deduction(3000.0, report)
    assert result.adjusted_salary == pytest.approx(3000 * 19 / 21)
    assert result.adjusted_salary == pytest.approx(2714.2857, abs=1e-4)
    assert result.deduction_amount == pytest.approx(3000 - 3000 * 19 / 21)
    assert (result.sick_days, result.workdays) == (2, 21)


def test_quarter_of_month_sick_cuts_a_quarter():
    report = SmartAttendanceReport(workdays=20, worked=15, sick=5, vacation=0)
    result = compute_deduction(4000.0, report)
    assert result.adjusted_salary == pytest.approx(3000.0)
    assert result.deduction_amount == pytest.approx(1000.0)


def test_vacation_does_not_reduce_pay():
    report = SmartAttendanceReport(workdays=20, worked=10, sick=0, vacation=10)
    assert compute_deduction(4000.0, report).adjusted_salary == 4000.0


def test_zero_workdays_pays_full_salary():
    result = compute_deduction(2500.0, SmartAttendanceReport.empty())
    assert result.adjusted_salary == 2500.0
    assert result.deduction_amount == 0.0
    assert result.workdays == 0


def test_salary_overview_converts_and_groups():
    rates = build_rate_table(DEFAULT_USD_BASE)
    staff = [
        Emp(1, "Ada", 4000.0, "USD"),
        Emp(2, "Budi", 15_500_000.0, "IDR"),
        Emp(3, "Cia", 31_000_000.0, "IDR"),
    ]
    overview = salary_overview(staff, "USD", rates)
    assert overview.total == pytest.approx(4000 + 1000 + 2000)
    assert overview.by_currency == {"USD": (1, 4000.0), "IDR": (2, 46_500_000.0)}
    assert [line.converted for line in overview.lines] == pytest.approx([4000, 1000, 2000])


def test_sick_every_workday_pays_nothing():
    result = compute_deduction(4000.0, SmartAttendanceReport(workdays=20, worked=0, sick=20, vacation=0))
    assert result.adjusted_salary == 0
    assert result.deduction_amount == 4000.0


def test_weekend_sick_rows_can_push_salary_negative():
    # sick rows on weekends count, workdays do not
    result = compute_deduction(2000.0, SmartAttendanceReport(workdays=2, worked=0, sick=3, vacation=0))
    assert result.adjusted_salary == pytest.approx(-1000.0)
    assert result.deduction_amount == pytest.approx(3000.0)
