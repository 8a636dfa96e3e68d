"""Month roll-ups and trend series over plain in-memory records."""
from dataclasses import dataclass
import pytest
from hrledger.domain.aggregation import (
    aggregate_month, cost_applies_to_month, cost_total, income_for_month, salary_expenses, series,
)
from hrledger.domain.attendance import SmartAttendanceReport
from hrledger.domain.currency import DEFAULT_USD_BASE, build_rate_table

RATES = build_rate_table(DEFAULT_USD_BASE)


@dataclass
class Emp:
    id: int
    name: str
    salary: float
    currency: str = "USD"


@dataclass
class Contract:
    id: int
    company_name: str
    monthly_fee: float
    currency: str = "USD"
    is_active: bool = True
    vat_rate: float | None = None


@dataclass
class Revenue:
    year: int
    month: int
    amount: float
    currency: str = "USD"


@dataclass
class Cost:
    amount: float
    year: int
    month: int
    is_recurring: bool = False
    is_active: bool = True
    currency: str = "USD"


def test_recurring_cost_applies_from_start_month_on():
    rent = Cost(500.0, 2024, 1, is_recurring=True)
    assert cost_applies_to_month(rent, 2024, 1)
    assert cost_applies_to_month(rent, 2025, 6)
    assert not cost_applies_to_month(rent, 2023, 12)


def test_inactive_recurring_cost_never_applies():
    assert not cost_applies_to_month(Cost(500.0, 2024, 1, is_recurring=True, is_active=False), 2024, 3)


def test_one_time_cost_only_hits_its_month():
    laptop = Cost(1500.0, 2024, 3)
    assert cost_applies_to_month(laptop, 2024, 3)
    assert not cost_applies_to_month(laptop, 2024, 4)
    assert not cost_applies_to_month(laptop, 2025, 3)


def test_cost_total_converts_to_display_currency():
    costs = [Cost(500.0, 2024, 1, is_recurring=True), Cost(1050.0, 2024, 3, currency="SEK")]
    assert cost_total(costs, 2024, 3, "USD", RATES) == pytest.approx(600.0)


def test_income_only_counts_active_contracts():
    contracts = [Contract(1, "Acme", 2000.0), Contract(2, "Old", 900.0, is_active=False)]
    income = income_for_month(2024, 3, contracts, [], [], "USD", RATES)
    assert income.consultant == 2000.0


def test_income_takes_first_ad_entry_and_sums_iap():
    ads = [Revenue(2024, 3, 300.0), Revenue(2024, 3, 999.0), Revenue(2024, 2, 50.0)]
    iap = [Revenue(2024, 3, 100.0), Revenue(2024, 3, 1050.0, currency="SEK"), Revenue(2024, 4, 70.0)]
    income = income_for_month(2024, 3, [], ads, iap, "USD", RATES)
    assert income.ads == 300.0
    assert income.iap == pytest.approx(200.0)
    assert income.total == pytest.approx(500.0)


def test_employee_without_report_is_paid_in_full():
    staff = [Emp(1, "Ada", 3000.0), Emp(2, "Budi", 1000.0)]
    reports = {1: SmartAttendanceReport(workdays=21, worked=18, sick=2, vacation=1)}
    base, adjusted, sick = salary_expenses(staff, reports, "USD", RATES)
    assert base == 4000.0
    assert adjusted == pytest.approx(3000 * 19 / 21 + 1000)
    assert sick == 2


def test_aggregate_month_net_and_profit_flag():
    agg = aggregate_month(
        2024, 3,
        [Emp(1, "Ada", 4000.0)],
        {1: SmartAttendanceReport(workdays=20, worked=15, sick=5, vacation=0)},
        [Contract(1, "Acme", 5000.0)],
        [Revenue(2024, 3, 200.0)],
        [],
        [Cost(500.0, 2024, 1, is_recurring=True)],
        "USD",
        RATES,
    )
    assert agg.income.total == 5200.0
    assert agg.expenses.salaries == pytest.approx(3000.0)
    assert agg.expenses.salary_deduction == pytest.approx(1000.0)
    assert agg.expenses.total == pytest.approx(3500.0)
    assert agg.net == pytest.approx(1700.0)
    assert agg.is_profit


def test_aggregate_month_loss():
    agg = aggregate_month(
        2024, 3, [Emp(1, "Ada", 4000.0)], {}, [], [], [], [], "USD", RATES,
    )
    assert agg.net == -4000.0
    assert not agg.is_profit


def test_series_is_oldest_first_and_crosses_year_boundary():
    seen: list[tuple[int, int]] = []

    def reports_for(y, m):
        seen.append((y, m))
        return {}

    points = series(
        2024, 2, 6, [Emp(1, "Ada", 1000.0)], reports_for,
        [Contract(1, "Acme", 1500.0)], [], [], [Cost(100.0, 2023, 12)], "USD", RATES,
    )
    assert [(p.year, p.month) for p in points] == [
        (2023, 9), (2023, 10), (2023, 11), (2023, 12), (2024, 1), (2024, 2),
    ]
    assert [p.label for p in points] == ["Sep", "Oct", "Nov", "Dec", "Jan", "Feb"]
    assert seen == [(p.year, p.month) for p in points]
    december = points[3]
    assert december.expenses == 1100.0
    assert december.net == 400.0


def test_series_rejects_empty_window():
    with pytest.raises(ValueError):
        series(2024, 2, 0, [], lambda y, m: {}, [], [], [], [], "USD", RATES)
