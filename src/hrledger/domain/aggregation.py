"""Income vs. expense roll-ups for a month, and month-over-month series.

Every month is computed independently from its own inputs; nothing carries over
between points of a series.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Sequence

from hrledger.domain.attendance import SmartAttendanceReport
from hrledger.domain.calendar import month_index, shift_month
from hrledger.domain.currency import code, convert
from hrledger.domain.records import (
    ContractLike, CostLike, EmployeeLike, MonthlyRevenueLike, RateLike,
)
from hrledger.domain.salary import compute_deduction

MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


@dataclass(frozen=True, slots=True)
class IncomeBreakdown:
    consultant: float
    ads: float
    iap: float

    @property
    def total(self) -> float:
        return self.consultant + self.ads + self.iap


@dataclass(frozen=True, slots=True)
class ExpenseBreakdown:
    salaries_base: float
    salaries: float
    sick_days: int
    costs: float

    @property
    def salary_deduction(self) -> float:
        return self.salaries_base - self.salaries

    @property
    def total(self) -> float:
        return self.salaries + self.costs


@dataclass(frozen=True, slots=True)
class MonthAggregate:
    year: int
    month: int
    currency: str
    income: IncomeBreakdown
    expenses: ExpenseBreakdown

    @property
    def net(self) -> float:
        return self.income.total - self.expenses.total

    @property
    def is_profit(self) -> bool:
        return self.net >= 0


@dataclass(frozen=True, slots=True)
class MonthData:
    year: int
    month: int
    label: str
    income: float
    expenses: float

    @property
    def net(self) -> float:
        return self.income - self.expenses


def cost_applies_to_month(cost: CostLike, year: int, month: int) -> bool:
    """One-time costs hit their own month; active recurring costs every month from their start on."""
    if cost.is_recurring:
        return bool(cost.is_active) and month_index(cost.year, cost.month) <= month_index(year, month)
    return cost.year == year and cost.month == month


def cost_total(
    costs: Iterable[CostLike], year: int, month: int, currency: str,
    rates: Sequence[RateLike], *, strict: bool = False,
) -> float:
    return sum(
        (convert(c.amount, c.currency, currency, rates, strict=strict)
         for c in costs if cost_applies_to_month(c, year, month)),
        0.0,
    )


def income_for_month(
    year: int,
    month: int,
    contracts: Iterable[ContractLike],
    ad_entries: Iterable[MonthlyRevenueLike],
    iap_entries: Iterable[MonthlyRevenueLike],
    currency: str,
    rates: Sequence[RateLike],
    *,
    strict: bool = False,
) -> IncomeBreakdown:
    consultant = sum(
        (convert(c.monthly_fee, c.currency, currency, rates, strict=strict)
         for c in contracts if c.is_active),
        0.0,
    )

    ads = 0.0
    ad = next((e for e in ad_entries if e.year == year and e.month == month), None)
    if ad is not None:
        ads = convert(ad.amount, ad.currency, currency, rates, strict=strict)

    iap = sum(
        (convert(e.amount, e.currency, currency, rates, strict=strict)
         for e in iap_entries if e.year == year and e.month == month),
        0.0,
    )
    return IncomeBreakdown(consultant=consultant, ads=ads, iap=iap)


def salary_expenses(
    employees: Iterable[EmployeeLike],
    reports: Mapping[int, SmartAttendanceReport],
    currency: str,
    rates: Sequence[RateLike],
    *,
    strict: bool = False,
) -> tuple[float, float, int]:
    """Return ``(base total, adjusted total, sick days)`` in ``currency``.

    An employee without a report for the period is paid the full base salary.
    """
    base_total = adjusted_total = 0.0
    sick_days = 0
    for emp in employees:
        base = convert(emp.salary, emp.currency, currency, rates, strict=strict)
        report = reports.get(emp.id)
        base_total += base
        if report is None:
            adjusted_total += base
            continue
        deduction = compute_deduction(base, report)
        adjusted_total += deduction.adjusted_salary
        sick_days += deduction.sick_days
    return base_total, adjusted_total, sick_days


def aggregate_month(
    year: int,
    month: int,
    employees: Sequence[EmployeeLike],
    reports: Mapping[int, SmartAttendanceReport],
    contracts: Sequence[ContractLike],
    ad_entries: Sequence[MonthlyRevenueLike],
    iap_entries: Sequence[MonthlyRevenueLike],
    cost_entries: Sequence[CostLike],
    display_currency: str,
    rates: Sequence[RateLike],
    *,
    strict: bool = False,
) -> MonthAggregate:
    currency = code(display_currency)
    income = income_for_month(
        year, month, contracts, ad_entries, iap_entries, currency, rates, strict=strict,
    )
    base, adjusted, sick_days = salary_expenses(employees, reports, currency, rates, strict=strict)
    costs = cost_total(cost_entries, year, month, currency, rates, strict=strict)
    return MonthAggregate(
        year=year,
        month=month,
        currency=currency,
        income=income,
        expenses=ExpenseBreakdown(
            salaries_base=base, salaries=adjusted, sick_days=sick_days, costs=costs,
        ),
    )


def series(
    end_year: int,
    end_month: int,
    months: int,
    employees: Sequence[EmployeeLike],
    reports_for: Callable[[int, int], Mapping[int, SmartAttendanceReport]],
    contracts: Sequence[ContractLike],
    ad_entries: Sequence[MonthlyRevenueLike],
    iap_entries: Sequence[MonthlyRevenueLike],
    cost_entries: Sequence[CostLike],
    display_currency: str,
    rates: Sequence[RateLike],
    *,
    strict: bool = False,
) -> list[MonthData]:
    """``months`` consecutive points ending at ``(end_year, end_month)``, oldest first.

    ``reports_for(year, month)`` supplies that month's per-employee reports.
    """
    if months < 1:
        raise ValueError("months must be >= 1")

    points: list[MonthData] = []
    for back in range(months - 1, -1, -1):
        year, month = shift_month(end_year, end_month, -back)
        agg = aggregate_month(
            year, month, employees, reports_for(year, month), contracts,
            ad_entries, iap_entries, cost_entries, display_currency, rates, strict=strict,
        )
        points.append(MonthData(
            year=year,
            month=month,
            label=MONTH_ABBR[month - 1],
            income=agg.income.total,
            expenses=agg.expenses.total,
        ))
    return points
