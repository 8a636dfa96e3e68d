"""Pro-rata salary deduction for sick days, and salary totals per currency."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from hrledger.domain.attendance import SmartAttendanceReport
from hrledger.domain.currency import code, convert
from hrledger.domain.records import EmployeeLike, RateLike


@dataclass(frozen=True, slots=True)
class DeductionResult:
    base_salary: float
    adjusted_salary: float
    deduction_amount: float
    sick_days: int
    workdays: int


def compute_deduction(base_salary: float, report: SmartAttendanceReport) -> DeductionResult:
    """adjusted = base * (workdays - sick) / workdays.

    Vacation is paid leave and never reduces pay. ``base_salary`` is expected
    to be converted to the reporting currency already. Sick rows on weekends
    still count, so ``sick`` may exceed ``workdays``; the ratio is not clamped
    and the adjusted salary then goes negative.
    """
    if report.workdays == 0:
        return DeductionResult(
            base_salary=base_salary,
            adjusted_salary=base_salary,
            deduction_amount=0.0,
            sick_days=report.sick,
            workdays=0,
        )

    ratio = (report.workdays - report.sick) / report.workdays
    adjusted = base_salary * ratio
    return DeductionResult(
        base_salary=base_salary,
        adjusted_salary=adjusted,
        deduction_amount=base_salary - adjusted,
        sick_days=report.sick,
        workdays=report.workdays,
    )


@dataclass(frozen=True, slots=True)
class SalaryLine:
    employee_id: int
    name: str
    salary: float
    currency: str
    converted: float


@dataclass(frozen=True, slots=True)
class SalaryOverview:
    currency: str
    lines: list[SalaryLine]
    total: float
    # native currency -> (head count, sum in that currency)
    by_currency: dict[str, tuple[int, float]]


def salary_overview(
    employees: Iterable[EmployeeLike],
    display_currency: str,
    rates: Sequence[RateLike],
    *,
    strict: bool = False,
) -> SalaryOverview:
    currency = code(display_currency)
    lines: list[SalaryLine] = []
    groups: dict[str, tuple[int, float]] = {}
    for emp in employees:
        native = code(emp.currency)
        lines.append(SalaryLine(
            employee_id=emp.id,
            name=emp.name,
            salary=emp.salary,
            currency=native,
            converted=convert(emp.salary, native, currency, rates, strict=strict),
        ))
        count, subtotal = groups.get(native, (0, 0.0))
        groups[native] = (count + 1, subtotal + emp.salary)
    return SalaryOverview(
        currency=currency,
        lines=lines,
        total=sum((line.converted for line in lines), 0.0),
        by_currency=groups,
    )
