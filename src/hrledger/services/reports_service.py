"""Reporting use-case service: month roll-ups, trend series, per-employee detail."""
from __future__ import annotations
from datetime import date
from typing import Mapping
from hrledger.config import settings
from hrledger.domain.aggregation import aggregate_month, series
from hrledger.domain.attendance import SmartAttendanceReport, vacation_balance
from hrledger.domain.currency import convert
from hrledger.domain.enums import Currency
from hrledger.domain.ports import ReportingDataSource
from hrledger.domain.records import EmployeeLike
from hrledger.domain.salary import compute_deduction, salary_overview
from hrledger.infra.db.data_source import SqlReportingDataSource
from hrledger.infra.db.uow import UnitOfWork
from hrledger.api.schemas.attendance import SmartAttendanceReportRead, VacationBalanceRead
from hrledger.api.schemas.reports import (
    CurrencyGroupRead, DeductionRead, EmployeeReportDetail, MonthDataRead, MonthReportRead,
    SalaryLineRead, SalaryOverviewRead, SeriesResponse,
)
from hrledger.services.attendance_service import load_smart_report
from hrledger.services.common import display_currency, get_employee_or_404


class ReportsService:
    def __init__(self, uow: UnitOfWork, source: ReportingDataSource | None = None) -> None:
        self._uow = uow
        self._source = source

    @property
    def source(self) -> ReportingDataSource:
        if self._source is None:
            self._source = SqlReportingDataSource(self._uow.session)
        return self._source

    def employee_reports(
        self, employees: list[EmployeeLike], year: int, month: int, today: date | None = None,
    ) -> dict[int, SmartAttendanceReport]:
        return {
            emp.id: load_smart_report(self.source, emp.id, year, month, today)
            for emp in employees
        }

    def month(
        self, year: int, month: int, currency: Currency | None = None, today: date | None = None,
    ) -> MonthReportRead:
        cur = display_currency(currency)
        src = self.source
        employees = list(src.list_employees())
        agg = aggregate_month(
            year, month,
            employees,
            self.employee_reports(employees, year, month, today),
            src.list_consultant_contracts(),
            src.list_ad_revenue(year),
            src.list_iap_revenue(year),
            src.list_costs(),
            cur.value,
            src.list_currency_rates(),
            strict=settings.CURRENCY_STRICT,
        )
        return MonthReportRead.model_validate(agg)

    def series(
        self,
        year: int,
        month: int,
        months: int | None = None,
        currency: Currency | None = None,
        today: date | None = None,
    ) -> SeriesResponse:
        """Trend ending at ``(year, month)``; every point uses that month's own reports."""
        cur = display_currency(currency)
        src = self.source
        employees = list(src.list_employees())
        cache: dict[tuple[int, int], Mapping[int, SmartAttendanceReport]] = {}

        def reports_for(y: int, m: int) -> Mapping[int, SmartAttendanceReport]:
            if (y, m) not in cache:
                cache[(y, m)] = self.employee_reports(employees, y, m, today)
            return cache[(y, m)]

        points = series(
            year, month, months or settings.CHART_MONTHS,
            employees,
            reports_for,
            src.list_consultant_contracts(),
            src.list_ad_revenue(),
            src.list_iap_revenue(),
            src.list_costs(),
            cur.value,
            src.list_currency_rates(),
            strict=settings.CURRENCY_STRICT,
        )
        return SeriesResponse(currency=cur, items=[MonthDataRead.model_validate(p) for p in points])

    def employee_detail(
        self,
        employee_id: int,
        year: int,
        month: int,
        currency: Currency | None = None,
        today: date | None = None,
    ) -> EmployeeReportDetail:
        cur = display_currency(currency)
        employee = get_employee_or_404(self._uow.session, employee_id)
        report = load_smart_report(self.source, employee_id, year, month, today)
        yearly = load_smart_report(self.source, employee_id, year, None, today)
        base = convert(
            employee.salary, employee.currency, cur.value, self.source.list_currency_rates(),
            strict=settings.CURRENCY_STRICT,
        )
        return EmployeeReportDetail(
            employee_id=employee.id,
            name=employee.name,
            year=year,
            month=month,
            currency=cur,
            report=SmartAttendanceReportRead.model_validate(report),
            deduction=DeductionRead.model_validate(compute_deduction(base, report)),
            vacation=VacationBalanceRead.model_validate(
                vacation_balance(yearly, year, settings.VACATION_ALLOWANCE_DAYS)
            ),
        )

    def salaries(self, currency: Currency | None = None) -> SalaryOverviewRead:
        cur = display_currency(currency)
        overview = salary_overview(
            self.source.list_employees(), cur.value, self.source.list_currency_rates(),
            strict=settings.CURRENCY_STRICT,
        )
        return SalaryOverviewRead(
            currency=cur,
            lines=[SalaryLineRead.model_validate(line) for line in overview.lines],
            total=overview.total,
            by_currency=[
                CurrencyGroupRead(currency=c, count=count, total=subtotal)
                for c, (count, subtotal) in sorted(overview.by_currency.items())
            ],
        )
