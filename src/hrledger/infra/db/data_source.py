"""SQL-backed ReportingDataSource over one session."""
from __future__ import annotations
from datetime import date
from sqlmodel import Session
from hrledger.domain.ports import ReportingDataSource
from hrledger.infra.db.repositories.attendance_repository import (
    EXCEPTION_STATUSES, AttendanceRepository,
)
from hrledger.infra.db.repositories.cost_repository import CostRepository
from hrledger.infra.db.repositories.currency_repository import CurrencyRepository
from hrledger.infra.db.repositories.employee_repository import EmployeeRepository
from hrledger.infra.db.repositories.income_repository import IncomeRepository
from hrledger.models.core import AttendanceRecord, CurrencyRate, Employee
from hrledger.models.finance import AdRevenue, ConsultantContract, Cost, IapRevenue


class SqlReportingDataSource(ReportingDataSource):
    def __init__(self, session: Session) -> None:
        self._s = session

    def list_employees(self) -> list[Employee]:
        return EmployeeRepository(self._s).list_all()

    def list_attendance_exceptions(
        self, employee_id: int, period_start: date, period_end: date,
    ) -> list[AttendanceRecord]:
        return AttendanceRepository(self._s).list_in_period(
            employee_id, period_start, period_end, statuses=EXCEPTION_STATUSES,
        )

    def list_currency_rates(self) -> list[CurrencyRate]:
        return CurrencyRepository(self._s).list_all()

    def list_consultant_contracts(self) -> list[ConsultantContract]:
        return IncomeRepository(self._s).list_contracts()

    def list_ad_revenue(self, year: int | None = None) -> list[AdRevenue]:
        return IncomeRepository(self._s).list_ad_revenue(year)

    def list_iap_revenue(self, year: int | None = None) -> list[IapRevenue]:
        return IncomeRepository(self._s).list_iap_revenue(year)

    def list_costs(self) -> list[Cost]:
        return CostRepository(self._s).list_all()
