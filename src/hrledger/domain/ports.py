"""ReportingDataSource contract: the storage calls the reporting core depends on."""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Sequence

from hrledger.domain.records import (
    AttendanceLike, ContractLike, CostLike, EmployeeLike, MonthlyRevenueLike, RateLike,
)


class ReportingDataSource(ABC):
    """Read-only access to everything a report computation needs."""

    @abstractmethod
    def list_employees(self) -> Sequence[EmployeeLike]:
        """All employees, ordered by name."""

    @abstractmethod
    def list_attendance_exceptions(
        self, employee_id: int, period_start: date, period_end: date,
    ) -> Sequence[AttendanceLike]:
        """Sick and vacation rows of one employee within the inclusive period."""

    @abstractmethod
    def list_currency_rates(self) -> Sequence[RateLike]:
        """The full directional rate table."""

    @abstractmethod
    def list_consultant_contracts(self) -> Sequence[ContractLike]:
        """All contracts, active or not."""

    @abstractmethod
    def list_ad_revenue(self, year: int | None = None) -> Sequence[MonthlyRevenueLike]:
        """Ad revenue rows, optionally restricted to one year."""

    @abstractmethod
    def list_iap_revenue(self, year: int | None = None) -> Sequence[MonthlyRevenueLike]:
        """In-app-purchase revenue rows, optionally restricted to one year."""

    @abstractmethod
    def list_costs(self) -> Sequence[CostLike]:
        """All cost rows, recurring and one-time."""
