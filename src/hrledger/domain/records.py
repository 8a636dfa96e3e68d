"""Structural shapes the pure core reads.

Both the SQLModel rows and plain test doubles satisfy these protocols, so the
core never imports the ORM.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


@runtime_checkable
class RateLike(Protocol):
    from_curr: str
    to_curr: str
    rate: float


@runtime_checkable
class EmployeeLike(Protocol):
    id: int
    name: str
    salary: float
    currency: str


@runtime_checkable
class AttendanceLike(Protocol):
    employee_id: int
    date: date
    status: str


@runtime_checkable
class ContractLike(Protocol):
    id: int
    company_name: str
    monthly_fee: float
    currency: str
    is_active: bool
    vat_rate: float | None


@runtime_checkable
class MonthlyRevenueLike(Protocol):
    year: int
    month: int
    amount: float
    currency: str


@runtime_checkable
class CostLike(Protocol):
    amount: float
    currency: str
    year: int
    month: int
    is_recurring: bool
    is_active: bool
