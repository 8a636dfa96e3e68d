"""Small helpers shared by the use-case services."""
from __future__ import annotations
from sqlmodel import Session
from hrledger.config import settings
from hrledger.domain.enums import Currency
from hrledger.domain.exceptions import NotFoundError
from hrledger.infra.db.repositories.employee_repository import EmployeeRepository
from hrledger.models.core import Employee


def display_currency(currency: Currency | str | None) -> Currency:
    return Currency(currency or settings.DEFAULT_DISPLAY_CURRENCY)


def get_employee_or_404(session: Session, employee_id: int) -> Employee:
    employee = EmployeeRepository(session).get_by_id(employee_id)
    if employee is None:
        raise NotFoundError(f"Employee {employee_id} not found")
    return employee
