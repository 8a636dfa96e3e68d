"""Repository for Employee records. No business logic; caller owns the transaction."""
from __future__ import annotations
from typing import Any
from sqlalchemy import delete
from sqlmodel import Session, select
from hrledger.models.core import AttendanceRecord, Employee
from hrledger.models.finance import ContractEmployeeLink


class EmployeeRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, employee_id: int) -> Employee | None:
        return self._s.get(Employee, employee_id)

    def list_all(self) -> list[Employee]:
        return list(self._s.exec(select(Employee).order_by(Employee.name)).all())

    def create(self, **fields: Any) -> Employee:
        employee = Employee(**fields)
        self._s.add(employee)
        self._s.flush()
        return employee

    def update(self, employee: Employee, **changes: Any) -> Employee:
        for key, value in changes.items():
            setattr(employee, key, value)
        self._s.add(employee)
        self._s.flush()
        return employee

    def delete(self, employee: Employee) -> None:
        """Remove the employee together with its attendance rows and contract links."""
        self._s.exec(delete(AttendanceRecord).where(AttendanceRecord.employee_id == employee.id))
        self._s.exec(delete(ContractEmployeeLink).where(ContractEmployeeLink.employee_id == employee.id))
        self._s.delete(employee)
        self._s.flush()
