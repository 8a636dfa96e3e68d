"""Employee use-case service. Owns ORM→DTO mapping; routers never see ORM objects."""
from __future__ import annotations
from datetime import date
from hrledger.domain.calendar import month_bounds
from hrledger.infra.db.uow import UnitOfWork
from hrledger.infra.db.repositories.attendance_repository import AttendanceRepository
from hrledger.infra.db.repositories.employee_repository import EmployeeRepository
from hrledger.api.schemas.attendance import AttendanceList, AttendanceRead
from hrledger.api.schemas.employees import EmployeeCreate, EmployeeList, EmployeeRead, EmployeeUpdate
from hrledger.services.common import get_employee_or_404


def parse_month(value: str) -> tuple[int, int]:
    """``"YYYY-MM"`` → ``(year, month)``; raises ValueError otherwise."""
    parsed = date.fromisoformat(f"{value}-01")
    return parsed.year, parsed.month


class EmployeesService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def list_employees(self) -> EmployeeList:
        employees = EmployeeRepository(self._uow.session).list_all()
        return EmployeeList(
            items=[EmployeeRead.model_validate(e) for e in employees],
            total=len(employees),
        )

    def get_employee(self, employee_id: int) -> EmployeeRead:
        return EmployeeRead.model_validate(get_employee_or_404(self._uow.session, employee_id))

    def create_employee(self, payload: EmployeeCreate) -> EmployeeRead:
        employee = EmployeeRepository(self._uow.session).create(**payload.model_dump())
        self._uow.commit()
        return EmployeeRead.model_validate(employee)

    def update_employee(self, employee_id: int, payload: EmployeeUpdate) -> EmployeeRead:
        employee = get_employee_or_404(self._uow.session, employee_id)
        changes = payload.model_dump(exclude_unset=True, exclude_none=True)
        if changes:
            EmployeeRepository(self._uow.session).update(employee, **changes)
            self._uow.commit()
        return EmployeeRead.model_validate(employee)

    def delete_employee(self, employee_id: int) -> None:
        employee = get_employee_or_404(self._uow.session, employee_id)
        EmployeeRepository(self._uow.session).delete(employee)
        self._uow.commit()

    def list_attendance(self, employee_id: int, month: str | None = None) -> AttendanceList:
        """All stored rows (newest first), or one ``YYYY-MM`` month in date order."""
        get_employee_or_404(self._uow.session, employee_id)
        repo = AttendanceRepository(self._uow.session)
        if month:
            start, end = month_bounds(*parse_month(month))
            records = repo.list_in_period(employee_id, start, end)
        else:
            records = repo.list_by_employee(employee_id)
        return AttendanceList(
            items=[AttendanceRead.model_validate(r) for r in records],
            total=len(records),
        )
