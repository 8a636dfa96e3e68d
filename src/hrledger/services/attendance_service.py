"""Attendance use-case service: stored exceptions, daily roster and reports."""
from __future__ import annotations
from datetime import date
from hrledger.config import settings
from hrledger.domain.attendance import (
    SmartAttendanceReport, smart_report_for, summarize_records, vacation_balance,
)
from hrledger.domain.calendar import period_bounds
from hrledger.domain.exceptions import NotFoundError
from hrledger.domain.ports import ReportingDataSource
from hrledger.infra.db.data_source import SqlReportingDataSource
from hrledger.infra.db.uow import UnitOfWork
from hrledger.infra.db.repositories.attendance_repository import AttendanceRepository
from hrledger.infra.db.repositories.employee_repository import EmployeeRepository
from hrledger.api.schemas.attendance import (
    AttendanceRead, AttendanceReportRead, AttendanceSet, BulkAttendanceEntry,
    DailyAttendanceEntry, DailyAttendanceList, SmartAttendanceReportRead, VacationBalanceRead,
)
from hrledger.services.common import get_employee_or_404


def load_smart_report(
    source: ReportingDataSource,
    employee_id: int,
    year: int,
    month: int | None,
    today: date | None = None,
) -> SmartAttendanceReport:
    """Fetch one employee's exceptions for the period and derive the smart report."""
    start, end = period_bounds(year, month)
    exceptions = source.list_attendance_exceptions(employee_id, start, end)
    return smart_report_for(employee_id, year, month, exceptions, today=today)


class AttendanceService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def set_attendance(self, payload: AttendanceSet) -> AttendanceRead:
        get_employee_or_404(self._uow.session, payload.employee_id)
        record = AttendanceRepository(self._uow.session).upsert(
            employee_id=payload.employee_id,
            day=payload.date,
            status=payload.status,
            notes=payload.notes or None,
        )
        self._uow.commit()
        return AttendanceRead.model_validate(record)

    def delete_attendance(self, record_id: int) -> None:
        repo = AttendanceRepository(self._uow.session)
        record = repo.get_by_id(record_id)
        if record is None:
            raise NotFoundError(f"Attendance record {record_id} not found")
        repo.delete(record)
        self._uow.commit()

    def delete_for_day(self, employee_id: int, day: date) -> None:
        repo = AttendanceRepository(self._uow.session)
        record = repo.get_by_employee_and_date(employee_id, day)
        if record is None:
            raise NotFoundError(f"No attendance for employee {employee_id} on {day.isoformat()}")
        repo.delete(record)
        self._uow.commit()

    def daily_roster(self, day: date) -> DailyAttendanceList:
        """Every employee with its stored status for ``day``, or None for the smart default."""
        employees = EmployeeRepository(self._uow.session).list_all()
        stored = {r.employee_id: r for r in AttendanceRepository(self._uow.session).list_by_date(day)}
        items = []
        for emp in employees:
            record = stored.get(emp.id)
            items.append(DailyAttendanceEntry(
                employee_id=emp.id,
                employee_name=emp.name,
                position=emp.position,
                status=record.status if record else None,
                attendance_id=record.id if record else None,
            ))
        return DailyAttendanceList(date=day, items=items)

    def bulk_set(self, day: date, entries: list[BulkAttendanceEntry]) -> DailyAttendanceList:
        """Apply one day's statuses; a None status clears the stored row."""
        repo = AttendanceRepository(self._uow.session)
        for entry in entries:
            get_employee_or_404(self._uow.session, entry.employee_id)
            if entry.status is None:
                record = repo.get_by_employee_and_date(entry.employee_id, day)
                if record is not None:
                    repo.delete(record)
            else:
                repo.upsert(employee_id=entry.employee_id, day=day, status=entry.status)
        self._uow.commit()
        return self.daily_roster(day)

    def report(self, employee_id: int, year: int, month: int | None = None) -> AttendanceReportRead:
        get_employee_or_404(self._uow.session, employee_id)
        start, end = period_bounds(year, month)
        records = AttendanceRepository(self._uow.session).list_in_period(employee_id, start, end)
        return AttendanceReportRead.model_validate(summarize_records(records))

    def smart_report(
        self, employee_id: int, year: int, month: int | None = None, today: date | None = None,
    ) -> SmartAttendanceReportRead:
        get_employee_or_404(self._uow.session, employee_id)
        source = SqlReportingDataSource(self._uow.session)
        report = load_smart_report(source, employee_id, year, month, today)
        return SmartAttendanceReportRead.model_validate(report)

    def vacation_balance(self, employee_id: int, year: int, today: date | None = None) -> VacationBalanceRead:
        get_employee_or_404(self._uow.session, employee_id)
        source = SqlReportingDataSource(self._uow.session)
        yearly = load_smart_report(source, employee_id, year, None, today)
        balance = vacation_balance(yearly, year, settings.VACATION_ALLOWANCE_DAYS)
        return VacationBalanceRead.model_validate(balance)
