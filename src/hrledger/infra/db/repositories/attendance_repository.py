"""Repository for AttendanceRecord rows. No business logic; caller owns the transaction."""
from __future__ import annotations
from datetime import date
from sqlmodel import Session, select
from hrledger.domain.enums import AttendanceStatus
from hrledger.models.core import AttendanceRecord

EXCEPTION_STATUSES = (AttendanceStatus.SICK, AttendanceStatus.VACATION)


class AttendanceRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, record_id: int) -> AttendanceRecord | None:
        return self._s.get(AttendanceRecord, record_id)

    def get_by_employee_and_date(self, employee_id: int, day: date) -> AttendanceRecord | None:
        return self._s.exec(
            select(AttendanceRecord).where(
                AttendanceRecord.employee_id == employee_id,
                AttendanceRecord.date == day,
            )
        ).first()

    def list_in_period(
        self,
        employee_id: int,
        start: date,
        end: date,
        *,
        statuses: tuple[AttendanceStatus, ...] | None = None,
    ) -> list[AttendanceRecord]:
        stmt = select(AttendanceRecord).where(
            AttendanceRecord.employee_id == employee_id,
            AttendanceRecord.date >= start,
            AttendanceRecord.date <= end,
        )
        if statuses:
            stmt = stmt.where(AttendanceRecord.status.in_(statuses))
        return list(self._s.exec(stmt.order_by(AttendanceRecord.date)).all())

    def list_by_employee(self, employee_id: int) -> list[AttendanceRecord]:
        return list(self._s.exec(
            select(AttendanceRecord)
            .where(AttendanceRecord.employee_id == employee_id)
            .order_by(AttendanceRecord.date.desc())
        ).all())

    def list_by_date(self, day: date) -> list[AttendanceRecord]:
        return list(self._s.exec(select(AttendanceRecord).where(AttendanceRecord.date == day)).all())

    def upsert(
        self, *, employee_id: int, day: date, status: AttendanceStatus, notes: str | None = None,
    ) -> AttendanceRecord:
        record = self.get_by_employee_and_date(employee_id, day)
        if record is None:
            record = AttendanceRecord(employee_id=employee_id, date=day, status=status, notes=notes)
        else:
            record.status = status
            record.notes = notes
        self._s.add(record)
        self._s.flush()
        return record

    def delete(self, record: AttendanceRecord) -> None:
        self._s.delete(record)
        self._s.flush()
