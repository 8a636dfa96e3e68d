"""Attendance DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
import datetime as dt
from pydantic import BaseModel
from hrledger.domain.enums import AttendanceStatus


class AttendanceSet(BaseModel):
    employee_id: int
    date: dt.date
    status: AttendanceStatus
    notes: str | None = None


class AttendanceRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    employee_id: int
    date: dt.date
    status: AttendanceStatus
    notes: str | None = None


class AttendanceList(BaseModel):
    items: list[AttendanceRead]
    total: int


class DailyAttendanceEntry(BaseModel):
    employee_id: int
    employee_name: str
    position: str
    # None: no stored row, the smart default applies.
    status: AttendanceStatus | None = None
    attendance_id: int | None = None


class DailyAttendanceList(BaseModel):
    date: dt.date
    items: list[DailyAttendanceEntry]


class BulkAttendanceEntry(BaseModel):
    employee_id: int
    status: AttendanceStatus | None = None


class BulkAttendanceRequest(BaseModel):
    entries: list[BulkAttendanceEntry]


class AttendanceReportRead(BaseModel):
    model_config = {"from_attributes": True}

    worked: int
    sick: int
    vacation: int
    total: int


class SmartAttendanceReportRead(BaseModel):
    model_config = {"from_attributes": True}

    workdays: int
    worked: int
    sick: int
    vacation: int


class VacationBalanceRead(BaseModel):
    model_config = {"from_attributes": True}

    allowance: int
    used: int
    remaining: int
    year: int
