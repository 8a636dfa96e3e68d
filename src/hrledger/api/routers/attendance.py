"""Attendance endpoints: stored exceptions, daily roster, reports."""
from datetime import date
from typing import Annotated
from fastapi import APIRouter, Depends, Path, Response
from hrledger.api.deps import ReportParams, get_uow, report_params
from hrledger.api.schemas.attendance import (
    AttendanceRead, AttendanceReportRead, AttendanceSet, BulkAttendanceRequest,
    DailyAttendanceList, SmartAttendanceReportRead, VacationBalanceRead,
)
from hrledger.infra.db.uow import UnitOfWork
from hrledger.services.attendance_service import AttendanceService

router = APIRouter(prefix="/attendance", tags=["attendance"])

Month = Annotated[int, Path(ge=1, le=12)]
Year = Annotated[int, Path(ge=1, le=9999)]


@router.put("", response_model=AttendanceRead)
def set_attendance(payload: AttendanceSet, uow: UnitOfWork = Depends(get_uow)) -> AttendanceRead:
    return AttendanceService(uow).set_attendance(payload)


@router.delete("/{record_id}", status_code=204)
def delete_attendance(record_id: int, uow: UnitOfWork = Depends(get_uow)) -> Response:
    AttendanceService(uow).delete_attendance(record_id)
    return Response(status_code=204)


@router.delete("/employees/{employee_id}/{day}", status_code=204)
def delete_attendance_for_day(
    employee_id: int, day: date, uow: UnitOfWork = Depends(get_uow),
) -> Response:
    AttendanceService(uow).delete_for_day(employee_id, day)
    return Response(status_code=204)


@router.get("/daily/{day}", response_model=DailyAttendanceList)
def daily_roster(day: date, uow: UnitOfWork = Depends(get_uow)) -> DailyAttendanceList:
    return AttendanceService(uow).daily_roster(day)


@router.put("/daily/{day}", response_model=DailyAttendanceList)
def bulk_set_attendance(
    day: date, payload: BulkAttendanceRequest, uow: UnitOfWork = Depends(get_uow),
) -> DailyAttendanceList:
    return AttendanceService(uow).bulk_set(day, payload.entries)


@router.get("/reports/{employee_id}/{year}", response_model=AttendanceReportRead)
def yearly_report(employee_id: int, year: Year, uow: UnitOfWork = Depends(get_uow)) -> AttendanceReportRead:
    return AttendanceService(uow).report(employee_id, year)


@router.get("/reports/{employee_id}/{year}/{month}", response_model=AttendanceReportRead)
def monthly_report(
    employee_id: int, year: Year, month: Month, uow: UnitOfWork = Depends(get_uow),
) -> AttendanceReportRead:
    return AttendanceService(uow).report(employee_id, year, month)


@router.get("/smart-reports/{employee_id}/{year}", response_model=SmartAttendanceReportRead)
def smart_yearly_report(
    employee_id: int,
    year: Year,
    params: ReportParams = Depends(report_params),
    uow: UnitOfWork = Depends(get_uow),
) -> SmartAttendanceReportRead:
    return AttendanceService(uow).smart_report(employee_id, year, None, params.today)


@router.get("/smart-reports/{employee_id}/{year}/{month}", response_model=SmartAttendanceReportRead)
def smart_monthly_report(
    employee_id: int,
    year: Year,
    month: Month,
    params: ReportParams = Depends(report_params),
    uow: UnitOfWork = Depends(get_uow),
) -> SmartAttendanceReportRead:
    return AttendanceService(uow).smart_report(employee_id, year, month, params.today)


@router.get("/vacation-balance/{employee_id}/{year}", response_model=VacationBalanceRead)
def vacation_balance(
    employee_id: int,
    year: Year,
    params: ReportParams = Depends(report_params),
    uow: UnitOfWork = Depends(get_uow),
) -> VacationBalanceRead:
    return AttendanceService(uow).vacation_balance(employee_id, year, params.today)
