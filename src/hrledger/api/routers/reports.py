"""Reporting endpoints: monthly P&L, trend series, employee detail, salaries."""
from typing import Annotated
from fastapi import APIRouter, Depends, Path, Query
from hrledger.api.deps import ReportParams, get_uow, report_params
from hrledger.api.schemas.reports import (
    EmployeeReportDetail, MonthReportRead, SalaryOverviewRead, SeriesResponse,
)
from hrledger.infra.db.uow import UnitOfWork
from hrledger.services.reports_service import ReportsService

router = APIRouter(prefix="/reports", tags=["reports"])

Month = Annotated[int, Path(ge=1, le=12)]
Year = Annotated[int, Path(ge=1, le=9999)]


@router.get("/month/{year}/{month}", response_model=MonthReportRead)
def month_report(
    year: Year,
    month: Month,
    params: ReportParams = Depends(report_params),
    uow: UnitOfWork = Depends(get_uow),
) -> MonthReportRead:
    return ReportsService(uow).month(year, month, params.currency, params.today)


# year >= 4 keeps a 36-month window after year 1
@router.get("/series/{year}/{month}", response_model=SeriesResponse)
def month_series(
    year: Annotated[int, Path(ge=4, le=9999)],
    month: Month,
    months: int | None = Query(None, ge=1, le=36),
    params: ReportParams = Depends(report_params),
    uow: UnitOfWork = Depends(get_uow),
) -> SeriesResponse:
    return ReportsService(uow).series(year, month, months, params.currency, params.today)


@router.get("/employees/{employee_id}/{year}/{month}", response_model=EmployeeReportDetail)
def employee_report(
    employee_id: int,
    year: Year,
    month: Month,
    params: ReportParams = Depends(report_params),
    uow: UnitOfWork = Depends(get_uow),
) -> EmployeeReportDetail:
    return ReportsService(uow).employee_detail(employee_id, year, month, params.currency, params.today)


@router.get("/salaries", response_model=SalaryOverviewRead)
def salaries(
    params: ReportParams = Depends(report_params), uow: UnitOfWork = Depends(get_uow),
) -> SalaryOverviewRead:
    return ReportsService(uow).salaries(params.currency)
