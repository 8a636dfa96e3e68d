"""Report DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from pydantic import BaseModel
from hrledger.api.schemas.attendance import SmartAttendanceReportRead, VacationBalanceRead
from hrledger.api.schemas.income import IncomeBreakdownRead
from hrledger.domain.enums import Currency


class ExpenseBreakdownRead(BaseModel):
    model_config = {"from_attributes": True}

    salaries_base: float
    salaries: float
    salary_deduction: float
    sick_days: int
    costs: float
    total: float


class MonthReportRead(BaseModel):
    model_config = {"from_attributes": True}

    year: int
    month: int
    currency: Currency
    income: IncomeBreakdownRead
    expenses: ExpenseBreakdownRead
    net: float
    is_profit: bool


class MonthDataRead(BaseModel):
    model_config = {"from_attributes": True}

    year: int
    month: int
    label: str
    income: float
    expenses: float
    net: float


class SeriesResponse(BaseModel):
    currency: Currency
    items: list[MonthDataRead]


class DeductionRead(BaseModel):
    model_config = {"from_attributes": True}

    base_salary: float
    adjusted_salary: float
    deduction_amount: float
    sick_days: int
    workdays: int


class EmployeeReportDetail(BaseModel):
    employee_id: int
    name: str
    year: int
    month: int
    currency: Currency
    report: SmartAttendanceReportRead
    deduction: DeductionRead
    vacation: VacationBalanceRead


class SalaryLineRead(BaseModel):
    model_config = {"from_attributes": True}

    employee_id: int
    name: str
    salary: float
    currency: Currency
    converted: float


class CurrencyGroupRead(BaseModel):
    currency: Currency
    count: int
    total: float


class SalaryOverviewRead(BaseModel):
    currency: Currency
    lines: list[SalaryLineRead]
    total: float
    by_currency: list[CurrencyGroupRead]
