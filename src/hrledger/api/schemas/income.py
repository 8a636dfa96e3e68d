"""Income DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator
from hrledger.domain.enums import Currency, Platform


class EmployeeRef(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str


class ContractCreate(BaseModel):
    company_name: str
    monthly_fee: float = Field(ge=0)
    currency: Currency = Currency.USD
    start_date: date
    is_active: bool = True
    vat_rate: float | None = Field(default=None, ge=0, le=1)
    employee_ids: list[int] = []

    @field_validator("company_name")
    @classmethod
    def company_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("company_name must not be empty")
        return v.strip()


class ContractUpdate(BaseModel):
    company_name: str | None = None
    monthly_fee: float | None = Field(default=None, ge=0)
    currency: Currency | None = None
    start_date: date | None = None
    is_active: bool | None = None
    vat_rate: float | None = Field(default=None, ge=0, le=1)
    employee_ids: list[int] | None = None


class ContractRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    company_name: str
    monthly_fee: float
    currency: Currency
    start_date: date
    is_active: bool
    vat_rate: float | None = None
    created_at: datetime | None = None
    employees: list[EmployeeRef] = []


class ContractList(BaseModel):
    items: list[ContractRead]
    total: int


class AdRevenueSet(BaseModel):
    year: int
    month: int = Field(ge=1, le=12)
    amount: float
    currency: Currency = Currency.USD
    notes: str | None = None


class AdRevenueRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    year: int
    month: int
    amount: float
    currency: Currency
    notes: str | None = None
    created_at: datetime | None = None


class AdRevenueList(BaseModel):
    items: list[AdRevenueRead]
    total: int


class IapRevenueSet(BaseModel):
    platform: Platform
    year: int
    month: int = Field(ge=1, le=12)
    amount: float
    currency: Currency = Currency.USD


class IapRevenueRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    platform: Platform
    year: int
    month: int
    amount: float
    currency: Currency
    created_at: datetime | None = None


class IapRevenueList(BaseModel):
    items: list[IapRevenueRead]
    total: int


class IncomeBreakdownRead(BaseModel):
    model_config = {"from_attributes": True}

    consultant: float
    ads: float
    iap: float
    total: float


class IncomeSummaryRead(BaseModel):
    """Consultant fees per month plus the last complete month's ad and IAP revenue."""

    year: int
    month: int
    currency: Currency
    active_contracts: int
    income: IncomeBreakdownRead


class IncomeMonthRead(BaseModel):
    year: int
    month: int
    label: str
    income: IncomeBreakdownRead


class IncomeByMonthResponse(BaseModel):
    currency: Currency
    months: list[IncomeMonthRead]
    totals: IncomeBreakdownRead


class VatDueRead(BaseModel):
    model_config = {"from_attributes": True}

    contract_id: int
    company_name: str
    year: int
    month: int
    vat_rate: float
    vat_amount: float
    currency: Currency
    due_date: date


class VatScheduleResponse(BaseModel):
    items: list[VatDueRead]
    total: float
    due_date: date
