"""Employee DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator
from hrledger.domain.enums import Currency


class EmployeeCreate(BaseModel):
    name: str
    position: str
    salary: float = Field(ge=0)
    currency: Currency = Currency.USD
    start_date: date

    @field_validator("name", "position")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class EmployeeUpdate(BaseModel):
    name: str | None = None
    position: str | None = None
    salary: float | None = Field(default=None, ge=0)
    currency: Currency | None = None
    start_date: date | None = None

    @field_validator("name", "position")
    @classmethod
    def not_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("must not be empty")
        return v.strip() if v is not None else v


class EmployeeRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    position: str
    salary: float
    currency: Currency
    start_date: date
    created_at: datetime | None = None


class EmployeeList(BaseModel):
    items: list[EmployeeRead]
    total: int
