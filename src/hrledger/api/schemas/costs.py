"""Cost DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from hrledger.domain.enums import Currency


class CostCreate(BaseModel):
    name: str
    category: str
    amount: float = Field(ge=0)
    currency: Currency = Currency.USD
    year: int
    month: int = Field(ge=1, le=12)
    is_recurring: bool = False
    is_active: bool = True
    notes: str | None = None

    @field_validator("name", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class CostUpdate(BaseModel):
    name: str | None = None
    category: str | None = None
    amount: float | None = Field(default=None, ge=0)
    currency: Currency | None = None
    year: int | None = None
    month: int | None = Field(default=None, ge=1, le=12)
    is_recurring: bool | None = None
    is_active: bool | None = None
    notes: str | None = None


class CostRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    name: str
    category: str
    amount: float
    currency: Currency
    year: int
    month: int
    is_recurring: bool
    is_active: bool
    notes: str | None = None
    created_at: datetime | None = None


class CostList(BaseModel):
    items: list[CostRead]
    total: int


class CostSummary(BaseModel):
    currency: Currency
    this_month: float
    last_month: float
    last_three_months: float
