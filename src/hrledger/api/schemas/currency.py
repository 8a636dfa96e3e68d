"""Currency DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, Field
from hrledger.domain.enums import Currency


class CurrencyRateInput(BaseModel):
    model_config = {"from_attributes": True}

    from_curr: Currency
    to_curr: Currency
    rate: float = Field(gt=0)


class CurrencyRateRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    from_curr: Currency
    to_curr: Currency
    rate: float
    updated: datetime | None = None


class CurrencyRateList(BaseModel):
    items: list[CurrencyRateRead]
    last_updated: datetime | None = None


class RateRefreshResult(BaseModel):
    success: bool
    rates: list[CurrencyRateInput] = []
    error: str | None = None


class ConversionRead(BaseModel):
    amount: float
    from_curr: Currency
    to_curr: Currency
    converted: float
    formatted: str
