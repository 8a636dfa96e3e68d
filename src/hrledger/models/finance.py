import datetime as dt
from typing import Optional
from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel
from hrledger.domain.enums import Currency, Platform
from hrledger.models.core import _utcnow


class ConsultantContract(SQLModel, table=True):
    __tablename__ = "consultant_contracts"

    id: Optional[int] = Field(default=None, primary_key=True)
    company_name: str = Field(index=True)
    monthly_fee: float
    currency: Currency = Field(default=Currency.USD)
    start_date: dt.date
    is_active: bool = Field(default=True)
    # Fraction, e.g. 0.25 for 25 %.
    vat_rate: Optional[float] = None
    created_at: dt.datetime = Field(default_factory=_utcnow)


class ContractEmployeeLink(SQLModel, table=True):
    __tablename__ = "contract_employees"

    contract_id: int = Field(foreign_key="consultant_contracts.id", primary_key=True)
    employee_id: int = Field(foreign_key="employees.id", primary_key=True)


class AdRevenue(SQLModel, table=True):
    __tablename__ = "ad_revenue"
    __table_args__ = (UniqueConstraint("year", "month", name="uq_ad_revenue_period"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    year: int = Field(index=True)
    month: int
    amount: float
    currency: Currency = Field(default=Currency.USD)
    notes: Optional[str] = None
    created_at: dt.datetime = Field(default_factory=_utcnow)


class IapRevenue(SQLModel, table=True):
    __tablename__ = "iap_revenue"
    __table_args__ = (UniqueConstraint("platform", "year", "month", name="uq_iap_revenue_period"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    platform: Platform
    year: int = Field(index=True)
    month: int
    amount: float
    currency: Currency = Field(default=Currency.USD)
    created_at: dt.datetime = Field(default_factory=_utcnow)


class Cost(SQLModel, table=True):
    __tablename__ = "costs"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    category: str = Field(index=True)
    amount: float
    currency: Currency = Field(default=Currency.USD)
    # Start month for recurring costs, the booked month for one-time costs.
    year: int
    month: int
    is_recurring: bool = Field(default=False)
    is_active: bool = Field(default=True)
    notes: Optional[str] = None
    created_at: dt.datetime = Field(default_factory=_utcnow)
