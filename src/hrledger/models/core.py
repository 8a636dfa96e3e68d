import datetime as dt
from typing import Optional
from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel
from hrledger.domain.enums import AttendanceStatus, Currency


def _utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class Employee(SQLModel, table=True):
    __tablename__ = "employees"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    position: str
    salary: float
    currency: Currency = Field(default=Currency.USD)
    start_date: dt.date
    created_at: dt.datetime = Field(default_factory=_utcnow)


class AttendanceRecord(SQLModel, table=True):
    """One stored deviation from the smart default for an employee and day."""

    __tablename__ = "attendance"
    __table_args__ = (UniqueConstraint("employee_id", "date", name="uq_attendance_employee_date"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    employee_id: int = Field(foreign_key="employees.id", index=True)
    date: dt.date = Field(index=True)
    status: AttendanceStatus
    notes: Optional[str] = None


class CurrencyRate(SQLModel, table=True):
    __tablename__ = "currency_rates"
    __table_args__ = (UniqueConstraint("from_curr", "to_curr", name="uq_currency_rates_pair"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    from_curr: Currency
    to_curr: Currency
    rate: float
    updated: dt.datetime = Field(default_factory=_utcnow)
