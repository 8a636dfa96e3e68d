"""FastAPI dependencies."""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Generator
from fastapi import Query
from hrledger.domain.enums import Currency
from hrledger.infra.db.uow import UnitOfWork


def get_uow() -> Generator[UnitOfWork, None, None]:
    """Yield one UnitOfWork per request; commit/rollback in __exit__."""
    with UnitOfWork() as uow:
        yield uow


@dataclass
class ReportParams:
    currency: Currency | None
    today: date | None


def report_params(
    currency: Currency | None = Query(None, description="Display currency; defaults to settings"),
    today: date | None = Query(None, description="Pin the clock used to clip future workdays"),
) -> ReportParams:
    return ReportParams(currency=currency, today=today)
