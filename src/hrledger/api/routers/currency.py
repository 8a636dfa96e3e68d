"""Currency rate endpoints."""
from fastapi import APIRouter, Depends, Query
from hrledger.api.deps import get_uow
from hrledger.api.schemas.currency import (
    ConversionRead, CurrencyRateInput, CurrencyRateList, RateRefreshResult,
)
from hrledger.domain.enums import Currency
from hrledger.infra.db.uow import UnitOfWork
from hrledger.services.currency_service import CurrencyService

router = APIRouter(prefix="/currency", tags=["currency"])


@router.get("/rates", response_model=CurrencyRateList)
def list_rates(uow: UnitOfWork = Depends(get_uow)) -> CurrencyRateList:
    return CurrencyService(uow).list_rates()


@router.put("/rates", response_model=CurrencyRateList)
def update_rates(payload: list[CurrencyRateInput], uow: UnitOfWork = Depends(get_uow)) -> CurrencyRateList:
    return CurrencyService(uow).update_rates(payload)


@router.post("/rates/refresh", response_model=RateRefreshResult)
def refresh_rates(uow: UnitOfWork = Depends(get_uow)) -> RateRefreshResult:
    return CurrencyService(uow).refresh_rates()


@router.get("/convert", response_model=ConversionRead)
def convert_amount(
    amount: float = Query(...),
    from_curr: Currency = Query(..., alias="from"),
    to_curr: Currency = Query(..., alias="to"),
    uow: UnitOfWork = Depends(get_uow),
) -> ConversionRead:
    return CurrencyService(uow).convert(amount, from_curr, to_curr)
