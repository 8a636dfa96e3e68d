"""Income endpoints: consultant contracts, ad/IAP revenue, summaries, VAT."""
from typing import Annotated
from fastapi import APIRouter, Depends, Path, Query, Response
from hrledger.api.deps import ReportParams, get_uow, report_params
from hrledger.api.schemas.income import (
    AdRevenueList, AdRevenueRead, AdRevenueSet, ContractCreate, ContractList, ContractRead,
    ContractUpdate, IapRevenueList, IapRevenueRead, IapRevenueSet, IncomeByMonthResponse,
    IncomeSummaryRead, VatScheduleResponse,
)
from hrledger.infra.db.uow import UnitOfWork
from hrledger.services.income_service import IncomeService

router = APIRouter(prefix="/income", tags=["income"])

Month = Annotated[int, Path(ge=1, le=12)]
Year = Annotated[int, Path(ge=1, le=9999)]


# --- Contracts ---

@router.get("/contracts", response_model=ContractList)
def list_contracts(uow: UnitOfWork = Depends(get_uow)) -> ContractList:
    return IncomeService(uow).list_contracts()


@router.post("/contracts", response_model=ContractRead, status_code=201)
def create_contract(payload: ContractCreate, uow: UnitOfWork = Depends(get_uow)) -> ContractRead:
    return IncomeService(uow).create_contract(payload)


@router.get("/contracts/{contract_id}", response_model=ContractRead)
def get_contract(contract_id: int, uow: UnitOfWork = Depends(get_uow)) -> ContractRead:
    return IncomeService(uow).get_contract(contract_id)


@router.patch("/contracts/{contract_id}", response_model=ContractRead)
def update_contract(
    contract_id: int, payload: ContractUpdate, uow: UnitOfWork = Depends(get_uow),
) -> ContractRead:
    return IncomeService(uow).update_contract(contract_id, payload)


@router.delete("/contracts/{contract_id}", status_code=204)
def delete_contract(contract_id: int, uow: UnitOfWork = Depends(get_uow)) -> Response:
    IncomeService(uow).delete_contract(contract_id)
    return Response(status_code=204)


# --- Ad revenue ---

@router.get("/ad-revenue", response_model=AdRevenueList)
def list_ad_revenue(year: int | None = None, uow: UnitOfWork = Depends(get_uow)) -> AdRevenueList:
    return IncomeService(uow).list_ad_revenue(year)


@router.post("/ad-revenue", response_model=AdRevenueRead, status_code=201)
def create_ad_revenue(payload: AdRevenueSet, uow: UnitOfWork = Depends(get_uow)) -> AdRevenueRead:
    return IncomeService(uow).create_ad_revenue(payload)


@router.put("/ad-revenue", response_model=AdRevenueRead)
def set_ad_revenue(payload: AdRevenueSet, uow: UnitOfWork = Depends(get_uow)) -> AdRevenueRead:
    return IncomeService(uow).set_ad_revenue(payload)


@router.delete("/ad-revenue/{entry_id}", status_code=204)
def delete_ad_revenue(entry_id: int, uow: UnitOfWork = Depends(get_uow)) -> Response:
    IncomeService(uow).delete_ad_revenue(entry_id)
    return Response(status_code=204)


# --- IAP revenue ---

@router.get("/iap-revenue", response_model=IapRevenueList)
def list_iap_revenue(year: int | None = None, uow: UnitOfWork = Depends(get_uow)) -> IapRevenueList:
    return IncomeService(uow).list_iap_revenue(year)


@router.put("/iap-revenue", response_model=IapRevenueRead)
def set_iap_revenue(payload: IapRevenueSet, uow: UnitOfWork = Depends(get_uow)) -> IapRevenueRead:
    return IncomeService(uow).set_iap_revenue(payload)


@router.delete("/iap-revenue/{entry_id}", status_code=204)
def delete_iap_revenue(entry_id: int, uow: UnitOfWork = Depends(get_uow)) -> Response:
    IncomeService(uow).delete_iap_revenue(entry_id)
    return Response(status_code=204)


# --- Views ---

@router.get("/summary", response_model=IncomeSummaryRead)
def income_summary(
    params: ReportParams = Depends(report_params), uow: UnitOfWork = Depends(get_uow),
) -> IncomeSummaryRead:
    return IncomeService(uow).summary(params.currency, params.today)


@router.get("/by-month/{year}", response_model=IncomeByMonthResponse)
def income_by_month(
    year: Year,
    through: int | None = Query(None, ge=1, le=12),
    params: ReportParams = Depends(report_params),
    uow: UnitOfWork = Depends(get_uow),
) -> IncomeByMonthResponse:
    return IncomeService(uow).by_month(year, through, params.currency, params.today)


@router.get("/vat/{year}/{month}", response_model=VatScheduleResponse)
def vat_schedule(
    year: Annotated[int, Path(ge=1, le=9998)],
    month: Month,
    params: ReportParams = Depends(report_params),
    uow: UnitOfWork = Depends(get_uow),
) -> VatScheduleResponse:
    return IncomeService(uow).vat_schedule(year, month, params.currency)
