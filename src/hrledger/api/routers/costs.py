"""Cost ledger endpoints."""
from typing import Annotated
from fastapi import APIRouter, Depends, Path, Response
from hrledger.api.deps import ReportParams, get_uow, report_params
from hrledger.api.schemas.costs import CostCreate, CostList, CostRead, CostSummary, CostUpdate
from hrledger.infra.db.uow import UnitOfWork
from hrledger.services.costs_service import CostsService

router = APIRouter(prefix="/costs", tags=["costs"])


@router.get("", response_model=CostList)
def list_costs(uow: UnitOfWork = Depends(get_uow)) -> CostList:
    return CostsService(uow).list_costs()


@router.post("", response_model=CostRead, status_code=201)
def create_cost(payload: CostCreate, uow: UnitOfWork = Depends(get_uow)) -> CostRead:
    return CostsService(uow).create_cost(payload)


@router.get("/categories", response_model=list[str])
def list_categories(uow: UnitOfWork = Depends(get_uow)) -> list[str]:
    return CostsService(uow).list_categories()


@router.get("/summary/{year}/{month}", response_model=CostSummary)
def cost_summary(
    year: Annotated[int, Path(ge=1, le=9999)],
    month: Annotated[int, Path(ge=1, le=12)],
    params: ReportParams = Depends(report_params),
    uow: UnitOfWork = Depends(get_uow),
) -> CostSummary:
    return CostsService(uow).summary(year, month, params.currency)


@router.get("/{cost_id}", response_model=CostRead)
def get_cost(cost_id: int, uow: UnitOfWork = Depends(get_uow)) -> CostRead:
    return CostsService(uow).get_cost(cost_id)


@router.patch("/{cost_id}", response_model=CostRead)
def update_cost(cost_id: int, payload: CostUpdate, uow: UnitOfWork = Depends(get_uow)) -> CostRead:
    return CostsService(uow).update_cost(cost_id, payload)


@router.delete("/{cost_id}", status_code=204)
def delete_cost(cost_id: int, uow: UnitOfWork = Depends(get_uow)) -> Response:
    CostsService(uow).delete_cost(cost_id)
    return Response(status_code=204)
