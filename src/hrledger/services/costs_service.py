"""Cost use-case service."""
from __future__ import annotations
from hrledger.config import settings
from hrledger.domain.aggregation import cost_total
from hrledger.domain.calendar import shift_month
from hrledger.domain.enums import Currency
from hrledger.domain.exceptions import NotFoundError
from hrledger.infra.db.uow import UnitOfWork
from hrledger.infra.db.repositories.cost_repository import CostRepository
from hrledger.infra.db.repositories.currency_repository import CurrencyRepository
from hrledger.models.finance import Cost
from hrledger.api.schemas.costs import CostCreate, CostList, CostRead, CostSummary, CostUpdate
from hrledger.services.common import display_currency


class CostsService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def _cost_or_404(self, cost_id: int) -> Cost:
        cost = CostRepository(self._uow.session).get_by_id(cost_id)
        if cost is None:
            raise NotFoundError(f"Cost {cost_id} not found")
        return cost

    def list_costs(self) -> CostList:
        costs = CostRepository(self._uow.session).list_all()
        return CostList(items=[CostRead.model_validate(c) for c in costs], total=len(costs))

    def list_categories(self) -> list[str]:
        return CostRepository(self._uow.session).list_categories()

    def get_cost(self, cost_id: int) -> CostRead:
        return CostRead.model_validate(self._cost_or_404(cost_id))

    def create_cost(self, payload: CostCreate) -> CostRead:
        cost = CostRepository(self._uow.session).create(**payload.model_dump())
        self._uow.commit()
        return CostRead.model_validate(cost)

    def update_cost(self, cost_id: int, payload: CostUpdate) -> CostRead:
        cost = self._cost_or_404(cost_id)
        changes = payload.model_dump(exclude_unset=True)
        changes = {k: v for k, v in changes.items() if v is not None or k == "notes"}
        if changes:
            CostRepository(self._uow.session).update(cost, **changes)
            self._uow.commit()
        return CostRead.model_validate(cost)

    def delete_cost(self, cost_id: int) -> None:
        CostRepository(self._uow.session).delete(self._cost_or_404(cost_id))
        self._uow.commit()

    def summary(self, year: int, month: int, currency: Currency | None = None) -> CostSummary:
        """Totals for the month, the month before, and the three months preceding it."""
        cur = display_currency(currency)
        costs = CostRepository(self._uow.session).list_all()
        rates = CurrencyRepository(self._uow.session).list_all()

        def total(y: int, m: int) -> float:
            return cost_total(costs, y, m, cur.value, rates, strict=settings.CURRENCY_STRICT)

        previous = [shift_month(year, month, -back) for back in (1, 2, 3)]
        return CostSummary(
            currency=cur,
            this_month=total(year, month),
            last_month=total(*previous[0]),
            last_three_months=sum(total(y, m) for y, m in previous),
        )
