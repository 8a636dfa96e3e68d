"""Repository for Cost rows. No business logic; caller owns the transaction."""
from __future__ import annotations
from typing import Any
from sqlmodel import Session, select
from hrledger.models.finance import Cost


class CostRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, cost_id: int) -> Cost | None:
        return self._s.get(Cost, cost_id)

    def list_all(self) -> list[Cost]:
        return list(self._s.exec(
            select(Cost).order_by(Cost.year.desc(), Cost.month.desc(), Cost.name)
        ).all())

    def list_categories(self) -> list[str]:
        return list(self._s.exec(select(Cost.category).distinct().order_by(Cost.category)).all())

    def create(self, **fields: Any) -> Cost:
        cost = Cost(**fields)
        self._s.add(cost)
        self._s.flush()
        return cost

    def update(self, cost: Cost, **changes: Any) -> Cost:
        for key, value in changes.items():
            setattr(cost, key, value)
        self._s.add(cost)
        self._s.flush()
        return cost

    def delete(self, cost: Cost) -> None:
        self._s.delete(cost)
        self._s.flush()
