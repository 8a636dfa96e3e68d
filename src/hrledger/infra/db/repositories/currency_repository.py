"""Repository for the directional currency rate table."""
from __future__ import annotations
from datetime import datetime, timezone
from sqlmodel import Session, select
from hrledger.domain.enums import Currency
from hrledger.models.core import CurrencyRate


class CurrencyRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def list_all(self) -> list[CurrencyRate]:
        return list(self._s.exec(
            select(CurrencyRate).order_by(CurrencyRate.from_curr, CurrencyRate.to_curr)
        ).all())

    def get(self, from_curr: Currency, to_curr: Currency) -> CurrencyRate | None:
        return self._s.exec(
            select(CurrencyRate).where(
                CurrencyRate.from_curr == from_curr, CurrencyRate.to_curr == to_curr,
            )
        ).first()

    def upsert(self, from_curr: Currency, to_curr: Currency, rate: float) -> CurrencyRate:
        row = self.get(from_curr, to_curr)
        if row is None:
            row = CurrencyRate(from_curr=from_curr, to_curr=to_curr, rate=rate)
        else:
            row.rate = rate
            row.updated = datetime.now(timezone.utc)
        self._s.add(row)
        self._s.flush()
        return row
