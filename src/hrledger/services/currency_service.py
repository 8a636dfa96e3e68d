"""Currency use-case service: rate table maintenance, live refresh and conversion."""
from __future__ import annotations
from hrledger.config import settings
from hrledger.domain.currency import build_rate_table, convert, format_currency
from hrledger.domain.enums import Currency
from hrledger.domain.exceptions import RateFetchError
from hrledger.infra.db.uow import UnitOfWork
from hrledger.infra.db.repositories.currency_repository import CurrencyRepository
from hrledger.infra.rates.exchange_rate_client import ExchangeRateClient
from hrledger.api.schemas.currency import (
    ConversionRead, CurrencyRateInput, CurrencyRateList, CurrencyRateRead, RateRefreshResult,
)
from hrledger.logging import logger


class CurrencyService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def list_rates(self) -> CurrencyRateList:
        rows = CurrencyRepository(self._uow.session).list_all()
        last = max((r.updated for r in rows if r.updated is not None), default=None)
        return CurrencyRateList(
            items=[CurrencyRateRead.model_validate(r) for r in rows],
            last_updated=last,
        )

    def update_rates(self, rates: list[CurrencyRateInput]) -> CurrencyRateList:
        repo = CurrencyRepository(self._uow.session)
        for r in rates:
            repo.upsert(r.from_curr, r.to_curr, r.rate)
        self._uow.commit()
        return self.list_rates()

    def refresh_rates(self, client: ExchangeRateClient | None = None) -> RateRefreshResult:
        """Pull the live USD quote, expand it to all pairs and store it.

        Feed failures are reported in the result, never raised.
        """
        owns_client = client is None
        client = client or ExchangeRateClient()
        try:
            usd_base = client.fetch_usd_base()
        except RateFetchError as exc:
            logger.error("Failed to fetch currency rates: %s", exc.message)
            return RateRefreshResult(success=False, error=exc.message)
        finally:
            if owns_client:
                client.close()

        table = [CurrencyRateInput.model_validate(r) for r in build_rate_table(usd_base)]
        self.update_rates(table)
        logger.info("Refreshed %d currency rates", len(table))
        return RateRefreshResult(success=True, rates=table)

    def convert(self, amount: float, from_curr: Currency, to_curr: Currency) -> ConversionRead:
        rates = CurrencyRepository(self._uow.session).list_all()
        converted = convert(amount, from_curr, to_curr, rates, strict=settings.CURRENCY_STRICT)
        return ConversionRead(
            amount=amount,
            from_curr=from_curr,
            to_curr=to_curr,
            converted=converted,
            formatted=format_currency(converted, to_curr),
        )
