"""HTTP client for the USD-based exchange-rate feed."""
from __future__ import annotations

import math

import httpx

from hrledger.config import settings
from hrledger.domain.currency import CURRENCIES, PIVOT
from hrledger.domain.exceptions import RateFetchError


class ExchangeRateClient:
    """Fetches ``{"rates": {"IDR": ..., "SEK": ...}}`` quotes against USD."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url or settings.EXCHANGE_RATE_URL
        self._client = httpx.Client(
            timeout=timeout or settings.EXCHANGE_RATE_TIMEOUT, transport=transport,
        )

    def fetch_usd_base(self) -> dict[str, float]:
        """Units of each supported currency per 1 USD."""
        try:
            resp = self._client.get(self._url)
            resp.raise_for_status()
            body = resp.json()
        except httpx.HTTPError as exc:
            raise RateFetchError(f"Rate feed request failed: {exc}") from exc
        except ValueError as exc:
            raise RateFetchError("Rate feed returned invalid JSON") from exc

        quotes = body.get("rates") if isinstance(body, dict) else None
        if not isinstance(quotes, dict):
            raise RateFetchError("Rate feed response has no 'rates' object")

        base: dict[str, float] = {PIVOT: 1.0}
        for cur in CURRENCIES:
            if cur == PIVOT:
                continue
            value = quotes.get(cur)
            if (
                isinstance(value, bool)
                or not isinstance(value, (int, float))
                or not math.isfinite(value)
                or value <= 0
            ):
                raise RateFetchError(f"Rate feed has no usable quote for {cur}")
            base[cur] = float(value)
        return base

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ExchangeRateClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
