"""ExchangeRateClient and CurrencyService.refresh_rates against a mocked feed."""
import httpx
import pytest
from hrledger.domain.exceptions import RateFetchError
from hrledger.infra.db.uow import UnitOfWork
from hrledger.infra.rates.exchange_rate_client import ExchangeRateClient
from hrledger.services.currency_service import CurrencyService

FEED_URL = "https://rates.test/latest/USD"


def _client(handler) -> ExchangeRateClient:
    return ExchangeRateClient(url=FEED_URL, transport=httpx.MockTransport(handler))


def test_fetch_usd_base_reads_supported_currencies():
    def handler(request):
        assert str(request.url) == FEED_URL
        return httpx.Response(200, json={"base": "USD", "rates": {"IDR": 16000, "SEK": 11.0, "EUR": 0.9}})

    with _client(handler) as client:
        assert client.fetch_usd_base() == {"USD": 1.0, "IDR": 16000.0, "SEK": 11.0}


def test_http_error_becomes_rate_fetch_error():
    with _client(lambda r: httpx.Response(503)) as client:
        with pytest.raises(RateFetchError):
            client.fetch_usd_base()


def test_invalid_json_becomes_rate_fetch_error():
    with _client(lambda r: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(RateFetchError, match="invalid JSON"):
            client.fetch_usd_base()


def test_missing_quote_becomes_rate_fetch_error():
    with _client(lambda r: httpx.Response(200, json={"rates": {"IDR": 16000}})) as client:
        with pytest.raises(RateFetchError, match="SEK"):
            client.fetch_usd_base()


def test_refresh_rates_stores_full_table(use_test_engine):
    feed = _client(lambda r: httpx.Response(200, json={"rates": {"IDR": 16000, "SEK": 10.0}}))
    with UnitOfWork() as uow:
        result = CurrencyService(uow).refresh_rates(feed)
    assert result.success
    assert len(result.rates) == 9

    with UnitOfWork() as uow:
        table = CurrencyService(uow).list_rates()
    by_pair = {(r.from_curr.value, r.to_curr.value): r.rate for r in table.items}
    assert by_pair[("USD", "IDR")] == 16000.0
    assert by_pair[("SEK", "IDR")] == pytest.approx(1600.0)
    assert table.last_updated is not None


def test_refresh_rates_failure_keeps_existing_table(use_test_engine):
    feed = _client(lambda r: httpx.Response(500))
    with UnitOfWork() as uow:
        result = CurrencyService(uow).refresh_rates(feed)
    assert not result.success
    assert result.error

    with UnitOfWork() as uow:
        table = CurrencyService(uow).list_rates()
    by_pair = {(r.from_curr.value, r.to_curr.value): r.rate for r in table.items}
    assert by_pair[("USD", "IDR")] == 15500.0


@pytest.mark.parametrize("body", [
    b'{"rates": {"IDR": Infinity, "SEK": 10.0}}',
    b'{"rates": {"IDR": NaN, "SEK": 10.0}}',
    b'{"rates": {"IDR": true, "SEK": 10.0}}',
])
def test_non_numeric_or_non_finite_quote_becomes_rate_fetch_error(body):
    def handler(request):
        return httpx.Response(200, content=body, headers={"content-type": "application/json"})

    with _client(handler) as client:
        with pytest.raises(RateFetchError, match="IDR"):
            client.fetch_usd_base()


def test_refresh_rates_reports_infinite_quote(use_test_engine):
    feed = _client(lambda r: httpx.Response(
        200, content=b'{"rates": {"IDR": Infinity, "SEK": 10.0}}',
        headers={"content-type": "application/json"},
    ))
    with UnitOfWork() as uow:
        result = CurrencyService(uow).refresh_rates(feed)
    assert not result.success
    assert "IDR" in result.error

    with UnitOfWork() as uow:
        table = CurrencyService(uow).list_rates()
    by_pair = {(r.from_curr.value, r.to_curr.value): r.rate for r in table.items}
    assert by_pair[("USD", "IDR")] == 15500.0
