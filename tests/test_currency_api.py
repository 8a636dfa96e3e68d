"""Integration tests for the /currency endpoints."""


def test_default_rates_are_seeded(client):
    body = client.get("/currency/rates").json()
    assert len(body["items"]) == 9
    pairs = {(r["from_curr"], r["to_curr"]): r["rate"] for r in body["items"]}
    assert pairs[("USD", "IDR")] == 15500
    assert pairs[("USD", "SEK")] == 10.5


def test_update_rates_overwrites_pair(client):
    resp = client.put("/currency/rates", json=[{"from_curr": "USD", "to_curr": "SEK", "rate": 11}])
    assert resp.status_code == 200
    pairs = {(r["from_curr"], r["to_curr"]): r["rate"] for r in resp.json()["items"]}
    assert pairs[("USD", "SEK")] == 11
    assert len(pairs) == 9


def test_update_rates_rejects_non_positive_rate(client):
    resp = client.put("/currency/rates", json=[{"from_curr": "USD", "to_curr": "SEK", "rate": 0}])
    assert resp.status_code == 422


def test_convert_direct_pair(client):
    resp = client.get("/currency/convert", params={"amount": 100, "from": "USD", "to": "SEK"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["converted"] == 1050
    assert body["formatted"] == "1 050,00 kr"


def test_convert_same_currency(client):
    body = client.get("/currency/convert", params={"amount": 42, "from": "IDR", "to": "IDR"}).json()
    assert body["converted"] == 42


def test_convert_unknown_currency_returns_422(client):
    resp = client.get("/currency/convert", params={"amount": 1, "from": "EUR", "to": "USD"})
    assert resp.status_code == 422
