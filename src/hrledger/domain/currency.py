"""Currency conversion over a directional rate table.

Lookup order: identity, direct pair, then a two-hop conversion through USD.
A missing path is a data condition, not a programming error: the amount comes
back unconverted and a warning is logged, unless the caller asks for strict mode.
No rounding happens here.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Sequence

from hrledger.domain.enums import Currency
from hrledger.domain.exceptions import MissingRateError
from hrledger.domain.records import RateLike

logger = logging.getLogger(__name__)

PIVOT = Currency.USD.value
CURRENCIES: tuple[str, ...] = tuple(c.value for c in Currency)

_SYMBOLS = {"USD": "$", "IDR": "Rp", "SEK": "kr"}
_NAMES = {"USD": "US Dollar", "IDR": "Indonesian Rupiah", "SEK": "Swedish Krona"}
_DECIMALS = {"USD": 2, "IDR": 0, "SEK": 2}

# Seed table, expressed as units of each currency per 1 USD.
DEFAULT_USD_BASE: dict[str, float] = {"USD": 1.0, "IDR": 15500.0, "SEK": 10.5}


@dataclass(frozen=True, slots=True)
class Rate:
    from_curr: str
    to_curr: str
    rate: float


def code(currency: str | Currency) -> str:
    """Plain ISO code for an enum member or a string."""
    if isinstance(currency, Enum):
        return currency.value
    return str(currency)


def find_rate(rates: Sequence[RateLike], from_curr: str, to_curr: str) -> float | None:
    for r in rates:
        if code(r.from_curr) == from_curr and code(r.to_curr) == to_curr:
            return r.rate
    return None


def convert(
    amount: float,
    from_curr: str | Currency,
    to_curr: str | Currency,
    rates: Sequence[RateLike],
    *,
    strict: bool = False,
) -> float:
    src, dst = code(from_curr), code(to_curr)
    if src == dst:
        return amount
    if amount is None or not math.isfinite(amount):
        return 0
    if not rates:
        return amount

    direct = find_rate(rates, src, dst)
    if direct is not None:
        return amount * direct

    to_pivot = find_rate(rates, src, PIVOT)
    from_pivot = find_rate(rates, PIVOT, dst)
    if to_pivot is not None and from_pivot is not None:
        return amount * to_pivot * from_pivot

    if strict:
        raise MissingRateError(f"No conversion rate found for {src} to {dst}")
    logger.warning("No conversion rate found for %s to %s", src, dst)
    return amount


def build_rate_table(usd_base: Mapping[str, float]) -> list[Rate]:
    """Expand a USD-based quote into every directed pair of supported currencies.

    ``usd_base`` maps a currency code to units per 1 USD; USD itself is implied.
    Cross pairs are derived through USD, identity pairs are 1.
    """
    base = {PIVOT: 1.0, **{code(k): float(v) for k, v in usd_base.items()}}
    missing = [c for c in CURRENCIES if c not in base]
    if missing:
        raise ValueError(f"USD base is missing currencies: {', '.join(missing)}")
    for c in CURRENCIES:
        if base[c] <= 0 or not math.isfinite(base[c]):
            raise ValueError(f"USD base rate for {c} must be a positive number")

    table: list[Rate] = []
    for src in CURRENCIES:
        for dst in CURRENCIES:
            rate = 1.0 if src == dst else base[dst] / base[src]
            table.append(Rate(from_curr=src, to_curr=dst, rate=rate))
    return table


def format_currency(amount: float, currency: str | Currency) -> str:
    """Human-readable amount using each currency's customary separators."""
    cur = code(currency)
    decimals = _DECIMALS[cur]
    sign = "-" if amount < 0 else ""
    plain = f"{abs(amount):,.{decimals}f}"
    if cur == "USD":
        return f"{sign}${plain}"
    if cur == "IDR":
        return f"{sign}Rp {plain.replace(',', '.')}"
    # sv-SE: space for thousands, comma for decimals, symbol after.
    swedish = plain.replace(",", " ").replace(".", ",")
    return f"{sign}{swedish} kr"


def currency_symbol(currency: str | Currency) -> str:
    return _SYMBOLS[code(currency)]


def currency_name(currency: str | Currency) -> str:
    return _NAMES[code(currency)]
