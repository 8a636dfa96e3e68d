"""VAT owed on consultant invoices and when it falls due."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from hrledger.domain.calendar import day_in_month, shift_month
from hrledger.domain.currency import code, convert
from hrledger.domain.records import ContractLike, RateLike


@dataclass(frozen=True, slots=True)
class VatDue:
    contract_id: int
    company_name: str
    year: int
    month: int
    vat_rate: float
    vat_amount: float
    currency: str
    due_date: date


def vat_due_date(year: int, month: int, *, due_day: int, months_after: int) -> date:
    """Day ``due_day`` of the month ``months_after`` months after the invoiced month."""
    due_year, due_month = shift_month(year, month, months_after)
    return day_in_month(due_year, due_month, due_day)


def vat_schedule(
    contracts: Iterable[ContractLike],
    year: int,
    month: int,
    display_currency: str,
    rates: Sequence[RateLike],
    *,
    due_day: int,
    months_after: int,
    strict: bool = False,
) -> list[VatDue]:
    """VAT on one month's fee for every active contract that charges VAT."""
    currency = code(display_currency)
    due = vat_due_date(year, month, due_day=due_day, months_after=months_after)
    items: list[VatDue] = []
    for c in contracts:
        if not c.is_active or not c.vat_rate:
            continue
        fee = convert(c.monthly_fee, c.currency, currency, rates, strict=strict)
        items.append(VatDue(
            contract_id=c.id,
            company_name=c.company_name,
            year=year,
            month=month,
            vat_rate=c.vat_rate,
            vat_amount=fee * c.vat_rate,
            currency=currency,
            due_date=due,
        ))
    return items
