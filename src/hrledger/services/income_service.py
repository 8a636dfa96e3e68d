"""Income use-case service: consultant contracts, ad/IAP revenue and income views."""
from __future__ import annotations
from datetime import date
from hrledger.config import settings
from hrledger.domain.aggregation import MONTH_ABBR, IncomeBreakdown, income_for_month
from hrledger.domain.calendar import shift_month
from hrledger.domain.enums import Currency
from hrledger.domain.exceptions import ConflictError, NotFoundError
from hrledger.domain.vat import vat_due_date, vat_schedule
from hrledger.infra.db.uow import UnitOfWork
from hrledger.infra.db.repositories.currency_repository import CurrencyRepository
from hrledger.infra.db.repositories.income_repository import IncomeRepository
from hrledger.models.finance import ConsultantContract
from hrledger.api.schemas.income import (
    AdRevenueList, AdRevenueRead, AdRevenueSet, ContractCreate, ContractList, ContractRead,
    ContractUpdate, EmployeeRef, IapRevenueList, IapRevenueRead, IapRevenueSet,
    IncomeBreakdownRead, IncomeByMonthResponse, IncomeMonthRead, IncomeSummaryRead,
    VatDueRead, VatScheduleResponse,
)
from hrledger.services.common import display_currency, get_employee_or_404


class IncomeService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def _repo(self) -> IncomeRepository:
        return IncomeRepository(self._uow.session)

    def _contract_or_404(self, contract_id: int) -> ConsultantContract:
        contract = self._repo().get_contract(contract_id)
        if contract is None:
            raise NotFoundError(f"Contract {contract_id} not found")
        return contract

    def _contract_read(self, contract: ConsultantContract) -> ContractRead:
        read = ContractRead.model_validate(contract)
        read.employees = [
            EmployeeRef.model_validate(e) for e in self._repo().list_contract_employees(contract.id)
        ]
        return read

    def _link_employees(self, contract_id: int, employee_ids: list[int]) -> None:
        for employee_id in employee_ids:
            get_employee_or_404(self._uow.session, employee_id)
        self._repo().set_contract_employees(contract_id, employee_ids)

    # --- Contracts ---

    def list_contracts(self) -> ContractList:
        contracts = self._repo().list_contracts()
        return ContractList(items=[self._contract_read(c) for c in contracts], total=len(contracts))

    def get_contract(self, contract_id: int) -> ContractRead:
        return self._contract_read(self._contract_or_404(contract_id))

    def create_contract(self, payload: ContractCreate) -> ContractRead:
        fields = payload.model_dump(exclude={"employee_ids"})
        contract = self._repo().create_contract(**fields)
        self._link_employees(contract.id, payload.employee_ids)
        self._uow.commit()
        return self._contract_read(contract)

    def update_contract(self, contract_id: int, payload: ContractUpdate) -> ContractRead:
        contract = self._contract_or_404(contract_id)
        changes = payload.model_dump(exclude_unset=True, exclude={"employee_ids"})
        # vat_rate may be cleared explicitly; other fields ignore nulls.
        changes = {k: v for k, v in changes.items() if v is not None or k == "vat_rate"}
        if changes:
            self._repo().update_contract(contract, **changes)
        if payload.employee_ids is not None:
            self._link_employees(contract.id, payload.employee_ids)
        self._uow.commit()
        return self._contract_read(contract)

    def delete_contract(self, contract_id: int) -> None:
        self._repo().delete_contract(self._contract_or_404(contract_id))
        self._uow.commit()

    # --- Ad revenue ---

    def list_ad_revenue(self, year: int | None = None) -> AdRevenueList:
        rows = self._repo().list_ad_revenue(year)
        return AdRevenueList(items=[AdRevenueRead.model_validate(r) for r in rows], total=len(rows))

    def create_ad_revenue(self, payload: AdRevenueSet) -> AdRevenueRead:
        """Insert-only variant of set_ad_revenue: one entry per month."""
        if self._repo().find_ad_revenue(payload.year, payload.month) is not None:
            raise ConflictError(f"Ad revenue for {payload.year}-{payload.month:02d} already exists")
        return self.set_ad_revenue(payload)

    def set_ad_revenue(self, payload: AdRevenueSet) -> AdRevenueRead:
        row = self._repo().upsert_ad_revenue(
            year=payload.year, month=payload.month,
            amount=payload.amount, currency=payload.currency, notes=payload.notes,
        )
        self._uow.commit()
        return AdRevenueRead.model_validate(row)

    def delete_ad_revenue(self, entry_id: int) -> None:
        row = self._repo().get_ad_revenue(entry_id)
        if row is None:
            raise NotFoundError(f"Ad revenue entry {entry_id} not found")
        self._repo().delete(row)
        self._uow.commit()

    # --- IAP revenue ---

    def list_iap_revenue(self, year: int | None = None) -> IapRevenueList:
        rows = self._repo().list_iap_revenue(year)
        return IapRevenueList(items=[IapRevenueRead.model_validate(r) for r in rows], total=len(rows))

    def set_iap_revenue(self, payload: IapRevenueSet) -> IapRevenueRead:
        row = self._repo().upsert_iap_revenue(
            platform=payload.platform, year=payload.year, month=payload.month,
            amount=payload.amount, currency=payload.currency,
        )
        self._uow.commit()
        return IapRevenueRead.model_validate(row)

    def delete_iap_revenue(self, entry_id: int) -> None:
        row = self._repo().get_iap_revenue(entry_id)
        if row is None:
            raise NotFoundError(f"IAP revenue entry {entry_id} not found")
        self._repo().delete(row)
        self._uow.commit()

    # --- Views ---

    def _income(self, year: int, month: int, currency: Currency) -> IncomeBreakdown:
        repo = self._repo()
        return income_for_month(
            year, month,
            repo.list_contracts(),
            repo.list_ad_revenue(year),
            repo.list_iap_revenue(year),
            currency.value,
            CurrencyRepository(self._uow.session).list_all(),
            strict=settings.CURRENCY_STRICT,
        )

    def summary(self, currency: Currency | None = None, today: date | None = None) -> IncomeSummaryRead:
        """Income of the last complete month (the current one is still open)."""
        cur = display_currency(currency)
        today = today or date.today()
        year, month = shift_month(today.year, today.month, -1)
        active = sum(1 for c in self._repo().list_contracts() if c.is_active)
        return IncomeSummaryRead(
            year=year,
            month=month,
            currency=cur,
            active_contracts=active,
            income=IncomeBreakdownRead.model_validate(self._income(year, month, cur)),
        )

    def by_month(
        self,
        year: int,
        through_month: int | None = None,
        currency: Currency | None = None,
        today: date | None = None,
    ) -> IncomeByMonthResponse:
        """Month-by-month income of ``year`` up to ``through_month``.

        Without ``through_month`` a past year runs to December, the current year
        to the current month and a future year yields nothing.
        """
        cur = display_currency(currency)
        if through_month is None:
            today = today or date.today()
            if year < today.year:
                through_month = 12
            elif year == today.year:
                through_month = today.month
            else:
                through_month = 0

        months: list[IncomeMonthRead] = []
        consultant = ads = iap = 0.0
        for month in range(1, through_month + 1):
            income = self._income(year, month, cur)
            consultant += income.consultant
            ads += income.ads
            iap += income.iap
            months.append(IncomeMonthRead(
                year=year,
                month=month,
                label=MONTH_ABBR[month - 1],
                income=IncomeBreakdownRead.model_validate(income),
            ))
        totals = IncomeBreakdown(consultant=consultant, ads=ads, iap=iap)
        return IncomeByMonthResponse(
            currency=cur, months=months, totals=IncomeBreakdownRead.model_validate(totals),
        )

    def vat_schedule(self, year: int, month: int, currency: Currency | None = None) -> VatScheduleResponse:
        cur = display_currency(currency)
        items = vat_schedule(
            self._repo().list_contracts(), year, month, cur.value,
            CurrencyRepository(self._uow.session).list_all(),
            due_day=settings.VAT_DUE_DAY,
            months_after=settings.VAT_DUE_MONTHS_AFTER,
            strict=settings.CURRENCY_STRICT,
        )
        return VatScheduleResponse(
            items=[VatDueRead.model_validate(i) for i in items],
            total=sum((i.vat_amount for i in items), 0.0),
            due_date=vat_due_date(
                year, month, due_day=settings.VAT_DUE_DAY, months_after=settings.VAT_DUE_MONTHS_AFTER,
            ),
        )
