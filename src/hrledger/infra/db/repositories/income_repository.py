"""Repository for income entities (consultant contracts, ad and IAP revenue)."""
from __future__ import annotations
from typing import Any, Iterable
from sqlalchemy import delete
from sqlmodel import Session, select
from hrledger.domain.enums import Platform
from hrledger.models.core import Employee
from hrledger.models.finance import AdRevenue, ConsultantContract, ContractEmployeeLink, IapRevenue


class IncomeRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    # --- ConsultantContract ---

    def get_contract(self, contract_id: int) -> ConsultantContract | None:
        return self._s.get(ConsultantContract, contract_id)

    def list_contracts(self) -> list[ConsultantContract]:
        return list(self._s.exec(
            select(ConsultantContract).order_by(ConsultantContract.company_name)
        ).all())

    def create_contract(self, **fields: Any) -> ConsultantContract:
        contract = ConsultantContract(**fields)
        self._s.add(contract)
        self._s.flush()
        return contract

    def update_contract(self, contract: ConsultantContract, **changes: Any) -> ConsultantContract:
        for key, value in changes.items():
            setattr(contract, key, value)
        self._s.add(contract)
        self._s.flush()
        return contract

    def delete_contract(self, contract: ConsultantContract) -> None:
        self._s.exec(delete(ContractEmployeeLink).where(ContractEmployeeLink.contract_id == contract.id))
        self._s.delete(contract)
        self._s.flush()

    def list_contract_employees(self, contract_id: int) -> list[Employee]:
        return list(self._s.exec(
            select(Employee)
            .join(ContractEmployeeLink, ContractEmployeeLink.employee_id == Employee.id)
            .where(ContractEmployeeLink.contract_id == contract_id)
            .order_by(Employee.name)
        ).all())

    def set_contract_employees(self, contract_id: int, employee_ids: Iterable[int]) -> None:
        self._s.exec(delete(ContractEmployeeLink).where(ContractEmployeeLink.contract_id == contract_id))
        for employee_id in sorted(set(employee_ids)):
            self._s.add(ContractEmployeeLink(contract_id=contract_id, employee_id=employee_id))
        self._s.flush()

    # --- AdRevenue ---

    def get_ad_revenue(self, entry_id: int) -> AdRevenue | None:
        return self._s.get(AdRevenue, entry_id)

    def list_ad_revenue(self, year: int | None = None) -> list[AdRevenue]:
        stmt = select(AdRevenue)
        if year is not None:
            stmt = stmt.where(AdRevenue.year == year)
        return list(self._s.exec(stmt.order_by(AdRevenue.year.desc(), AdRevenue.month.desc())).all())

    def find_ad_revenue(self, year: int, month: int) -> AdRevenue | None:
        return self._s.exec(
            select(AdRevenue).where(AdRevenue.year == year, AdRevenue.month == month)
        ).first()

    def upsert_ad_revenue(self, *, year: int, month: int, **fields: Any) -> AdRevenue:
        row = self.find_ad_revenue(year, month)
        if row is None:
            row = AdRevenue(year=year, month=month, **fields)
        else:
            for key, value in fields.items():
                setattr(row, key, value)
        self._s.add(row)
        self._s.flush()
        return row

    # --- IapRevenue ---

    def get_iap_revenue(self, entry_id: int) -> IapRevenue | None:
        return self._s.get(IapRevenue, entry_id)

    def list_iap_revenue(self, year: int | None = None) -> list[IapRevenue]:
        stmt = select(IapRevenue)
        if year is not None:
            stmt = stmt.where(IapRevenue.year == year)
        return list(self._s.exec(
            stmt.order_by(IapRevenue.year.desc(), IapRevenue.month.desc(), IapRevenue.platform)
        ).all())

    def upsert_iap_revenue(self, *, platform: Platform, year: int, month: int, **fields: Any) -> IapRevenue:
        row = self._s.exec(
            select(IapRevenue).where(
                IapRevenue.platform == platform, IapRevenue.year == year, IapRevenue.month == month,
            )
        ).first()
        if row is None:
            row = IapRevenue(platform=platform, year=year, month=month, **fields)
        else:
            for key, value in fields.items():
                setattr(row, key, value)
        self._s.add(row)
        self._s.flush()
        return row

    def delete(self, row: AdRevenue | IapRevenue) -> None:
        self._s.delete(row)
        self._s.flush()
