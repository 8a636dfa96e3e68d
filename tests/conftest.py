"""Shared test fixtures.

  use_test_engine  : redirects UoW + infra layer to a temp-file SQLite DB.
  client           : FastAPI TestClient wired to the test engine.
  make_employee    : inserts an Employee row directly through a session.
"""
from datetime import date
import pytest
from sqlmodel import SQLModel, Session, create_engine


@pytest.fixture
def use_test_engine(tmp_path, monkeypatch):
    """Monkeypatch infra/db engine references to an isolated temp-file SQLite DB,
    seeded with the default rate table."""
    db_path = tmp_path / "test_hrledger.db"
    test_engine = create_engine(
        f"sqlite:///{db_path}", echo=False, connect_args={"check_same_thread": False},
    )

    import hrledger.models  # noqa: F401  # register all ORM mappers
    from hrledger.db import seed_currency_rates
    SQLModel.metadata.create_all(test_engine)
    seed_currency_rates(test_engine)

    monkeypatch.setattr("hrledger.infra.db.engine.engine", test_engine)
    monkeypatch.setattr("hrledger.infra.db.uow.engine", test_engine)

    yield test_engine

    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def client(use_test_engine):
    """FastAPI TestClient backed by the isolated test engine."""
    from fastapi.testclient import TestClient
    from hrledger.api.app import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_employee(use_test_engine):
    from hrledger.domain.enums import Currency
    from hrledger.models.core import Employee

    def _make(name="Ada", salary=4000.0, currency=Currency.USD, position="Engineer"):
        with Session(use_test_engine) as s:
            emp = Employee(
                name=name, position=position, salary=salary,
                currency=currency, start_date=date(2023, 1, 2),
            )
            s.add(emp)
            s.commit()
            s.refresh(emp)
            return emp.id

    return _make
