"""Engine singleton and database initialisation."""
from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine, select
from hrledger.config import settings
from hrledger.logging import logger


def _make_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # FastAPI serves sync endpoints from a threadpool.
        connect_args["check_same_thread"] = False
        if url.startswith("sqlite:///") and ":memory:" not in url:
            settings.data_dir.mkdir(parents=True, exist_ok=True)
    return create_engine(url, echo=False, connect_args=connect_args)


engine = _make_engine(settings.DATABASE_URL)


def seed_currency_rates(target: Engine) -> int:
    """Insert the default rate table when no rates exist yet. Returns rows inserted."""
    from hrledger.domain.currency import DEFAULT_USD_BASE, build_rate_table
    from hrledger.models.core import CurrencyRate

    with Session(target) as session:
        existing = session.exec(select(func.count()).select_from(CurrencyRate)).one()
        if existing:
            return 0
        table = build_rate_table(DEFAULT_USD_BASE)
        for r in table:
            session.add(CurrencyRate(from_curr=r.from_curr, to_curr=r.to_curr, rate=r.rate))
        session.commit()
    logger.info("Seeded %d default currency rates", len(table))
    return len(table)


def init_db(target: Engine | None = None) -> None:
    import hrledger.models  # noqa: F401  # registers table mappers
    target = target or engine
    SQLModel.metadata.create_all(target)
    seed_currency_rates(target)
    logger.info("Database initialized at %s", target.url)
