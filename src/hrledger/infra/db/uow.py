"""Unit of Work: one session per use-case call."""
from __future__ import annotations
from sqlalchemy.engine import Engine
from sqlmodel import Session
from hrledger.infra.db.engine import engine


class UnitOfWork:
    """Context manager around one session.

    Commits on clean exit, rolls back on exception, always closes. The engine
    is looked up at ``__enter__`` so tests can swap the module-level one.
    """

    def __init__(self, bind: Engine | None = None) -> None:
        self._bind = bind
        self._session: Session | None = None

    def __enter__(self) -> "UnitOfWork":
        self._session = Session(self._bind or engine)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                self._session.commit()
            else:
                self._session.rollback()
        finally:
            self._session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("UnitOfWork is not active; use it as a context manager.")
        return self._session

    def commit(self) -> None:
        """Mid-operation commit, so generated ids and upserts are visible to callers."""
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
