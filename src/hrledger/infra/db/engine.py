"""Re-export the singleton engine from hrledger.db and enforce SQLite foreign keys."""
from sqlalchemy import event
from hrledger.db import engine          # singleton; created once at hrledger.db import
import hrledger.models  # noqa: F401   # registers all ORM table mappers


def _set_sqlite_pragmas(dbapi_conn, _):
    cur = dbapi_conn.cursor()
    cur.execute("PRAGMA foreign_keys=ON")
    cur.execute("PRAGMA journal_mode=WAL")
    cur.close()


if engine.dialect.name == "sqlite":
    event.listen(engine, "connect", _set_sqlite_pragmas)

__all__ = ["engine"]
