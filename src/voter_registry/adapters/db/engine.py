"""SQLAlchemy engine factory.

Every engine in the project comes from `make_engine`, so SQLite connections
always get the same PRAGMAs. Other backends are used as configured.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

SQLITE_NAMES = {"sqlite", "sqlite+pysqlite"}
SQLITE_BUSY_TIMEOUT_MS = 5000

#: Applied, in order, on every new SQLite DBAPI connection.
SQLITE_PRAGMAS = (
    # wait for a competing writer instead of failing with "database is locked"
    f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS}",
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
    "PRAGMA temp_store=MEMORY",
)


def is_sqlite(url: str | URL) -> bool:
    """Return True if ``url`` points at a SQLite database."""
    return make_url(str(url)).get_backend_name() in SQLITE_NAMES


def _apply_sqlite_pragmas(dbapi_conn, _conn_record) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(pragma)
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an Engine for ``url``.

    Args:
        url: Database URL.
        echo: Log emitted SQL through the ``sqlalchemy.engine`` logger.

    Returns:
        Engine: The engine, with SQLITE_PRAGMAS hooked on connect for SQLite.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", _apply_sqlite_pragmas)
    return engine
