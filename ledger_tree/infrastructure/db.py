"""SQLAlchemy engine for the ledger database.

The database URL comes from LedgerSettings (LEDGER_DB_URL); the engine is
created on first use, so the JSON backend never needs one.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError

from ledger_tree.application.ports.database import DatabaseEnginePort


def create_ledger_engine(db_url: str) -> Engine:
    """Create an engine for the ledger database.

    SQLite files keep SQLAlchemy's default pool. Server databases get a
    small pool that checks connections before handing them out.

    Args:
        db_url: SQLAlchemy database URL.

    Returns:
        Engine: Engine bound to the ledger database.

    Raises:
        RuntimeError: If the URL cannot be parsed.
    """
    try:
        url = make_url(db_url)
    except ArgumentError as exc:
        raise RuntimeError(f"Invalid LEDGER_DB_URL: {exc}") from exc
    if url.get_backend_name() == "sqlite":
        return create_engine(url)
    return create_engine(
        url,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
    )


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort holding one lazily created ledger engine."""

    def __init__(
        self,
        db_url: str | None,
        engine_factory=create_ledger_engine,
    ) -> None:
        """Initialize the adapter.

        Args:
            db_url: Ledger database URL, None when not configured.
            engine_factory: Callable turning a URL into an Engine.
        """
        self._db_url = db_url
        self._engine_factory = engine_factory
        self._engine: Engine | None = None

    def get_ledger_engine(self) -> Engine:
        """Return the ledger engine, creating it on first call.

        Raises:
            RuntimeError: If no database URL is configured.
        """
        if self._engine is None:
            if not self._db_url:
                raise RuntimeError(
                    "LEDGER_DB_URL is required for the sqlalchemy ledger "
                    "backend."
                )
            self._engine = self._engine_factory(self._db_url)
        return self._engine


__all__ = ["create_ledger_engine", "SqlAlchemyDatabaseEngineAdapter"]
