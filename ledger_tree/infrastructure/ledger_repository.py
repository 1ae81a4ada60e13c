"""SQLAlchemy-backed repository for flat ledger entries."""

from sqlalchemy import text

from ledger_tree.application.ports.database import DatabaseEnginePort
from ledger_tree.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from ledger_tree.domain.models import LedgerRow


SELECT_LEDGER_ROWS_SQL = text(
    """
    SELECT id, account_code, account_name, debit, credit
    FROM ledger_entries
    ORDER BY id
    """
)


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for the ledger_entries table."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_ledger_rows(self) -> list[LedgerRow]:
        """Return ledger rows ordered by id."""
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(SELECT_LEDGER_ROWS_SQL).all()
        return [
            LedgerRow(
                id=row.id,
                account_code=row.account_code,
                account_name=row.account_name or "",
                debit=row.debit,
                credit=row.credit,
            )
            for row in rows
        ]


__all__ = ["SqlAlchemyLedgerRepository"]
