"""Factory helpers to select the ledger source backend."""

from ledger_tree.application.ports.database import DatabaseEnginePort
from ledger_tree.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from ledger_tree.domain.services.records import get_field_map
from ledger_tree.infrastructure.json_ledger_repository import (
    JsonFileLedgerRepository,
)
from ledger_tree.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from ledger_tree.infrastructure.logging.logger import get_app_logger
from ledger_tree.infrastructure.settings import LedgerSettings


def create_ledger_repository(
    db_port: DatabaseEnginePort,
    logger=None,
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return a ledger repository implementation based on configuration.

    Args:
        db_port: Port providing access to the ledger engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings override; read from the environment
            when omitted.

    Returns:
        LedgerRepositoryPort: Concrete repository implementation.

    Raises:
        RuntimeError: If the json backend has no LEDGER_FILE.
        ValueError: If the backend or field map is unsupported.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or LedgerSettings.from_env()
    backend = resolved_settings.backend

    if backend == "sqlalchemy":
        return SqlAlchemyLedgerRepository(db_port)

    if backend == "json":
        if resolved_settings.ledger_file is None:
            raise RuntimeError("JSON ledger backend requires a LEDGER_FILE path.")
        return JsonFileLedgerRepository(
            resolved_settings.ledger_file,
            field_map=get_field_map(resolved_settings.field_map),
            logger=resolved_logger,
        )

    raise ValueError(
        f"Unsupported ledger backend: {backend}. Expected sqlalchemy or json."
    )


__all__ = ["create_ledger_repository"]
