"""Composition root for wiring infrastructure adapters."""

from ledger_tree.application.ports.database import DatabaseEnginePort
from ledger_tree.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from ledger_tree.application.use_cases.get_ledger_tree import (
    GetLedgerTreeUseCase,
)
from ledger_tree.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from ledger_tree.infrastructure.ledger_repository_factory import (
    create_ledger_repository,
)
from ledger_tree.infrastructure.logging.logger import get_app_logger
from ledger_tree.infrastructure.settings import LedgerSettings


def build_database_adapter(
    settings: LedgerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter for the configured LEDGER_DB_URL."""
    resolved_settings = settings or LedgerSettings.from_env()
    return SqlAlchemyDatabaseEngineAdapter(resolved_settings.db_url)


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: LedgerSettings | None = None,
) -> LedgerRepositoryPort:
    """Return the configured ledger repository."""
    resolved_settings = settings or LedgerSettings.from_env()
    resolved_db = db_port or build_database_adapter(resolved_settings)
    return create_ledger_repository(
        resolved_db,
        logger=get_app_logger(),
        settings=resolved_settings,
    )


def build_get_ledger_tree_use_case(
    settings: LedgerSettings | None = None,
) -> GetLedgerTreeUseCase:
    """Return the tree use case wired to the configured ledger source."""
    resolved_settings = settings or LedgerSettings.from_env()
    return GetLedgerTreeUseCase(
        repository=build_ledger_repository(settings=resolved_settings),
        logger=get_app_logger(),
        policy=resolved_settings.aggregation,
        root_name_template=resolved_settings.root_name_template,
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_get_ledger_tree_use_case",
]
