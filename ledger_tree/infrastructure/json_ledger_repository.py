"""Repository reading ledger rows from a JSON export of the collections API."""

import json
from pathlib import Path

from ledger_tree.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from ledger_tree.domain.models import LedgerRow
from ledger_tree.domain.services.records import (
    DEFAULT_FIELD_MAP,
    LedgerFieldMap,
    rows_from_records,
)
from ledger_tree.infrastructure.logging.logger import get_app_logger


class JsonFileLedgerRepository(LedgerRepositoryPort):
    """Ledger source backed by a JSON array file."""

    def __init__(
        self,
        path: Path | str,
        field_map: LedgerFieldMap = DEFAULT_FIELD_MAP,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            path: Path of the JSON file holding an array of records.
            field_map: Payload field names to read.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._field_map = field_map
        self._logger = logger or get_app_logger()

    def fetch_ledger_rows(self) -> list[LedgerRow]:
        """Return ledger rows in file order.

        Raises:
            RuntimeError: If the file is missing or is not valid JSON.
            ValidationError: If the payload is not an array of records
                with account codes.
        """
        if not self._path.exists():
            raise RuntimeError(f"Ledger file not found: {self._path}")
        try:
            with self._path.open(encoding="utf-8") as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise RuntimeError(
                f"Ledger file {self._path} is not valid JSON: {exc}"
            ) from exc
        rows = rows_from_records(payload, self._field_map)
        self._logger.info(f"Read {len(rows)} ledger rows from {self._path}")
        return rows


__all__ = ["JsonFileLedgerRepository"]
