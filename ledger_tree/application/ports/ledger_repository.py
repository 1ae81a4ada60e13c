"""Port for retrieving flat ledger rows."""

from typing import Protocol

from ledger_tree.domain.models import LedgerRow


class LedgerRepositoryPort(Protocol):
    """Port exposing the flat ledger rows to build a tree from."""

    def fetch_ledger_rows(self) -> list[LedgerRow]:
        """Return every ledger row, in source order."""


__all__ = ["LedgerRepositoryPort"]
