"""Application use cases package."""

from .get_ledger_tree import GetLedgerTreeUseCase, LedgerTreeResult

__all__ = ["GetLedgerTreeUseCase", "LedgerTreeResult"]
