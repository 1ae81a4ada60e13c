"""Domain models package."""

from .ledger import AccountNode, LedgerRow, VisibleRow

__all__ = ["AccountNode", "LedgerRow", "VisibleRow"]
