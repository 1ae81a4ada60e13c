"""Ledger tree: rebuild an account hierarchy from flat ledger entries."""

__all__: list[str] = []
