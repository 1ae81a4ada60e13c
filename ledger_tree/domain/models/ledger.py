"""Domain models for ledger rows and the account tree."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class LedgerRow:
    """Flat ledger entry as delivered by a ledger source.

    Amounts are kept raw; the hierarchy builder parses them.
    """

    id: Any
    account_code: str
    account_name: str
    debit: Any = None
    credit: Any = None


@dataclass
class AccountNode:
    """Account in the rebuilt tree with its aggregated totals.

    Attributes:
        account_code: Dot-delimited account code.
        account_name: Display name of the account.
        debit_total: Own debit plus, for roots, the debits of its children.
        credit_total: Own credit plus, for roots, the credits of its children.
        level: Depth of the code (segment count minus one).
        children: Child nodes ordered by account code.
        id: Identifier of the source row, None for synthesized roots.
        synthesized: True when no ledger row carried this code.
    """

    account_code: str
    account_name: str
    debit_total: Decimal
    credit_total: Decimal
    level: int
    children: list["AccountNode"] = field(default_factory=list)
    id: Any = None
    synthesized: bool = False

    @property
    def has_children(self) -> bool:
        """Return True when the node has at least one child."""
        return bool(self.children)


@dataclass(frozen=True)
class VisibleRow:
    """Node emitted by the render walk with its expand state."""

    node: AccountNode
    level: int
    has_children: bool
    is_expanded: bool


__all__ = ["LedgerRow", "AccountNode", "VisibleRow"]
