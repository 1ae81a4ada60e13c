"""CLI adapter to rebuild and print the aggregated account tree.

The tree is read from the configured ledger source (see LedgerSettings).
LEDGER_EXPAND selects which accounts show their children: "*" expands
every account, otherwise a comma-separated list of account codes.
"""

import os
import sys

from ledger_tree.domain.errors import ValidationError
from ledger_tree.domain.services.traversal import expand_all, iter_visible_rows
from ledger_tree.infrastructure.container import build_get_ledger_tree_use_case
from ledger_tree.infrastructure.logging.logger import get_app_logger
from ledger_tree.utils.decimal_utils import format_amount


def _parse_expanded(raw: str | None, forest) -> frozenset[str]:
    """Parse the LEDGER_EXPAND value into a set of account codes."""
    if not raw:
        return frozenset()
    if raw.strip() == "*":
        return expand_all(forest)
    return frozenset(code.strip() for code in raw.split(",") if code.strip())


def main() -> int:
    """Build the account tree and print it as an indented outline."""
    logger = get_app_logger()
    try:
        use_case = build_get_ledger_tree_use_case()
        result = use_case.execute()
    except ValidationError as exc:
        logger.error(f"Invalid ledger data: {exc}")
        return 1
    except (RuntimeError, ValueError) as exc:
        logger.error(f"Cannot load ledger: {exc}")
        return 1

    print(
        f"Built {result.root_count} root accounts "
        f"({result.synthesized_root_count} synthesized) "
        f"from {result.row_count} ledger rows. "
        f"debit={format_amount(result.debit_total)} "
        f"credit={format_amount(result.credit_total)}"
    )
    expanded = _parse_expanded(os.getenv("LEDGER_EXPAND"), result.forest)
    for row in iter_visible_rows(result.forest, expanded):
        marker = " "
        if row.has_children:
            marker = "-" if row.is_expanded else "+"
        indent = "  " * row.level
        print(
            f"{indent}{marker} {row.node.account_code}  "
            f"{row.node.account_name}  "
            f"{format_amount(row.node.debit_total)}  "
            f"{format_amount(row.node.credit_total)}"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
