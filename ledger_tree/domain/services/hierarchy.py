"""Rebuild an aggregated account tree from flat ledger rows.

Only two tiers are materialized: one root per top-level code segment, and
every deeper code attached directly to that root. Nodes keep the depth of
their own code in ``level`` so renderers can still indent by it.
"""

from collections.abc import Sequence
from dataclasses import replace
from decimal import Decimal
from logging import Logger

from ledger_tree.domain.constants import DEFAULT_ROOT_NAME_TEMPLATE
from ledger_tree.domain.errors import ValidationError
from ledger_tree.domain.models import AccountNode, LedgerRow
from ledger_tree.domain.policies import AggregationPolicy
from ledger_tree.domain.services.account_codes import (
    account_code_sort_key,
    split_account_code,
)
from ledger_tree.utils.decimal_utils import parse_amount


def build_account_forest(
    rows: Sequence[LedgerRow],
    *,
    policy: AggregationPolicy = AggregationPolicy.PER_ROW,
    root_name_template: str = DEFAULT_ROOT_NAME_TEMPLATE,
    logger: Logger | None = None,
) -> list[AccountNode]:
    """Build the ordered forest of root accounts for a set of ledger rows.

    A code that appears on several rows is attached to its root once, as
    the node recorded by its last row; the rows still roll up into the
    root totals as the policy says. Children lists never hold the same
    node twice.

    Args:
        rows: Ledger rows in source order.
        policy: How rows sharing a code roll up into their root.
        root_name_template: Name format for synthesized roots; receives
            the root code as ``code``.
        logger: Optional logger used to report duplicated codes.

    Returns:
        list[AccountNode]: Root nodes sorted by account code, each holding
        its children sorted by account code.

    Raises:
        ValidationError: If rows is not a list or tuple of LedgerRow, or a
            row carries a missing or malformed account code.
    """
    ledger_rows = _ensure_rows(rows)
    policy = AggregationPolicy.parse(policy)

    nodes: dict[str, AccountNode] = {}
    roots: dict[str, AccountNode] = {}
    entries: list[tuple[str, list[str], Decimal, Decimal]] = []
    duplicates: set[str] = set()

    for index, row in enumerate(ledger_rows):
        segments = split_account_code(row.account_code, row_index=index)
        code = row.account_code
        debit = parse_amount(row.debit)
        credit = parse_amount(row.credit)
        node = AccountNode(
            account_code=code,
            account_name=row.account_name,
            debit_total=debit,
            credit_total=credit,
            level=len(segments) - 1,
            id=row.id,
        )
        if code in nodes:
            duplicates.add(code)
        nodes[code] = node
        entries.append((code, segments, debit, credit))

        top = segments[0]
        if len(segments) == 1:
            roots[code] = node
        elif top not in roots:
            roots[top] = _synthesize_root(top, root_name_template)

    attached: set[str] = set()
    counted: set[str] = set()
    for code, segments, debit, credit in entries:
        if len(segments) == 1:
            continue
        node = nodes[code]
        root = roots[segments[0]]
        if code not in attached:
            root.children.append(node)
            attached.add(code)
        if policy is AggregationPolicy.PER_CODE:
            if code in counted:
                continue
            counted.add(code)
            debit, credit = node.debit_total, node.credit_total
        root.debit_total += debit
        root.credit_total += credit

    if duplicates and logger is not None:
        logger.warning(
            f"Duplicate account codes in ledger rows "
            f"({policy.value} aggregation): {', '.join(sorted(duplicates))}"
        )

    forest = _sorted_nodes(roots.values())
    for root in forest:
        root.children = _sorted_nodes(root.children)
    return forest


def sort_forest(forest: Sequence[AccountNode]) -> list[AccountNode]:
    """Return a copy of the forest with every level ordered by code.

    Every node is copied, so the input forest is left untouched and shares
    no node with the result.

    Args:
        forest: Root nodes, in any order.

    Returns:
        list[AccountNode]: New root nodes in ascending code order.
    """
    return [_sorted_copy(root) for root in _sorted_nodes(forest)]


def _ensure_rows(rows) -> Sequence[LedgerRow]:
    if not isinstance(rows, (list, tuple)):
        raise ValidationError(
            "Ledger rows must be a list or tuple, "
            f"got {type(rows).__name__}"
        )
    for index, row in enumerate(rows):
        if not isinstance(row, LedgerRow):
            raise ValidationError(
                f"Row {index} is not a LedgerRow: {type(row).__name__}",
                row_index=index,
            )
    return rows


def _synthesize_root(code: str, template: str) -> AccountNode:
    return AccountNode(
        account_code=code,
        account_name=template.format(code=code),
        debit_total=Decimal("0"),
        credit_total=Decimal("0"),
        level=0,
        synthesized=True,
    )


def _sorted_copy(node: AccountNode) -> AccountNode:
    return replace(
        node,
        children=[_sorted_copy(child) for child in _sorted_nodes(node.children)],
    )


def _sorted_nodes(nodes) -> list[AccountNode]:
    return sorted(
        nodes,
        key=lambda node: account_code_sort_key(node.account_code),
    )


__all__ = ["build_account_forest", "sort_forest"]
