"""Tests for the render walk over the account forest."""

from ledger_tree.domain.models import LedgerRow
from ledger_tree.domain.services.hierarchy import build_account_forest
from ledger_tree.domain.services.traversal import (
    expand_all,
    iter_nodes,
    iter_visible_rows,
    toggle_expanded,
)


def _forest():
    rows = [
        LedgerRow(id=1, account_code="100", account_name="Cash"),
        LedgerRow(id=2, account_code="100.01", account_name="Till"),
        LedgerRow(id=3, account_code="100.01.05", account_name="Drawer"),
        LedgerRow(id=4, account_code="200", account_name="Bank"),
        LedgerRow(id=5, account_code="300.01", account_name="Loan"),
    ]
    return build_account_forest(rows)


def test_collapsed_forest_shows_roots_only() -> None:
    rows = list(iter_visible_rows(_forest()))

    assert [row.node.account_code for row in rows] == ["100", "200", "300"]
    assert [row.has_children for row in rows] == [True, False, True]
    assert not any(row.is_expanded for row in rows)


def test_expanded_root_shows_children_after_it() -> None:
    rows = list(iter_visible_rows(_forest(), {"100"}))

    assert [(row.node.account_code, row.level) for row in rows] == [
        ("100", 0),
        ("100.01", 1),
        ("100.01.05", 2),
        ("200", 0),
        ("300", 0),
    ]
    assert rows[0].is_expanded is True


def test_toggle_expanded_is_pure() -> None:
    expanded = frozenset({"100"})

    opened = toggle_expanded(expanded, "300")
    closed = toggle_expanded(opened, "100")

    assert expanded == {"100"}
    assert opened == {"100", "300"}
    assert closed == {"300"}


def test_expand_all_and_iter_nodes() -> None:
    forest = _forest()

    assert expand_all(forest) == {"100", "300"}
    assert [node.account_code for node in iter_nodes(forest)] == [
        "100",
        "100.01",
        "100.01.05",
        "200",
        "300",
        "300.01",
    ]
    visible = list(iter_visible_rows(forest, expand_all(forest)))
    assert len(visible) == 6
