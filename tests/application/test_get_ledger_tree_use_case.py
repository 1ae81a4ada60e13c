"""Tests for the GetLedgerTreeUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from ledger_tree.application.use_cases.get_ledger_tree import (
    GetLedgerTreeUseCase,
)
from ledger_tree.domain.errors import ValidationError
from ledger_tree.domain.models import LedgerRow
from ledger_tree.domain.policies import AggregationPolicy


def _build_repository(rows: list[LedgerRow]) -> MagicMock:
    repository = MagicMock()
    repository.fetch_ledger_rows.return_value = rows
    return repository


def test_execute_builds_forest_and_totals() -> None:
    """Use case should build the forest and summarize it."""
    rows = [
        LedgerRow(id=1, account_code="120", account_name="Cash", debit=100),
        LedgerRow(id=2, account_code="120.01", account_name="A", debit=40),
        LedgerRow(id=3, account_code="300.01", account_name="X", credit=5),
    ]
    repository = _build_repository(rows)
    logger = MagicMock()

    use_case = GetLedgerTreeUseCase(repository=repository, logger=logger)

    result = use_case.execute()

    assert [root.account_code for root in result.forest] == ["120", "300"]
    assert result.row_count == 3
    assert result.root_count == 2
    assert result.synthesized_root_count == 1
    assert result.debit_total == Decimal("140")
    assert result.credit_total == Decimal("5")
    repository.fetch_ledger_rows.assert_called_once_with()
    logger.info.assert_called_once()


def test_execute_applies_policy_and_template() -> None:
    rows = [
        LedgerRow(id=1, account_code="7.1", account_name="a", debit=2),
        LedgerRow(id=2, account_code="7.1", account_name="b", debit=3),
    ]
    use_case = GetLedgerTreeUseCase(
        repository=_build_repository(rows),
        logger=MagicMock(),
        policy=AggregationPolicy.PER_CODE,
        root_name_template="Root {code}",
    )

    result = use_case.execute()

    root = result.forest[0]
    assert root.account_name == "Root 7"
    assert root.debit_total == Decimal("3")


def test_execute_rebuilds_from_scratch_each_call() -> None:
    rows = [LedgerRow(id=1, account_code="1.1", account_name="a", debit=1)]
    repository = _build_repository(rows)
    use_case = GetLedgerTreeUseCase(repository=repository, logger=MagicMock())

    first = use_case.execute()
    repository.fetch_ledger_rows.return_value = rows + [
        LedgerRow(id=2, account_code="1.2", account_name="b", debit=2)
    ]
    second = use_case.execute()

    assert first.forest[0].debit_total == Decimal("1")
    assert second.forest[0].debit_total == Decimal("3")
    assert len(first.forest[0].children) == 1


def test_execute_logs_and_reraises_validation_errors() -> None:
    rows = [LedgerRow(id=1, account_code="", account_name="broken")]
    logger = MagicMock()
    use_case = GetLedgerTreeUseCase(
        repository=_build_repository(rows),
        logger=logger,
    )

    with pytest.raises(ValidationError):
        use_case.execute()

    logger.error.assert_called_once()
    logger.info.assert_not_called()
