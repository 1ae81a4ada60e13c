"""Use case to rebuild the aggregated account tree from the ledger."""

from dataclasses import dataclass
from decimal import Decimal

from ledger_tree.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from ledger_tree.domain.constants import DEFAULT_ROOT_NAME_TEMPLATE
from ledger_tree.domain.errors import ValidationError
from ledger_tree.domain.models import AccountNode
from ledger_tree.domain.policies import AggregationPolicy
from ledger_tree.domain.services.hierarchy import build_account_forest
from ledger_tree.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerTreeResult:
    """Result of a tree rebuild.

    Attributes:
        forest: Root accounts ordered by code.
        row_count: Number of ledger rows read from the source.
        root_count: Number of root accounts in the forest.
        synthesized_root_count: Roots created without an explicit row.
        debit_total: Sum of root debit totals.
        credit_total: Sum of root credit totals.
    """

    forest: list[AccountNode]
    row_count: int
    root_count: int
    synthesized_root_count: int
    debit_total: Decimal
    credit_total: Decimal


class GetLedgerTreeUseCase:
    """Fetch ledger rows and rebuild the account tree from scratch."""

    def __init__(
        self,
        repository: LedgerRepositoryPort,
        logger=None,
        policy: AggregationPolicy = AggregationPolicy.PER_ROW,
        root_name_template: str = DEFAULT_ROOT_NAME_TEMPLATE,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing the flat ledger rows.
            logger: Optional logger compatible with logging.Logger-like API.
            policy: How duplicated codes roll up into their root.
            root_name_template: Name format for synthesized roots.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._policy = policy
        self._root_name_template = root_name_template

    def execute(self) -> LedgerTreeResult:
        """Return the account forest built from the current ledger rows.

        Raises:
            ValidationError: If the ledger rows are invalid. No partial
                forest is returned.
        """
        rows = self._repository.fetch_ledger_rows()
        try:
            forest = build_account_forest(
                rows,
                policy=self._policy,
                root_name_template=self._root_name_template,
                logger=self._logger,
            )
        except ValidationError as exc:
            self._logger.error(f"Cannot build account tree: {exc}")
            raise

        debit_total = sum(
            (root.debit_total for root in forest),
            start=Decimal("0"),
        )
        credit_total = sum(
            (root.credit_total for root in forest),
            start=Decimal("0"),
        )
        synthesized = sum(1 for root in forest if root.synthesized)
        self._logger.info(
            f"Built {len(forest)} root accounts "
            f"({synthesized} synthesized) from {len(rows)} ledger rows"
        )
        return LedgerTreeResult(
            forest=forest,
            row_count=len(rows),
            root_count=len(forest),
            synthesized_root_count=synthesized,
            debit_total=debit_total,
            credit_total=credit_total,
        )


__all__ = ["GetLedgerTreeUseCase", "LedgerTreeResult"]
