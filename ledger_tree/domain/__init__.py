"""Domain package for account tree rules and core models."""

from .constants import DEFAULT_ROOT_NAME_TEMPLATE, SEGMENT_SEPARATOR
from .errors import ValidationError
from .models import AccountNode, LedgerRow, VisibleRow
from .policies import AggregationPolicy
from .services import (
    build_account_forest,
    iter_visible_rows,
    rows_from_records,
    sort_forest,
    toggle_expanded,
)

__all__ = [
    "AccountNode",
    "LedgerRow",
    "VisibleRow",
    "AggregationPolicy",
    "ValidationError",
    "DEFAULT_ROOT_NAME_TEMPLATE",
    "SEGMENT_SEPARATOR",
    "build_account_forest",
    "iter_visible_rows",
    "rows_from_records",
    "sort_forest",
    "toggle_expanded",
]
