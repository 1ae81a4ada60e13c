"""Domain services package."""

from .account_codes import (
    account_code_sort_key,
    account_level,
    root_code,
    split_account_code,
)
from .hierarchy import build_account_forest, sort_forest
from .records import (
    DEFAULT_FIELD_MAP,
    LEGACY_FIELD_MAP,
    LedgerFieldMap,
    get_field_map,
    rows_from_records,
)
from .traversal import (
    expand_all,
    iter_nodes,
    iter_visible_rows,
    toggle_expanded,
)

__all__ = [
    "account_code_sort_key",
    "account_level",
    "root_code",
    "split_account_code",
    "build_account_forest",
    "sort_forest",
    "DEFAULT_FIELD_MAP",
    "LEGACY_FIELD_MAP",
    "LedgerFieldMap",
    "get_field_map",
    "rows_from_records",
    "expand_all",
    "iter_nodes",
    "iter_visible_rows",
    "toggle_expanded",
]
