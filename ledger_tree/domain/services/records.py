"""Map raw ledger payload records to LedgerRow objects."""

from collections.abc import Mapping
from dataclasses import dataclass

from ledger_tree.domain.errors import ValidationError
from ledger_tree.domain.models import LedgerRow


@dataclass(frozen=True)
class LedgerFieldMap:
    """Names of the payload fields holding each ledger row attribute."""

    id: str = "id"
    account_code: str = "account_code"
    account_name: str = "account_name"
    debit: str = "debit"
    credit: str = "credit"


DEFAULT_FIELD_MAP = LedgerFieldMap()

# Field names used by the legacy collections API export.
LEGACY_FIELD_MAP = LedgerFieldMap(
    account_code="hesap_kodu",
    account_name="hesap_adi",
    debit="borc",
    credit="alacak",
)

_FIELD_MAPS = {
    "default": DEFAULT_FIELD_MAP,
    "legacy": LEGACY_FIELD_MAP,
}


def get_field_map(name: str) -> LedgerFieldMap:
    """Return a named field map.

    Raises:
        ValueError: If no field map has that name.
    """
    normalized = name.strip().lower()
    if normalized not in _FIELD_MAPS:
        raise ValueError(
            f"Unsupported field map: {name}. "
            f"Expected one of {', '.join(sorted(_FIELD_MAPS))}."
        )
    return _FIELD_MAPS[normalized]


def rows_from_records(
    records,
    field_map: LedgerFieldMap = DEFAULT_FIELD_MAP,
) -> list[LedgerRow]:
    """Convert decoded payload records into ledger rows.

    Args:
        records: Decoded payload, expected to be a list of mappings.
        field_map: Payload field names to read.

    Returns:
        list[LedgerRow]: Rows in payload order, amounts left unparsed.

    Raises:
        ValidationError: If the payload is not an array, a record is not a
            mapping, or a record has no account code.
    """
    if not isinstance(records, list):
        raise ValidationError(
            f"Ledger payload is not an array: {type(records).__name__}"
        )
    rows = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise ValidationError(
                f"Ledger record {index} is not an object",
                row_index=index,
            )
        code = record.get(field_map.account_code)
        if not code:
            raise ValidationError(
                f"Ledger record {index} has no "
                f"'{field_map.account_code}' value",
                row_index=index,
            )
        rows.append(
            LedgerRow(
                id=record.get(field_map.id),
                account_code=code,
                account_name=record.get(field_map.account_name) or "",
                debit=record.get(field_map.debit),
                credit=record.get(field_map.credit),
            )
        )
    return rows


__all__ = [
    "LedgerFieldMap",
    "DEFAULT_FIELD_MAP",
    "LEGACY_FIELD_MAP",
    "get_field_map",
    "rows_from_records",
]
