"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


_ZERO = Decimal("0")


def parse_amount(value) -> Decimal:
    """Normalize a raw debit or credit value to Decimal.

    Missing, empty, non-numeric and non-finite values parse to zero.
    Negative values are kept as-is.

    Args:
        value: Raw amount from a ledger source (number, string or None).

    Returns:
        Decimal: Parsed amount.
    """
    if value is None or isinstance(value, bool):
        return _ZERO
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, (int, float)):
        parsed = Decimal(str(value))
    elif isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            return _ZERO
        try:
            parsed = Decimal(cleaned)
        except InvalidOperation:
            return _ZERO
    else:
        return _ZERO
    if not parsed.is_finite():
        return _ZERO
    return parsed


def format_amount(value: Decimal, places: int = 2) -> str:
    """Format an amount with a fixed number of decimal places."""
    return f"{value:.{places}f}"


__all__ = ["parse_amount", "format_amount"]
