"""Helpers for dot-delimited account codes."""

import locale

from ledger_tree.domain.constants import SEGMENT_SEPARATOR
from ledger_tree.domain.errors import ValidationError


def split_account_code(code, row_index: int | None = None) -> list[str]:
    """Validate an account code and split it into segments.

    Args:
        code: Raw account code, e.g. "120.01.03".
        row_index: Position of the row in the input, used in error messages.

    Returns:
        list[str]: Code segments, top-level first.

    Raises:
        ValidationError: If the code is missing, empty, not a string or has
            an empty segment.
    """
    where = f" at row {row_index}" if row_index is not None else ""
    if not isinstance(code, str):
        raise ValidationError(
            f"Account code{where} must be a string, got {type(code).__name__}",
            row_index=row_index,
        )
    if not code:
        raise ValidationError(
            f"Account code{where} is empty",
            row_index=row_index,
        )
    segments = code.split(SEGMENT_SEPARATOR)
    if any(not segment for segment in segments):
        raise ValidationError(
            f"Account code{where} has an empty segment: {code!r}",
            row_index=row_index,
        )
    return segments


def root_code(code: str) -> str:
    """Return the top-level segment of an account code."""
    return split_account_code(code)[0]


def account_level(code: str) -> int:
    """Return the depth of an account code (segment count minus one)."""
    return len(split_account_code(code)) - 1


def account_code_sort_key(code: str) -> str:
    """Return the locale-aware collation key for an account code.

    The key follows the process-wide LC_COLLATE setting. Under the default
    C locale it is plain code-point order; an application that calls
    locale.setlocale changes the ordering of every forest built afterwards.
    """
    return locale.strxfrm(code)


__all__ = [
    "split_account_code",
    "root_code",
    "account_level",
    "account_code_sort_key",
]
