"""Shared utilities package."""

from .decimal_utils import format_amount, parse_amount

__all__ = ["format_amount", "parse_amount"]
