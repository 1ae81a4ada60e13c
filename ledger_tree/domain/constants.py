"""Domain constants for account code handling."""

SEGMENT_SEPARATOR = "."

DEFAULT_ROOT_NAME_TEMPLATE = "Account {code}"


__all__ = ["SEGMENT_SEPARATOR", "DEFAULT_ROOT_NAME_TEMPLATE"]
