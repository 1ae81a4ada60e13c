"""Policies controlling how child rows roll up into their root."""

from enum import Enum


class AggregationPolicy(str, Enum):
    """How rows sharing an account code contribute to the root totals.

    PER_ROW adds every row, so duplicated codes are counted once per row
    while the leaf node only shows the last row. PER_CODE adds each
    distinct code once, using the values of the node that survived.
    """

    PER_ROW = "per_row"
    PER_CODE = "per_code"

    @classmethod
    def parse(cls, value: "str | AggregationPolicy") -> "AggregationPolicy":
        """Return the policy matching a configuration value.

        Args:
            value: Policy name such as "per_row" or "per_code".

        Returns:
            AggregationPolicy: Matching policy.

        Raises:
            ValueError: If the value names no known policy.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("-", "_")
        for policy in cls:
            if policy.value == normalized:
                return policy
        raise ValueError(
            "Unsupported aggregation policy: "
            f"{value}. Expected per_row or per_code."
        )


__all__ = ["AggregationPolicy"]
