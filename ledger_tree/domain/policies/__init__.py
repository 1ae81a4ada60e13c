"""Domain policies package."""

from .aggregation import AggregationPolicy

__all__ = ["AggregationPolicy"]
