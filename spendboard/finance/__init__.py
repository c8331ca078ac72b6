"""Mini README: Finance primitives for the Spendboard dashboard.

This package holds the immutable transaction values and the pure totals
aggregation used by the dashboard. Nothing here performs I/O; records are
supplied by ``spendboard.sources`` and held by ``spendboard.loading``.
"""

from .aggregation import aggregate
from .models import TotalsSummary, TransactionRecord, TransactionType

__all__ = ["TotalsSummary", "TransactionRecord", "TransactionType", "aggregate"]
