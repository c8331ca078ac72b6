"""Mini README: Totals aggregation over transaction records.

``aggregate`` is a pure function: one pass over the records sorting each
absolute amount into an income or an expense bucket, then the balance
derived from both totals. The bucket is chosen by ``transaction_type``
alone, so a record stored with the "wrong" sign never drags a total below
zero. Anything that is not income counts as an expense.

Buckets are summed with ``math.fsum`` which rounds once, so the totals do
not depend on the order the records arrived in, even for float amounts.
"""

from __future__ import annotations

import math
from typing import Iterable, List

from ..logging_utils import get_logger
from .models import TotalsSummary, TransactionRecord, TransactionType

LOGGER = get_logger(__name__)


def aggregate(records: Iterable[TransactionRecord]) -> TotalsSummary:
    """Return income, expense and balance totals for ``records``."""

    income_amounts: List[float] = []
    expense_amounts: List[float] = []
    for record in records:
        if record.transaction_type == TransactionType.INCOME:
            income_amounts.append(abs(record.amount))
        else:
            expense_amounts.append(abs(record.amount))

    income = math.fsum(income_amounts)
    expenses = math.fsum(expense_amounts)
    summary = TotalsSummary(income=income, expenses=expenses, balance=income - expenses)
    LOGGER.debug(
        "Aggregated %s records -> income: %.2f expenses: %.2f balance: %.2f",
        len(income_amounts) + len(expense_amounts),
        summary.income,
        summary.expenses,
        summary.balance,
    )
    return summary
