"""Mini README: Demo transaction source backed by in-memory sample data.

Structure:
    * SAMPLE_TRANSACTIONS - deterministic demo records for UI previews.
    * SampleTransactionSource - returns the demo records after a simulated delay.

The provider stands in for a real API so the dashboard can be exercised
without a backend. ``fail=True`` simulates an unreachable service.
"""

from __future__ import annotations

import asyncio
from typing import Dict, List, Sequence

from ...configuration import SpendboardSettings
from ...finance.models import TransactionRecord, TransactionType
from ...logging_utils import get_logger
from ..base import SourceUnavailable, TransactionSource
from ..registry import REGISTRY

LOGGER = get_logger(__name__)

SAMPLE_TRANSACTIONS: List[TransactionRecord] = [
    TransactionRecord(1, 1500, "Salary", "2025-03-01", TransactionType.INCOME),
    TransactionRecord(2, -200, "Groceries", "2025-03-02", TransactionType.EXPENSE),
    TransactionRecord(3, -50, "Transport", "2025-03-03", TransactionType.EXPENSE),
    TransactionRecord(4, 2000, "Freelance", "2025-03-05", TransactionType.INCOME),
    TransactionRecord(5, -300, "Rent", "2025-03-06", TransactionType.EXPENSE),
    TransactionRecord(6, -75, "Entertainment", "2025-03-07", TransactionType.EXPENSE),
]


class SampleTransactionSource(TransactionSource):
    """Mock source illustrating how the registry is extended."""

    source_name = "sample"

    def __init__(self, *, delay_seconds: float = 1.0, fail: bool = False) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must not be negative.")
        self.delay_seconds = delay_seconds
        self.fail = fail

    @classmethod
    def from_settings(cls, settings: SpendboardSettings) -> "SampleTransactionSource":
        return cls(delay_seconds=settings.sample_delay_seconds)

    async def fetch_transactions(self) -> Sequence[TransactionRecord]:
        LOGGER.debug("Simulating network delay of %.2fs", self.delay_seconds)
        await asyncio.sleep(self.delay_seconds)
        if self.fail:
            raise SourceUnavailable("Sample source configured to fail.")
        return list(SAMPLE_TRANSACTIONS)

    def metadata(self) -> Dict[str, str]:
        return {"source": self.source_name, "delay_seconds": f"{self.delay_seconds:g}"}


REGISTRY.register(SampleTransactionSource)
