"""Mini README: Abstract interface for transaction sources.

Structure:
    * SourceUnavailable - the single error raised when a fetch fails.
    * TransactionSource - abstract capability implemented by providers.

The dashboard never knows where transactions come from. A source exposes
one asynchronous ``fetch_transactions`` call returning records in the order
the backend produced them. Providers translate every failure (network,
timeout, malformed payload) into ``SourceUnavailable`` so the loading
lifecycle has exactly one error to handle.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Sequence

from ..configuration import SpendboardSettings
from ..finance.models import TransactionRecord
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class SourceUnavailable(RuntimeError):
    """Raised when a transaction source cannot supply records."""


class TransactionSource(ABC):
    """Base interface for transaction source integrations."""

    source_name: str = "generic"

    @abstractmethod
    async def fetch_transactions(self) -> Sequence[TransactionRecord]:
        """Return the full transaction collection or raise ``SourceUnavailable``."""

    def metadata(self) -> Dict[str, str]:
        """Return diagnostic metadata for API responses."""

        return {"source": self.source_name}

    @classmethod
    def from_settings(cls, settings: SpendboardSettings) -> "TransactionSource":
        """Build the source from runtime settings; sources without options ignore them."""

        return cls()
