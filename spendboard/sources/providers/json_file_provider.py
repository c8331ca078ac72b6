"""Mini README: Transaction source reading records from a JSON file.

Structure:
    * parse_transactions - validate a decoded JSON payload into records.
    * JsonFileTransactionSource - loads the payload from disk off the event loop.

The file may hold a bare list of records or an object with a
``"transactions"`` list, each record in the ``{"id", "amount", "category",
"date", "type"}`` shape. Any problem reading or validating the file is
reported as ``SourceUnavailable``.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Dict, List, Sequence, Union

from ...configuration import SpendboardSettings
from ...finance.models import TransactionRecord
from ...logging_utils import get_logger
from ..base import SourceUnavailable, TransactionSource
from ..registry import REGISTRY

LOGGER = get_logger(__name__)


def parse_transactions(payload: object) -> List[TransactionRecord]:
    """Convert decoded JSON into records, preserving order."""

    if isinstance(payload, dict):
        payload = payload.get("transactions")
    if not isinstance(payload, list):
        raise ValueError("Expected a list of transactions or an object with a 'transactions' list.")

    records: List[TransactionRecord] = []
    seen_ids = set()
    for index, entry in enumerate(payload):
        try:
            record = TransactionRecord.from_dict(entry)
        except ValueError as error:
            raise ValueError(f"Transaction at position {index} is invalid: {error}") from error
        if record.transaction_id in seen_ids:
            raise ValueError(f"Duplicate transaction id {record.transaction_id!r}.")
        seen_ids.add(record.transaction_id)
        records.append(record)
    return records


class JsonFileTransactionSource(TransactionSource):
    """Load transactions from a JSON document on disk."""

    source_name = "json_file"

    def __init__(self, *, path: Union[str, Path]) -> None:
        self.path = Path(path).expanduser()

    @classmethod
    def from_settings(cls, settings: SpendboardSettings) -> "JsonFileTransactionSource":
        if settings.transactions_file is None:
            raise ValueError("The json_file source requires SPENDBOARD_TRANSACTIONS_FILE to be set.")
        return cls(path=settings.transactions_file)

    def _read(self) -> List[TransactionRecord]:
        with self.path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
        return parse_transactions(payload)

    async def fetch_transactions(self) -> Sequence[TransactionRecord]:
        try:
            records = await asyncio.to_thread(self._read)
        except OSError as error:
            raise SourceUnavailable(f"Unable to read {self.path}: {error}") from error
        except ValueError as error:
            # json.JSONDecodeError is a ValueError subclass.
            raise SourceUnavailable(f"Malformed transactions file {self.path}: {error}") from error
        LOGGER.info("Loaded %s transactions from %s", len(records), self.path)
        return records

    def metadata(self) -> Dict[str, str]:
        return {"source": self.source_name, "path": str(self.path)}


REGISTRY.register(JsonFileTransactionSource)
