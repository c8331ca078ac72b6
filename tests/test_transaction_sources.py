"""Mini README: Tests for the transaction source registry and providers.

Ensures that built-in sources register correctly, that settings select the
expected provider, and that the JSON file provider reports every failure as
``SourceUnavailable``.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from spendboard.configuration import SpendboardSettings
from spendboard.finance import TransactionType
from spendboard.sources import (
    REGISTRY,
    SourceUnavailable,
    TransactionSource,
    TransactionSourceRegistry,
    source_from_settings,
)
from spendboard.sources.providers import JsonFileTransactionSource, SampleTransactionSource


def test_registry_contains_builtin_sources() -> None:
    assert {"json_file", "sample"} <= set(REGISTRY.available_sources())


def test_registry_instantiates_source() -> None:
    source = REGISTRY.create("SAMPLE", delay_seconds=0)
    assert isinstance(source, TransactionSource)
    assert source.source_name == "sample"


def test_registry_rejects_unknown_source() -> None:
    with pytest.raises(KeyError):
        REGISTRY.create("rest_api")


def test_sample_source_returns_demo_records() -> None:
    """The sample source serves the six demo records in their original order."""

    records = asyncio.run(SampleTransactionSource(delay_seconds=0).fetch_transactions())

    assert [record.category for record in records] == [
        "Salary",
        "Groceries",
        "Transport",
        "Freelance",
        "Rent",
        "Entertainment",
    ]
    assert sum(1 for record in records if record.transaction_type is TransactionType.INCOME) == 2


def test_sample_source_can_simulate_outage() -> None:
    with pytest.raises(SourceUnavailable):
        asyncio.run(SampleTransactionSource(delay_seconds=0, fail=True).fetch_transactions())


def test_source_from_settings_selects_json_file(tmp_path: Path) -> None:
    path = tmp_path / "transactions.json"
    settings = SpendboardSettings(transaction_source="json_file", transactions_file=path)

    source = source_from_settings(settings)

    assert isinstance(source, JsonFileTransactionSource)
    assert source.metadata() == {"source": "json_file", "path": str(path)}


def test_source_from_settings_requires_file_for_json_source() -> None:
    with pytest.raises(ValueError):
        source_from_settings(SpendboardSettings(transaction_source="json_file"))


def test_json_file_source_reads_wrapped_list(tmp_path: Path) -> None:
    """Files may wrap the records in a ``transactions`` object."""

    path = tmp_path / "transactions.json"
    path.write_text(
        json.dumps(
            {
                "transactions": [
                    {"id": "a", "amount": 900, "category": "Bonus", "date": "2025-04-01", "type": "income"},
                    {"id": "b", "amount": -15.5, "category": "Coffee", "date": "2025-04-02", "type": "expense"},
                ]
            }
        ),
        encoding="utf-8",
    )

    records = asyncio.run(JsonFileTransactionSource(path=path).fetch_transactions())

    assert [record.transaction_id for record in records] == ["a", "b"]
    assert records[1].amount == pytest.approx(-15.5)


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '[{"id": 1, "amount": NaN, "category": "X", "date": "2025-01-01", "type": "income"}]',
        '[{"id": 2, "amount": -Infinity, "category": "X", "date": "2025-01-01", "type": "expense"}]',
        json.dumps({"items": []}),
        json.dumps([{"id": 1, "amount": 5, "category": "X", "date": "2025-01-01", "type": "transfer"}]),
        json.dumps(
            [
                {"id": 1, "amount": 5, "category": "X", "date": "2025-01-01", "type": "income"},
                {"id": 1, "amount": 6, "category": "Y", "date": "2025-01-02", "type": "income"},
            ]
        ),
    ],
)
def test_json_file_source_rejects_malformed_files(tmp_path: Path, content: str) -> None:
    """Invalid JSON, non-finite amounts, wrong shapes, unknown types and duplicate ids fail the fetch."""

    path = tmp_path / "transactions.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(SourceUnavailable):
        asyncio.run(JsonFileTransactionSource(path=path).fetch_transactions())


def test_json_file_source_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailable, match="Unable to read"):
        asyncio.run(JsonFileTransactionSource(path=tmp_path / "absent.json").fetch_transactions())


def test_source_from_settings_applies_sample_delay() -> None:
    source = source_from_settings(SpendboardSettings(transaction_source="sample", sample_delay_seconds=0.25))

    assert isinstance(source, SampleTransactionSource)
    assert source.delay_seconds == pytest.approx(0.25)


def test_registered_sources_build_themselves_from_settings() -> None:
    """Sources added by other packages receive settings without registry changes."""

    class ReplaySource(TransactionSource):
        source_name = "replay"

        def __init__(self, *, label: str = "default") -> None:
            self.label = label

        @classmethod
        def from_settings(cls, settings: SpendboardSettings) -> "ReplaySource":
            return cls(label=settings.environment)

        async def fetch_transactions(self):
            return []

    registry = TransactionSourceRegistry()
    registry.register(ReplaySource)

    source = registry.create_from_settings("replay", SpendboardSettings(environment="staging"))

    assert isinstance(source, ReplaySource)
    assert source.label == "staging"
    with pytest.raises(KeyError):
        registry.create_from_settings("sample", SpendboardSettings())
