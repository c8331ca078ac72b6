"""Mini README: Shared pytest configuration for the Spendboard suite.

Settings are cached per process, so every test starts from a clean cache
with the sample source's simulated delay switched off. Tests that need other
settings patch the environment and call ``get_settings.cache_clear()``.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from spendboard.configuration import get_settings


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset cached settings and keep the sample source instantaneous."""

    for variable in (
        "SPENDBOARD_TRANSACTION_SOURCE",
        "SPENDBOARD_TRANSACTIONS_FILE",
        "SPENDBOARD_INTERFACE_PORT",
    ):
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.setenv("SPENDBOARD_SAMPLE_DELAY_SECONDS", "0")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
