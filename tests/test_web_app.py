"""Mini README: Tests for the FastAPI dashboard API.

The application is built around lifecycles backed by deterministic sources
and driven through FastAPI's ``TestClient`` so the startup activation runs
exactly as it does under uvicorn.
"""

from __future__ import annotations

from fastapi.testclient import TestClient

from spendboard.interface import create_application
from spendboard.loading import TransactionLifecycle
from spendboard.sources.providers import SampleTransactionSource


def _client(*, fail: bool = False, delay: float = 0) -> TestClient:
    lifecycle = TransactionLifecycle(SampleTransactionSource(delay_seconds=delay, fail=fail))
    return TestClient(create_application(lifecycle))


def test_transactions_endpoint_returns_records_and_totals() -> None:
    with _client() as client:
        response = client.get("/transactions", params={"wait": "true"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["phase"] == "ready"
    assert len(payload["transactions"]) == 6
    assert payload["transactions"][0] == {
        "id": 1,
        "amount": 1500,
        "category": "Salary",
        "date": "2025-03-01",
        "type": "income",
    }
    assert payload["totals"] == {"income": 3500, "expenses": 625, "balance": 2875}
    assert payload["error"] is None


def test_totals_endpoint_matches_snapshot() -> None:
    with _client() as client:
        client.get("/transactions", params={"wait": "true"})
        response = client.get("/totals")

    assert response.status_code == 200
    assert response.json()["balance"] == 2875


def test_failed_source_reports_error_and_conflict() -> None:
    """A failing source leaves the API responsive with an error indication."""

    with _client(fail=True) as client:
        snapshot = client.get("/transactions", params={"wait": "true"}).json()
        totals = client.get("/totals")
        health = client.get("/health")

    assert snapshot["phase"] == "failed"
    assert snapshot["transactions"] == []
    assert "configured to fail" in snapshot["error"]
    assert totals.status_code == 409
    assert health.json() == {"status": "ok", "phase": "failed"}


def test_refresh_starts_a_new_generation() -> None:
    with _client() as client:
        client.get("/transactions", params={"wait": "true"})
        accepted = client.post("/refresh")
        settled = client.get("/transactions", params={"wait": "true"}).json()

    assert accepted.status_code == 202
    assert accepted.json() == {"phase": "loading", "generation": 2}
    assert settled["phase"] == "ready"
    assert settled["generation"] == 2


def test_sources_endpoint_lists_registry() -> None:
    with _client() as client:
        payload = client.get("/sources").json()

    assert "sample" in payload["available"]
    assert payload["active"]["source"] == "sample"


def test_loading_phase_is_visible_before_first_fetch_settles() -> None:
    """Startup begins the fetch in the background so clients see the spinner state."""

    with _client(delay=0.5) as client:
        health = client.get("/health").json()
        early = client.get("/transactions").json()
        totals = client.get("/totals")
        settled = client.get("/transactions", params={"wait": "true"}).json()

    assert health == {"status": "ok", "phase": "loading"}
    assert early["phase"] == "loading"
    assert early["transactions"] == []
    assert early["totals"] is None
    assert totals.status_code == 409
    assert settled["phase"] == "ready"
