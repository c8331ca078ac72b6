"""Mini README: FastAPI-powered dashboard API for Spendboard.

Structure:
    * create_application - application factory wiring routes to a lifecycle.

The API is the presentation boundary of the dashboard. It reads the loading
phase, the fetched transactions and their totals, and lets clients request a
re-fetch. The first fetch starts in the background when the application
starts so clients can observe the loading phase before data arrives.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from ..configuration import get_settings
from ..loading import TransactionLifecycle
from ..logging_utils import get_logger
from ..sources import REGISTRY, source_from_settings

LOGGER = get_logger(__name__)


def create_application(lifecycle: Optional[TransactionLifecycle] = None) -> FastAPI:
    """Create the FastAPI application with routes bound to ``lifecycle``."""

    if lifecycle is None:
        lifecycle = TransactionLifecycle(source_from_settings(get_settings()))

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        snapshot = lifecycle.request_activation()
        LOGGER.info("Dashboard started; lifecycle phase is '%s'", snapshot.phase.value)
        yield
        LOGGER.info("Dashboard shutting down in phase '%s'", lifecycle.phase.value)

    app = FastAPI(title="Spendboard", version="0.1.0", lifespan=lifespan)
    app.state.lifecycle = lifecycle

    @app.get("/health")
    async def health() -> JSONResponse:
        """Report liveness together with the current loading phase."""

        return JSONResponse({"status": "ok", "phase": lifecycle.phase.value})

    @app.get("/transactions")
    async def transactions(
        wait: bool = Query(False, description="Wait for an outstanding fetch to settle."),
    ) -> JSONResponse:
        """Return the loading phase, the transaction list and the totals."""

        if wait:
            snapshot = await lifecycle.wait_until_settled()
        else:
            snapshot = lifecycle.snapshot()
        LOGGER.debug(
            "Returning snapshot phase=%s transactions=%s",
            snapshot.phase.value,
            len(snapshot.records),
        )
        return JSONResponse(snapshot.as_dict())

    @app.get("/totals")
    async def totals() -> JSONResponse:
        """Return income, expense and balance totals for the loaded collection."""

        summary = lifecycle.totals()
        if summary is None:
            raise HTTPException(
                status_code=409,
                detail=f"Transactions are not ready (phase: {lifecycle.phase.value}).",
            )
        return JSONResponse(summary.as_dict())

    @app.post("/refresh", status_code=202)
    async def refresh() -> JSONResponse:
        """Request a re-fetch; an outstanding fetch is joined, not duplicated."""

        previous_phase = lifecycle.phase
        snapshot = lifecycle.request_refresh()
        LOGGER.info(
            "Refresh requested (previous phase: %s, generation: %s)",
            previous_phase.value,
            snapshot.generation,
        )
        return JSONResponse(
            {"phase": snapshot.phase.value, "generation": snapshot.generation},
            status_code=202,
        )

    @app.get("/sources")
    async def sources() -> JSONResponse:
        """List registered transaction sources and describe the active one."""

        return JSONResponse(
            {
                "available": list(REGISTRY.available_sources()),
                "active": lifecycle.source.metadata(),
            }
        )

    return app
