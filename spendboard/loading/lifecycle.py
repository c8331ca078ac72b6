"""Mini README: Loading lifecycle for the dashboard's transaction collection.

Structure:
    * LoadPhase - enum of the lifecycle phases (idle, loading, ready, failed).
    * LifecycleSnapshot - read-only view handed to the presentation layer.
    * TransactionLifecycle - owns the collection and drives fetches.

The lifecycle starts idle, moves to loading on first activation and settles
in ready (holding the fetched records) or failed (holding the error). Both
settled phases are stable; only ``refresh`` starts another fetch, and a
refresh issued while a fetch is outstanding joins that fetch instead of
starting a second one. Failures are logged and recorded, never re-raised,
and never retried automatically.

Totals are cached per load generation, so the aggregation runs once for
each collection the lifecycle installs.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from ..finance.aggregation import aggregate
from ..finance.models import TotalsSummary, TransactionRecord
from ..logging_utils import get_logger
from ..sources.base import SourceUnavailable, TransactionSource

LOGGER = get_logger(__name__)

PhaseListener = Callable[["LoadPhase"], None]


class LoadPhase(str, Enum):
    """Loading state of the transaction collection."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class LifecycleSnapshot:
    """Point-in-time view of the lifecycle for rendering."""

    phase: LoadPhase
    records: Tuple[TransactionRecord, ...]
    totals: Optional[TotalsSummary]
    error: Optional[str]
    generation: int

    def as_dict(self) -> Dict[str, object]:
        """Export the snapshot with serialisable values."""

        return {
            "phase": self.phase.value,
            "generation": self.generation,
            "transactions": [record.as_dict() for record in self.records],
            "totals": self.totals.as_dict() if self.totals is not None else None,
            "error": self.error,
        }


class TransactionLifecycle:
    """Fetch transactions from a source and expose them with their totals."""

    def __init__(self, source: TransactionSource) -> None:
        self._source = source
        self._phase = LoadPhase.IDLE
        self._records: Tuple[TransactionRecord, ...] = ()
        self._error: Optional[SourceUnavailable] = None
        self._history: List[LoadPhase] = [LoadPhase.IDLE]
        self._listeners: List[PhaseListener] = []
        self._generation = 0
        self._inflight: Optional[asyncio.Task] = None
        self._totals_cache: Optional[Tuple[int, TotalsSummary]] = None
        LOGGER.debug("Lifecycle created for source '%s'", source.source_name)

    @property
    def source(self) -> TransactionSource:
        return self._source

    @property
    def phase(self) -> LoadPhase:
        return self._phase

    @property
    def records(self) -> Tuple[TransactionRecord, ...]:
        return self._records

    @property
    def error(self) -> Optional[SourceUnavailable]:
        return self._error

    @property
    def history(self) -> Tuple[LoadPhase, ...]:
        """Every phase entered so far, oldest first."""

        return tuple(self._history)

    @property
    def generation(self) -> int:
        """Number of fetches issued by this lifecycle."""

        return self._generation

    @property
    def is_loading(self) -> bool:
        return self._inflight is not None

    def subscribe(self, listener: PhaseListener) -> None:
        """Register a callback invoked with each phase the lifecycle enters."""

        self._listeners.append(listener)

    def request_activation(self) -> LifecycleSnapshot:
        """Start the first fetch without waiting for it; later calls do nothing."""

        if self._phase is LoadPhase.IDLE:
            return self.request_refresh()
        return self.snapshot()

    def request_refresh(self) -> LifecycleSnapshot:
        """Start a fetch unless one is already in flight; must run inside an event loop."""

        if self._inflight is None:
            self._start_fetch()
        else:
            LOGGER.debug("Fetch %s already in flight; joining it", self._generation)
        return self.snapshot()

    async def activate(self) -> LifecycleSnapshot:
        """Run the first fetch to settlement; later activations leave the lifecycle alone."""

        self.request_activation()
        return await self.wait_until_settled()

    async def refresh(self) -> LifecycleSnapshot:
        """Fetch the collection again, joining any fetch already in flight."""

        self.request_refresh()
        return await self.wait_until_settled()

    async def wait_until_settled(self) -> LifecycleSnapshot:
        """Wait for the outstanding fetch, if any, and return the settled view."""

        if self._inflight is not None:
            await asyncio.shield(self._inflight)
        return self.snapshot()

    def totals(self) -> Optional[TotalsSummary]:
        """Return totals for the ready collection, or ``None`` before it exists."""

        if self._phase is not LoadPhase.READY:
            return None
        if self._totals_cache is None or self._totals_cache[0] != self._generation:
            self._totals_cache = (self._generation, aggregate(self._records))
        return self._totals_cache[1]

    def snapshot(self) -> LifecycleSnapshot:
        return LifecycleSnapshot(
            phase=self._phase,
            records=self._records,
            totals=self.totals(),
            error=str(self._error) if self._error is not None else None,
            generation=self._generation,
        )

    def _start_fetch(self) -> None:
        # Raises RuntimeError outside an event loop, before any state changes.
        loop = asyncio.get_running_loop()
        self._generation += 1
        self._records = ()
        self._error = None
        self._totals_cache = None
        LOGGER.info(
            "Fetching transactions (generation %s) from '%s'",
            self._generation,
            self._source.source_name,
        )
        self._inflight = loop.create_task(self._fetch(self._generation))
        self._transition(LoadPhase.LOADING)

    async def _fetch(self, generation: int) -> None:
        try:
            fetched = await self._source.fetch_transactions()
        except asyncio.CancelledError:
            self._inflight = None
            raise
        except SourceUnavailable as error:
            self._fail(generation, error)
        except Exception as error:
            LOGGER.exception("Transaction source raised an unexpected error")
            wrapped = SourceUnavailable(f"Transaction source failed: {error}")
            wrapped.__cause__ = error
            self._fail(generation, wrapped)
        else:
            # Cleared before listeners run so a re-trigger from a listener starts a new fetch.
            self._inflight = None
            self._records = tuple(fetched)
            LOGGER.info(
                "Loaded %s transactions (generation %s)", len(self._records), generation
            )
            self._transition(LoadPhase.READY)

    def _fail(self, generation: int, error: SourceUnavailable) -> None:
        self._inflight = None
        self._error = error
        LOGGER.error("Fetching transactions failed (generation %s): %s", generation, error)
        self._transition(LoadPhase.FAILED)

    def _transition(self, phase: LoadPhase) -> None:
        LOGGER.debug("Lifecycle phase %s -> %s", self._phase.value, phase.value)
        self._phase = phase
        self._history.append(phase)
        for listener in list(self._listeners):
            try:
                listener(phase)
            except Exception:  # pragma: no cover
                LOGGER.exception("Phase listener %r failed", listener)
