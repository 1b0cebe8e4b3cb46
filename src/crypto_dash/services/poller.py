"""Polling session lifecycle and tick handling."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from ..data.providers import QuotesProvider
from ..domain import PollMode, Quote
from ..state import SeriesStore
from ..utils import FetchError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%H:%M:%S"
# Timer callbacks may fire slightly before the deadline they were scheduled for.
TIMER_SLACK = timedelta(milliseconds=250)


class PollerState(str, Enum):
    IDLE = "idle"
    POLLING = "polling"


@dataclass
class PollingSession:
    """State owned by one polling session, replaced wholesale on reset."""

    generation: int
    store: SeriesStore
    started_at: datetime
    quotes: Optional[dict[str, Quote]] = None
    loading: bool = True
    error: Optional[str] = None
    ticks: int = 0
    last_updated: Optional[datetime] = field(default=None)

    @property
    def show_loader(self) -> bool:
        """True until the session has either quotes or an error to show."""
        return self.quotes is None and self.error is None


class Poller:
    """Drives fetch-and-append ticks for a single polling session at a time.

    The poller never schedules more than one pending tick: ``start`` replaces
    the deadline and ``stop`` clears it. Every reset bumps the generation, and a
    tick whose fetch returns after a reset drops its result.
    """

    def __init__(
        self,
        provider: QuotesProvider,
        interval: float = 3.0,
        mode: PollMode = "continuous",
        capacity: Optional[int] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.provider = provider
        self.interval = timedelta(seconds=interval)
        self.mode = mode
        self.capacity = capacity
        self._clock = clock
        self._generation = 0
        self.state = PollerState.IDLE
        self.next_due: Optional[datetime] = None
        self.session = self._new_session()

    @property
    def generation(self) -> int:
        return self._generation

    def _new_session(self) -> PollingSession:
        return PollingSession(
            generation=self._generation,
            store=SeriesStore(self.capacity),
            started_at=self._clock(),
        )

    def start(self) -> PollingSession:
        """Begin a fresh session; the first tick is due one interval from now."""
        self._generation += 1
        self.session = self._new_session()
        self.state = PollerState.POLLING
        self.next_due = self.session.started_at + self.interval
        logger.info(f"Polling session {self._generation} started ({self.mode}, every {self.interval.total_seconds()}s)")
        return self.session

    def stop(self) -> None:
        if self.state is PollerState.POLLING:
            logger.info(f"Polling session {self._generation} stopped")
        self._generation += 1
        self.state = PollerState.IDLE
        self.next_due = None

    def refresh(self) -> PollingSession:
        """Discard the current session and start polling again."""
        self.stop()
        return self.start()

    def due(self, now: Optional[datetime] = None) -> bool:
        if self.state is not PollerState.POLLING or self.next_due is None:
            return False
        now = now or self._clock()
        return now + TIMER_SLACK >= self.next_due

    def poll(self, now: Optional[datetime] = None) -> bool:
        """Run a tick if one is due. Returns True when a tick ran."""
        if not self.due(now):
            return False
        self.tick()
        return True

    def tick(self) -> bool:
        """Fetch once and fold the result into the session.

        Returns True when the fetch succeeded and was applied.
        """
        if self.state is not PollerState.POLLING:
            return False

        session = self.session
        generation = self._generation
        # Next deadline is measured from the tick start, not from when the fetch returns.
        tick_started = self._clock()
        session.loading = True
        logger.debug(f"Tick {session.ticks + 1} for session {generation}")

        try:
            quotes = self.provider.fetch_quotes()
        except FetchError as err:
            if self._is_stale(generation):
                logger.info(f"Dropping failed fetch from stale session {generation}")
                return False
            logger.warning(f"Fetch failed: {err}")
            session.error = str(err)
            session.loading = False
            self._finish_tick(session, tick_started)
            return False

        if self._is_stale(generation):
            logger.info(f"Dropping {len(quotes)} quotes from stale session {generation}")
            return False

        now = self._clock()
        stamp = now.strftime(TIMESTAMP_FORMAT)
        for symbol, quote in quotes.items():
            session.store.append(symbol, quote.price_usd, stamp)
        session.quotes = quotes
        session.error = None
        session.loading = False
        session.last_updated = now
        self._finish_tick(session, tick_started)
        return True

    def _is_stale(self, generation: int) -> bool:
        return generation != self._generation or self.state is not PollerState.POLLING

    def _finish_tick(self, session: PollingSession, tick_started: datetime) -> None:
        session.ticks += 1
        if self.mode == "single":
            self.state = PollerState.IDLE
            self.next_due = None
            logger.info(f"Single-tick session {self._generation} finished")
        else:
            self.next_due = tick_started + self.interval
