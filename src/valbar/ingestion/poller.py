"""Poll loop - refresh the display summary from the score feed on a fixed interval."""

from __future__ import annotations

import asyncio
import time
from enum import Enum
from typing import TYPE_CHECKING, Any

import structlog

from valbar.display.summary import summarize
from valbar.errors import FeedError

if TYPE_CHECKING:
    from valbar.display.sink import DisplaySink
    from valbar.ingestion.base import MatchFeed

log = structlog.get_logger(__name__)


class PollState(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"


class PollLoop:
    """Fetches the feed every ``interval_sec`` and publishes a summary of the first segment."""

    def __init__(self, feed: MatchFeed, sink: DisplaySink, interval_sec: float = 30.0):
        if interval_sec <= 0:
            raise ValueError(f"interval_sec must be positive, got {interval_sec}")
        self.feed = feed
        self.sink = sink
        self.interval_sec = interval_sec
        self.state = PollState.IDLE
        self._tick_count = 0
        self._error_count = 0
        self._last_error: str | None = None
        self._start_ts: float | None = None

    async def tick(self) -> bool:
        """Run one fetch. Returns True if a new summary was published."""
        if self.state is not PollState.IDLE:
            log.debug("poll_tick_skipped", state=self.state.value)
            return False
        self.state = PollState.FETCHING
        self._tick_count += 1
        try:
            segments = await self.feed.fetch()
        except FeedError as e:
            self._record_error(str(e))
            log.warning("feed_error", kind=e.kind.value, error=e.message)
            return False
        except Exception as e:
            self._record_error(str(e))
            log.exception("poll_tick_failed", error=str(e))
            return False
        finally:
            self.state = PollState.IDLE

        if not segments:
            log.debug("feed_empty")
            return False
        summary = self.sink.publish(summarize(segments[0]))
        self._last_error = None
        log.info("summary_updated", text=summary.text, segments=len(segments))
        return True

    def _record_error(self, message: str) -> None:
        self._error_count += 1
        self._last_error = message

    async def run(self, stop_event: asyncio.Event | None = None) -> None:
        """Tick immediately, then every ``interval_sec`` until stop_event is set."""
        stop = stop_event or asyncio.Event()
        loop = asyncio.get_running_loop()
        self._start_ts = time.time()
        next_at = loop.time()
        log.info("poll_started", interval_sec=self.interval_sec)

        while not stop.is_set():
            await self.tick()
            next_at += self.interval_sec
            now = loop.time()
            if next_at < now:
                # Ticks missed while fetching are dropped, not replayed
                missed = int((now - next_at) // self.interval_sec) + 1
                next_at += missed * self.interval_sec
            try:
                await asyncio.wait_for(stop.wait(), timeout=next_at - now)
            except asyncio.TimeoutError:
                pass

        log.info("poll_stopped", ticks=self._tick_count, errors=self._error_count)

    def get_status(self) -> dict[str, Any]:
        """Return current status: state, ticks, errors, last_error, elapsed_sec."""
        elapsed = (time.time() - self._start_ts) if self._start_ts else 0
        return {
            "state": self.state.value,
            "ticks": self._tick_count,
            "errors": self._error_count,
            "last_error": self._last_error,
            "elapsed_sec": round(elapsed, 1),
        }
