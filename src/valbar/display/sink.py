"""Display sink - the single current summary shared with the tray/UI."""

from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock
from typing import Callable

import structlog
from pydantic import BaseModel, ConfigDict

log = structlog.get_logger(__name__)

LOADING_TEXT = "Loading..."


class DisplaySummary(BaseModel):
    """Summary text and the moment it was published."""

    model_config = ConfigDict(frozen=True)

    text: str
    updated_at: datetime


class DisplaySink:
    """Holds one DisplaySummary; publish() swaps it atomically, readers get whole values."""

    def __init__(self, prefix: str = "Valorant") -> None:
        self.prefix = prefix
        self._current: DisplaySummary | None = None
        self._subscribers: list[Callable[[DisplaySummary], None]] = []
        self._lock = Lock()

    def publish(self, text: str) -> DisplaySummary:
        summary = DisplaySummary(text=text, updated_at=datetime.now(timezone.utc))
        with self._lock:
            self._current = summary
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(summary)
            except Exception as e:
                log.warning("display_subscriber_failed", error=str(e))
        return summary

    def current(self) -> DisplaySummary | None:
        with self._lock:
            return self._current

    def label(self) -> str:
        """Tray label, e.g. "Valorant: Sentinels vs 100 Thieves | 13 - 9 | Ascent"."""
        summary = self.current()
        text = summary.text if summary is not None else LOADING_TEXT
        return f"{self.prefix}: {text}"

    def subscribe(self, callback: Callable[[DisplaySummary], None]) -> None:
        """Call ``callback`` with each newly published summary."""
        with self._lock:
            self._subscribers.append(callback)
