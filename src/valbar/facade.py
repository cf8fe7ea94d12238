"""On-demand entry points for the foreground UI, independent of the poll loop."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from valbar.errors import FeedError, FeedErrorKind, RequestError
from valbar.ingestion.base import create_match_feed, create_odds_source
from valbar.models import MatchSegment, OddsResult

if TYPE_CHECKING:
    from valbar.config import Settings
    from valbar.ingestion.base import MatchFeed, OddsSource

log = structlog.get_logger(__name__)

_FEED_MESSAGES = {
    FeedErrorKind.NETWORK: "Could not reach the match feed",
    FeedErrorKind.DECODE: "The match feed returned data we could not read",
}


class RequestFacade:
    """Fresh match lists and odds on request. Shares no state with PollLoop."""

    def __init__(self, feed: MatchFeed, odds: OddsSource) -> None:
        self.feed = feed
        self.odds = odds

    @classmethod
    def from_settings(cls, settings: Settings) -> RequestFacade:
        return cls(create_match_feed(settings), create_odds_source(settings))

    async def get_live_matches(self) -> list[MatchSegment]:
        """Fetch the feed now. Raises RequestError with a user-facing message."""
        try:
            return await self.feed.fetch()
        except FeedError as e:
            log.warning("live_matches_failed", kind=e.kind.value, error=e.message)
            raise RequestError(
                f"{_FEED_MESSAGES[e.kind]}: {e.message}",
                code=f"feed_{e.kind.value}",
            ) from e

    async def get_odds(self, team1: str, team2: str) -> OddsResult:
        """Correlate the pairing with a market. Transport failures come back as a fallback result."""
        return await self.odds.correlate(team1, team2)
