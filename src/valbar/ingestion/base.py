"""Source protocols and the online/offline selection for feeds and odds."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from valbar.ingestion.polymarket.search import MarketCorrelator
from valbar.ingestion.vlr.client import LiveMatchFeed
from valbar.ingestion.vlr.fixtures import FixtureMatchFeed, FixtureOdds
from valbar.models import MatchSegment, OddsResult

if TYPE_CHECKING:
    from valbar.config import Settings


class MatchFeed(Protocol):
    """Anything that can produce the current list of match segments."""

    async def fetch(self) -> list[MatchSegment]: ...


class OddsSource(Protocol):
    """Anything that can correlate a team pairing to an OddsResult without raising."""

    async def correlate(self, team1: str, team2: str) -> OddsResult: ...


def create_match_feed(settings: Settings) -> MatchFeed:
    """Live vlrggapi feed, or fixtures when ``runtime.offline`` is set."""
    if settings.offline:
        return FixtureMatchFeed()
    return LiveMatchFeed(url=settings.feed_url, timeout=settings.http_timeout_sec)


def create_odds_source(settings: Settings) -> OddsSource:
    """Polymarket search correlator, or fixed preview odds when ``runtime.offline`` is set."""
    if settings.offline:
        return FixtureOdds(market_url=f"{settings.market_base_url.rstrip('/')}/sports/valorant")
    return MarketCorrelator(
        gamma_api_base=settings.gamma_api_base,
        market_base_url=settings.market_base_url,
        fallback_base_url=settings.fallback_base_url,
        limit=settings.search_limit,
        user_agent=settings.user_agent,
        timeout=settings.http_timeout_sec,
    )
