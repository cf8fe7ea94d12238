"""vlrggapi score feed client and offline fixtures."""

from valbar.ingestion.vlr.client import LiveMatchFeed, fetch_live_matches, parse_feed
from valbar.ingestion.vlr.fixtures import FixtureMatchFeed, FixtureOdds, fixture_matches

__all__ = [
    "LiveMatchFeed",
    "fetch_live_matches",
    "parse_feed",
    "FixtureMatchFeed",
    "FixtureOdds",
    "fixture_matches",
]
