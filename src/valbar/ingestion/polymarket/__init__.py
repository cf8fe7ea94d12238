"""Polymarket public-search correlation and team slug normalization."""

from valbar.ingestion.polymarket.normalize import TEAM_ABBREVIATIONS, team_to_slug
from valbar.ingestion.polymarket.search import MarketCorrelator, fallback_market_url, match_market

__all__ = [
    "TEAM_ABBREVIATIONS",
    "team_to_slug",
    "MarketCorrelator",
    "fallback_market_url",
    "match_market",
]
