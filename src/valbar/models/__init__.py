"""Canonical schema (Pydantic) - MatchSegment, feed envelope, OddsResult."""

from valbar.models.match import FeedData, FeedEnvelope, MatchSegment
from valbar.models.odds import OddsResult

__all__ = [
    "MatchSegment",
    "FeedEnvelope",
    "FeedData",
    "OddsResult",
]
