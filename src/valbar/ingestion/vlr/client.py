"""vlrggapi score feed client - fetch and decode live match segments."""

from __future__ import annotations

import json
from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from valbar.errors import FeedError, FeedErrorKind
from valbar.models import FeedEnvelope, MatchSegment

log = structlog.get_logger(__name__)

VLR_LIVE_SCORE_URL = "https://vlrggapi.vercel.app/v2/match?q=live_score"


def parse_feed(payload: Any) -> list[MatchSegment]:
    """Decode a score feed envelope into MatchSegments. Raises FeedError(DECODE)."""
    try:
        envelope = FeedEnvelope.model_validate(payload)
    except ValidationError as e:
        raise FeedError(FeedErrorKind.DECODE, f"unexpected feed shape: {e.error_count()} error(s)") from e
    return list(envelope.data.segments)


async def fetch_live_matches(
    url: str | None = None,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[MatchSegment]:
    """GET the live score endpoint once and return its segments. No retry."""
    url = url or VLR_LIVE_SCORE_URL
    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True) as client:
            resp = await client.get(url)
            resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise FeedError(FeedErrorKind.NETWORK, f"feed returned HTTP {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise FeedError(FeedErrorKind.NETWORK, str(e) or type(e).__name__) from e
    try:
        payload = resp.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FeedError(FeedErrorKind.DECODE, "feed response is not valid JSON") from e
    segments = parse_feed(payload)
    log.debug("feed_fetched", url=url, segments=len(segments))
    return segments


class LiveMatchFeed:
    """Score feed backed by the vlrggapi HTTP endpoint."""

    def __init__(
        self,
        url: str = VLR_LIVE_SCORE_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._transport = transport

    async def fetch(self) -> list[MatchSegment]:
        return await fetch_live_matches(self.url, timeout=self.timeout, transport=self._transport)
