"""Polymarket public-search client - correlate a team pairing with a market and its odds."""

from __future__ import annotations

import json
from datetime import date
from typing import Any

import httpx
import structlog

from valbar.ingestion.polymarket.normalize import team_to_slug
from valbar.models import OddsResult

log = structlog.get_logger(__name__)

GAMMA_API_BASE = "https://gamma-api.polymarket.com"
POLYMARKET_URL = "https://polymarket.com"
FALLBACK_BASE_URL = "https://polymarket.com/sports/valorant/games/week/1"
SEARCH_LIMIT = 10


def fallback_market_url(
    team1: str,
    team2: str,
    today: date | None = None,
    base_url: str | None = None,
) -> str:
    """Deterministic game link: {base}/val-{slug1}-{slug2}-{YYYY-MM-DD} (local date)."""
    day = (today or date.today()).strftime("%Y-%m-%d")
    base = (base_url or FALLBACK_BASE_URL).rstrip("/")
    return f"{base}/val-{team_to_slug(team1)}-{team_to_slug(team2)}-{day}"


def _parse_price(raw: str) -> float | None:
    """Price string -> probability; None when unparsable or outside [0, 1]."""
    try:
        price = float(raw)
    except (TypeError, ValueError):
        return None
    if not 0 <= price <= 1:
        return None
    return price


def match_market(
    payload: Any,
    team1: str,
    team2: str,
    fallback_url: str,
    market_base_url: str = POLYMARKET_URL,
) -> OddsResult | None:
    """
    Pick the first search result whose question mentions both teams and read its outcome prices.
    Returns None when no result qualifies. Containment is a plain case-insensitive substring
    test, so a question naming a longer team that embeds a shorter name will also match.
    """
    results = payload.get("results") if isinstance(payload, dict) else None
    if not isinstance(results, list):
        return None
    t1 = team1.lower()
    t2 = team2.lower()
    for result in results:
        if not isinstance(result, dict):
            continue
        question = result.get("question")
        if not isinstance(question, str):
            continue
        question = question.lower()
        if t1 not in question or t2 not in question:
            continue
        outcomes = result.get("outcomes")
        if not isinstance(outcomes, list):
            continue

        team1_odds: float | None = None
        team2_odds: float | None = None
        for outcome in outcomes:
            if not isinstance(outcome, dict):
                continue
            title = outcome.get("title")
            price_raw = outcome.get("price")
            if not isinstance(title, str) or not isinstance(price_raw, str):
                continue
            price = _parse_price(price_raw)
            title = title.lower()
            if t1 in title:
                team1_odds = price
            elif t2 in title:
                team2_odds = price

        slug = result.get("slug")
        if isinstance(slug, str) and slug:
            market_url = f"{market_base_url.rstrip('/')}/{slug}"
        else:
            market_url = fallback_url
        return OddsResult(
            team1_odds=team1_odds,
            team2_odds=team2_odds,
            market_url=market_url,
            source="market",
        )
    return None


class MarketCorrelator:
    """Searches Polymarket for a match between two teams. Never raises to the caller."""

    def __init__(
        self,
        gamma_api_base: str = GAMMA_API_BASE,
        market_base_url: str = POLYMARKET_URL,
        fallback_base_url: str = FALLBACK_BASE_URL,
        limit: int = SEARCH_LIMIT,
        user_agent: str = "valbar/0.1.0",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.search_url = gamma_api_base.rstrip("/") + "/public-search"
        self.market_base_url = market_base_url
        self.fallback_base_url = fallback_base_url
        self.limit = limit
        self.user_agent = user_agent
        self.timeout = timeout
        self._transport = transport

    async def _search(self, query: str) -> Any | None:
        """Run one search; None on transport failure, non-2xx status, or invalid JSON."""
        params = {"q": query, "limit": self.limit}
        headers = {"User-Agent": self.user_agent}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport, follow_redirects=True
            ) as client:
                resp = await client.get(self.search_url, params=params, headers=headers)
        except httpx.HTTPError as e:
            log.warning("market_search_failed", query=query, error=str(e) or type(e).__name__)
            return None
        if not resp.is_success:
            log.warning("market_search_failed", query=query, status=resp.status_code)
            return None
        try:
            return resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            log.warning("market_search_bad_json", query=query, error=str(e))
            return None

    async def correlate(self, team1: str, team2: str, *, today: date | None = None) -> OddsResult:
        fallback_url = fallback_market_url(team1, team2, today=today, base_url=self.fallback_base_url)
        payload = await self._search(f"{team1} vs {team2}")
        if payload is not None:
            found = match_market(payload, team1, team2, fallback_url, self.market_base_url)
            if found is not None:
                log.debug(
                    "market_matched",
                    team1=team1,
                    team2=team2,
                    url=found.market_url,
                    team1_odds=found.team1_odds,
                    team2_odds=found.team2_odds,
                )
                return found
        log.debug("market_not_found", team1=team1, team2=team2, fallback=fallback_url)
        return OddsResult(market_url=fallback_url, source="fallback")
