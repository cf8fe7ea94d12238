"""Polymarket search correlation."""

from datetime import date

import httpx
import pytest

from valbar.ingestion.polymarket.search import MarketCorrelator, fallback_market_url, match_market

DAY = date(2025, 4, 24)
FALLBACK = "https://polymarket.com/sports/valorant/games/week/1/val-sentinels-100t-2025-04-24"


def _result(question, outcomes=None, slug=None):
    r = {"question": question}
    if outcomes is not None:
        r["outcomes"] = outcomes
    if slug is not None:
        r["slug"] = slug
    return r


def test_fallback_url_uses_slugs_and_date():
    assert fallback_market_url("Sentinels", "100 Thieves", today=DAY) == FALLBACK
    assert (
        fallback_market_url("Cloud9", "Team Liquid", today=DAY, base_url="https://pm.test/games/")
        == "https://pm.test/games/val-cloud9-tl-2025-04-24"
    )


@pytest.mark.asyncio
async def test_matched_market_returns_odds_and_slug_url(json_transport):
    seen = []
    body = {
        "results": [
            _result(
                "Valorant: Sentinels vs 100 Thieves (BO3)",
                outcomes=[{"title": "Sentinels", "price": "0.62"}, {"title": "100 Thieves", "price": "0.38"}],
                slug="event/val-sen-100t",
            )
        ]
    }
    correlator = MarketCorrelator(user_agent="valbar-test", transport=json_transport(body, seen=seen))
    result = await correlator.correlate("Sentinels", "100 Thieves", today=DAY)
    assert result.found
    assert result.team1_odds == pytest.approx(0.62)
    assert result.team2_odds == pytest.approx(0.38)
    assert result.market_url == "https://polymarket.com/event/val-sen-100t"

    request = seen[0]
    assert request.url.path == "/public-search"
    assert request.url.params["q"] == "Sentinels vs 100 Thieves"
    assert request.url.params["limit"] == "10"
    assert request.headers["User-Agent"] == "valbar-test"


@pytest.mark.asyncio
async def test_first_qualifying_result_wins(json_transport):
    body = {
        "results": [
            _result("Who wins the NBA title?", outcomes=[]),
            _result(
                "100 thieves vs SENTINELS - map 1",
                outcomes=[{"title": "Sentinels", "price": "0.51"}],
                slug="first",
            ),
            _result(
                "Sentinels vs 100 Thieves - series",
                outcomes=[{"title": "Sentinels", "price": "0.70"}],
                slug="second",
            ),
        ]
    }
    correlator = MarketCorrelator(transport=json_transport(body))
    result = await correlator.correlate("Sentinels", "100 Thieves", today=DAY)
    assert result.market_url == "https://polymarket.com/first"
    assert result.team1_odds == pytest.approx(0.51)
    assert result.team2_odds is None


@pytest.mark.asyncio
async def test_server_error_returns_fallback(json_transport):
    correlator = MarketCorrelator(transport=json_transport({"error": "boom"}, status_code=500))
    result = await correlator.correlate("Sentinels", "100 Thieves", today=DAY)
    assert result.team1_odds is None
    assert result.team2_odds is None
    assert result.market_url == FALLBACK
    assert not result.found


@pytest.mark.asyncio
async def test_connection_failure_returns_fallback(failing_transport):
    correlator = MarketCorrelator(transport=failing_transport)
    result = await correlator.correlate("Sentinels", "100 Thieves", today=DAY)
    assert result.market_url == FALLBACK
    assert result.source == "fallback"


@pytest.mark.asyncio
async def test_invalid_json_returns_fallback(json_transport):
    correlator = MarketCorrelator(transport=json_transport("not json"))
    result = await correlator.correlate("Sentinels", "100 Thieves", today=DAY)
    assert result.market_url == FALLBACK


@pytest.mark.asyncio
async def test_no_qualifying_result_returns_fallback(json_transport):
    body = {"results": [_result("Fnatic vs Team Liquid", outcomes=[], slug="fnc-tl")]}
    correlator = MarketCorrelator(transport=json_transport(body))
    result = await correlator.correlate("Sentinels", "100 Thieves", today=DAY)
    assert result.market_url == FALLBACK
    assert result.team1_odds is None and result.team2_odds is None


def test_missing_slug_uses_fallback_url():
    payload = {"results": [_result("Sentinels vs 100 Thieves", outcomes=[{"title": "100 Thieves", "price": "0.4"}])]}
    result = match_market(payload, "Sentinels", "100 Thieves", FALLBACK)
    assert result is not None
    assert result.found
    assert result.market_url == FALLBACK
    assert result.team1_odds is None
    assert result.team2_odds == pytest.approx(0.4)


def test_result_without_outcomes_is_skipped():
    payload = {
        "results": [
            _result("Sentinels vs 100 Thieves", slug="no-outcomes"),
            _result("Sentinels vs 100 Thieves", outcomes=[], slug="with-outcomes"),
        ]
    }
    result = match_market(payload, "Sentinels", "100 Thieves", FALLBACK)
    assert result.market_url == "https://polymarket.com/with-outcomes"


def test_bad_and_unmatched_outcomes_are_dropped():
    payload = {
        "results": [
            _result(
                "Sentinels vs 100 Thieves",
                outcomes=[
                    {"title": "Draw", "price": "0.1"},
                    {"title": "Sentinels", "price": "n/a"},
                    {"title": "100 Thieves", "price": 0.3},
                    {"title": "100 Thieves"},
                    "garbage",
                ],
            )
        ]
    }
    result = match_market(payload, "Sentinels", "100 Thieves", FALLBACK)
    assert result.team1_odds is None
    assert result.team2_odds is None


def test_out_of_range_price_is_dropped():
    payload = {"results": [_result("Sentinels vs 100 Thieves", outcomes=[{"title": "Sentinels", "price": "1.5"}])]}
    assert match_market(payload, "Sentinels", "100 Thieves", FALLBACK).team1_odds is None


def test_missing_or_malformed_results_mean_no_match():
    assert match_market({}, "Sentinels", "100 Thieves", FALLBACK) is None
    assert match_market({"results": "nope"}, "Sentinels", "100 Thieves", FALLBACK) is None
    assert match_market([], "Sentinels", "100 Thieves", FALLBACK) is None
    assert match_market({"results": [{"slug": "x"}]}, "Sentinels", "100 Thieves", FALLBACK) is None


def test_substring_containment_is_loose():
    # Known approximation: "loud" is found inside "cloud9", so a Cloud9 market qualifies for LOUD.
    payload = {
        "results": [
            _result("Cloud9 vs KOI", outcomes=[{"title": "KOI", "price": "0.45"}], slug="c9-koi"),
        ]
    }
    result = match_market(payload, "LOUD", "KOI", FALLBACK)
    assert result is not None
    assert result.market_url == "https://polymarket.com/c9-koi"
    assert result.team2_odds == pytest.approx(0.45)


@pytest.mark.asyncio
async def test_search_follows_redirect():
    seen = []

    def handler(request):
        seen.append(request)
        if request.url.host == "old.test":
            return httpx.Response(302, headers={"location": "https://new.test/public-search?q=A+vs+B&limit=10"})
        return httpx.Response(
            200,
            json={"results": [_result("A vs B", outcomes=[{"title": "A", "price": "0.3"}], slug="a-b")]},
        )

    correlator = MarketCorrelator(gamma_api_base="https://old.test", transport=httpx.MockTransport(handler))
    result = await correlator.correlate("A", "B", today=DAY)
    assert result.market_url == "https://polymarket.com/a-b"
    assert result.team1_odds == pytest.approx(0.3)
    assert seen[-1].url.host == "new.test"
