"""Hand-authored matches and odds served in offline mode."""

from __future__ import annotations

from valbar.ingestion.polymarket.search import POLYMARKET_URL
from valbar.models import MatchSegment, OddsResult


def fixture_matches() -> list[MatchSegment]:
    return [
        MatchSegment(
            team1="Sentinels",
            team2="100 Thieves",
            score1="13",
            score2="9",
            current_map="Ascent",
            match_event="VCT 2025: Americas Stage 1",
            match_series="Regular Season",
            time_until_match="LIVE",
            flag1="flag_us",
            flag2="flag_us",
            team1_logo="https://owcdn.net/img/62e7a0e8f1c0b.png",
            team2_logo="https://owcdn.net/img/62e7a0e8f1c0b.png",
            team1_round_ct="7",
            team1_round_t="6",
            team2_round_ct="5",
            team2_round_t="4",
            map_number="1",
            unix_timestamp="1713996000",
            match_page="https://www.vlr.gg/12345",
        ),
        MatchSegment(
            team1="Fnatic",
            team2="Team Liquid",
            score1="7",
            score2="5",
            current_map="Bind",
            match_event="VCT 2025: EMEA Stage 1",
            match_series="Regular Season",
            time_until_match="LIVE",
            map_number="2",
        ),
        MatchSegment(
            team1="Paper Rex",
            team2="DRX",
            score1="10",
            score2="8",
            current_map="Icebox",
            match_event="VCT 2025: Pacific Stage 1",
            match_series="Regular Season",
            time_until_match="LIVE",
            map_number="1",
        ),
        MatchSegment(
            team1="LOUD",
            team2="KRÜ Esports",
            score1="6",
            score2="6",
            current_map="Lotus",
            match_event="VCT 2025: Americas Stage 1",
            match_series="Regular Season",
            time_until_match="LIVE",
            map_number="3",
        ),
        MatchSegment(
            team1="G2 Esports",
            team2="KOI",
            score1="12",
            score2="11",
            current_map="Split",
            match_event="VCT 2025: EMEA Stage 1",
            match_series="Regular Season",
            time_until_match="LIVE",
            map_number="2",
        ),
    ]


class FixtureMatchFeed:
    """Score feed that never touches the network."""

    def __init__(self, segments: list[MatchSegment] | None = None) -> None:
        self._segments = list(segments) if segments is not None else fixture_matches()

    async def fetch(self) -> list[MatchSegment]:
        return list(self._segments)


class FixtureOdds:
    """Odds source returning fixed preview prices for any pairing."""

    def __init__(
        self,
        team1_odds: float = 0.55,
        team2_odds: float = 0.45,
        market_url: str = f"{POLYMARKET_URL}/sports/valorant",
    ) -> None:
        self.team1_odds = team1_odds
        self.team2_odds = team2_odds
        self.market_url = market_url

    async def correlate(self, team1: str, team2: str) -> OddsResult:
        return OddsResult(
            team1_odds=self.team1_odds,
            team2_odds=self.team2_odds,
            market_url=self.market_url,
            source="market",
        )
