"""MatchSegment and the score feed envelope."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_OPTIONAL_FIELDS = (
    "current_map",
    "match_event",
    "match_series",
    "time_until_match",
    "flag1",
    "flag2",
    "team1_logo",
    "team2_logo",
    "team1_round_ct",
    "team1_round_t",
    "team2_round_ct",
    "team2_round_t",
    "map_number",
    "unix_timestamp",
    "match_page",
)


class MatchSegment(BaseModel):
    """One live or upcoming match as reported by the score feed."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    team1: str
    team2: str
    score1: str
    score2: str
    current_map: str = ""
    match_event: str = ""
    match_series: str = ""
    time_until_match: str = ""  # "LIVE" or a countdown such as "2h 10m"
    flag1: str = ""
    flag2: str = ""
    team1_logo: str = ""
    team2_logo: str = ""
    team1_round_ct: str = ""
    team1_round_t: str = ""
    team2_round_ct: str = ""
    team2_round_t: str = ""
    map_number: str = ""
    unix_timestamp: str = ""
    match_page: str = ""

    @field_validator(*_OPTIONAL_FIELDS, mode="before")
    @classmethod
    def _null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class FeedData(BaseModel):
    status: int
    segments: list[MatchSegment] = Field(default_factory=list)


class FeedEnvelope(BaseModel):
    """Top-level score feed response: {status, data: {status, segments}}."""

    status: str
    data: FeedData
