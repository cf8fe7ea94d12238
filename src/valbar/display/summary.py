"""MatchSegment -> one-line status text."""

from __future__ import annotations

from valbar.models import MatchSegment

LIVE = "LIVE"
UNKNOWN_MAP = "Unknown Map"


def summarize(segment: MatchSegment) -> str:
    """
    "{team1} vs {team2} | {score1} - {score2}" followed by the map when the match is live,
    the status text when it is anything else, or nothing when the status is empty.
    """
    teams = f"{segment.team1} vs {segment.team2}"
    score = f"{segment.score1} - {segment.score2}"
    map_name = segment.current_map or UNKNOWN_MAP
    status = segment.time_until_match

    if status == LIVE:
        return f"{teams} | {score} | {map_name}"
    if status:
        return f"{teams} | {score} | {status}"
    return f"{teams} | {score}"
