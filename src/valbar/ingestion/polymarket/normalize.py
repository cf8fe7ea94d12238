"""Team display name -> URL-safe slug used in fallback market links."""

from __future__ import annotations

from types import MappingProxyType

# Lower-cased team name or abbreviation -> Polymarket short code
TEAM_ABBREVIATIONS = MappingProxyType(
    {
        "100 thieves": "100t",
        "100t": "100t",
        "mibr": "mibr",
        "nrg": "nrg",
        "g2 esports": "g2",
        "g2": "g2",
        "sentinels": "sentinels",
        "fnatic": "fnatic",
        "team liquid": "tl",
        "paper rex": "prx",
        "loud": "loud",
        "kru esports": "kru",
        "kru": "kru",
        "koi": "koi",
        "drx": "drx",
    }
)


def team_to_slug(name: str) -> str:
    """Known abbreviation if listed, else the lower-cased name with non-alphanumerics removed."""
    lowered = name.lower()
    abbr = TEAM_ABBREVIATIONS.get(lowered)
    if abbr is not None:
        return abbr
    return "".join(c for c in lowered if c.isalnum())
