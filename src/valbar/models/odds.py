"""OddsResult - outcome of one market correlation attempt."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class OddsResult(BaseModel):
    """Per-team probabilities plus a market link that is always populated.

    ``source`` is ``"market"`` when a search result was matched (odds may
    still be partial) and ``"fallback"`` when only the constructed link is
    available.
    """

    model_config = ConfigDict(frozen=True)

    team1_odds: float | None = Field(None, ge=0, le=1, description="Probability in [0, 1]")
    team2_odds: float | None = Field(None, ge=0, le=1, description="Probability in [0, 1]")
    market_url: str = Field(..., min_length=1)
    source: Literal["market", "fallback"] = "fallback"

    @property
    def found(self) -> bool:
        return self.source == "market"
