"""Pydantic schemas for API request/response consistency and OpenAPI docs."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


# --- Health ---
class HealthResponse(BaseModel):
    status: str = "ok"
    poller: dict[str, Any] | None = None


# --- Error (consistent shape for 4xx/5xx) ---
class ErrorResponse(BaseModel):
    detail: str = Field(..., description="Human-readable message")
    code: str | None = Field(None, description="Machine-readable code, e.g. feed_network, feed_decode")


# --- Display summary ---
class SummaryResponse(BaseModel):
    text: str | None = Field(None, description="Latest summary; null before the first successful poll")
    updated_at: datetime | None = None
    label: str = Field(..., description="Tray label including the prefix")
