"""Shared fixtures."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from valbar.models import MatchSegment


@pytest.fixture
def make_segment() -> Callable[..., MatchSegment]:
    def _make(**overrides: Any) -> MatchSegment:
        fields = {"team1": "Sentinels", "team2": "100 Thieves", "score1": "13", "score2": "9"}
        fields.update(overrides)
        return MatchSegment(**fields)

    return _make


@pytest.fixture
def json_transport() -> Callable[..., httpx.MockTransport]:
    """MockTransport factory answering every request with ``body`` as JSON (raw text if str)."""

    def _make(body: Any, status_code: int = 200, seen: list[httpx.Request] | None = None) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            if isinstance(body, str):
                return httpx.Response(status_code, text=body)
            return httpx.Response(status_code, json=body)

        return httpx.MockTransport(handler)

    return _make


@pytest.fixture
def failing_transport() -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    return httpx.MockTransport(handler)
