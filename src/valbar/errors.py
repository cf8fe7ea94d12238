"""Error types raised by the feed client and the request facade."""

from __future__ import annotations

from enum import Enum


class FeedErrorKind(str, Enum):
    NETWORK = "network"  # connect/read/timeout or non-2xx status
    DECODE = "decode"  # malformed JSON or unexpected shape


class FeedError(Exception):
    """Score feed fetch failed."""

    def __init__(self, kind: FeedErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value} error: {self.message}"


class RequestError(Exception):
    """Foreground request failed; ``message`` is safe to show to a user."""

    def __init__(self, message: str, code: str = "request_failed") -> None:
        super().__init__(message)
        self.message = message
        self.code = code
