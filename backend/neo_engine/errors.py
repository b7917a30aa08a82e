from __future__ import annotations

from typing import Optional


class NeoEngineError(Exception):
    """Base class for service errors."""


class NeoFeedError(NeoEngineError):
    """The NEO feed could not be produced; the request fails."""


class NeoFeedUpstreamError(NeoFeedError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NeoFeedParseError(NeoFeedError):
    pass


class InvalidDateRangeError(NeoEngineError, ValueError):
    pass
