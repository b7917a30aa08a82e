from __future__ import annotations

from datetime import date
from typing import List, Protocol

from neo_engine.domain.models import NearEarthObject


class NeoFeedProvider(Protocol):
    """Contract for near-Earth-object feed providers."""

    def fetch_feed(self, *, start: date, end: date) -> List[NearEarthObject]:
        """Return every object approaching between ``start`` and ``end``.

        Failures raise ``NeoFeedError``; a partial feed is never returned.
        """
        raise NotImplementedError
