from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Callable, Optional, Tuple

from neo_engine.domain.models import NearEarthObject
from neo_engine.errors import InvalidDateRangeError
from neo_engine.providers.neo.base import NeoFeedProvider

from .feed_cache import TTLCache

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600.0
DATE_FORMAT = "%Y-%m-%d"
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def cache_key(start: date, end: date) -> str:
    return f"{start.isoformat()}_{end.isoformat()}"


def parse_date_range(start: Optional[str], end: Optional[str]) -> Optional[Tuple[date, date]]:
    """Parse ISO dates; ``None`` when either bound is missing (today's feed)."""
    if not start or not end:
        return None
    try:
        start_day = _parse_day(start)
        end_day = _parse_day(end)
    except ValueError as exc:
        raise InvalidDateRangeError(f"Dates must be YYYY-MM-DD: {exc}") from exc
    if start_day > end_day:
        raise InvalidDateRangeError("startDate must not be after endDate")
    return start_day, end_day


def _parse_day(value: str) -> date:
    # strptime alone accepts unpadded months and days
    if not DATE_PATTERN.fullmatch(value):
        raise ValueError(f"{value!r} is not YYYY-MM-DD")
    return datetime.strptime(value, DATE_FORMAT).date()


class NeoFeedService:
    def __init__(
        self,
        provider: NeoFeedProvider,
        cache: Optional[TTLCache[Tuple[NearEarthObject, ...]]] = None,
        today: Callable[[], date] = date.today,
    ):
        self.provider = provider
        self.cache = cache if cache is not None else TTLCache(DEFAULT_TTL_SECONDS)
        self._today = today

    def fetch_feed(self, start: date, end: date) -> Tuple[NearEarthObject, ...]:
        key = cache_key(start, end)
        cached = self.cache.get(key)
        if cached is not None:
            return cached
        logger.info("NEO feed cache miss for %s, fetching upstream", key)
        records = tuple(self.provider.fetch_feed(start=start, end=end))
        self.cache.put(key, records)
        return records

    def fetch_today(self) -> Tuple[NearEarthObject, ...]:
        today = self._today()
        return self.fetch_feed(today, today)
