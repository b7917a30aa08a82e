from __future__ import annotations

import logging
from datetime import date
from typing import Optional

import httpx

from neo_engine.errors import NeoFeedUpstreamError

logger = logging.getLogger(__name__)


class NeoWsClient:
    BASE_URL = "https://api.nasa.gov/neo/rest/v1"

    def __init__(
        self,
        api_key: str = "DEMO_KEY",
        base_url: Optional[str] = None,
        connect_timeout: float = 10.0,
        read_timeout: Optional[float] = 60.0,
        http: Optional[httpx.Client] = None,
    ):
        self.api_key = api_key
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=httpx.Timeout(read_timeout, connect=connect_timeout))

    def fetch_feed(self, start: date, end: date) -> dict:
        params = {
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "api_key": self.api_key,
        }
        try:
            resp = self._http.get(f"{self.base_url}/feed", params=params)
        except httpx.HTTPError as exc:
            raise NeoFeedUpstreamError(f"Failed to fetch NEO data: {exc}") from exc
        if resp.status_code != 200:
            raise NeoFeedUpstreamError(
                f"NASA API returned status: {resp.status_code}",
                status_code=resp.status_code,
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise NeoFeedUpstreamError(f"NASA API returned invalid JSON: {exc}") from exc

    def close(self) -> None:
        if self._owns_http:
            self._http.close()
