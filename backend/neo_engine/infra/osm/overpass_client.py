from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import httpx

logger = logging.getLogger(__name__)

# (element type, tag filter). The server's result set depends on the exact
# text of each selector.
SELECTORS = [
    ("node", '["amenity"~"hospital|clinic|doctors"]'),
    ("way", '["amenity"~"hospital|clinic"]'),
    ("node", '["amenity"~"school|university|college|kindergarten"]'),
    ("way", '["amenity"~"school|university"]'),
    ("node", '["amenity"~"fire_station|police"]'),
    ("node", '["landuse"="industrial"]'),
    ("way", '["landuse"="industrial"]'),
    ("node", '["building"~"industrial|warehouse|factory"]'),
    ("way", '["building"~"industrial|warehouse|factory"]'),
    ("way", '["landuse"~"farmland|farmyard|orchard|vineyard"]'),
    ("node", '["landuse"~"farmland|farm"]'),
    ("way", '["building"="farm"]'),
]


@dataclass
class OverpassResponse:
    elements: List[dict] = field(default_factory=list)
    ok: bool = True
    error: Optional[str] = None


def build_query(lat: float, lng: float, radius_m: float) -> str:
    around = f"(around:{int(radius_m)},{lat},{lng});"
    body = "".join(f"{element}{tag_filter}{around}" for element, tag_filter in SELECTORS)
    return f"[out:json][timeout:25];({body});out center;"


class OverpassClient:
    """Overpass interpreter client.

    ``timeout`` bounds each phase of the request (connect, write, read and
    pool wait) separately, as httpx timeouts do. It is not a deadline for the
    whole exchange. The query also carries ``[timeout:25]`` so the server
    stops evaluating before the client read limit.
    """

    BASE_URL = "https://overpass-api.de/api/interpreter"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        http: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url or self.BASE_URL
        self.timeout = timeout
        self._owns_http = http is None
        self._http = http or httpx.Client(timeout=timeout)

    def fetch_elements(self, lat: float, lng: float, radius_m: float) -> OverpassResponse:
        """POST the combined query; any failure yields an empty, not-ok response."""
        query = build_query(lat, lng, radius_m)
        logger.info("Overpass query radius=%dm at %s,%s", int(radius_m), lat, lng)
        try:
            resp = self._http.post(
                self.base_url,
                data={"data": query},
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self.timeout,
            )
        except httpx.HTTPError as exc:
            logger.warning("Overpass request failed: %s", exc)
            return OverpassResponse(ok=False, error=str(exc))
        if resp.status_code != 200:
            logger.warning("Overpass returned HTTP %s", resp.status_code)
            return OverpassResponse(ok=False, error=f"HTTP {resp.status_code}")
        try:
            payload = resp.json()
        except ValueError as exc:
            logger.warning("Overpass returned an undecodable body: %s", exc)
            return OverpassResponse(ok=False, error="invalid JSON")
        elements = payload.get("elements") if isinstance(payload, dict) else None
        if not isinstance(elements, list):
            return OverpassResponse()
        logger.info("Overpass found %d elements", len(elements))
        return OverpassResponse(elements=elements)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()
