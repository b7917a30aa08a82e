from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from neo_engine.domain.classifier import assign_zone, resolve_category, resolve_name
from neo_engine.domain.geodesy import haversine_km
from neo_engine.domain.models import InfrastructureItem
from neo_engine.infra.osm.overpass_client import OverpassClient

from .base import InfrastructureFetch, InfrastructureProvider

logger = logging.getLogger(__name__)


class OverpassInfrastructureProvider(InfrastructureProvider):
    def __init__(self, client: Optional[OverpassClient] = None):
        self.client = client or OverpassClient()

    def fetch_infrastructure(self, *, lat: float, lng: float, radius_m: float) -> InfrastructureFetch:
        response = self.client.fetch_elements(lat, lng, radius_m)
        items, stats = self._process_elements(response.elements, lat, lng)
        return InfrastructureFetch(items=items, available=response.ok, stats=stats)

    def _process_elements(self, elements: list, lat: float, lng: float) -> Tuple[List[InfrastructureItem], dict]:
        mapped: List[InfrastructureItem] = []
        stats = {"fetched": len(elements), "mapped": 0, "skipped": 0, "malformed": 0}
        for element in elements:
            try:
                item = self._map_element(element, lat, lng)
            except (KeyError, TypeError, ValueError, AttributeError) as exc:
                logger.debug("Skipping malformed Overpass element: %s", exc)
                stats["malformed"] += 1
                continue
            if item is None:
                stats["skipped"] += 1
                continue
            mapped.append(item)
        stats["mapped"] = len(mapped)
        return mapped, stats

    @staticmethod
    def _map_element(element: dict, impact_lat: float, impact_lng: float) -> Optional[InfrastructureItem]:
        coords = _element_coordinates(element)
        if coords is None:
            return None
        tags = element.get("tags")
        if not isinstance(tags, dict) or not tags:
            return None
        category = resolve_category(tags)
        if category is None:
            return None
        lat, lng = coords
        distance = haversine_km(impact_lat, impact_lng, lat, lng)
        return InfrastructureItem(
            type=category,
            name=resolve_name(tags, category),
            lat=lat,
            lng=lng,
            distance_km=distance,
            zone=assign_zone(distance),
        )


def _element_coordinates(element: dict) -> Optional[Tuple[float, float]]:
    # Ways carry their centroid under "center" when queried with "out center"
    center = element.get("center")
    if center:
        return float(center["lat"]), float(center["lon"])
    if "lat" in element and "lon" in element:
        return float(element["lat"]), float(element["lon"])
    return None
