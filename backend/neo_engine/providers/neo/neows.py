from __future__ import annotations

from datetime import date
from typing import List, Optional

from neo_engine.domain.models import NearEarthObject
from neo_engine.errors import NeoFeedParseError
from neo_engine.infra.nasa.neows_client import NeoWsClient

from .base import NeoFeedProvider


class NeoWsFeedProvider(NeoFeedProvider):
    def __init__(self, client: Optional[NeoWsClient] = None):
        self.client = client or NeoWsClient()

    def fetch_feed(self, *, start: date, end: date) -> List[NearEarthObject]:
        payload = self.client.fetch_feed(start, end)
        return self._process_feed(payload)

    def _process_feed(self, payload: dict) -> List[NearEarthObject]:
        try:
            by_date = payload["near_earth_objects"]
            results: List[NearEarthObject] = []
            for approach_date, objects in by_date.items():
                for obj in objects:
                    results.append(self._map_object(obj, approach_date))
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as exc:
            raise NeoFeedParseError(f"Malformed NEO feed: {exc!r}") from exc
        return results

    @staticmethod
    def _map_object(obj: dict, approach_date: str) -> NearEarthObject:
        diameter = obj["estimated_diameter"]["meters"]
        approach = obj["close_approach_data"][0]
        return NearEarthObject(
            id=str(obj["id"]),
            name=str(obj["name"]),
            diameter_min_m=float(diameter["estimated_diameter_min"]),
            diameter_max_m=float(diameter["estimated_diameter_max"]),
            velocity_km_s=float(approach["relative_velocity"]["kilometers_per_second"]),
            miss_distance_km=float(approach["miss_distance"]["kilometers"]),
            is_potentially_hazardous=_require_bool(obj["is_potentially_hazardous_asteroid"]),
            close_approach_date=approach_date,
        )


def _require_bool(value: object) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a JSON boolean, got {value!r}")
    return value
