from __future__ import annotations

import math
from datetime import date

import pytest
from fastapi.testclient import TestClient

from neo_engine.api.main import create_app
from neo_engine.domain.geodesy import EARTH_RADIUS_KM
from neo_engine.providers.infrastructure.base import InfrastructureFetch
from neo_engine.services.feed_cache import TTLCache
from neo_engine.services.impact_report import ImpactReportService
from neo_engine.services.neo_feed import NeoFeedService
from neo_engine.settings import Settings

TODAY = date(2026, 10, 19)


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def east_of_origin(distance_km: float) -> float:
    """Longitude on the equator lying ``distance_km`` east of (0, 0)."""
    return math.degrees(distance_km / EARTH_RADIUS_KM)


def neo_object(neo_id: str = "3542519", **overrides) -> dict:
    payload = {
        "id": neo_id,
        "name": f"({neo_id})",
        "is_potentially_hazardous_asteroid": False,
        "estimated_diameter": {
            "meters": {"estimated_diameter_min": 120.5, "estimated_diameter_max": 269.4},
        },
        "close_approach_data": [
            {
                "relative_velocity": {"kilometers_per_second": "18.1279360862"},
                "miss_distance": {"kilometers": "45290298.225725659"},
            }
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def neows_payload():
    return {
        "element_count": 3,
        "near_earth_objects": {
            "2026-10-18": [neo_object("2465633"), neo_object("3426410", is_potentially_hazardous_asteroid=True)],
            "2026-10-19": [neo_object("3553060")],
        },
    }


@pytest.fixture()
def impact_elements():
    """Hospital 2 km, college 4 km, farmland 20 km, warehouse 8 km east of (0, 0)."""
    return [
        {"type": "node", "id": 1, "lat": 0.0, "lon": east_of_origin(2), "tags": {"amenity": "hospital", "name": "City Hospital"}},
        {"type": "node", "id": 2, "lat": 0.0, "lon": east_of_origin(4), "tags": {"amenity": "college"}},
        {
            "type": "way",
            "id": 3,
            "center": {"lat": 0.0, "lon": east_of_origin(20)},
            "tags": {"landuse": "farmland"},
        },
        {
            "type": "way",
            "id": 4,
            "center": {"lat": 0.0, "lon": east_of_origin(8)},
            "tags": {"building": "warehouse"},
        },
    ]


@pytest.fixture()
def fake_clock():
    return FakeClock()


class StubNeoProvider:
    def __init__(self, records=None, error: Exception = None):
        self.records = list(records or [])
        self.error = error
        self.calls: list[tuple[date, date]] = []

    def fetch_feed(self, *, start: date, end: date):
        self.calls.append((start, end))
        if self.error is not None:
            raise self.error
        return list(self.records)


class StubInfrastructureProvider:
    def __init__(self, items=None, available: bool = True, error: Exception = None):
        self.items = list(items or [])
        self.available = available
        self.error = error
        self.calls: list[dict] = []

    def fetch_infrastructure(self, *, lat: float, lng: float, radius_m: float) -> InfrastructureFetch:
        self.calls.append({"lat": lat, "lng": lng, "radius_m": radius_m})
        if self.error is not None:
            raise self.error
        return InfrastructureFetch(items=list(self.items), available=self.available)


@pytest.fixture()
def stub_neo_provider():
    return StubNeoProvider()


@pytest.fixture()
def stub_infrastructure_provider():
    return StubInfrastructureProvider()


@pytest.fixture()
def api_client(stub_neo_provider, stub_infrastructure_provider, fake_clock):
    feed_service = NeoFeedService(stub_neo_provider, TTLCache(3600, clock=fake_clock), today=lambda: TODAY)
    impact_service = ImpactReportService(stub_infrastructure_provider)
    app = create_app(Settings(), feed_service=feed_service, impact_service=impact_service)
    with TestClient(app) as client:
        yield client
