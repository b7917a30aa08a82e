from __future__ import annotations

import pytest

from conftest import east_of_origin
from neo_engine.domain import classifier
from neo_engine.domain.models import InfrastructureItem
from neo_engine.providers.infrastructure.overpass import OverpassInfrastructureProvider


def _provider() -> OverpassInfrastructureProvider:
    return OverpassInfrastructureProvider.__new__(OverpassInfrastructureProvider)


def test_fixture_elements_are_zoned_and_counted(impact_elements):
    items, stats = _provider()._process_elements(impact_elements, 0.0, 0.0)

    assert [item.type for item in items] == ["hospital", "college", "farmland", "warehouse"]
    assert [item.zone for item in items] == ["thermal", "thermal", "shrapnel", "pressure"]
    assert [round(item.distance_km, 6) for item in items] == [2.0, 4.0, 20.0, 8.0]
    counts = classifier.count_categories(items)
    assert counts == {"hospitals": 1, "schools": 0, "industrial": 1, "farmland": 1}
    assert stats["mapped"] == 4


def test_college_is_returned_but_not_counted_as_school():
    item = InfrastructureItem("college", "Tech College", 0.0, 0.0, 1.0, "thermal")
    assert classifier.count_categories([item])["schools"] == 0


@pytest.mark.parametrize(
    "distance, zone",
    [(0.0, "thermal"), (4.999, "thermal"), (5.0, "pressure"), (11.999, "pressure"), (12.0, "shrapnel"), (500.0, "shrapnel")],
)
def test_zone_thresholds_are_absolute(distance, zone):
    assert classifier.assign_zone(distance) == zone


def test_category_key_priority():
    assert classifier.resolve_category({"building": "factory", "landuse": "industrial", "amenity": "police"}) == "police"
    assert classifier.resolve_category({"building": "factory", "landuse": "industrial"}) == "industrial"
    assert classifier.resolve_category({"building": "factory"}) == "factory"
    assert classifier.resolve_category({"highway": "primary"}) is None


def test_name_priority_and_defaults():
    assert classifier.resolve_name({"name:tr": "Hastane", "name:en": "Hospital"}, "hospital") == "Hospital"
    assert classifier.resolve_name({"name:tr": "Fabrika"}, "factory") == "Fabrika"
    assert classifier.resolve_name({}, "industrial") == "Industrial Area"
    assert classifier.resolve_name({}, "farmyard") == "Agricultural Land"
    assert classifier.resolve_name({}, "vineyard") == "Vineyard"
    assert classifier.resolve_name({}, "police") == "Unnamed"


def test_uncounted_categories_stay_in_the_list():
    elements = [
        {"lat": 0.0, "lon": east_of_origin(1), "tags": {"amenity": "police"}},
        {"lat": 0.0, "lon": east_of_origin(1), "tags": {"amenity": "fire_station"}},
        {"center": {"lat": 0.0, "lon": east_of_origin(3)}, "tags": {"landuse": "orchard"}},
    ]
    items, _ = _provider()._process_elements(elements, 0.0, 0.0)
    counts = classifier.count_categories(items)
    assert len(items) == 3
    assert sum(counts.values()) == 0
    assert items[2].name == "Orchard"


def test_center_preferred_over_own_coordinates():
    element = {"lat": 10.0, "lon": 10.0, "center": {"lat": 0.0, "lon": east_of_origin(6)}, "tags": {"landuse": "industrial"}}
    items, _ = _provider()._process_elements([element], 0.0, 0.0)
    assert items[0].lat == 0.0
    assert items[0].zone == "pressure"


def test_unusable_elements_are_dropped():
    elements = [
        {"type": "relation", "id": 1, "tags": {"amenity": "hospital"}},
        {"lat": 0.0, "lon": 0.01},
        {"lat": 0.0, "lon": 0.01, "tags": {}},
        {"lat": 0.0, "lon": 0.01, "tags": {"highway": "primary"}},
        {"lat": "north", "lon": 0.01, "tags": {"amenity": "school"}},
        {"center": {"lon": 0.01}, "tags": {"amenity": "school"}},
        "not-an-element",
        {"lat": 0.0, "lon": 0.02, "tags": {"amenity": "school", "name": "Survivor"}},
    ]
    items, stats = _provider()._process_elements(elements, 0.0, 0.0)
    assert [item.name for item in items] == ["Survivor"]
    assert stats == {"fetched": 8, "mapped": 1, "skipped": 4, "malformed": 3}
