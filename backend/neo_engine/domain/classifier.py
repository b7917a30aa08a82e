from __future__ import annotations

from collections import Counter
from typing import Iterable, Mapping, Optional

from .models import ZONE_PRESSURE, ZONE_SHRAPNEL, ZONE_THERMAL, InfrastructureItem

# Tag keys checked in order; the first present one gives the category
CATEGORY_KEYS = ("amenity", "landuse", "building")
NAME_KEYS = ("name", "name:en", "name:tr")

DEFAULT_NAME = "Unnamed"
DEFAULT_NAMES = {
    "industrial": "Industrial Area",
    "farmland": "Agricultural Land",
    "farmyard": "Agricultural Land",
    "factory": "Factory",
    "warehouse": "Warehouse",
    "orchard": "Orchard",
    "vineyard": "Vineyard",
}

# Absolute distance bands in km, independent of the blast radii
THERMAL_ZONE_MAX_KM = 5.0
PRESSURE_ZONE_MAX_KM = 12.0

# "college" is requested by the Overpass query but not counted as a school
COUNTER_CATEGORIES = {
    "hospitals": frozenset({"hospital", "clinic", "doctors"}),
    "schools": frozenset({"school", "university", "kindergarten"}),
    "industrial": frozenset({"industrial", "factory", "warehouse"}),
    "farmland": frozenset({"farm", "farmland", "farmyard"}),
}


def resolve_category(tags: Mapping[str, object]) -> Optional[str]:
    for key in CATEGORY_KEYS:
        if key in tags:
            return str(tags[key])
    return None


def resolve_name(tags: Mapping[str, object], category: str) -> str:
    for key in NAME_KEYS:
        if key in tags:
            return str(tags[key])
    return DEFAULT_NAMES.get(category, DEFAULT_NAME)


def assign_zone(distance_km: float) -> str:
    if distance_km < THERMAL_ZONE_MAX_KM:
        return ZONE_THERMAL
    if distance_km < PRESSURE_ZONE_MAX_KM:
        return ZONE_PRESSURE
    return ZONE_SHRAPNEL


def counter_for(category: str) -> Optional[str]:
    for counter, categories in COUNTER_CATEGORIES.items():
        if category in categories:
            return counter
    return None


def count_categories(items: Iterable[InfrastructureItem]) -> dict[str, int]:
    counts = Counter({counter: 0 for counter in COUNTER_CATEGORIES})
    for item in items:
        counter = counter_for(item.type)
        if counter is not None:
            counts[counter] += 1
    return dict(counts)
