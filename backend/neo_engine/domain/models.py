from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

ZONE_THERMAL = "thermal"
ZONE_PRESSURE = "pressure"
ZONE_SHRAPNEL = "shrapnel"
DAMAGE_ZONES = (ZONE_THERMAL, ZONE_PRESSURE, ZONE_SHRAPNEL)

STATUS_OK = "ok"
STATUS_UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class NearEarthObject:
    id: str
    name: str
    diameter_min_m: float
    diameter_max_m: float
    velocity_km_s: float
    miss_distance_km: float
    is_potentially_hazardous: bool
    close_approach_date: str

    def __post_init__(self):
        if self.diameter_min_m > self.diameter_max_m:
            raise ValueError("diameter_min_m must not exceed diameter_max_m")
        if self.velocity_km_s < 0 or self.miss_distance_km < 0:
            raise ValueError("velocity and miss distance must be >= 0")

    @property
    def average_diameter_m(self) -> float:
        return (self.diameter_min_m + self.diameter_max_m) / 2.0


@dataclass(frozen=True)
class InfrastructureItem:
    type: str
    name: str
    lat: float
    lng: float
    distance_km: float
    zone: str

    def __post_init__(self):
        if self.zone not in DAMAGE_ZONES:
            raise ValueError(f"Unknown damage zone '{self.zone}'")
        if self.distance_km < 0:
            raise ValueError("distance_km must be >= 0")


@dataclass(frozen=True)
class BlastRadii:
    thermal_km: float
    pressure_km: float
    shrapnel_km: float


@dataclass(frozen=True)
class ImpactReport:
    latitude: float
    longitude: float
    kinetic_energy_joules: float
    radii: BlastRadii
    hospitals_affected: int = 0
    schools_affected: int = 0
    roads_affected: int = 0
    industrial_affected: int = 0
    farmland_affected: int = 0
    estimated_population: int = 0
    infrastructure: Tuple[InfrastructureItem, ...] = ()
    infrastructure_status: str = STATUS_OK

    def __post_init__(self):
        if self.kinetic_energy_joules <= 0:
            raise ValueError("kinetic_energy_joules must be > 0")
        if self.estimated_population < 0:
            raise ValueError("estimated_population must be >= 0")
        counted = self.hospitals_affected + self.schools_affected + self.industrial_affected + self.farmland_affected
        if counted > len(self.infrastructure):
            raise ValueError("category counts exceed the infrastructure list")
