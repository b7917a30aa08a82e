from __future__ import annotations

import math

from .models import BlastRadii

# Design parameters, not physical constants: 1 PJ is the unit scale and
# each radius grows with the cube root of the energy.
REFERENCE_ENERGY_J = 1e15
THERMAL_COEFFICIENT_KM = 0.5
PRESSURE_COEFFICIENT_KM = 1.2
SHRAPNEL_COEFFICIENT_KM = 2.0

MIN_SEARCH_RADIUS_M = 2000.0
MAX_SEARCH_RADIUS_M = 15000.0


def scale_factor(kinetic_energy_joules: float) -> float:
    if not math.isfinite(kinetic_energy_joules) or kinetic_energy_joules <= 0:
        raise ValueError("kinetic_energy_joules must be a finite number > 0")
    return (kinetic_energy_joules / REFERENCE_ENERGY_J) ** (1.0 / 3.0)


def compute_blast_radii(kinetic_energy_joules: float) -> BlastRadii:
    s = scale_factor(kinetic_energy_joules)
    return BlastRadii(
        thermal_km=THERMAL_COEFFICIENT_KM * s,
        pressure_km=PRESSURE_COEFFICIENT_KM * s,
        shrapnel_km=SHRAPNEL_COEFFICIENT_KM * s,
    )


def effective_search_radius_m(radii: BlastRadii) -> float:
    """Overpass search radius: the shrapnel radius clamped to [2 km, 15 km]."""
    return max(MIN_SEARCH_RADIUS_M, min(radii.shrapnel_km * 1000.0, MAX_SEARCH_RADIUS_M))
