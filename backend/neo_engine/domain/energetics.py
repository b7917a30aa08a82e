"""Coarse energy estimates for an incoming body.

Spherical body of uniform density, all kinetic energy delivered at the
surface. Good enough to pick a search scale and compare against known
events, not a physical simulation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

ASTEROID_DENSITY_KG_M3 = 3000.0
HIROSHIMA_JOULES = 6.3e13
MEGATON_TNT_JOULES = 4.184e15
KILOTON_TNT_JOULES = 4.184e12
SEISMIC_EFFICIENCY = 0.01

# Largest accepted inputs, well inside the range where the float maths stays finite
MAX_DIAMETER_M = 1e6
MAX_VELOCITY_KM_S = 300.0


@dataclass(frozen=True)
class Benchmark:
    name: str
    energy_joules: float
    description: str


BENCHMARKS: List[Benchmark] = [
    Benchmark("Chelyabinsk (2013)", 500 * KILOTON_TNT_JOULES, "Shattered windows, 1,500 injured"),
    Benchmark("Tunguska (1908)", 15_000 * KILOTON_TNT_JOULES, "Flattened 2,000 km2 of forest"),
    Benchmark("Meteor Crater (50,000 ya)", 10_000 * KILOTON_TNT_JOULES, "1.2 km crater in Arizona"),
    Benchmark("Chicxulub (66 Ma)", 1e8 * MEGATON_TNT_JOULES, "Mass extinction event"),
]


def _require_positive(value: float, label: str, upper: Optional[float] = None) -> None:
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{label} must be a finite number > 0")
    if upper is not None and value > upper:
        raise ValueError(f"{label} must be <= {upper:g}")


def estimate_mass_kg(diameter_m: float, density_kg_m3: float = ASTEROID_DENSITY_KG_M3) -> float:
    _require_positive(diameter_m, "diameter_m", MAX_DIAMETER_M)
    radius = diameter_m / 2.0
    volume = (4.0 / 3.0) * math.pi * radius**3
    return density_kg_m3 * volume


def kinetic_energy_joules(
    diameter_m: float,
    velocity_km_s: float,
    density_kg_m3: float = ASTEROID_DENSITY_KG_M3,
) -> float:
    _require_positive(velocity_km_s, "velocity_km_s", MAX_VELOCITY_KM_S)
    mass = estimate_mass_kg(diameter_m, density_kg_m3)
    velocity_m_s = velocity_km_s * 1000.0
    return 0.5 * mass * velocity_m_s**2


def hiroshima_equivalents(energy_joules: float) -> float:
    return energy_joules / HIROSHIMA_JOULES


def crater_diameter_km(energy_joules: float) -> float:
    _require_positive(energy_joules, "energy_joules")
    return 0.074 * (energy_joules / MEGATON_TNT_JOULES) ** 0.29


def earthquake_magnitude(energy_joules: float) -> float:
    """Moment magnitude from log10(Es) = 4.8 + 1.5 Mw."""
    _require_positive(energy_joules, "energy_joules")
    seismic_energy = energy_joules * SEISMIC_EFFICIENCY
    return (math.log10(seismic_energy) - 4.8) / 1.5


def nearest_benchmark(energy_joules: float) -> Benchmark:
    _require_positive(energy_joules, "energy_joules")
    log_energy = math.log10(energy_joules)
    return min(BENCHMARKS, key=lambda b: abs(log_energy - math.log10(b.energy_joules)))


def format_energy(energy_joules: float) -> str:
    _require_positive(energy_joules, "energy_joules")
    exponent = math.floor(math.log10(energy_joules))
    mantissa = energy_joules / 10**exponent
    return f"{mantissa:.2f} x 10^{exponent} J"


def summarize(diameter_m: float, velocity_km_s: float) -> dict:
    energy = kinetic_energy_joules(diameter_m, velocity_km_s)
    benchmark = nearest_benchmark(energy)
    return {
        "kinetic_energy_joules": energy,
        "mass_kg": estimate_mass_kg(diameter_m),
        "hiroshima_equivalents": hiroshima_equivalents(energy),
        "crater_diameter_km": crater_diameter_km(energy),
        "earthquake_magnitude": earthquake_magnitude(energy),
        "formatted": format_energy(energy),
        "benchmark": benchmark,
    }
