from __future__ import annotations

import dataclasses

import pytest

from neo_engine.domain.blast import compute_blast_radii
from neo_engine.domain.models import ImpactReport, InfrastructureItem, NearEarthObject


def _neo(**overrides) -> NearEarthObject:
    payload = dict(
        id="2000433",
        name="433 Eros (A898 PA)",
        diameter_min_m=100.0,
        diameter_max_m=300.0,
        velocity_km_s=5.5,
        miss_distance_km=1.2e7,
        is_potentially_hazardous=False,
        close_approach_date="2026-10-19",
    )
    payload.update(overrides)
    return NearEarthObject(**payload)


def test_average_diameter():
    assert _neo().average_diameter_m == 200.0


def test_neo_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        _neo().name = "changed"


@pytest.mark.parametrize(
    "overrides",
    [
        {"diameter_min_m": 400.0},
        {"velocity_km_s": -1.0},
        {"miss_distance_km": -0.5},
    ],
)
def test_neo_rejects_inconsistent_values(overrides):
    with pytest.raises(ValueError):
        _neo(**overrides)


def test_infrastructure_item_rejects_unknown_zone():
    with pytest.raises(ValueError):
        InfrastructureItem("hospital", "General", 0.0, 0.0, 1.0, "crater")


def test_report_counts_cannot_exceed_items():
    item = InfrastructureItem("hospital", "General", 0.0, 0.0, 1.0, "thermal")
    radii = compute_blast_radii(1e15)
    ImpactReport(0.0, 0.0, 1e15, radii, hospitals_affected=1, infrastructure=(item,))
    with pytest.raises(ValueError):
        ImpactReport(0.0, 0.0, 1e15, radii, hospitals_affected=1, schools_affected=1, infrastructure=(item,))


def test_report_requires_positive_energy():
    with pytest.raises(ValueError):
        ImpactReport(0.0, 0.0, 0.0, compute_blast_radii(1.0))
