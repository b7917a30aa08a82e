from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from neo_engine.api.deps import get_impact_service
from neo_engine.domain import energetics
from neo_engine.domain.models import ImpactReport
from neo_engine.services.impact_report import ImpactReportService

router = APIRouter(prefix="/impact", tags=["impact"])


@router.get("/query")
def query_impact(
    lat: float = Query(..., ge=-90, le=90, allow_inf_nan=False),
    lng: float = Query(..., ge=-180, le=180, allow_inf_nan=False),
    kinetic_energy: float = Query(..., alias="kineticEnergy", gt=0, allow_inf_nan=False, description="Joules"),
    service: ImpactReportService = Depends(get_impact_service),
):
    report = service.generate(lat, lng, kinetic_energy)
    return _serialize_report(report)


@router.get("/energy")
def estimate_energy(
    diameter_m: float = Query(..., alias="diameterMeters", gt=0, le=energetics.MAX_DIAMETER_M, allow_inf_nan=False),
    velocity_km_s: float = Query(
        ..., alias="velocityKmPerSec", gt=0, le=energetics.MAX_VELOCITY_KM_S, allow_inf_nan=False
    ),
):
    summary = energetics.summarize(diameter_m, velocity_km_s)
    benchmark = summary["benchmark"]
    return {
        "kineticEnergyJoules": summary["kinetic_energy_joules"],
        "massKg": summary["mass_kg"],
        "hiroshimaEquivalents": summary["hiroshima_equivalents"],
        "craterDiameterKm": summary["crater_diameter_km"],
        "earthquakeMagnitude": summary["earthquake_magnitude"],
        "formatted": summary["formatted"],
        "benchmark": {
            "name": benchmark.name,
            "energyJoules": benchmark.energy_joules,
            "description": benchmark.description,
        },
    }


@router.get("/health", response_class=PlainTextResponse)
def health():
    return "Impact API is running"


def _serialize_report(report: ImpactReport) -> dict:
    return {
        "latitude": report.latitude,
        "longitude": report.longitude,
        "kineticEnergyJoules": report.kinetic_energy_joules,
        "thermalRadiusKm": report.radii.thermal_km,
        "pressureRadiusKm": report.radii.pressure_km,
        "shrapnelRadiusKm": report.radii.shrapnel_km,
        "hospitalsAffected": report.hospitals_affected,
        "schoolsAffected": report.schools_affected,
        "roadsAffected": report.roads_affected,
        "industrialAffected": report.industrial_affected,
        "farmlandAffected": report.farmland_affected,
        "estimatedPopulation": report.estimated_population,
        "infrastructureStatus": report.infrastructure_status,
        "infrastructure": [
            {
                "type": item.type,
                "name": item.name,
                "lat": item.lat,
                "lng": item.lng,
                "distanceKm": item.distance_km,
                "zone": item.zone,
            }
            for item in report.infrastructure
        ],
    }
