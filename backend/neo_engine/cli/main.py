import math
from typing import Optional

import typer

from neo_engine.domain import energetics
from neo_engine.errors import InvalidDateRangeError, NeoFeedError
from neo_engine.infra.nasa.neows_client import NeoWsClient
from neo_engine.infra.osm.overpass_client import OverpassClient, build_query
from neo_engine.logging_setup import configure_logging
from neo_engine.providers.infrastructure.overpass import OverpassInfrastructureProvider
from neo_engine.providers.neo.neows import NeoWsFeedProvider
from neo_engine.services.impact_report import ImpactReportService
from neo_engine.services.neo_feed import NeoFeedService, parse_date_range
from neo_engine.settings import Settings

app = typer.Typer(help="CLI for the NEO Collision Engine")


def _build_impact_service(settings: Settings) -> ImpactReportService:
    client = OverpassClient(base_url=settings.overpass_url, timeout=settings.overpass_timeout_s)
    return ImpactReportService(OverpassInfrastructureProvider(client))


def _build_feed_service(settings: Settings) -> NeoFeedService:
    client = NeoWsClient(
        api_key=settings.nasa_api_key,
        base_url=settings.nasa_base_url,
        connect_timeout=settings.nasa_connect_timeout_s,
        read_timeout=settings.nasa_read_timeout_s,
    )
    return NeoFeedService(NeoWsFeedProvider(client))


@app.command("impact")
def cli_impact(
    lat: float = typer.Option(..., help="Impact latitude"),
    lng: float = typer.Option(..., help="Impact longitude"),
    energy: Optional[float] = typer.Option(None, help="Kinetic energy in joules"),
    diameter: Optional[float] = typer.Option(None, help="Diameter in metres (with --velocity)"),
    velocity: Optional[float] = typer.Option(None, help="Velocity in km/s (with --diameter)"),
    top: int = typer.Option(10, help="Number of nearest features to show"),
):
    if energy is None:
        if diameter is None or velocity is None:
            typer.echo("Provide --energy or both --diameter and --velocity", err=True)
            raise typer.Exit(code=2)
        try:
            energy = energetics.kinetic_energy_joules(diameter, velocity)
        except ValueError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=2)
    if not math.isfinite(energy) or energy <= 0:
        typer.echo("Kinetic energy must be a finite number > 0", err=True)
        raise typer.Exit(code=2)
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    report = _build_impact_service(settings).generate(lat, lng, energy)
    radii = report.radii
    typer.echo(f"energy\t{energetics.format_energy(energy)}")
    typer.echo(f"radii_km\tthermal={radii.thermal_km:.3f}\tpressure={radii.pressure_km:.3f}\tshrapnel={radii.shrapnel_km:.3f}")
    typer.echo(
        f"counts\thospitals={report.hospitals_affected}\tschools={report.schools_affected}"
        f"\tindustrial={report.industrial_affected}\tfarmland={report.farmland_affected}"
    )
    typer.echo(f"status\t{report.infrastructure_status}")
    nearest = sorted(report.infrastructure, key=lambda item: item.distance_km)[:top]
    if not nearest:
        typer.echo("No infrastructure found around the impact point")
        raise typer.Exit(code=0)
    typer.echo("type\tname\tdistance_km\tzone")
    for item in nearest:
        typer.echo(f"{item.type}\t{item.name}\t{item.distance_km:.2f}\t{item.zone}")


@app.command("feed")
def cli_feed(
    start: Optional[str] = typer.Option(None, help="Start date YYYY-MM-DD"),
    end: Optional[str] = typer.Option(None, help="End date YYYY-MM-DD"),
):
    try:
        date_range = parse_date_range(start, end)
    except InvalidDateRangeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    service = _build_feed_service(settings)
    try:
        records = service.fetch_feed(*date_range) if date_range else service.fetch_today()
    except NeoFeedError as exc:
        typer.echo(f"Feed unavailable: {exc}", err=True)
        raise typer.Exit(code=1)
    if not records:
        typer.echo("No near-Earth objects for that range")
        raise typer.Exit(code=0)
    typer.echo("date\tid\tname\tdiameter_m\tvelocity_km_s\tmiss_km\thazardous")
    for neo in records:
        typer.echo(
            f"{neo.close_approach_date}\t{neo.id}\t{neo.name}\t{neo.average_diameter_m:.1f}"
            f"\t{neo.velocity_km_s:.2f}\t{neo.miss_distance_km:.0f}\t{'yes' if neo.is_potentially_hazardous else 'no'}"
        )


@app.command("energy")
def cli_energy(
    diameter: float = typer.Option(..., help="Diameter in metres"),
    velocity: float = typer.Option(..., help="Velocity in km/s"),
):
    try:
        summary = energetics.summarize(diameter, velocity)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    benchmark = summary["benchmark"]
    typer.echo(f"energy\t{summary['formatted']}")
    typer.echo(f"mass_kg\t{summary['mass_kg']:.3e}")
    typer.echo(f"hiroshimas\t{summary['hiroshima_equivalents']:.1f}")
    typer.echo(f"crater_km\t{summary['crater_diameter_km']:.3f}")
    typer.echo(f"magnitude\t{summary['earthquake_magnitude']:.2f}")
    typer.echo(f"benchmark\t{benchmark.name}: {benchmark.description}")


@app.command("query")
def cli_query(
    lat: float = typer.Option(..., help="Latitude"),
    lng: float = typer.Option(..., help="Longitude"),
    radius: float = typer.Option(2000.0, help="Search radius in metres"),
):
    """Print the Overpass QL statement without sending it."""
    typer.echo(build_query(lat, lng, radius))


if __name__ == "__main__":
    app()
