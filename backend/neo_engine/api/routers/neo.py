from __future__ import annotations

from typing import Iterable, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from neo_engine.api.deps import get_feed_service
from neo_engine.domain.models import NearEarthObject
from neo_engine.errors import InvalidDateRangeError, NeoFeedError, NeoFeedUpstreamError
from neo_engine.services.neo_feed import NeoFeedService, parse_date_range

router = APIRouter(prefix="/neo", tags=["neo"])


@router.get("/feed")
def get_feed(
    start_date: Optional[str] = Query(None, alias="startDate", description="YYYY-MM-DD"),
    end_date: Optional[str] = Query(None, alias="endDate", description="YYYY-MM-DD"),
    service: NeoFeedService = Depends(get_feed_service),
):
    try:
        date_range = parse_date_range(start_date, end_date)
    except InvalidDateRangeError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if date_range is None:
        return _run_feed(service.fetch_today)
    start, end = date_range
    return _run_feed(lambda: service.fetch_feed(start, end))


@router.get("/feed/today")
def get_today_feed(service: NeoFeedService = Depends(get_feed_service)):
    return _run_feed(service.fetch_today)


@router.get("/health", response_class=PlainTextResponse)
def health():
    return "NEO Collision Engine API is running"


def _run_feed(fetch) -> List[dict]:
    try:
        records = fetch()
    except NeoFeedError as exc:
        detail = str(exc)
        if isinstance(exc, NeoFeedUpstreamError) and exc.status_code is not None:
            detail = f"{detail} (upstream status {exc.status_code})"
        raise HTTPException(status_code=502, detail=detail) from exc
    return _serialize_neos(records)


def _serialize_neos(records: Iterable[NearEarthObject]) -> List[dict]:
    return [
        {
            "id": neo.id,
            "name": neo.name,
            "diameterMinMeters": neo.diameter_min_m,
            "diameterMaxMeters": neo.diameter_max_m,
            "averageDiameterMeters": neo.average_diameter_m,
            "velocityKmPerSec": neo.velocity_km_s,
            "missDistanceKm": neo.miss_distance_km,
            "isPotentiallyHazardous": neo.is_potentially_hazardous,
            "closeApproachDate": neo.close_approach_date,
        }
        for neo in records
    ]
