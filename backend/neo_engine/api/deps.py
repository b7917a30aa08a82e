from __future__ import annotations

from fastapi import HTTPException, Request

from neo_engine.services.impact_report import ImpactReportService
from neo_engine.services.neo_feed import NeoFeedService


def get_feed_service(request: Request) -> NeoFeedService:
    service = getattr(request.app.state, "feed_service", None)
    if service is None:
        raise HTTPException(status_code=500, detail="NEO feed service not configured")
    return service


def get_impact_service(request: Request) -> ImpactReportService:
    service = getattr(request.app.state, "impact_service", None)
    if service is None:
        raise HTTPException(status_code=500, detail="Impact service not configured")
    return service
