from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from neo_engine.api.routers import impact, neo
from neo_engine.infra.nasa.neows_client import NeoWsClient
from neo_engine.infra.osm.overpass_client import OverpassClient
from neo_engine.logging_setup import configure_logging
from neo_engine.providers.infrastructure.overpass import OverpassInfrastructureProvider
from neo_engine.providers.neo.neows import NeoWsFeedProvider
from neo_engine.services.feed_cache import TTLCache
from neo_engine.services.impact_report import ImpactReportService
from neo_engine.services.neo_feed import NeoFeedService
from neo_engine.settings import Settings


def create_app(
    settings: Optional[Settings] = None,
    *,
    feed_service: Optional[NeoFeedService] = None,
    impact_service: Optional[ImpactReportService] = None,
) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    clients = []
    if feed_service is None:
        nasa_client = NeoWsClient(
            api_key=settings.nasa_api_key,
            base_url=settings.nasa_base_url,
            connect_timeout=settings.nasa_connect_timeout_s,
            read_timeout=settings.nasa_read_timeout_s,
        )
        clients.append(nasa_client)
        feed_service = NeoFeedService(NeoWsFeedProvider(nasa_client), TTLCache(settings.feed_cache_ttl_s))
    if impact_service is None:
        overpass_client = OverpassClient(base_url=settings.overpass_url, timeout=settings.overpass_timeout_s)
        clients.append(overpass_client)
        impact_service = ImpactReportService(OverpassInfrastructureProvider(overpass_client))

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        for client in clients:
            client.close()

    app = FastAPI(title="NEO Collision Engine API", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.feed_service = feed_service
    app.state.impact_service = impact_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(neo.router, prefix="/api")
    app.include_router(impact.router, prefix="/api")
    return app


app = create_app()
