from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

DEFAULT_NASA_BASE_URL = "https://api.nasa.gov/neo/rest/v1"
DEFAULT_OVERPASS_URL = "https://overpass-api.de/api/interpreter"


@dataclass(frozen=True)
class Settings:
    nasa_api_key: str = "DEMO_KEY"
    nasa_base_url: str = DEFAULT_NASA_BASE_URL
    nasa_connect_timeout_s: float = 10.0
    nasa_read_timeout_s: float = 60.0
    overpass_url: str = DEFAULT_OVERPASS_URL
    overpass_timeout_s: float = 30.0
    feed_cache_ttl_s: float = 3600.0
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        origins = env.get("FRONTEND_ORIGIN", "*")
        return cls(
            nasa_api_key=env.get("NASA_API_KEY") or "DEMO_KEY",
            nasa_base_url=(env.get("NASA_API_BASE_URL") or DEFAULT_NASA_BASE_URL).rstrip("/"),
            nasa_connect_timeout_s=float(env.get("NASA_CONNECT_TIMEOUT_S", "10")),
            nasa_read_timeout_s=float(env.get("NASA_READ_TIMEOUT_S", "60")),
            overpass_url=env.get("OVERPASS_API_URL") or DEFAULT_OVERPASS_URL,
            overpass_timeout_s=float(env.get("OVERPASS_TIMEOUT_S", "30")),
            feed_cache_ttl_s=float(env.get("FEED_CACHE_TTL_S", "3600")),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()) or ("*",),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )
