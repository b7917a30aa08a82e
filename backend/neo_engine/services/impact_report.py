from __future__ import annotations

import logging

from neo_engine.domain.blast import compute_blast_radii, effective_search_radius_m
from neo_engine.domain.classifier import count_categories
from neo_engine.domain.models import STATUS_OK, STATUS_UNAVAILABLE, ImpactReport
from neo_engine.providers.infrastructure.base import InfrastructureFetch, InfrastructureProvider

logger = logging.getLogger(__name__)


class ImpactReportService:
    def __init__(self, provider: InfrastructureProvider):
        self.provider = provider

    def generate(
        self,
        lat: float,
        lng: float,
        kinetic_energy_joules: float,
        estimated_population: int = 0,
    ) -> ImpactReport:
        """Build a report for one impact; upstream failures give zero counts, never an error."""
        radii = compute_blast_radii(kinetic_energy_joules)
        radius_m = effective_search_radius_m(radii)
        try:
            fetched = self.provider.fetch_infrastructure(lat=lat, lng=lng, radius_m=radius_m)
        except Exception:
            logger.exception("Infrastructure provider failed at %s,%s", lat, lng)
            fetched = InfrastructureFetch(available=False)
        counts = count_categories(fetched.items)
        report = ImpactReport(
            latitude=lat,
            longitude=lng,
            kinetic_energy_joules=kinetic_energy_joules,
            radii=radii,
            hospitals_affected=counts["hospitals"],
            schools_affected=counts["schools"],
            industrial_affected=counts["industrial"],
            farmland_affected=counts["farmland"],
            estimated_population=estimated_population,
            infrastructure=tuple(fetched.items),
            infrastructure_status=STATUS_OK if fetched.available else STATUS_UNAVAILABLE,
        )
        logger.info(
            "Impact report at %s,%s: hospitals=%d schools=%d industrial=%d farmland=%d items=%d status=%s",
            lat,
            lng,
            report.hospitals_affected,
            report.schools_affected,
            report.industrial_affected,
            report.farmland_affected,
            len(report.infrastructure),
            report.infrastructure_status,
        )
        return report
