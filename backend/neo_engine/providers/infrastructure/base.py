from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol

from neo_engine.domain.models import InfrastructureItem


@dataclass
class InfrastructureFetch:
    items: List[InfrastructureItem] = field(default_factory=list)
    available: bool = True
    stats: dict = field(default_factory=dict)


class InfrastructureProvider(Protocol):
    """Contract for providers of mapped features around an impact point."""

    def fetch_infrastructure(self, *, lat: float, lng: float, radius_m: float) -> InfrastructureFetch:
        """Never raises for upstream trouble; ``available`` is False instead."""
        raise NotImplementedError
