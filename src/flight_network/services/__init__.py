"""
Domain services for the Flight Network engine.

Services orchestrate the interaction between ports (repositories, catalogs,
algorithms) and domain logic (location resolution, metrics, fan-out).
"""

from src.flight_network.services.location_resolver_service import (
    LocationResolverService,
)
from src.flight_network.services.network_metrics_service import (
    NetworkMetricsService,
)
from src.flight_network.services.route_finder_service import RouteFinderService

__all__ = [
    "LocationResolverService",
    "NetworkMetricsService",
    "RouteFinderService",
]
