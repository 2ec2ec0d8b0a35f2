"""
Domain services for the Airway Router.

Services orchestrate the interaction between ports (reference data,
selection, latency) and domain logic (geodesy, route assembly).
"""

from src.airway_router.services.airport_search_service import AirportSearchService
from src.airway_router.services.route_assembler_service import RouteAssembler

__all__ = ["AirportSearchService", "RouteAssembler"]
