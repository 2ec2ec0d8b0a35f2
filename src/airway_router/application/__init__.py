"""
Application layer for the Airway Router.

This layer provides the public API for the route generation engine.
It acts as a facade, handling dependency initialization and providing
a simple interface for consumers.
"""

from src.airway_router.application.plan_flight_route import FlightRoutePlanner

__all__ = ["FlightRoutePlanner"]
