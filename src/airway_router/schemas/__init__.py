"""
Schema definitions for the Airway Router.

Pandera-validated reference tables and immutable route/weather records.
"""

from .reference import (
    Airport,
    AirportSchema,
    Airway,
    AirwayPointSchema,
    FixSchema,
    NavAid,
    NavaidSchema,
    NavFix,
    ReferenceTables,
)
from .route import AirwaySegment, Route, RouteEndpoint, RouteLeg, Waypoint, WaypointType
from .weather import Barometer, CloudLayer, MetarObservation, Visibility, Wind

__all__ = [
    # Reference schemas
    "AirportSchema",
    "FixSchema",
    "NavaidSchema",
    "AirwayPointSchema",
    "ReferenceTables",
    # Reference entities
    "Airport",
    "NavFix",
    "NavAid",
    "Airway",
    # Route results
    "WaypointType",
    "Waypoint",
    "RouteEndpoint",
    "AirwaySegment",
    "RouteLeg",
    "Route",
    # Weather
    "Wind",
    "Visibility",
    "CloudLayer",
    "Barometer",
    "MetarObservation",
]
