"""
Route result schemas.

Defines the output contract of route generation. All types are frozen
dataclasses built fresh for each request and never cached.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from src.airway_router.geodesy import GeoPoint
from src.airway_router.schemas.reference import Airport


class WaypointType(Enum):
    """Kind of reference entity a waypoint was built from."""

    FIX = "fix"
    NAVAID = "navaid"
    AIRPORT = "airport"


@dataclass(frozen=True)
class Waypoint:
    """
    A point the route passes through.

    Attributes:
        name: Fix or navaid identifier.
        lat: Latitude in decimal degrees.
        lng: Longitude in decimal degrees.
        type: Waypoint kind.
        airway: Identifier of the airway this waypoint was taken from, if any.
    """

    name: str
    lat: float
    lng: float
    type: WaypointType
    airway: Optional[str] = None

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lng)


@dataclass(frozen=True)
class RouteEndpoint:
    """Origin or destination airport as reported on a route."""

    icao: str
    name: str
    lat: float
    lng: float

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lng)

    @classmethod
    def from_airport(cls, airport: Airport) -> "RouteEndpoint":
        return cls(
            icao=airport.icao,
            name=airport.name,
            lat=airport.lat,
            lng=airport.lng,
        )


@dataclass(frozen=True)
class AirwaySegment:
    """
    Summary of an airway used by a route.

    ``from_point`` and ``to_point`` are the first and last identifiers of the
    airway's published point list, while ``points`` and ``distance_nm`` only
    cover the fixes that resolved. ``distance_nm`` is the span between the
    first and last resolved fix, not the sum of the internal legs, and is
    None when no fix resolved.
    """

    name: str
    from_point: str
    to_point: str
    points: tuple[tuple[float, float], ...]
    distance_nm: Optional[float] = None


@dataclass(frozen=True)
class RouteLeg:
    """Great-circle leg between two consecutive route points."""

    from_name: str
    to_name: str
    distance_nm: float


@dataclass(frozen=True)
class Route:
    """
    Immutable representation of a generated route.

    Waypoints are stored in traversal order from origin to destination.
    ``distance_nm`` is the sum of ``legs`` in that same order.
    """

    origin: RouteEndpoint
    destination: RouteEndpoint
    distance_nm: float
    estimated_time: str
    waypoints: tuple[Waypoint, ...]
    airways: tuple[AirwaySegment, ...]
    legs: tuple[RouteLeg, ...]

    @property
    def waypoint_count(self) -> int:
        """Number of intermediate waypoints."""
        return len(self.waypoints)

    @property
    def path(self) -> List[GeoPoint]:
        """Every position flown through, origin and destination included."""
        return (
            [self.origin.position]
            + [wp.position for wp in self.waypoints]
            + [self.destination.position]
        )
