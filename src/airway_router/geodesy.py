"""
Great-circle geodesy for route distances.

Distances use the haversine formula on a spherical Earth expressed in
nautical miles. Flight time is derived from a single cruise speed.

Complexity: O(1) per call.
"""

import math
from dataclasses import dataclass

EARTH_RADIUS_NM = 3440.065
CRUISE_SPEED_KNOTS = 450.0


@dataclass(frozen=True)
class GeoPoint:
    """Geographic position in decimal degrees."""

    lat: float
    lng: float


def distance_nm(point_a: GeoPoint, point_b: GeoPoint) -> float:
    """
    Return the great-circle distance in nautical miles between two points.

    Inputs are not range-checked; any finite latitude/longitude pair is
    accepted and the result is never negative.

    Args:
        point_a: First position.
        point_b: Second position.

    Returns:
        Haversine distance using EARTH_RADIUS_NM.

    Example:
        >>> distance_nm(GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0))  # doctest: +ELLIPSIS
        60.04...
    """
    lat1 = math.radians(point_a.lat)
    lat2 = math.radians(point_b.lat)
    dlat = math.radians(point_b.lat - point_a.lat)
    dlng = math.radians(point_b.lng - point_a.lng)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_NM * c


def estimated_time(
    distance: float, cruise_speed_knots: float = CRUISE_SPEED_KNOTS
) -> str:
    """
    Format the flight time for *distance* NM at a constant cruise speed.

    Minutes are truncated, never rounded, so the result is monotonically
    non-decreasing in distance.

    Args:
        distance: Distance in nautical miles.
        cruise_speed_knots: Ground speed in knots.

    Returns:
        Duration formatted as ``"{H}h {M}min"``.

    Raises:
        ValueError: If cruise_speed_knots is not positive.

    Examples:
        >>> estimated_time(0)
        '0h 0min'
        >>> estimated_time(675)
        '1h 30min'
    """
    if cruise_speed_knots <= 0:
        raise ValueError(
            f"cruise_speed_knots must be > 0, got {cruise_speed_knots}"
        )

    total_minutes = math.floor(distance * 60 / cruise_speed_knots)
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}min"
