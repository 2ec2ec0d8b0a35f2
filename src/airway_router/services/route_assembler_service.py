"""
Route Assembler Service - Domain orchestrator for route generation.

Coordinates the interaction between:
- ReferenceDataProvider (airports, fixes, navaids, airways)
- IndexSelector (airway and navaid choice)
- LatencyHook (simulated data-source delay)
- Geodesy (per-leg great-circle distances and flight time)
"""

from __future__ import annotations

import logging
import math
import time
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple, TypeVar

from src.airway_router.adapters.latency import NoLatency
from src.airway_router.adapters.selection import RandomIndexSelector
from src.airway_router.exceptions import (
    AirportNotFoundError,
    InternalComputationError,
    ReferenceDataUnavailableError,
    RouteEngineError,
)
from src.airway_router.geodesy import (
    CRUISE_SPEED_KNOTS,
    GeoPoint,
    distance_nm,
    estimated_time,
)
from src.airway_router.schemas.reference import Airport, Airway, NavFix
from src.airway_router.schemas.route import (
    AirwaySegment,
    Route,
    RouteEndpoint,
    RouteLeg,
    Waypoint,
    WaypointType,
)
from src.airway_router.validation import validate_route_endpoints

if TYPE_CHECKING:
    from src.airway_router.ports.latency import LatencyHook
    from src.airway_router.ports.reference_data_provider import ReferenceDataProvider
    from src.airway_router.ports.selection import IndexSelector

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RouteAssembler:
    """
    Domain service that generates an illustrative route between airports.

    Orchestrates the generation process:
    1. Validates and normalizes both ICAO identifiers
    2. Resolves origin and destination airports
    3. Picks one airway and resolves its fixes (unknown fixes are skipped)
    4. Picks one navaid and appends it as the final waypoint
    5. Sums great-circle legs origin -> waypoints -> destination
    6. Packages the immutable Route

    The service holds no mutable state and is safe to share between
    concurrent requests. No Route is constructed unless every lookup and
    computation succeeded.

    Attributes:
        _provider: Read-only reference data source.
        _selector: "One of N" strategy for airway and navaid choice.
        _latency_hook: Called once per generation before any lookup.
        _cruise_speed_knots: Speed used for the estimated time.
    """

    def __init__(
        self,
        provider: ReferenceDataProvider,
        selector: Optional[IndexSelector] = None,
        latency_hook: Optional[LatencyHook] = None,
        cruise_speed_knots: float = CRUISE_SPEED_KNOTS,
    ) -> None:
        """
        Initialize the route assembler.

        Args:
            provider: Reference data provider.
            selector: Selection strategy. If None, uniform random.
            latency_hook: Latency hook. If None, no delay.
            cruise_speed_knots: Cruise speed for estimated time.
        """
        if cruise_speed_knots <= 0:
            raise ValueError(
                f"cruise_speed_knots must be > 0, got {cruise_speed_knots}"
            )
        self._provider = provider
        self._selector = selector or RandomIndexSelector()
        self._latency_hook = latency_hook or NoLatency()
        self._cruise_speed_knots = cruise_speed_knots

    def generate_route(self, origin_id: str, destination_id: str) -> Route:
        """
        Generate a route between two airports.

        Args:
            origin_id: Origin ICAO code, any case.
            destination_id: Destination ICAO code, any case.

        Returns:
            Complete Route with waypoints, airway summary, legs, total
            distance and estimated time.

        Raises:
            InvalidIdentifierError: If either code is not 4 characters.
            AirportNotFoundError: If either airport is unknown.
            ReferenceDataUnavailableError: If a reference lookup fails.
            InternalComputationError: If an assembly invariant breaks.
        """
        start_time = time.perf_counter()

        # 1. Fail fast on malformed input
        origin_icao, destination_icao = validate_route_endpoints(
            origin_id, destination_id
        )

        self._latency_hook("generate_route")

        # 2. Resolve both airports
        origin = self._resolve_airport(origin_icao, "origin")
        destination = self._resolve_airport(destination_icao, "destination")

        # 3. Airway waypoints
        airways = self._lookup("list_airways", self._provider.list_airways)
        airway = self._select(airways, "list_airways")
        fixes = self._resolve_airway_fixes(airway)

        waypoints: List[Waypoint] = [
            Waypoint(
                name=fix.ident,
                lat=fix.lat,
                lng=fix.lng,
                type=WaypointType.FIX,
                airway=airway.ident,
            )
            for fix in fixes
        ]

        # 4. Trailing navaid
        navaids = self._lookup("list_navaids", self._provider.list_navaids)
        navaid = self._select(navaids, "list_navaids")
        waypoints.append(
            Waypoint(
                name=navaid.ident,
                lat=navaid.lat,
                lng=navaid.lng,
                type=WaypointType.NAVAID,
            )
        )

        logger.debug(
            "Selected airway %s (%d/%d fixes resolved) and navaid %s",
            airway.ident,
            len(fixes),
            len(airway.points),
            navaid.ident,
        )

        # 5. Legs and total distance
        origin_endpoint = RouteEndpoint.from_airport(origin)
        destination_endpoint = RouteEndpoint.from_airport(destination)
        try:
            legs = self._compute_legs(origin_endpoint, waypoints, destination_endpoint)
        except ValueError as exc:
            # math domain error on infinite coordinates
            raise InternalComputationError(
                f"Route {origin_icao}->{destination_icao} has invalid coordinates"
            ) from exc
        total_distance = sum(leg.distance_nm for leg in legs)

        if not math.isfinite(total_distance):
            raise InternalComputationError(
                f"Route {origin_icao}->{destination_icao} has non-finite "
                f"distance {total_distance}"
            )

        # 6. Airway summary
        segment = self._build_airway_segment(airway, fixes)

        route = Route(
            origin=origin_endpoint,
            destination=destination_endpoint,
            distance_nm=total_distance,
            estimated_time=estimated_time(total_distance, self._cruise_speed_knots),
            waypoints=tuple(waypoints),
            airways=(segment,),
            legs=tuple(legs),
        )

        logger.info(
            "Route %s->%s generated via %s: %d waypoints, %.1f NM, %s in %.3fms",
            origin_icao,
            destination_icao,
            airway.ident,
            route.waypoint_count,
            route.distance_nm,
            route.estimated_time,
            (time.perf_counter() - start_time) * 1000,
        )

        return route

    def _lookup(self, lookup: str, call: Callable[..., T], *args) -> T:
        """
        Call the provider, annotating unexpected failures with the lookup.

        Engine errors raised by the provider pass through unchanged.
        """
        try:
            return call(*args)
        except RouteEngineError:
            raise
        except Exception as exc:
            logger.error("Reference lookup %s failed: %s", lookup, exc)
            raise ReferenceDataUnavailableError(lookup, str(exc)) from exc

    def _resolve_airport(self, icao: str, side: str) -> Airport:
        airport = self._lookup("get_airport", self._provider.get_airport, icao)
        if airport is None:
            raise AirportNotFoundError(icao, side)
        return airport

    def _select(self, items: Sequence[T], lookup: str) -> T:
        """Pick one item with the selector, guarding the returned index."""
        if not items:
            raise ReferenceDataUnavailableError(lookup, "no entries to select from")

        index = self._selector.choose(len(items))
        if not 0 <= index < len(items):
            raise InternalComputationError(
                f"Selector returned index {index} for {len(items)} items"
            )
        return items[index]

    def _resolve_airway_fixes(self, airway: Airway) -> List[NavFix]:
        """Resolve the airway's points in order, skipping unknown fixes."""
        fixes: List[NavFix] = []
        for point in airway.points:
            fix = self._lookup("get_fix", self._provider.get_fix, point)
            if fix is None:
                logger.warning(
                    "Fix %s on airway %s not found, skipping", point, airway.ident
                )
                continue
            fixes.append(fix)
        return fixes

    @staticmethod
    def _compute_legs(
        origin: RouteEndpoint,
        waypoints: Sequence[Waypoint],
        destination: RouteEndpoint,
    ) -> List[RouteLeg]:
        """Great-circle legs between consecutive points in traversal order."""
        stops: List[Tuple[str, GeoPoint]] = (
            [(origin.icao, origin.position)]
            + [(wp.name, wp.position) for wp in waypoints]
            + [(destination.icao, destination.position)]
        )
        return [
            RouteLeg(
                from_name=from_name,
                to_name=to_name,
                distance_nm=distance_nm(from_pos, to_pos),
            )
            for (from_name, from_pos), (to_name, to_pos) in zip(stops, stops[1:])
        ]

    @staticmethod
    def _build_airway_segment(airway: Airway, fixes: Sequence[NavFix]) -> AirwaySegment:
        """
        Summarize the airway for display.

        Endpoint names come from the published point list; the polyline and
        span distance only use resolved fixes.
        """
        span = None
        if fixes:
            span = distance_nm(fixes[0].position, fixes[-1].position)

        return AirwaySegment(
            name=airway.ident,
            from_point=airway.first_point or "",
            to_point=airway.last_point or "",
            points=tuple((fix.lat, fix.lng) for fix in fixes),
            distance_nm=span,
        )

    @property
    def provider_name(self) -> str:
        """Name of the underlying reference data provider."""
        return self._provider.name

    @property
    def is_ready(self) -> bool:
        """Check if the reference data source is reachable."""
        return self._provider.is_available
