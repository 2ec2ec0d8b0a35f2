"""
FlightRoutePlanner - Public API for route generation.

This module provides the main entry point for the airway router.
It acts as a Facade/Factory, handling dependency initialization from
configuration and providing a clean interface for consumers.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from src.airway_router.adapters.data_providers.sqlite_provider import (
    SqliteReferenceDataProvider,
)
from src.airway_router.adapters.data_providers.table_provider import (
    TableReferenceDataProvider,
)
from src.airway_router.adapters.latency import NoLatency, SimulatedLatency
from src.airway_router.adapters.weather.avwx_provider import AvwxWeatherProvider
from src.airway_router.adapters.weather.simulated_provider import (
    SimulatedWeatherProvider,
)
from src.airway_router.config import RouterConfig
from src.airway_router.ports.latency import LatencyHook
from src.airway_router.ports.reference_data_provider import ReferenceDataProvider
from src.airway_router.ports.selection import IndexSelector
from src.airway_router.ports.weather_provider import WeatherProvider
from src.airway_router.schemas.reference import Airport
from src.airway_router.schemas.route import Route
from src.airway_router.schemas.weather import MetarObservation
from src.airway_router.services.airport_search_service import AirportSearchService
from src.airway_router.services.route_assembler_service import RouteAssembler

logger = logging.getLogger(__name__)


class FlightRoutePlanner:
    """
    Public API for generating flight routes.

    Handles dependency initialization with sensible defaults and exposes
    the three operations a client needs: route generation, airport search
    and current weather.

    Example usage:
        >>> planner = FlightRoutePlanner()
        >>> route = planner.generate_route("SBGR", "SBRJ")
        >>> print(f"{route.distance_nm:.0f} NM, {route.estimated_time}")

    Attributes:
        _assembler: Underlying RouteAssembler.
        _search: Airport search service.
        _weather: Weather provider.
    """

    def __init__(
        self,
        config: Optional[RouterConfig] = None,
        reference_provider: Optional[ReferenceDataProvider] = None,
        weather_provider: Optional[WeatherProvider] = None,
        selector: Optional[IndexSelector] = None,
        latency_hook: Optional[LatencyHook] = None,
    ) -> None:
        """
        Initialize the planner with optional custom dependencies.

        Args:
            config: Settings. Defaults to RouterConfig() (not the environment).
            reference_provider: Custom reference data. If None, uses SQLite
                when config.reference_db_path is set, else bundled tables.
            weather_provider: Custom weather source. If None, uses AVWX when
                config.avwx_token is set, else simulated METAR.
            selector: Airway/navaid selection strategy. Default uniform random.
            latency_hook: Route generation latency hook. Default from
                config.simulated_latency_ms. Simulated weather takes its own
                delay from config.weather_latency_ms.
        """
        self._config = config or RouterConfig()

        # Initialize reference data
        if reference_provider is not None:
            self._provider = reference_provider
        elif self._config.reference_db_path:
            self._provider = SqliteReferenceDataProvider(self._config.reference_db_path)
        else:
            self._provider = TableReferenceDataProvider.bundled()

        # Initialize latency hook
        if latency_hook is None:
            latency_hook = self._latency_from_ms(self._config.simulated_latency_ms)

        # Initialize weather
        if weather_provider is not None:
            self._weather = weather_provider
        elif self._config.avwx_token:
            self._weather = AvwxWeatherProvider(
                token=self._config.avwx_token,
                base_url=self._config.avwx_base_url,
                max_retries=self._config.weather_max_retries,
                backoff_multiplier=self._config.backoff_multiplier,
                timeout_s=self._config.request_timeout_s,
            )
        else:
            self._weather = SimulatedWeatherProvider(
                latency_hook=self._latency_from_ms(self._config.weather_latency_ms)
            )

        # Create the services
        self._assembler = RouteAssembler(
            provider=self._provider,
            selector=selector,
            latency_hook=latency_hook,
            cruise_speed_knots=self._config.cruise_speed_knots,
        )
        self._search = AirportSearchService(self._provider)

        logger.info(
            "FlightRoutePlanner initialized with %s reference data and %s weather",
            self._provider.name,
            self._weather.name,
        )

    @staticmethod
    def _latency_from_ms(delay_ms: int) -> LatencyHook:
        if delay_ms > 0:
            return SimulatedLatency(delay_ms)
        return NoLatency()

    def generate_route(self, origin: str, destination: str) -> Route:
        """
        Generate a route between two airports.

        Args:
            origin: Origin ICAO code (e.g., 'SBGR'), any case.
            destination: Destination ICAO code, any case.

        Returns:
            The generated Route.

        Raises:
            InvalidIdentifierError, AirportNotFoundError,
            ReferenceDataUnavailableError, InternalComputationError.
        """
        return self._assembler.generate_route(origin, destination)

    def search_airports(
        self, query: Optional[str] = None, limit: Optional[int] = None
    ) -> List[Airport]:
        """Case-insensitive search over ICAO code, name and city."""
        return self._search.search(query, limit)

    def get_weather(self, icao: str) -> MetarObservation:
        """Current observation for a station."""
        return self._weather.get_observation(icao)

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def provider_name(self) -> str:
        """Name of the reference data provider in use."""
        return self._provider.name

    @property
    def weather_name(self) -> str:
        return self._weather.name

    @property
    def is_ready(self) -> bool:
        """Check if the planner can serve requests."""
        return self._assembler.is_ready

    def shutdown(self) -> None:
        """
        Clean shutdown of the planner.

        Closes database connections and HTTP clients.
        """
        if hasattr(self._provider, "close"):
            self._provider.close()
        self._weather.close()
        logger.info("FlightRoutePlanner shutdown complete")

    def __enter__(self) -> "FlightRoutePlanner":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with cleanup."""
        self.shutdown()
