"""
Weather Provider port interface.

Defines the abstract contract for current-observation (METAR) lookups.
Weather is consumed by presentation; route generation does not depend on it.
"""

from abc import ABC, abstractmethod

from src.airway_router.schemas.weather import MetarObservation


class WeatherProvider(ABC):
    """
    Abstract interface for METAR sources.

    Implementations:
    - SimulatedWeatherProvider: canned and generated observations
    - AvwxWeatherProvider: AVWX REST API over httpx
    """

    @abstractmethod
    def get_observation(self, icao: str) -> MetarObservation:
        """
        Return the current observation for a station.

        Args:
            icao: 4-character station identifier, any case.

        Returns:
            Decoded observation.

        Raises:
            InvalidIdentifierError: If icao is not 4 characters.
            ReferenceDataUnavailableError: If the source cannot be reached.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this weather source."""
        ...

    def close(self) -> None:
        """Release any held resources. Default does nothing."""
