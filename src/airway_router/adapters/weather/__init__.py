"""
Weather adapters for METAR lookups.
"""

from src.airway_router.adapters.weather.avwx_provider import AvwxWeatherProvider
from src.airway_router.adapters.weather.simulated_provider import (
    SimulatedWeatherProvider,
)

__all__ = [
    "AvwxWeatherProvider",
    "SimulatedWeatherProvider",
]
