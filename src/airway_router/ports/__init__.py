"""
Port interfaces for the Airway Router.

Ports define the abstract interfaces (ABCs and Protocols) that the domain
layer uses to communicate with external systems. This follows the
Ports and Adapters (Hexagonal) architecture pattern.
"""

from src.airway_router.ports.latency import LatencyHook
from src.airway_router.ports.reference_data_provider import ReferenceDataProvider
from src.airway_router.ports.selection import IndexSelector
from src.airway_router.ports.weather_provider import WeatherProvider

__all__ = [
    "IndexSelector",
    "LatencyHook",
    "ReferenceDataProvider",
    "WeatherProvider",
]
