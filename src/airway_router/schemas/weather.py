"""
Current-observation (METAR) schemas.

Consumed by presentation only; route generation never reads weather.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Wind:
    direction: int
    speed: int
    unit: str = "KT"
    gust: Optional[int] = None


@dataclass(frozen=True)
class Visibility:
    distance: float
    unit: str = "m"


@dataclass(frozen=True)
class CloudLayer:
    """Cloud cover code (FEW, SCT, BKN, OVC) and base in hundreds of feet."""

    cover: str
    altitude: int


@dataclass(frozen=True)
class Barometer:
    hg: float
    hpa: float


@dataclass(frozen=True)
class MetarObservation:
    """
    Decoded METAR observation for one station.

    Attributes:
        icao: Station identifier.
        raw: Undecoded METAR text.
        temperature: Air temperature in Celsius.
        dewpoint: Dewpoint in Celsius.
        wind: Surface wind.
        visibility: Prevailing visibility.
        clouds: Cloud layers, lowest first.
        humidity: Relative humidity in percent.
        barometer: Altimeter setting in inHg and hPa.
        flight_category: VFR, MVFR, IFR or LIFR.
    """

    icao: str
    raw: str
    temperature: Optional[float] = None
    dewpoint: Optional[float] = None
    wind: Optional[Wind] = None
    visibility: Optional[Visibility] = None
    clouds: tuple[CloudLayer, ...] = field(default_factory=tuple)
    humidity: Optional[float] = None
    barometer: Optional[Barometer] = None
    flight_category: Optional[str] = None
