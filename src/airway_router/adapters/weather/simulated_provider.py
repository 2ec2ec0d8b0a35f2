"""
Simulated Weather Provider - canned METAR observations.

Returns fixed observations for the main Sao Paulo / Rio airports and
plausible generated ones for any other station. Used when no AVWX token
is configured.
"""

import logging
import random
from typing import Dict, Optional

from src.airway_router.adapters.latency import NoLatency
from src.airway_router.ports.latency import LatencyHook
from src.airway_router.ports.weather_provider import WeatherProvider
from src.airway_router.schemas.weather import (
    Barometer,
    CloudLayer,
    MetarObservation,
    Visibility,
    Wind,
)
from src.airway_router.validation import normalize_icao

logger = logging.getLogger(__name__)

FLIGHT_CATEGORIES = ("VFR", "MVFR", "IFR")

CANNED_OBSERVATIONS: Dict[str, MetarObservation] = {
    "SBGR": MetarObservation(
        icao="SBGR",
        raw="SBGR 221700Z 09008KT 9999 FEW035 SCT300 28/16 Q1016",
        temperature=28,
        dewpoint=16,
        wind=Wind(direction=90, speed=8),
        visibility=Visibility(distance=9999),
        clouds=(CloudLayer("FEW", 35), CloudLayer("SCT", 300)),
        barometer=Barometer(hg=30.00, hpa=1016),
        flight_category="VFR",
    ),
    "SBRJ": MetarObservation(
        icao="SBRJ",
        raw="SBRJ 221700Z 14005KT 8000 FEW015 BKN025 25/20 Q1015",
        temperature=25,
        dewpoint=20,
        wind=Wind(direction=140, speed=5),
        visibility=Visibility(distance=8000),
        clouds=(CloudLayer("FEW", 15), CloudLayer("BKN", 25)),
        barometer=Barometer(hg=29.97, hpa=1015),
        flight_category="VFR",
    ),
    "SBSP": MetarObservation(
        icao="SBSP",
        raw="SBSP 221700Z 27006KT 6000 SCT008 BKN015 22/19 Q1014",
        temperature=22,
        dewpoint=19,
        wind=Wind(direction=270, speed=6),
        visibility=Visibility(distance=6000),
        clouds=(CloudLayer("SCT", 8), CloudLayer("BKN", 15)),
        barometer=Barometer(hg=29.94, hpa=1014),
        flight_category="MVFR",
    ),
    "SBGL": MetarObservation(
        icao="SBGL",
        raw="SBGL 221700Z 12010KT 9999 FEW020 SCT035 27/18 Q1015",
        temperature=27,
        dewpoint=18,
        wind=Wind(direction=120, speed=10),
        visibility=Visibility(distance=9999),
        clouds=(CloudLayer("FEW", 20), CloudLayer("SCT", 35)),
        barometer=Barometer(hg=29.97, hpa=1015),
        flight_category="VFR",
    ),
}


class SimulatedWeatherProvider(WeatherProvider):
    """
    Weather provider that never leaves the process.

    Attributes:
        _rng: Random source for stations without a canned observation.
        _latency_hook: Called before each lookup (500 ms in the demo app).
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        latency_hook: Optional[LatencyHook] = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._latency_hook = latency_hook or NoLatency()

    def get_observation(self, icao: str) -> MetarObservation:
        station = normalize_icao(icao, "station")
        self._latency_hook("get_observation")

        canned = CANNED_OBSERVATIONS.get(station)
        if canned is not None:
            return canned

        logger.debug("No canned METAR for %s, generating one", station)
        return self._generate(station)

    def _generate(self, station: str) -> MetarObservation:
        """Build a plausible observation for an unknown station."""
        rng = self._rng
        direction = rng.randrange(0, 360, 10)
        speed = rng.randint(5, 19)
        visibility = rng.randint(5, 9) * 1000
        few = rng.randint(1, 4) * 10
        sct = few + rng.randint(1, 4) * 10
        temperature = rng.randint(20, 29)
        dewpoint = rng.randint(15, temperature)
        hpa = 1014 + rng.randint(-3, 2)
        hg = round(hpa * 0.02953, 2)

        raw = (
            f"{station} 221700Z {direction:03d}{speed:02d}KT {visibility} "
            f"FEW{few:03d} SCT{sct:03d} {temperature}/{dewpoint} Q{hpa}"
        )
        return MetarObservation(
            icao=station,
            raw=raw,
            temperature=temperature,
            dewpoint=dewpoint,
            wind=Wind(direction=direction, speed=speed),
            visibility=Visibility(distance=visibility),
            clouds=(CloudLayer("FEW", few), CloudLayer("SCT", sct)),
            barometer=Barometer(hg=hg, hpa=hpa),
            flight_category=rng.choice(FLIGHT_CATEGORIES),
        )

    @property
    def name(self) -> str:
        return "Simulated METAR"
