"""
AVWX Weather Provider - live METAR over the AVWX REST API.

Fetches ``GET /metar/{icao}`` with a bearer token and decodes the JSON into
MetarObservation. Rate limits, server errors and timeouts are retried with
exponential backoff; anything else fails fast.
"""

import logging
import time
from typing import Any, Callable, Dict, Optional

import httpx

from src.airway_router.exceptions import ReferenceDataUnavailableError
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

AVWX_BASE_URL = "https://avwx.rest/api"
HPA_PER_INHG = 33.8639
RETRYABLE_STATUS = frozenset({429, 500, 502, 503, 504})


def _value(data: Dict[str, Any], key: str) -> Optional[Any]:
    """Extract ``data[key]["value"]``; AVWX wraps numbers in objects."""
    item = data.get(key)
    if isinstance(item, dict):
        return item.get("value")
    return None


def parse_avwx_metar(data: Dict[str, Any], station: str) -> MetarObservation:
    """
    Decode an AVWX METAR payload.

    Args:
        data: JSON body of ``/metar/{icao}``.
        station: Requested station, used when the payload omits it.

    Returns:
        Decoded observation. Missing fields stay None.
    """
    units = data.get("units") or {}

    wind = None
    speed = _value(data, "wind_speed")
    if speed is not None:
        gust = _value(data, "wind_gust")
        wind = Wind(
            direction=int(_value(data, "wind_direction") or 0),
            speed=int(speed),
            unit=str(units.get("wind_speed", "kt")).upper(),
            gust=int(gust) if gust is not None else None,
        )

    visibility = None
    vis = _value(data, "visibility")
    if vis is not None:
        visibility = Visibility(distance=float(vis), unit=units.get("visibility", "m"))

    barometer = None
    altimeter = _value(data, "altimeter")
    if altimeter is not None:
        if units.get("altimeter") == "inHg":
            barometer = Barometer(
                hg=float(altimeter), hpa=round(altimeter * HPA_PER_INHG)
            )
        else:
            barometer = Barometer(
                hg=round(altimeter / HPA_PER_INHG, 2), hpa=float(altimeter)
            )

    clouds = tuple(
        CloudLayer(cover=c.get("type", ""), altitude=int(c.get("altitude") or 0))
        for c in data.get("clouds") or []
    )

    humidity = data.get("relative_humidity")
    if humidity is not None:
        humidity = round(float(humidity) * 100, 1)

    return MetarObservation(
        icao=data.get("station") or station,
        raw=data.get("raw", ""),
        temperature=_value(data, "temperature"),
        dewpoint=_value(data, "dewpoint"),
        wind=wind,
        visibility=visibility,
        clouds=clouds,
        humidity=humidity,
        barometer=barometer,
        flight_category=data.get("flight_rules"),
    )


class AvwxWeatherProvider(WeatherProvider):
    """
    METAR lookups against AVWX.

    Attributes:
        _token: AVWX API token.
        _client: HTTP client (lazy initialized unless injected).
        _max_retries: Retry attempts on retryable failures.
        _backoff_multiplier: Exponential backoff multiplier.
        _sleep: Sleep function between retries, injectable for tests.
    """

    def __init__(
        self,
        token: str,
        base_url: str = AVWX_BASE_URL,
        max_retries: int = 3,
        backoff_multiplier: float = 2.0,
        timeout_s: float = 10.0,
        client: Optional[httpx.Client] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if not token:
            logger.warning("AVWX token not set - METAR requests will be rejected")
        self._token = token
        self._base_url = base_url
        self._max_retries = max_retries
        self._backoff_multiplier = backoff_multiplier
        self._timeout_s = timeout_s
        self._client = client
        self._sleep = sleep

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                base_url=self._base_url,
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/json",
                },
                timeout=httpx.Timeout(self._timeout_s, connect=5.0),
            )
        return self._client

    def get_observation(self, icao: str) -> MetarObservation:
        station = normalize_icao(icao, "station")
        client = self._get_client()

        retries = 0
        backoff = 1.0

        while True:
            try:
                response = client.get(f"/metar/{station}")
            except httpx.TransportError as exc:
                reason = f"network error: {exc}"
            except httpx.HTTPError as exc:
                logger.error("AVWX request for %s failed: %s", station, exc)
                raise ReferenceDataUnavailableError("metar", str(exc)) from exc
            else:
                if response.status_code == 200:
                    try:
                        return parse_avwx_metar(response.json(), station)
                    except (ValueError, TypeError, AttributeError) as exc:
                        logger.error(
                            "Malformed AVWX payload for %s: %s", station, response.text[:200]
                        )
                        raise ReferenceDataUnavailableError(
                            "metar", "malformed AVWX response"
                        ) from exc
                if response.status_code not in RETRYABLE_STATUS:
                    logger.error(
                        "AVWX error for %s: %d %s",
                        station,
                        response.status_code,
                        response.text[:200],
                    )
                    raise ReferenceDataUnavailableError(
                        "metar", f"AVWX returned {response.status_code}"
                    )
                reason = f"AVWX returned {response.status_code}"

            retries += 1
            if retries > self._max_retries:
                logger.error("AVWX lookup for %s failed after %d retries", station, self._max_retries)
                raise ReferenceDataUnavailableError("metar", reason)

            logger.warning(
                "AVWX %s, retry %d/%d in %.1fs",
                reason,
                retries,
                self._max_retries,
                backoff,
            )
            self._sleep(backoff)
            backoff *= self._backoff_multiplier

    @property
    def name(self) -> str:
        return "AVWX"

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None
