"""
Tests for METAR weather adapters.

Tests cover:
- SimulatedWeatherProvider canned and generated observations
- AVWX payload decoding
- AvwxWeatherProvider retry/backoff with respx-mocked HTTP
"""

import random
from typing import List
from unittest.mock import MagicMock

import httpx
import pytest
import respx

from src.airway_router.adapters.weather.avwx_provider import (
    AVWX_BASE_URL,
    AvwxWeatherProvider,
    parse_avwx_metar,
)
from src.airway_router.adapters.weather.simulated_provider import (
    CANNED_OBSERVATIONS,
    SimulatedWeatherProvider,
)
from src.airway_router.exceptions import (
    InvalidIdentifierError,
    ReferenceDataUnavailableError,
)
from src.airway_router.ports.weather_provider import WeatherProvider
from src.airway_router.schemas.weather import Barometer, CloudLayer, Wind


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def avwx_payload() -> dict:
    """Trimmed AVWX /metar response body."""
    return {
        "station": "SBGR",
        "raw": "SBGR 221700Z 09008G18KT 9999 FEW035 28/16 Q1016",
        "temperature": {"value": 28, "repr": "28"},
        "dewpoint": {"value": 16, "repr": "16"},
        "wind_direction": {"value": 90, "repr": "090"},
        "wind_speed": {"value": 8, "repr": "08"},
        "wind_gust": {"value": 18, "repr": "18"},
        "visibility": {"value": 9999, "repr": "9999"},
        "altimeter": {"value": 1016, "repr": "Q1016"},
        "clouds": [{"type": "FEW", "altitude": 35, "repr": "FEW035"}],
        "relative_humidity": 0.48,
        "flight_rules": "VFR",
        "units": {"altimeter": "hPa", "visibility": "m", "wind_speed": "kt"},
    }


class RecordingSleep:
    """Collects backoff delays instead of sleeping."""

    def __init__(self) -> None:
        self.delays: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def make_provider(max_retries: int = 3, sleep=None) -> AvwxWeatherProvider:
    return AvwxWeatherProvider(
        token="test-token",
        max_retries=max_retries,
        sleep=sleep or RecordingSleep(),
    )


# =============================================================================
# SIMULATED PROVIDER TESTS
# =============================================================================


class TestSimulatedWeatherProvider:
    """Tests for the offline METAR source."""

    def test_implements_port(self):
        provider = SimulatedWeatherProvider()
        assert isinstance(provider, WeatherProvider)
        assert provider.name == "Simulated METAR"

    @pytest.mark.parametrize("icao", ["SBGR", "SBRJ", "SBSP", "SBGL"])
    def test_canned_stations(self, icao):
        assert SimulatedWeatherProvider().get_observation(icao) == CANNED_OBSERVATIONS[icao]

    def test_station_is_case_insensitive(self):
        observation = SimulatedWeatherProvider().get_observation("sbsp")
        assert observation.icao == "SBSP"
        assert observation.flight_category == "MVFR"

    def test_generated_observation_is_plausible(self):
        observation = SimulatedWeatherProvider(random.Random(3)).get_observation("SBBR")
        assert observation.icao == "SBBR"
        assert observation.raw.startswith("SBBR ")
        assert 20 <= observation.temperature <= 29
        assert observation.dewpoint <= observation.temperature
        assert 0 <= observation.wind.direction < 360
        assert observation.flight_category in {"VFR", "MVFR", "IFR"}
        assert [c.cover for c in observation.clouds] == ["FEW", "SCT"]

    def test_generated_observation_is_reproducible(self):
        first = SimulatedWeatherProvider(random.Random(9)).get_observation("SBCF")
        second = SimulatedWeatherProvider(random.Random(9)).get_observation("SBCF")
        assert first == second

    def test_latency_hook_called(self):
        hook = MagicMock()
        SimulatedWeatherProvider(latency_hook=hook).get_observation("SBGR")
        hook.assert_called_once_with("get_observation")

    def test_invalid_station_rejected_before_latency(self):
        hook = MagicMock()
        with pytest.raises(InvalidIdentifierError) as exc_info:
            SimulatedWeatherProvider(latency_hook=hook).get_observation("SBG")
        assert exc_info.value.side == "station"
        hook.assert_not_called()


# =============================================================================
# AVWX DECODING TESTS
# =============================================================================


class TestParseAvwxMetar:
    """Tests for AVWX payload decoding."""

    def test_full_payload(self, avwx_payload):
        observation = parse_avwx_metar(avwx_payload, "SBGR")
        assert observation.icao == "SBGR"
        assert observation.temperature == 28
        assert observation.dewpoint == 16
        assert observation.wind == Wind(direction=90, speed=8, unit="KT", gust=18)
        assert observation.visibility.distance == 9999.0
        assert observation.clouds == (CloudLayer("FEW", 35),)
        assert observation.humidity == 48.0
        assert observation.barometer == Barometer(hg=30.0, hpa=1016.0)
        assert observation.flight_category == "VFR"

    def test_altimeter_in_inches(self, avwx_payload):
        avwx_payload["altimeter"] = {"value": 29.92}
        avwx_payload["units"]["altimeter"] = "inHg"
        barometer = parse_avwx_metar(avwx_payload, "SBGR").barometer
        assert barometer.hg == 29.92
        assert barometer.hpa == 1013

    def test_minimal_payload(self):
        observation = parse_avwx_metar({"raw": "SBXX NIL"}, "SBXX")
        assert observation.icao == "SBXX"
        assert observation.raw == "SBXX NIL"
        assert observation.wind is None
        assert observation.visibility is None
        assert observation.barometer is None
        assert observation.clouds == ()

    def test_missing_gust(self, avwx_payload):
        avwx_payload["wind_gust"] = None
        assert parse_avwx_metar(avwx_payload, "SBGR").wind.gust is None


# =============================================================================
# AVWX PROVIDER TESTS
# =============================================================================

METAR_URL = f"{AVWX_BASE_URL}/metar/SBGR"


class TestAvwxWeatherProvider:
    """Tests for the AVWX client with mocked HTTP."""

    @respx.mock
    def test_success(self, avwx_payload):
        route = respx.get(METAR_URL).mock(
            return_value=httpx.Response(200, json=avwx_payload)
        )

        provider = make_provider()
        observation = provider.get_observation("sbgr")

        assert observation.icao == "SBGR"
        assert route.call_count == 1
        assert provider.name == "AVWX"

    @respx.mock
    def test_sends_bearer_token(self, avwx_payload):
        route = respx.get(METAR_URL).mock(
            return_value=httpx.Response(200, json=avwx_payload)
        )

        make_provider().get_observation("SBGR")

        assert route.calls.last.request.headers["Authorization"] == "Bearer test-token"

    @respx.mock
    def test_retries_then_succeeds(self, avwx_payload):
        """Backoff: 1.0, then 2.0 (1.0 * 2.0)"""
        route = respx.get(METAR_URL)
        route.side_effect = [
            httpx.Response(503),
            httpx.Response(429, json={"error": "rate limited"}),
            httpx.Response(200, json=avwx_payload),
        ]
        sleep = RecordingSleep()

        observation = make_provider(sleep=sleep).get_observation("SBGR")

        assert observation.flight_category == "VFR"
        assert route.call_count == 3
        assert sleep.delays == [1.0, 2.0]

    @respx.mock
    def test_retries_exhausted(self):
        route = respx.get(METAR_URL).mock(return_value=httpx.Response(502))
        sleep = RecordingSleep()

        provider = make_provider(max_retries=2, sleep=sleep)
        with pytest.raises(ReferenceDataUnavailableError) as exc_info:
            provider.get_observation("SBGR")

        assert exc_info.value.lookup == "metar"
        assert "502" in exc_info.value.reason
        assert route.call_count == 3
        assert sleep.delays == [1.0, 2.0]

    @respx.mock
    def test_client_error_not_retried(self):
        route = respx.get(METAR_URL).mock(
            return_value=httpx.Response(401, json={"error": "Token required"})
        )
        sleep = RecordingSleep()

        with pytest.raises(ReferenceDataUnavailableError):
            make_provider(sleep=sleep).get_observation("SBGR")

        assert route.call_count == 1
        assert sleep.delays == []

    @respx.mock
    def test_timeout_retried(self):
        respx.get(METAR_URL).mock(
            side_effect=httpx.TimeoutException("Connection timed out")
        )
        sleep = RecordingSleep()

        with pytest.raises(ReferenceDataUnavailableError) as exc_info:
            make_provider(max_retries=1, sleep=sleep).get_observation("SBGR")

        assert "timed out" in exc_info.value.reason.lower()
        assert sleep.delays == [1.0]

    @respx.mock
    def test_non_json_body_not_retried(self):
        """A maintenance page served with 200 is a failed lookup."""
        route = respx.get(METAR_URL).mock(
            return_value=httpx.Response(200, text="<html>maintenance</html>")
        )
        sleep = RecordingSleep()

        with pytest.raises(ReferenceDataUnavailableError) as exc_info:
            make_provider(sleep=sleep).get_observation("SBGR")

        assert exc_info.value.lookup == "metar"
        assert route.call_count == 1
        assert sleep.delays == []

    @respx.mock
    def test_unexpected_json_shape(self):
        respx.get(METAR_URL).mock(return_value=httpx.Response(200, json=["SBGR"]))

        with pytest.raises(ReferenceDataUnavailableError):
            make_provider().get_observation("SBGR")

    @respx.mock
    def test_invalid_station_makes_no_request(self):
        route = respx.get(url__startswith=AVWX_BASE_URL)
        with pytest.raises(InvalidIdentifierError):
            make_provider().get_observation("SBGRX")
        assert not route.called

    def test_close_is_idempotent(self):
        provider = make_provider()
        provider.close()
        provider.close()
