"""
Tests for RouterConfig.
"""

import pytest

from src.airway_router.config import DEFAULT_CORS_ORIGINS, RouterConfig

ENV_VARS = (
    "AIRWAY_ROUTER_DB_PATH",
    "AIRWAY_ROUTER_CRUISE_SPEED_KT",
    "AIRWAY_ROUTER_LATENCY_MS",
    "AIRWAY_ROUTER_WEATHER_LATENCY_MS",
    "AIRWAY_ROUTER_REQUEST_TIMEOUT_S",
    "AVWX_TOKEN",
    "AVWX_BASE_URL",
    "AIRWAY_ROUTER_WEATHER_RETRIES",
    "AIRWAY_ROUTER_BACKOFF_MULTIPLIER",
    "AIRWAY_ROUTER_CORS_ORIGINS",
    "AIRWAY_ROUTER_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestRouterConfig:
    """Defaults and validation."""

    def test_defaults(self):
        config = RouterConfig()
        assert config.reference_db_path is None
        assert config.cruise_speed_knots == 450.0
        assert config.simulated_latency_ms == 0
        assert config.weather_latency_ms == 0
        assert config.avwx_token is None
        assert config.cors_origins == DEFAULT_CORS_ORIGINS

    @pytest.mark.parametrize(
        "field, value",
        [
            ("cruise_speed_knots", 0),
            ("simulated_latency_ms", -1),
            ("weather_latency_ms", -1),
            ("request_timeout_s", 0),
            ("weather_max_retries", -1),
            ("backoff_multiplier", 0.5),
        ],
    )
    def test_out_of_range_rejected(self, field, value):
        with pytest.raises(ValueError, match=field):
            RouterConfig(**{field: value})


class TestFromEnv:
    """Environment variable parsing."""

    def test_unset_env_gives_defaults(self, clean_env):
        assert RouterConfig.from_env() == RouterConfig()

    def test_reads_every_variable(self, clean_env):
        clean_env.setenv("AIRWAY_ROUTER_DB_PATH", "/data/reference.db")
        clean_env.setenv("AIRWAY_ROUTER_CRUISE_SPEED_KT", "480")
        clean_env.setenv("AIRWAY_ROUTER_LATENCY_MS", "1000")
        clean_env.setenv("AIRWAY_ROUTER_WEATHER_LATENCY_MS", "500")
        clean_env.setenv("AIRWAY_ROUTER_REQUEST_TIMEOUT_S", "2.5")
        clean_env.setenv("AVWX_TOKEN", "secret")
        clean_env.setenv("AVWX_BASE_URL", "https://avwx.example/api")
        clean_env.setenv("AIRWAY_ROUTER_WEATHER_RETRIES", "5")
        clean_env.setenv("AIRWAY_ROUTER_BACKOFF_MULTIPLIER", "1.5")
        clean_env.setenv(
            "AIRWAY_ROUTER_CORS_ORIGINS", "https://a.example, https://b.example"
        )
        clean_env.setenv("AIRWAY_ROUTER_LOG_LEVEL", "debug")

        config = RouterConfig.from_env()

        assert config.reference_db_path == "/data/reference.db"
        assert config.cruise_speed_knots == 480.0
        assert config.simulated_latency_ms == 1000
        assert config.weather_latency_ms == 500
        assert config.request_timeout_s == 2.5
        assert config.avwx_token == "secret"
        assert config.avwx_base_url == "https://avwx.example/api"
        assert config.weather_max_retries == 5
        assert config.backoff_multiplier == 1.5
        assert config.cors_origins == ("https://a.example", "https://b.example")
        assert config.log_level == "DEBUG"

    def test_empty_token_means_simulated(self, clean_env):
        clean_env.setenv("AVWX_TOKEN", "")
        assert RouterConfig.from_env().avwx_token is None

    def test_invalid_env_value_rejected(self, clean_env):
        clean_env.setenv("AIRWAY_ROUTER_LATENCY_MS", "-10")
        with pytest.raises(ValueError):
            RouterConfig.from_env()
