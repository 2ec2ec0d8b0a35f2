"""
Configuration module for the Airway Router.

This module loads environment variables (from a .env file when present)
and provides centralized, validated settings for the engine, the weather
client and the HTTP layer.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from src.airway_router.geodesy import CRUISE_SPEED_KNOTS

# Load environment variables from .env file
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://localhost:3001",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:3001",
)


@dataclass(frozen=True)
class RouterConfig:
    """
    Application configuration.

    Attributes:
        reference_db_path: SQLite reference database. None uses the
            bundled in-memory tables.
        cruise_speed_knots: Cruise speed for estimated flight time.
        simulated_latency_ms: Artificial delay per route generation
            (0 disables it).
        weather_latency_ms: Artificial delay per simulated METAR lookup
            (0 disables it). Ignored when AVWX is used.
        request_timeout_s: Upper bound for one HTTP request to the engine.
        avwx_token: AVWX API token. None uses simulated weather.
        avwx_base_url: AVWX REST API base URL.
        weather_max_retries: Retry attempts for AVWX requests.
        backoff_multiplier: Exponential backoff multiplier for AVWX retries.
        cors_origins: Origins allowed by the HTTP layer.
        log_level: Root logging level name.

    Raises:
        ValueError: If a numeric setting is out of range.
    """

    reference_db_path: Optional[str] = None
    cruise_speed_knots: float = CRUISE_SPEED_KNOTS
    simulated_latency_ms: int = 0
    weather_latency_ms: int = 0
    request_timeout_s: float = 10.0
    avwx_token: Optional[str] = None
    avwx_base_url: str = "https://avwx.rest/api"
    weather_max_retries: int = 3
    backoff_multiplier: float = 2.0
    cors_origins: Tuple[str, ...] = DEFAULT_CORS_ORIGINS
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.cruise_speed_knots <= 0:
            raise ValueError(
                f"cruise_speed_knots must be > 0, got {self.cruise_speed_knots}"
            )
        if self.simulated_latency_ms < 0:
            raise ValueError(
                f"simulated_latency_ms must be >= 0, got {self.simulated_latency_ms}"
            )
        if self.weather_latency_ms < 0:
            raise ValueError(
                f"weather_latency_ms must be >= 0, got {self.weather_latency_ms}"
            )
        if self.request_timeout_s <= 0:
            raise ValueError(
                f"request_timeout_s must be > 0, got {self.request_timeout_s}"
            )
        if self.weather_max_retries < 0:
            raise ValueError(
                f"weather_max_retries must be >= 0, got {self.weather_max_retries}"
            )
        if self.backoff_multiplier < 1:
            raise ValueError(
                f"backoff_multiplier must be >= 1, got {self.backoff_multiplier}"
            )

    @classmethod
    def from_env(cls) -> "RouterConfig":
        """
        Build the configuration from environment variables.

        Unset variables fall back to the dataclass defaults.
        """
        origins = os.getenv("AIRWAY_ROUTER_CORS_ORIGINS")
        return cls(
            reference_db_path=os.getenv("AIRWAY_ROUTER_DB_PATH") or None,
            cruise_speed_knots=float(
                os.getenv("AIRWAY_ROUTER_CRUISE_SPEED_KT", CRUISE_SPEED_KNOTS)
            ),
            simulated_latency_ms=int(os.getenv("AIRWAY_ROUTER_LATENCY_MS", "0")),
            weather_latency_ms=int(
                os.getenv("AIRWAY_ROUTER_WEATHER_LATENCY_MS", "0")
            ),
            request_timeout_s=float(
                os.getenv("AIRWAY_ROUTER_REQUEST_TIMEOUT_S", "10.0")
            ),
            avwx_token=os.getenv("AVWX_TOKEN") or None,
            avwx_base_url=os.getenv("AVWX_BASE_URL", "https://avwx.rest/api"),
            weather_max_retries=int(os.getenv("AIRWAY_ROUTER_WEATHER_RETRIES", "3")),
            backoff_multiplier=float(
                os.getenv("AIRWAY_ROUTER_BACKOFF_MULTIPLIER", "2.0")
            ),
            cors_origins=(
                tuple(o.strip() for o in origins.split(",") if o.strip())
                if origins
                else DEFAULT_CORS_ORIGINS
            ),
            log_level=os.getenv("AIRWAY_ROUTER_LOG_LEVEL", "INFO").upper(),
        )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with the application format."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
