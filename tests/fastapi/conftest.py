"""
Fixtures for FastAPI endpoint tests.

Provides a deterministic planner over the small dataset and a mock planner
for failure paths.
"""

from unittest.mock import MagicMock

import pytest

from src.airway_router.adapters.selection import FixedIndexSelector
from src.airway_router.application import FlightRoutePlanner
from src.airway_router.config import RouterConfig


@pytest.fixture
def planner(table_provider) -> FlightRoutePlanner:
    """Real planner: small dataset, first airway and navaid, simulated weather."""
    return FlightRoutePlanner(
        config=RouterConfig(),
        reference_provider=table_provider,
        selector=FixedIndexSelector(0),
    )


@pytest.fixture
def mock_planner() -> MagicMock:
    """Planner mock with a short request timeout."""
    mock = MagicMock(spec=FlightRoutePlanner)
    mock.config = RouterConfig(request_timeout_s=0.1)
    mock.is_ready = True
    mock.provider_name = "mock"
    mock.weather_name = "mock weather"
    return mock
