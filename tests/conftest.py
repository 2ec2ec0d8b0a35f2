"""
Shared fixtures for airway_router tests.

Provides a small reference dataset around the Sao Paulo / Rio corridor:
three airports, three fixes, two navaids and three airways:
- UZ1: every point resolves
- UZ9: first point is unknown to the fix table
- UZ0: no point resolves
"""

import pandas as pd
import pytest

from src.airway_router.adapters.data_providers.bundled_tables import (
    airway_points_frame,
)
from src.airway_router.adapters.data_providers.table_provider import (
    TableReferenceDataProvider,
)
from src.airway_router.adapters.selection import FixedIndexSelector
from src.airway_router.schemas.reference import ReferenceTables
from src.airway_router.services.route_assembler_service import RouteAssembler


@pytest.fixture
def anyio_backend():
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def airports_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "icao": ["SBGR", "SBRJ", "SBSP"],
            "name": [
                "Aeroporto Internacional de São Paulo/Guarulhos",
                "Aeroporto Santos Dumont",
                "Aeroporto de Congonhas",
            ],
            "lat": [-23.4356, -22.9111, -23.6261],
            "lng": [-46.4731, -43.1631, -46.6564],
            "elevation": [750.0, 3.0, 802.0],
            "country": ["Brasil", "Brasil", "Brasil"],
            "city": ["Guarulhos", "Rio de Janeiro", "São Paulo"],
        }
    )


@pytest.fixture
def fixes_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "ident": ["AMBET", "DORLU", "GIKPO"],
            "lat": [-23.1500, -22.7833, -22.6167],
            "lng": [-45.8333, -44.5833, -44.0000],
        }
    )


@pytest.fixture
def navaids_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "ident": ["GRU", "SDU"],
            "lat": [-23.4356, -22.9111],
            "lng": [-46.4731, -43.1631],
        }
    )


@pytest.fixture
def airway_points_df() -> pd.DataFrame:
    return airway_points_frame(
        {
            "UZ1": ["AMBET", "DORLU", "GIKPO"],
            "UZ9": ["XXXXX", "AMBET", "DORLU"],
            "UZ0": ["NOPE1", "NOPE2"],
        }
    )


@pytest.fixture
def small_tables(airports_df, fixes_df, navaids_df, airway_points_df) -> ReferenceTables:
    """Reference tables for the small test dataset."""
    return ReferenceTables(
        airports=airports_df,
        fixes=fixes_df,
        navaids=navaids_df,
        airway_points=airway_points_df,
    )


@pytest.fixture
def table_provider(small_tables) -> TableReferenceDataProvider:
    return TableReferenceDataProvider(small_tables)


@pytest.fixture
def first_choice() -> FixedIndexSelector:
    """Selector that always takes the first airway and navaid."""
    return FixedIndexSelector(0)


@pytest.fixture
def assembler(table_provider, first_choice) -> RouteAssembler:
    """Deterministic assembler over the small dataset (UZ1 + GRU)."""
    return RouteAssembler(provider=table_provider, selector=first_choice)
