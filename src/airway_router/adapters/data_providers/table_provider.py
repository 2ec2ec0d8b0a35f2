"""
Table Reference Data Provider - DataFrame to entity adapter.

Validates the four reference tables against their Pandera schemas once,
locks them read-only and indexes the entities by identifier for O(1)
lookups.
"""

import logging
from typing import Dict, List, Optional, Sequence

import pandas as pd

from src.airway_router.adapters.data_providers.bundled_tables import (
    load_bundled_tables,
)
from src.airway_router.adapters.data_providers.immutability import (
    is_immutable,
    make_immutable,
)
from src.airway_router.ports.reference_data_provider import ReferenceDataProvider
from src.airway_router.schemas.reference import (
    Airport,
    Airway,
    NavAid,
    NavFix,
    ReferenceTables,
)

logger = logging.getLogger(__name__)


def _optional(value):
    """Map pandas missing values (None, NaN) to None."""
    return None if pd.isna(value) else value


def airports_from_df(df: pd.DataFrame) -> List[Airport]:
    """
    Build Airport entities from AirportSchema rows, keeping row order.

    Optional columns may be absent entirely.
    """
    records = df.to_dict("records")
    return [
        Airport(
            icao=str(row["icao"]),
            name=str(row["name"]),
            lat=float(row["lat"]),
            lng=float(row["lng"]),
            elevation=_optional(row.get("elevation")),
            country=_optional(row.get("country")),
            city=_optional(row.get("city")),
        )
        for row in records
    ]


def fixes_from_df(df: pd.DataFrame) -> List[NavFix]:
    """Build NavFix entities from FixSchema rows."""
    return [
        NavFix(ident=str(ident), lat=float(lat), lng=float(lng))
        for ident, lat, lng in zip(df["ident"], df["lat"], df["lng"])
    ]


def navaids_from_df(df: pd.DataFrame) -> List[NavAid]:
    """Build NavAid entities from NavaidSchema rows."""
    return [
        NavAid(ident=str(ident), lat=float(lat), lng=float(lng))
        for ident, lat, lng in zip(df["ident"], df["lat"], df["lng"])
    ]


def airways_from_df(df: pd.DataFrame) -> List[Airway]:
    """
    Group AirwayPointSchema rows into Airway entities.

    Airways keep the order of their first appearance in the table; the
    points of each airway are ordered by ``seq``.

    Examples:
        >>> df = pd.DataFrame({
        ...     "airway": ["UZ9", "UZ9"], "seq": [1, 0], "fix": ["B", "A"],
        ... })
        >>> airways_from_df(df)
        [Airway(ident='UZ9', points=('A', 'B'))]
    """
    airways = []
    for ident, group in df.groupby("airway", sort=False):
        points = tuple(str(fix) for fix in group.sort_values("seq")["fix"])
        airways.append(Airway(ident=str(ident), points=points))
    return airways


class TableReferenceDataProvider(ReferenceDataProvider):
    """
    Reference data provider backed by in-memory DataFrames.

    Tables are validated at construction (pandera.errors.SchemaError on a
    broken contract, including duplicate identifiers) and never change
    afterwards, so one instance can serve concurrent requests.

    Attributes:
        _tables: Validated, read-only reference tables.
        _airports: ICAO -> Airport, in table order.
        _fixes: ident -> NavFix.
        _navaids: ident -> NavAid, in table order.
        _airways: ident -> Airway, in table order.
    """

    def __init__(self, tables: ReferenceTables) -> None:
        """
        Initialize the provider.

        Args:
            tables: Raw reference tables; validated here.
        """
        validated = tables.validate()
        self._tables = ReferenceTables(
            airports=make_immutable(validated.airports.reset_index(drop=True)),
            fixes=make_immutable(validated.fixes.reset_index(drop=True)),
            navaids=make_immutable(validated.navaids.reset_index(drop=True)),
            airway_points=make_immutable(
                validated.airway_points.reset_index(drop=True)
            ),
        )

        self._airports: Dict[str, Airport] = {
            a.icao: a for a in airports_from_df(self._tables.airports)
        }
        self._fixes: Dict[str, NavFix] = {
            f.ident: f for f in fixes_from_df(self._tables.fixes)
        }
        self._navaids: Dict[str, NavAid] = {
            n.ident: n for n in navaids_from_df(self._tables.navaids)
        }
        self._airways: Dict[str, Airway] = {
            w.ident: w for w in airways_from_df(self._tables.airway_points)
        }

        logger.info(
            "Loaded reference tables: %d airports, %d fixes, %d navaids, %d airways",
            len(self._airports),
            len(self._fixes),
            len(self._navaids),
            len(self._airways),
        )

    @classmethod
    def bundled(cls) -> "TableReferenceDataProvider":
        """Provider over the bundled demonstration dataset."""
        return cls(load_bundled_tables())

    @property
    def tables(self) -> ReferenceTables:
        """The validated, read-only tables."""
        return self._tables

    def get_airport(self, icao: str) -> Optional[Airport]:
        return self._airports.get(icao)

    def get_fix(self, ident: str) -> Optional[NavFix]:
        return self._fixes.get(ident)

    def get_navaid(self, ident: str) -> Optional[NavAid]:
        return self._navaids.get(ident)

    def get_airway(self, ident: str) -> Optional[Airway]:
        return self._airways.get(ident)

    def list_airways(self) -> Sequence[Airway]:
        return tuple(self._airways.values())

    def list_navaids(self) -> Sequence[NavAid]:
        return tuple(self._navaids.values())

    def list_airports(self) -> Sequence[Airport]:
        return tuple(self._airports.values())

    @property
    def name(self) -> str:
        """Human-readable provider name."""
        return "In-memory tables"

    @property
    def is_available(self) -> bool:
        """False if any loaded table has been unlocked for writing."""
        return all(
            is_immutable(df)
            for df in (
                self._tables.airports,
                self._tables.fixes,
                self._tables.navaids,
                self._tables.airway_points,
            )
        )
