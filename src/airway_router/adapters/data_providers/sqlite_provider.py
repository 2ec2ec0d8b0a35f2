"""
SQLite Reference Data Provider - SQL to entity adapter.

Reads reference data from a SQLite file on demand and validates every
result against the same Pandera schemas as the in-memory tables. Any
failure of the database surfaces as ReferenceDataUnavailableError naming
the lookup that failed.

Expected tables: ``airports``, ``fixes``, ``navaids``, ``airway_points``
(columns as in the corresponding schemas).
"""

import logging
import sqlite3
import threading
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pandas as pd

from src.airway_router.adapters.data_providers.table_provider import (
    airports_from_df,
    airways_from_df,
    fixes_from_df,
    navaids_from_df,
)
from src.airway_router.exceptions import ReferenceDataUnavailableError
from src.airway_router.ports.reference_data_provider import ReferenceDataProvider
from src.airway_router.schemas.reference import (
    Airport,
    AirportSchema,
    Airway,
    AirwayPointSchema,
    FixSchema,
    NavAid,
    NavaidSchema,
    NavFix,
    ReferenceTables,
)

logger = logging.getLogger(__name__)


def write_reference_tables(
    db_path: Union[str, Path], tables: ReferenceTables
) -> Path:
    """
    Write validated reference tables into a SQLite file, replacing them.

    Args:
        db_path: Target database file; parent directories are created.
        tables: Reference tables to store.

    Returns:
        Path of the written database.
    """
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    validated = tables.validate()

    conn = sqlite3.connect(str(path))
    try:
        validated.airports.to_sql("airports", conn, if_exists="replace", index=False)
        validated.fixes.to_sql("fixes", conn, if_exists="replace", index=False)
        validated.navaids.to_sql("navaids", conn, if_exists="replace", index=False)
        validated.airway_points.to_sql(
            "airway_points", conn, if_exists="replace", index=False
        )
        conn.commit()
    finally:
        conn.close()

    logger.info("Wrote reference tables to %s", path)
    return path


class SqliteReferenceDataProvider(ReferenceDataProvider):
    """
    Reference data provider for a SQLite database.

    The connection is opened lazily and shared between threads; queries
    are serialized with a lock since a sqlite3 connection is not safe for
    concurrent use.

    Attributes:
        _db_path: Path to the SQLite database file.
        _conn: SQLite connection (lazy initialized).
    """

    def __init__(self, db_path: Union[str, Path]) -> None:
        """
        Initialize the SQLite provider.

        Args:
            db_path: Path to SQLite database file. Not opened until first use.
        """
        self._db_path = Path(db_path)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    def _get_connection(self, lookup: str) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._conn is None:
            if not self._db_path.exists():
                raise ReferenceDataUnavailableError(
                    lookup, f"database not found: {self._db_path}"
                )
            self._conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
        return self._conn

    def _query(self, lookup: str, query: str, params: Sequence = ()) -> pd.DataFrame:
        """Run *query* and return the rows, translating database errors."""
        logger.debug("Executing %s: %s with params: %s", lookup, query, params)
        with self._lock:
            conn = self._get_connection(lookup)
            try:
                return pd.read_sql(query, conn, params=list(params))
            except (sqlite3.Error, pd.errors.DatabaseError) as exc:
                logger.error("Reference lookup %s failed: %s", lookup, exc)
                raise ReferenceDataUnavailableError(lookup, str(exc)) from exc

    def get_airport(self, icao: str) -> Optional[Airport]:
        df = self._query(
            "get_airport", "SELECT * FROM airports WHERE icao = ?", (icao,)
        )
        if df.empty:
            return None
        return airports_from_df(AirportSchema.validate(df))[0]

    def get_fix(self, ident: str) -> Optional[NavFix]:
        df = self._query("get_fix", "SELECT * FROM fixes WHERE ident = ?", (ident,))
        if df.empty:
            return None
        return fixes_from_df(FixSchema.validate(df))[0]

    def get_navaid(self, ident: str) -> Optional[NavAid]:
        df = self._query(
            "get_navaid", "SELECT * FROM navaids WHERE ident = ?", (ident,)
        )
        if df.empty:
            return None
        return navaids_from_df(NavaidSchema.validate(df))[0]

    def get_airway(self, ident: str) -> Optional[Airway]:
        df = self._query(
            "get_airway",
            "SELECT airway, seq, fix FROM airway_points WHERE airway = ? ORDER BY seq",
            (ident,),
        )
        if df.empty:
            return None
        return airways_from_df(AirwayPointSchema.validate(df))[0]

    def list_airways(self) -> Sequence[Airway]:
        # rowid keeps the insertion order of airways
        df = self._query(
            "list_airways",
            "SELECT airway, seq, fix FROM airway_points ORDER BY rowid",
        )
        return tuple(airways_from_df(AirwayPointSchema.validate(df)))

    def list_navaids(self) -> Sequence[NavAid]:
        df = self._query("list_navaids", "SELECT * FROM navaids ORDER BY rowid")
        return tuple(navaids_from_df(NavaidSchema.validate(df)))

    def list_airports(self) -> Sequence[Airport]:
        df = self._query("list_airports", "SELECT * FROM airports ORDER BY rowid")
        airports: List[Airport] = airports_from_df(AirportSchema.validate(df))
        return tuple(airports)

    @property
    def name(self) -> str:
        """Human-readable provider name."""
        return "SQLite"

    @property
    def is_available(self) -> bool:
        """Check if database file exists."""
        return self._db_path.exists()

    def close(self) -> None:
        """Close database connection."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("Database connection closed")
