"""
Reference data schemas using Pandera.

Defines the tabular contract for airports, fixes, navaids and airway points,
plus the immutable entities that providers hand to the route assembler.
Schema validation happens once at the provider boundary, not per lookup.
"""

from dataclasses import dataclass
from typing import Optional

import pandas as pd
import pandera as pa
from pandera.typing import Series

from src.airway_router.geodesy import GeoPoint


class AirportSchema(pa.DataFrameModel):
    """
    Airport table contract.

    One row per airport; the ICAO code is the primary key.
    """

    icao: Series[str] = pa.Field(
        unique=True,
        nullable=False,
        str_matches=r"^[A-Z0-9]{4}$",
        description="4-character upper-case ICAO identifier (e.g., 'SBGR')",
    )
    name: Series[str] = pa.Field(
        nullable=False,
        description="Display name",
    )
    lat: Series[float] = pa.Field(
        ge=-90,
        le=90,
        description="Latitude in decimal degrees",
    )
    lng: Series[float] = pa.Field(
        ge=-180,
        le=180,
        description="Longitude in decimal degrees",
    )
    elevation: Optional[Series[float]] = pa.Field(
        nullable=True,
        description="Field elevation in feet",
    )
    country: Optional[Series[str]] = pa.Field(nullable=True)
    city: Optional[Series[str]] = pa.Field(nullable=True)

    class Config:
        strict = False
        coerce = True
        name = "AirportSchema"


class FixSchema(pa.DataFrameModel):
    """Navigation fix table contract."""

    ident: Series[str] = pa.Field(
        unique=True,
        nullable=False,
        str_length={"min_value": 1},
        description="Fix identifier (e.g., 'AMBET')",
    )
    lat: Series[float] = pa.Field(ge=-90, le=90)
    lng: Series[float] = pa.Field(ge=-180, le=180)

    class Config:
        strict = False
        coerce = True
        name = "FixSchema"


class NavaidSchema(FixSchema):
    """Radio navaid table contract. Same shape as fixes, separate namespace."""

    class Config:
        strict = False
        coerce = True
        name = "NavaidSchema"


class AirwayPointSchema(pa.DataFrameModel):
    """
    Airway path table contract.

    Each row places one fix on one airway. The path of an airway is its
    rows in ascending ``seq`` order.
    """

    airway: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Airway identifier (e.g., 'UZ1')",
    )
    seq: Series[int] = pa.Field(
        ge=0,
        description="Zero-based position of the fix along the airway",
    )
    fix: Series[str] = pa.Field(
        nullable=False,
        str_length={"min_value": 1},
        description="Fix identifier; may be absent from the fix table",
    )

    class Config:
        strict = False
        coerce = True
        name = "AirwayPointSchema"
        unique = ["airway", "seq"]


@dataclass(frozen=True)
class Airport:
    """Immutable airport reference entity."""

    icao: str
    name: str
    lat: float
    lng: float
    elevation: Optional[float] = None
    country: Optional[str] = None
    city: Optional[str] = None

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lng)


@dataclass(frozen=True)
class NavFix:
    """Named geographic point not tied to a radio transmitter."""

    ident: str
    lat: float
    lng: float

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lng)


@dataclass(frozen=True)
class NavAid:
    """Named geographic point of a radio navigation aid."""

    ident: str
    lat: float
    lng: float

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lng)


@dataclass(frozen=True)
class Airway:
    """
    Named ordered path of fix identifiers.

    Order matters: consecutive points define the airway's legs.
    """

    ident: str
    points: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.ident:
            raise ValueError("Airway ident cannot be empty")

    @property
    def first_point(self) -> Optional[str]:
        return self.points[0] if self.points else None

    @property
    def last_point(self) -> Optional[str]:
        return self.points[-1] if self.points else None


@dataclass(frozen=True)
class ReferenceTables:
    """
    The four reference tables that back a table-driven provider.

    Attributes:
        airports: Rows matching AirportSchema.
        fixes: Rows matching FixSchema.
        navaids: Rows matching NavaidSchema.
        airway_points: Rows matching AirwayPointSchema.
    """

    airports: pd.DataFrame
    fixes: pd.DataFrame
    navaids: pd.DataFrame
    airway_points: pd.DataFrame

    def validate(self) -> "ReferenceTables":
        """
        Return a copy with every table validated against its schema.

        Raises:
            pandera.errors.SchemaError: If any table breaks its contract.
        """
        return ReferenceTables(
            airports=AirportSchema.validate(self.airports),
            fixes=FixSchema.validate(self.fixes),
            navaids=NavaidSchema.validate(self.navaids),
            airway_points=AirwayPointSchema.validate(self.airway_points),
        )
