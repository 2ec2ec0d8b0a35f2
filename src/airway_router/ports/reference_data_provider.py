"""
Reference Data Provider port interface.

Defines the abstract contract for sources of airports, fixes, navaids and
airways. Implementations handle the specifics of the backing store
(in-memory tables, SQLite, a remote service).
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from src.airway_router.schemas.reference import Airport, Airway, NavAid, NavFix


class ReferenceDataProvider(ABC):
    """
    Abstract interface for read-only navigation reference data.

    Lookups return the matching entity or None when the identifier is
    unknown. Data never changes after loading, so a provider may be shared
    by concurrent route generations without locking.

    Implementations:
    - TableReferenceDataProvider: validated in-memory DataFrames
    - SqliteReferenceDataProvider: SQLite file queried on demand
    """

    @abstractmethod
    def get_airport(self, icao: str) -> Optional[Airport]:
        """
        Look up an airport by ICAO code.

        Args:
            icao: Upper-case 4-character identifier.

        Returns:
            The airport, or None if unknown.

        Raises:
            ReferenceDataUnavailableError: If the backing store fails.
        """
        ...

    @abstractmethod
    def get_fix(self, ident: str) -> Optional[NavFix]:
        """Look up a navigation fix, or None if unknown."""
        ...

    @abstractmethod
    def get_navaid(self, ident: str) -> Optional[NavAid]:
        """Look up a radio navaid, or None if unknown."""
        ...

    @abstractmethod
    def get_airway(self, ident: str) -> Optional[Airway]:
        """Look up an airway with its ordered point list, or None if unknown."""
        ...

    @abstractmethod
    def list_airways(self) -> Sequence[Airway]:
        """
        Return every airway.

        A collection rather than a keyed lookup so callers can pick one
        from the full set.
        """
        ...

    @abstractmethod
    def list_navaids(self) -> Sequence[NavAid]:
        """Return every navaid."""
        ...

    @abstractmethod
    def list_airports(self) -> Sequence[Airport]:
        """Return every airport in table order."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this provider.

        Returns:
            Provider identifier (e.g., "In-memory tables", "SQLite").
        """
        ...

    @property
    def is_available(self) -> bool:
        """
        Check if the backing store is currently reachable.

        Default implementation returns True. Override for providers
        that need connection health checks.
        """
        return True
