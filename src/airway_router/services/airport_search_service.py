"""
Airport Search Service - autocomplete over the airport table.

Independent of route generation; shares only the reference data provider.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from src.airway_router.schemas.reference import Airport

if TYPE_CHECKING:
    from src.airway_router.ports.reference_data_provider import ReferenceDataProvider

logger = logging.getLogger(__name__)

DEFAULT_LISTING_LIMIT = 10


class AirportSearchService:
    """
    Case-insensitive substring search over ICAO code, name and city.

    Attributes:
        _provider: Reference data provider supplying the airport table.
    """

    def __init__(self, provider: ReferenceDataProvider) -> None:
        self._provider = provider

    def search(self, query: Optional[str] = None, limit: Optional[int] = None) -> List[Airport]:
        """
        Find airports matching *query*.

        Args:
            query: Text to look for. Empty or None lists the first
                DEFAULT_LISTING_LIMIT airports.
            limit: Maximum number of matches (None = all).

        Returns:
            Matching airports in table order.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        airports = self._provider.list_airports()

        needle = (query or "").strip().lower()
        if not needle:
            cap = DEFAULT_LISTING_LIMIT if limit is None else limit
            return list(airports[:cap])

        matches = [a for a in airports if self._matches(a, needle)]
        logger.debug("Airport search %r matched %d airports", query, len(matches))

        if limit is not None:
            matches = matches[:limit]
        return matches

    @staticmethod
    def _matches(airport: Airport, needle: str) -> bool:
        return (
            needle in airport.icao.lower()
            or needle in airport.name.lower()
            or (airport.city is not None and needle in airport.city.lower())
        )
