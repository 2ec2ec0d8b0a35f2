"""
Input validation for route generation and weather lookups.

Checks run before any reference data is touched, so malformed input fails
fast with a clear error.
"""

from typing import Tuple

from .exceptions import InvalidIdentifierError

ICAO_LENGTH = 4


def normalize_icao(identifier: object, side: str = "airport") -> str:
    """
    Validate an ICAO identifier and return it in upper case.

    Args:
        identifier: Caller-supplied code, any case.
        side: Which input this is ("origin", "destination", "station").

    Returns:
        Upper-case identifier.

    Raises:
        InvalidIdentifierError: If identifier is not a 4-character string.

    Examples:
        >>> normalize_icao("sbgr", "origin")
        'SBGR'
    """
    if not isinstance(identifier, str) or len(identifier) != ICAO_LENGTH:
        raise InvalidIdentifierError(identifier, side)
    return identifier.upper()


def validate_route_endpoints(origin: object, destination: object) -> Tuple[str, str]:
    """
    Validate both route endpoints.

    The origin is checked first, so it is the one reported when both are
    malformed.

    Raises:
        InvalidIdentifierError: If either identifier is malformed.
    """
    return (
        normalize_icao(origin, "origin"),
        normalize_icao(destination, "destination"),
    )
