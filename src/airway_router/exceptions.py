"""
Custom exceptions for the airway_router package.

Provides a hierarchy of exceptions so callers can tell malformed input,
unknown references and collaborator failures apart.
"""


class RouteEngineError(Exception):
    """Base exception for all route engine errors."""

    pass


class InvalidIdentifierError(RouteEngineError):
    """Raised when an airport identifier is not a 4-character ICAO code."""

    def __init__(self, identifier: object, side: str = "airport") -> None:
        self.identifier = identifier
        self.side = side
        message = (
            f"Invalid {side} identifier {identifier!r}: "
            "ICAO codes must have exactly 4 characters"
        )
        super().__init__(message)


class AirportNotFoundError(RouteEngineError):
    """Raised when a well-formed ICAO code is absent from the reference data."""

    def __init__(self, icao: str, side: str) -> None:
        self.icao = icao
        self.side = side
        message = f"{side.capitalize()} airport '{icao}' not found"
        super().__init__(message)


class ReferenceDataUnavailableError(RouteEngineError):
    """Raised when a reference data lookup fails. May be transient."""

    def __init__(self, lookup: str, reason: str = "") -> None:
        self.lookup = lookup
        self.reason = reason
        message = f"Reference data lookup '{lookup}' failed"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InternalComputationError(RouteEngineError):
    """Raised when route assembly breaks one of its own invariants."""

    pass
