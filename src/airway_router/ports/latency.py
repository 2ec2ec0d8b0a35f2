"""
Latency hook port.

Stands in for the delay of a remote navigation or weather data source.
The default is a no-op so route generation stays synchronous in tests.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LatencyHook(Protocol):
    """Called once before an operation reaches its data source."""

    def __call__(self, operation: str) -> None:
        """
        Apply latency (or backoff) for *operation*.

        Args:
            operation: Name of the operation about to run, for logging.
        """
        ...
