"""
Latency hook implementations.
"""

import logging
import time
from typing import Callable

logger = logging.getLogger(__name__)


class NoLatency:
    """Default hook: returns immediately."""

    def __call__(self, operation: str) -> None:
        return None


class SimulatedLatency:
    """
    Sleep a fixed delay before each operation.

    Reproduces the artificial network delay of a demo deployment without
    hardcoding it into the engine.

    Attributes:
        delay_ms: Delay per call in milliseconds.
        _sleep: Sleep function, injectable for tests.
    """

    def __init__(
        self,
        delay_ms: int,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        self.delay_ms = delay_ms
        self._sleep = sleep

    def __call__(self, operation: str) -> None:
        logger.debug("Simulating %dms latency for %s", self.delay_ms, operation)
        self._sleep(self.delay_ms / 1000.0)
