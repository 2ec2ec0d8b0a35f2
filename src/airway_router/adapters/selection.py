"""
Index selection strategies for airway and navaid choice.
"""

import random
from typing import Optional


class RandomIndexSelector:
    """
    Uniform random choice.

    Args:
        rng: Random source. If None, a private unseeded Random is used.
            Pass ``random.Random(seed)`` for reproducible sequences.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def choose(self, n: int) -> int:
        if n < 1:
            raise ValueError(f"Cannot choose from an empty collection (n={n})")
        return self._rng.randrange(n)


class FixedIndexSelector:
    """
    Always picks the same position, wrapping around short collections.

    ``FixedIndexSelector(0)`` makes route generation fully deterministic.
    """

    def __init__(self, index: int = 0) -> None:
        if index < 0:
            raise ValueError(f"index must be >= 0, got {index}")
        self._index = index

    def choose(self, n: int) -> int:
        if n < 1:
            raise ValueError(f"Cannot choose from an empty collection (n={n})")
        return self._index % n
