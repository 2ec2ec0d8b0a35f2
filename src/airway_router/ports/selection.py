"""
Selection strategy port.

Route generation picks an airway and a navaid "one of N". The choice is
delegated to an injected strategy so tests can pin it.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IndexSelector(Protocol):
    """
    Protocol for choosing one item out of a collection.

    Implementations:
    - RandomIndexSelector: uniform random choice (default)
    - FixedIndexSelector: always the same position
    """

    def choose(self, n: int) -> int:
        """
        Pick an index in ``[0, n)``.

        Args:
            n: Size of the collection, always >= 1.

        Returns:
            Zero-based index of the chosen item.
        """
        ...
