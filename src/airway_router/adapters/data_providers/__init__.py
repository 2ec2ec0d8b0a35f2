"""
Data provider adapters for navigation reference data.
"""

from src.airway_router.adapters.data_providers.sqlite_provider import (
    SqliteReferenceDataProvider,
)
from src.airway_router.adapters.data_providers.table_provider import (
    TableReferenceDataProvider,
)

__all__ = [
    "SqliteReferenceDataProvider",
    "TableReferenceDataProvider",
]
