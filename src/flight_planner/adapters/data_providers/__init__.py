"""
Data provider adapters.
"""

from flight_planner.adapters.data_providers.in_memory_provider import (
    InMemoryFlightDataProvider,
)
from flight_planner.adapters.data_providers.text_file_provider import (
    TextFileFlightDataProvider,
    TextFileQueryProvider,
    read_counted_records,
)

__all__ = [
    "InMemoryFlightDataProvider",
    "TextFileFlightDataProvider",
    "TextFileQueryProvider",
    "read_counted_records",
]
