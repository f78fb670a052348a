"""
Query Provider port interface.

Defines the abstract contract for sources of route requests.
"""

from abc import ABC, abstractmethod
from typing import List

from flight_planner.schemas.query import FlightQuery


class QueryProvider(ABC):
    """
    Abstract interface for route request sources.

    Implementations:
    - TextFileQueryProvider: pipe-delimited request file
    """

    @abstractmethod
    def get_queries(self) -> List[FlightQuery]:
        """
        Return all requests in their original order.

        Raises:
            InputFileError: If the source cannot be read.
            MalformedRecordError: If a record is invalid.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this query provider."""
        ...
