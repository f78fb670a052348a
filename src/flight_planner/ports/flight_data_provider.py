"""
Flight Data Provider port interface.

Defines the abstract contract for sources of flight legs.
Implementations handle the specifics of different backends (text files, memory).
"""

from abc import ABC, abstractmethod

from flight_planner.schemas.leg import LegDataFrame


class FlightDataProvider(ABC):
    """
    Abstract interface for flight leg providers.

    Providers return a validated DataFrame of undirected legs. Schema
    validation (LegSchema) happens here at the boundary, not per-leg.

    Implementations:
    - TextFileFlightDataProvider: pipe-delimited edge list file
    - InMemoryFlightDataProvider: edge tuples held in memory
    """

    @abstractmethod
    def get_legs_df(self) -> LegDataFrame:
        """
        Return all legs as a validated DataFrame.

        Returns:
            DataFrame validated against LegSchema, in declaration order.

        Raises:
            InputFileError: If the data source cannot be read.
            MalformedRecordError: If the data fails validation.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Human-readable name of this data provider.

        Returns:
            Provider identifier (e.g., "Text file (flight_data.txt)").
        """
        ...
