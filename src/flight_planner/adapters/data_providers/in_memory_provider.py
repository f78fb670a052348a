"""
In-Memory Data Provider - edge tuples to a validated DataFrame.

Used when legs come from code rather than a file (tests, notebooks,
callers embedding the planner).
"""

from typing import Iterable, List, Tuple

import pandas as pd

from flight_planner.adapters.data_providers.text_file_provider import validate_records
from flight_planner.ports.flight_data_provider import FlightDataProvider
from flight_planner.schemas.leg import LEG_COLUMNS, LegDataFrame, LegSchema

IN_MEMORY_SOURCE = "<in-memory>"


class InMemoryFlightDataProvider(FlightDataProvider):
    """
    Data provider backed by a list of (city_a, city_b, cost, time) tuples.

    Validation runs on every call so the contract matches file-backed
    providers.
    """

    def __init__(self, edges: Iterable[Tuple[str, str, float, int]]) -> None:
        self._edges: List[Tuple[str, str, float, int]] = list(edges)

    @property
    def name(self) -> str:
        return f"In-memory ({len(self._edges)} legs)"

    def get_legs_df(self) -> LegDataFrame:
        df = pd.DataFrame(self._edges, columns=LEG_COLUMNS)
        return validate_records(df, LegSchema, IN_MEMORY_SOURCE)
