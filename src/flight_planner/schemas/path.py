"""
Path result schemas.

Defines the output contract of the path enumerator and the ranked,
per-query results consumed by the report writer.
"""

from dataclasses import dataclass
from typing import Tuple

import pandera as pa
from pandera.typing import DataFrame, Series

from flight_planner.schemas.query import FlightQuery

ROUTE_SEPARATOR = " -> "


@dataclass(frozen=True)
class PathResult:
    """
    Immutable simple path between two cities.

    Produced only by the path enumerator. Totals are the sums of the
    cost/time of each leg along the path.
    """

    cities: Tuple[str, ...]
    total_cost: float
    total_time: int

    @property
    def origin(self) -> str:
        """First city of the path."""
        return self.cities[0]

    @property
    def destination(self) -> str:
        """Last city of the path."""
        return self.cities[-1]

    @property
    def num_legs(self) -> int:
        """Number of flight legs."""
        return len(self.cities) - 1

    @property
    def route_label(self) -> str:
        """Arrow-joined city sequence, e.g. 'A -> B -> C'."""
        return ROUTE_SEPARATOR.join(self.cities)


@dataclass(frozen=True)
class QueryResult:
    """
    Ranked outcome of a single query.

    Attributes:
        query_index: 1-based position of the query in the request list.
        query: The request that was planned.
        paths: Best paths in ranked order, already truncated.
        paths_found: Number of paths enumerated before truncation.
    """

    query_index: int
    query: FlightQuery
    paths: Tuple[PathResult, ...]
    paths_found: int

    @property
    def has_plan(self) -> bool:
        """True if at least one path was found, even if none is reported."""
        return self.paths_found > 0


class PathResultSchema(pa.DataFrameModel):
    """
    Schema for ranked path results.

    Each row is one reported path of one query.
    """

    query_index: Series[int] = pa.Field(ge=1, description="1-based query index")
    origin: Series[str] = pa.Field(nullable=False, description="Query origin city")
    destination: Series[str] = pa.Field(
        nullable=False, description="Query destination city"
    )
    criterion: Series[str] = pa.Field(
        isin=["Time", "Cost"], description="Ranking criterion"
    )
    rank: Series[int] = pa.Field(ge=1, description="1-based rank within the query")
    route: Series[str] = pa.Field(nullable=False, description="Arrow-joined cities")
    total_time: Series[int] = pa.Field(ge=0, description="Sum of leg times")
    total_cost: Series[float] = pa.Field(ge=0, description="Sum of leg costs")

    class Config:
        strict = True
        coerce = True
        name = "PathResultSchema"
        ordered = True


PathResultDataFrame = DataFrame[PathResultSchema]

PATH_RESULT_COLUMNS = [
    "query_index",
    "origin",
    "destination",
    "criterion",
    "rank",
    "route",
    "total_time",
    "total_cost",
]
