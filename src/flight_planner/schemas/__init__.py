"""
Schema definitions for the flight planner.

Frozen dataclasses for in-memory records and Pandera DataFrame models
as the contracts for tabular input and output.
"""

from .leg import LEG_COLUMNS, Leg, LegDataFrame, LegSchema
from .path import (
    PATH_RESULT_COLUMNS,
    PathResult,
    PathResultDataFrame,
    PathResultSchema,
    QueryResult,
)
from .query import QUERY_COLUMNS, Criterion, FlightQuery, QueryDataFrame, QuerySchema

__all__ = [
    # Leg schemas
    "Leg",
    "LegSchema",
    "LegDataFrame",
    "LEG_COLUMNS",
    # Query schemas
    "Criterion",
    "FlightQuery",
    "QuerySchema",
    "QueryDataFrame",
    "QUERY_COLUMNS",
    # Path schemas
    "PathResult",
    "QueryResult",
    "PathResultSchema",
    "PathResultDataFrame",
    "PATH_RESULT_COLUMNS",
]
