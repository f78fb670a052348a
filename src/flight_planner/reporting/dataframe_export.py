"""
Tabular export of ranked results.

Flattens QueryResults into a PathResultSchema DataFrame, one row per
reported path, and optionally writes it as CSV.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

import pandas as pd

from flight_planner.exceptions import OutputFileError
from flight_planner.schemas.path import (
    PATH_RESULT_COLUMNS,
    PathResultDataFrame,
    PathResultSchema,
    QueryResult,
)

logger = logging.getLogger(__name__)


def results_to_dataframe(results: Iterable[QueryResult]) -> PathResultDataFrame:
    """
    Flatten ranked results into a validated DataFrame.

    Queries without a path contribute no rows.
    """
    rows = [
        {
            "query_index": result.query_index,
            "origin": result.query.origin,
            "destination": result.query.destination,
            "criterion": result.query.criterion.value,
            "rank": rank,
            "route": path.route_label,
            "total_time": path.total_time,
            "total_cost": path.total_cost,
        }
        for result in results
        for rank, path in enumerate(result.paths, start=1)
    ]
    df = pd.DataFrame(rows, columns=PATH_RESULT_COLUMNS)
    return PathResultSchema.validate(df)


def write_csv(results: Iterable[QueryResult], path: Union[str, Path]) -> Path:
    """
    Write ranked results as CSV.

    Raises:
        OutputFileError: If the file cannot be written.
    """
    path = Path(path)
    df = results_to_dataframe(results)
    try:
        df.to_csv(path, index=False, float_format="%.2f")
    except OSError as e:
        raise OutputFileError(path, e.strerror or str(e)) from e
    logger.info("CSV export written to %s (%d rows)", path, len(df))
    return path
