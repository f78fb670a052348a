"""
Text File Providers - pipe-delimited files to validated DataFrames.

Both input files share one layout: a first line holding the record
count, followed by that many records whose fields are separated by
'|'. Whitespace around fields is trimmed. Lines after the last counted
record are ignored.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Type, Union

import pandas as pd
import pandera as pa
from pandera.errors import SchemaError, SchemaErrors

from flight_planner.exceptions import InputFileError, MalformedRecordError
from flight_planner.ports.flight_data_provider import FlightDataProvider
from flight_planner.ports.query_provider import QueryProvider
from flight_planner.schemas.leg import LEG_COLUMNS, LegDataFrame, LegSchema
from flight_planner.schemas.query import QUERY_COLUMNS, FlightQuery, QuerySchema

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"

# Record lines start after the count line; both are 1-based for messages
_FIRST_RECORD_LINE = 2


def read_counted_records(
    path: Union[str, Path],
    columns: Sequence[str],
) -> pd.DataFrame:
    """
    Read a count-prefixed, pipe-delimited file into a string DataFrame.

    Args:
        path: File to read.
        columns: Names of the leading fields of each record. Extra
            trailing fields are ignored.

    Returns:
        DataFrame with one row per record and trimmed string cells.

    Raises:
        InputFileError: If the file is missing or unreadable.
        MalformedRecordError: If the count is invalid, records are missing,
            or a record has too few fields.
    """
    path = Path(path)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise InputFileError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise InputFileError(path, "file is not valid UTF-8 text") from e

    if not lines:
        raise MalformedRecordError(path, "missing record count", line_number=1)

    try:
        count = int(lines[0].strip())
    except ValueError:
        raise MalformedRecordError(
            path,
            f"record count must be an integer, got {lines[0].strip()!r}",
            line_number=1,
        ) from None
    if count < 0:
        raise MalformedRecordError(
            path, f"record count must be >= 0, got {count}", line_number=1
        )

    records = lines[1 : count + 1]
    if len(records) < count:
        raise MalformedRecordError(
            path, f"expected {count} records, found {len(records)}"
        )

    n_fields = len(columns)
    rows: List[List[str]] = []
    for line_number, line in enumerate(records, start=_FIRST_RECORD_LINE):
        fields = [field.strip() for field in line.split(FIELD_SEPARATOR)]
        if len(fields) < n_fields:
            raise MalformedRecordError(
                path,
                f"expected {n_fields} '{FIELD_SEPARATOR}'-separated fields, "
                f"got {len(fields)}",
                line_number=line_number,
            )
        rows.append(fields[:n_fields])

    return pd.DataFrame(rows, columns=list(columns), dtype=str)


def _failure_line(error: Union[SchemaError, SchemaErrors]) -> Optional[int]:
    """Map the earliest failing row of a schema failure back to its file line."""
    cases = getattr(error, "failure_cases", None)
    if not isinstance(cases, pd.DataFrame) or cases.empty or "index" not in cases:
        return None
    rows = [int(index) for index in cases["index"] if pd.api.types.is_integer(index)]
    if not rows:
        return None
    return min(rows) + _FIRST_RECORD_LINE


def _failure_summary(error: Union[SchemaError, SchemaErrors]) -> str:
    """One-line description of the first failing check."""
    cases = getattr(error, "failure_cases", None)
    if isinstance(cases, pd.DataFrame) and not cases.empty and "column" in cases:
        first = cases.iloc[0]
        check = first.get("check", "validation")
        return f"column '{first['column']}' failed {check}: {first.get('failure_case')!r}"
    text = str(error).strip()
    return text.splitlines()[0] if text else type(error).__name__


def validate_records(
    df: pd.DataFrame,
    schema: Type[pa.DataFrameModel],
    path: Union[str, Path],
) -> pd.DataFrame:
    """
    Validate and coerce records, translating schema failures.

    Depending on the pandera release, coercion failures surface as either
    SchemaError or SchemaErrors; both are reported the same way.

    Raises:
        MalformedRecordError: If any cell fails coercion or a check.
    """
    try:
        return schema.validate(df)
    except (SchemaError, SchemaErrors) as e:
        raise MalformedRecordError(
            path, _failure_summary(e), line_number=_failure_line(e)
        ) from e


class TextFileFlightDataProvider(FlightDataProvider):
    """
    Data provider for the pipe-delimited edge list.

    Record layout: `city1 | city2 | cost | time`.

    Attributes:
        path: Path to the edge list file.
    """

    def __init__(self, path: Union[str, Path] = "flight_data.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return f"Text file ({self._path})"

    def get_legs_df(self) -> LegDataFrame:
        """Read and validate every declared leg, in file order."""
        raw = read_counted_records(self._path, LEG_COLUMNS)
        legs_df = validate_records(raw, LegSchema, self._path)
        logger.debug("Read %d legs from %s", len(legs_df), self._path)
        return legs_df


class TextFileQueryProvider(QueryProvider):
    """
    Query provider for the pipe-delimited request file.

    Record layout: `origin | destination | criterion`.
    """

    def __init__(self, path: Union[str, Path] = "requests.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return f"Text file ({self._path})"

    def get_queries(self) -> List[FlightQuery]:
        """Read and validate every request, in file order."""
        raw = read_counted_records(self._path, QUERY_COLUMNS)
        queries_df = validate_records(raw, QuerySchema, self._path)
        queries = [
            FlightQuery.create(row.origin, row.destination, row.criterion)
            for row in queries_df.itertuples(index=False)
        ]
        logger.debug("Read %d queries from %s", len(queries), self._path)
        return queries
