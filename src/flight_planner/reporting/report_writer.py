"""
Text report formatting.

Renders one block per query, in query order:

    Flight 1: A, C (Time)
    Path 1: A -> C. Time: 1 Cost: 200.00
    Path 2: A -> B -> C. Time: 5 Cost: 150.00

Queries without any path get a single "No available flight plan" line.
Every block is followed by a blank line.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from flight_planner.exceptions import OutputFileError
from flight_planner.schemas.path import PathResult, QueryResult

logger = logging.getLogger(__name__)


def format_header(result: QueryResult) -> str:
    query = result.query
    return (
        f"Flight {result.query_index}: {query.origin}, {query.destination} "
        f"({query.criterion.value})"
    )


def format_path(rank: int, path: PathResult) -> str:
    return f"Path {rank}: {path.route_label}. Time: {path.total_time} Cost: {path.total_cost:.2f}"


def format_no_plan(result: QueryResult) -> str:
    query = result.query
    return f"No available flight plan from {query.origin} to {query.destination}."


def format_result(result: QueryResult) -> List[str]:
    """Lines of one query block, including the trailing blank line."""
    lines = [format_header(result)]
    if not result.has_plan:
        lines.append(format_no_plan(result))
    else:
        lines.extend(
            format_path(rank, path) for rank, path in enumerate(result.paths, start=1)
        )
    lines.append("")
    return lines


def format_report(results: Iterable[QueryResult]) -> str:
    """Full report text, newline-terminated."""
    lines: List[str] = []
    for result in results:
        lines.extend(format_result(result))
    return "".join(line + "\n" for line in lines)


def write_report(results: Iterable[QueryResult], path: Union[str, Path]) -> Path:
    """
    Write the report to a file.

    Raises:
        OutputFileError: If the output file cannot be written.
    """
    path = Path(path)
    text = format_report(results)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputFileError(path, e.strerror or str(e)) from e
    logger.info("Report written to %s", path)
    return path
