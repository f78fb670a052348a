"""
Ranking and selection of enumerated paths.

Paths are ordered with Python's stable sort, so paths with equal totals
keep their enumeration order.
"""

from operator import attrgetter
from typing import Iterable, List

from flight_planner.config import DEFAULT_TOP_N
from flight_planner.schemas.path import PathResult
from flight_planner.schemas.query import Criterion

_SORT_KEYS = {
    Criterion.TIME: attrgetter("total_time"),
    Criterion.COST: attrgetter("total_cost"),
}


def sort_paths(paths: Iterable[PathResult], criterion: Criterion) -> List[PathResult]:
    """Stable ascending sort by the criterion's total."""
    return sorted(paths, key=_SORT_KEYS[criterion])


def rank_paths(
    paths: Iterable[PathResult],
    criterion: Criterion,
    limit: int = DEFAULT_TOP_N,
) -> List[PathResult]:
    """
    Sort paths by criterion and keep the best `limit`.

    Args:
        paths: Full enumeration result for one query.
        criterion: TIME sorts by total_time, COST by total_cost.
        limit: Maximum number of paths to keep.

    Returns:
        The first min(limit, len(paths)) paths in ranked order.

    Raises:
        ValueError: If limit is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    return sort_paths(paths, criterion)[:limit]
