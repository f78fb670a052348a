"""
Flight Planner Service - Domain orchestrator for route queries.

Coordinates the interaction between:
- FlightNetworkRepository (shared read-only network)
- PathFinder (enumeration algorithm adapter)
- Ranking (stable sort and truncation)
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, List, Sequence

from flight_planner.config import DEFAULT_TOP_N
from flight_planner.schemas.path import QueryResult
from flight_planner.schemas.query import FlightQuery
from flight_planner.services.ranking_service import rank_paths

if TYPE_CHECKING:
    from flight_planner.adapters.repositories.network_repo import (
        FlightNetworkRepository,
    )
    from flight_planner.ports.path_finder import PathFinder

logger = logging.getLogger(__name__)


class FlightPlannerService:
    """
    Domain service answering route queries.

    For each query:
    1. Retrieves the shared network (built on first use)
    2. Enumerates every simple path with the path finder
    3. Ranks by the query's criterion and keeps the top N

    Queries share nothing but the read-only network, so plan_all() may run
    them on a thread pool; results are always returned in query order.

    Attributes:
        _network_repo: Repository providing the flight network.
        _path_finder: Algorithm adapter for path enumeration.
        _top_n: Number of paths kept per query.
    """

    def __init__(
        self,
        network_repo: FlightNetworkRepository,
        path_finder: PathFinder,
        top_n: int = DEFAULT_TOP_N,
    ) -> None:
        if top_n < 0:
            raise ValueError(f"top_n must be >= 0, got {top_n}")
        self._network_repo = network_repo
        self._path_finder = path_finder
        self._top_n = top_n

    def plan(self, query: FlightQuery, query_index: int = 1) -> QueryResult:
        """
        Answer a single query.

        Args:
            query: Origin, destination and criterion.
            query_index: 1-based position used in the report header.

        Returns:
            QueryResult with at most top_n ranked paths.

        Raises:
            NetworkNotInitializedError: If the network cannot be built.
        """
        start_time = time.perf_counter()
        network = self._network_repo.get_network()

        algo_start = time.perf_counter()
        paths = self._path_finder.find_all_paths(
            network, query.origin, query.destination
        )
        algo_time = time.perf_counter() - algo_start

        ranked = rank_paths(paths, query.criterion, self._top_n)
        total_time = time.perf_counter() - start_time

        logger.info(
            "Query %d %s -> %s (%s): %d paths, kept %d in %.3fms (search: %.3fms)",
            query_index,
            query.origin,
            query.destination,
            query.criterion.value,
            len(paths),
            len(ranked),
            total_time * 1000,
            algo_time * 1000,
        )

        return QueryResult(
            query_index=query_index,
            query=query,
            paths=tuple(ranked),
            paths_found=len(paths),
        )

    def plan_all(
        self,
        queries: Sequence[FlightQuery],
        max_workers: int = 1,
    ) -> List[QueryResult]:
        """
        Answer every query, preserving input order.

        Args:
            queries: Requests in report order.
            max_workers: Threads to fan queries out over (1 = sequential).

        Returns:
            One QueryResult per query, numbered from 1.
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {max_workers}")

        # Build the network before fanning out so a failure surfaces once
        self._network_repo.get_network()

        indices = range(1, len(queries) + 1)
        if max_workers == 1 or len(queries) <= 1:
            return [self.plan(query, index) for query, index in zip(queries, indices)]

        with ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="planner"
        ) as executor:
            return list(executor.map(self.plan, queries, indices))

    @property
    def algorithm_name(self) -> str:
        """Get name of the underlying algorithm."""
        return self._path_finder.name

    @property
    def is_ready(self) -> bool:
        """Check if the network has been built."""
        return self._network_repo.is_initialized
