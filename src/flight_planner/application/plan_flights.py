"""
PlanFlights Use Case - Public API for the flight planner.

This module provides the main entry point for the planning engine.
It acts as a Facade/Factory, handling dependency initialization and
providing a small interface for consumers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from flight_planner.adapters.algorithms.dfs_adapter import ExhaustiveDfsPathFinder
from flight_planner.adapters.data_providers.in_memory_provider import (
    InMemoryFlightDataProvider,
)
from flight_planner.adapters.data_providers.text_file_provider import (
    TextFileFlightDataProvider,
    TextFileQueryProvider,
)
from flight_planner.adapters.repositories.network_repo import FlightNetworkRepository
from flight_planner.config import PlannerConfig
from flight_planner.ports.flight_data_provider import FlightDataProvider
from flight_planner.ports.path_finder import PathFinder
from flight_planner.ports.query_provider import QueryProvider
from flight_planner.reporting.dataframe_export import write_csv
from flight_planner.reporting.report_writer import write_report
from flight_planner.schemas.path import QueryResult
from flight_planner.schemas.query import FlightQuery
from flight_planner.services.planner_service import FlightPlannerService

logger = logging.getLogger(__name__)


class PlanFlights:
    """
    Public API for planning flight routes.

    Example usage:
        >>> planner = PlanFlights.from_edges([
        ...     ("A", "B", 100, 2),
        ...     ("B", "C", 50, 3),
        ...     ("A", "C", 200, 1),
        ... ])
        >>> result = planner.plan_one("A", "C", "T")
        >>> [path.route_label for path in result.paths]
        ['A -> C', 'A -> B -> C']

    Attributes:
        _service: Underlying FlightPlannerService.
        _network_repo: Network repository (shared across queries).
    """

    def __init__(
        self,
        flights_path: Optional[Union[str, Path]] = None,
        data_provider: Optional[FlightDataProvider] = None,
        path_finder: Optional[PathFinder] = None,
        config: Optional[PlannerConfig] = None,
    ) -> None:
        """
        Initialize the planner with optional custom dependencies.

        Args:
            flights_path: Edge list file. Defaults to config.flights_file.
            data_provider: Custom leg source. Overrides flights_path.
            path_finder: Custom algorithm. If None, uses ExhaustiveDfsPathFinder
                with the caps from config.
            config: Settings. Defaults to PlannerConfig() (no env lookup).
        """
        self._config = config or PlannerConfig()

        if data_provider is not None:
            self._data_provider = data_provider
        else:
            path = flights_path or self._config.flights_file
            self._data_provider = TextFileFlightDataProvider(path)

        self._network_repo = FlightNetworkRepository(self._data_provider)

        if path_finder is not None:
            self._path_finder = path_finder
        else:
            self._path_finder = ExhaustiveDfsPathFinder(
                max_paths=self._config.max_paths,
                max_depth=self._config.max_depth,
            )

        self._service = FlightPlannerService(
            network_repo=self._network_repo,
            path_finder=self._path_finder,
            top_n=self._config.top_n,
        )

        logger.debug(
            "PlanFlights initialized with %s algorithm and %s",
            self._path_finder.name,
            self._data_provider.name,
        )

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[str, str, float, int]],
        config: Optional[PlannerConfig] = None,
    ) -> PlanFlights:
        """Create a planner over an in-memory edge list."""
        return cls(data_provider=InMemoryFlightDataProvider(edges), config=config)

    def plan(self, queries: Sequence[FlightQuery]) -> List[QueryResult]:
        """
        Answer queries in order.

        Returns:
            One QueryResult per query, numbered from 1.

        Raises:
            NetworkNotInitializedError: If the leg source fails.
        """
        return self._service.plan_all(queries, max_workers=self._config.workers)

    def plan_one(self, origin: str, destination: str, criterion: str = "C") -> QueryResult:
        """Answer a single query given a raw criterion code (T or C)."""
        return self._service.plan(FlightQuery.create(origin, destination, criterion))

    def plan_requests(
        self, requests: Union[str, Path, QueryProvider]
    ) -> List[QueryResult]:
        """Read a request file (or provider) and answer every request."""
        provider = (
            requests
            if isinstance(requests, QueryProvider)
            else TextFileQueryProvider(requests)
        )
        queries = provider.get_queries()
        logger.info("Loaded %d requests from %s", len(queries), provider.name)
        return self.plan(queries)

    def run(
        self,
        requests_path: Union[str, Path],
        output_path: Union[str, Path],
        csv_path: Optional[Union[str, Path]] = None,
    ) -> List[QueryResult]:
        """
        Plan every request in a file and write the report.

        Nothing is written unless every input was read successfully.

        Returns:
            The planned results, in request order.
        """
        # Legs are loaded before requests, so a bad edge list is reported first
        self._network_repo.get_network()
        results = self.plan_requests(requests_path)
        write_report(results, output_path)
        if csv_path is not None:
            write_csv(results, csv_path)
        return results

    def get_available_cities(self) -> frozenset[str]:
        """All cities known to the network."""
        return self._network_repo.get_network().cities

    @property
    def is_ready(self) -> bool:
        """Check if the network has been built."""
        return self._service.is_ready

    @property
    def algorithm_name(self) -> str:
        """Get the name of the path enumeration algorithm."""
        return self._service.algorithm_name
