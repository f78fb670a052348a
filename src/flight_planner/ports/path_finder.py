"""
Path Finder port interface.

Defines the abstract contract for path enumeration algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from flight_planner.adapters.repositories.network_repo import FlightNetwork
    from flight_planner.schemas.path import PathResult


class PathFinder(ABC):
    """
    Abstract interface for path enumeration algorithms.

    Implementations must return every simple path between the two cities.
    Ranking and truncation are applied afterwards by the caller.

    Implementations:
    - ExhaustiveDfsPathFinder: explicit-stack depth-first search
    """

    @abstractmethod
    def find_all_paths(
        self,
        network: FlightNetwork,
        origin: str,
        destination: str,
    ) -> List[PathResult]:
        """
        Enumerate simple paths from origin to destination.

        Args:
            network: Read-only flight network.
            origin: City the paths start from.
            destination: City the paths end at.

        Returns:
            Every simple path found, in enumeration order. Empty if either
            city is unknown or no path exists.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Algorithm identifier.

        Returns:
            Human-readable algorithm name.
        """
        ...
