"""
Exhaustive depth-first path enumeration.

Walks the flight network with an explicit stack of frames instead of
recursion, so path length is bounded by the number of cities rather
than by the interpreter's call-stack depth.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Set, Tuple

from flight_planner.adapters.repositories.network_repo import FlightNetwork
from flight_planner.ports.path_finder import PathFinder
from flight_planner.schemas.path import PathResult

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PathFrame:
    """
    In-progress visit of one city on the current path.

    Attributes:
        city: City this frame expands.
        next_leg: Index of the next outgoing leg to try.
        path: Cities from the origin up to and including `city`.
        cost: Running cost along `path`.
        time: Running time along `path`.
    """

    city: str
    next_leg: int
    path: Tuple[str, ...]
    cost: float
    time: int


class ExhaustiveDfsPathFinder(PathFinder):
    """
    Enumerates every simple path between two cities.

    A single visited set holds the cities currently on the path: a city is
    added when its frame is pushed and removed when the frame is popped.
    The destination is terminal: reaching it records a path but it is never
    expanded further. The origin stays visited for the whole search and no
    leg may re-enter it, so a query from a city to itself yields no paths.

    Optional caps (both off by default):
        max_paths: Stop once this many paths have been recorded.
        max_depth: Maximum number of legs in a recorded path.
    """

    def __init__(
        self,
        max_paths: Optional[int] = None,
        max_depth: Optional[int] = None,
    ) -> None:
        if max_paths is not None and max_paths < 1:
            raise ValueError(f"max_paths must be >= 1, got {max_paths}")
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        self._max_paths = max_paths
        self._max_depth = max_depth

    @property
    def name(self) -> str:
        """Algorithm identifier."""
        return "Exhaustive DFS"

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
            origin: Start city.
            destination: End city.

        Returns:
            Paths in DFS order (leg-list order at each city). Empty if
            either city is unknown to the network.
        """
        results: List[PathResult] = []
        if not network.contains(origin) or not network.contains(destination):
            logger.debug("Unknown city in query %s -> %s", origin, destination)
            return results

        visited: Set[str] = {origin}
        stack: List[PathFrame] = [PathFrame(origin, 0, (origin,), 0.0, 0)]

        while stack:
            frame = stack[-1]
            legs = network.legs_from(frame.city)

            if frame.next_leg >= len(legs):
                # Backtrack
                visited.discard(frame.city)
                stack.pop()
                continue

            leg = legs[frame.next_leg]
            frame.next_leg += 1
            next_city = leg.to
            if next_city in visited:
                continue

            num_legs = len(frame.path)
            new_path = frame.path + (next_city,)
            new_cost = frame.cost + leg.cost
            new_time = frame.time + leg.time

            if next_city == destination:
                if self._max_depth is None or num_legs <= self._max_depth:
                    results.append(PathResult(new_path, new_cost, new_time))
                    if self._max_paths is not None and len(results) >= self._max_paths:
                        logger.warning(
                            "Path cap of %d reached for %s -> %s, enumeration stopped",
                            self._max_paths,
                            origin,
                            destination,
                        )
                        break
            elif self._max_depth is None or num_legs < self._max_depth:
                visited.add(next_city)
                stack.append(PathFrame(next_city, 0, new_path, new_cost, new_time))

        logger.debug(
            "%s found %d paths for %s -> %s",
            self.name,
            len(results),
            origin,
            destination,
        )
        return results
