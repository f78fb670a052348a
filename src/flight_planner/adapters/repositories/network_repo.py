"""
Flight Network Repository - write-once graph infrastructure.

Implements the weighted undirected multigraph the path finder walks:
- Adjacency lists keyed by city, insertion-ordered
- Symmetric leg insertion through a single call site
- Freeze-after-build so queries share one read-only instance
- Lazy, lock-guarded construction from a data provider
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from flight_planner.exceptions import NetworkFrozenError, NetworkNotInitializedError
from flight_planner.schemas.leg import Leg

if TYPE_CHECKING:
    from flight_planner.ports.flight_data_provider import FlightDataProvider

logger = logging.getLogger(__name__)

EdgeTuple = Tuple[str, str, float, int]

_NO_LEGS: Tuple[Leg, ...] = ()


# =============================================================================
# FLIGHT NETWORK: adjacency lists with symmetric insertion
# =============================================================================


class FlightNetwork:
    """
    Weighted undirected multigraph of flight legs.

    Each undirected connection is stored as two directed Legs with the
    same cost and time. Every endpoint of every leg has an entry, so a
    city with no legs is still known to the network.

    Multi-edges are kept: two declarations between the same pair produce
    two legs in each direction.

    Example:
        >>> network = FlightNetwork.build([("A", "B", 100.0, 2)])
        >>> [leg.to for leg in network.legs_from("B")]
        ['A']
        >>> "C" in network
        False
    """

    def __init__(self) -> None:
        self._adjacency: Dict[str, List[Leg]] = {}
        self._frozen: Dict[str, Tuple[Leg, ...]] = {}
        self._is_frozen = False

    @classmethod
    def build(cls, edges: Iterable[EdgeTuple]) -> FlightNetwork:
        """
        Build a read-only network from an undirected edge list.

        Args:
            edges: Iterable of (city_a, city_b, cost, time).

        Returns:
            Frozen FlightNetwork.
        """
        network = cls()
        for city_a, city_b, cost, time in edges:
            network.add_undirected_leg(city_a, city_b, cost, time)
        network.freeze()
        return network

    @classmethod
    def from_legs_df(cls, legs_df: pd.DataFrame) -> FlightNetwork:
        """
        Build a read-only network from a LegSchema-validated DataFrame.

        Rows are inserted in DataFrame order, which fixes the leg order
        (and therefore the enumeration order) at each city.
        """
        edges = (
            (str(row.city_a), str(row.city_b), float(row.cost), int(row.time))
            for row in legs_df.itertuples(index=False)
        )
        return cls.build(edges)

    def add_undirected_leg(
        self, city_a: str, city_b: str, cost: float, time: int
    ) -> None:
        """
        Insert A->B and B->A legs with identical weights.

        Raises:
            NetworkFrozenError: If the network has already been built.
        """
        if self._is_frozen:
            raise NetworkFrozenError()
        self._adjacency.setdefault(city_a, []).append(Leg(city_b, cost, time))
        self._adjacency.setdefault(city_b, []).append(Leg(city_a, cost, time))

    def freeze(self) -> None:
        """Make the network read-only. Idempotent."""
        if self._is_frozen:
            return
        self._frozen = {city: tuple(legs) for city, legs in self._adjacency.items()}
        self._adjacency = {}
        self._is_frozen = True

    @property
    def is_frozen(self) -> bool:
        """True once the network is read-only."""
        return self._is_frozen

    def _table(self) -> Dict[str, Sequence[Leg]]:
        return self._frozen if self._is_frozen else self._adjacency

    def legs_from(self, city: str) -> Sequence[Leg]:
        """
        Outgoing legs of a city, in insertion order.

        Returns an empty sequence both for a known city without legs and
        for an unknown city; use contains() to tell them apart.
        """
        return self._table().get(city, _NO_LEGS)

    def contains(self, city: str) -> bool:
        """Check if the city appears as an endpoint of any leg."""
        return city in self._table()

    def __contains__(self, city: object) -> bool:
        return city in self._table()

    def __len__(self) -> int:
        return len(self._table())

    @property
    def cities(self) -> frozenset[str]:
        """All known cities."""
        return frozenset(self._table())

    @property
    def leg_count(self) -> int:
        """Number of directed legs (twice the number of declared connections)."""
        return sum(len(legs) for legs in self._table().values())


# =============================================================================
# FLIGHT NETWORK REPOSITORY: build once, share read-only
# =============================================================================


class FlightNetworkRepository:
    """
    Lazily builds the flight network once and serves it to every query.

    Usage:
        >>> provider = TextFileFlightDataProvider("flight_data.txt")
        >>> repo = FlightNetworkRepository(provider)
        >>> network = repo.get_network()  # Builds on first call only
    """

    def __init__(self, data_provider: FlightDataProvider) -> None:
        """
        Initialize repository with a data provider.

        Args:
            data_provider: Source of flight legs.
        """
        self._provider = data_provider
        self._network: Optional[FlightNetwork] = None
        self._lock = threading.Lock()

    def get_network(self) -> FlightNetwork:
        """
        Get the shared network, building it on first access.

        Returns:
            Frozen FlightNetwork.

        Raises:
            NetworkNotInitializedError: If the provider fails. The original
                error is chained as __cause__.
        """
        network = self._network
        if network is not None:
            return network

        with self._lock:
            # Double-check after acquiring lock
            if self._network is not None:
                return self._network
            try:
                self._network = self._build_network()
            except Exception as e:
                logger.error("Flight network build failed: %s", e)
                raise NetworkNotInitializedError(
                    f"Failed to build flight network from {self._provider.name}: {e}"
                ) from e
            return self._network

    def _build_network(self) -> FlightNetwork:
        legs_df = self._provider.get_legs_df()
        network = FlightNetwork.from_legs_df(legs_df)
        logger.info(
            "Flight network loaded from %s: %d connections, %d cities",
            self._provider.name,
            len(legs_df),
            len(network),
        )
        return network

    @property
    def is_initialized(self) -> bool:
        """Check if the network has been built."""
        return self._network is not None
