"""
Tests for the flight network and its repository.

Tests cover:
- Symmetric leg insertion and endpoint registration
- Multi-edge preservation and leg ordering
- Read-only behaviour after build
- Construction from a validated DataFrame
- FlightNetworkRepository build-once semantics and error wrapping
"""

from typing import List

import pandas as pd
import pytest

from flight_planner.adapters.data_providers.in_memory_provider import (
    InMemoryFlightDataProvider,
)
from flight_planner.adapters.repositories.network_repo import (
    FlightNetwork,
    FlightNetworkRepository,
)
from flight_planner.exceptions import (
    InputFileError,
    NetworkFrozenError,
    NetworkNotInitializedError,
)
from flight_planner.ports.flight_data_provider import FlightDataProvider
from flight_planner.schemas.leg import Leg, LegDataFrame


class CountingProvider(FlightDataProvider):
    """Provider that counts how often it is read."""

    def __init__(self, edges: List[tuple]) -> None:
        self._inner = InMemoryFlightDataProvider(edges)
        self.call_count = 0

    def get_legs_df(self) -> LegDataFrame:
        self.call_count += 1
        return self._inner.get_legs_df()

    @property
    def name(self) -> str:
        return "Counting Provider"


class FailingProvider(FlightDataProvider):
    """Provider whose source is always unreadable."""

    def get_legs_df(self) -> LegDataFrame:
        raise InputFileError("missing.txt", "No such file or directory")

    @property
    def name(self) -> str:
        return "Failing Provider"


# =============================================================================
# FLIGHT NETWORK TESTS
# =============================================================================


class TestFlightNetworkBuild:
    """Tests for FlightNetwork.build and symmetric insertion."""

    def test_each_edge_inserted_both_ways(self, triangle_network: FlightNetwork):
        assert Leg("B", 100.0, 2) in triangle_network.legs_from("A")
        assert Leg("A", 100.0, 2) in triangle_network.legs_from("B")
        assert Leg("C", 50.0, 3) in triangle_network.legs_from("B")
        assert Leg("B", 50.0, 3) in triangle_network.legs_from("C")

    def test_leg_order_follows_declaration_order(self, triangle_network: FlightNetwork):
        assert [leg.to for leg in triangle_network.legs_from("A")] == ["B", "C"]
        assert [leg.to for leg in triangle_network.legs_from("B")] == ["A", "C"]
        assert [leg.to for leg in triangle_network.legs_from("C")] == ["B", "A"]

    def test_every_endpoint_is_known(self, triangle_network: FlightNetwork):
        assert triangle_network.cities == frozenset({"A", "B", "C"})
        assert len(triangle_network) == 3

    def test_leg_count_is_twice_the_connections(self, triangle_network: FlightNetwork):
        assert triangle_network.leg_count == 6

    def test_multi_edges_are_kept(self):
        network = FlightNetwork.build([("A", "B", 10.0, 1), ("A", "B", 20.0, 2)])

        assert network.legs_from("A") == (Leg("B", 10.0, 1), Leg("B", 20.0, 2))
        assert network.legs_from("B") == (Leg("A", 10.0, 1), Leg("A", 20.0, 2))

    def test_empty_edge_list(self):
        network = FlightNetwork.build([])

        assert len(network) == 0
        assert not network.contains("A")


class TestFlightNetworkLookup:
    """Tests for contains() and legs_from()."""

    def test_contains_known_city(self, triangle_network: FlightNetwork):
        assert triangle_network.contains("A")
        assert "A" in triangle_network

    def test_unknown_city(self, triangle_network: FlightNetwork):
        assert not triangle_network.contains("Zzz")
        assert "Zzz" not in triangle_network
        assert triangle_network.legs_from("Zzz") == ()

    def test_self_loop_city_is_known(self):
        network = FlightNetwork.build([("D", "D", 1.0, 1)])

        assert network.contains("D")
        assert [leg.to for leg in network.legs_from("D")] == ["D", "D"]


class TestFlightNetworkImmutability:
    """Tests for the write-once contract."""

    def test_built_network_is_frozen(self, triangle_network: FlightNetwork):
        assert triangle_network.is_frozen

    def test_add_after_build_raises(self, triangle_network: FlightNetwork):
        with pytest.raises(NetworkFrozenError, match="read-only"):
            triangle_network.add_undirected_leg("A", "D", 1.0, 1)

    def test_legs_are_returned_as_tuples(self, triangle_network: FlightNetwork):
        assert isinstance(triangle_network.legs_from("A"), tuple)

    def test_unfrozen_network_accepts_legs(self):
        network = FlightNetwork()
        network.add_undirected_leg("A", "B", 1.0, 1)

        assert not network.is_frozen
        assert network.contains("B")

        network.freeze()
        network.freeze()  # idempotent

        assert network.legs_from("B") == (Leg("A", 1.0, 1),)


class TestFlightNetworkFromDataFrame:
    """Tests for FlightNetwork.from_legs_df."""

    def test_builds_from_validated_frame(self):
        legs_df = pd.DataFrame(
            {
                "city_a": ["A", "B"],
                "city_b": ["B", "C"],
                "cost": [100.5, 50.0],
                "time": [2, 3],
            }
        )

        network = FlightNetwork.from_legs_df(legs_df)

        assert network.legs_from("A") == (Leg("B", 100.5, 2),)
        assert network.legs_from("C") == (Leg("B", 50.0, 3),)

    def test_weights_are_plain_python_numbers(self):
        legs_df = pd.DataFrame(
            {"city_a": ["A"], "city_b": ["B"], "cost": [1.0], "time": [2]}
        )

        leg = FlightNetwork.from_legs_df(legs_df).legs_from("A")[0]

        assert type(leg.cost) is float
        assert type(leg.time) is int


# =============================================================================
# FLIGHT NETWORK REPOSITORY TESTS
# =============================================================================


class TestFlightNetworkRepository:
    """Tests for FlightNetworkRepository."""

    def test_not_initialized_before_first_access(self):
        repo = FlightNetworkRepository(CountingProvider([("A", "B", 1.0, 1)]))

        assert not repo.is_initialized

    def test_builds_once_and_reuses(self):
        provider = CountingProvider([("A", "B", 1.0, 1)])
        repo = FlightNetworkRepository(provider)

        first = repo.get_network()
        second = repo.get_network()

        assert first is second
        assert provider.call_count == 1
        assert repo.is_initialized

    def test_provider_failure_is_wrapped(self):
        repo = FlightNetworkRepository(FailingProvider())

        with pytest.raises(NetworkNotInitializedError, match="Failing Provider") as exc_info:
            repo.get_network()

        assert isinstance(exc_info.value.__cause__, InputFileError)
        assert not repo.is_initialized

    def test_provider_failure_is_logged(self, caplog):
        repo = FlightNetworkRepository(FailingProvider())

        with caplog.at_level("ERROR", logger="flight_planner.adapters.repositories.network_repo"):
            with pytest.raises(NetworkNotInitializedError):
                repo.get_network()

        assert any("Flight network build failed" in r.message for r in caplog.records)
