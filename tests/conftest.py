"""Shared fixtures for flight planner tests."""

from pathlib import Path
from typing import Callable, List, Sequence, Tuple

import pytest

from flight_planner.adapters.algorithms.dfs_adapter import ExhaustiveDfsPathFinder
from flight_planner.adapters.repositories.network_repo import FlightNetwork

Edge = Tuple[str, str, float, int]


@pytest.fixture
def triangle_edges() -> List[Edge]:
    """A-B (100, 2), B-C (50, 3), A-C (200, 1)."""
    return [
        ("A", "B", 100.0, 2),
        ("B", "C", 50.0, 3),
        ("A", "C", 200.0, 1),
    ]


@pytest.fixture
def triangle_network(triangle_edges: List[Edge]) -> FlightNetwork:
    return FlightNetwork.build(triangle_edges)


@pytest.fixture
def diamond_network() -> FlightNetwork:
    """
    Two routes of equal time and cost from S to T plus a cross link.

        S - X - T
        S - Y - T
        X - Y
    """
    return FlightNetwork.build(
        [
            ("S", "X", 10.0, 1),
            ("X", "T", 10.0, 1),
            ("S", "Y", 10.0, 1),
            ("Y", "T", 10.0, 1),
            ("X", "Y", 5.0, 5),
        ]
    )


@pytest.fixture
def path_finder() -> ExhaustiveDfsPathFinder:
    return ExhaustiveDfsPathFinder()


@pytest.fixture
def write_counted_file(tmp_path: Path) -> Callable[[str, Sequence[str]], Path]:
    """Write a count-prefixed record file and return its path."""

    def _write(name: str, records: Sequence[str], count: int = -1) -> Path:
        path = tmp_path / name
        header = str(len(records) if count < 0 else count)
        path.write_text("\n".join([header, *records]) + "\n", encoding="utf-8")
        return path

    return _write
