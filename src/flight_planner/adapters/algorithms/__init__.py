"""
Algorithm adapters for path enumeration.
"""

from flight_planner.adapters.algorithms.dfs_adapter import (
    ExhaustiveDfsPathFinder,
    PathFrame,
)

__all__ = [
    "ExhaustiveDfsPathFinder",
    "PathFrame",
]
