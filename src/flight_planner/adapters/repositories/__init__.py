"""
Repository adapters for the flight network.
"""

from flight_planner.adapters.repositories.network_repo import (
    FlightNetwork,
    FlightNetworkRepository,
)

__all__ = [
    "FlightNetwork",
    "FlightNetworkRepository",
]
