"""
Port interfaces for the flight planner.

Ports define the abstract interfaces that the service layer uses to
communicate with data sources and search algorithms. This follows the
Ports and Adapters (Hexagonal) architecture pattern.
"""

from flight_planner.ports.flight_data_provider import FlightDataProvider
from flight_planner.ports.path_finder import PathFinder
from flight_planner.ports.query_provider import QueryProvider

__all__ = [
    "FlightDataProvider",
    "PathFinder",
    "QueryProvider",
]
