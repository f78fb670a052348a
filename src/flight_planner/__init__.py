"""
Flight planner: enumerate every simple route between two cities over a
network of flight legs and report the best few by time or cost.
"""

from flight_planner.application.plan_flights import PlanFlights
from flight_planner.schemas.path import PathResult, QueryResult
from flight_planner.schemas.query import Criterion, FlightQuery

__version__ = "1.0.0"

__all__ = [
    "PlanFlights",
    "FlightQuery",
    "Criterion",
    "PathResult",
    "QueryResult",
]
