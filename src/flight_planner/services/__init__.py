"""
Domain services for the flight planner.

Services orchestrate the interaction between ports (repositories, algorithms)
and domain logic (ranking, result assembly).
"""

from flight_planner.services.planner_service import FlightPlannerService
from flight_planner.services.ranking_service import rank_paths, sort_paths

__all__ = ["FlightPlannerService", "rank_paths", "sort_paths"]
