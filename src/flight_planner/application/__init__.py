"""
Application layer for the flight planner.

This layer provides the public API for the planning engine.
It acts as a facade, handling dependency initialization and providing
a simple interface for consumers.
"""

from flight_planner.application.plan_flights import PlanFlights

__all__ = ["PlanFlights"]
