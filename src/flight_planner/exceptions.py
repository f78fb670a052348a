"""
Custom exceptions for the flight planner.

Provides a hierarchy of exceptions for clear error handling
of input loading and network construction. Unknown cities and
missing routes are normal empty results, not exceptions.
"""

from pathlib import Path
from typing import Optional, Union


class FlightPlannerError(Exception):
    """Base exception for all flight planner errors."""

    pass


class InputError(FlightPlannerError):
    """Base exception for fatal input errors."""

    pass


class InputFileError(InputError):
    """Raised when an input file is missing or cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot read input file '{self.path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MalformedRecordError(InputError):
    """Raised when a record count or record in an input file is invalid."""

    def __init__(
        self,
        path: Union[str, Path],
        message: str,
        line_number: Optional[int] = None,
    ) -> None:
        self.path = Path(path)
        self.line_number = line_number
        location = f"{self.path}:{line_number}" if line_number else str(self.path)
        super().__init__(f"Malformed input in {location}: {message}")


class NetworkNotInitializedError(FlightPlannerError):
    """Raised when the flight network cannot be built."""

    pass


class NetworkFrozenError(FlightPlannerError):
    """Raised when a leg is added to a network after it was built."""

    def __init__(self, message: str = "Flight network is read-only once built") -> None:
        super().__init__(message)


class OutputFileError(FlightPlannerError):
    """Raised when a report or export file cannot be written."""

    def __init__(self, path: Union[str, Path], reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot write output file '{self.path}'"
        if reason:
            message += f": {reason}"
        super().__init__(message)
