"""
Configuration module for the flight planner.

Loads environment variables (optionally from a .env file) and provides
centralized defaults for input/output paths and search settings.
Command-line flags override these values.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

ENV_PREFIX = "FLIGHT_PLANNER_"

DEFAULT_TOP_N = 3


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    """Read an optional integer environment variable."""
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(
            f"Environment variable {ENV_PREFIX + name} must be an integer, got {raw!r}"
        ) from e


@dataclass(frozen=True)
class PlannerConfig:
    """
    Flight planner settings.

    Attributes:
        flights_file: Edge list input (count line then `a | b | cost | time`).
        requests_file: Request input (count line then `origin | dest | T/C`).
        output_file: Text report destination.
        top_n: Number of ranked paths reported per query.
        max_paths: Optional cap on paths enumerated per query (None = unbounded).
        max_depth: Optional cap on legs per path (None = unbounded).
        workers: Number of queries planned concurrently.
        log_level: Root logging level name.
    """

    flights_file: str = "flight_data.txt"
    requests_file: str = "requests.txt"
    output_file: str = "output.txt"
    top_n: int = DEFAULT_TOP_N
    max_paths: Optional[int] = None
    max_depth: Optional[int] = None
    workers: int = 1
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.top_n < 0:
            raise ValueError(f"top_n must be >= 0, got {self.top_n}")
        if self.max_paths is not None and self.max_paths < 1:
            raise ValueError(f"max_paths must be >= 1, got {self.max_paths}")
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        """Build settings from FLIGHT_PLANNER_* environment variables."""
        defaults = cls()
        return cls(
            flights_file=os.getenv(ENV_PREFIX + "FLIGHTS_FILE", defaults.flights_file),
            requests_file=os.getenv(ENV_PREFIX + "REQUESTS_FILE", defaults.requests_file),
            output_file=os.getenv(ENV_PREFIX + "OUTPUT_FILE", defaults.output_file),
            top_n=_env_int("TOP_N", defaults.top_n),
            max_paths=_env_int("MAX_PATHS", None),
            max_depth=_env_int("MAX_DEPTH", None),
            workers=_env_int("WORKERS", defaults.workers),
            log_level=os.getenv(ENV_PREFIX + "LOG_LEVEL", defaults.log_level),
        )
