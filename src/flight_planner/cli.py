"""
Flight Planner - command-line entry point.

Reads the edge list and request files, plans every request and writes
the text report (and optionally a CSV export).

Usage:
    flight-planner
    flight-planner --flights legs.txt --requests requests.txt --output out.txt
    python -m flight_planner --csv results.csv --log-level DEBUG
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional, Sequence

from flight_planner.application.plan_flights import PlanFlights
from flight_planner.config import PlannerConfig
from flight_planner.exceptions import FlightPlannerError

# Module-level logger
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_installed_handlers: List[logging.Handler] = []


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging to the console and, optionally, a file.

    Sets the root logger level and installs a stdout handler plus a
    DEBUG-level file handler when log_file is given. Calling it again
    replaces the handlers installed by the previous call.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    root_logger.setLevel(min(numeric_level, logging.DEBUG) if log_file else numeric_level)

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="flight-planner",
        description="Enumerate flight routes and report the best ones by time or cost",
    )
    p.add_argument("--flights", help="Edge list file (default: flight_data.txt)")
    p.add_argument("--requests", help="Request file (default: requests.txt)")
    p.add_argument("--output", help="Report file (default: output.txt)")
    p.add_argument("--csv", help="Also write ranked results as CSV to this path")
    p.add_argument("--top", type=int, help="Paths reported per request (default: 3)")
    p.add_argument("--max-paths", type=int, help="Stop enumerating after this many paths")
    p.add_argument("--max-depth", type=int, help="Maximum legs per path")
    p.add_argument("--workers", type=int, help="Requests planned concurrently")
    p.add_argument("--log-level", help="Logging level (default: INFO)")
    p.add_argument("--log-file", help="Also write DEBUG logs to this file")
    return p


def _apply_overrides(config: PlannerConfig, args: argparse.Namespace) -> PlannerConfig:
    """Replace config fields with any flags given on the command line."""
    overrides = {
        "flights_file": args.flights,
        "requests_file": args.requests,
        "output_file": args.output,
        "top_n": args.top,
        "max_paths": args.max_paths,
        "max_depth": args.max_depth,
        "workers": args.workers,
        "log_level": args.log_level,
    }
    return dataclasses.replace(
        config, **{key: value for key, value in overrides.items() if value is not None}
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the planner.

    Returns:
        0 on success, 1 if any input or output file could not be processed.
    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        config = _apply_overrides(PlannerConfig.from_env(), args)
        setup_logging(config.log_level, args.log_file)
    except ValueError as e:
        parser.error(str(e))

    logger.info(
        "Planning requests from %s over %s", config.requests_file, config.flights_file
    )

    try:
        planner = PlanFlights(config=config)
        results = planner.run(config.requests_file, config.output_file, args.csv)
    except FlightPlannerError as e:
        logger.error("%s", e)
        return 1

    planned = sum(1 for result in results if result.has_plan)
    logger.info(
        "Done: %d requests, %d with a flight plan, report at %s",
        len(results),
        planned,
        config.output_file,
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
