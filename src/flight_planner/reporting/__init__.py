"""
Report rendering for planned queries.
"""

from flight_planner.reporting.dataframe_export import results_to_dataframe, write_csv
from flight_planner.reporting.report_writer import format_report, write_report

__all__ = [
    "format_report",
    "write_report",
    "results_to_dataframe",
    "write_csv",
]
