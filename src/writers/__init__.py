"""Writers module for report output.

This module turns aggregated hours into tabular reports, serializes them as
CSV text, and writes the result to disk.
"""

from src.writers.csv_serializer import (
    Cell,
    Report,
    parse_report,
    serialize_report,
)
from src.writers.monthly_report_builder import MonthlyReportBuilder
from src.writers.project_report_builder import ProjectReportBuilder
from src.writers.report_file_writer import ReportFileWriter
from src.writers.row_grouping import group_rows

__all__ = [
    "Cell",
    "Report",
    "parse_report",
    "serialize_report",
    "MonthlyReportBuilder",
    "ProjectReportBuilder",
    "ReportFileWriter",
    "group_rows",
]
