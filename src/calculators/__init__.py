"""Calculator modules for the reporting system."""

from src.calculators.entry_normalizer import (
    UNNAMED_TASK,
    NormalizedEntry,
    calculate_entry_hours,
    clean_display_text,
    normalize_entry,
    normalize_task_label,
)
from src.calculators.time_utils import (
    ReportPeriod,
    parse_month,
    previous_month,
    timedelta_to_hours,
    to_clockify_timestamp,
)

__all__ = [
    # entry_normalizer
    "UNNAMED_TASK",
    "NormalizedEntry",
    "calculate_entry_hours",
    "clean_display_text",
    "normalize_entry",
    "normalize_task_label",
    # time_utils
    "ReportPeriod",
    "parse_month",
    "previous_month",
    "timedelta_to_hours",
    "to_clockify_timestamp",
]
