"""CLI utility functions."""

from src.cli.utils.formatters import (
    format_error,
    format_info,
    format_success,
    format_table,
    format_warning,
)
from src.cli.utils.progress import ProgressTracker

__all__ = [
    "format_error",
    "format_info",
    "format_success",
    "format_table",
    "format_warning",
    "ProgressTracker",
]
