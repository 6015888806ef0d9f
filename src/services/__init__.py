"""
API services for the reporting system.

This package provides the clients around the report engine:
- Clockify REST API client with pagination
- Per-user scatter/gather fetching of a month of data
- Google Drive uploader converting CSV reports to Google Sheets
- Exponential backoff with jitter for transient API errors
"""

from .clockify_service import ClockifyService
from .google_drive_service import GoogleDriveUploader
from .report_fetcher import MonthlyData, ReportDataFetcher
from .retry_handler import RetryExhaustedException, RetryHandler, is_transient_error

__all__ = [
    "ClockifyService",
    "GoogleDriveUploader",
    "MonthlyData",
    "ReportDataFetcher",
    "RetryExhaustedException",
    "RetryHandler",
    "is_transient_error",
]
