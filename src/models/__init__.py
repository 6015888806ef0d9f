"""Data models for the reporting system.

This package contains Pydantic models for the Clockify payloads:
- BaseDataModel: Base class with common configuration
- User: Workspace member
- TimeInterval: Start/end of a tracked span
- TimeEntry: One recorded time entry
- Project: Workspace project
"""

from src.models.base import BaseDataModel
from src.models.clockify import Project, TimeEntry, TimeInterval, User

__all__ = [
    "BaseDataModel",
    "User",
    "TimeInterval",
    "TimeEntry",
    "Project",
]
