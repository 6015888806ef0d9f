"""Clockify data models.

Only the handful of fields the reporting engine consumes are declared here;
everything else in the API responses is dropped during validation.
"""

import datetime as dt
from typing import Optional

from pydantic import Field

from src.models.base import BaseDataModel


class User(BaseDataModel):
    """A workspace member.

    Attributes:
        id: Opaque Clockify user identifier
        name: Display name
        email: Email address
    """

    id: str = Field(..., min_length=1, description="Clockify user id")
    name: str = Field("", description="Display name")
    email: str = Field("", description="Email address")


class TimeInterval(BaseDataModel):
    """Start and end of one tracked span of work.

    ``end`` is ``None`` while a timer is still running.
    """

    start: dt.datetime = Field(..., description="Start of the interval")
    end: Optional[dt.datetime] = Field(None, description="End of the interval")


class TimeEntry(BaseDataModel):
    """One recorded time entry.

    Example:
        >>> entry = TimeEntry.model_validate({
        ...     "timeInterval": {
        ...         "start": "2024-10-01T09:00:00Z",
        ...         "end": "2024-10-01T10:30:00Z",
        ...     },
        ...     "description": "Design review",
        ...     "projectId": "p-1",
        ...     "billable": True,
        ... })
        >>> entry.project_id
        'p-1'
    """

    time_interval: TimeInterval = Field(..., alias="timeInterval")
    description: Optional[str] = Field(None, description="Free-text description")
    project_id: Optional[str] = Field(None, alias="projectId")


class Project(BaseDataModel):
    """A workspace project. Only the display name is used by reports."""

    id: str = Field(..., description="Clockify project id")
    name: str = Field(..., description="Project display name")
