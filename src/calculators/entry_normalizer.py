"""Normalization of raw time entries.

Each entry is reduced to the two values the reports care about: how long it
lasted, in hours, and which task label it is summed under.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.calculators.time_utils import timedelta_to_hours
from src.models.clockify import TimeEntry

logger = logging.getLogger(__name__)

UNNAMED_TASK = "Unnamed Task"


@dataclass(frozen=True)
class NormalizedEntry:
    """Duration and task label of one time entry.

    Attributes:
        hours: Unrounded duration in hours (negative if end precedes start)
        task_label: Grouping key derived from the description
    """

    hours: float
    task_label: str


def clean_display_text(value: str) -> str:
    """Remove commas and turn each newline into ``|``.

    Applied to every display string a report prints (task labels, user names
    and emails, project names) so each cell stays one field on one row.

    Example:
        >>> clean_display_text("Lee, Ann")
        'Lee Ann'
    """
    return value.replace(",", "").replace("\n", "|")


def normalize_task_label(description: Optional[str]) -> str:
    """Derive the task label from an entry description.

    The description is cleaned with ``clean_display_text``; an empty or
    missing description becomes ``UNNAMED_TASK``.

    Example:
        >>> normalize_task_label("Fix, bug")
        'Fix bug'
        >>> normalize_task_label("line one\\nline two")
        'line one|line two'
        >>> normalize_task_label(None)
        'Unnamed Task'
    """
    if not description:
        return UNNAMED_TASK
    return clean_display_text(description)


def calculate_entry_hours(entry: TimeEntry) -> float:
    """Calculate the duration of an entry in hours.

    End before start is not rejected; the negative duration is returned as-is.
    A running timer (no end yet) counts as zero hours.
    """
    interval = entry.time_interval
    if interval.end is None:
        logger.debug(f"Entry starting {interval.start} is still running, counting 0h")
        return 0.0
    return timedelta_to_hours(interval.end - interval.start)


def normalize_entry(entry: TimeEntry) -> NormalizedEntry:
    """Normalize one time entry into hours and a task label."""
    return NormalizedEntry(
        hours=calculate_entry_hours(entry),
        task_label=normalize_task_label(entry.description),
    )
