"""Time utilities for the reporting system.

This module provides:
- Conversion of timestamp differences into fractional hours
- The calendar month a report covers (``ReportPeriod``)
- Formatting of instants the way the Clockify API expects them

All instants are handled in UTC.
"""

import calendar
import datetime as dt
from dataclasses import dataclass
from typing import Optional

SECONDS_PER_HOUR = 3600


def timedelta_to_hours(delta: dt.timedelta) -> float:
    """Convert a timedelta to fractional hours without rounding.

    Example:
        >>> timedelta_to_hours(dt.timedelta(minutes=90))
        1.5
        >>> timedelta_to_hours(dt.timedelta(minutes=-30))
        -0.5
    """
    return delta.total_seconds() / SECONDS_PER_HOUR


def to_clockify_timestamp(instant: dt.datetime) -> str:
    """Format an instant as ``YYYY-MM-DDTHH:MM:SSZ``.

    Naive datetimes are taken to be UTC.

    Example:
        >>> to_clockify_timestamp(dt.datetime(2024, 10, 1))
        '2024-10-01T00:00:00Z'
    """
    if instant.tzinfo is not None:
        instant = instant.astimezone(dt.timezone.utc)
    return instant.strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class ReportPeriod:
    """A calendar month covered by a report run.

    Attributes:
        year: Four-digit year
        month: Month number (1-12)

    Example:
        >>> period = ReportPeriod(2024, 10)
        >>> period.month_name, period.key
        ('October', '2024-10')
        >>> to_clockify_timestamp(period.end)
        '2024-10-31T23:59:59Z'
    """

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {self.month}")

    @property
    def month_name(self) -> str:
        return calendar.month_name[self.month]

    @property
    def key(self) -> str:
        """``YYYY-MM`` identifier of the month."""
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def start(self) -> dt.datetime:
        """First instant of the month (UTC)."""
        return dt.datetime(self.year, self.month, 1, tzinfo=dt.timezone.utc)

    @property
    def end(self) -> dt.datetime:
        """Last whole second of the month (UTC)."""
        _, last_day = calendar.monthrange(self.year, self.month)
        return dt.datetime(
            self.year, self.month, last_day, 23, 59, 59, tzinfo=dt.timezone.utc
        )

    @property
    def monthly_report_filename(self) -> str:
        return f"report-{self.key}.csv"

    @property
    def project_report_filename(self) -> str:
        return f"project-wise-report-{self.year:04d}-{self.month:02d}.csv"


def previous_month(today: Optional[dt.date] = None) -> ReportPeriod:
    """Return the month before ``today`` (defaults to the current date).

    Example:
        >>> previous_month(dt.date(2025, 1, 15))
        ReportPeriod(year=2024, month=12)
    """
    today = today or dt.date.today()
    first_of_month = today.replace(day=1)
    last_of_previous = first_of_month - dt.timedelta(days=1)
    return ReportPeriod(last_of_previous.year, last_of_previous.month)


def parse_month(value: str) -> ReportPeriod:
    """Parse a ``YYYY-MM`` string into a ReportPeriod.

    Raises:
        ValueError: If the string is not a valid month
    """
    try:
        parsed = dt.datetime.strptime(value, "%Y-%m")
    except ValueError:
        raise ValueError(f"Invalid month format: {value}. Expected YYYY-MM")
    return ReportPeriod(parsed.year, parsed.month)
