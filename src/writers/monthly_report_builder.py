"""Monthly (per-user) report builder.

Layout:
    "Monthly report for October 2024",,,,
    Name,Email,Total Hours,Task,Hours
    "Ann","ann@example.com",3.50,"Design",2.00
    ,,,"Review",1.50
    "Bob","bob@example.com",0.00,,
"""

import logging
from typing import List, Mapping

from src.aggregators.user_aggregator import UserAggregate, aggregate_all_users
from src.calculators.entry_normalizer import clean_display_text
from src.models.clockify import TimeEntry, User
from src.writers.csv_serializer import (
    Report,
    hours_cell,
    pad_row,
    plain,
    serialize_report,
    text,
)
from src.writers.row_grouping import group_rows

logger = logging.getLogger(__name__)

MONTHLY_HEADERS = ["Name", "Email", "Total Hours", "Task", "Hours"]
MONTHLY_WIDTH = len(MONTHLY_HEADERS)


class MonthlyReportBuilder:
    """Build the per-user monthly report.

    Example:
        >>> builder = MonthlyReportBuilder(users, aggregates, "October", 2024)
        >>> csv_text = builder.to_csv()
        >>> csv_text.splitlines()[1]
        'Name,Email,Total Hours,Task,Hours'
    """

    def __init__(
        self,
        users: List[User],
        aggregates: Mapping[str, UserAggregate],
        month_name: str,
        year: int,
    ):
        """Initialize the builder.

        Args:
            users: Workspace members in report order
            aggregates: UserAggregate per user id; absent users count as empty
            month_name: Month shown in the title (e.g. "October")
            year: Year shown in the title
        """
        self.users = users
        self.aggregates = aggregates
        self.month_name = month_name
        self.year = year

    @classmethod
    def from_entries(
        cls,
        users: List[User],
        entries_by_user: Mapping[str, List[TimeEntry]],
        month_name: str,
        year: int,
    ) -> "MonthlyReportBuilder":
        """Aggregate raw entries per user and return a builder for them."""
        return cls(users, aggregate_all_users(users, entries_by_user), month_name, year)

    @property
    def title(self) -> str:
        return f"Monthly report for {self.month_name} {self.year}"

    def build(self) -> Report:
        """Assemble title, header, and one block of rows per user."""
        report: Report = [
            pad_row([text(self.title)], MONTHLY_WIDTH),
            [plain(header) for header in MONTHLY_HEADERS],
        ]

        for user in self.users:
            aggregate = self.aggregates.get(user.id) or UserAggregate(user=user)
            identity = [
                text(clean_display_text(user.name)),
                text(clean_display_text(user.email)),
                hours_cell(aggregate.total_hours),
            ]
            details = [
                [text(task_label), hours_cell(task_hours)]
                for task_label, task_hours in aggregate.task_hours.items()
            ]
            report.extend(group_rows(identity, details, detail_width=2))

        logger.info(
            f"Built monthly report for {self.month_name} {self.year}: "
            f"{len(self.users)} users, {len(report) - 2} rows"
        )
        return report

    def to_csv(self) -> str:
        return serialize_report(self.build())
