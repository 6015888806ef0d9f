"""Project-wise report builder.

Each project gets its own section:

    "Project name","Website (p-1)",,
    ID,Emp Name,Hours,Task
    "u1","Ann",2.00,"Design"
    ,,1.50,"Review"
    ,"Ann's total Hours",3.50,
    ,,,
    ,"Website total Hours",3.50,
    ,,,
"""

import logging
from typing import List, Mapping

from src.aggregators.project_aggregator import (
    ProjectAggregate,
    ProjectAggregator,
    ProjectNameLookup,
    ProjectUserHours,
)
from src.calculators.entry_normalizer import clean_display_text
from src.models.clockify import TimeEntry, User
from src.writers.csv_serializer import (
    Report,
    Row,
    empty_cells,
    hours_cell,
    pad_row,
    plain,
    serialize_report,
    text,
)
from src.writers.row_grouping import group_rows

logger = logging.getLogger(__name__)

PROJECT_HEADERS = ["ID", "Emp Name", "Hours", "Task"]
PROJECT_WIDTH = len(PROJECT_HEADERS)


class ProjectReportBuilder:
    """Build the project-wise report from project aggregates.

    The aggregates carry already-resolved project names, so building never
    touches the network.
    """

    def __init__(self, projects: List[ProjectAggregate], month_name: str, year: int):
        """Initialize the builder.

        Args:
            projects: Project aggregates in first-encountered order
            month_name: Month shown in the title
            year: Year shown in the title
        """
        self.projects = projects
        self.month_name = month_name
        self.year = year

    @classmethod
    def from_entries(
        cls,
        users: List[User],
        entries_by_user: Mapping[str, List[TimeEntry]],
        lookup_project_name: ProjectNameLookup,
        month_name: str,
        year: int,
    ) -> "ProjectReportBuilder":
        """Aggregate raw entries by project and return a builder for them.

        Project names are resolved through ``lookup_project_name`` once per
        project; failures fall back to "Unknown Project".
        """
        projects = ProjectAggregator(lookup_project_name).aggregate(
            users, entries_by_user
        )
        return cls(projects, month_name, year)

    @property
    def title(self) -> str:
        return f"Project-wise report for {self.month_name} {self.year}"

    def _user_rows(self, bucket: ProjectUserHours) -> List[Row]:
        name = clean_display_text(bucket.name)
        identity = [text(clean_display_text(bucket.user_id)), text(name)]
        details = [
            [hours_cell(task_hours), text(task_label)]
            for task_label, task_hours in bucket.task_hours.items()
        ]
        rows = group_rows(identity, details, detail_width=2)
        rows.append(
            pad_row(
                [
                    plain(""),
                    text(f"{name}'s total Hours"),
                    hours_cell(bucket.total_hours),
                ],
                PROJECT_WIDTH,
            )
        )
        return rows

    def _project_rows(self, project: ProjectAggregate) -> List[Row]:
        project_name = clean_display_text(project.project_name)
        project_id = clean_display_text(project.project_id)
        rows: List[Row] = [
            pad_row(
                [
                    text("Project name"),
                    text(f"{project_name} ({project_id})"),
                ],
                PROJECT_WIDTH,
            ),
            [plain(header) for header in PROJECT_HEADERS],
        ]

        for bucket in project.users.values():
            rows.extend(self._user_rows(bucket))

        rows.append(empty_cells(PROJECT_WIDTH))
        rows.append(
            pad_row(
                [
                    plain(""),
                    text(f"{project_name} total Hours"),
                    hours_cell(project.total_hours),
                ],
                PROJECT_WIDTH,
            )
        )
        rows.append(empty_cells(PROJECT_WIDTH))
        return rows

    def build(self) -> Report:
        """Assemble the title followed by one section per project."""
        report: Report = [pad_row([text(self.title)], PROJECT_WIDTH)]
        for project in self.projects:
            report.extend(self._project_rows(project))

        logger.info(
            f"Built project-wise report for {self.month_name} {self.year}: "
            f"{len(self.projects)} projects"
        )
        return report

    def to_csv(self) -> str:
        return serialize_report(self.build())
