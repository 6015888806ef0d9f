"""Project-wise aggregation of time entries.

This module regroups the same per-user entries used by the monthly report by
project, then by user within each project. Project display names are looked
up once per project and cached for the duration of one aggregation.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping

from src.calculators.entry_normalizer import normalize_entry
from src.models.clockify import TimeEntry, User

logger = logging.getLogger(__name__)

UNKNOWN_PROJECT = "Unknown Project"

# Maps a project id to its display name; may raise on lookup failure
ProjectNameLookup = Callable[[str], str]


@dataclass
class ProjectUserHours:
    """Hours one user recorded against one project.

    Attributes:
        user_id: Clockify user id
        name: User display name
        total_hours: Sum of the user's hours in the project
        task_hours: Hours per task label, in first-seen order
    """

    user_id: str
    name: str
    total_hours: float = 0.0
    task_hours: Dict[str, float] = field(default_factory=dict)

    def add(self, task_label: str, hours: float) -> None:
        self.total_hours += hours
        self.task_hours[task_label] = self.task_hours.get(task_label, 0.0) + hours


@dataclass
class ProjectAggregate:
    """Hours recorded against one project, broken down by user.

    Attributes:
        project_id: Clockify project id ("" for entries without a project)
        project_name: Resolved display name, or ``UNKNOWN_PROJECT``
        total_hours: Sum of all users' hours in the project
        users: Per-user buckets keyed by user id, in first-seen order
    """

    project_id: str
    project_name: str
    total_hours: float = 0.0
    users: Dict[str, ProjectUserHours] = field(default_factory=dict)

    def add(self, user: User, task_label: str, hours: float) -> None:
        """Fold one normalized entry into the project and user totals."""
        bucket = self.users.get(user.id)
        if bucket is None:
            bucket = ProjectUserHours(user_id=user.id, name=user.name)
            self.users[user.id] = bucket

        bucket.add(task_label, hours)
        self.total_hours += hours


class ProjectAggregator:
    """Groups time entries by project and user.

    The name lookup is injected so the aggregator stays independent of the
    HTTP client; any exception it raises is logged and replaced with
    ``UNKNOWN_PROJECT`` so one broken project never aborts the report.

    Example:
        >>> aggregator = ProjectAggregator(lambda project_id: "Website")
        >>> projects = aggregator.aggregate(users, entries_by_user)
        >>> projects[0].project_name
        'Website'
    """

    def __init__(self, lookup_project_name: ProjectNameLookup):
        """Initialize the aggregator.

        Args:
            lookup_project_name: Callable returning the display name of a
                project id
        """
        self.lookup_project_name = lookup_project_name

    def _resolve_name(self, project_id: str) -> str:
        if not project_id:
            return UNKNOWN_PROJECT

        try:
            name = self.lookup_project_name(project_id)
        except Exception as e:
            logger.warning(
                f"Failed to resolve project {project_id}: {e}. "
                f"Using '{UNKNOWN_PROJECT}'."
            )
            return UNKNOWN_PROJECT

        return name or UNKNOWN_PROJECT

    def aggregate(
        self,
        users: List[User],
        entries_by_user: Mapping[str, List[TimeEntry]],
    ) -> List[ProjectAggregate]:
        """Aggregate entries by project, then by user within each project.

        Users are visited in list order and each user's entries in the order
        supplied; projects and users keep that first-encounter order.

        Args:
            users: Workspace members in report order
            entries_by_user: Entries per user id; missing users have none

        Returns:
            Project aggregates in first-encountered order
        """
        projects: Dict[str, ProjectAggregate] = {}

        for user in users:
            for entry in entries_by_user.get(user.id) or []:
                project_id = entry.project_id or ""

                project = projects.get(project_id)
                if project is None:
                    project = ProjectAggregate(
                        project_id=project_id,
                        project_name=self._resolve_name(project_id),
                    )
                    projects[project_id] = project

                normalized = normalize_entry(entry)
                project.add(user, normalized.task_label, normalized.hours)

        logger.info(f"Aggregated entries into {len(projects)} projects")
        return list(projects.values())
