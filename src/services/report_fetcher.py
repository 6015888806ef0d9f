"""Fetching of one month of Clockify data for a report run.

The user list is fetched first and is required. Time entries are then
fetched per user on a thread pool; a failure for one user is logged and
replaced with an empty list without affecting the others.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, List

from src.calculators.time_utils import ReportPeriod
from src.models.clockify import TimeEntry, User
from src.services.clockify_service import ClockifyService
from src.utils.logging_utils import LogContext, get_log_context

logger = logging.getLogger(__name__)


@dataclass
class MonthlyData:
    """Raw Clockify data for one report period.

    Attributes:
        period: Month the data covers
        users: Workspace members in API order
        entries_by_user: Time entries per user id (empty list on fetch failure)
        failed_user_ids: Users whose entries could not be fetched
    """

    period: ReportPeriod
    users: List[User]
    entries_by_user: Dict[str, List[TimeEntry]]
    failed_user_ids: List[str]

    @property
    def entry_count(self) -> int:
        return sum(len(entries) for entries in self.entries_by_user.values())


class ReportDataFetcher:
    """Gathers users and their time entries for a report period.

    Example:
        >>> fetcher = ReportDataFetcher(clockify_service, "ws-123", max_workers=5)
        >>> data = fetcher.fetch(ReportPeriod(2024, 10))
        >>> len(data.users)
        12
    """

    def __init__(
        self, clockify_service: ClockifyService, workspace_id: str, max_workers: int = 5
    ):
        self.clockify_service = clockify_service
        self.workspace_id = workspace_id
        self.max_workers = max_workers

    def lookup_project_name(self, project_id: str) -> str:
        """Return the display name of a project in this workspace."""
        return self.clockify_service.get_project(self.workspace_id, project_id).name

    def _fetch_user_entries(
        self, user: User, period: ReportPeriod, context: dict
    ) -> List[TimeEntry]:
        with LogContext(**context, user_id=user.id):
            return self.clockify_service.list_time_entries(
                self.workspace_id, user.id, period.start, period.end
            )

    def fetch(self, period: ReportPeriod) -> MonthlyData:
        """Fetch users and every user's entries for ``period``.

        Raises:
            UpstreamFetchError: If the user list cannot be fetched
        """
        logger.info(f"Fetching users for workspace {self.workspace_id}")
        users = self.clockify_service.list_users(self.workspace_id)

        entries_by_user: Dict[str, List[TimeEntry]] = {}
        failed_user_ids: List[str] = []
        context = get_log_context()

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                (user, executor.submit(self._fetch_user_entries, user, period, context))
                for user in users
            ]

            # Gather in user-list order; each future fails independently
            for user, future in futures:
                try:
                    entries_by_user[user.id] = future.result()
                except Exception as e:
                    logger.warning(
                        f"Failed to fetch entries for {user.name} ({user.id}): {e}. "
                        f"Continuing with no entries for this user."
                    )
                    entries_by_user[user.id] = []
                    failed_user_ids.append(user.id)

        data = MonthlyData(
            period=period,
            users=users,
            entries_by_user=entries_by_user,
            failed_user_ids=failed_user_ids,
        )
        logger.info(
            f"Fetched {data.entry_count} entries for {len(users)} users "
            f"({len(failed_user_ids)} failed)"
        )
        return data
