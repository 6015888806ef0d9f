"""Per-user aggregation of time entries.

This module folds one user's time entries into a total and a per-task
breakdown, which is what the monthly report prints for each user.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional

from src.calculators.entry_normalizer import normalize_entry
from src.models.clockify import TimeEntry, User

logger = logging.getLogger(__name__)


@dataclass
class UserAggregate:
    """Hours recorded by one user in a report period.

    Attributes:
        user: The workspace member
        total_hours: Sum of all entry durations
        task_hours: Hours per task label, in first-seen order

    Example:
        >>> aggregate = UserAggregate(user=User(id="u1", name="Ann"))
        >>> aggregate.add("Design", 1.5)
        >>> aggregate.add("Design", 0.5)
        >>> aggregate.total_hours, aggregate.task_hours
        (2.0, {'Design': 2.0})
    """

    user: User
    total_hours: float = 0.0
    task_hours: Dict[str, float] = field(default_factory=dict)

    def add(self, task_label: str, hours: float) -> None:
        """Add one normalized entry to the running totals."""
        self.total_hours += hours
        self.task_hours[task_label] = self.task_hours.get(task_label, 0.0) + hours


def aggregate_user_entries(user: User, entries: Iterable[TimeEntry]) -> UserAggregate:
    """Fold one user's entries, in the order supplied, into a UserAggregate.

    A user without entries yields an aggregate with zero hours and no tasks.

    Args:
        user: The workspace member the entries belong to
        entries: That user's entries for the period

    Returns:
        A freshly built UserAggregate
    """
    aggregate = UserAggregate(user=user)
    for entry in entries:
        normalized = normalize_entry(entry)
        aggregate.add(normalized.task_label, normalized.hours)

    logger.debug(
        f"Aggregated {len(aggregate.task_hours)} tasks "
        f"({aggregate.total_hours:.2f}h) for user {user.id}"
    )
    return aggregate


def aggregate_all_users(
    users: List[User],
    entries_by_user: Mapping[str, List[TimeEntry]],
) -> Dict[str, UserAggregate]:
    """Aggregate every user, keyed by user id, preserving user-list order.

    Users missing from ``entries_by_user`` are treated as having no entries.
    """
    aggregates: Dict[str, UserAggregate] = {}
    for user in users:
        entries: Optional[List[TimeEntry]] = entries_by_user.get(user.id)
        aggregates[user.id] = aggregate_user_entries(user, entries or [])

    logger.info(f"Aggregated hours for {len(aggregates)} users")
    return aggregates
