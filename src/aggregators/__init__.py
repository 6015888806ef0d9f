"""Aggregators module for folding time entries into report totals.

This module provides per-user and per-project aggregation of Clockify time
entries for a single report run.
"""

from src.aggregators.project_aggregator import (
    UNKNOWN_PROJECT,
    ProjectAggregate,
    ProjectAggregator,
    ProjectUserHours,
)
from src.aggregators.user_aggregator import (
    UserAggregate,
    aggregate_all_users,
    aggregate_user_entries,
)

__all__ = [
    "UNKNOWN_PROJECT",
    "ProjectAggregate",
    "ProjectAggregator",
    "ProjectUserHours",
    "UserAggregate",
    "aggregate_all_users",
    "aggregate_user_entries",
]
