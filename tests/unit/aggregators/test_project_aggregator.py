"""Tests for project-wise aggregation."""

from unittest.mock import Mock

import pytest

from src.aggregators.project_aggregator import (
    UNKNOWN_PROJECT,
    ProjectAggregate,
    ProjectAggregator,
)
from src.models.clockify import User


@pytest.fixture
def lookup():
    names = {"p-1": "Website", "p-2": "Mobile App"}
    return Mock(side_effect=lambda project_id: names[project_id])


class TestProjectAggregator:
    """Test grouping entries by project and user."""

    def test_groups_by_project_in_encounter_order(
        self, lookup, sample_users, sample_entries_by_user
    ):
        projects = ProjectAggregator(lookup).aggregate(
            sample_users, sample_entries_by_user
        )

        assert [p.project_id for p in projects] == ["p-1", "p-2"]
        assert [p.project_name for p in projects] == ["Website", "Mobile App"]

    def test_totals_per_project_and_user(
        self, lookup, sample_users, sample_entries_by_user
    ):
        projects = ProjectAggregator(lookup).aggregate(
            sample_users, sample_entries_by_user
        )
        website = projects[0]

        assert website.total_hours == 2.5
        assert list(website.users) == ["u-ann"]
        assert website.users["u-ann"].task_hours == {"Design": 2.5}
        assert website.users["u-ann"].name == "Ann Lee"

    def test_name_resolved_once_per_project(
        self, lookup, sample_users, sample_entries_by_user
    ):
        ProjectAggregator(lookup).aggregate(sample_users, sample_entries_by_user)

        assert lookup.call_count == 2

    def test_users_without_entries_do_not_appear(
        self, lookup, sample_users, sample_entries_by_user
    ):
        projects = ProjectAggregator(lookup).aggregate(
            sample_users, sample_entries_by_user
        )

        assert all("u-bob" not in p.users for p in projects)

    def test_lookup_failure_falls_back_to_unknown(self, sample_users, entry_factory):
        """Test that a failing lookup does not abort aggregation."""
        failing = Mock(side_effect=RuntimeError("404 Not Found"))
        entries = {
            "u-ann": [
                entry_factory(
                    "2024-10-01T09:00:00Z", "2024-10-01T10:00:00Z", "Design", "p-9"
                )
            ]
        }

        projects = ProjectAggregator(failing).aggregate(sample_users, entries)

        assert projects[0].project_name == UNKNOWN_PROJECT == "Unknown Project"
        assert projects[0].project_id == "p-9"
        assert projects[0].total_hours == 1.0

    def test_empty_name_falls_back_to_unknown(self, sample_users, entry_factory):
        entries = {
            "u-ann": [
                entry_factory("2024-10-01T09:00:00Z", "2024-10-01T10:00:00Z", "A")
            ]
        }

        projects = ProjectAggregator(lambda _: "").aggregate(sample_users, entries)

        assert projects[0].project_name == UNKNOWN_PROJECT

    def test_entries_without_project_skip_lookup(self, sample_users, entry_factory):
        lookup = Mock()
        entries = {
            "u-ann": [
                entry_factory(
                    "2024-10-01T09:00:00Z", "2024-10-01T10:00:00Z", "A", None
                )
            ]
        }

        projects = ProjectAggregator(lookup).aggregate(sample_users, entries)

        lookup.assert_not_called()
        assert projects[0].project_id == ""
        assert projects[0].project_name == UNKNOWN_PROJECT

    def test_project_total_equals_sum_of_users(self, entry_factory):
        users = [User(id="a", name="A"), User(id="b", name="B")]
        entries = {
            "a": [
                entry_factory("2024-10-01T09:00:00Z", "2024-10-01T10:15:00Z", "x"),
                entry_factory("2024-10-01T11:00:00Z", "2024-10-01T11:20:00Z", "y"),
            ],
            "b": [
                entry_factory("2024-10-01T09:00:00Z", "2024-10-01T09:40:00Z", "x"),
            ],
        }

        (project,) = ProjectAggregator(lambda _: "Website").aggregate(users, entries)

        assert list(project.users) == ["a", "b"]
        assert project.total_hours == pytest.approx(
            sum(u.total_hours for u in project.users.values())
        )

    def test_no_entries_gives_no_projects(self, lookup, sample_users):
        assert ProjectAggregator(lookup).aggregate(sample_users, {}) == []


class TestProjectAggregate:
    """Test ProjectAggregate accumulation."""

    def test_add_creates_user_bucket(self):
        project = ProjectAggregate(project_id="p-1", project_name="Website")
        ann = User(id="u-ann", name="Ann Lee")

        project.add(ann, "Design", 1.0)
        project.add(ann, "Design", 0.5)

        assert project.total_hours == 1.5
        assert project.users["u-ann"].task_hours == {"Design": 1.5}
