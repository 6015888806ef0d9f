"""Unit tests for list-users command."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from src.cli.commands.list import list_users
from src.exceptions import UpstreamFetchError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_service():
    with patch("src.cli.commands.list.ClockifyService") as mock_cls:
        yield mock_cls.return_value.__enter__.return_value


class TestListUsersCommand:
    """Test suite for list-users command."""

    def test_lists_users(self, runner, test_config, mock_service, sample_users):
        mock_service.list_users.return_value = sample_users

        result = runner.invoke(list_users, [])

        assert result.exit_code == 0, result.output
        mock_service.list_users.assert_called_once_with("test-workspace")
        assert "Ann Lee" in result.output
        assert "bob@example.com" in result.output
        assert "Total: 2 users" in result.output

    def test_no_users(self, runner, test_config, mock_service):
        mock_service.list_users.return_value = []

        result = runner.invoke(list_users, [])

        assert result.exit_code == 0
        assert "No users found in workspace" in result.output

    def test_missing_credentials(self, runner, mock_env, monkeypatch, mock_service):
        monkeypatch.delenv("CLOCKIFY_API_KEY")

        with patch("src.config.settings.load_dotenv"):
            result = runner.invoke(list_users, [])

        assert result.exit_code == 1
        assert "CLOCKIFY_API_KEY" in result.output
        mock_service.list_users.assert_not_called()

    def test_upstream_failure(self, runner, test_config, mock_service):
        mock_service.list_users.side_effect = UpstreamFetchError("401 Unauthorized")

        result = runner.invoke(list_users, [])

        assert result.exit_code == 2
        assert "401 Unauthorized" in result.output
