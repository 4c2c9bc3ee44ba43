"""
Tests for the buyermap CLI.

Run with: pytest tests/test_cli.py -v
"""

from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from buyermap.cli.main import cli
from buyermap.core.config import Config
from buyermap.services.slack_service import SlackResult


@pytest.fixture
def runner():
    return CliRunner()


class TestConfigCheck:
    @patch("buyermap.cli.main.Config.from_env")
    def test_lists_settings(self, mock_from_env, runner):
        mock_from_env.return_value = Config(beta_access_password="x")
        result = runner.invoke(cli, ["config", "check"])
        assert result.exit_code == 0
        assert "✅ BETA_ACCESS_PASSWORD" in result.output
        assert "❌ SLACK_WEBHOOK_URL" in result.output
        assert "Missing required configuration" in result.output


class TestSlackTest:
    @patch("buyermap.cli.main.Config.from_env", return_value=Config())
    def test_not_configured(self, mock_from_env, runner):
        result = runner.invoke(cli, ["slack", "test"])
        assert result.exit_code == 1
        assert "SLACK_WEBHOOK_URL not configured" in result.output

    @patch("buyermap.cli.main.SlackService.send_test_notification", new_callable=AsyncMock)
    def test_success_with_override(self, mock_send, runner):
        mock_send.return_value = SlackResult(success=True, status_code=200)
        result = runner.invoke(cli, ["slack", "test", "--webhook-url", "https://hooks.slack.com/x"])
        assert result.exit_code == 0
        assert "Test notification sent to Slack!" in result.output
        mock_send.assert_awaited_once()

    @patch("buyermap.cli.main.SlackService.send_test_notification", new_callable=AsyncMock)
    def test_failure(self, mock_send, runner):
        mock_send.return_value = SlackResult(success=False, error="Slack API error: 404", status_code=404)
        result = runner.invoke(cli, ["slack", "test", "--webhook-url", "https://hooks.slack.com/x"])
        assert result.exit_code == 1
        assert "Slack API error: 404" in result.output


class TestBetaVerify:
    @patch("buyermap.cli.main.Config.from_env", return_value=Config(beta_access_password="abc123"))
    def test_accepted(self, mock_from_env, runner):
        result = runner.invoke(cli, ["beta", "verify", "--password", "abc123"])
        assert result.exit_code == 0
        assert "Password accepted" in result.output

    @patch("buyermap.cli.main.Config.from_env", return_value=Config(beta_access_password="abc123"))
    def test_rejected(self, mock_from_env, runner):
        result = runner.invoke(cli, ["beta", "verify", "--password", "nope"])
        assert result.exit_code == 1
        assert "Password rejected" in result.output

    @patch("buyermap.cli.main.Config.from_env", return_value=Config())
    def test_not_configured(self, mock_from_env, runner):
        result = runner.invoke(cli, ["beta", "verify", "--password", "abc123"])
        assert result.exit_code == 2
        assert "BETA_ACCESS_PASSWORD not configured" in result.output
