"""
Tests for the BuyerMap API gate endpoints.

Configuration is injected through dependency overrides and httpx.AsyncClient
is mocked, so no environment variables or real Slack calls are needed.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
from fastapi.testclient import TestClient

from buyermap.api.app import app
from buyermap.core.config import Config, get_config

WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def use_config(**kwargs):
    app.dependency_overrides[get_config] = lambda: Config(**kwargs)


def mock_slack(status_code=200, side_effect=None):
    mock_response = MagicMock()
    mock_response.status_code = status_code

    mock_client = AsyncMock()
    if side_effect is not None:
        mock_client.post.side_effect = side_effect
    else:
        mock_client.post.return_value = mock_response
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return patch("buyermap.services.slack_service.httpx.AsyncClient", return_value=mock_client), mock_client


# ============================================================================
# POST /api/auth/verify-beta-password
# ============================================================================

class TestVerifyBetaPassword:
    URL = "/api/auth/verify-beta-password"

    def test_correct_password(self, client):
        use_config(beta_access_password="abc123")
        response = client.post(self.URL, json={"password": "abc123"})
        assert response.status_code == 200
        assert response.json() == {"success": True}

    def test_wrong_password(self, client):
        use_config(beta_access_password="abc123")
        response = client.post(self.URL, json={"password": "wrong"})
        assert response.status_code == 200
        assert response.json() == {"success": False}

    def test_missing_password_field(self, client):
        use_config(beta_access_password="abc123")
        response = client.post(self.URL, json={})
        assert response.status_code == 200
        assert response.json() == {"success": False}

    def test_secret_not_configured(self, client):
        use_config(beta_access_password=None)
        response = client.post(self.URL, json={"password": "abc123"})
        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Server configuration error"}

    def test_malformed_json(self, client):
        use_config(beta_access_password="abc123")
        response = client.post(
            self.URL,
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}

    @pytest.mark.parametrize("body", [[], None, {"password": 123}])
    def test_body_failing_validation(self, client, body):
        use_config(beta_access_password="abc123")
        response = client.post(self.URL, json=body)
        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Internal server error"}


# ============================================================================
# GET /api/auth/webhook/test
# ============================================================================

class TestWebhookTest:
    URL = "/api/auth/webhook/test"

    def test_url_not_configured(self, client):
        use_config(slack_webhook_url=None)
        response = client.get(self.URL)
        assert response.status_code == 500
        assert response.json() == {"error": "SLACK_WEBHOOK_URL not configured"}

    def test_success(self, client):
        use_config(slack_webhook_url=WEBHOOK_URL)
        patcher, mock_client = mock_slack(200)
        with patcher:
            response = client.get(self.URL)

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Test notification sent to Slack!"}
        mock_client.post.assert_awaited_once()
        args, kwargs = mock_client.post.call_args
        assert args[0] == WEBHOOK_URL
        assert "BuyerMap Webhook Test" in kwargs["json"]["text"]

    def test_upstream_rejects(self, client):
        use_config(slack_webhook_url=WEBHOOK_URL)
        patcher, _ = mock_slack(404)
        with patcher:
            response = client.get(self.URL)

        assert response.status_code == 500
        assert response.json() == {"error": "Slack API error: 404"}

    def test_transport_failure(self, client):
        use_config(slack_webhook_url=WEBHOOK_URL)
        patcher, _ = mock_slack(side_effect=httpx.ConnectError("boom"))
        with patcher:
            response = client.get(self.URL)

        assert response.status_code == 500
        assert response.json() == {"error": "Test failed"}

    def test_unexpected_failure(self, client):
        use_config(slack_webhook_url=WEBHOOK_URL)
        with patch(
            "buyermap.api.app.SlackService.send_test_notification",
            side_effect=RuntimeError("unexpected"),
        ):
            response = client.get(self.URL)

        assert response.status_code == 500
        assert response.json() == {"error": "Test failed"}


# ============================================================================
# POST /api/auth/webhook
# ============================================================================

class TestSupabaseWebhook:
    URL = "/api/auth/webhook"

    def signup_payload(self):
        return {
            "type": "INSERT",
            "table": "users",
            "schema": "auth",
            "record": {
                "id": "user-123",
                "email": "jane@example.com",
                "created_at": "2025-01-02T09:00:00+00:00",
            },
            "old_record": None,
        }

    def test_signup_sends_notification(self, client):
        use_config(slack_webhook_url=WEBHOOK_URL)
        patcher, mock_client = mock_slack(200)
        with patcher:
            response = client.post(self.URL, json=self.signup_payload())

        assert response.status_code == 200
        assert response.json() == {"success": True}
        text = mock_client.post.call_args.kwargs["json"]["text"]
        assert "jane@example.com" in text
        assert "`user-123`" in text

    def test_other_events_ignored(self, client):
        use_config(slack_webhook_url=WEBHOOK_URL)
        payload = self.signup_payload()
        payload["type"] = "UPDATE"
        patcher, mock_client = mock_slack(200)
        with patcher:
            response = client.post(self.URL, json=payload)

        assert response.status_code == 200
        mock_client.post.assert_not_called()

    def test_slack_failure_does_not_fail_webhook(self, client):
        use_config(slack_webhook_url=WEBHOOK_URL)
        patcher, _ = mock_slack(500)
        with patcher:
            response = client.post(self.URL, json=self.signup_payload())

        assert response.status_code == 200
        assert response.json() == {"success": True}

    def test_slack_not_configured_still_acknowledges(self, client):
        use_config(slack_webhook_url=None)
        response = client.post(self.URL, json=self.signup_payload())
        assert response.status_code == 200

    def test_invalid_body(self, client):
        use_config(slack_webhook_url=WEBHOOK_URL)
        response = client.post(self.URL, json={"table": "users"})
        assert response.status_code == 500
        assert response.json() == {"error": "Webhook processing failed"}


# ============================================================================
# System endpoints
# ============================================================================

class TestSystemEndpoints:
    def test_health_degraded_without_beta_password(self, client):
        use_config()
        data = client.get("/health").json()
        assert data["status"] == "degraded"
        assert data["services"]["beta_gate"] == "not_configured"

    def test_health_healthy(self, client):
        use_config(beta_access_password="abc123", slack_webhook_url=WEBHOOK_URL)
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["services"]["slack"] == "configured"

    def test_content(self, client):
        data = client.get("/api/content").json()
        assert data["tabs"]["all_results"] == "All Results"
        assert data["headline"] == "Validate Your ICP Assumptions"

    def test_root_lists_endpoints(self, client):
        data = client.get("/").json()
        assert data["endpoints"]["verify_beta_password"] == "/api/auth/verify-beta-password"
