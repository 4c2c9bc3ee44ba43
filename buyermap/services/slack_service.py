"""
SlackService - Send messages to Slack using Incoming Webhooks.

Handles the BuyerMap operator notifications: webhook connectivity tests and
new beta user signups.
"""

import logging
import httpx
from datetime import datetime
from typing import Optional, List
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass
class SlackResult:
    """
    Result of a Slack message send operation.

    ``status_code`` is the upstream HTTP status when Slack answered, and None
    when the request never got a response (not configured, transport error).
    """
    success: bool
    error: Optional[str] = None
    status_code: Optional[int] = None


@dataclass
class NewUserSlackContent:
    """Content for a new beta user signup message."""
    email: str
    user_id: str
    created_at: Optional[datetime] = None


def format_timestamp(value: Optional[datetime] = None) -> str:
    """Local, human-readable timestamp for message bodies."""
    value = value or datetime.now()
    return value.strftime("%m/%d/%Y, %I:%M:%S %p")


def build_test_message(now: Optional[datetime] = None) -> str:
    """Text of the webhook connectivity test notification."""
    return (
        "🧪 *BuyerMap Webhook Test*\n"
        "✅ Webhook endpoint is working!\n"
        f"🕐 Test time: {format_timestamp(now)}"
    )


def build_new_user_message(content: NewUserSlackContent) -> str:
    """Text of the new beta user signup notification."""
    return (
        "🎉 *New BuyerMap Beta User!*\n"
        f"📧 Email: {content.email}\n"
        f"🕐 Signed up: {format_timestamp(content.created_at)}\n"
        f"🆔 User ID: `{content.user_id}`"
    )


class SlackService:
    """
    Service for sending messages to Slack via Incoming Webhooks.

    Each send performs exactly one POST and never retries.

    Example:
        >>> service = SlackService(webhook_url="https://hooks.slack.com/services/...")
        >>> result = await service.send_test_notification()
        >>> print(result.success)
        True
    """

    def __init__(self, webhook_url: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize SlackService.

        Args:
            webhook_url: Slack Incoming Webhook URL (None disables the service)
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._enabled = bool(webhook_url)

        if not self._enabled:
            logger.warning("SLACK_WEBHOOK_URL not configured - SlackService will be disabled")

    @property
    def enabled(self) -> bool:
        """Check if Slack service is enabled (has a webhook URL)."""
        return self._enabled

    async def send_message(
        self,
        text: str,
        blocks: Optional[List[dict]] = None
    ) -> SlackResult:
        """
        Send a message to Slack.

        Args:
            text: Message text (also the notification fallback)
            blocks: Optional Block Kit blocks for rich formatting

        Returns:
            SlackResult with success status or error
        """
        if not self._enabled:
            return SlackResult(
                success=False,
                error="SLACK_WEBHOOK_URL not configured"
            )

        payload = {"text": text}
        if blocks:
            payload["blocks"] = blocks

        try:
            logger.info("Sending Slack message")

            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.webhook_url,
                    json=payload,
                    timeout=self.timeout
                )

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Failed to send Slack message: {e}")
            return SlackResult(success=False, error=str(e))

        if 200 <= response.status_code < 300:
            logger.info("Slack message sent successfully")
            return SlackResult(success=True, status_code=response.status_code)

        error_msg = f"Slack API error: {response.status_code}"
        logger.error(error_msg)
        return SlackResult(
            success=False,
            error=error_msg,
            status_code=response.status_code
        )

    async def send_test_notification(self) -> SlackResult:
        """Send the webhook connectivity test message."""
        return await self.send_message(build_test_message())

    async def send_new_user_notification(self, content: NewUserSlackContent) -> SlackResult:
        """Announce a new beta user signup."""
        logger.info(f"New user signed up: {content.email}")
        return await self.send_message(build_new_user_message(content))
