"""
BetaAccessService - Shared-secret gate for the private beta.

The configured password is compared to the submitted one as-is: no hashing,
no rate limiting, no expiry.
"""

import hmac
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class BetaAccessNotConfigured(Exception):
    """Raised when no beta access password is configured."""


class BetaAccessService:
    """
    Verifies beta access passwords.

    Example:
        >>> service = BetaAccessService(secret="abc123")
        >>> service.verify("abc123")
        True
    """

    def __init__(self, secret: Optional[str]):
        self.secret = secret

    @property
    def configured(self) -> bool:
        return bool(self.secret)

    def verify(self, password: Optional[str]) -> bool:
        """
        Check a submitted password against the configured secret.

        Args:
            password: Submitted password (None never matches)

        Returns:
            True if the password matches exactly

        Raises:
            BetaAccessNotConfigured: If no secret is configured
        """
        if not self.configured:
            logger.error("BETA_ACCESS_PASSWORD not set in environment variables")
            raise BetaAccessNotConfigured("BETA_ACCESS_PASSWORD not configured")

        if password is None:
            return False

        return hmac.compare_digest(password.encode("utf-8"), self.secret.encode("utf-8"))
