"""
Unit tests for BetaAccessService.
"""

import pytest

from buyermap.services.beta_access_service import BetaAccessNotConfigured, BetaAccessService


class TestBetaAccessService:
    def test_matching_password(self):
        assert BetaAccessService("abc123").verify("abc123") is True

    def test_wrong_password(self):
        assert BetaAccessService("abc123").verify("wrong") is False

    def test_comparison_is_exact(self):
        service = BetaAccessService("abc123")
        assert service.verify("ABC123") is False
        assert service.verify("abc123 ") is False
        assert service.verify("") is False

    def test_missing_password_never_matches(self):
        assert BetaAccessService("abc123").verify(None) is False

    def test_unicode_password(self):
        assert BetaAccessService("pässwörd").verify("pässwörd") is True

    @pytest.mark.parametrize("secret", [None, ""])
    def test_not_configured_raises(self, secret):
        service = BetaAccessService(secret)
        assert service.configured is False
        with pytest.raises(BetaAccessNotConfigured):
            service.verify("anything")
