"""
Services layer for BuyerMap.

Keeps outbound integrations (SlackService), the beta gate
(BetaAccessService) and report logic out of the API and UI layers.
"""

from .models import Quote, BuyerMapAssumption, AlignmentSummary
from .slack_service import SlackService, SlackResult, NewUserSlackContent
from .beta_access_service import BetaAccessService, BetaAccessNotConfigured

__all__ = [
    'Quote',
    'BuyerMapAssumption',
    'AlignmentSummary',
    'SlackService',
    'SlackResult',
    'NewUserSlackContent',
    'BetaAccessService',
    'BetaAccessNotConfigured',
]
