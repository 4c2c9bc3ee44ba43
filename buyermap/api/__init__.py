"""
BuyerMap API - FastAPI application for the beta gate and webhooks.
"""

__version__ = "0.1.0"
