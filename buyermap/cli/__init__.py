"""Command-line interface for BuyerMap."""
