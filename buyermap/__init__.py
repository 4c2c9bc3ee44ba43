"""
BuyerMap - ICP assumption validation against customer interviews

Compares the assumptions in sales materials against interview evidence and
presents an alignment report.
"""

__version__ = "0.1.0"
__author__ = "BuyerMap Team"
