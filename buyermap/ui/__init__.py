"""
BuyerMap UI - Streamlit web interface for the alignment report.

Provides the beta gate, the four-step report flow, and the styling helpers
shared by its components.
"""
