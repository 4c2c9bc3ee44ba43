"""Reusable Streamlit components."""

from .step_indicator import build_step_indicator, render_step_indicator, step_indicator_html
from .upload_placeholder import render_upload_placeholder

__all__ = [
    'build_step_indicator',
    'render_step_indicator',
    'step_indicator_html',
    'render_upload_placeholder',
]
