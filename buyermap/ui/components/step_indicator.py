"""
Step indicator - numbered markers joined by connectors.

Usage:
    from buyermap.ui.components import render_step_indicator

    render_step_indicator(current_step=st.session_state.step)
"""

import html
from dataclasses import dataclass
from typing import List, Optional, Sequence

import streamlit as st

DEFAULT_TOTAL_STEPS = 4

ACTIVE_BG = "#2563eb"      # blue-600
ACTIVE_TEXT = "#ffffff"
INACTIVE_BG = "#e5e7eb"    # gray-200
INACTIVE_TEXT = "#6b7280"  # gray-500


@dataclass(frozen=True)
class StepMarker:
    index: int
    reached: bool


@dataclass(frozen=True)
class StepConnector:
    """Connector between marker ``index`` and ``index + 1``."""
    index: int
    highlighted: bool


@dataclass(frozen=True)
class StepIndicatorState:
    current_step: int
    total_steps: int
    markers: List[StepMarker]
    connectors: List[StepConnector]


def build_step_indicator(current_step: int, total_steps: int = DEFAULT_TOTAL_STEPS) -> StepIndicatorState:
    """
    Classify every marker and connector for the given progress.

    ``current_step`` is not clamped: 0 leaves every marker unreached and a
    value past ``total_steps`` reaches all of them.

    Raises:
        ValueError: If total_steps < 1
    """
    if total_steps < 1:
        raise ValueError(f"total_steps must be >= 1, got {total_steps}")

    markers = [StepMarker(index=i, reached=current_step >= i) for i in range(1, total_steps + 1)]
    connectors = [StepConnector(index=i, highlighted=current_step > i) for i in range(1, total_steps)]
    return StepIndicatorState(
        current_step=current_step,
        total_steps=total_steps,
        markers=markers,
        connectors=connectors,
    )


def step_indicator_html(
    current_step: int,
    total_steps: int = DEFAULT_TOTAL_STEPS,
    labels: Optional[Sequence[str]] = None
) -> str:
    """Render the indicator as a self-contained HTML fragment."""
    state = build_step_indicator(current_step, total_steps)
    connectors = {c.index: c for c in state.connectors}

    parts = ['<div class="bm-steps" style="display:flex;align-items:center;justify-content:center;margin-bottom:2rem;">']
    for marker in state.markers:
        bg, fg = (ACTIVE_BG, ACTIVE_TEXT) if marker.reached else (INACTIVE_BG, INACTIVE_TEXT)
        title = ""
        if labels and marker.index <= len(labels):
            title = f' title="{html.escape(labels[marker.index - 1], quote=True)}"'
        parts.append(
            f'<div class="bm-step {"bm-step-reached" if marker.reached else "bm-step-pending"}"{title} '
            f'style="width:2.5rem;height:2.5rem;border-radius:9999px;display:flex;align-items:center;'
            f'justify-content:center;font-weight:600;background:{bg};color:{fg};">{marker.index}</div>'
        )
        connector = connectors.get(marker.index)
        if connector is not None:
            color = ACTIVE_BG if connector.highlighted else INACTIVE_BG
            parts.append(
                f'<div class="bm-connector {"bm-connector-active" if connector.highlighted else "bm-connector-pending"}" '
                f'style="width:4rem;height:0.25rem;margin:0 0.5rem;background:{color};"></div>'
            )
    parts.append('</div>')
    return "".join(parts)


def render_step_indicator(
    current_step: int,
    total_steps: int = DEFAULT_TOTAL_STEPS,
    labels: Optional[Sequence[str]] = None
) -> None:
    """Draw the step indicator on the current Streamlit page."""
    st.markdown(step_indicator_html(current_step, total_steps, labels), unsafe_allow_html=True)
