"""
Streamlit UI - BuyerMap report flow.

Walks the user through four steps:
1. Welcome - what BuyerMap does
2. Upload - sales materials (demo mode skips straight to results)
3. Results - assumptions compared against interview evidence, by tab
4. Export - CSV download and a plain-text summary

Run with:
    streamlit run buyermap/ui/app.py

Environment variables:
    BETA_ACCESS_PASSWORD: Beta gate password
    LOGFIRE_TOKEN: (optional) Logfire write token
"""

import html
import logging

import streamlit as st

from buyermap.content import CONTENT
from buyermap.core.observability import setup_logfire, setup_logging
from buyermap.services.demo_data import get_demo_assumptions
from buyermap.services.models import BuyerMapAssumption
from buyermap.services.report_service import (
    TAB_ALL,
    TAB_MISALIGNMENTS,
    TAB_NEW_INSIGHTS,
    TAB_VALIDATED,
    filter_by_tab,
    report_to_csv,
    summarize,
    summary_to_text,
)
from buyermap.ui.auth import require_beta_access
from buyermap.ui.components import render_step_indicator, render_upload_placeholder
from buyermap.ui.styles import get_attribute_style, get_outcome_icon, get_outcome_styles, get_role_style

logger = logging.getLogger(__name__)

STEP_WELCOME = 1
STEP_UPLOAD = 2
STEP_RESULTS = 3
STEP_EXPORT = 4
STEP_LABELS = [CONTENT.steps.welcome, CONTENT.steps.upload, CONTENT.steps.results, CONTENT.steps.export]


@st.cache_resource
def init_observability():
    """Initialize logging and Logfire once per process (Streamlit-compatible)."""
    setup_logging()
    return setup_logfire(service_name="buyermap-ui")


# ============================================================================
# Session state
# ============================================================================

def init_session_state():
    if "step" not in st.session_state:
        st.session_state.step = STEP_WELCOME
    if "assumptions" not in st.session_state:
        st.session_state.assumptions = []


def go_to(step: int):
    st.session_state.step = step


def complete_upload():
    """Upload step finished (demo mode): load the demo report."""
    logger.info("Upload skipped, loading demo report")
    st.session_state.assumptions = get_demo_assumptions()
    st.session_state.step = STEP_RESULTS


def start_over():
    st.session_state.assumptions = []
    st.session_state.step = STEP_WELCOME


# ============================================================================
# Rendering
# ============================================================================

def render_welcome():
    st.title(CONTENT.headline)
    st.write(CONTENT.description)
    st.button(CONTENT.cta_button, type="primary", on_click=go_to, args=(STEP_UPLOAD,))
    st.caption(CONTENT.free_trial_notice)


def render_outcome_badge(outcome: str) -> str:
    style = get_outcome_styles(outcome)
    return (
        f'<span style="color:{style.text_color};background:{style.bg_color};'
        f'border:1px solid {style.border_color};border-radius:9999px;padding:2px 10px;font-size:0.85rem;">'
        f'<span style="color:{style.icon_color};">{get_outcome_icon(outcome)}</span> {html.escape(outcome)}</span>'
    )


def render_assumption_card(assumption: BuyerMapAssumption):
    attr_style = get_attribute_style(assumption.icp_attribute)
    outcome_style = get_outcome_styles(assumption.comparison_outcome)

    st.markdown(
        f'<div style="border-left:4px solid {outcome_style.border_color};padding:0.25rem 0.75rem;margin-top:1rem;">'
        f'<span style="background:{attr_style.bg_color};color:{attr_style.icon_color};border-radius:6px;padding:2px 6px;">'
        f'{attr_style.icon}</span> '
        f'<strong style="color:{attr_style.title_color};">{html.escape(assumption.icp_attribute)}</strong> '
        f'{render_outcome_badge(assumption.comparison_outcome)}'
        f'<span style="float:right;color:#6b7280;">{assumption.confidence_score}%</span></div>',
        unsafe_allow_html=True
    )
    st.write(assumption.v1_assumption)

    with st.expander(CONTENT.ui.show_details):
        if assumption.reality_from_interviews:
            st.markdown(f"**Reality from interviews:** {assumption.reality_from_interviews}")
        if assumption.ways_to_adjust_messaging:
            st.markdown(f"**{CONTENT.competitive.recommendation_label}** {assumption.ways_to_adjust_messaging}")
        st.caption(assumption.confidence_explanation)

        quotes = assumption.active_quotes
        if quotes:
            st.markdown(f"**{CONTENT.competitive.supporting_evidence_label}**")
            for quote in quotes:
                role_style = get_role_style(quote.role)
                st.markdown(
                    f'> "{html.escape(quote.text)}"<br/>'
                    f'— {html.escape(quote.speaker)} '
                    f'<span style="background:{role_style.bg_color};color:{role_style.text_color};'
                    f'border-radius:6px;padding:1px 6px;font-size:0.8rem;">{html.escape(quote.role)}</span> '
                    f'<span style="color:#9ca3af;">{html.escape(quote.source)}</span>',
                    unsafe_allow_html=True
                )


def render_results():
    assumptions = st.session_state.assumptions
    summary = summarize(assumptions)

    col1, col2 = st.columns([1, 2])
    with col1:
        st.metric(CONTENT.alignment_score.label, f"{summary.overall_score}%")
    with col2:
        st.write(summary.score_message)
        st.caption(f"{summary.misaligned_count} {CONTENT.alignment_score.misalignments_found}")

    tab_keys = [TAB_ALL, TAB_MISALIGNMENTS, TAB_NEW_INSIGHTS, TAB_VALIDATED]
    tab_labels = [
        CONTENT.tabs.all_results,
        CONTENT.tabs.misalignments,
        CONTENT.tabs.new_insights,
        CONTENT.tabs.validated,
    ]
    for tab, key in zip(st.tabs(tab_labels), tab_keys):
        with tab:
            for assumption in filter_by_tab(assumptions, key):
                render_assumption_card(assumption)

    col_back, col_next = st.columns(2)
    with col_back:
        st.button(CONTENT.ui.back, on_click=go_to, args=(STEP_UPLOAD,), key="results_back")
    with col_next:
        st.button(CONTENT.ui.next, type="primary", on_click=go_to, args=(STEP_EXPORT,), key="results_next")


def render_export():
    assumptions = st.session_state.assumptions
    summary = summarize(assumptions)

    st.markdown(f"## {CONTENT.export.title}")
    st.download_button(
        CONTENT.export.download_csv,
        data=report_to_csv(assumptions),
        file_name=CONTENT.export.filename,
        mime="text/csv",
        type="primary"
    )
    st.markdown(f"**{CONTENT.export.copy_summary}**")
    st.code(summary_to_text(summary), language=None)

    col_back, col_new = st.columns(2)
    with col_back:
        st.button(CONTENT.ui.back, on_click=go_to, args=(STEP_RESULTS,), key="export_back")
    with col_new:
        st.button(CONTENT.ui.start_over, on_click=start_over, key="export_start_over")


def main():
    st.set_page_config(page_title="BuyerMap", page_icon="🗺️", layout="centered")
    init_observability()
    require_beta_access()
    init_session_state()

    render_step_indicator(st.session_state.step, total_steps=len(STEP_LABELS), labels=STEP_LABELS)

    step = st.session_state.step
    if step == STEP_WELCOME:
        render_welcome()
    elif step == STEP_UPLOAD:
        render_upload_placeholder(on_complete=complete_upload)
    elif step == STEP_RESULTS:
        render_results()
    else:
        render_export()


if __name__ == "__main__":
    main()
