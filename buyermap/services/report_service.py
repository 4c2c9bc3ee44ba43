"""
ReportService - Alignment rollups, tab filtering and export for a BuyerMap report.
"""

import math
from typing import Iterable, List

import pandas as pd

from .models import AlignmentSummary, BuyerMapAssumption

ALIGNED_OUTCOMES = frozenset({"aligned"})
MISALIGNED_OUTCOMES = frozenset({"misaligned", "challenged"})
NEW_INSIGHT_OUTCOMES = frozenset({"new data added", "refined"})

TAB_ALL = "all"
TAB_MISALIGNMENTS = "misalignments"
TAB_NEW_INSIGHTS = "new_insights"
TAB_VALIDATED = "validated"
TABS = (TAB_ALL, TAB_MISALIGNMENTS, TAB_NEW_INSIGHTS, TAB_VALIDATED)


def _normalize(outcome: str) -> str:
    return (outcome or "").lower()


def calculate_overall_alignment_score(assumptions: Iterable[BuyerMapAssumption]) -> int:
    """
    Mean confidence of the assumptions that have one, rounded half up.

    Assumptions with a confidence of 0 are ignored; an empty report scores 0.
    """
    scores = [a.confidence_score for a in assumptions if a.confidence_score > 0]
    if not scores:
        return 0
    return int(math.floor(sum(scores) / len(scores) + 0.5))


def get_score_message(score: int) -> str:
    """Interpretation shown under the overall score."""
    if score >= 90:
        return "Excellent alignment with ICP!"
    if score >= 75:
        return "Strong alignment, some areas to refine."
    if score >= 50:
        return "Moderate alignment, review key assumptions."
    return "Significant misalignment, revisit ICP assumptions."


def summarize(assumptions: List[BuyerMapAssumption]) -> AlignmentSummary:
    """Build the report rollup."""
    outcomes = [_normalize(a.comparison_outcome) for a in assumptions]
    score = calculate_overall_alignment_score(assumptions)
    return AlignmentSummary(
        overall_score=score,
        total=len(assumptions),
        aligned_count=sum(1 for o in outcomes if o in ALIGNED_OUTCOMES),
        misaligned_count=sum(1 for o in outcomes if o in MISALIGNED_OUTCOMES),
        new_insight_count=sum(1 for o in outcomes if o in NEW_INSIGHT_OUTCOMES),
        score_message=get_score_message(score),
    )


def filter_by_tab(assumptions: List[BuyerMapAssumption], tab: str) -> List[BuyerMapAssumption]:
    """
    Assumptions shown under a results tab.

    Raises:
        ValueError: If the tab is unknown
    """
    if tab == TAB_ALL:
        return list(assumptions)

    wanted = {
        TAB_MISALIGNMENTS: MISALIGNED_OUTCOMES,
        TAB_NEW_INSIGHTS: NEW_INSIGHT_OUTCOMES,
        TAB_VALIDATED: ALIGNED_OUTCOMES,
    }.get(tab)
    if wanted is None:
        raise ValueError(f"Unknown tab: {tab}")

    return [a for a in assumptions if _normalize(a.comparison_outcome) in wanted]


def report_to_dataframe(assumptions: List[BuyerMapAssumption]) -> pd.DataFrame:
    """One row per assumption, in export column order."""
    data = []
    for a in assumptions:
        data.append({
            'ICP Attribute': a.icp_attribute,
            'ICP Theme': a.icp_theme,
            'Your Assumption': a.v1_assumption,
            'Why Assumption': a.why_assumption,
            'Evidence from Deck': a.evidence_from_deck,
            'Reality from Interviews': a.reality_from_interviews or '',
            'Comparison Outcome': a.comparison_outcome,
            'Recommended Adjustments': a.ways_to_adjust_messaging or '',
            'Confidence Score': f"{a.confidence_score}%",
            'Confidence Explanation': a.confidence_explanation,
            'Quotes': len(a.active_quotes),
        })
    return pd.DataFrame(data, columns=[
        'ICP Attribute', 'ICP Theme', 'Your Assumption', 'Why Assumption',
        'Evidence from Deck', 'Reality from Interviews', 'Comparison Outcome',
        'Recommended Adjustments', 'Confidence Score', 'Confidence Explanation',
        'Quotes',
    ])


def report_to_csv(assumptions: List[BuyerMapAssumption]) -> str:
    """CSV export of the report."""
    return report_to_dataframe(assumptions).to_csv(index=False)


def summary_to_text(summary: AlignmentSummary) -> str:
    """Plain-text summary for copy/paste."""
    return (
        "BuyerMap Analysis Summary\n\n"
        f"Overall Alignment Score: {summary.overall_score}%\n"
        f"Score Interpretation: {summary.score_message}\n\n"
        "Analysis Details:\n"
        f"- Total Insights: {summary.total}\n"
        f"- Misalignments: {summary.misaligned_count}\n"
        f"- New Insights: {summary.new_insight_count}\n"
        f"- Validated: {summary.aligned_count}\n"
    )
