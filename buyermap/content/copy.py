"""
Display copy for the BuyerMap UI.

All user-facing strings live here, grouped by UI concern. The registry is
built once at import and is read-only: every namespace is a frozen dataclass,
so components read ``CONTENT.tabs.misalignments`` and a typo fails loudly at
the call site instead of rendering a blank label.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class AlignmentScoreCopy:
    label: str = "Overall Alignment Score"
    description: str = "Highly aligned with buyer reality"
    misalignments_found: str = "misalignments found"


@dataclass(frozen=True)
class TabsCopy:
    all_results: str = "All Results"
    misalignments: str = "Misalignments"
    new_insights: str = "New Insights"
    validated: str = "Validated"


@dataclass(frozen=True)
class CompetitiveCopy:
    category: str = "COMPETITIVE POSITIONING"
    recommendation_label: str = "Messaging Recommendation:"
    supporting_evidence_label: str = "Supporting Evidence:"
    insights_validated_suffix: str = "insights validated"


@dataclass(frozen=True)
class StatusCopy:
    misaligned: str = "Misaligned"
    aligned: str = "Aligned"
    validated: str = "Validated"


@dataclass(frozen=True)
class UiCopy:
    show_details: str = "Show Details"
    hide_details: str = "Hide Details"
    expand_details: str = "▼"
    collapse_details: str = "▲"
    back: str = "Back"
    next: str = "Next"
    start_over: str = "Start New Analysis"


@dataclass(frozen=True)
class StepsCopy:
    welcome: str = "Welcome"
    upload: str = "Upload"
    results: str = "Results"
    export: str = "Export"


@dataclass(frozen=True)
class UploadCopy:
    title: str = "Upload Your Materials"
    subtitle: str = "We'll validate your ICP assumptions against interview data"
    deck_heading: str = "Sales Deck / Pitch Materials"
    deck_description: str = "Upload your current sales presentation"
    skip_button: str = "Skip Upload (Demo Mode)"


@dataclass(frozen=True)
class BetaCopy:
    title: str = "BuyerMap"
    subtitle: str = "Private Beta Access"
    password_label: str = "Beta Access Password"
    password_placeholder: str = "Enter beta password"
    submit: str = "Access Beta"
    incorrect_password: str = "Incorrect password. Please try again."
    unavailable: str = "Something went wrong. Please try again."
    contact: str = "Need access? Contact us for a beta invitation."
    logout: str = "Logout"


@dataclass(frozen=True)
class ExportCopy:
    title: str = "Export Your BuyerMap"
    download_csv: str = "Download CSV"
    copy_summary: str = "Summary"
    filename: str = "buyermap-analysis.csv"


@dataclass(frozen=True)
class ContentRegistry:
    """Root of the display copy."""
    headline: str = "Validate Your ICP Assumptions"
    description: str = "Compare your sales messaging against real customer interviews"
    cta_button: str = "Create Your BuyerMap Report"
    free_trial_notice: str = "Free to try • Export or save with account"

    alignment_score: AlignmentScoreCopy = field(default_factory=AlignmentScoreCopy)
    tabs: TabsCopy = field(default_factory=TabsCopy)
    competitive: CompetitiveCopy = field(default_factory=CompetitiveCopy)
    status: StatusCopy = field(default_factory=StatusCopy)
    ui: UiCopy = field(default_factory=UiCopy)
    steps: StepsCopy = field(default_factory=StepsCopy)
    upload: UploadCopy = field(default_factory=UploadCopy)
    beta: BetaCopy = field(default_factory=BetaCopy)
    export: ExportCopy = field(default_factory=ExportCopy)


CONTENT = ContentRegistry()


def content_as_dict() -> Dict[str, Any]:
    """Plain nested dict copy of the registry (safe to hand out or serialize)."""
    return asdict(CONTENT)
