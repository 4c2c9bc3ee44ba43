"""
Pydantic models for BuyerMap report data.

These models describe:
- Interview evidence (Quote)
- A single ICP assumption compared against that evidence (BuyerMapAssumption)
- Report-level rollups (AlignmentSummary)
"""

from pydantic import BaseModel, Field
from typing import List, Optional


# ============================================================================
# Report Data Models
# ============================================================================

class Quote(BaseModel):
    """A supporting quote taken from a customer interview."""
    id: str = Field(..., description="Quote ID")
    text: str = Field(..., description="Quoted text")
    speaker: str = Field(..., description="Who said it")
    role: str = Field(default="", description="Speaker's job title")
    source: str = Field(default="", description="Interview the quote came from")
    rejected: bool = Field(default=False, description="Excluded by the reviewer")


class BuyerMapAssumption(BaseModel):
    """
    One ICP assumption from the sales materials and how it held up.

    ``comparison_outcome`` is the outcome label shown on the card
    ("Aligned", "Misaligned", "New Data Added", "Refined", "Challenged").
    """
    id: int = Field(..., description="Assumption ID")
    icp_attribute: str = Field(..., description="ICP attribute, e.g. 'Buyer Titles'")
    icp_theme: str = Field(default="", description="Theme grouping, e.g. 'WHO'")
    v1_assumption: str = Field(..., description="Assumption as stated in the deck")
    why_assumption: str = Field(default="", description="Why the assumption was made")
    evidence_from_deck: str = Field(default="", description="Where the deck states it")
    reality_from_interviews: Optional[str] = Field(None, description="What interviews showed")
    comparison_outcome: str = Field(..., description="Outcome label")
    ways_to_adjust_messaging: Optional[str] = Field(None, description="Messaging recommendation")
    confidence_score: int = Field(default=0, ge=0, le=100, description="Confidence 0-100")
    confidence_explanation: str = Field(default="", description="Why that confidence")
    quotes: List[Quote] = Field(default_factory=list, description="Supporting quotes")

    @property
    def active_quotes(self) -> List[Quote]:
        """Quotes that have not been rejected."""
        return [q for q in self.quotes if not q.rejected]


class AlignmentSummary(BaseModel):
    """Rollup of a BuyerMap report."""
    overall_score: int = Field(..., ge=0, le=100, description="Overall alignment score (%)")
    total: int = Field(..., ge=0, description="Number of assumptions")
    aligned_count: int = Field(default=0, ge=0)
    misaligned_count: int = Field(default=0, ge=0)
    new_insight_count: int = Field(default=0, ge=0)
    score_message: str = Field(default="", description="Human-readable interpretation")
