"""
Demo report shown when the user skips the upload step.
"""

from typing import List

from .models import BuyerMapAssumption, Quote


def get_demo_assumptions() -> List[BuyerMapAssumption]:
    """Return a fresh copy of the demo report's assumptions."""
    return [
        BuyerMapAssumption(
            id=1,
            icp_attribute="Buyer Titles",
            icp_theme="WHO",
            v1_assumption="Our ideal customer is a VP of Engineering or CTO at a mid-size tech company",
            why_assumption="These decision makers have budget authority and technical understanding",
            evidence_from_deck="Slide 3 shows our target as 'VP Engineering/CTO at 100-500 person companies'",
            reality_from_interviews=(
                "Most successful customers are actually Engineering Directors or Senior "
                "Engineering Managers, not VPs or CTOs"
            ),
            comparison_outcome="Misaligned",
            ways_to_adjust_messaging=(
                "Focus messaging on Engineering Directors and Senior Managers, emphasize "
                "team-level decision making rather than executive-level"
            ),
            confidence_score=85,
            confidence_explanation=(
                "Strong evidence from 8 customer interviews showing consistent patterns "
                "in actual buyer titles"
            ),
            quotes=[
                Quote(
                    id="q1",
                    text="I'm an Engineering Director, not a VP. I make the final call on tools for my team.",
                    speaker="Sarah Chen",
                    role="Engineering Director",
                    source="Interview 3",
                ),
                Quote(
                    id="q2",
                    text="The VP is involved in budget approval, but I'm the one who evaluates and recommends tools.",
                    speaker="Mike Rodriguez",
                    role="Senior Engineering Manager",
                    source="Interview 7",
                ),
            ],
        ),
        BuyerMapAssumption(
            id=2,
            icp_attribute="Company Size",
            icp_theme="WHO",
            v1_assumption="Target companies with 100-500 employees",
            why_assumption="Large enough to have budget but small enough to be agile",
            evidence_from_deck="Slide 4 mentions 'mid-market companies (100-500 employees)'",
            reality_from_interviews=(
                "Our best customers are actually 50-200 employees, with some successful "
                "cases at 20-50 person startups"
            ),
            comparison_outcome="Refined",
            ways_to_adjust_messaging=(
                "Adjust target to 50-200 employees, emphasize benefits for growing "
                "companies and early-stage startups"
            ),
            confidence_score=92,
            confidence_explanation="Clear pattern across 12 interviews showing optimal company size range",
            quotes=[
                Quote(
                    id="q3",
                    text=(
                        "We're 75 people and this is perfect for our scale. I don't think it "
                        "would work as well at a 500-person company."
                    ),
                    speaker="Alex Thompson",
                    role="CTO",
                    source="Interview 1",
                ),
            ],
        ),
        BuyerMapAssumption(
            id=3,
            icp_attribute="Pain Points",
            icp_theme="WHAT",
            v1_assumption="Main challenges are slow development cycles and poor code quality",
            why_assumption="Common problems in growing engineering teams",
            evidence_from_deck="Slide 5 highlights development bottlenecks and quality issues",
            reality_from_interviews=(
                "Pain points are more about coordination and communication than pure "
                "technical issues"
            ),
            comparison_outcome="Refined",
            ways_to_adjust_messaging=(
                "Emphasize team coordination and communication benefits over just "
                "technical features"
            ),
            confidence_score=78,
            confidence_explanation="Consistent feedback across 6 interviews about coordination challenges",
            quotes=[
                Quote(
                    id="q4",
                    text=(
                        "The biggest issue isn't the code itself, it's making sure everyone "
                        "is aligned on what we're building."
                    ),
                    speaker="Maria Garcia",
                    role="Engineering Manager",
                    source="Interview 4",
                ),
            ],
        ),
        BuyerMapAssumption(
            id=4,
            icp_attribute="Desired Outcomes",
            icp_theme="WHY",
            v1_assumption="Teams want to ship features faster",
            why_assumption="Speed is the most common request in sales calls",
            evidence_from_deck="Slide 6 leads with '2x faster delivery'",
            reality_from_interviews="Interviewees consistently ranked delivery speed as their top goal",
            comparison_outcome="Aligned",
            ways_to_adjust_messaging="Keep speed as the headline benefit",
            confidence_score=88,
            confidence_explanation="Speed was the first outcome named in 7 of 9 interviews",
            quotes=[
                Quote(
                    id="q5",
                    text="If it doesn't make us ship faster, it's not worth the switch.",
                    speaker="Priya Patel",
                    role="Head of Operations",
                    source="Interview 2",
                ),
            ],
        ),
        BuyerMapAssumption(
            id=5,
            icp_attribute="Buying Triggers",
            icp_theme="WHEN",
            v1_assumption="Teams buy after a failed release",
            why_assumption="Incidents create urgency for process change",
            evidence_from_deck="Slide 8 references post-incident reviews",
            reality_from_interviews="Most evaluations started when a new engineering leader joined",
            comparison_outcome="New Data Added",
            ways_to_adjust_messaging="Target outreach at newly hired engineering leaders",
            confidence_score=64,
            confidence_explanation="Observed in 4 interviews; not yet a dominant pattern",
            quotes=[
                Quote(
                    id="q6",
                    text="When I joined, the first thing I did was review every tool we paid for.",
                    speaker="Daniel Kim",
                    role="VP Engineering",
                    source="Interview 5",
                ),
            ],
        ),
    ]
