"""Styling helpers for outcome cards, role badges and ICP attributes.

Every resolver here is total: unrecognized or missing input falls through to
a neutral gray style rather than raising.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OutcomeStyle:
    """Colors for an outcome badge/card."""
    text_color: str
    bg_color: str
    border_color: str
    icon_color: str


@dataclass(frozen=True)
class BadgeStyle:
    bg_color: str
    text_color: str


@dataclass(frozen=True)
class AttributeStyle:
    icon: str
    bg_color: str
    icon_color: str
    title_color: str


# ============================================================================
# Outcome styles
# ============================================================================

ALIGNED_STYLE = OutcomeStyle(
    text_color="rgb(21, 128, 61)",      # green-700
    bg_color="rgb(240, 253, 244)",      # green-50
    border_color="rgb(34, 197, 94)",    # green-500
    icon_color="rgb(34, 197, 94)",
)

MISALIGNED_STYLE = OutcomeStyle(
    text_color="rgb(185, 28, 28)",      # red-700
    bg_color="rgb(254, 242, 242)",      # red-50
    border_color="rgb(239, 68, 68)",    # red-500
    icon_color="rgb(239, 68, 68)",
)

# Shared by "new data added" and "refined"
INFORMATIONAL_STYLE = OutcomeStyle(
    text_color="rgb(29, 78, 216)",      # blue-700
    bg_color="rgb(239, 246, 255)",      # blue-50
    border_color="rgb(59, 130, 246)",   # blue-500
    icon_color="rgb(59, 130, 246)",
)

CHALLENGED_STYLE = OutcomeStyle(
    text_color="rgb(194, 65, 12)",      # orange-700
    bg_color="rgb(255, 247, 237)",      # orange-50
    border_color="rgb(249, 115, 22)",   # orange-500
    icon_color="rgb(249, 115, 22)",
)

DEFAULT_OUTCOME_STYLE = OutcomeStyle(
    text_color="rgb(55, 65, 81)",       # gray-700
    bg_color="rgb(249, 250, 251)",      # gray-50
    border_color="rgb(107, 114, 128)",  # gray-500
    icon_color="rgb(107, 114, 128)",
)

OUTCOME_STYLES = {
    "aligned": ALIGNED_STYLE,
    "misaligned": MISALIGNED_STYLE,
    "new data added": INFORMATIONAL_STYLE,
    "refined": INFORMATIONAL_STYLE,
    "challenged": CHALLENGED_STYLE,
}

OUTCOME_ICONS = {
    "aligned": "✅",
    "misaligned": "❌",
    "challenged": "❌",
    "new data added": "➕",
    "refined": "ℹ️",
}
DEFAULT_OUTCOME_ICON = "ℹ️"


def _key(label: Optional[str]) -> str:
    return (label or "").lower()


def get_outcome_styles(outcome: Optional[str]) -> OutcomeStyle:
    """Style for an outcome label, case-insensitive, gray when unrecognized."""
    return OUTCOME_STYLES.get(_key(outcome), DEFAULT_OUTCOME_STYLE)


def get_outcome_icon(outcome: Optional[str]) -> str:
    """Icon for an outcome label."""
    return OUTCOME_ICONS.get(_key(outcome), DEFAULT_OUTCOME_ICON)


# ============================================================================
# Role badges
# ============================================================================

ROLE_STYLES = {
    "paralegal": BadgeStyle(bg_color="rgb(243, 232, 255)", text_color="rgb(126, 34, 206)"),
    "attorney": BadgeStyle(bg_color="rgb(219, 234, 254)", text_color="rgb(29, 78, 216)"),
    "operations": BadgeStyle(bg_color="rgb(220, 252, 231)", text_color="rgb(21, 128, 61)"),
}
DEFAULT_ROLE_STYLE = BadgeStyle(bg_color="rgb(243, 244, 246)", text_color="rgb(55, 65, 81)")


def get_role_badge(speaker: Optional[str]) -> Optional[str]:
    """Detect a role badge from a speaker/role string."""
    if not speaker:
        return None
    text = speaker.lower()
    if "paralegal" in text:
        return "paralegal"
    if "attorney" in text:
        return "attorney"
    if "ops" in text or "operations" in text:
        return "operations"
    return None


def get_role_style(speaker: Optional[str]) -> BadgeStyle:
    return ROLE_STYLES.get(get_role_badge(speaker), DEFAULT_ROLE_STYLE)


# ============================================================================
# ICP attribute styles
# ============================================================================

# Checked in order; first substring match wins
ATTRIBUTE_STYLES = (
    ("buyer title", AttributeStyle("👥", "rgb(219, 234, 254)", "rgb(37, 99, 235)", "rgb(30, 64, 175)")),
    ("company size", AttributeStyle("🏢", "rgb(243, 232, 255)", "rgb(147, 51, 234)", "rgb(107, 33, 168)")),
    ("pain point", AttributeStyle("⚠️", "rgb(254, 226, 226)", "rgb(220, 38, 38)", "rgb(153, 27, 27)")),
    ("desired outcome", AttributeStyle("🏆", "rgb(220, 252, 231)", "rgb(22, 163, 74)", "rgb(22, 101, 52)")),
    ("trigger", AttributeStyle("⚡", "rgb(255, 237, 213)", "rgb(234, 88, 12)", "rgb(154, 52, 18)")),
    ("messaging emphasis", AttributeStyle("💬", "rgb(204, 251, 241)", "rgb(13, 148, 136)", "rgb(17, 94, 89)")),
    ("barrier", AttributeStyle("🛡️", "rgb(224, 231, 255)", "rgb(79, 70, 229)", "rgb(55, 48, 163)")),
)
DEFAULT_ATTRIBUTE_STYLE = AttributeStyle("💬", "rgb(243, 244, 246)", "rgb(75, 85, 99)", "rgb(31, 41, 55)")


def get_attribute_style(attribute: Optional[str]) -> AttributeStyle:
    """Icon and colors for an ICP attribute name."""
    name = _key(attribute)
    for needle, style in ATTRIBUTE_STYLES:
        if needle in name:
            return style
    return DEFAULT_ATTRIBUTE_STYLE
