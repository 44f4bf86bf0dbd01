"""Category labels derived from judge score averages."""

from __future__ import annotations

STRONG_VOICE_AND_PRESENTATION = "Strong Voice & Presentation"
STRONG_VOICE_NEEDS_PRESENTATION = "Strong Voice, Needs Presentation"
HIGHLY_CREATIVE = "Highly Creative"
EXCELLENT_PERFORMANCE = "Excellent Performance"
WELL_ROUNDED = "Well-Rounded Talent"
NEEDS_IMPROVEMENT = "Needs Improvement"

STRONG_THRESHOLD = 8.0
SOLID_THRESHOLD = 7.0


def category_labels(
    avg_voice: float,
    avg_creativity: float,
    avg_presentation: float,
) -> list[str]:
    """Return every label that applies, in rule order.

    The rules are independent of each other except the two voice labels,
    which are exclusive. "Needs Improvement" is used only when no other
    rule matched.

    Args:
        avg_voice: Average voice score (0-10).
        avg_creativity: Average creativity score (0-10).
        avg_presentation: Average presentation score (0-10).

    Returns:
        Ordered list of labels, never empty.
    """
    labels: list[str] = []

    if avg_voice >= STRONG_THRESHOLD and avg_presentation >= SOLID_THRESHOLD:
        labels.append(STRONG_VOICE_AND_PRESENTATION)
    elif avg_voice >= STRONG_THRESHOLD:
        labels.append(STRONG_VOICE_NEEDS_PRESENTATION)

    if avg_creativity >= STRONG_THRESHOLD:
        labels.append(HIGHLY_CREATIVE)

    if avg_presentation >= STRONG_THRESHOLD and avg_creativity >= SOLID_THRESHOLD:
        labels.append(EXCELLENT_PERFORMANCE)

    if (
        avg_voice >= SOLID_THRESHOLD
        and avg_creativity >= SOLID_THRESHOLD
        and avg_presentation >= SOLID_THRESHOLD
    ):
        labels.append(WELL_ROUNDED)

    if not labels:
        labels.append(NEEDS_IMPROVEMENT)

    return labels


def generate_category_label(
    avg_voice: float,
    avg_creativity: float,
    avg_presentation: float,
) -> str:
    """Join the applicable category labels with ", "."""
    return ", ".join(category_labels(avg_voice, avg_creativity, avg_presentation))
