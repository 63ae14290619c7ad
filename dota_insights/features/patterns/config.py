"""
Configuration for performance pattern detection.

This module contains the deviation thresholds, minimum sample sizes,
confidence constants and recommendation templates used by the pattern
detector. All values are fixed; none are fitted to data.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

import structlog

from ...core.enums import PatternCategory, PatternDirection

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CategoryRule:
    """Threshold, sample minimum and confidences of one pattern category."""

    threshold: float
    min_sample: int
    strength_confidence: float
    weakness_confidence: float

    def confidence(self, direction: PatternDirection) -> float:
        if direction is PatternDirection.STRENGTH:
            return self.strength_confidence
        return self.weakness_confidence


# Win-rate deviations are fractions: 0.05 is five percentage points.
# Combat thresholds are absolute values, see COMBAT_THRESHOLDS.
PATTERN_RULES: Dict[PatternCategory, CategoryRule] = {
    PatternCategory.TIMING: CategoryRule(
        threshold=0.05, min_sample=1, strength_confidence=0.8, weakness_confidence=0.8
    ),
    PatternCategory.COMBAT: CategoryRule(
        threshold=0.0, min_sample=1, strength_confidence=0.9, weakness_confidence=0.9
    ),
    PatternCategory.ROLE: CategoryRule(
        threshold=0.10, min_sample=5, strength_confidence=0.9, weakness_confidence=0.8
    ),
    PatternCategory.FORM: CategoryRule(
        threshold=0.10, min_sample=10, strength_confidence=0.7, weakness_confidence=0.7
    ),
    PatternCategory.CONTEXT: CategoryRule(
        threshold=0.10, min_sample=1, strength_confidence=0.8, weakness_confidence=0.8
    ),
}

COMBAT_THRESHOLDS: Dict[str, float] = {
    "max_avg_deaths": 8.0,  # Above this average deaths is a weakness
    "assist_kill_ratio": 1.5,  # Assists above 1.5x kills is a strength
}

TOP_PATTERN_LIMIT = 3

# Deviation rounding before threshold comparison
DEVIATION_PRECISION = 9

TIMING_ORDER: Tuple[str, ...] = ("short", "medium", "long")

# Role templates take the role name as ``{bucket}``
ROLE_BUCKET = "*"

RECOMMENDATIONS: Dict[Tuple[PatternCategory, str, PatternDirection], str] = {
    # Timing
    (PatternCategory.TIMING, "short", PatternDirection.STRENGTH): (
        "Focus on early game aggression and tempo"
    ),
    (PatternCategory.TIMING, "short", PatternDirection.WEAKNESS): (
        "Play safer in the laning phase and prepare for longer games"
    ),
    (PatternCategory.TIMING, "medium", PatternDirection.STRENGTH): (
        "Look to convert mid game item timings into objectives"
    ),
    (PatternCategory.TIMING, "medium", PatternDirection.WEAKNESS): (
        "Work on mid game rotations and objective control"
    ),
    (PatternCategory.TIMING, "long", PatternDirection.STRENGTH): (
        "Draft heroes that scale well into the late game"
    ),
    (PatternCategory.TIMING, "long", PatternDirection.WEAKNESS): (
        "Close out games earlier and avoid drawn-out matches"
    ),
    # Combat
    (PatternCategory.COMBAT, "deaths", PatternDirection.WEAKNESS): (
        "Improve positioning and map awareness to die less"
    ),
    (PatternCategory.COMBAT, "assists", PatternDirection.STRENGTH): (
        "Keep joining team fights and enabling your teammates"
    ),
    # Role
    (PatternCategory.ROLE, ROLE_BUCKET, PatternDirection.STRENGTH): (
        "Prioritize {bucket} heroes in your drafts"
    ),
    (PatternCategory.ROLE, ROLE_BUCKET, PatternDirection.WEAKNESS): (
        "Practice {bucket} heroes in unranked games before ranked"
    ),
    # Form
    (PatternCategory.FORM, "recent", PatternDirection.STRENGTH): (
        "Keep queuing while you are in good form"
    ),
    (PatternCategory.FORM, "recent", PatternDirection.WEAKNESS): (
        "Take a break or review recent replays before queuing again"
    ),
    # Context
    (PatternCategory.CONTEXT, "party", PatternDirection.STRENGTH): (
        "Queue with your party more often"
    ),
    (PatternCategory.CONTEXT, "party", PatternDirection.WEAKNESS): (
        "Improve communication and coordination with your party"
    ),
    (PatternCategory.CONTEXT, "ranked", PatternDirection.STRENGTH): (
        "Your ranked focus is paying off; keep playing ranked"
    ),
    (PatternCategory.CONTEXT, "ranked", PatternDirection.WEAKNESS): (
        "Warm up in unranked games before playing ranked"
    ),
}


def recommendation_for(
    category: PatternCategory, bucket: str, direction: PatternDirection
) -> str:
    """Look up the fixed recommendation for a category/bucket/direction."""
    key_bucket = ROLE_BUCKET if category is PatternCategory.ROLE else bucket
    template = RECOMMENDATIONS[(category, key_bucket, direction)]
    return template.format(bucket=bucket)


def validate_configuration() -> None:
    """
    Validate pattern detection configuration parameters.

    Raises:
        ValueError: If configuration is invalid
    """
    for category, rule in PATTERN_RULES.items():
        for confidence in (rule.strength_confidence, rule.weakness_confidence):
            if not 0.0 <= confidence <= 1.0:
                raise ValueError(
                    f"{category.value} confidence must be between 0.0 and 1.0"
                )
        if rule.min_sample < 1:
            raise ValueError(f"{category.value} min_sample must be positive")
        if rule.threshold < 0:
            raise ValueError(f"{category.value} threshold must be non-negative")

    logger.debug("Pattern configuration validated", categories=len(PATTERN_RULES))


# Validate configuration on import
validate_configuration()
