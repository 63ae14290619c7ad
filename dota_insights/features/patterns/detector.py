"""
Pattern detector for player performance profiles.

Compares bucket win rates against a baseline and emits strength/weakness
patterns with fixed confidences. Patterns are generated in a fixed order:
timing, combat, roles (best win rate first), form, then context.
"""

from typing import List, Optional

import structlog

from ...core.enums import PatternCategory, PatternDirection
from ...utils.statistics import top_n
from ..stats.schemas import BucketStats, PerformanceProfile
from .config import (
    COMBAT_THRESHOLDS,
    DEVIATION_PRECISION,
    PATTERN_RULES,
    TIMING_ORDER,
    TOP_PATTERN_LIMIT,
    recommendation_for,
)
from .schemas import Pattern, PatternReport

logger = structlog.get_logger(__name__)


def classify_deviation(
    subject: float, baseline: float, threshold: float
) -> Optional[PatternDirection]:
    """
    Classify a win-rate deviation against a threshold.

    The boundary is exclusive: a deviation of exactly ``threshold`` is not a
    pattern.

    :param subject: Win rate of the bucket under test
    :param baseline: Win rate it is compared to
    :param threshold: Minimum absolute deviation, exclusive
    :returns: STRENGTH, WEAKNESS or None
    """
    deviation = round(subject - baseline, DEVIATION_PRECISION)
    if deviation > threshold:
        return PatternDirection.STRENGTH
    if deviation < -threshold:
        return PatternDirection.WEAKNESS
    return None


class PatternDetector:
    """Detects categorized strength and weakness patterns in a profile."""

    def _pattern(
        self,
        category: PatternCategory,
        direction: PatternDirection,
        bucket: str,
        description: str,
        sample_size: int,
    ) -> Pattern:
        rule = PATTERN_RULES[category]
        return Pattern(
            category=category,
            direction=direction,
            bucket=bucket,
            description=description,
            confidence=rule.confidence(direction),
            sample_size=sample_size,
            recommendation=recommendation_for(category, bucket, direction),
        )

    def _against_baseline(
        self,
        category: PatternCategory,
        bucket: BucketStats,
        baseline: BucketStats,
        subject: str,
    ) -> Optional[Pattern]:
        rule = PATTERN_RULES[category]
        if bucket.games < rule.min_sample or bucket.win_rate is None:
            return None
        if baseline.win_rate is None:
            return None

        direction = classify_deviation(bucket.win_rate, baseline.win_rate, rule.threshold)
        if direction is None:
            return None

        relation = "higher" if direction is PatternDirection.STRENGTH else "lower"
        description = (
            f"{subject} win rate {bucket.win_rate:.1%} is {relation} than "
            f"overall {baseline.win_rate:.1%} ({bucket.games} games)"
        )
        return self._pattern(category, direction, bucket.label, description, bucket.games)

    def detect_timing(self, profile: PerformanceProfile) -> List[Pattern]:
        patterns = []
        for label in TIMING_ORDER:
            bucket = profile.timing.get(label)
            if bucket is None:
                continue
            pattern = self._against_baseline(
                PatternCategory.TIMING,
                bucket,
                profile.overall,
                f"{label.capitalize()} game",
            )
            if pattern:
                patterns.append(pattern)
        return patterns

    def detect_combat(self, profile: PerformanceProfile) -> List[Pattern]:
        """Absolute combat checks over every record: deaths, then assists."""
        rule = PATTERN_RULES[PatternCategory.COMBAT]
        if profile.record_count < rule.min_sample:
            return []

        patterns = []
        if profile.avg_deaths > COMBAT_THRESHOLDS["max_avg_deaths"]:
            patterns.append(
                self._pattern(
                    PatternCategory.COMBAT,
                    PatternDirection.WEAKNESS,
                    "deaths",
                    f"High average deaths ({profile.avg_deaths:.1f} per game)",
                    profile.record_count,
                )
            )
        if profile.avg_assists > COMBAT_THRESHOLDS["assist_kill_ratio"] * profile.avg_kills:
            patterns.append(
                self._pattern(
                    PatternCategory.COMBAT,
                    PatternDirection.STRENGTH,
                    "assists",
                    f"Strong team fight participation ({profile.avg_assists:.1f} "
                    f"assists vs {profile.avg_kills:.1f} kills per game)",
                    profile.record_count,
                )
            )
        return patterns

    def detect_roles(self, profile: PerformanceProfile) -> List[Pattern]:
        """Role buckets with enough games, best win rate first."""
        rule = PATTERN_RULES[PatternCategory.ROLE]
        qualifying = [
            bucket
            for bucket in profile.roles.values()
            if bucket.games >= rule.min_sample and bucket.win_rate is not None
        ]
        qualifying.sort(key=lambda b: b.win_rate or 0.0, reverse=True)

        patterns = []
        for bucket in qualifying:
            pattern = self._against_baseline(
                PatternCategory.ROLE, bucket, profile.overall, f"{bucket.label} role"
            )
            if pattern:
                patterns.append(pattern)
        return patterns

    def detect_form(self, profile: PerformanceProfile) -> List[Pattern]:
        pattern = self._against_baseline(
            PatternCategory.FORM, profile.recent, profile.overall, "Recent"
        )
        return [pattern] if pattern else []

    def _compare_sides(
        self, subject: BucketStats, other: BucketStats, description: str
    ) -> Optional[Pattern]:
        rule = PATTERN_RULES[PatternCategory.CONTEXT]
        sample_size = min(subject.games, other.games)
        if sample_size < rule.min_sample:
            return None
        if subject.win_rate is None or other.win_rate is None:
            return None

        direction = classify_deviation(subject.win_rate, other.win_rate, rule.threshold)
        if direction is None:
            return None

        return self._pattern(
            PatternCategory.CONTEXT,
            direction,
            subject.label,
            f"{description}: {subject.win_rate:.1%} vs {other.win_rate:.1%}",
            sample_size,
        )

    def detect_context(self, profile: PerformanceProfile) -> List[Pattern]:
        """Party against solo, then ranked against unranked."""
        patterns = []
        party = self._compare_sides(profile.party, profile.solo, "Party vs solo win rate")
        if party:
            patterns.append(party)
        ranked = self._compare_sides(
            profile.ranked, profile.unranked, "Ranked vs unranked win rate"
        )
        if ranked:
            patterns.append(ranked)
        return patterns

    def detect(self, profile: PerformanceProfile) -> List[Pattern]:
        """Run every category in generation order."""
        patterns = (
            self.detect_timing(profile)
            + self.detect_combat(profile)
            + self.detect_roles(profile)
            + self.detect_form(profile)
            + self.detect_context(profile)
        )
        logger.debug(
            "Patterns detected",
            record_count=profile.record_count,
            pattern_count=len(patterns),
        )
        return patterns

    @staticmethod
    def top_patterns(
        patterns: List[Pattern], limit: int = TOP_PATTERN_LIMIT
    ) -> List[Pattern]:
        """Highest confidence first; equal confidences keep generation order."""
        return top_n(patterns, key=lambda p: p.confidence, limit=limit)

    def report(
        self, profile: PerformanceProfile, account_id: Optional[int] = None
    ) -> PatternReport:
        if profile.record_count == 0:
            return PatternReport(account_id=account_id)

        patterns = self.detect(profile)
        return PatternReport(
            account_id=account_id,
            record_count=profile.record_count,
            baseline_win_rate=profile.overall.win_rate,
            patterns=patterns,
            top_patterns=self.top_patterns(patterns),
            data_available=True,
        )
