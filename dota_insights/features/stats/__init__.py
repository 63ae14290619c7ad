"""Match statistics aggregation feature."""

from .aggregator import (
    Bucket,
    StatsAggregator,
    duration_bucket,
    lobby_bucket,
    party_bucket,
    role_discriminator,
)
from .schemas import BucketStats, MatchSummary, PerformanceProfile

__all__ = [
    "Bucket",
    "StatsAggregator",
    "duration_bucket",
    "lobby_bucket",
    "party_bucket",
    "role_discriminator",
    "BucketStats",
    "MatchSummary",
    "PerformanceProfile",
]
