"""
Bucketed win-rate aggregation over match records.

A discriminator maps each record to zero or more bucket keys; the aggregator
counts games and wins per key. Buckets with no games report no win rate.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Mapping, Sequence, Tuple

import structlog

from ...core.models import HeroRecord, MatchRecord
from ...core.opendota.constants import LobbyType
from ...utils.statistics import safe_mean, win_rate
from .schemas import BucketStats, MatchSummary, PerformanceProfile

logger = structlog.get_logger(__name__)

# Duration boundaries in seconds
DURATION_SHORT_MAX = 1800
DURATION_MEDIUM_MAX = 2400

DURATION_LABELS: Tuple[str, ...] = ("short", "medium", "long")
LOBBY_LABELS: Tuple[str, ...] = ("ranked", "unranked")
PARTY_LABELS: Tuple[str, ...] = ("solo", "party")

RECENT_MATCH_COUNT = 10

Discriminator = Callable[[MatchRecord], Iterable[str]]


@dataclass(frozen=True)
class Bucket:
    """A labelled membership predicate over match records."""

    label: str
    predicate: Callable[[MatchRecord], bool]

    def contains(self, record: MatchRecord) -> bool:
        return self.predicate(record)


def duration_bucket(record: MatchRecord) -> Tuple[str, ...]:
    if record.duration < DURATION_SHORT_MAX:
        return ("short",)
    if record.duration < DURATION_MEDIUM_MAX:
        return ("medium",)
    return ("long",)


def lobby_bucket(record: MatchRecord) -> Tuple[str, ...]:
    return ("ranked",) if record.lobby_type == LobbyType.RANKED else ("unranked",)


def party_bucket(record: MatchRecord) -> Tuple[str, ...]:
    # Unknown party size counts toward neither side
    if not record.party_size:
        return ()
    return ("party",) if record.party_size > 1 else ("solo",)


def role_discriminator(hero_lookup: Mapping[int, HeroRecord]) -> Discriminator:
    """Build a discriminator that files a record under each of its hero's roles."""

    def discriminate(record: MatchRecord) -> Tuple[str, ...]:
        hero = hero_lookup.get(record.hero_id)
        return hero.roles if hero else ()

    return discriminate


def _stats(label: str, games: int, wins: int) -> BucketStats:
    return BucketStats(label=label, games=games, wins=wins, win_rate=win_rate(wins, games))


class StatsAggregator:
    """Groups match records into buckets and computes per-bucket win rates."""

    def aggregate(
        self,
        records: Sequence[MatchRecord],
        discriminator: Discriminator,
        labels: Iterable[str] = (),
    ) -> Dict[str, BucketStats]:
        """
        Group records by the keys the discriminator yields.

        :param records: Match records in provider order
        :param discriminator: Maps a record to the bucket keys it belongs to
        :param labels: Buckets to report even when no record falls into them
        :returns: Bucket key to stats, pre-declared labels first, then keys in
            order of first appearance
        """
        games: Dict[str, int] = defaultdict(int)
        wins: Dict[str, int] = defaultdict(int)
        order: List[str] = list(dict.fromkeys(labels))

        for record in records:
            for key in discriminator(record):
                if key not in games and key not in order:
                    order.append(key)
                games[key] += 1
                if record.won:
                    wins[key] += 1

        return {key: _stats(key, games[key], wins[key]) for key in order}

    def aggregate_buckets(
        self, records: Sequence[MatchRecord], buckets: Sequence[Bucket]
    ) -> Dict[str, BucketStats]:
        """Group records by explicit buckets; every bucket is reported."""
        return self.aggregate(
            records,
            lambda record: [b.label for b in buckets if b.contains(record)],
            labels=[b.label for b in buckets],
        )

    def overall(self, records: Sequence[MatchRecord]) -> BucketStats:
        wins = sum(1 for record in records if record.won)
        return _stats("overall", len(records), wins)

    def recent(
        self, records: Sequence[MatchRecord], n: int = RECENT_MATCH_COUNT
    ) -> BucketStats:
        """Stats over the first ``n`` records, which are the newest."""
        head = records[:n]
        wins = sum(1 for record in head if record.won)
        return _stats("recent", len(head), wins)

    def build_profile(
        self,
        records: Sequence[MatchRecord],
        hero_lookup: Mapping[int, HeroRecord],
    ) -> PerformanceProfile:
        """Aggregate every bucket family the pattern detector looks at."""
        lobby = self.aggregate(records, lobby_bucket, LOBBY_LABELS)
        party = self.aggregate(records, party_bucket, PARTY_LABELS)

        profile = PerformanceProfile(
            overall=self.overall(records),
            timing=self.aggregate(records, duration_bucket, DURATION_LABELS),
            roles=self.aggregate(records, role_discriminator(hero_lookup)),
            recent=self.recent(records),
            party=party["party"],
            solo=party["solo"],
            ranked=lobby["ranked"],
            unranked=lobby["unranked"],
            avg_kills=safe_mean([r.kills for r in records]),
            avg_deaths=safe_mean([r.deaths for r in records]),
            avg_assists=safe_mean([r.assists for r in records]),
            record_count=len(records),
        )

        logger.debug(
            "Performance profile built",
            record_count=profile.record_count,
            role_buckets=len(profile.roles),
            overall_win_rate=profile.overall.win_rate,
        )
        return profile

    def summarize(self, records: Sequence[MatchRecord]) -> MatchSummary:
        """Summarize wins, losses and average K/D/A."""
        if not records:
            return MatchSummary()

        overall = self.overall(records)
        return MatchSummary(
            games=overall.games,
            wins=overall.wins,
            losses=overall.games - overall.wins,
            win_rate=overall.win_rate,
            avg_kills=safe_mean([r.kills for r in records]),
            avg_deaths=safe_mean([r.deaths for r in records]),
            avg_assists=safe_mean([r.assists for r in records]),
            data_available=True,
        )
