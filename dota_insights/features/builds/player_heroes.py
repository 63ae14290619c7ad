"""A player's hero pool rankings."""

from typing import Callable, List, Sequence

from ...core.models import PlayerHeroStat
from ...utils.statistics import top_n
from .schemas import PlayerHeroEntry, PlayerHeroRankings

MIN_EFFECTIVE_GAMES = 5
HERO_LIST_LIMIT = 10


class PlayerHeroAnalyzer:
    """Most played and most effective heroes from per-hero totals."""

    def analyze(
        self,
        account_id: int,
        stats: Sequence[PlayerHeroStat],
        hero_name: Callable[[int], str] = lambda hero_id: f"Hero ID {hero_id}",
    ) -> PlayerHeroRankings:
        entries: List[PlayerHeroEntry] = [
            PlayerHeroEntry(
                hero_id=stat.hero_id,
                hero_name=hero_name(stat.hero_id),
                games=stat.games,
                wins=stat.wins,
                win_rate=stat.win_rate,
            )
            for stat in stats
            if stat.games > 0
        ]

        most_played = top_n(entries, key=lambda e: e.games, limit=HERO_LIST_LIMIT)
        most_effective = top_n(
            (e for e in entries if e.games >= MIN_EFFECTIVE_GAMES),
            key=lambda e: e.win_rate or 0.0,
            limit=HERO_LIST_LIMIT,
        )

        return PlayerHeroRankings(
            account_id=account_id,
            most_played=most_played,
            most_effective=most_effective,
            data_available=bool(entries),
        )
