"""Hero-versus-hero matchup rankings."""

from typing import Callable, List, Sequence

import structlog

from ...core.models import HeroMatchupRecord
from ...utils.statistics import top_n
from .schemas import MatchupEntry, MatchupRankings

logger = structlog.get_logger(__name__)

MIN_MATCHUP_GAMES = 50
MATCHUP_LIST_LIMIT = 10

NameLookup = Callable[[int], str]


def _hero_label(hero_id: int) -> str:
    return f"Hero ID {hero_id}"


class MatchupAnalyzer:
    """Ranks a hero's opponents by the hero's win rate against them."""

    def __init__(
        self,
        min_games: int = MIN_MATCHUP_GAMES,
        limit: int = MATCHUP_LIST_LIMIT,
    ):
        self.min_games = min_games
        self.limit = limit

    def analyze(
        self,
        hero_id: int,
        matchups: Sequence[HeroMatchupRecord],
        hero_name: NameLookup = _hero_label,
    ) -> MatchupRankings:
        """
        Build best and worst matchup lists.

        Opponents with fewer than ``min_games`` games are dropped before
        ranking, which also keeps zero-game entries out. Ties keep the
        provider's order.
        """
        entries: List[MatchupEntry] = [
            MatchupEntry(
                hero_id=m.hero_id,
                hero_name=hero_name(m.hero_id),
                games_played=m.games_played,
                wins=m.wins,
                win_rate=m.wins / m.games_played,
            )
            for m in matchups
            if m.games_played >= self.min_games and m.games_played > 0
        ]

        best = top_n(entries, key=lambda e: e.win_rate, limit=self.limit)
        worst = top_n(entries, key=lambda e: e.win_rate, limit=self.limit, descending=False)

        logger.debug(
            "Matchups ranked",
            hero_id=hero_id,
            total=len(matchups),
            qualifying=len(entries),
        )

        return MatchupRankings(
            hero_id=hero_id,
            hero_name=hero_name(hero_id),
            qualifying_matchups=len(entries),
            best=best,
            worst=worst,
            data_available=bool(matchups),
        )
