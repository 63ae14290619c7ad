"""
Heuristic hero suggestion scoring for an in-progress draft.

Every available hero gets an additive score from fixed rules over its meta
stats, the ally team's role coverage, the enemy team and the player's own
hero pool. Candidates are ranked by score with ties kept in hero list order.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import structlog

from ...core.enums import Bracket, HeroRole
from ...core.models import HeroMetaStat, HeroRecord, PlayerHeroStat
from ...utils.statistics import top_n
from .schemas import DraftSuggestionResult, ScoredHero

logger = structlog.get_logger(__name__)

# Scoring rules. Meta rates are percentages, player win rate is a fraction.
SCORING_RULES: Dict[str, float] = {
    "meta_win_rate": 52.0,
    "pick_rate": 15.0,
    "player_win_rate": 0.55,
    "experienced_games": 10,
    "familiar_min_games": 3,
}

SCORE_POINTS: Dict[str, int] = {
    "meta_strength": 20,
    "fills_role": 25,
    "counter_potential": 10,
    "familiar_high_win_rate": 30,
    "familiar_experience": 15,
    "popular_pick": 10,
}

REASONS: Dict[str, str] = {
    "meta_strength": "meta strength",
    "fills_role": "fills needed role",
    "counter_potential": "counter potential",
    "familiar_high_win_rate": "familiarity, high win-rate",
    "familiar_experience": "familiarity, experience",
    "popular_pick": "popular pick",
}

SUGGESTION_LIMIT = 10


def team_roles(hero_ids: Iterable[int], hero_lookup: Mapping[int, HeroRecord]) -> List[str]:
    """Distinct roles present on a team, in order of first appearance."""
    roles: Dict[str, None] = {}
    for hero_id in hero_ids:
        hero = hero_lookup.get(hero_id)
        if hero:
            roles.update(dict.fromkeys(hero.roles))
    return list(roles)


def missing_roles(ally_roles: Iterable[str]) -> List[str]:
    present = set(ally_roles)
    return [role.value for role in HeroRole if role.value not in present]


def familiar_heroes(
    player_heroes: Optional[Sequence[PlayerHeroStat]],
) -> Dict[int, PlayerHeroStat]:
    """Player hero stats with enough games to count as familiar, by hero id."""
    if not player_heroes:
        return {}
    min_games = SCORING_RULES["familiar_min_games"]
    return {stat.hero_id: stat for stat in player_heroes if stat.games >= min_games}


class HeroSuggestionScorer:
    """Scores and ranks candidate heroes for the next pick."""

    def __init__(self, bracket: Bracket = Bracket.DIVINE):
        self.bracket = bracket

    @staticmethod
    def candidates(
        heroes: Iterable[HeroRecord], ally_heroes: Iterable[int], enemy_heroes: Iterable[int]
    ) -> List[HeroRecord]:
        picked = set(ally_heroes) | set(enemy_heroes)
        return [hero for hero in heroes if hero.id not in picked]

    def score_hero(
        self,
        hero: HeroRecord,
        meta_stat: Optional[HeroMetaStat],
        needed_roles: Sequence[str],
        enemy_team_present: bool,
        player_stat: Optional[PlayerHeroStat] = None,
    ) -> ScoredHero:
        """
        Compute one hero's additive score.

        :param hero: Candidate hero
        :param meta_stat: Hero meta stats, None when the provider has none
        :param needed_roles: Roles the ally team is still missing
        :param enemy_team_present: Whether the enemy has picked anything
        :param player_stat: Player's record on the hero, already filtered to
            familiar heroes
        :returns: ScoredHero; a hero without meta stats scores 0 with no reasons
        """
        scored = ScoredHero(hero_id=hero.id, hero_name=hero.localized_name, roles=list(hero.roles))
        if meta_stat is None:
            return scored

        score = 0
        reasons: List[str] = []

        def award(rule: str) -> None:
            nonlocal score
            score += SCORE_POINTS[rule]
            reasons.append(REASONS[rule])

        if (meta_stat.win_rate(self.bracket) or 0.0) > SCORING_RULES["meta_win_rate"]:
            award("meta_strength")

        if any(role in needed_roles for role in hero.roles):
            award("fills_role")

        # Not matchup-aware; any enemy pick earns it
        if enemy_team_present:
            award("counter_potential")

        if player_stat is not None:
            player_rate = player_stat.win_rate
            if player_rate is not None and player_rate > SCORING_RULES["player_win_rate"]:
                award("familiar_high_win_rate")
            elif player_stat.games >= SCORING_RULES["experienced_games"]:
                award("familiar_experience")

        if (meta_stat.pick_rate(self.bracket) or 0.0) > SCORING_RULES["pick_rate"]:
            award("popular_pick")

        scored.score = score
        scored.reasons = reasons
        return scored

    def suggest(
        self,
        heroes: Sequence[HeroRecord],
        meta_stats: Mapping[int, HeroMetaStat],
        ally_heroes: Sequence[int],
        enemy_heroes: Sequence[int],
        player_heroes: Optional[Sequence[PlayerHeroStat]] = None,
        limit: int = SUGGESTION_LIMIT,
    ) -> DraftSuggestionResult:
        """Rank every unpicked hero for the ally team's next pick."""
        hero_lookup = {hero.id: hero for hero in heroes}
        ally_roles = team_roles(ally_heroes, hero_lookup)
        needed = missing_roles(ally_roles)
        familiar = familiar_heroes(player_heroes)
        enemy_present = len(enemy_heroes) > 0

        scored = [
            self.score_hero(
                hero,
                meta_stats.get(hero.id),
                needed,
                enemy_present,
                familiar.get(hero.id),
            )
            for hero in self.candidates(heroes, ally_heroes, enemy_heroes)
        ]
        ranked = top_n(scored, key=lambda s: s.score, limit=limit)

        logger.debug(
            "Draft suggestions scored",
            candidates=len(scored),
            ally_roles=ally_roles,
            used_player_history=bool(familiar),
        )

        return DraftSuggestionResult(
            ally_heroes=list(ally_heroes),
            enemy_heroes=list(enemy_heroes),
            ally_roles=ally_roles,
            missing_roles=needed,
            suggestions=ranked,
            player_history_requested=player_heroes is not None,
            used_player_history=bool(familiar),
        )
