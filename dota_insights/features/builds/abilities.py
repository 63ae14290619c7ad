"""Skill order analysis over a player's sampled matches on one hero."""

from collections import Counter
from typing import Dict, Sequence

import structlog

from ...core.models import DetailedMatchRecord
from .schemas import AbilityBuildAnalysis, AbilityLevelChoice

logger = structlog.get_logger(__name__)

MAX_HERO_LEVEL = 25


class AbilityBuildAnalyzer:
    """Most common ability skilled at each hero level."""

    def analyze(
        self,
        account_id: int,
        hero_id: int,
        records: Sequence[DetailedMatchRecord],
        hero_name: str = "",
    ) -> AbilityBuildAnalysis:
        """Only records carrying a skill order count towards the sample."""
        records = [r for r in records if r.ability_upgrades]
        sampled = len(records)
        per_level: Dict[int, Counter] = {level: Counter() for level in range(1, MAX_HERO_LEVEL + 1)}

        for record in records:
            for upgrade in record.ability_upgrades:
                if 1 <= upgrade.level <= MAX_HERO_LEVEL:
                    per_level[upgrade.level][upgrade.ability] += 1

        levels = []
        for level, counts in per_level.items():
            if not counts:
                continue
            # Highest count wins, lowest ability id on ties
            ability_id, count = min(counts.items(), key=lambda kv: (-kv[1], kv[0]))
            levels.append(
                AbilityLevelChoice(
                    level=level,
                    ability_id=ability_id,
                    count=count,
                    share=min(1.0, count / sampled),
                )
            )

        logger.debug(
            "Ability builds analyzed",
            account_id=account_id,
            hero_id=hero_id,
            matches_sampled=sampled,
            levels=len(levels),
        )

        return AbilityBuildAnalysis(
            account_id=account_id,
            hero_id=hero_id,
            hero_name=hero_name,
            matches_sampled=sampled,
            levels=levels,
            data_available=bool(levels),
        )
