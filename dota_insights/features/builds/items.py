"""
Item build analysis over a player's sampled matches on one hero.

Every filled final item slot counts as one appearance of that item. Items
seen in fewer than two slots across the sample are ignored.
"""

import math
from collections import defaultdict
from typing import Callable, Dict, List, Mapping, Sequence, Tuple

import structlog

from ...core.enums import BuildTendency, ItemGroup
from ...core.models import DetailedMatchRecord, ItemRecord
from ...core.opendota.constants import ItemQuality
from ...utils.statistics import top_n
from .schemas import CatalogItem, ItemBuildAnalysis, ItemCatalogGroups, ItemStat

logger = structlog.get_logger(__name__)

ITEM_RULES: Dict[str, float] = {
    "min_games": 2,
    "min_games_for_win_rate": 3,
    "core_share": 0.5,
    "core_win_rate": 0.5,
}

MOST_FREQUENT_LIMIT = 15
HIGHEST_WIN_RATE_LIMIT = 10

FARMING_KEYWORDS: Tuple[str, ...] = (
    "Battle Fury",
    "Radiance",
    "Maelstrom",
    "Mjollnir",
    "Hand of Midas",
    "Battlefury",
)

FIGHTING_KEYWORDS: Tuple[str, ...] = (
    "Black King Bar",
    "Blade Mail",
    "Drum of Endurance",
    "Phase Boots",
    "Magic Wand",
    "Diffusal Blade",
)

EQUIPMENT_QUALITIES = frozenset({ItemQuality.COMPONENT.value, ItemQuality.ARTIFACT.value})


def matches_keywords(name: str, keywords: Sequence[str]) -> bool:
    """Case-insensitive substring match of any keyword in ``name``."""
    lowered = name.lower()
    return any(keyword.lower() in lowered for keyword in keywords)


def build_tendency(farming_games: int, fighting_games: int) -> BuildTendency:
    if farming_games > fighting_games and farming_games > 0:
        return BuildTendency.FARMING
    if fighting_games > farming_games and fighting_games > 0:
        return BuildTendency.FIGHTING
    return BuildTendency.BALANCED


def item_group(item: ItemRecord) -> ItemGroup:
    if item.category == ItemQuality.CONSUMABLE.value:
        return ItemGroup.CONSUMABLE
    if item.category in EQUIPMENT_QUALITIES:
        return ItemGroup.EQUIPMENT
    return ItemGroup.OTHER


def group_catalog(catalog: Mapping[int, ItemRecord]) -> ItemCatalogGroups:
    """Split the item catalog into groups; every group is present."""
    groups: Dict[ItemGroup, List[CatalogItem]] = {group: [] for group in ItemGroup}
    for item_id in sorted(catalog):
        item = catalog[item_id]
        groups[item_group(item)].append(
            CatalogItem(
                item_id=item.id,
                name=item.name,
                display_name=item.display_name,
                category=item.category,
            )
        )
    return ItemCatalogGroups(groups=groups, total_items=len(catalog))


class ItemBuildAnalyzer:
    """Frequency and win-rate rankings of final items."""

    def count_items(
        self, records: Sequence[DetailedMatchRecord]
    ) -> Dict[int, Tuple[int, int]]:
        """Appearances and wins per item id, ordered by item id."""
        games: Dict[int, int] = defaultdict(int)
        wins: Dict[int, int] = defaultdict(int)
        for record in records:
            won = record.won
            for item_id in record.items:
                if item_id <= 0:
                    continue
                games[item_id] += 1
                if won:
                    wins[item_id] += 1
        return {item_id: (games[item_id], wins[item_id]) for item_id in sorted(games)}

    def analyze(
        self,
        account_id: int,
        hero_id: int,
        records: Sequence[DetailedMatchRecord],
        item_name: Callable[[int], str] = lambda item_id: f"Item ID {item_id}",
        hero_name: str = "",
    ) -> ItemBuildAnalysis:
        """
        Rank the items a player finished matches with.

        :param account_id: Player account id
        :param hero_id: Hero the sample was taken on
        :param records: The player's detailed records, at most one per match
        :param item_name: Item id to display name lookup
        :param hero_name: Display name of the hero
        :returns: ItemBuildAnalysis, empty when the sample is empty
        """
        sampled = len(records)
        if sampled == 0:
            return ItemBuildAnalysis(
                account_id=account_id, hero_id=hero_id, hero_name=hero_name
            )

        stats = [
            ItemStat(
                item_id=item_id,
                item_name=item_name(item_id),
                games=games,
                wins=wins,
                win_rate=wins / games,
                share=games / sampled,
            )
            for item_id, (games, wins) in self.count_items(records).items()
            if games >= ITEM_RULES["min_games"]
        ]

        # Base order is ascending item id, so ties stay in id order
        by_frequency = sorted(stats, key=lambda s: s.games, reverse=True)
        highest_win_rate = top_n(
            (s for s in by_frequency if s.games >= ITEM_RULES["min_games_for_win_rate"]),
            key=lambda s: s.win_rate,
            limit=HIGHEST_WIN_RATE_LIMIT,
        )

        core_min_games = math.ceil(sampled * ITEM_RULES["core_share"])
        core_items = [
            s
            for s in by_frequency
            if s.games >= core_min_games and s.win_rate >= ITEM_RULES["core_win_rate"]
        ]

        farming = [s for s in by_frequency if matches_keywords(s.item_name, FARMING_KEYWORDS)]
        fighting = [s for s in by_frequency if matches_keywords(s.item_name, FIGHTING_KEYWORDS)]
        farming_games = sum(s.games for s in farming)
        fighting_games = sum(s.games for s in fighting)

        logger.debug(
            "Item builds analyzed",
            account_id=account_id,
            hero_id=hero_id,
            matches_sampled=sampled,
            qualifying_items=len(stats),
        )

        return ItemBuildAnalysis(
            account_id=account_id,
            hero_id=hero_id,
            hero_name=hero_name,
            matches_sampled=sampled,
            most_frequent=by_frequency[:MOST_FREQUENT_LIMIT],
            highest_win_rate=highest_win_rate,
            core_items=core_items,
            farming_items=farming,
            fighting_items=fighting,
            farming_games=farming_games,
            fighting_games=fighting_games,
            tendency=build_tendency(farming_games, fighting_games),
            data_available=True,
        )
