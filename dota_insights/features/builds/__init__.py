"""Matchup, item build, skill order and hero pool analysis feature."""

from .abilities import AbilityBuildAnalyzer
from .items import ItemBuildAnalyzer, group_catalog
from .matchups import MatchupAnalyzer
from .player_heroes import PlayerHeroAnalyzer
from .schemas import (
    AbilityBuildAnalysis,
    ItemBuildAnalysis,
    ItemCatalogGroups,
    MatchupRankings,
    PlayerHeroRankings,
)

__all__ = [
    "AbilityBuildAnalyzer",
    "ItemBuildAnalyzer",
    "MatchupAnalyzer",
    "PlayerHeroAnalyzer",
    "group_catalog",
    "AbilityBuildAnalysis",
    "ItemBuildAnalysis",
    "ItemCatalogGroups",
    "MatchupRankings",
    "PlayerHeroRankings",
]
