"""Schemas for matchup, item, ability and hero pool rankings."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from ...core.enums import BuildTendency, ItemGroup


class MatchupEntry(BaseModel):
    """Results of the analyzed hero against one opponent."""

    hero_id: int = Field(..., description="Opponent hero id")
    hero_name: str
    games_played: int = Field(..., ge=0)
    wins: int = Field(..., ge=0)
    win_rate: float = Field(..., ge=0.0, le=1.0)


class MatchupRankings(BaseModel):
    """Best and worst matchups of a hero among opponents with enough games."""

    hero_id: int
    hero_name: str
    qualifying_matchups: int = 0
    best: List[MatchupEntry] = Field(default_factory=list)
    worst: List[MatchupEntry] = Field(default_factory=list)
    data_available: bool = False


class ItemStat(BaseModel):
    """Appearances and wins of one item across sampled matches."""

    item_id: int
    item_name: str
    games: int = Field(..., ge=0)
    wins: int = Field(..., ge=0)
    win_rate: float = Field(..., ge=0.0, le=1.0)
    share: float = Field(
        ..., ge=0.0, description="Appearances divided by sampled matches"
    )


class ItemBuildAnalysis(BaseModel):
    """Item frequency, win rate and playstyle for one hero/player pair."""

    account_id: int
    hero_id: int
    hero_name: str = ""
    matches_sampled: int = 0
    most_frequent: List[ItemStat] = Field(default_factory=list)
    highest_win_rate: List[ItemStat] = Field(default_factory=list)
    core_items: List[ItemStat] = Field(default_factory=list)
    farming_items: List[ItemStat] = Field(default_factory=list)
    fighting_items: List[ItemStat] = Field(default_factory=list)
    farming_games: int = 0
    fighting_games: int = 0
    tendency: BuildTendency = BuildTendency.BALANCED
    data_available: bool = False


class AbilityLevelChoice(BaseModel):
    """Most common ability skilled at one hero level."""

    level: int = Field(..., ge=1)
    ability_id: int
    count: int = Field(..., ge=1)
    share: float = Field(..., ge=0.0, le=1.0)


class AbilityBuildAnalysis(BaseModel):
    """Per-level skill order across sampled matches."""

    account_id: int
    hero_id: int
    hero_name: str = ""
    matches_sampled: int = 0
    levels: List[AbilityLevelChoice] = Field(default_factory=list)
    data_available: bool = False


class PlayerHeroEntry(BaseModel):
    hero_id: int
    hero_name: str
    games: int = Field(..., ge=0)
    wins: int = Field(..., ge=0)
    win_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0)


class PlayerHeroRankings(BaseModel):
    """A player's most played and most effective heroes."""

    account_id: int
    most_played: List[PlayerHeroEntry] = Field(default_factory=list)
    most_effective: List[PlayerHeroEntry] = Field(default_factory=list)
    data_available: bool = False


class CatalogItem(BaseModel):
    item_id: int
    name: str
    display_name: str
    category: str = ""


class ItemCatalogGroups(BaseModel):
    """Item catalog split into coarse groups, each ordered by item id."""

    groups: Dict[ItemGroup, List[CatalogItem]] = Field(default_factory=dict)
    total_items: int = 0
