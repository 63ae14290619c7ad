"""Pydantic models for OpenDota API response data."""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..enums import Bracket


class HeroDTO(BaseModel):
    """Hero entry from ``/heroes``."""

    id: int
    name: str = ""
    localized_name: str
    primary_attr: str = ""
    attack_type: str = ""
    roles: List[str] = Field(default_factory=list)


class HeroStatsDTO(BaseModel):
    """Hero entry from ``/heroStats`` with per-bracket pick and win counts."""

    id: int
    localized_name: str = ""
    roles: List[str] = Field(default_factory=list)

    herald_pick: int = Field(0, alias="1_pick")
    herald_win: int = Field(0, alias="1_win")
    guardian_pick: int = Field(0, alias="2_pick")
    guardian_win: int = Field(0, alias="2_win")
    crusader_pick: int = Field(0, alias="3_pick")
    crusader_win: int = Field(0, alias="3_win")
    archon_pick: int = Field(0, alias="4_pick")
    archon_win: int = Field(0, alias="4_win")
    legend_pick: int = Field(0, alias="5_pick")
    legend_win: int = Field(0, alias="5_win")
    ancient_pick: int = Field(0, alias="6_pick")
    ancient_win: int = Field(0, alias="6_win")
    divine_pick: int = Field(0, alias="7_pick")
    divine_win: int = Field(0, alias="7_win")
    immortal_pick: int = Field(0, alias="8_pick")
    immortal_win: int = Field(0, alias="8_win")
    pro_pick: int = 0
    pro_win: int = 0
    pro_ban: int = 0

    model_config = ConfigDict(populate_by_name=True)

    def bracket_counts(self) -> Dict[Bracket, Tuple[int, int]]:
        """Return ``(picks, wins)`` per bracket."""
        return {
            Bracket.HERALD: (self.herald_pick, self.herald_win),
            Bracket.GUARDIAN: (self.guardian_pick, self.guardian_win),
            Bracket.CRUSADER: (self.crusader_pick, self.crusader_win),
            Bracket.ARCHON: (self.archon_pick, self.archon_win),
            Bracket.LEGEND: (self.legend_pick, self.legend_win),
            Bracket.ANCIENT: (self.ancient_pick, self.ancient_win),
            Bracket.DIVINE: (self.divine_pick, self.divine_win),
            Bracket.IMMORTAL: (self.immortal_pick, self.immortal_win),
            Bracket.PRO: (self.pro_pick, self.pro_win),
        }


class PlayerMatchDTO(BaseModel):
    """Match entry from ``/players/{account_id}/matches``."""

    match_id: int
    player_slot: int
    radiant_win: Optional[bool] = None
    duration: int = 0
    game_mode: Optional[int] = None
    lobby_type: int = 0
    hero_id: int
    start_time: int = 0
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    party_size: Optional[int] = None
    item_0: Optional[int] = None
    item_1: Optional[int] = None
    item_2: Optional[int] = None
    item_3: Optional[int] = None
    item_4: Optional[int] = None
    item_5: Optional[int] = None

    def item_slots(self) -> List[Optional[int]]:
        return [
            self.item_0,
            self.item_1,
            self.item_2,
            self.item_3,
            self.item_4,
            self.item_5,
        ]


class AbilityUpgradeDTO(BaseModel):
    ability: int
    time: int = 0
    level: int


class MatchPlayerDTO(BaseModel):
    """Participant entry inside ``/matches/{match_id}``."""

    account_id: Optional[int] = None
    player_slot: int
    hero_id: int
    item_0: Optional[int] = None
    item_1: Optional[int] = None
    item_2: Optional[int] = None
    item_3: Optional[int] = None
    item_4: Optional[int] = None
    item_5: Optional[int] = None
    ability_upgrades: Optional[List[AbilityUpgradeDTO]] = None
    ability_upgrades_arr: Optional[List[int]] = None
    kills: int = 0
    deaths: int = 0
    assists: int = 0

    def item_slots(self) -> List[Optional[int]]:
        return [
            self.item_0,
            self.item_1,
            self.item_2,
            self.item_3,
            self.item_4,
            self.item_5,
        ]


class MatchDetailDTO(BaseModel):
    """Complete match data from ``/matches/{match_id}``."""

    match_id: int
    radiant_win: bool
    duration: int = 0
    start_time: int = 0
    lobby_type: int = 0
    players: List[MatchPlayerDTO] = Field(default_factory=list)


class HeroMatchupDTO(BaseModel):
    """Matchup entry from ``/heroes/{hero_id}/matchups``."""

    hero_id: int
    games_played: int
    wins: int


class ItemDTO(BaseModel):
    """Item entry from ``/constants/items`` (keyed by internal name)."""

    id: int
    dname: Optional[str] = None
    qual: Optional[str] = None
    cost: Optional[int] = None


class PlayerHeroDTO(BaseModel):
    """Hero entry from ``/players/{account_id}/heroes``."""

    hero_id: int
    last_played: Optional[int] = None
    games: int = 0
    win: int = 0
